"""Frontier: the explicit stack of pending sibling lists.

A recursive depth-first walk keeps its state on the call stack. The Frontier
keeps the same state as data instead: one Level per depth along the path from
the root to the current position. This lets the iterator stop after any entry
and resume later without re-listing anything.

The cursor is always "the last entry of the topmost level". It is recomputed
on every access rather than held as a reference, so pushing a deeper level
never invalidates it.
"""

from typing import Iterable, List, Optional

from .entry import Entry


class Level:
    """Pending siblings for one depth of the open path.

    Entries are consumed from the end of the list. ``expanded`` is True while
    the last entry is a Branch whose children sit in the level above; it is
    cleared as soon as that Branch is popped.
    """

    __slots__ = ('entries', 'expanded')

    def __init__(self, entries: Iterable[Entry]):
        self.entries: List[Entry] = list(entries)
        self.expanded = False

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"Level(entries={self.entries!r}, expanded={self.expanded})"


class Frontier:
    """Stack of Levels owned by a single traversal."""

    def __init__(self):
        self._levels: List[Level] = []

    def push(self, entries: Iterable[Entry]) -> None:
        """Open a new deepest level holding a copy of ``entries``."""
        self._levels.append(Level(entries))

    def prune(self) -> bool:
        """Drop drained levels from the top.

        Returns:
            True if an entry is available at the cursor, False once the
            frontier is empty
        """
        levels = self._levels
        while levels and not levels[-1].entries:
            levels.pop()
        return bool(levels)

    def cursor(self) -> Optional[Entry]:
        """Return the active cursor without removing it.

        Callers prune first; a drained top level reports no cursor.
        """
        if not self._levels or not self._levels[-1].entries:
            return None
        return self._levels[-1].entries[-1]

    def cursor_expanded(self) -> bool:
        """Check if the cursor is a parked Branch whose subtree was pushed."""
        return bool(self._levels) and self._levels[-1].expanded

    def park(self) -> None:
        """Mark the cursor as expanded. Call right before pushing its children."""
        self._levels[-1].expanded = True

    def pop_cursor(self) -> Entry:
        """Remove and return the cursor."""
        level = self._levels[-1]
        level.expanded = False
        return level.entries.pop()

    @property
    def depth(self) -> int:
        """Number of open levels (the root's children are depth 1)."""
        return len(self._levels)

    def pending(self) -> int:
        """Count entries still held across all levels, parked Branches included."""
        return sum(len(level) for level in self._levels)

    def __len__(self) -> int:
        return len(self._levels)

    def __bool__(self) -> bool:
        return any(level.entries for level in self._levels)

    def __repr__(self) -> str:
        return f"Frontier(depth={self.depth}, pending={self.pending()})"
