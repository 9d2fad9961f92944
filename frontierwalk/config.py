"""Configuration system for frontierwalk.

This module defines how callers describe what they want out of a walk: where
it starts, which entries they care about and when to stop pulling. None of
these options change how the iterator expands the tree; they only shape what
reaches the caller.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Hashable, List, Optional, Set


class EntryType(Enum):
    """Entry variants a walk can be restricted to."""
    LEAF = "leaf"
    BRANCH = "branch"


@dataclass
class FilterConfig:
    """Configuration for filtering yielded entries.

    Filters are applied after an entry has been produced by the iterator.
    They never prune expansion, so a Branch rejected here still has its
    subtree walked.
    """

    include_filter: Optional[Callable[[Any], bool]] = None  # Include predicate
    exclude_filter: Optional[Callable[[Any], bool]] = None  # Exclude predicate

    def should_include(self, entry) -> bool:
        """Check if an entry should be passed on to the caller.

        Args:
            entry: Entry to check

        Returns:
            True if entry passes all filters
        """
        # Exclusion takes precedence
        if self.exclude_filter and self.exclude_filter(entry):
            return False

        if self.include_filter:
            return self.include_filter(entry)

        return True


@dataclass
class WalkConfig:
    """Complete configuration for a walk.

    The WalkPlan validates this before any listing call is made.
    """

    # Where to start (None = the service's own root)
    root_id: Optional[Hashable] = None

    # Which variants to yield (None = both)
    entry_types: Optional[Set[EntryType]] = None

    # Entry filtering
    filter: FilterConfig = field(default_factory=FilterConfig)

    # Stop pulling after this many entries have been yielded
    max_entries: Optional[int] = None

    # Progress reporting
    progress_callback: Optional[Callable[[int], None]] = None
    progress_interval: int = 100  # Report every N entries

    @classmethod
    def leaves_only(cls, **kwargs) -> 'WalkConfig':
        """Create config that yields only Leaf entries."""
        return cls(entry_types={EntryType.LEAF}, **kwargs)

    @classmethod
    def branches_only(cls, **kwargs) -> 'WalkConfig':
        """Create config that yields only Branch entries."""
        return cls(entry_types={EntryType.BRANCH}, **kwargs)

    def wants(self, entry) -> bool:
        """Check an entry against the type restriction and filters."""
        if self.entry_types is not None:
            kind = EntryType.LEAF if entry.is_leaf() else EntryType.BRANCH
            if kind not in self.entry_types:
                return False
        return self.filter.should_include(entry)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.max_entries is not None and self.max_entries < 0:
            errors.append("max_entries cannot be negative")

        if self.entry_types is not None:
            if not self.entry_types:
                errors.append("entry_types cannot be empty")
            for entry_type in self.entry_types:
                if not isinstance(entry_type, EntryType):
                    errors.append(f"Unknown entry type: {entry_type!r}")

        if self.progress_interval <= 0:
            errors.append("progress_interval must be positive")

        return errors
