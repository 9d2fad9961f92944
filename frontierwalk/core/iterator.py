"""Depth-first frontier iterator for frontierwalk.

Walks a tree whose shape is only known through a ListingService, producing
entries in post-order: every Branch comes after its whole subtree. Each pull
does just enough listing to find the next entry, so a caller that stops early
never pays for the subtrees it did not reach.

Within one level, entries are consumed from the end of the listing. Siblings
therefore come out in reverse of the order the service listed them; callers
that want listed order must reverse the results themselves.
"""

import logging
from typing import Hashable, Iterator, Optional

from .entry import Entry
from .frontier import Frontier
from .listing import ListingService
from ..exceptions import MissingNodeError, MissingRootError

logger = logging.getLogger(__name__)


class DepthFirstFrontierIterator(Iterator[Entry]):
    """Lazy post-order traversal driven by a ListingService.

    The root's listing is fetched once at construction. After that every
    Branch is listed at most once: when it first becomes the cursor. If it
    has children, it stays parked at its position while they are drained,
    and is yielded as-is the next time the cursor lands on it.

    The iterator is single-use and not thread-safe. Build a new instance to
    traverse again.

    Example:
        >>> service = MappingListingService({0: [Leaf(1), Branch(2)], 2: []})
        >>> [entry.id for entry in DepthFirstFrontierIterator(service)]
        [2, 1]
    """

    def __init__(self, service: ListingService, root_id: Optional[Hashable] = None):
        """Fetch the root listing and seed the frontier.

        Args:
            service: ListingService describing the tree
            root_id: Node to start from (defaults to ``service.root_id()``)

        Raises:
            MissingRootError: If the service has no record of the root
        """
        self.service = service
        self.root_id = service.root_id() if root_id is None else root_id

        children = service.list(self.root_id)
        if children is None:
            logger.error("Listing service has no record of root %r", self.root_id)
            raise MissingRootError(self.root_id)

        self._frontier = Frontier()
        self._frontier.push(children)

        self.expansions = 0
        self.yielded = 0
        self.last_depth = 0
        self.exhausted = False

    def __iter__(self) -> "DepthFirstFrontierIterator":
        return self

    def __next__(self) -> Entry:
        frontier = self._frontier
        if not frontier.prune():
            if not self.exhausted:
                logger.debug(
                    "Traversal of %r finished: %d entries, %d expansions",
                    self.root_id, self.yielded, self.expansions,
                )
                self.exhausted = True
            raise StopIteration

        while True:
            entry = frontier.cursor()

            # Leaves and parked Branches are yielded without touching the service
            if entry.is_leaf() or frontier.cursor_expanded():
                return self._emit()

            children = self.service.list(entry.id)
            self.expansions += 1
            if children is None:
                logger.error(
                    "Listing service has no record of branch %r at depth %d",
                    entry.id, frontier.depth,
                )
                raise MissingNodeError(entry.id)

            children = list(children)
            if not children:
                return self._emit()

            logger.debug(
                "Expanding %r at depth %d: %d children",
                entry.id, frontier.depth, len(children),
            )
            frontier.park()
            frontier.push(children)

    def _emit(self) -> Entry:
        """Pop the cursor and record it as yielded."""
        self.last_depth = self._frontier.depth
        self.yielded += 1
        return self._frontier.pop_cursor()

    @property
    def depth(self) -> int:
        """Number of levels currently open."""
        return self._frontier.depth

    def pending(self) -> int:
        """Entries discovered but not yet yielded, parked Branches included."""
        return self._frontier.pending()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(root_id={self.root_id!r}, "
            f"yielded={self.yielded}, depth={self.depth})"
        )
