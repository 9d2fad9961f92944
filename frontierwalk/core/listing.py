"""ListingService abstraction for frontierwalk.

The ListingService is the only collaborator the iterator consumes. It resolves
one node identifier to the ordered sequence of that node's direct children.
It knows nothing about traversal order; the iterator knows nothing about how
listings are obtained (FTP, HTTP, local disk, an in-memory dict...).
"""

from abc import ABC, abstractmethod
from typing import Hashable, Optional, Sequence

from .entry import Entry

# Identifier used for the root when a service does not name its own.
ROOT_ID = 0


class ListingService(ABC):
    """Abstract source of directory-style listings.

    Implementations should be idempotent and free of side effects for the
    same identifier: the iterator calls ``list`` at most once per Branch in a
    successful traversal, but a caller may pull again after a failure, which
    repeats the failed call.
    """

    @abstractmethod
    def list(self, node_id: Hashable) -> Optional[Sequence[Entry]]:
        """Return the direct children of ``node_id``.

        Args:
            node_id: Identifier of the node to list

        Returns:
            The children in the service's own order, an empty sequence if the
            node is known and has no children, or None if the service has no
            record of the node at all.
        """
        pass

    def root_id(self) -> Hashable:
        """Return the identifier traversal starts from.

        Services that address their tree by path or URL override this.
        """
        return ROOT_ID
