"""In-memory listing service.

Backs a ListingService with a plain dict. Useful for tests, for replaying
listings captured from a remote service, and for trees that are already in
memory but should be walked with the same lazy iterator.
"""

from typing import Any, Dict, Hashable, List, Mapping, Optional, Sequence

from ..core.entry import Branch, Entry, Leaf
from ..core.listing import ROOT_ID, ListingService


class MappingListingService(ListingService):
    """ListingService answering from a ``node_id -> children`` mapping.

    Identifiers missing from the mapping are reported as unknown (None).
    A known node with no children must map to an empty sequence.
    """

    def __init__(self, listings: Mapping[Hashable, Sequence[Entry]], root: Hashable = ROOT_ID):
        """Initialize from a mapping of listings.

        Args:
            listings: Children per node identifier, in listing order
            root: Identifier of the root node
        """
        self.listings = dict(listings)
        self.root = root

    def list(self, node_id: Hashable) -> Optional[List[Entry]]:
        children = self.listings.get(node_id)
        if children is None:
            return None
        # Fresh copy: the iterator owns what it is given
        return list(children)

    def root_id(self) -> Hashable:
        return self.root

    @classmethod
    def from_nested(cls, tree: Mapping[Hashable, Any], root: Hashable = ROOT_ID) -> 'MappingListingService':
        """Build a service from nested dicts.

        Each key is an identifier. A dict value (possibly empty) makes the key
        a Branch with those children; ``None`` makes it a Leaf.

        Example:
            >>> service = MappingListingService.from_nested(
            ...     {"docs": {"readme.txt": None}, "empty": {}},
            ...     root="/",
            ... )
            >>> service.list("docs")
            [Leaf(id='readme.txt')]
        """
        listings: Dict[Hashable, List[Entry]] = {}

        def _add(node_id: Hashable, children: Mapping[Hashable, Any]) -> None:
            entries: List[Entry] = []
            for child_id, grandchildren in children.items():
                if grandchildren is None:
                    entries.append(Leaf(child_id))
                else:
                    entries.append(Branch(child_id))
                    _add(child_id, grandchildren)
            listings[node_id] = entries

        _add(root, tree)
        return cls(listings, root=root)

    def __repr__(self) -> str:
        return f"MappingListingService(root={self.root!r}, nodes={len(self.listings)})"
