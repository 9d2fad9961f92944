"""Test fixtures for frontierwalk consumers.

These fixtures give tests visibility into how a walk used its ListingService
without adding introspection hooks to the iterator itself.
"""

from collections import Counter
from typing import Dict, Hashable, List, Optional, Sequence

from ..core.entry import Entry
from ..core.listing import ListingService


class RecordingListingService(ListingService):
    """Wraps a ListingService and records every ``list`` call.

    Example:
        service = RecordingListingService(MappingListingService(listings))
        list(DepthFirstFrontierIterator(service))

        assert service.max_calls_per_node() <= 1
        assert service.calls[0] == service.root_id()
    """

    def __init__(self, base_service: ListingService):
        """Initialize with the service to observe.

        Args:
            base_service: The ListingService that answers the calls
        """
        self._base_service = base_service
        self.calls: List[Hashable] = []

    def list(self, node_id: Hashable) -> Optional[Sequence[Entry]]:
        self.calls.append(node_id)
        return self._base_service.list(node_id)

    def root_id(self) -> Hashable:
        return self._base_service.root_id()

    def call_counts(self) -> Dict[Hashable, int]:
        """Return how many times each identifier was listed."""
        return dict(Counter(self.calls))

    def max_calls_per_node(self) -> int:
        """Return the highest call count for any single identifier (0 if none)."""
        counts = self.call_counts()
        return max(counts.values()) if counts else 0

    def was_listed(self, node_id: Hashable) -> bool:
        return node_id in self.calls

    def reset(self) -> None:
        self.calls.clear()
