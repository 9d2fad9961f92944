"""Entry types for frontierwalk.

An Entry is one item reported by a ListingService. It is deliberately a plain
data container: it carries an identifier and its variant, nothing else. The
tree is never materialized, so entries hold no parent or child references.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Hashable


@dataclass(frozen=True)
class Entry(ABC):
    """Abstract base class for the two entry variants.

    Equality and hashing come from the dataclass machinery, which compares
    the concrete class as well as the identifier. ``Leaf(1)`` and
    ``Branch(1)`` are therefore different entries.
    """

    id: Hashable

    KIND = "entry"

    def identifier(self) -> Hashable:
        """Return the identifier the ListingService knows this entry by."""
        return self.id

    @abstractmethod
    def is_leaf(self) -> bool:
        """Check if this entry can never have children.

        Returns:
            bool: True for Leaf entries, False for Branch entries
        """
        pass

    def is_branch(self) -> bool:
        return not self.is_leaf()

    def metadata(self) -> Dict[str, Any]:
        """Return lightweight metadata about this entry."""
        return {'id': self.id, 'type': self.KIND}

    def __str__(self) -> str:
        return str(self.id)


@dataclass(frozen=True)
class Leaf(Entry):
    """An entry with no children. Leaves are never expanded."""

    KIND = "leaf"

    def is_leaf(self) -> bool:
        return True


@dataclass(frozen=True)
class Branch(Entry):
    """An entry that may have children.

    Whether a Branch has already been expanded is not stored here; the
    iterator infers it from its own frontier.
    """

    KIND = "branch"

    def is_leaf(self) -> bool:
        return False
