"""Core abstractions for frontierwalk.

This package contains the entry types, the ListingService contract and the
depth-first frontier iterator built on top of them.
"""

from .entry import Entry, Leaf, Branch
from .listing import ListingService, ROOT_ID
from .frontier import Frontier, Level
from .iterator import DepthFirstFrontierIterator

__all__ = [
    "Entry",
    "Leaf",
    "Branch",
    "ListingService",
    "ROOT_ID",
    "Frontier",
    "Level",
    "DepthFirstFrontierIterator",
]
