"""frontierwalk - Lazy depth-first walks over incrementally listed trees.

frontierwalk traverses trees whose shape can only be discovered one listing
at a time: remote directory hierarchies, paginated APIs, anything that
answers "what are the children of node N?" and nothing more.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from frontierwalk import walk, FileSystemListingService

    for entry in walk(FileSystemListingService("/srv/data")):
        print(entry.id)
━━━━━━━━━━━━━━━━━━━━━━━━━━

Entries come out in post-order (each Branch after its whole subtree) with
siblings reversed, and every Branch is listed at most once per walk.
"""

__version__ = "0.1.0"

# Core components
from .core.entry import Entry, Leaf, Branch
from .core.listing import ListingService, ROOT_ID
from .core.frontier import Frontier, Level
from .core.iterator import DepthFirstFrontierIterator

# Errors
from .exceptions import (
    FrontierError,
    MissingRootError,
    MissingNodeError,
    ConfigurationError,
)

# Adapters
from .adapters import MappingListingService, FileSystemListingService

# Configuration and planning
from .config import WalkConfig, FilterConfig, EntryType
from .planning import WalkPlan

# High-level API
from .api import (
    walk,
    collect_ids,
    count_entries,
    find_entries,
    get_leaf_entries,
    get_branch_entries,
    get_walk_stats,
)

__all__ = [
    "__version__",
    # Core
    "Entry",
    "Leaf",
    "Branch",
    "ListingService",
    "ROOT_ID",
    "Frontier",
    "Level",
    "DepthFirstFrontierIterator",
    # Errors
    "FrontierError",
    "MissingRootError",
    "MissingNodeError",
    "ConfigurationError",
    # Adapters
    "MappingListingService",
    "FileSystemListingService",
    # Configuration
    "WalkConfig",
    "FilterConfig",
    "EntryType",
    "WalkPlan",
    # API
    "walk",
    "collect_ids",
    "count_entries",
    "find_entries",
    "get_leaf_entries",
    "get_branch_entries",
    "get_walk_stats",
]
