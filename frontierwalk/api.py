"""High-level API for frontierwalk.

This module provides simple, functional interfaces for common walks. These
functions wrap WalkConfig and WalkPlan for the cases where building them by
hand would be noise.
"""

from typing import Any, Callable, Dict, Hashable, Iterable, Iterator, List, Optional, Union

from .config import EntryType, FilterConfig, WalkConfig
from .core.entry import Entry
from .core.listing import ListingService
from .planning import WalkPlan


def walk(
    service: ListingService,
    root_id: Optional[Hashable] = None,
    include_filter: Optional[Callable[[Entry], bool]] = None,
    exclude_filter: Optional[Callable[[Entry], bool]] = None,
    max_entries: Optional[int] = None,
    entry_types: Optional[Iterable[Union[EntryType, str]]] = None,
    progress_callback: Optional[Callable[[int], None]] = None,
) -> Iterator[Entry]:
    """Simple interface for walking a listed tree.

    Entries come out in post-order (a Branch after its whole subtree) with
    siblings in reverse of listed order.

    Args:
        service: ListingService describing the tree
        root_id: Node to start from (defaults to the service's root)
        include_filter: Function to determine if entry should be yielded
        exclude_filter: Function to determine if entry should be skipped
        max_entries: Stop after this many entries have been yielded
        entry_types: Restrict output to "leaf" and/or "branch" entries
        progress_callback: Called with the running count every 100 entries

    Yields:
        Entry instances that match the criteria

    Raises:
        MissingRootError: If the service has no record of the root
        MissingNodeError: If a listed Branch turns out to be unknown

    Example:
        >>> service = FileSystemListingService("/srv/data")
        >>> for entry in walk(service, entry_types=["leaf"]):
        ...     print(entry.id)
    """
    config = _build_config(
        root_id=root_id,
        include_filter=include_filter,
        exclude_filter=exclude_filter,
        max_entries=max_entries,
        entry_types=entry_types,
        progress_callback=progress_callback,
    )
    plan = WalkPlan(config, service)
    yield from plan.execute()


def collect_ids(service: ListingService, **kwargs) -> List[Hashable]:
    """Walk the tree and return the yielded identifiers in order.

    Args:
        service: ListingService describing the tree
        **kwargs: Walk options (see walk)
    """
    return [entry.id for entry in walk(service, **kwargs)]


def count_entries(service: ListingService, **kwargs) -> int:
    """Count entries that match criteria.

    Args:
        service: ListingService describing the tree
        **kwargs: Walk options (see walk)

    Returns:
        Number of entries that match criteria
    """
    count = 0
    for _ in walk(service, **kwargs):
        count += 1
    return count


def find_entries(
    service: ListingService,
    predicate: Callable[[Entry], bool],
    **kwargs
) -> Iterator[Entry]:
    """Find entries that match a predicate.

    Example:
        >>> for entry in find_entries(service, lambda e: str(e.id).endswith(".log")):
        ...     print(entry.id)
    """
    kwargs['include_filter'] = predicate
    yield from walk(service, **kwargs)


def get_leaf_entries(service: ListingService, **kwargs) -> Iterator[Entry]:
    """Get all Leaf entries in walk order."""
    kwargs['entry_types'] = [EntryType.LEAF]
    yield from walk(service, **kwargs)


def get_branch_entries(service: ListingService, **kwargs) -> Iterator[Entry]:
    """Get all Branch entries, each after its own subtree."""
    kwargs['entry_types'] = [EntryType.BRANCH]
    yield from walk(service, **kwargs)


def get_walk_stats(service: ListingService, **kwargs) -> Dict[str, Any]:
    """Walk the tree and report statistics about it.

    Filters, entry types and max_entries decide which entries are counted.
    They do not change how the tree is expanded.

    Args:
        service: ListingService describing the tree
        **kwargs: Walk options (see walk)

    Returns:
        Dictionary with walk statistics. ``max_depth`` counts the root's
        children as depth 1; ``expansions`` is the number of listing calls
        made for Branches.

    Example:
        >>> stats = get_walk_stats(service)
        >>> print(f"Leaves: {stats['leaf_entries']}")
    """
    plan = WalkPlan(_build_config(**kwargs), service)
    stats = {
        'total_entries': 0,
        'leaf_entries': 0,
        'branch_entries': 0,
        'max_depth': 0,
        'depths': {},
    }

    for entry in plan.execute():
        depth = plan.iterator.last_depth
        stats['total_entries'] += 1
        if entry.is_leaf():
            stats['leaf_entries'] += 1
        else:
            stats['branch_entries'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['expansions'] = plan.iterator.expansions if plan.iterator is not None else 0
    return stats


# Helper functions

def _build_config(
    root_id: Optional[Hashable] = None,
    include_filter: Optional[Callable[[Entry], bool]] = None,
    exclude_filter: Optional[Callable[[Entry], bool]] = None,
    max_entries: Optional[int] = None,
    entry_types: Optional[Iterable[Union[EntryType, str]]] = None,
    progress_callback: Optional[Callable[[int], None]] = None,
) -> WalkConfig:
    """Build a WalkConfig from the keyword options accepted by walk()."""
    return WalkConfig(
        root_id=root_id,
        entry_types=_parse_entry_types(entry_types),
        filter=FilterConfig(
            include_filter=include_filter,
            exclude_filter=exclude_filter,
        ),
        max_entries=max_entries,
        progress_callback=progress_callback,
    )


def _parse_entry_types(
    entry_types: Optional[Iterable[Union[EntryType, str]]]
) -> Optional[set]:
    """Parse entry types from strings or enum members.

    Raises:
        ValueError: If a name is not recognized
    """
    if entry_types is None:
        return None

    if isinstance(entry_types, (str, EntryType)):
        entry_types = [entry_types]

    parsed = set()
    for entry_type in entry_types:
        if isinstance(entry_type, EntryType):
            parsed.add(entry_type)
            continue
        try:
            parsed.add(EntryType(str(entry_type).lower()))
        except ValueError:
            raise ValueError(
                f"Unknown entry type: {entry_type}. "
                f"Choose from: {', '.join(t.value for t in EntryType)}"
            ) from None
    return parsed
