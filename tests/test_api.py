"""Tests for the high-level API, WalkConfig and WalkPlan."""

import pytest

from frontierwalk import (
    Branch,
    ConfigurationError,
    EntryType,
    FilterConfig,
    Leaf,
    MappingListingService,
    MissingRootError,
    WalkConfig,
    WalkPlan,
    collect_ids,
    count_entries,
    find_entries,
    get_branch_entries,
    get_leaf_entries,
    get_walk_stats,
    walk,
)
from frontierwalk.testing import RecordingListingService


def sample_service():
    """Two nested branch pairs plus a trailing empty branch."""
    return MappingListingService({
        0: [Branch(1), Branch(4), Branch(7)],
        1: [Branch(2)],
        2: [Leaf(3)],
        4: [Branch(5)],
        5: [Leaf(6)],
        7: [],
    })


class TestWalk:
    """walk() and the helpers built on it."""

    def test_walk_all(self):
        assert collect_ids(sample_service()) == [7, 6, 5, 4, 3, 2, 1]

    def test_count_entries(self):
        assert count_entries(sample_service()) == 7

    def test_entry_types(self):
        assert collect_ids(sample_service(), entry_types=["leaf"]) == [6, 3]
        assert collect_ids(sample_service(), entry_types="branch") == [7, 5, 4, 2, 1]
        assert [e.id for e in get_leaf_entries(sample_service())] == [6, 3]
        assert [e.id for e in get_branch_entries(sample_service())] == [7, 5, 4, 2, 1]

    def test_unknown_entry_type(self):
        with pytest.raises(ValueError, match="Unknown entry type"):
            list(walk(sample_service(), entry_types=["symlink"]))

    def test_filters_do_not_prune(self):
        """Excluding a Branch still walks its subtree."""
        ids = collect_ids(sample_service(), exclude_filter=lambda e: e.id == 4)
        assert ids == [7, 6, 5, 3, 2, 1]

    def test_include_and_exclude(self):
        ids = collect_ids(
            sample_service(),
            include_filter=lambda e: e.id % 2 == 1,
            exclude_filter=lambda e: e.id == 7,
        )
        assert ids == [5, 3, 1]

    def test_find_entries(self):
        found = list(find_entries(sample_service(), lambda e: e.id > 4))
        assert found == [Branch(7), Leaf(6), Branch(5)]

    def test_max_entries_stops_listing(self):
        service = RecordingListingService(sample_service())
        ids = collect_ids(service, max_entries=2)
        assert ids == [7, 6]
        assert not service.was_listed(1)
        assert not service.was_listed(2)

    def test_max_entries_zero(self):
        """A zero limit yields nothing and never lists the root."""
        service = RecordingListingService(sample_service())
        assert collect_ids(service, max_entries=0) == []
        assert service.calls == []

    def test_explicit_root(self):
        assert collect_ids(sample_service(), root_id=4) == [6, 5]

    def test_missing_root(self):
        with pytest.raises(MissingRootError):
            list(walk(MappingListingService({})))

    def test_progress_callback(self):
        seen = []
        service = MappingListingService({0: [Leaf(i) for i in range(250)]})
        list(walk(service, progress_callback=seen.append))
        assert seen == [100, 200]

    def test_walk_is_lazy(self):
        service = RecordingListingService(sample_service())
        entries = walk(service)
        assert service.calls == []
        next(entries)
        assert service.calls == [0, 7]


class TestWalkStats:
    def test_stats(self):
        stats = get_walk_stats(sample_service())
        assert stats['total_entries'] == 7
        assert stats['leaf_entries'] == 2
        assert stats['branch_entries'] == 5
        assert stats['max_depth'] == 3
        assert stats['depths'] == {1: 3, 2: 2, 3: 2}
        assert stats['expansions'] == 5

    def test_stats_empty_root(self):
        stats = get_walk_stats(MappingListingService({0: []}))
        assert stats['total_entries'] == 0
        assert stats['max_depth'] == 0
        assert stats['expansions'] == 0

    def test_stats_with_walk_options(self):
        """Entry types and filters restrict what is counted."""
        stats = get_walk_stats(sample_service(), entry_types=["leaf"])
        assert stats['total_entries'] == 2
        assert stats['branch_entries'] == 0
        assert stats['depths'] == {3: 2}
        assert stats['expansions'] == 5

        stats = get_walk_stats(sample_service(), exclude_filter=lambda e: e.id == 4)
        assert stats['total_entries'] == 6
        assert stats['depths'] == {1: 2, 2: 2, 3: 2}

    def test_stats_from_explicit_root(self):
        stats = get_walk_stats(sample_service(), root_id=4)
        assert stats['total_entries'] == 2
        assert stats['max_depth'] == 2

    def test_stats_with_zero_limit(self):
        stats = get_walk_stats(sample_service(), max_entries=0)
        assert stats['total_entries'] == 0
        assert stats['expansions'] == 0


class TestWalkConfig:
    """Configuration validation."""

    def test_default_config_is_valid(self):
        assert WalkConfig().validate() == []

    def test_negative_max_entries(self):
        errors = WalkConfig(max_entries=-1).validate()
        assert "max_entries cannot be negative" in errors

    def test_empty_entry_types(self):
        assert "entry_types cannot be empty" in WalkConfig(entry_types=set()).validate()

    def test_bad_entry_type(self):
        errors = WalkConfig(entry_types={"leaf"}).validate()
        assert any("Unknown entry type" in e for e in errors)

    def test_bad_progress_interval(self):
        assert WalkConfig(progress_interval=0).validate() == [
            "progress_interval must be positive"
        ]

    def test_convenience_constructors(self):
        assert WalkConfig.leaves_only().entry_types == {EntryType.LEAF}
        config = WalkConfig.branches_only(max_entries=3)
        assert config.entry_types == {EntryType.BRANCH}
        assert config.max_entries == 3

    def test_filter_config(self):
        filters = FilterConfig(
            include_filter=lambda e: e.is_leaf(),
            exclude_filter=lambda e: e.id == 3,
        )
        assert filters.should_include(Leaf(6))
        assert not filters.should_include(Leaf(3))
        assert not filters.should_include(Branch(1))
        assert FilterConfig().should_include(Branch(1))


class TestWalkPlan:
    def test_invalid_config_rejected_before_listing(self):
        service = RecordingListingService(sample_service())
        with pytest.raises(ConfigurationError, match="max_entries"):
            WalkPlan(WalkConfig(max_entries=-5), service)
        assert service.calls == []

    def test_plan_can_run_twice(self):
        plan = WalkPlan(WalkConfig.leaves_only(), sample_service())
        assert [e.id for e in plan.execute()] == [6, 3]
        assert [e.id for e in plan.execute()] == [6, 3]
        assert plan.entries_yielded == 2

    def test_summary(self):
        plan = WalkPlan(WalkConfig(max_entries=1), sample_service())
        summary = plan.get_summary()
        assert summary['root_id'] == 0
        assert summary['entries_yielded'] == 0
        assert summary['expansions'] == 0

        list(plan.execute())
        summary = plan.get_summary()
        assert summary['entries_yielded'] == 1
        assert summary['expansions'] == 1
        assert summary['exhausted'] is False
        assert summary['has_filters'] is False
        assert summary['entry_types'] is None
