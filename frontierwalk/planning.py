"""Execution planning for frontierwalk.

The WalkPlan validates a WalkConfig up front and then drives a fresh
DepthFirstFrontierIterator, applying the config to what comes out of it.
"""

import logging
from typing import Iterator, Optional

from .config import WalkConfig
from .core.entry import Entry
from .core.iterator import DepthFirstFrontierIterator
from .core.listing import ListingService
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class WalkPlan:
    """Validated plan for walking one ListingService.

    Validation happens in the constructor, before the service is touched.
    Each call to ``execute`` builds a new iterator, so a plan can be run
    more than once; each run lists the tree again.
    """

    def __init__(self, config: WalkConfig, service: ListingService):
        """Create and validate a walk plan.

        Args:
            config: Caller's walk configuration
            service: ListingService describing the tree

        Raises:
            ConfigurationError: If the config is inconsistent
        """
        self.config = config
        self.service = service

        config_errors = config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.iterator: Optional[DepthFirstFrontierIterator] = None
        self.entries_yielded = 0

    def execute(self) -> Iterator[Entry]:
        """Walk the tree and yield the entries the config asks for.

        The limit check runs before each pull, so once ``max_entries`` is
        reached no further listing calls are made.

        Yields:
            Entries in post-order with siblings reversed
        """
        config = self.config
        self.entries_yielded = 0
        if config.max_entries == 0:
            self.iterator = None
            return

        self.iterator = DepthFirstFrontierIterator(self.service, config.root_id)

        for entry in self.iterator:
            if not config.wants(entry):
                continue

            self.entries_yielded += 1
            yield entry

            if (config.progress_callback is not None
                    and self.entries_yielded % config.progress_interval == 0):
                config.progress_callback(self.entries_yielded)

            if config.max_entries is not None and self.entries_yielded >= config.max_entries:
                logger.debug("Stopping walk after %d entries", self.entries_yielded)
                return

    def get_summary(self) -> dict:
        """Get summary of the plan and its last run.

        Useful for debugging and logging.
        """
        iterator = self.iterator
        return {
            'root_id': _resolve_root(self.config, self.service),
            'entry_types': (
                sorted(t.value for t in self.config.entry_types)
                if self.config.entry_types is not None else None
            ),
            'max_entries': self.config.max_entries,
            'has_filters': (
                self.config.filter.include_filter is not None
                or self.config.filter.exclude_filter is not None
            ),
            'entries_yielded': self.entries_yielded,
            'expansions': iterator.expansions if iterator is not None else 0,
            'exhausted': iterator.exhausted if iterator is not None else False,
        }


def _resolve_root(config: WalkConfig, service: ListingService):
    """Resolve the root a config will start from."""
    return service.root_id() if config.root_id is None else config.root_id
