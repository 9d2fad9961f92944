"""Exceptions raised by frontierwalk."""

from typing import Hashable


class FrontierError(Exception):
    """Base class for all frontierwalk errors."""
    pass


class MissingRootError(FrontierError):
    """Raised when the ListingService has no record of the root.

    There is no children list to seed the frontier with, so the traversal
    cannot begin.
    """

    def __init__(self, node_id: Hashable):
        self.node_id = node_id
        super().__init__(f"Listing service has no record of root {node_id!r}")


class MissingNodeError(FrontierError):
    """Raised when a Branch advertised as a child cannot be listed.

    This is a contract violation by the ListingService: the node appeared in
    its parent's listing but is now unknown.
    """

    def __init__(self, node_id: Hashable):
        self.node_id = node_id
        super().__init__(
            f"Listing service has no record of branch {node_id!r} "
            f"that was listed as a child"
        )


class ConfigurationError(FrontierError):
    """Raised when a WalkConfig fails validation."""
    pass
