"""Filesystem listing service for frontierwalk.

Exposes a local directory hierarchy through the ListingService contract.
Identifiers are path strings, directories are Branches and everything else
is a Leaf.
"""

import logging
import os
from pathlib import Path
from typing import Hashable, List, Optional, Set, Union

from ..core.entry import Branch, Entry, Leaf
from ..core.listing import ListingService

logger = logging.getLogger(__name__)


class FileSystemListingService(ListingService):
    """ListingService for local directories.

    Each ``list`` call performs one ``os.scandir`` of the requested directory.
    Children are listed sorted by name so repeated walks see the same order.
    """

    def __init__(self,
                 root: Union[str, Path],
                 follow_symlinks: bool = False,
                 include_hidden: bool = True,
                 exclude_names: Optional[Set[str]] = None):
        """Initialize filesystem listing service.

        Args:
            root: Directory the walk starts from
            follow_symlinks: Whether symlinked directories are Branches.
                When False they are reported as Leaves and never listed.
            include_hidden: Whether to include dot-files and dot-directories
            exclude_names: Entry names to leave out (e.g., {'.git', '__pycache__'})
        """
        self.root = Path(root)
        self.follow_symlinks = follow_symlinks
        self.include_hidden = include_hidden
        self.exclude_names = exclude_names or set()

    def root_id(self) -> Hashable:
        return str(self.root)

    def list(self, node_id: Hashable) -> Optional[List[Entry]]:
        """List one directory.

        Returns:
            Children sorted by name, an empty list for an empty or unreadable
            directory, or None if ``node_id`` is not an existing directory
        """
        path = str(node_id)
        try:
            with os.scandir(path) as it:
                dir_entries = sorted(it, key=lambda d: d.name)
        except (FileNotFoundError, NotADirectoryError):
            return None
        except PermissionError:
            # Known but unreadable: nothing to descend into
            logger.warning("Permission denied listing %s", path)
            return []

        children: List[Entry] = []
        for dir_entry in dir_entries:
            if not self.include_hidden and dir_entry.name.startswith('.'):
                continue
            if dir_entry.name in self.exclude_names:
                continue
            children.append(self._make_entry(dir_entry))
        return children

    def _make_entry(self, dir_entry: os.DirEntry) -> Entry:
        try:
            is_dir = dir_entry.is_dir(follow_symlinks=self.follow_symlinks)
        except OSError:
            is_dir = False
        if is_dir:
            return Branch(dir_entry.path)
        return Leaf(dir_entry.path)

    def __repr__(self) -> str:
        return f"FileSystemListingService(root={str(self.root)!r})"
