"""Concrete listing services for frontierwalk."""

from .mapping import MappingListingService
from .filesystem import FileSystemListingService

__all__ = [
    'MappingListingService',
    'FileSystemListingService',
]
