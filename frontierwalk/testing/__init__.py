"""Testing utilities for frontierwalk consumers."""

from .fixtures import RecordingListingService

__all__ = ['RecordingListingService']
