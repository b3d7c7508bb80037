"""
Error Taxonomy
==============

Every failure raised by blockshuffle derives from ``ShuffleError`` and
also from the built-in exception a caller would naturally catch:

  - InvalidConfig: rejected configuration (a ``ValueError``)
  - ResourceExceeded: budget ceiling hit (a ``MemoryError``)

Both are raised before any partial result escapes; an expansion either
completes in full or fails with one of these.
"""

from typing import Optional

from blockshuffle.utils.helpers import format_count


class ShuffleError(Exception):
    """Base class for all blockshuffle errors."""


class InvalidConfig(ShuffleError, ValueError):
    """Zero, negative or out-of-range sizes, or an empty input sequence."""


class ResourceExceeded(ShuffleError, MemoryError):
    """
    A predicted or running resource count went over its ceiling.

    Attributes:
        resource: What was being counted ('candidates' or 'memory_bytes')
        requested: The estimated or running value that tripped the check
        limit: The configured ceiling
    """

    def __init__(self, resource: str, requested: int, limit: int, message: Optional[str] = None):
        self.resource = resource
        self.requested = requested
        self.limit = limit
        super().__init__(
            message
            or f"{resource} budget exceeded: {format_count(requested)} > {format_count(limit)}"
        )
