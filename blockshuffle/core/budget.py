"""
Resource Budget
===============

Expansion growth is super-exponential in the sequence length: eight
lines already yield close to two million candidates at a minimum block
size of 1. A ResourceBudget caps that growth twice:

  1. Pre-flight, against the Estimator's predicted count and memory
  2. During expansion, against the running candidate count

Either check raises ResourceExceeded so the caller fails fast instead of
exhausting memory.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from blockshuffle.errors import InvalidConfig, ResourceExceeded
from blockshuffle.utils.helpers import format_bytes, format_count

logger = logging.getLogger(__name__)


@dataclass
class ResourceBudget:
    """
    Ceilings for one expansion. ``None`` disables a ceiling.

    Usage:
        >>> budget = ResourceBudget(max_candidates=1000)
        >>> budget.check_estimate(estimated_count=50)
        >>> budget.check_running(1001)
        Traceback (most recent call last):
        ...
        blockshuffle.errors.ResourceExceeded: candidates budget exceeded: 1001 > 1000
    """

    DEFAULT_MAX_CANDIDATES = 5_000_000

    max_candidates: Optional[int] = DEFAULT_MAX_CANDIDATES
    max_memory_bytes: Optional[int] = None

    def __post_init__(self):
        if self.max_candidates is not None and self.max_candidates <= 0:
            raise InvalidConfig(f"max_candidates must be positive, got {self.max_candidates}")
        if self.max_memory_bytes is not None and self.max_memory_bytes <= 0:
            raise InvalidConfig(f"max_memory_bytes must be positive, got {self.max_memory_bytes}")

    @classmethod
    def unlimited(cls) -> 'ResourceBudget':
        return cls(max_candidates=None, max_memory_bytes=None)

    def check_estimate(self, estimated_count: int, estimated_memory: Optional[int] = None):
        """Pre-flight check against the Estimator's predictions."""
        if self.max_candidates is not None and estimated_count > self.max_candidates:
            logger.warning(
                "Estimated %s candidates exceeds budget of %s",
                format_count(estimated_count), format_count(self.max_candidates),
            )
            raise ResourceExceeded('candidates', estimated_count, self.max_candidates)

        if (
            self.max_memory_bytes is not None
            and estimated_memory is not None
            and estimated_memory > self.max_memory_bytes
        ):
            logger.warning(
                "Estimated %s exceeds memory budget of %s",
                format_bytes(estimated_memory), format_bytes(self.max_memory_bytes),
            )
            raise ResourceExceeded('memory_bytes', estimated_memory, self.max_memory_bytes)

    def check_running(self, count: int):
        """Re-check the running candidate count during expansion."""
        if self.max_candidates is not None and count > self.max_candidates:
            raise ResourceExceeded('candidates', count, self.max_candidates)
