"""
Candidate Generation
====================

Partitioner, Expander and Estimator. The Expander and Estimator share
one halving rule (``next_block_size``) so the estimate mirrors the
expansion level for level.
"""

from blockshuffle.generation.partitioner import (
    partition,
    next_block_size,
    validate_block_sizes,
)
from blockshuffle.generation.expander import Expander, ProgressSink, expand
from blockshuffle.generation.estimator import estimate_count, estimate_memory

__all__ = [
    'partition',
    'next_block_size',
    'validate_block_sizes',
    'Expander',
    'ProgressSink',
    'expand',
    'estimate_count',
    'estimate_memory',
]
