"""
Estimator
=========

Closed-form prediction of how many candidates the Expander will produce,
without materializing a single Sequence:

    E(n, b, m) = 0                              if next_block_size(b, m) == 0
    E(n, b, m) = k! + E(n, b', m) * k!          otherwise

where b' = next_block_size(b, m) and k = ceil(n / b'). The chunk count
uses the same ceiling the Partitioner produces, so for the Expander's
own inputs the estimate is exact; it is still treated as advisory.

The memory estimate multiplies the count by the per-candidate footprint
and doubles it, leaving headroom for the optimization pass.
"""

import math
import sys
from typing import Optional

import numpy as np

from blockshuffle.core.candidate import ELEMENT_DTYPE, Candidate
from blockshuffle.generation.partitioner import next_block_size, validate_block_sizes

# Re-parenting during optimization can roughly double the live footprint.
OPTIMIZATION_HEADROOM = 2


def _node_overhead() -> int:
    sample = Candidate(np.empty(0, dtype=ELEMENT_DTYPE))
    return (
        sys.getsizeof(sample)
        + sys.getsizeof(sample.__dict__)
        + sys.getsizeof(sample.sequence)
        + sys.getsizeof(sample.children)
    )


CANDIDATE_OVERHEAD_BYTES = _node_overhead()


def _count(length: int, block_size: int, min_block_size: int) -> int:
    refined = next_block_size(block_size, min_block_size)
    if refined == 0:
        return 0

    chunk_count = math.ceil(length / refined)
    orderings = math.factorial(chunk_count)
    return orderings + _count(length, refined, min_block_size) * orderings


def estimate_count(length: int, block_size: int, min_block_size: int = 1) -> int:
    """
    Predict the number of candidates ``expand`` would generate.

    Usage:
        >>> estimate_count(8, 8, 4)
        2
        >>> estimate_count(4, 4, 1)
        50
    """
    validate_block_sizes(length, block_size, min_block_size)
    return _count(length, block_size, min_block_size)


def estimate_memory(
    length: int,
    block_size: int,
    min_block_size: int = 1,
    count: Optional[int] = None,
) -> int:
    """
    Predict the memory in bytes of the expanded and optimized tree.

    Pass ``count`` when ``estimate_count`` has already been computed for
    the same sizes.
    """
    if count is None:
        count = estimate_count(length, block_size, min_block_size)
    per_candidate = CANDIDATE_OVERHEAD_BYTES + length * np.dtype(ELEMENT_DTYPE).itemsize
    return count * per_candidate * OPTIMIZATION_HEADROOM
