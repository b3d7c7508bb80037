"""
Partitioner
===========

Splits a Sequence into contiguous, order-preserving chunks and owns the
block-size halving rule shared by the Expander and the Estimator.

Halving rule (floor):
    next = block_size // 2

A level is terminal, producing no refinement, when the current block
size is 1, is already below the minimum, or would halve below the
minimum. Expander and Estimator both go through ``next_block_size`` so
their recursion never drifts apart.
"""

from typing import List

import numpy as np

from blockshuffle.core.candidate import as_sequence
from blockshuffle.errors import InvalidConfig


def partition(sequence, chunk_size: int) -> List[np.ndarray]:
    """
    Split ``sequence`` into ``ceil(len / chunk_size)`` contiguous chunks.

    The final chunk may be shorter. Chunks are views into the input, so
    partitioning itself copies nothing.

    Usage:
        >>> [c.tolist() for c in partition([0, 1, 2, 3, 4], 2)]
        [[0, 1], [2, 3], [4]]
    """
    if chunk_size <= 0:
        raise InvalidConfig(f"chunk size must be positive, got {chunk_size}")

    seq = as_sequence(sequence)
    return [seq[start:start + chunk_size] for start in range(0, len(seq), chunk_size)]


def next_block_size(block_size: int, min_block_size: int) -> int:
    """Return the refined block size for the next level, or 0 if terminal."""
    if block_size == 1 or block_size < min_block_size:
        return 0

    halved = block_size // 2
    if halved < min_block_size:
        return 0
    return halved


def validate_block_sizes(length: int, block_size: int, min_block_size: int):
    """Reject configurations the recursion cannot start from."""
    if length <= 0:
        raise InvalidConfig("input sequence is empty")
    if block_size <= 0:
        raise InvalidConfig(f"block size must be positive, got {block_size}")
    if min_block_size <= 0:
        raise InvalidConfig(f"minimum block size must be positive, got {min_block_size}")
    if min_block_size > length:
        raise InvalidConfig(
            f"minimum block size {min_block_size} exceeds sequence length {length}"
        )
