"""
Expander
========

Recursively generates every chunk ordering of a Sequence at a halving
block size, producing the Candidate Forest.

At each level:
    1. next = next_block_size(block_size, min_block_size); 0 ends the branch
    2. The Sequence is partitioned into k chunks of ``next`` elements
    3. All k! orderings of those chunks are concatenated into new
       full-length Sequences (intra-chunk order is preserved)
    4. Each ordering becomes a Candidate whose children are the expansion
       of that ordering at ``next``

Growth:
    Branching at a level is the factorial of its chunk count, and the
    depth is O(log2(block_size / min_block_size)). Callers should size an
    expansion with ``estimate_count`` and pass a ResourceBudget; the
    running count is re-checked against it for every new candidate.
"""

import itertools
import logging
from typing import Callable, List, Optional

import numpy as np

from blockshuffle.core.budget import ResourceBudget
from blockshuffle.core.candidate import Candidate, StepCounter, as_sequence
from blockshuffle.generation.partitioner import (
    next_block_size,
    partition,
    validate_block_sizes,
)

logger = logging.getLogger(__name__)

# progress(count, estimated_total), once per generated candidate
ProgressSink = Callable[[int, int], None]


class Expander:
    """
    Candidate tree generator.

    Usage:
        >>> expander = Expander(min_block_size=4)
        >>> forest = expander.expand(range(8), block_size=8)
        >>> len(forest), expander.counter.count
        (2, 2)
    """

    def __init__(
        self,
        min_block_size: int = 1,
        progress: Optional[ProgressSink] = None,
        counter: Optional[StepCounter] = None,
        budget: Optional[ResourceBudget] = None,
        estimated_total: int = 0,
    ):
        self.min_block_size = min_block_size
        self.progress = progress
        self.counter = counter if counter is not None else StepCounter()
        self.budget = budget
        self.estimated_total = estimated_total

    def expand(self, sequence, block_size: Optional[int] = None) -> List[Candidate]:
        """
        Expand ``sequence`` into its Candidate Forest.

        ``block_size`` defaults to the sequence length. Raises
        InvalidConfig before any recursion on bad sizes, and
        ResourceExceeded as soon as the running count passes the budget.
        """
        seq = as_sequence(sequence)
        if block_size is None:
            block_size = len(seq)
        validate_block_sizes(len(seq), block_size, self.min_block_size)

        logger.debug(
            "Expanding %d elements from block size %d down to %d",
            len(seq), block_size, self.min_block_size,
        )
        return self._expand(seq, block_size)

    def _expand(self, seq: np.ndarray, block_size: int) -> List[Candidate]:
        refined = next_block_size(block_size, self.min_block_size)
        if refined == 0:
            return []

        chunks = partition(seq, refined)
        level: List[Candidate] = []

        for ordering in itertools.permutations(chunks):
            count = self.counter.increment()
            if self.budget is not None:
                self.budget.check_running(count)
            if self.progress is not None:
                self.progress(count, self.estimated_total)

            candidate = Candidate(np.concatenate(ordering))
            candidate.children = self._expand(candidate.sequence, refined)
            level.append(candidate)

        return level


def expand(
    sequence,
    block_size: Optional[int] = None,
    min_block_size: int = 1,
    progress: Optional[ProgressSink] = None,
    counter: Optional[StepCounter] = None,
    budget: Optional[ResourceBudget] = None,
    estimated_total: int = 0,
) -> List[Candidate]:
    """Convenience wrapper: build an Expander and run it once."""
    expander = Expander(
        min_block_size=min_block_size,
        progress=progress,
        counter=counter,
        budget=budget,
        estimated_total=estimated_total,
    )
    return expander.expand(sequence, block_size)
