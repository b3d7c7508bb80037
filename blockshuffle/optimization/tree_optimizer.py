"""
Tree Optimizer
==============

Bounds the fan-out of a Candidate tree in place by re-parenting excess
siblings as descendants. Nothing is pruned: every candidate produced by
the Expander stays reachable exactly once.

Grouping pass (K = max_siblings):

    1, 2, 3, 4, 5, 6, 7, 8, 9, 10                       (K = 4)
 -> [1, 2, 3, 4], [5, 6, 7, 8], [9, 10]
 -> [1 children: +2, 3, 4], [5 children: +6, 7, 8], [9 children: +10]

Adopted siblings are appended after any children the representative
already had. A single pass can still leave more than K representatives,
so passes repeat until the list fits, and the same procedure then runs
on every surviving candidate's (possibly extended) child list.

K also bounds how many candidates an evaluator has to score before it
can descend one level, which makes it a natural job count for scoring
a level concurrently.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from blockshuffle.core.candidate import Candidate, StepCounter
from blockshuffle.errors import InvalidConfig

logger = logging.getLogger(__name__)

DEFAULT_MAX_SIBLINGS = 2


@dataclass
class OptimizationStats:
    """Statistics for one optimization run."""
    lists_processed: int = 0
    grouping_passes: int = 0
    reparented: int = 0


class TreeOptimizer:
    """
    Fan-out bounding optimizer.

    Usage:
        >>> optimizer = TreeOptimizer(max_siblings=2)
        >>> stats = optimizer.optimize(forest)
        >>> len(forest) <= 2
        True
    """

    def __init__(
        self,
        max_siblings: int = DEFAULT_MAX_SIBLINGS,
        counter: Optional[StepCounter] = None,
    ):
        if max_siblings < 2:
            raise InvalidConfig(
                f"max_siblings must be at least 2, got {max_siblings}"
            )
        self.max_siblings = max_siblings
        self.counter = counter if counter is not None else StepCounter()
        self.stats = OptimizationStats()

    def optimize(self, candidates: List[Candidate]) -> OptimizationStats:
        """Rewrite ``candidates`` and all descendants so no list exceeds K."""
        self.stats = OptimizationStats()
        self._optimize_list(candidates)

        logger.debug(
            "Optimized %d sibling lists in %d passes, re-parented %d candidates",
            self.stats.lists_processed,
            self.stats.grouping_passes,
            self.stats.reparented,
        )
        return self.stats

    def _optimize_list(self, siblings: List[Candidate]):
        self.counter.increment()
        self.stats.lists_processed += 1

        while len(siblings) > self.max_siblings:
            self._group(siblings)

        for candidate in siblings:
            if candidate.children:
                self._optimize_list(candidate.children)

    def _group(self, siblings: List[Candidate]):
        """One grouping pass, replacing the list contents with representatives."""
        k = self.max_siblings
        representatives = []

        for start in range(0, len(siblings), k):
            representative = siblings[start]
            adopted = siblings[start + 1:start + k]
            representative.children.extend(adopted)
            self.stats.reparented += len(adopted)
            representatives.append(representative)

        siblings[:] = representatives
        self.stats.grouping_passes += 1


def optimize(
    candidates: List[Candidate],
    max_siblings: int = DEFAULT_MAX_SIBLINGS,
    counter: Optional[StepCounter] = None,
) -> OptimizationStats:
    """Convenience wrapper around ``TreeOptimizer.optimize``."""
    return TreeOptimizer(max_siblings=max_siblings, counter=counter).optimize(candidates)
