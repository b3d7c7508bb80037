"""
Shuffle Pipeline
================

Runs the full candidate-tree build for one input:

  1. Validate: reject bad sizes before anything is allocated
  2. Estimate: closed-form candidate count and memory footprint
  3. Budget: fail fast if the estimate exceeds the ResourceBudget
  4. Expand: generate the Candidate Forest, re-checking the budget
  5. Optimize: bound every sibling list to ``max_siblings``
  6. Measure: depth, counts and memory into TreeStats

The items themselves are never reordered here: Elements are their
positions, and ``ShuffleResult.materialize`` maps a candidate back onto
the items for the external evaluator.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence as SequenceT

import numpy as np

from blockshuffle.analysis.metrics import TreeStats, collect_stats
from blockshuffle.core.budget import ResourceBudget
from blockshuffle.core.candidate import ELEMENT_DTYPE, Candidate, StepCounter
from blockshuffle.generation.estimator import estimate_count, estimate_memory
from blockshuffle.generation.expander import Expander, ProgressSink
from blockshuffle.generation.partitioner import validate_block_sizes
from blockshuffle.optimization.tree_optimizer import DEFAULT_MAX_SIBLINGS, TreeOptimizer
from blockshuffle.utils.helpers import Timer, format_bytes, format_count, format_ns

logger = logging.getLogger(__name__)


class LoggingProgress:
    """
    Progress sink that logs every ``interval`` generated candidates.

    Usage:
        >>> pipeline = ShufflePipeline(progress=LoggingProgress(interval=10_000))
    """

    def __init__(self, interval: int = 10_000, level: int = logging.INFO):
        self.interval = max(1, interval)
        self.level = level
        self.last_count = 0

    def __call__(self, count: int, estimated_total: int):
        self.last_count = count
        if count % self.interval == 0 or count == estimated_total:
            logger.log(
                self.level, "generated candidate %d/%s", count, format_count(estimated_total)
            )


@dataclass
class ShuffleResult:
    """The optimized Candidate Forest of one run, with its statistics."""
    forest: List[Candidate]
    items: SequenceT
    stats: TreeStats = field(default_factory=TreeStats)

    def materialize(self, candidate: Candidate) -> list:
        """The items in ``candidate``'s order."""
        return candidate.apply(self.items)


class ShufflePipeline:
    """
    Estimate, expand and optimize a candidate tree under a resource budget.

    Usage:
        >>> pipeline = ShufflePipeline(min_block_size=2, max_siblings=4)
        >>> result = pipeline.run(source.splitlines())
        >>> result.stats.actual_count == result.stats.estimated_count
        True
        >>> result.materialize(result.forest[0])
        [...]
    """

    def __init__(
        self,
        min_block_size: int = 1,
        max_siblings: int = DEFAULT_MAX_SIBLINGS,
        budget: Optional[ResourceBudget] = None,
        progress: Optional[ProgressSink] = None,
        enable_logging: bool = False,
    ):
        self.min_block_size = min_block_size
        self.budget = budget if budget is not None else ResourceBudget()
        self.progress = progress

        # Constructing the optimizer validates max_siblings up front
        self._optimizer = TreeOptimizer(max_siblings=max_siblings)
        self.max_siblings = max_siblings

        if enable_logging:
            logging.basicConfig(level=logging.DEBUG)

    def estimate(self, length: int, block_size: Optional[int] = None) -> TreeStats:
        """Pre-flight estimate only; nothing is generated."""
        if block_size is None:
            block_size = length
        validate_block_sizes(length, block_size, self.min_block_size)
        count = estimate_count(length, block_size, self.min_block_size)
        return TreeStats(
            sequence_length=length,
            estimated_count=count,
            estimated_memory_bytes=estimate_memory(
                length, block_size, self.min_block_size, count=count
            ),
        )

    def run(self, items: SequenceT, block_size: Optional[int] = None) -> ShuffleResult:
        """
        Build the optimized Candidate Forest for ``items``.

        Raises InvalidConfig for bad sizes or empty input and
        ResourceExceeded when the estimate or the running count goes over
        the budget. No partial forest is ever returned.
        """
        length = len(items)
        if block_size is None:
            block_size = length
        timings = {}

        with Timer('estimate', timings):
            preflight = self.estimate(length, block_size)
        self.budget.check_estimate(
            preflight.estimated_count, preflight.estimated_memory_bytes
        )
        logger.info(
            "estimated candidate count: %s", format_count(preflight.estimated_count)
        )
        logger.info(
            "estimated memory usage: %s",
            format_bytes(preflight.estimated_memory_bytes),
        )

        generated = StepCounter()
        expander = Expander(
            min_block_size=self.min_block_size,
            progress=self.progress,
            counter=generated,
            budget=self.budget,
            estimated_total=preflight.estimated_count,
        )
        with Timer('expand', timings):
            forest = expander.expand(np.arange(length, dtype=ELEMENT_DTYPE), block_size)
        logger.info("actual candidate count: %d", generated.count)

        steps = StepCounter()
        self._optimizer.counter = steps
        with Timer('optimize', timings):
            self._optimizer.optimize(forest)

        with Timer('measure', timings):
            stats = collect_stats(
                forest,
                sequence_length=length,
                estimated_count=preflight.estimated_count,
                estimated_memory_bytes=preflight.estimated_memory_bytes,
                optimize_steps=steps.count,
            )
        stats.timings_ns = timings

        logger.info("memory usage after optimization: %s", format_bytes(stats.memory_bytes))
        logger.info("tree depth: %d", stats.depth)
        for phase, elapsed in timings.items():
            logger.debug("%s took %s", phase, format_ns(elapsed))

        return ShuffleResult(forest=forest, items=items, stats=stats)
