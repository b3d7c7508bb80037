"""
blockshuffle: Block-wise Reordering Candidate Trees
===================================================

blockshuffle explores the block-wise reorderings of an ordered sequence
(typically the lines of a source file) so that an external evaluator can
pick the ordering that minimizes a downstream cost such as binary size or
compressed entropy.

Core Components:
    - core: Candidate data model, step counters and the resource budget
    - generation: Partitioner, recursive Expander and closed-form Estimator
    - optimization: Fan-out bounding TreeOptimizer
    - analysis: Depth, size and memory metrics
    - runtime: ShufflePipeline wiring estimate, budget, expansion and optimization

Usage:
    >>> import blockshuffle
    >>> blockshuffle.estimate_count(8, 8, 4)
    2
    >>> result = blockshuffle.ShufflePipeline(min_block_size=4).run(lines)
    >>> result.stats.depth
    0
"""

__version__ = "0.1.0"

from blockshuffle.errors import InvalidConfig, ResourceExceeded, ShuffleError
from blockshuffle.core import (
    UNSCORED,
    Candidate,
    ResourceBudget,
    StepCounter,
    iter_candidates,
)
from blockshuffle.generation import (
    Expander,
    estimate_count,
    estimate_memory,
    expand,
    next_block_size,
    partition,
)
from blockshuffle.optimization import OptimizationStats, TreeOptimizer, optimize
from blockshuffle.analysis import (
    TreeStats,
    collect_stats,
    count_candidates,
    depth,
    max_fan_out,
    memory_usage,
)
from blockshuffle.runtime import LoggingProgress, ShufflePipeline, ShuffleResult
