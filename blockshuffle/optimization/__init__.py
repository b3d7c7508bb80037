from blockshuffle.optimization.tree_optimizer import (
    DEFAULT_MAX_SIBLINGS,
    OptimizationStats,
    TreeOptimizer,
    optimize,
)

__all__ = [
    'DEFAULT_MAX_SIBLINGS',
    'OptimizationStats',
    'TreeOptimizer',
    'optimize',
]
