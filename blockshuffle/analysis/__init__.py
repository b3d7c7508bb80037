"""Tree metrics and summary statistics."""

from blockshuffle.analysis.metrics import (
    TreeStats,
    collect_stats,
    count_candidates,
    depth,
    max_fan_out,
    memory_usage,
)

__all__ = [
    'TreeStats',
    'collect_stats',
    'count_candidates',
    'depth',
    'max_fan_out',
    'memory_usage',
]
