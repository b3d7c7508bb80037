"""
Tree Metrics
============

Diagnostics over a Candidate Forest: nesting depth, size, fan-out and
memory footprint, plus the TreeStats summary the pipeline reports.

Depth follows the deepest child at every node, not the first one. After
optimization the first child is usually a shallow original child while
the adopted siblings hang deeper, so only the maximum reports the true
worst-case nesting.
"""

import sys
from dataclasses import dataclass, field
from typing import Dict, List

from blockshuffle.core.candidate import Candidate, iter_candidates


def depth(candidates: List[Candidate]) -> int:
    """
    Maximum nesting depth of a forest.

    An empty list or a list of childless candidates has depth 0.

    Usage:
        >>> depth([])
        0
        >>> depth(expand(range(4), 4, 1))
        1
    """
    deepest = 0
    for candidate in candidates:
        if candidate.children:
            deepest = max(deepest, 1 + depth(candidate.children))
    return deepest


def count_candidates(candidates: List[Candidate]) -> int:
    """Number of candidates reachable from the forest."""
    return sum(1 for _ in iter_candidates(candidates))


def max_fan_out(candidates: List[Candidate]) -> int:
    """Largest sibling list in the forest, the top-level list included."""
    widest = len(candidates)
    for candidate in iter_candidates(candidates):
        widest = max(widest, len(candidate.children))
    return widest


def memory_usage(candidates: List[Candidate]) -> int:
    """
    Deep size of the forest in bytes.

    Counts each node, its attribute dict, its child list and its
    Sequence buffer; element values inside a buffer are not objects.
    """
    total = sys.getsizeof(candidates)
    for candidate in iter_candidates(candidates):
        total += (
            sys.getsizeof(candidate)
            + sys.getsizeof(candidate.__dict__)
            + sys.getsizeof(candidate.children)
            + sys.getsizeof(candidate.sequence)
        )
    return total


@dataclass
class TreeStats:
    """Summary statistics for one expansion + optimization run."""
    sequence_length: int = 0
    estimated_count: int = 0
    actual_count: int = 0
    estimated_memory_bytes: int = 0
    memory_bytes: int = 0
    depth: int = 0
    max_fan_out: int = 0
    optimize_steps: int = 0
    timings_ns: Dict[str, int] = field(default_factory=dict)

    @property
    def estimate_error(self) -> int:
        """Signed difference between the prediction and what was generated."""
        return self.estimated_count - self.actual_count

    def as_dict(self) -> Dict[str, int]:
        return {
            'sequence_length': self.sequence_length,
            'estimated_count': self.estimated_count,
            'actual_count': self.actual_count,
            'estimated_memory_bytes': self.estimated_memory_bytes,
            'memory_bytes': self.memory_bytes,
            'depth': self.depth,
            'max_fan_out': self.max_fan_out,
            'optimize_steps': self.optimize_steps,
        }


def collect_stats(
    candidates: List[Candidate],
    sequence_length: int,
    estimated_count: int = 0,
    estimated_memory_bytes: int = 0,
    optimize_steps: int = 0,
) -> TreeStats:
    """Measure a forest and bundle the result with the pre-flight estimates."""
    return TreeStats(
        sequence_length=sequence_length,
        estimated_count=estimated_count,
        actual_count=count_candidates(candidates),
        estimated_memory_bytes=estimated_memory_bytes,
        memory_bytes=memory_usage(candidates),
        depth=depth(candidates),
        max_fan_out=max_fan_out(candidates),
        optimize_steps=optimize_steps,
    )
