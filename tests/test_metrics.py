"""
Tests for tree metrics.

Validates:
  - depth() follows the deepest child, not the first
  - Size, fan-out and memory measurements
  - collect_stats() bundles measurements with estimates
"""

from blockshuffle.analysis.metrics import (
    TreeStats,
    collect_stats,
    count_candidates,
    depth,
    max_fan_out,
    memory_usage,
)
from blockshuffle.core.candidate import Candidate, as_sequence
from blockshuffle.generation.expander import expand


def node(*children):
    c = Candidate(as_sequence([0]))
    c.children = list(children)
    return c


class TestDepth:
    def test_empty(self):
        assert depth([]) == 0

    def test_childless(self):
        assert depth([node(), node()]) == 0

    def test_chain_of_three(self):
        assert depth([node(node(node(node())))]) == 3

    def test_follows_maximum(self):
        forest = [node(node()), node(node(node(node())))]
        assert depth(forest) == 3

    def test_deep_child_not_first(self):
        forest = [node(node(), node(node(node())))]
        assert depth(forest) == 3

    def test_expanded_trees(self):
        assert depth(expand(range(8), 8, 4)) == 0
        assert depth(expand(range(4), 4, 1)) == 1


class TestSize:
    def test_count(self):
        assert count_candidates([]) == 0
        assert count_candidates([node(node(), node()), node()]) == 4

    def test_count_expanded(self):
        assert count_candidates(expand(range(4), 4, 1)) == 50

    def test_max_fan_out(self):
        assert max_fan_out([]) == 0
        assert max_fan_out([node(node(), node(), node())]) == 3
        assert max_fan_out([node(), node()]) == 2

    def test_memory_includes_sequences(self):
        big = Candidate(as_sequence(range(1000)))
        assert memory_usage([big]) >= 8000

    def test_memory_grows(self):
        assert memory_usage([node(), node()]) > memory_usage([node()])


class TestCollectStats:
    def test_fields(self):
        forest = expand(range(4), 4, 1)
        stats = collect_stats(
            forest, sequence_length=4, estimated_count=50,
            estimated_memory_bytes=1000, optimize_steps=3,
        )
        assert stats.actual_count == 50
        assert stats.estimate_error == 0
        assert stats.depth == 1
        assert stats.max_fan_out == 24
        assert stats.memory_bytes > 0
        assert stats.optimize_steps == 3

    def test_as_dict(self):
        stats = TreeStats(sequence_length=8, estimated_count=2, actual_count=2)
        d = stats.as_dict()
        assert d['sequence_length'] == 8
        assert d['estimated_count'] == 2
        assert 'timings_ns' not in d
