"""
Tests for the recursive Expander.

Validates:
  - Every generated Sequence is a permutation of the input
  - Each level holds k! chunk orderings with intra-chunk order preserved
  - Terminal conditions produce leaves
  - Progress is reported once per candidate
  - Invalid sizes, non-integer elements and budget overruns fail before
    a forest is returned
"""

from collections import Counter

import numpy as np
import pytest
from blockshuffle.core.budget import ResourceBudget
from blockshuffle.core.candidate import StepCounter, iter_candidates
from blockshuffle.errors import InvalidConfig, ResourceExceeded
from blockshuffle.generation.expander import Expander, expand


class TestExpandShape:
    def test_two_chunks_at_min_four(self):
        forest = expand(range(8), 8, 4)
        assert len(forest) == 2
        assert all(c.is_leaf for c in forest)

    def test_top_level_orderings(self):
        forest = expand(range(8), 8, 4)
        assert forest[0].sequence.tolist() == [0, 1, 2, 3, 4, 5, 6, 7]
        assert forest[1].sequence.tolist() == [4, 5, 6, 7, 0, 1, 2, 3]

    def test_factorial_branching(self):
        forest = expand(range(4), 4, 1)
        assert len(forest) == 2
        for candidate in forest:
            assert len(candidate.children) == 24
            assert all(child.is_leaf for child in candidate.children)

    def test_odd_length(self):
        forest = expand([0, 1, 2, 3, 4], 5, 1)
        # chunks of 2: [0, 1], [2, 3], [4]
        assert len(forest) == 6
        assert all(len(c.children) == 120 for c in forest)

    def test_intra_chunk_order_preserved(self):
        forest = expand(range(4), 4, 1)
        for candidate in forest:
            seq = candidate.sequence.tolist()
            chunks = [seq[0:2], seq[2:4]]
            assert sorted(chunks) == [[0, 1], [2, 3]]

    def test_block_size_defaults_to_length(self):
        assert len(expand(range(8), min_block_size=4)) == 2

    def test_block_size_one_is_terminal(self):
        assert expand([0, 1, 2], 1, 1) == []


class TestPermutationInvariant:
    @pytest.mark.parametrize('sequence', [
        [10, 3, 7, 7, 1],
        [0, 1, 2, 3],
        [5, 5, 5, 2, 9, 4],
    ])
    def test_every_sequence_is_permutation(self, sequence):
        forest = expand(sequence, len(sequence), 1)
        expected = Counter(sequence)
        for candidate in iter_candidates(forest):
            assert len(candidate.sequence) == len(sequence)
            assert Counter(candidate.sequence.tolist()) == expected

    def test_input_not_mutated(self):
        sequence = [3, 2, 1, 0]
        expand(sequence, 4, 1)
        assert sequence == [3, 2, 1, 0]


class TestProgress:
    def test_called_once_per_candidate(self):
        calls = []
        counter = StepCounter()
        forest = expand(
            range(4), 4, 1,
            progress=lambda count, total: calls.append((count, total)),
            counter=counter,
            estimated_total=50,
        )
        assert [count for count, _ in calls] == list(range(1, 51))
        assert all(total == 50 for _, total in calls)
        assert counter.count == 50
        assert sum(1 for _ in iter_candidates(forest)) == 50

    def test_counter_shared_across_runs(self):
        counter = StepCounter()
        expand(range(8), 8, 4, counter=counter)
        expand(range(8), 8, 4, counter=counter)
        assert counter.count == 4


class TestExpandErrors:
    @pytest.mark.parametrize('sequence, block_size, min_block_size', [
        ([0, 1], 0, 1),
        ([0, 1], 2, 0),
        ([], 1, 1),
        ([0, 1], 2, 3),
    ])
    def test_invalid_config(self, sequence, block_size, min_block_size):
        calls = []
        with pytest.raises(InvalidConfig):
            expand(sequence, block_size, min_block_size,
                   progress=lambda count, total: calls.append(count))
        assert calls == []

    def test_float_elements_rejected(self):
        with pytest.raises(InvalidConfig):
            expand(np.array([0.5, 1.7, 2.2, 3.9]), 4, 2)

    def test_string_elements_rejected(self):
        with pytest.raises(InvalidConfig):
            expand(['a', 'b'], 2, 1)

    def test_running_budget(self):
        counter = StepCounter()
        with pytest.raises(ResourceExceeded) as info:
            expand(range(4), 4, 1, counter=counter,
                   budget=ResourceBudget(max_candidates=10))
        assert info.value.resource == 'candidates'
        assert info.value.limit == 10
        assert counter.count == 11

    def test_budget_exact_fit(self):
        forest = expand(range(4), 4, 1, budget=ResourceBudget(max_candidates=50))
        assert sum(1 for _ in iter_candidates(forest)) == 50


class TestExpanderClass:
    def test_reusable(self):
        expander = Expander(min_block_size=4)
        first = expander.expand(range(8))
        second = expander.expand(range(8))
        assert len(first) == len(second) == 2
        assert expander.counter.count == 4
        assert first[0] is not second[0]
