"""
Tests for the resource budget.
"""

import pytest
from blockshuffle.core.budget import ResourceBudget
from blockshuffle.errors import InvalidConfig, ResourceExceeded, ShuffleError


class TestResourceBudget:
    def test_default_ceiling(self):
        budget = ResourceBudget()
        assert budget.max_candidates == ResourceBudget.DEFAULT_MAX_CANDIDATES
        assert budget.max_memory_bytes is None

    def test_estimate_within_budget(self):
        ResourceBudget(max_candidates=100).check_estimate(100)

    def test_estimate_over_count(self):
        with pytest.raises(ResourceExceeded) as info:
            ResourceBudget(max_candidates=100).check_estimate(101)
        assert info.value.resource == 'candidates'
        assert info.value.requested == 101
        assert info.value.limit == 100

    def test_estimate_over_memory(self):
        budget = ResourceBudget(max_candidates=None, max_memory_bytes=1024)
        with pytest.raises(ResourceExceeded) as info:
            budget.check_estimate(10, estimated_memory=2048)
        assert info.value.resource == 'memory_bytes'

    def test_memory_unknown_is_skipped(self):
        ResourceBudget(max_memory_bytes=1).check_estimate(1)

    def test_running(self):
        budget = ResourceBudget(max_candidates=3)
        budget.check_running(3)
        with pytest.raises(ResourceExceeded):
            budget.check_running(4)

    def test_unlimited(self):
        budget = ResourceBudget.unlimited()
        budget.check_estimate(10 ** 30, estimated_memory=10 ** 30)
        budget.check_running(10 ** 30)

    def test_huge_estimate_message(self):
        with pytest.raises(ResourceExceeded) as info:
            ResourceBudget().check_estimate(10 ** 5000)
        assert str(info.value) == 'candidates budget exceeded: 1e5000 > 5000000'
        assert info.value.requested == 10 ** 5000

    def test_huge_memory_estimate_logged(self, caplog):
        budget = ResourceBudget(max_candidates=None, max_memory_bytes=1024)
        with pytest.raises(ResourceExceeded):
            budget.check_estimate(1, estimated_memory=10 ** 5000)
        assert 'GiB exceeds memory budget of 1.00 KiB' in caplog.text

    def test_error_hierarchy(self):
        with pytest.raises(MemoryError):
            ResourceBudget(max_candidates=1).check_running(2)
        with pytest.raises(ShuffleError):
            ResourceBudget(max_candidates=1).check_running(2)

    @pytest.mark.parametrize('kwargs', [
        {'max_candidates': 0},
        {'max_memory_bytes': -1},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(InvalidConfig):
            ResourceBudget(**kwargs)
