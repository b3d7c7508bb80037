"""Candidate data model, accumulators and resource budget."""

from blockshuffle.core.candidate import (
    ELEMENT_DTYPE,
    UNSCORED,
    Candidate,
    StepCounter,
    as_sequence,
    iter_candidates,
)
from blockshuffle.core.budget import ResourceBudget

__all__ = [
    'ELEMENT_DTYPE',
    'UNSCORED',
    'Candidate',
    'StepCounter',
    'as_sequence',
    'iter_candidates',
    'ResourceBudget',
]
