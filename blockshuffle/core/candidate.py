"""
Candidate Data Model
====================

A Candidate pairs one reordering of the input (its Sequence) with a
fitness score and the candidates refined from it.

Memory layout:
    Each Sequence is a contiguous int64 numpy buffer holding original
    positions, so a candidate costs ``8 * len(sequence)`` bytes of payload
    plus a small fixed node overhead. With millions of candidates this is
    the dominant cost of the whole tree.

Ownership is strictly hierarchical: a Candidate owns its ``children``
list exclusively, and re-parenting moves references between lists
without copying any Sequence.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Sequence as SequenceT

import numpy as np

from blockshuffle.errors import InvalidConfig

# Fitness of a candidate the external evaluator has not scored yet.
UNSCORED = float('inf')

ELEMENT_DTYPE = np.int64


def as_sequence(elements: Iterable[int]) -> np.ndarray:
    """
    Coerce a run of element tokens to the Sequence representation.

    Elements are integer positions. Non-integer input would be truncated
    or fail to convert, so it raises InvalidConfig.
    """
    if isinstance(elements, np.ndarray):
        arr = elements
    else:
        try:
            arr = np.asarray(list(elements))
        except (TypeError, ValueError) as exc:
            raise InvalidConfig(f"elements must be integers: {exc}") from exc
        if arr.size == 0:
            return np.empty(0, dtype=ELEMENT_DTYPE)

    if arr.ndim != 1:
        raise InvalidConfig(f"elements must form a flat sequence, got {arr.ndim} dimensions")
    if not np.issubdtype(arr.dtype, np.integer):
        raise InvalidConfig(f"elements must be integers, got dtype {arr.dtype}")
    return arr.astype(ELEMENT_DTYPE, copy=False)


@dataclass(eq=False)
class Candidate:
    """
    One node of the candidate tree.

    Candidates compare and hash by identity: two structurally identical
    reorderings reached through different generation paths stay distinct.

    Usage:
        >>> root = Candidate(as_sequence([2, 3, 0, 1]))
        >>> root.apply(['a', 'b', 'c', 'd'])
        ['c', 'd', 'a', 'b']
        >>> root.is_leaf
        True
    """
    sequence: np.ndarray
    fitness: float = UNSCORED
    children: List['Candidate'] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def is_scored(self) -> bool:
        return self.fitness != UNSCORED

    def apply(self, items: SequenceT) -> list:
        """Reorder ``items`` (e.g. source lines) by this candidate's positions."""
        return [items[i] for i in self.sequence]

    def walk(self) -> Iterator['Candidate']:
        """Yield this candidate and all of its descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def __len__(self) -> int:
        return len(self.sequence)

    def __repr__(self):
        if len(self.sequence) <= 8:
            seq = ', '.join(str(int(e)) for e in self.sequence)
        else:
            head = ', '.join(str(int(e)) for e in self.sequence[:5])
            seq = f'{head}, ...'
        score = 'unscored' if not self.is_scored else f'{self.fitness:.4g}'
        return f'Candidate([{seq}], {score}, children={len(self.children)})'


def iter_candidates(candidates: List[Candidate]) -> Iterator[Candidate]:
    """Yield every candidate reachable from a forest, in pre-order."""
    for candidate in candidates:
        yield from candidate.walk()


@dataclass
class StepCounter:
    """
    Accumulator passed by reference through a recursion.

    Replaces a threaded mutable integer: the Expander counts generated
    candidates with it and the Optimizer counts processed sibling lists.
    """
    count: int = 0

    def increment(self, amount: int = 1) -> int:
        self.count += amount
        return self.count

    def reset(self):
        self.count = 0
