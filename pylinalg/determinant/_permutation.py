"""
Permutation helpers for the Leibniz determinant expansion.

Indices handed to these functions are 0-based positions within a sequence;
the sequences themselves usually hold 1-based column numbers.
"""

from __future__ import annotations

import itertools
from typing import Iterator, Sequence


def inversion_number(seq: Sequence, index: int) -> int:
    """Number of elements before seq[index] that compare greater than it."""
    value = seq[index]
    return sum(1 for earlier in seq[:index] if value < earlier)


def inversion_count(seq: Sequence) -> int:
    """Total number of out-of-order pairs in seq."""
    return sum(inversion_number(seq, k) for k in range(1, len(seq)))


def permutation_sign(seq: Sequence) -> int:
    """+1 for an even number of inversions, -1 for an odd one."""
    return -1 if inversion_count(seq) % 2 else 1


def lexicographic_permutations(n: int) -> Iterator[tuple[int, ...]]:
    """All permutations of 1..n, starting from the identity, in lexicographic order."""
    return itertools.permutations(range(1, n + 1))
