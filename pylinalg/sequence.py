"""
Elementwise algebra over equal-length numeric sequences.

Every binary operation requires both operands to have the same length and
returns None otherwise. Results are fresh 1-D numpy arrays; inputs are
never modified.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray


def _pair(a: ArrayLike, b: ArrayLike) -> tuple[NDArray[Any], NDArray[Any]] | None:
    """Flatten both operands, or None when their lengths differ."""
    left = np.ravel(np.asarray(a))
    right = np.ravel(np.asarray(b))
    if left.shape != right.shape:
        return None
    return left, right


def add(a: ArrayLike, b: ArrayLike) -> NDArray[Any] | None:
    """Elementwise a + b."""
    pair = _pair(a, b)
    if pair is None:
        return None
    left, right = pair
    return left + right


def scale(seq: ArrayLike, k: Any) -> NDArray[Any]:
    """Every element of seq multiplied by k."""
    return np.ravel(np.asarray(seq)) * k


def dot(a: ArrayLike, b: ArrayLike) -> Any | None:
    """Sum of elementwise products."""
    pair = _pair(a, b)
    if pair is None:
        return None
    left, right = pair
    return np.dot(left, right)


def elementwise_product(a: ArrayLike, b: ArrayLike) -> NDArray[Any] | None:
    """Elementwise a * b. Also exported as cross()."""
    pair = _pair(a, b)
    if pair is None:
        return None
    left, right = pair
    return left * right


cross = elementwise_product


def equals(a: ArrayLike, b: ArrayLike) -> bool | None:
    """True when every pair of elements compares equal."""
    pair = _pair(a, b)
    if pair is None:
        return None
    left, right = pair
    return bool(np.all(left == right))


def proportional(
    a: ArrayLike,
    b: ArrayLike,
    *,
    rtol: float = 0.0,
    atol: float = 0.0,
) -> bool | None:
    """
    True when a and b are scalar multiples of each other.

    The ratio of the first pair is compared against every other pair, written
    as a cross-multiplication so a zero leading element needs no division:
    with k the first index where either operand is nonzero, the sequences
    are proportional iff a[i] * b[k] == b[i] * a[k] for all i. Two all-zero
    sequences are proportional.

    Args:
        a, b: Sequences of equal length
        rtol, atol: Comparison tolerances; exact by default

    Returns:
        True/False, or None when the lengths differ
    """
    pair = _pair(a, b)
    if pair is None:
        return None
    left, right = pair

    nonzero = np.flatnonzero((left != 0) | (right != 0))
    if nonzero.size == 0:
        return True
    k = nonzero[0]

    return bool(np.allclose(left * right[k], right * left[k], rtol=rtol, atol=atol))
