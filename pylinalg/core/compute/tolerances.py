"""
Tolerance tiers for numerical comparison.

Defines precision expectations for comparing computed results:
- EXACT: integer-valued inputs small enough to be represented exactly
- CPU_FP64: permutation expansion vs. elimination in double precision
- CPU_FP64_ILL_CONDITIONED: relaxed, for near-singular inputs

Also provides zero_threshold(), the per-pivot test used to decide that a
determinant is zero, and hadamard_bound() for the near-singular warning.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import DTypeLike


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance pair for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Small integer inputs, every intermediate exactly representable',
)

CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, well-conditioned',
)

# cond > 1e4
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)


def hadamard_bound(rows: np.ndarray) -> float:
    """
    Hadamard's upper bound on |det(A)|: the product of the row norms.

    Used for the near-singular warning, not for deciding that a determinant
    is zero.

    Args:
        rows: Square array (n x n)
    """
    return float(np.prod(np.linalg.norm(rows, axis=1)))


def elimination_dtype(dtype: DTypeLike) -> np.dtype:
    """Element type elimination runs in: inexact types as-is, everything else float64."""
    dt = np.dtype(dtype)
    if np.issubdtype(dt, np.inexact):
        return dt
    return np.dtype(np.float64)


def zero_threshold(scale: float, order: int, dtype: DTypeLike = np.float64) -> float:
    """
    Magnitude below which an eliminated pivot is treated as zero.

    order * eps * scale, where scale is the largest magnitude in the pivot's
    original row and eps belongs to the type elimination runs in (see
    elimination_dtype()). This is the size * eps * magnitude shape of a
    LAPACK-style rank tolerance, applied one row at a time.
    """
    return order * float(np.finfo(elimination_dtype(dtype)).eps) * scale
