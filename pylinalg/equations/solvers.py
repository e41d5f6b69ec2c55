"""
Solver dispatch for linear systems.

solve() is the raising front-end over LinearEquations: where the library
layer leaves an empty solution, solve() raises with diagnostics.
"""

from __future__ import annotations

import warnings
from typing import Literal
from numpy.typing import ArrayLike

from pylinalg.core.exceptions import ValidationError
from pylinalg.determinant import DeterminantMethod
from pylinalg.equations.linear_equations import LinearEquations
from pylinalg.equations.solution import LinearSolution
from pylinalg.equations.backends.cpu import CramerBackend, InverseBackend


SolveMethod = Literal['cramer', 'inverse']


def _ensure_system(system: ArrayLike | LinearEquations) -> LinearEquations:
    """Convert a row-major augmented array to LinearEquations if needed."""
    if isinstance(system, LinearEquations):
        return system
    return LinearEquations.from_array(system)


def _get_backend(
    method: SolveMethod,
    determinant_method: DeterminantMethod,
    max_workers: int | None,
):
    """Select backend based on method."""
    if method == 'cramer':
        return CramerBackend(determinant_method=determinant_method)
    if method == 'inverse':
        return InverseBackend(max_workers=max_workers)
    raise ValidationError(
        f"Unknown method: {method!r}. Must be 'cramer' or 'inverse'."
    )


def solve(
    system: ArrayLike | LinearEquations,
    *,
    method: SolveMethod = 'cramer',
    determinant_method: DeterminantMethod = 'general',
    max_workers: int | None = None,
) -> LinearSolution:
    """
    Solve a square linear system.

    Parameters
    ----------
    system : LinearEquations or array-like
        The system, or a row-major augmented array [A | b].
    method : str
        'cramer' (Cramer's rule) or 'inverse' (inverse-matrix product).
    determinant_method : str
        For 'cramer': 'general' (permutation expansion, default) or
        'elimination'.
    max_workers : int, optional
        For 'inverse': thread pool size of the cofactor computation.

    Returns
    -------
    LinearSolution

    Raises
    ------
    ValidationError
        Unknown method.
    DimensionError
        Fewer than 2 equations, or a non-square coefficient block.
    SingularMatrixError
        The coefficient matrix is singular.
    """
    system = _ensure_system(system)
    backend = _get_backend(method, determinant_method, max_workers)
    result = backend.solve(system)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    return LinearSolution(_result=result, _system=system)
