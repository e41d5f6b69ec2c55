"""
Shared checks and diagnostics for the solver backends.
"""

from __future__ import annotations

from pylinalg.core.compute.tolerances import hadamard_bound
from pylinalg.core.exceptions import DimensionError, SingularMatrixError
from pylinalg.determinant import Determinant, DeterminantMethod
from pylinalg.equations.linear_equations import LinearEquations

# |det| / Hadamard bound below this is reported as nearly singular
NEAR_SINGULAR_RATIO = 1e-10


def check_system(system: LinearEquations) -> Determinant:
    """
    Verify the system can have a unique solution and return its
    coefficient determinant.

    Raises:
        DimensionError: If there is at most one equation, or the coefficient
            block is not square
        SingularMatrixError: If the coefficient determinant is zero
    """
    M, n = system.get_M(), system.n_unknowns
    if M <= 1:
        raise DimensionError(f"system: need at least 2 equations, got {M}")

    coefficient = system.coefficient_determinant()
    if coefficient is None:
        raise DimensionError(
            f"system: coefficient block must be square, got {M} equations "
            f"in {n} unknowns"
        )

    if coefficient.is_zero():
        raise SingularMatrixError(
            f"Coefficient matrix is singular (order {n}); the system has no "
            f"unique solution.",
            matrix_name='A',
            determinant=coefficient.elimination_calculate(),
            order=n,
        )
    return coefficient


def conditioning_warnings(
    coefficient: Determinant,
    method: DeterminantMethod = 'elimination',
) -> tuple[float, float, list[str]]:
    """
    Determinant value, its ratio to the Hadamard bound, and any warnings.

    A ratio near zero means the rows are close to linearly dependent.
    """
    value = coefficient.calculate(method)
    bound = hadamard_bound(coefficient.to_array().astype(float))
    ratio = abs(value) / bound if bound > 0 else 0.0

    warnings_list: list[str] = []
    if ratio < NEAR_SINGULAR_RATIO:
        warnings_list.append(
            f"Coefficient matrix is nearly singular: |det| / Hadamard bound = {ratio:.3e}"
        )
    return value, ratio, warnings_list
