"""
Exception hierarchy for pylinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Only construction and the solver front-end raise; table, determinant
      and matrix operations report range/shape/singularity problems by
      returning None
"""


class PyLinalgError(Exception):
    """Base exception for all pylinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Table dimensions are invalid or inconsistent.

    Raised when a table is constructed with a zero (or otherwise
    non-positive) row or column count, or when a system handed to the
    solver front-end has an unusable shape.
    """
    pass


class NumericalError(PyLinalgError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised by the solver front-end when a system has no unique solution.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: Determinant value that was judged to be zero, if computed
        order: Order of the square matrix, if known
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
        order: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
        self.order = order
