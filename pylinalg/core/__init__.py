"""
Core infrastructure for pylinalg.

This module provides shared abstractions and utilities used by the table,
determinant, matrix and equations submodules.

Key components:
    protocols: TableLike, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerances, parallel-for, reader-writer lock
"""

from pylinalg.core.protocols import TableLike, Backend
from pylinalg.core.result import Result
from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "TableLike",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
]
