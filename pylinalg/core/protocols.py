"""
Core protocols for pylinalg.

These define structural interfaces shared by the table-backed types and by
the solver backends. We use Protocol (structural typing) rather than ABC
(nominal typing): Matrix and Determinant own a NumericTable instead of
inheriting from it, and TableLike is how code states that it only needs
table-style element access.
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

import numpy as np
from numpy.typing import ArrayLike, NDArray

P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # System type


@runtime_checkable
class TableLike(Protocol):
    """
    Anything that can be read and written like a 1-based, column-major table.

    Implemented by NumericTable and, through forwarding, by Matrix and
    Determinant. Accessors return None for out-of-range indices and setters
    silently ignore them.
    """

    def get_M(self) -> int:
        """Number of rows."""
        ...

    def get_N(self) -> int:
        """Number of columns."""
        ...

    def get_element(self, row: int, column: int) -> Any | None:
        ...

    def set_element(self, row: int, column: int, value: Any) -> None:
        ...

    def get_row(self, row: int) -> NDArray[Any] | None:
        ...

    def set_row(self, row: int, values: ArrayLike) -> None:
        ...

    def get_column(self, column: int) -> NDArray[Any] | None:
        ...

    def set_column(self, column: int, values: ArrayLike) -> None:
        ...

    def to_array(self) -> NDArray[np.number[Any]]:
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for solver backends.

    Each backend knows how to take a linear system and produce a parameter
    payload. Backends are stateless, which makes them easy to test and swap.

    Type Parameters:
        D: The system type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_cramer', 'cpu_inverse'
        """
        ...

    def solve(self, system: D) -> 'Result[P]':
        """
        Execute the computation.

        Raises:
            SingularMatrixError: If the system has no unique solution
            DimensionError: If the system shape is unusable
        """
        ...
