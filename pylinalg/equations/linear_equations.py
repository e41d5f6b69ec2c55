"""
LinearEquations: an augmented system solved by Cramer's rule or by inverse.

The system is an M x N NumericTable whose first N-1 columns are the
coefficients and whose last column holds the constants. Solving is a
library-level operation: a singular or non-square system leaves the
solution empty rather than raising. solve() in pylinalg.equations.solvers
is the raising front-end.
"""

from __future__ import annotations

from typing import TextIO
import numpy as np
from numpy.typing import ArrayLike, DTypeLike

from pylinalg.core.validation import check_1d, check_2d, check_array
from pylinalg.core.exceptions import DimensionError
from pylinalg.determinant import Determinant, DeterminantMethod
from pylinalg.matrix import Matrix
from pylinalg.table import NumericTable
from pylinalg.table._index import in_range


class LinearEquations:
    """
    M equations in N-1 unknowns, stored as an augmented column-major table.

    Construction:
        LinearEquations()                              # 1x2, [1, 0]
        LinearEquations(2, 3, [3, 2, -2, 1, 12, 1])    # 3x - 2y = 12, 2x + y = 1
        LinearEquations.from_coefficients([[3, -2], [2, 1]], [12, 1])

    The solution is empty until calculate() or calculate_inverse() runs,
    and stays empty when the coefficient block is not square or is singular.
    """

    def __init__(
        self,
        M: int = 1,
        N: int = 2,
        data: ArrayLike = (1, 0),
        *,
        dtype: DTypeLike = np.float64,
    ):
        self._data = NumericTable(M, N, data, dtype=dtype)
        self._x: list[float] = []

    @classmethod
    def _wrap(cls, table: NumericTable) -> LinearEquations:
        system = cls.__new__(cls)
        system._data = table
        system._x = []
        return system

    @classmethod
    def from_array(cls, augmented: ArrayLike, *, dtype: DTypeLike = np.float64) -> LinearEquations:
        """Build from a row-major augmented array [A | b]."""
        return cls._wrap(NumericTable.from_array(augmented, dtype=dtype))

    @classmethod
    def from_coefficients(
        cls,
        coefficients: ArrayLike,
        constants: ArrayLike,
        *,
        dtype: DTypeLike = np.float64,
    ) -> LinearEquations:
        """
        Build from a row-major coefficient array A and a constants vector b.

        Raises:
            DimensionError: If A is not 2-D, b is not 1-D, or their row
                counts differ
        """
        A = check_array(coefficients, "coefficients", dtype)
        b = check_array(constants, "constants", dtype)
        check_2d(A, "coefficients")
        check_1d(b, "constants")
        if A.shape[0] != b.shape[0]:
            raise DimensionError(
                f"Inconsistent lengths: coefficients={A.shape[0]}, constants={b.shape[0]}"
            )
        return cls.from_array(np.column_stack([A, b]), dtype=dtype)

    # --- shape ---

    def get_M(self) -> int:
        """Number of equations."""
        return self._data.get_M()

    def get_N(self) -> int:
        """Number of columns of the augmented table (unknowns + 1)."""
        return self._data.get_N()

    @property
    def n_unknowns(self) -> int:
        return self._data.get_N() - 1

    @property
    def table(self) -> NumericTable:
        """Copy of the augmented table."""
        return self._data.copy()

    def copy(self) -> LinearEquations:
        """Copy of the system; the solution is copied too."""
        system = LinearEquations._wrap(self._data.copy())
        system._x = list(self._x)
        return system

    # --- pieces of the system ---

    def coefficient_determinant(self) -> Determinant | None:
        """Determinant of the coefficient block, or None if it is not square."""
        n = self.n_unknowns
        if n < 1 or n != self.get_M():
            return None
        coefficient = Determinant(n, [0], dtype=self._data.dtype)
        for i in range(1, n + 1):
            coefficient.set_column(i, self._data.get_column(i))
        return coefficient

    def coefficient_matrix(self) -> Matrix | None:
        """M x (N-1) coefficient matrix, or None if there are no unknowns."""
        n = self.n_unknowns
        if n < 1:
            return None
        coefficient = Matrix(self.get_M(), n, [0], dtype=self._data.dtype)
        for i in range(1, n + 1):
            coefficient.set_column(i, self._data.get_column(i))
        return coefficient

    def constants(self) -> Matrix:
        """M x 1 matrix of the constants column."""
        return Matrix(
            self.get_M(), 1, self._data.get_column(self.get_N()), dtype=self._data.dtype
        )

    # --- solving ---

    def calculate(self, method: DeterminantMethod = 'general') -> None:
        """
        Solve by Cramer's rule: x_k = D_k / D.

        D is the coefficient determinant; D_k is D with column k replaced by
        the constants. Each replaced column is restored before the next
        unknown is evaluated.

        No-op when M <= 1. Otherwise the previous solution is discarded and
        the new one stays empty if the coefficient block is not square or
        its determinant is zero.

        Parameters
        ----------
        method : str
            How determinants are evaluated: 'general' (permutation
            expansion, default) or 'elimination'.
        """
        if self.get_M() <= 1:
            return

        self._x = []

        coefficient = self.coefficient_determinant()
        if coefficient is None or coefficient.is_zero():
            return

        augmented = coefficient.copy()
        x = coefficient.calculate(method)
        constants = self._data.get_column(self.get_N())

        for k in range(1, self.n_unknowns + 1):
            augmented.set_column(k, constants)
            self._x.append(augmented.calculate(method) / x)
            augmented.set_column(k, coefficient.get_column(k))

    def calculate_inverse(self, *, max_workers: int | None = None) -> None:
        """
        Solve as x = inverse(A) * b.

        No-op when M <= 1. Otherwise the previous solution is discarded and
        the new one stays empty if A is not invertible.

        Parameters
        ----------
        max_workers : int, optional
            Thread pool size for the cofactor computation.
        """
        if self.get_M() <= 1:
            return

        self._x = []

        coefficient = self.coefficient_matrix()
        if coefficient is None:
            return
        inverse = coefficient.inverse(max_workers=max_workers)
        if inverse is None:
            return

        product = inverse.multiply(self.constants())
        self._x = [float(v) for v in product.get_column(1)]

    # --- solution ---

    def x_n(self, n: int) -> float | None:
        """Value of the n-th unknown (1-based), or None if it has not been solved."""
        if not in_range(n, len(self._x)):
            return None
        return self._x[n - 1]

    @property
    def solution(self) -> tuple[float, ...]:
        return tuple(self._x)

    @property
    def is_solved(self) -> bool:
        return bool(self._x)

    def dump(self, stream: TextIO | None = None) -> str:
        return self._data.dump(stream)

    def __str__(self) -> str:
        return self._data.dump()

    def __repr__(self) -> str:
        return (
            f"LinearEquations(M={self.get_M()}, unknowns={self.n_unknowns}, "
            f"solved={self.is_solved})"
        )
