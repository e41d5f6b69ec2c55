"""
Determinant: a square numeric table and the algorithms that evaluate it.

Two independent evaluation paths are provided and must agree:

    general_calculate()      Leibniz expansion over all N! permutations.
                             O(N! * N); the definitional reference.
    elimination_calculate()  Forward Gaussian elimination, product of the
                             diagonal. O(N^3); the fast path.
"""

from __future__ import annotations

from typing import Literal
import numpy as np
from numpy.typing import ArrayLike, DTypeLike

from pylinalg import sequence
from pylinalg.core.compute.tolerances import elimination_dtype, zero_threshold
from pylinalg.core.exceptions import DimensionError
from pylinalg.core.validation import check_method
from pylinalg.determinant._permutation import (
    lexicographic_permutations,
    permutation_sign,
)
from pylinalg.table import NumericTable, TableForwarding
from pylinalg.table._index import in_range

DeterminantMethod = Literal['elimination', 'general']


class Determinant(TableForwarding):
    """
    Order-N determinant backed by an N x N NumericTable.

    Construction:
        Determinant()                     # order 1, [1]
        Determinant(2, [3, 2, -2, 1])     # column-major: rows [3, -2], [2, 1]
        Determinant.from_array([[3, -2], [2, 1]])

    Data shorter than N*N is zero-filled; excess is ignored.

    Raises:
        DimensionError: If N is not a positive integer
    """

    def __init__(
        self,
        N: int = 1,
        data: ArrayLike = (1,),
        *,
        dtype: DTypeLike = np.float64,
    ):
        self._table = NumericTable(N, N, data, dtype=dtype)

    @classmethod
    def _wrap(cls, table: NumericTable) -> Determinant:
        det = cls.__new__(cls)
        det._table = table
        return det

    @classmethod
    def from_array(cls, array: ArrayLike, *, dtype: DTypeLike = np.float64) -> Determinant:
        """
        Build a determinant from a row-major square 2-D array-like.

        Raises:
            DimensionError: If the array is not square
        """
        table = NumericTable.from_array(array, dtype=dtype)
        if not table.is_square():
            raise DimensionError(
                f"array: determinant requires a square array, got shape {table.shape}"
            )
        return cls._wrap(table)

    # --- order ---

    def get_N(self) -> int:
        """Order of the determinant."""
        return self._table.get_M()

    def get_M(self) -> int:
        """Same as get_N(); a determinant is square."""
        return self._table.get_M()

    def set_N(self, N: int) -> None:
        """Resize both dimensions to N, zero-filling new cells. Ignored if N < 1."""
        self._table.set_M(N)
        self._table.set_N(N)

    # --- copies ---

    def copy(self) -> Determinant:
        return Determinant._wrap(self._table.copy())

    def __copy__(self) -> Determinant:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Determinant:
        return self.copy()

    def release(self) -> Determinant:
        """Move the storage into a new determinant; this one becomes order 1, [1]."""
        return Determinant._wrap(self._table.release())

    def transpose(self) -> Determinant:
        return Determinant._wrap(self._table.transpose())

    # --- minors ---

    def m_i_j(self, i: int, j: int) -> Determinant | None:
        """
        Minor M(i, j): the order N-1 determinant left after deleting row i
        and column j.

        Returns None if i or j is outside [1, N], or if N == 1.
        """
        n = self.get_N()
        if not (in_range(i, n) and in_range(j, n)) or n == 1:
            return None

        result = Determinant(n - 1, [0], dtype=self.dtype)
        for index in range(1, n + 1):
            if index == i:
                continue
            line = np.delete(self.get_row(index), j - 1)
            result.set_row(index if index < i else index - 1, line)
        return result

    def algebraic_complement_minor(self, i: int, j: int) -> Determinant | None:
        """
        Signed minor: M(i, j) with every entry negated when i + j is odd.

        Negating all N-1 rows scales the value by (-1)^(N-1), so the value
        equals the cofactor (-1)^(i+j) M(i, j) only when N is even. The
        cofactor matrix applies the sign to the value instead.

        Returns None under the same conditions as m_i_j().
        """
        result = self.m_i_j(i, j)
        if result is None:
            return None

        if (i + j) % 2 == 1:
            for row in range(1, result.get_N() + 1):
                result.set_row(row, sequence.scale(result.get_row(row), -1))
        return result

    # --- evaluation ---

    def general_calculate(self) -> float:
        """
        Value by the Leibniz (permutation) expansion.

        Every permutation p of 1..N contributes sign(p) * prod a[i, p[i]],
        with the sign taken from the parity of the inversion count. A term
        stops multiplying at its first zero factor.
        """
        n = self.get_N()
        if n == 1:
            return float(self.get_element(1, 1))

        grid = self.to_array()
        total = 0.0
        for permutation in lexicographic_permutations(n):
            term = float(permutation_sign(permutation))
            for row, column in enumerate(permutation, start=1):
                factor = grid[row - 1, column - 1]
                if factor == 0:
                    term = 0.0
                    break
                term *= factor
            total += term
        return float(total)

    def elimination(self) -> int:
        """
        Forward Gaussian elimination in place.

        For each pivot row r1 < N: a zero pivot is replaced by swapping in the
        first row below with a nonzero entry in column r1 (the column is
        skipped if there is none), then every row below gets
        row[r1] * (-a[r2, r1] / a[r1, r1]) added to it. The result is upper
        triangular, not reduced.

        Integer tables store the eliminated rows truncated to integers; use
        elimination_calculate() for their value.

        Returns:
            Number of row swaps performed. Each swap flips the sign of the
            determinant.
        """
        return self._eliminate()

    def _eliminate(self, origin: list[int] | None = None) -> int:
        """
        elimination(), optionally recording row movement.

        origin[k] names the original row now at position k (0-based) and is
        swapped along with the rows.
        """
        n = self.get_N()
        swaps = 0

        for r1 in range(1, n):
            if self.get_element(r1, r1) == 0:
                for r2 in range(r1 + 1, n + 1):
                    if self.get_element(r2, r1) != 0:
                        self.swap_row(r1, r2)
                        if origin is not None:
                            origin[r1 - 1], origin[r2 - 1] = origin[r2 - 1], origin[r1 - 1]
                        swaps += 1
                        break
                else:
                    continue

            pivot_row = self.get_row(r1)
            pivot = pivot_row[r1 - 1]
            for r2 in range(r1 + 1, n + 1):
                row = self.get_row(r2)
                factor = -row[r1 - 1] / pivot
                self.set_row(r2, sequence.add(sequence.scale(pivot_row, factor), row))

        return swaps

    def elimination_calculate(self) -> float:
        """Value by elimination: signed product of the diagonal of an eliminated copy."""
        n = self.get_N()
        if n == 1:
            return float(self.get_element(1, 1))

        work = self._float_copy()
        swaps = work.elimination()

        value = 1.0
        for i in range(1, n + 1):
            value *= work.get_element(i, i)
        return float(-value if swaps % 2 else value)

    def calculate(self, method: DeterminantMethod = 'elimination') -> float:
        """
        Value of the determinant.

        Parameters
        ----------
        method : str
            'elimination' (O(N^3), default) or 'general' (Leibniz, O(N!·N)).

        Raises
        ------
        ValidationError
            If method is unknown.
        """
        check_method(method, ('elimination', 'general'))
        if method == 'general':
            return self.general_calculate()
        return self.elimination_calculate()

    # --- zero tests ---

    def has_proportional_lines(self) -> bool:
        """True when some pair of rows, or some pair of columns, is proportional."""
        n = self.get_N()
        for getter in (self.get_row, self.get_column):
            lines = [getter(k) for k in range(1, n + 1)]
            for a in range(n):
                for b in range(a + 1, n):
                    if sequence.proportional(lines[a], lines[b]):
                        return True
        return False

    def is_zero(self) -> bool:
        """
        True when the determinant vanishes.

        Proportional rows or columns answer immediately. Otherwise an inexact
        copy is eliminated and the determinant is zero when some pivot is
        within rounding of zero: |u[k, k]| <= zero_threshold(s, N), where s is
        the largest magnitude in the original row that ended up at position
        k. The test is relative to each row, so scaling a row never changes
        the answer and ill-conditioned but invertible matrices are not zero.
        """
        n = self.get_N()
        if n == 1:
            return bool(self.get_element(1, 1) == 0)
        if self.has_proportional_lines():
            return True

        work = self._float_copy()
        scales = np.abs(work.to_array()).max(axis=1)
        origin = list(range(n))
        work._eliminate(origin)

        return any(
            abs(work.get_element(k, k)) <= zero_threshold(scales[origin[k - 1]], n, work.dtype)
            for k in range(1, n + 1)
        )

    def _float_copy(self) -> Determinant:
        """Copy whose elements are inexact, so elimination does not truncate."""
        dtype = elimination_dtype(self.dtype)
        if dtype == self.dtype:
            return self.copy()
        return Determinant._wrap(self._table.astype(dtype))

    def __float__(self) -> float:
        return self.elimination_calculate()

    def __repr__(self) -> str:
        return f"Determinant(N={self.get_N()}, dtype={self.dtype})"
