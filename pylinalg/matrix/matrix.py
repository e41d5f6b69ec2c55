"""
Matrix: arithmetic, cofactors, inverse and row reduction over a NumericTable.

A Matrix owns its NumericTable and forwards storage access through
TableForwarding instead of subclassing the table. Every operation that can
fail on shape or singularity returns None; only construction raises.
"""

from __future__ import annotations

import numbers
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, DTypeLike

from pylinalg import sequence
from pylinalg.core.compute.tolerances import elimination_dtype
from pylinalg.determinant import Determinant, DeterminantMethod
from pylinalg.matrix._adjoint import cofactor_table
from pylinalg.table import NumericTable, TableForwarding
from pylinalg.table._index import in_range


class Matrix(TableForwarding):
    """
    M x N matrix, stored column-major.

    Construction:
        Matrix()                             # 1x1, [1]
        Matrix(2, 3, [2, 3, 1, -1, 0, 2])    # rows [2, 1, 0], [3, -1, 2]
        Matrix.from_array([[2, 1, 0], [3, -1, 2]])
        Matrix.identity(3)

    Operators:
        a + b      add()
        a * 2.0    scale()   (also 2.0 * a)
        a * b      multiply()
        a @ b      multiply()
        a += b, a *= 2.0, a *= b, a @= b   in place; unchanged when refused

    Raises:
        DimensionError: If M or N is not a positive integer
    """

    def __init__(
        self,
        M: int = 1,
        N: int = 1,
        data: ArrayLike = (1,),
        *,
        dtype: DTypeLike = np.float64,
    ):
        self._table = NumericTable(M, N, data, dtype=dtype)

    @classmethod
    def _wrap(cls, table: NumericTable) -> Matrix:
        matrix = cls.__new__(cls)
        matrix._table = table
        return matrix

    @classmethod
    def from_array(cls, array: ArrayLike, *, dtype: DTypeLike = np.float64) -> Matrix:
        """Build a matrix from a row-major 2-D array-like."""
        return cls._wrap(NumericTable.from_array(array, dtype=dtype))

    @classmethod
    def identity(cls, n: int, *, dtype: DTypeLike = np.float64) -> Matrix:
        """n x n identity matrix."""
        return cls.from_array(np.eye(n), dtype=dtype)

    # --- shape ---

    def get_M(self) -> int:
        return self._table.get_M()

    def get_N(self) -> int:
        return self._table.get_N()

    def set_M(self, M: int) -> None:
        self._table.set_M(M)

    def set_N(self, N: int) -> None:
        self._table.set_N(N)

    @property
    def shape(self) -> tuple[int, int]:
        return self._table.shape

    def is_square(self) -> bool:
        return self._table.is_square()

    def same_shape(self, other: Matrix) -> bool:
        return self._table.same_shape(other._table)

    # --- copies ---

    def copy(self) -> Matrix:
        return Matrix._wrap(self._table.copy())

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Matrix:
        return self.copy()

    def release(self) -> Matrix:
        """Move the storage into a new matrix; this one becomes 1x1, [1]."""
        return Matrix._wrap(self._table.release())

    def transpose(self) -> Matrix:
        return Matrix._wrap(self._table.transpose())

    # --- arithmetic ---

    def add(self, right: Matrix) -> Matrix | None:
        """Elementwise sum, or None if the shapes differ."""
        if not self.same_shape(right):
            return None

        M, N = self.shape
        result = Matrix(M, N, [0], dtype=np.result_type(self.dtype, right.dtype))
        for i in range(1, M + 1):
            result.set_row(i, sequence.add(self.get_row(i), right.get_row(i)))
        return result

    def scale(self, t: Any) -> Matrix | None:
        """
        Every element multiplied by t.

        Returns None when t == 0. Scaling by zero is refused even though it
        is well defined.
        """
        if t == 0:
            return None

        M, N = self.shape
        result = Matrix(M, N, [0], dtype=np.result_type(self.dtype, np.asarray(t).dtype))
        for i in range(1, M + 1):
            result.set_row(i, sequence.scale(self.get_row(i), t))
        return result

    def multiply(self, right: Matrix) -> Matrix | None:
        """
        Matrix product self * right.

        Element (i, j) is the dot product of row i of self and column j of
        right. Returns None unless self.N == right.M.
        """
        if self.get_N() != right.get_M():
            return None

        M, N = self.get_M(), right.get_N()
        result = Matrix(M, N, [0], dtype=np.result_type(self.dtype, right.dtype))
        for i in range(1, M + 1):
            row = self.get_row(i)
            for j in range(1, N + 1):
                result.set_element(i, j, sequence.dot(row, right.get_column(j)))
        return result

    def __add__(self, other: object) -> Matrix | None:
        if isinstance(other, Matrix):
            return self.add(other)
        return NotImplemented

    def __mul__(self, other: object) -> Matrix | None:
        if isinstance(other, Matrix):
            return self.multiply(other)
        if isinstance(other, (numbers.Number, np.number)):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: object) -> Matrix | None:
        if isinstance(other, (numbers.Number, np.number)):
            return self.scale(other)
        return NotImplemented

    def __matmul__(self, other: object) -> Matrix | None:
        if isinstance(other, Matrix):
            return self.multiply(other)
        return NotImplemented

    # In-place forms keep the name bound to this matrix. A refused operation
    # (shape mismatch, scaling by zero) leaves it unchanged.

    def __iadd__(self, other: object) -> Matrix:
        if isinstance(other, Matrix):
            return self._adopt(self.add(other))
        return NotImplemented

    def __imul__(self, other: object) -> Matrix:
        if isinstance(other, Matrix):
            return self._adopt(self.multiply(other))
        if isinstance(other, (numbers.Number, np.number)):
            return self._adopt(self.scale(other))
        return NotImplemented

    def __imatmul__(self, other: object) -> Matrix:
        if isinstance(other, Matrix):
            return self._adopt(self.multiply(other))
        return NotImplemented

    def _adopt(self, result: Matrix | None) -> Matrix:
        if result is not None:
            self._table = result._table
        return self

    # --- determinant, cofactors, inverse ---

    def det(self) -> Determinant | None:
        """Determinant of a copy of the matrix, or None if it is not square."""
        if not self.is_square():
            return None
        return Determinant._wrap(self._table.copy())

    def adjoint(
        self,
        *,
        method: DeterminantMethod = 'elimination',
        max_workers: int | None = None,
    ) -> Matrix | None:
        """
        Cofactor matrix: cell (i, j) holds (-1)^(i+j) M(i, j).

        The cells are computed in parallel on a bounded thread pool and all
        of them are finished before this returns. The result is NOT
        transposed, so it is the transpose of the classical adjugate;
        inverse() applies the transpose.

        Returns None unless the matrix is square and of order > 1.

        Parameters
        ----------
        method : str
            How each minor is evaluated: 'elimination' or 'general'.
        max_workers : int, optional
            Thread pool size. Defaults to the ThreadPoolExecutor default.
        """
        if not self.is_square() or self.get_M() == 1:
            return None
        return Matrix._wrap(
            cofactor_table(self.det(), method=method, max_workers=max_workers)
        )

    def inverse(
        self,
        *,
        method: DeterminantMethod = 'elimination',
        max_workers: int | None = None,
    ) -> Matrix | None:
        """
        Inverse matrix: transpose(adjoint()) * (1 / det).

        Returns None when the matrix is not square or its determinant is
        zero (see Determinant.is_zero()).
        """
        d = self.det()
        if d is None or d.is_zero():
            return None

        value = d.calculate(method)
        if self.get_M() == 1:
            return Matrix(1, 1, [1.0 / value])

        cofactors = self.adjoint(method=method, max_workers=max_workers)
        return cofactors.transpose().scale(1.0 / value)

    # --- elementary operations ---

    def row_times(self, row: int, t: Any) -> None:
        """row <- row * t; ignored if row is out of range."""
        if not in_range(row, self.get_M()):
            return
        self.set_row(row, sequence.scale(self.get_row(row), t))

    def column_times(self, column: int, t: Any) -> None:
        """column <- column * t; ignored if column is out of range."""
        if not in_range(column, self.get_N()):
            return
        self.set_column(column, sequence.scale(self.get_column(column), t))

    def row_add_times_row(self, row_1: int, row_2: int, k: Any) -> None:
        """row_1 <- row_1 + k * row_2; ignored if either row is out of range."""
        M = self.get_M()
        if not (in_range(row_1, M) and in_range(row_2, M)):
            return
        self.set_row(
            row_1, sequence.add(self.get_row(row_1), sequence.scale(self.get_row(row_2), k))
        )

    def column_add_times_column(self, column_1: int, column_2: int, k: Any) -> None:
        """column_1 <- column_1 + k * column_2; ignored if either column is out of range."""
        N = self.get_N()
        if not (in_range(column_1, N) and in_range(column_2, N)):
            return
        self.set_column(
            column_1,
            sequence.add(self.get_column(column_1), sequence.scale(self.get_column(column_2), k)),
        )

    # --- row reduction ---

    def elimination(self) -> None:
        """
        Reduce in place to reduced row-echelon form.

        Forward pass: for each column, the first row at or below the current
        pivot row with a nonzero entry is swapped up, scaled to a leading 1
        and used to clear the entries below it. Backward pass: each pivot
        clears the entries above it.

        Row vectors and column vectors are left unchanged. Integer matrices
        store the scaled rows truncated; reduce a float copy instead.
        """
        if self.get_M() == 1 or self.get_N() == 1:
            return
        self._reduce(tol=0.0)

    def rank(self) -> int:
        """
        Number of pivots in the row-echelon form of a float copy.

        Entries whose magnitude is below max(M, N) * eps * max|a| count as
        zero.
        """
        work = Matrix._wrap(self._table.astype(elimination_dtype(self.dtype)))
        values = np.abs(work.to_array())
        tol = max(self.shape) * float(np.finfo(work.dtype).eps) * float(values.max())
        return len(work._reduce(tol=tol))

    def _reduce(self, tol: float) -> list[tuple[int, int]]:
        """Gauss-Jordan reduction; returns the (row, column) of every pivot."""
        M, N = self.shape
        pivots: list[tuple[int, int]] = []
        r = 1

        for c in range(1, N + 1):
            if r > M:
                break

            found = next(
                (k for k in range(r, M + 1) if abs(self.get_element(k, c)) > tol),
                None,
            )
            if found is None:
                continue

            self.swap_row(r, found)
            self.row_times(r, 1 / self.get_element(r, c))
            self.set_element(r, c, 1)

            for k in range(r + 1, M + 1):
                self.row_add_times_row(k, r, -self.get_element(k, c))
                self.set_element(k, c, 0)

            pivots.append((r, c))
            r += 1

        for r, c in reversed(pivots):
            for k in range(r - 1, 0, -1):
                self.row_add_times_row(k, r, -self.get_element(k, c))
                self.set_element(k, c, 0)

        return pivots

    def __repr__(self) -> str:
        return f"Matrix(M={self.get_M()}, N={self.get_N()}, dtype={self.dtype})"
