"""
NumericTable: column-major 2-D container with 1-based, bounds-checked access.

This is the storage substrate for Determinant and Matrix. Construction is the
only place that raises; every accessor answers an out-of-range index with
None and every mutator silently ignores one. Callers that need to know
whether a set happened must check the postcondition themselves.

Each instance carries a ReadWriteLock: readers share it, writers take it
exclusively. Composite operations (swap, resize, transpose) hold it for the
whole operation. Atomic multi-step updates across several calls need
external synchronization.
"""

from __future__ import annotations

from typing import Any, TextIO
import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pylinalg.core.compute.locking import ReadWriteLock
from pylinalg.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_dimension,
    check_finite,
)
from pylinalg.table._index import (
    column_major_offset,
    column_offsets,
    in_range,
    is_count,
    row_offsets,
)


class NumericTable:
    """
    M x N table of numbers stored column-major.

    Construction:
        NumericTable()                          # 1x1 table [1]
        NumericTable(2, 3, [1, 2, 3, 4])        # columns [1,2], [3,4], [0,0]
        NumericTable.from_array([[1, 3], [2, 4]])

    ``data`` is read column-major. Missing trailing elements are zero-filled
    and excess elements are ignored.

    Raises:
        DimensionError: If M or N is not a positive integer
        ValidationError: If data is not numeric or holds NaN or Inf
    """

    def __init__(
        self,
        M: int = 1,
        N: int = 1,
        data: ArrayLike = (1,),
        *,
        dtype: DTypeLike = np.float64,
    ):
        M = check_dimension(M, "M")
        N = check_dimension(N, "N")

        values = np.atleast_1d(check_array(data, "data", dtype))
        check_1d(values, "data")
        check_finite(values, "data")

        buffer = np.zeros(M * N, dtype=values.dtype)
        n = min(values.size, M * N)
        buffer[:n] = values[:n]

        self._M = M
        self._N = N
        self._data = buffer
        self._lock = ReadWriteLock()

    @classmethod
    def _from_buffer(cls, M: int, N: int, buffer: NDArray[Any]) -> NumericTable:
        """Wrap an already validated column-major buffer of length M*N."""
        table = cls.__new__(cls)
        table._M = M
        table._N = N
        table._data = buffer
        table._lock = ReadWriteLock()
        return table

    @classmethod
    def from_array(cls, array: ArrayLike, *, dtype: DTypeLike = np.float64) -> NumericTable:
        """
        Build a table from a row-major 2-D array-like.

        Parameters
        ----------
        array : array-like
            2-D data, ``array[i][j]`` becomes element (i+1, j+1).
        dtype : numpy dtype
            Element type of the table.
        """
        arr = check_array(array, "array", dtype)
        check_2d(arr, "array")
        check_finite(arr, "array")
        M = check_dimension(arr.shape[0], "M")
        N = check_dimension(arr.shape[1], "N")
        return cls._from_buffer(M, N, arr.ravel(order='F').copy())

    # --- shape ---

    def get_M(self) -> int:
        """Number of rows."""
        return self._M

    def get_N(self) -> int:
        """Number of columns."""
        return self._N

    @property
    def shape(self) -> tuple[int, int]:
        return (self._M, self._N)

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def same_shape(self, other: NumericTable) -> bool:
        """True when both tables have the same number of rows and columns."""
        return self.shape == other.shape

    def is_square(self) -> bool:
        return self._M == self._N

    def set_M(self, M: int) -> None:
        """
        Resize to M rows. New rows are zero; rows beyond M are dropped.

        Ignored when M is not a positive integer. Equivalent to transposing,
        resizing the columns and transposing back, done in one copy.
        """
        if not is_count(M):
            return

        with self._lock.write():
            grid = self._grid()
            resized = np.zeros((M, self._N), dtype=self._data.dtype, order='F')
            keep = min(M, self._M)
            resized[:keep, :] = grid[:keep, :]
            self._data = resized.ravel(order='F')
            self._M = M

    def set_N(self, N: int) -> None:
        """
        Resize to N columns. New columns are zero; columns beyond N are dropped.

        Ignored when N is not a positive integer.
        """
        if not is_count(N):
            return

        with self._lock.write():
            resized = np.zeros(self._M * N, dtype=self._data.dtype)
            keep = min(resized.size, self._data.size)
            resized[:keep] = self._data[:keep]
            self._data = resized
            self._N = N

    # --- elements ---

    def get_element(self, row: int, column: int) -> Any | None:
        """Element (row, column), or None if either index is out of range."""
        with self._lock.read():
            if not (in_range(row, self._M) and in_range(column, self._N)):
                return None
            return self._data[column_major_offset(row, column, self._M)]

    def set_element(self, row: int, column: int, value: Any) -> None:
        """Overwrite element (row, column); ignored if either index is out of range."""
        with self._lock.write():
            if not (in_range(row, self._M) and in_range(column, self._N)):
                return
            self._data[column_major_offset(row, column, self._M)] = value

    # --- rows and columns ---

    def get_row(self, row: int) -> NDArray[Any] | None:
        """Copy of the N elements of a row, or None if row is out of range."""
        with self._lock.read():
            if not in_range(row, self._M):
                return None
            return self._data[row_offsets(row, self._M, self._N)]

    def set_row(self, row: int, values: ArrayLike) -> None:
        """
        Overwrite a row.

        Ignored when row is out of range or values does not hold exactly
        N elements.
        """
        line = np.asarray(values)
        with self._lock.write():
            if not in_range(row, self._M) or line.ndim != 1 or line.size != self._N:
                return
            self._data[row_offsets(row, self._M, self._N)] = line

    def get_column(self, column: int) -> NDArray[Any] | None:
        """Copy of the M elements of a column, or None if column is out of range."""
        with self._lock.read():
            if not in_range(column, self._N):
                return None
            return self._data[column_offsets(column, self._M)]

    def set_column(self, column: int, values: ArrayLike) -> None:
        """
        Overwrite a column.

        Ignored when column is out of range or values does not hold exactly
        M elements.
        """
        line = np.asarray(values)
        with self._lock.write():
            if not in_range(column, self._N) or line.ndim != 1 or line.size != self._M:
                return
            self._data[column_offsets(column, self._M)] = line

    def swap_row(self, i: int, j: int) -> None:
        """Exchange rows i and j; ignored if either index is out of range."""
        with self._lock.write():
            if not (in_range(i, self._M) and in_range(j, self._M)):
                return
            a = row_offsets(i, self._M, self._N)
            b = row_offsets(j, self._M, self._N)
            self._data[np.concatenate([a, b])] = self._data[np.concatenate([b, a])]

    def swap_column(self, i: int, j: int) -> None:
        """Exchange columns i and j; ignored if either index is out of range."""
        with self._lock.write():
            if not (in_range(i, self._N) and in_range(j, self._N)):
                return
            a = column_offsets(i, self._M)
            b = column_offsets(j, self._M)
            self._data[np.concatenate([a, b])] = self._data[np.concatenate([b, a])]

    # --- whole-table operations ---

    def transpose(self) -> NumericTable:
        """New N x M table with (i, j) -> (j, i). self is not modified."""
        with self._lock.read():
            flipped = self._grid().T
            return NumericTable._from_buffer(self._N, self._M, flipped.ravel(order='F').copy())

    def to_array(self) -> NDArray[Any]:
        """Row-major (M, N) numpy copy of the table."""
        with self._lock.read():
            return np.array(self._grid(), order='C')

    def astype(self, dtype: DTypeLike) -> NumericTable:
        """Copy of the table converted to another element type."""
        with self._lock.read():
            return NumericTable._from_buffer(self._M, self._N, self._data.astype(dtype))

    def copy(self) -> NumericTable:
        """Independent copy with its own storage and lock."""
        with self._lock.read():
            return NumericTable._from_buffer(self._M, self._N, self._data.copy())

    def release(self) -> NumericTable:
        """
        Move the storage into a new table.

        The returned table owns the data; this table is reset to the 1x1
        table [1] so it stays valid after the move.
        """
        with self._lock.write():
            moved = NumericTable._from_buffer(self._M, self._N, self._data)
            self._data = np.ones(1, dtype=moved.dtype)
            self._M = self._N = 1
            return moved

    def _grid(self) -> NDArray[Any]:
        """(M, N) view of the buffer. Caller must hold the lock."""
        return self._data.reshape((self._M, self._N), order='F')

    # --- debug dump ---

    def dump(self, stream: TextIO | None = None) -> str:
        """
        Debug text dump.

        Format: ``matrix {M} {N}`` then one line per row with the elements
        separated by spaces, every line newline-terminated. Written to
        stream when one is given; the text is always returned.
        """
        with self._lock.read():
            grid = self._grid().tolist()
        lines = [f"matrix {self._M} {self._N}\n"]
        lines.extend(" ".join(str(v) for v in row) + "\n" for row in grid)
        text = "".join(lines)
        if stream is not None:
            stream.write(text)
        return text

    # --- dunder protocol ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumericTable):
            return NotImplemented
        if not self.same_shape(other):
            return False
        return bool(np.array_equal(self.to_array(), other.to_array()))

    __hash__ = None  # mutable

    def __copy__(self) -> NumericTable:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> NumericTable:
        return self.copy()

    def __getstate__(self) -> dict[str, Any]:
        with self._lock.read():
            return {'M': self._M, 'N': self._N, 'data': self._data.copy()}

    def __setstate__(self, state: dict[str, Any]) -> None:
        self._M = state['M']
        self._N = state['N']
        self._data = state['data']
        self._lock = ReadWriteLock()

    def __str__(self) -> str:
        return self.dump()

    def __repr__(self) -> str:
        return f"NumericTable(M={self._M}, N={self._N}, dtype={self._data.dtype})"
