"""
1-based (row, column) to flat-offset translation for column-major storage.

Every element, row and column access in the table goes through
column_major_offset(); nothing else computes offsets.
"""

from __future__ import annotations

import numbers

import numpy as np
from numpy.typing import NDArray


def column_major_offset(row, column, M: int):
    """
    Flat offset of (row, column) in a column-major buffer with M rows.

    Accepts scalars or integer arrays (broadcast against each other), so a
    whole row or column can be addressed in one call.
    """
    return (column - 1) * M + (row - 1)


def in_range(index, upper: int) -> bool:
    """True when index is an integer in [1, upper]."""
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        return False
    return 1 <= index <= upper


def row_offsets(row: int, M: int, N: int) -> NDArray[np.intp]:
    """Offsets of the N cells of a row, in column order."""
    return column_major_offset(row, np.arange(1, N + 1), M)


def column_offsets(column: int, M: int) -> NDArray[np.intp]:
    """Offsets of the M cells of a column, in row order."""
    return column_major_offset(np.arange(1, M + 1), column, M)


def is_count(n) -> bool:
    """True when n is a usable row/column count (an integer >= 1)."""
    return in_range(n, n)
