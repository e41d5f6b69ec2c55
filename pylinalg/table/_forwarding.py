"""
Forwarding layer for types that own a NumericTable.

Determinant and Matrix hold their storage as a ``_table`` attribute rather
than inheriting from NumericTable. TableForwarding gives them the shared
element, row and column accessors so both satisfy the TableLike protocol.
Shape getters and setters are not forwarded: each owner defines what its
dimensions mean.
"""

from __future__ import annotations

from typing import Any, TextIO
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.table.numeric_table import NumericTable


class TableForwarding:
    """Mixin delegating storage access to ``self._table``."""

    _table: NumericTable

    @property
    def table(self) -> NumericTable:
        """Independent copy of the underlying table."""
        return self._table.copy()

    @property
    def dtype(self) -> np.dtype:
        return self._table.dtype

    def get_element(self, row: int, column: int) -> Any | None:
        return self._table.get_element(row, column)

    def set_element(self, row: int, column: int, value: Any) -> None:
        self._table.set_element(row, column, value)

    def get_row(self, row: int) -> NDArray[Any] | None:
        return self._table.get_row(row)

    def set_row(self, row: int, values: ArrayLike) -> None:
        self._table.set_row(row, values)

    def get_column(self, column: int) -> NDArray[Any] | None:
        return self._table.get_column(column)

    def set_column(self, column: int, values: ArrayLike) -> None:
        self._table.set_column(column, values)

    def swap_row(self, i: int, j: int) -> None:
        self._table.swap_row(i, j)

    def swap_column(self, i: int, j: int) -> None:
        self._table.swap_column(i, j)

    def to_array(self) -> NDArray[Any]:
        return self._table.to_array()

    def dump(self, stream: TextIO | None = None) -> str:
        return self._table.dump(stream)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._table == other._table

    __hash__ = None  # mutable

    def __str__(self) -> str:
        return self._table.dump()
