"""
Parallel cofactor matrix.

One unit of work per cell: unit (i, j) evaluates the minor M(i, j) of the
shared source determinant, applies the sign (-1)^(i+j) and writes it into
cell (i, j) of the result. Units only read the source and each writes a
cell no other unit touches. parallel_cells() returns after the last unit
finishes.
"""

from __future__ import annotations

import numpy as np

from pylinalg.core.compute.parallel import parallel_cells
from pylinalg.determinant import Determinant, DeterminantMethod
from pylinalg.table import NumericTable


def cofactor_table(
    source: Determinant,
    *,
    method: DeterminantMethod = 'elimination',
    max_workers: int | None = None,
) -> NumericTable:
    """
    Table of cofactors of source, not transposed.

    Args:
        source: Determinant of order >= 2
        method: How each minor is evaluated ('elimination' or 'general')
        max_workers: Thread pool size, None for the executor default
    """
    n = source.get_N()
    result = NumericTable(n, n, [0], dtype=np.result_type(source.dtype, np.float64))

    def cofactor(row: int, column: int) -> None:
        value = source.m_i_j(row, column).calculate(method)
        result.set_element(row, column, -value if (row + column) % 2 else value)

    parallel_cells(cofactor, n, n, max_workers=max_workers)
    return result
