"""
Numeric table module.

Column-major 2-D storage with 1-based, bounds-checked accessors. The
substrate every Determinant and Matrix delegates to.

Public API:
    NumericTable        - the table itself
    TableForwarding     - mixin for types that own a NumericTable
"""

from pylinalg.table.numeric_table import NumericTable
from pylinalg.table._forwarding import TableForwarding

__all__ = [
    "NumericTable",
    "TableForwarding",
]
