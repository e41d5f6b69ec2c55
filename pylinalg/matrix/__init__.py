"""
Matrix module.

Matrix arithmetic, parallel cofactor matrix, inverse, elementary row and
column operations, and row-echelon reduction.

Public API:
    Matrix                  - M x N matrix
    cofactor_table(det)     - parallel cofactor computation behind adjoint()
"""

from pylinalg.matrix.matrix import Matrix
from pylinalg.matrix._adjoint import cofactor_table

__all__ = [
    "Matrix",
    "cofactor_table",
]
