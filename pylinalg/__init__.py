"""
pylinalg: a small numerical linear-algebra library.

Column-major numeric tables, determinants evaluated by permutation
expansion or Gaussian elimination, matrices with a parallel cofactor
matrix and inverse, and linear systems solved by Cramer's rule or by
inversion.

Submodules:
    sequence: Elementwise algebra over equal-length sequences
    table: NumericTable storage
    determinant: Determinant, minors, cofactors
    matrix: Matrix arithmetic, inverse, row reduction
    equations: LinearEquations and solve()
"""

__version__ = "0.1.0"

from pylinalg import sequence
from pylinalg.table import NumericTable
from pylinalg.determinant import Determinant
from pylinalg.matrix import Matrix
from pylinalg.equations import LinearEquations, LinearSolution, solve

__all__ = [
    "__version__",
    "sequence",
    "NumericTable",
    "Determinant",
    "Matrix",
    "LinearEquations",
    "LinearSolution",
    "solve",
]
