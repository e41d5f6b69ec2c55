"""
Determinant module.

Square tables evaluated by permutation expansion or Gaussian elimination,
with minors and signed minors (cofactors).

Public API:
    Determinant                 - order-N determinant
    inversion_number(seq, k)    - earlier elements greater than seq[k]
    inversion_count(seq)        - out-of-order pairs in seq
    permutation_sign(seq)       - +1 / -1 from the inversion parity
"""

from pylinalg.determinant.determinant import Determinant, DeterminantMethod
from pylinalg.determinant._permutation import (
    inversion_number,
    inversion_count,
    permutation_sign,
    lexicographic_permutations,
)

__all__ = [
    "Determinant",
    "DeterminantMethod",
    "inversion_number",
    "inversion_count",
    "permutation_sign",
    "lexicographic_permutations",
]
