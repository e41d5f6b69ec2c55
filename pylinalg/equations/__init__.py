"""
Linear equations module.

Square systems A x = b solved by Cramer's rule or by the inverse matrix.

Public API:
    LinearEquations     - augmented system with calculate()/calculate_inverse()
    solve(system)       - raising front-end returning LinearSolution
"""

from pylinalg.equations.linear_equations import LinearEquations
from pylinalg.equations.solution import LinearParams, LinearSolution
from pylinalg.equations.solvers import solve
from pylinalg.equations.backends import CramerBackend, InverseBackend

__all__ = [
    "LinearEquations",
    "LinearParams",
    "LinearSolution",
    "solve",
    "CramerBackend",
    "InverseBackend",
]
