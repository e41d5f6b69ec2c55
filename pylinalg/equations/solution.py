"""
Linear-system solution types.

Contains the parameter payload and user-facing solution wrapper returned by
solve().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinalg.core.result import Result

if TYPE_CHECKING:
    from pylinalg.equations.linear_equations import LinearEquations


@dataclass(frozen=True)
class LinearParams:
    """
    Parameter payload for a solved linear system.

    Attributes:
        x: Values of the unknowns, shape (n,)
        determinant: Value of the coefficient determinant
    """
    x: NDArray[np.floating[Any]]
    determinant: float


@dataclass
class LinearSolution:
    """
    User-facing linear-system results.

    Wraps Result[LinearParams] and provides convenient accessors.
    """
    _result: Result[LinearParams]
    _system: 'LinearEquations'

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Values of the unknowns, shape (n,)."""
        return self._result.params.x

    def x_n(self, n: int) -> float:
        """Value of the n-th unknown (1-based)."""
        if not 1 <= n <= len(self.x):
            raise IndexError(f"unknown {n} out of range 1..{len(self.x)}")
        return float(self.x[n - 1])

    @property
    def determinant(self) -> float:
        return self._result.params.determinant

    @property
    def method(self) -> str:
        return self._result.info['method']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def system(self) -> 'LinearEquations':
        return self._system

    def summary(self) -> str:
        """Plain-text summary of the solution."""
        lines = [
            "Linear System Solution",
            "=" * 40,
            f"Equations: {self._system.get_M()}",
            f"Unknowns: {self._system.n_unknowns}",
            f"Method: {self.method}",
            f"Determinant: {self.determinant:.6g}",
            "",
            f"{'Unknown':<10} {'Value':>18}",
            "-" * 40,
        ]
        for i, value in enumerate(self.x, start=1):
            lines.append(f"{'x' + str(i):<10} {value:>18.10g}")
        if self.warnings:
            lines.append("")
            lines.append("Warnings:")
            lines.extend(f"  {w}" for w in self.warnings)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSolution(method={self.method!r}, n={len(self.x)}, "
            f"determinant={self.determinant:.6g})"
        )
