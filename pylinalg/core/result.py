"""
Generic result container for pylinalg solver computations.

The Result class provides a standardized envelope for the solver
front-end. Library-level operations (tables, determinants, matrices) return
plain values or None; only solve() wraps its answer in a Result so that
timing, warnings and provenance travel with the numbers.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, determinant, order)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

import platform
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Versions of the software stack that produced a result."""
    from pylinalg import __version__

    return {
        'pylinalg_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for solver computations.

    Type Parameters:
        P: The parameter payload type

    Attributes:
        params: Solver-specific parameters (the solution vector)
        info: Structured metadata (method, determinant, order)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Versions of the software stack

    Examples:
        >>> Result(
        ...     params=LinearParams(x=x),
        ...     info={'method': 'cramer', 'determinant': 3.0},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_cramer'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
