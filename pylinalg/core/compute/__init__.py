"""
Shared compute infrastructure for pylinalg.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers and the zero-determinant threshold
    parallel: Bounded parallel-for over grid cells
    locking: Per-table reader-writer lock
"""

from pylinalg.core.compute.timing import Timer
from pylinalg.core.compute.tolerances import (
    ToleranceTier,
    EXACT,
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    hadamard_bound,
    elimination_dtype,
    zero_threshold,
)
from pylinalg.core.compute.parallel import parallel_cells
from pylinalg.core.compute.locking import ReadWriteLock

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "CPU_FP64",
    "CPU_FP64_ILL_CONDITIONED",
    "elimination_dtype",
    "hadamard_bound",
    "zero_threshold",
    # Parallel
    "parallel_cells",
    # Locking
    "ReadWriteLock",
]
