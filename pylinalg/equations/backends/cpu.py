"""
CPU backends for linear systems.

CramerBackend evaluates n+1 determinants; InverseBackend builds the inverse
from the parallel cofactor matrix and multiplies it into the constants.
Both leave the caller's system untouched and work on a copy.
"""

from __future__ import annotations

import numpy as np

from pylinalg.core.result import Result
from pylinalg.core.compute.timing import Timer
from pylinalg.core.exceptions import SingularMatrixError
from pylinalg.core.validation import check_method
from pylinalg.determinant import DeterminantMethod
from pylinalg.equations.linear_equations import LinearEquations
from pylinalg.equations.solution import LinearParams
from pylinalg.equations._common import check_system, conditioning_warnings


class CramerBackend:
    """Cramer's rule."""

    def __init__(self, determinant_method: DeterminantMethod = 'general'):
        self._determinant_method = check_method(
            determinant_method, ('elimination', 'general'), 'determinant_method'
        )

    @property
    def name(self) -> str:
        return 'cpu_cramer'

    def solve(self, system: LinearEquations) -> Result[LinearParams]:
        """
        Raises:
            DimensionError: If the system is not square or has < 2 equations
            SingularMatrixError: If the coefficient determinant is zero
        """
        timer = Timer()
        timer.start()

        with timer.section('checks'):
            coefficient = check_system(system)
            determinant, ratio, warnings_list = conditioning_warnings(
                coefficient, self._determinant_method
            )

        with timer.section('cramer'):
            work = system.copy()
            work.calculate(self._determinant_method)

        timer.stop()

        if not work.is_solved:
            raise SingularMatrixError(
                "Cramer's rule produced no solution",
                matrix_name='A',
                determinant=determinant,
                order=system.n_unknowns,
            )

        return Result(
            params=LinearParams(x=np.array(work.solution), determinant=determinant),
            info={
                'method': 'cramer',
                'determinant_method': self._determinant_method,
                'order': system.n_unknowns,
                'hadamard_ratio': ratio,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )


class InverseBackend:
    """x = inverse(A) * b."""

    def __init__(self, max_workers: int | None = None):
        self._max_workers = max_workers

    @property
    def name(self) -> str:
        return 'cpu_inverse'

    def solve(self, system: LinearEquations) -> Result[LinearParams]:
        """
        Raises:
            DimensionError: If the system is not square or has < 2 equations
            SingularMatrixError: If the coefficient matrix is not invertible
        """
        timer = Timer()
        timer.start()

        with timer.section('checks'):
            coefficient = check_system(system)
            determinant, ratio, warnings_list = conditioning_warnings(coefficient)

        with timer.section('inverse'):
            work = system.copy()
            work.calculate_inverse(max_workers=self._max_workers)

        timer.stop()

        if not work.is_solved:
            raise SingularMatrixError(
                "Coefficient matrix could not be inverted",
                matrix_name='A',
                determinant=determinant,
                order=system.n_unknowns,
            )

        return Result(
            params=LinearParams(x=np.array(work.solution), determinant=determinant),
            info={
                'method': 'inverse',
                'order': system.n_unknowns,
                'hadamard_ratio': ratio,
                'max_workers': self._max_workers,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
