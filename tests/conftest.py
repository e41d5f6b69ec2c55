"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_square(rng):
    """Well-conditioned random 4x4 array (diagonally dominant)."""
    A = rng.standard_normal((4, 4))
    return A + 4.0 * np.eye(4)


@pytest.fixture
def three_unknowns_data():
    """
    Column-major augmented data for
        x1 -  x2 -  x3 = 2
       2x1 -  x2 - 3x3 = 1
       3x1 + 2x2 - 5x3 = 0
    whose unique solution is (5, 0, 3).
    """
    return [1, 2, 3, -1, -1, 2, -1, -3, -5, 2, 1, 0]


@pytest.fixture
def two_unknowns_data():
    """
    Column-major augmented data for 3x - 2y = 12, 2x + y = 1,
    whose unique solution is (2, -3).
    """
    return [3, 2, -2, 1, 12, 1]
