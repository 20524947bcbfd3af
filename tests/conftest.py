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
def tall_matrix(rng):
    """Full column rank 8 x 3 matrix."""
    return rng.standard_normal((8, 3))


@pytest.fixture
def square_matrix(rng):
    """Well-conditioned 4 x 4 matrix."""
    return rng.standard_normal((4, 4)) + 4.0 * np.eye(4)


@pytest.fixture
def least_squares_data(rng):
    """Overdetermined system with known solution and small noise."""
    m, n = 60, 3
    A = rng.standard_normal((m, n))
    x_true = np.array([1.0, -2.0, 0.5])
    b = A @ x_true + rng.standard_normal(m) * 0.01
    return A, b, x_true


@pytest.fixture
def collinear_matrix(rng):
    """Matrix whose third column is the sum of the first two."""
    x1 = rng.standard_normal(20)
    x2 = rng.standard_normal(20)
    return np.column_stack([x1, x2, x1 + x2])
