"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def m2():
    """The 2x2 matrix [[1, 2], [3, 4]] (det = -2)."""
    return Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])


@pytest.fixture
def system3_text():
    """Augmented 3x4 system with a unique solution."""
    return "2 3 5 10\n1 -1 2 3\n3 2 -1 4"


@pytest.fixture
def well_conditioned(rng):
    """Random diagonally dominant 4x4 matrix (safely invertible)."""
    n = 4
    A = rng.uniform(-1.0, 1.0, size=(n, n)) + n * np.eye(n)
    return Matrix.from_rows(A)


@pytest.fixture
def random_system(rng):
    """Well-conditioned 5x6 augmented system and its true solution."""
    n = 5
    A = rng.uniform(-1.0, 1.0, size=(n, n)) + n * np.eye(n)
    x_true = rng.standard_normal(n)
    b = A @ x_true
    return Matrix.from_rows(np.column_stack([A, b])), x_true
