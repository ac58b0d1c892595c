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
def random_int_matrix(rng):
    """Factory for integer matrices with entries in [-50, 50)."""
    def make(rows, cols):
        values = rng.integers(-50, 50, size=rows * cols)
        return Matrix.from_data(rows, cols, [int(v) for v in values])
    return make


@pytest.fixture
def rect_pair():
    """The 2x3 and 3x2 operands of the reference product example."""
    a = Matrix.from_data(2, 3, [3, 4, 5, 1, 6, 8])
    b = Matrix.from_data(3, 2, [6, 2, 9, 0, 3, 1])
    return a, b
