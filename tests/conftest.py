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
def m1():
    """The 2x3 integer matrix from the demonstration program."""
    return Matrix.from_rows([[1, 2, 1], [4, 1, 3]])


@pytest.fixture
def ones34():
    """3x4 all-ones integer matrix."""
    return Matrix.ones(3, 4, dtype=int)


@pytest.fixture
def random_int_pair(rng):
    """Two random integer matrices of the same 4x5 shape."""
    a = rng.integers(-9, 10, size=(4, 5))
    b = rng.integers(-9, 10, size=(4, 5))
    return Matrix.from_array(a), Matrix.from_array(b)
