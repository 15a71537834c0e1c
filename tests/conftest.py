"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix
from pymatrix.core.contracts import contract_checks


@pytest.fixture(autouse=True)
def checks_enabled():
    """Run every test with contract checks on, whatever the environment says."""
    with contract_checks(True):
        yield


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def m23():
    """2x3 matrix with distinct elements 1..6."""
    return Matrix([[1, 2, 3], [4, 5, 6]])


@pytest.fixture
def random_pair(rng):
    """Two random 4x5 integer matrices of the same shape."""
    a = Matrix(rng.integers(-50, 50, size=(4, 5)))
    b = Matrix(rng.integers(-50, 50, size=(4, 5)))
    return a, b
