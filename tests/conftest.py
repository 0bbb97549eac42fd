"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from vctr import Vector
from vctr.core.compute.policy import get_default_policy, set_default_policy


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture(autouse=True)
def restore_default_policy():
    """Undo any set_default_policy() a test makes."""
    previous = get_default_policy()
    yield
    set_default_policy(previous)


@pytest.fixture
def large_int_pair(rng):
    """Two integer vectors long enough to take the parallel path by default."""
    n = 5000
    return (
        Vector(rng.integers(-1000, 1000, size=n)),
        Vector(rng.integers(-1000, 1000, size=n)),
    )
