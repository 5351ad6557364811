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
def spd_factor(rng):
    """Random 4x4 SPD covariance and its lower Cholesky factor."""
    p = 4
    A = rng.standard_normal((p, p))
    S = A @ A.T + p * np.eye(p)
    L = np.linalg.cholesky(S)
    return S, L
