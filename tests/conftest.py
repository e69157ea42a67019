"""Shared test fixtures for polytraj tests."""

import numpy as np
import pytest

from polytraj import Polynomial, RootFindingError


# ---------------------------------------------------------------------------
# Root solver stubs
# ---------------------------------------------------------------------------

def failing_solver(coefficients):
    """Root solver that never produces roots."""
    raise RootFindingError("stub solver always fails")


def fixed_roots_solver(roots):
    """Root solver returning *roots* regardless of its input."""
    def solver(coefficients):
        return np.asarray(roots, dtype=complex)
    return solver


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def cubic():
    """p(t) = t^3."""
    return Polynomial([0.0, 0.0, 0.0, 1.0])


@pytest.fixture
def linear():
    """p(t) = t."""
    return Polynomial([0.0, 1.0])


@pytest.fixture(scope="module")
def quintic_segment():
    """Rest-to-rest quintic from 0 to 1 in 2 s (minimum-jerk profile).

    p(t) = 10 (t/T)^3 - 15 (t/T)^4 + 6 (t/T)^5 with T = 2.
    """
    T = 2.0
    return Polynomial([0.0, 0.0, 0.0, 10.0 / T**3, -15.0 / T**4, 6.0 / T**5])


@pytest.fixture(scope="module")
def snap_segment():
    """Degree-9 polynomial with all coefficients set, as used for snap-optimal segments."""
    return Polynomial([0.5, -1.0, 0.25, 2.0, -0.75, 0.1, -0.3, 0.05, 0.02, -0.01])
