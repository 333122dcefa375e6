"""Pytest configuration and fixtures for the fluid solver tests."""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def small_grid_params():
    """Parameters for a small 16x16 test grid."""
    return {
        "size": 16,
        "diffusion": 0.0001,
        "viscosity": 0.0001,
        "dt": 0.1,
    }


@pytest.fixture
def small_solver(small_grid_params):
    """Fresh solver on the small grid."""
    from solvers import StableFluidsSolver

    return StableFluidsSolver(**small_grid_params)


@pytest.fixture
def make_solver():
    """Factory for solvers with custom size and rates."""
    from solvers import StableFluidsSolver

    def _make(size=32, diffusion=0.0001, viscosity=0.0001, dt=0.1):
        return StableFluidsSolver(size=size, diffusion=diffusion, viscosity=viscosity, dt=dt)

    return _make


def empty_mask(n):
    """All-clear obstacle mask for kernel tests."""
    return np.zeros(n * n, dtype=np.bool_)


@pytest.fixture
def no_obstacles():
    return empty_mask
