"""Stable Fluids solver package.

This package contains the grid solver, its compiled kernels and the
scenario helpers (obstacle layouts, continuous sources).
"""

from .solver import StableFluidsSolver

__all__ = ["StableFluidsSolver"]
