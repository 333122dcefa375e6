"""Grid fluid solver framework.

Solver Hierarchy:
-----------------
GridFluidSolver (abstract base - parameters, run loop, diagnostics)
└── StableFluidsSolver (semi-Lagrangian advection, implicit diffusion, projection)
"""

from .base import GridFluidSolver
from .datastructures import (
    Parameters,
    Metrics,
    Fields,
    TimeSeries,
    BufferPair,
    FluidSolverFields,
)
from solvers.stable_fluids.solver import StableFluidsSolver


__all__ = [
    # Base solver
    "GridFluidSolver",
    # Shared data structures
    "Parameters",
    "Metrics",
    "Fields",
    "TimeSeries",
    "BufferPair",
    "FluidSolverFields",
    # Concrete solver
    "StableFluidsSolver",
]
