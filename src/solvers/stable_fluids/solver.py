"""Stable Fluids solver on a square grid with obstacles.

This module implements the semi-Lagrangian / implicit-diffusion / pressure
projection pipeline on collocated, flat N*N float32 buffers.
"""

from ..base import GridFluidSolver
from ..datastructures import FluidSolverFields, Parameters

from solvers.stable_fluids.core import (
    SCALAR,
    VELOCITY_X,
    VELOCITY_Y,
    advect,
    cell_index,
    diffuse,
    project,
)


class StableFluidsSolver(GridFluidSolver):
    """Grid fluid solver for density and velocity with a static obstacle mask.

    Coordinates given to every public operation are clamped into the grid, so
    out-of-range cells silently address the nearest edge cell.

    Parameters
    ----------
    size : int
        Grid dimension N (N x N cells).
    diffusion : float
        Density diffusion rate.
    viscosity : float
        Kinematic viscosity.
    dt : float
        Fixed time step.
    """

    Parameters = Parameters

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.n = self.params.size
        self.arrays = FluidSolverFields.allocate(self.params.n_cells)

    # =========================================================================
    # Configuration accessors
    # =========================================================================

    def get_size(self) -> int:
        return self.params.size

    def get_diffusion(self) -> float:
        return self.params.diffusion

    def get_viscosity(self) -> float:
        return self.params.viscosity

    def get_dt(self) -> float:
        return self.params.dt

    # =========================================================================
    # Impulses and queries
    # =========================================================================

    def add_density(self, x: int, y: int, amount: float):
        """Add ``amount`` of density at (x, y) unless the cell is solid."""
        k = cell_index(x, y, self.n)
        if not self.arrays.obstacles[k]:
            self.arrays.density.current[k] += amount

    def add_velocity(self, x: int, y: int, dx: float, dy: float):
        """Add (dx, dy) to the velocity at (x, y) unless the cell is solid."""
        k = cell_index(x, y, self.n)
        if not self.arrays.obstacles[k]:
            self.arrays.u.current[k] += dx
            self.arrays.v.current[k] += dy

    def get_density(self, x: int, y: int) -> float:
        return float(self.arrays.density.current[cell_index(x, y, self.n)])

    def get_velocity(self, x: int, y: int) -> tuple:
        k = cell_index(x, y, self.n)
        return float(self.arrays.u.current[k]), float(self.arrays.v.current[k])

    # =========================================================================
    # Obstacles
    # =========================================================================

    def set_obstacle(self, x: int, y: int, solid: bool = True):
        self.arrays.obstacles[cell_index(x, y, self.n)] = bool(solid)

    def clear_obstacles(self):
        self.arrays.obstacles[:] = False

    def is_obstacle(self, x: int, y: int) -> bool:
        return bool(self.arrays.obstacles[cell_index(x, y, self.n)])

    # =========================================================================
    # Simulation
    # =========================================================================

    def project(self):
        """Make the current velocity field (nearly) divergence free.

        The scratch velocity buffers serve as pressure and divergence storage.
        """
        a = self.arrays
        project(a.u.current, a.v.current, a.u.scratch, a.v.scratch, a.obstacles, self.n)

    def step(self):
        """Advance density and velocity by one time step."""
        a = self.arrays  # Shorthand for readability
        n, dt = self.n, self.params.dt
        visc, diff = self.params.viscosity, self.params.diffusion

        # Diffuse velocity
        diffuse(VELOCITY_X, a.u.scratch, a.u.current, visc, dt, a.obstacles, n)
        a.u.swap()
        diffuse(VELOCITY_Y, a.v.scratch, a.v.current, visc, dt, a.obstacles, n)
        a.v.swap()

        self.project()

        # Self-advect velocity; both components traced through the same field
        advect(VELOCITY_X, a.u.scratch, a.u.current, a.u.current, a.v.current, dt, a.obstacles, n)
        advect(VELOCITY_Y, a.v.scratch, a.v.current, a.u.current, a.v.current, dt, a.obstacles, n)
        a.u.swap()
        a.v.swap()

        # Advection reintroduces divergence
        self.project()

        # Diffuse and advect density
        diffuse(SCALAR, a.density.scratch, a.density.current, diff, dt, a.obstacles, n)
        a.density.swap()
        advect(SCALAR, a.density.scratch, a.density.current, a.u.current, a.v.current, dt, a.obstacles, n)
        a.density.swap()
