"""Abstract base solver for grid fluid simulations."""

from abc import ABC, abstractmethod
import logging
import time

import numpy as np
import mlflow

from .datastructures import Fields, Metrics, TimeSeries
from .metrics import kinetic_energy, max_divergence, total_mass

log = logging.getLogger(__name__)


class GridFluidSolver(ABC):
    """Abstract base solver for a square-grid fluid simulation.

    Handles:
    - Parameter management (input configuration)
    - Metrics and diagnostics tracking (output results)
    - The stepping loop with live logging

    Subclasses must:
    - Set Parameters class attribute
    - Allocate ``self.arrays`` (a FluidSolverFields) in __init__
    - Implement step() - advance by one time step
    """

    Parameters = None

    def __init__(self, *args, params=None, **kwargs):
        """Initialize solver with parameters.

        Parameters
        ----------
        *args, **kwargs
            Passed to the Parameters class if ``params`` is None.
        params : Parameters, optional
            Parameters object.
        """
        if params is None:
            if self.Parameters is None:
                raise ValueError("Subclass must define Parameters class attribute")
            params = self.Parameters(*args, **kwargs)
        elif args or kwargs:
            raise ValueError("Pass either params or individual parameters, not both")

        self.params = params
        self.metrics = Metrics()
        self.time_series = TimeSeries()
        self.arrays = None

    @abstractmethod
    def step(self):
        """Advance the simulation by one time step."""

    # =========================================================================
    # Snapshot and diagnostics
    # =========================================================================

    def snapshot(self) -> Fields:
        """Copy of the current-role fields and obstacle mask."""
        n = self.params.size
        ys, xs = np.divmod(np.arange(n * n), n)
        a = self.arrays
        return Fields(
            density=a.density.current.copy(),
            u=a.u.current.copy(),
            v=a.v.current.copy(),
            obstacle=a.obstacles.copy(),
            x=xs,
            y=ys,
            size=n,
        )

    def _diagnostics(self):
        a = self.arrays
        return (
            total_mass(a.density.current),
            kinetic_energy(a.u.current, a.v.current),
            max_divergence(a.u.current, a.v.current, a.obstacles, self.params.size),
        )

    # =========================================================================
    # Run loop
    # =========================================================================

    def run(self, n_steps: int, callback=None, log_every: int = 50):
        """Advance ``n_steps`` time steps, recording diagnostics after each.

        Stores results in solver attributes:
        - self.time_series : TimeSeries appended with one entry per step
        - self.metrics : Metrics with final values for this run

        Parameters
        ----------
        n_steps : int
            Number of steps to take.
        callback : callable, optional
            Called as ``callback(solver, step_index)`` before every step.
        log_every : int
            Logging (and live MLflow) cadence in steps.
        """
        time_start = time.time()
        mlflow_time = 0.0

        for i in range(n_steps):
            if callback is not None:
                callback(self, i)

            self.step()

            mass, energy, div = self._diagnostics()
            self.time_series.append(mass, energy, div)

            if log_every and (i % log_every == 0 or i == n_steps - 1):
                log.info(f"Step {i}: mass={mass:.4e}, energy={energy:.4e}, max_div={div:.3e}")

                if mlflow.active_run():
                    t_log_start = time.time()
                    mlflow.log_metrics(
                        {"mass": mass, "kinetic_energy": energy, "max_divergence": div},
                        step=len(self.time_series),
                    )
                    mlflow_time += time.time() - t_log_start

        wall_time = time.time() - time_start - mlflow_time
        log.info(f"Run finished in {wall_time:.2f} seconds (excl. {mlflow_time:.2f}s logging).")

        mass, energy, div = self._diagnostics()
        self.metrics = Metrics(
            steps=n_steps,
            wall_time_seconds=wall_time,
            final_mass=mass,
            final_kinetic_energy=energy,
            final_max_divergence=div,
            obstacle_cells=int(np.count_nonzero(self.arrays.obstacles)),
        )
        return self.metrics
