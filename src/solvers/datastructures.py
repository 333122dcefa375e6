"""Data structures for solver configuration, state buffers and results.

Structure:
- Parameters: Input configuration (logged to MLflow at start)
- Metrics: Output results (logged to MLflow at end)
- Fields: Snapshot of the current fields on the grid
- TimeSeries: Per-step diagnostics history
- BufferPair / FluidSolverFields: Internal double-buffered solver state
"""

from dataclasses import dataclass, asdict, field
from typing import List

import numpy as np
import pandas as pd


# ========================================================
# Parameters (Input Configuration)
# ========================================================


@dataclass(frozen=True)
class Parameters:
    """Solver parameters - fixed for the lifetime of a solver."""

    size: int = 64
    diffusion: float = 1e-4
    viscosity: float = 1e-4
    dt: float = 0.1
    method: str = "stable_fluids"

    def __post_init__(self):
        if self.size < 1:
            raise ValueError(f"Grid size must be positive, got {self.size}")
        if self.diffusion < 0:
            raise ValueError(f"Diffusion rate must be non-negative, got {self.diffusion}")
        if self.viscosity < 0:
            raise ValueError(f"Viscosity must be non-negative, got {self.viscosity}")
        if self.dt <= 0:
            raise ValueError(f"Time step must be positive, got {self.dt}")

    @property
    def n_cells(self) -> int:
        return self.size * self.size

    def to_dataframe(self):
        return pd.DataFrame([asdict(self)])

    def to_mlflow(self) -> dict:
        return asdict(self)


# ========================================================
# Metrics (Output Results)
# ========================================================


@dataclass
class Metrics:
    """Run metrics - computed after ``run()`` finishes."""

    steps: int = 0
    wall_time_seconds: float = 0.0
    final_mass: float = 0.0
    final_kinetic_energy: float = 0.0
    final_max_divergence: float = 0.0
    obstacle_cells: int = 0

    def to_dataframe(self):
        return pd.DataFrame([asdict(self)])

    def to_mlflow(self) -> dict:
        return {k: float(v) for k, v in asdict(self).items()}


# ========================================================
# Fields (Spatial Snapshot)
# ========================================================


@dataclass
class Fields:
    """Copy of the current fields on grid (x, y), flat in ``x + y*size`` order."""

    density: np.ndarray
    u: np.ndarray
    v: np.ndarray
    obstacle: np.ndarray
    x: np.ndarray
    y: np.ndarray
    size: int = 0

    def as_grid(self, name: str) -> np.ndarray:
        """Return field ``name`` reshaped to (size, size), indexed [y, x]."""
        return getattr(self, name).reshape(self.size, self.size)

    def speed(self) -> np.ndarray:
        return np.hypot(self.u, self.v)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to DataFrame with one row per grid cell."""
        data = asdict(self)
        data.pop("size")
        return pd.DataFrame(data)


# ========================================================
# Time Series (Per-Step Diagnostics)
# ========================================================


@dataclass
class TimeSeries:
    """Diagnostics history (one value per step)."""

    mass: List[float] = field(default_factory=list)
    kinetic_energy: List[float] = field(default_factory=list)
    max_divergence: List[float] = field(default_factory=list)

    def append(self, mass: float, kinetic_energy: float, max_divergence: float):
        self.mass.append(mass)
        self.kinetic_energy.append(kinetic_energy)
        self.max_divergence.append(max_divergence)

    def __len__(self):
        return len(self.mass)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to DataFrame with one row per step."""
        df = pd.DataFrame(asdict(self))
        df.insert(0, "step", np.arange(1, len(df) + 1))
        return df

    def to_mlflow_batch(self) -> list:
        """Build a list of MLflow Metric entities for ``log_batch``."""
        import time

        from mlflow.entities import Metric

        timestamp = int(time.time() * 1000)
        batch = []
        for key, values in asdict(self).items():
            for step, value in enumerate(values, start=1):
                batch.append(Metric(key=key, value=float(value), timestamp=timestamp, step=step))
        return batch


# =============================================================
# Internal Solver State
# =============================================================


@dataclass
class BufferPair:
    """Two equally sized buffers with an explicit current/scratch role flag.

    ``swap()`` exchanges the roles without copying data.
    """

    front: np.ndarray
    back: np.ndarray
    flipped: bool = False

    @property
    def current(self) -> np.ndarray:
        return self.back if self.flipped else self.front

    @property
    def scratch(self) -> np.ndarray:
        return self.front if self.flipped else self.back

    def swap(self):
        self.flipped = not self.flipped

    @classmethod
    def zeros(cls, n_cells: int, dtype=np.float32):
        return cls(front=np.zeros(n_cells, dtype=dtype), back=np.zeros(n_cells, dtype=dtype))


@dataclass
class FluidSolverFields:
    """Internal solver arrays - double-buffered fields and the obstacle mask."""

    density: BufferPair
    u: BufferPair
    v: BufferPair

    # Shared by every stage, never copied
    obstacles: np.ndarray

    @classmethod
    def allocate(cls, n_cells: int):
        """Allocate all arrays zero-filled (float32 fields, bool mask)."""
        return cls(
            density=BufferPair.zeros(n_cells),
            u=BufferPair.zeros(n_cells),
            v=BufferPair.zeros(n_cells),
            obstacles=np.zeros(n_cells, dtype=np.bool_),
        )
