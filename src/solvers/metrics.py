"""Diagnostics over the flat solver buffers."""

from __future__ import annotations

import numpy as np


# -----------------------------------------------------------------------------
# Divergence
# -----------------------------------------------------------------------------


def divergence_field(
    u: np.ndarray, v: np.ndarray, obstacles: np.ndarray, n: int
) -> np.ndarray:
    """Discrete divergence as used by the projection, shape (n, n) indexed [y, x].

    Only interior fluid cells carry a value; edges and obstacles are zero.
    """
    u2 = u.reshape(n, n).astype(np.float64)
    v2 = v.reshape(n, n).astype(np.float64)
    div = np.zeros((n, n))
    if n < 3:
        return div

    div[1:-1, 1:-1] = (
        -0.5 * ((u2[1:-1, 2:] - u2[1:-1, :-2]) + (v2[2:, 1:-1] - v2[:-2, 1:-1])) / n
    )
    div[obstacles.reshape(n, n)] = 0.0
    return div


def _fluid_interior(obstacles: np.ndarray, n: int) -> np.ndarray:
    mask = np.zeros((n, n), dtype=bool)
    mask[1:-1, 1:-1] = True
    return mask & ~obstacles.reshape(n, n)


def max_divergence(u: np.ndarray, v: np.ndarray, obstacles: np.ndarray, n: int) -> float:
    """Maximum absolute divergence over interior fluid cells."""
    div = divergence_field(u, v, obstacles, n)
    return float(np.max(np.abs(div)))


def divergence_l2(u: np.ndarray, v: np.ndarray, obstacles: np.ndarray, n: int) -> float:
    """Root-mean-square divergence over interior fluid cells."""
    mask = _fluid_interior(obstacles, n)
    if not mask.any():
        return 0.0
    div = divergence_field(u, v, obstacles, n)
    return float(np.sqrt(np.mean(div[mask] ** 2)))


# -----------------------------------------------------------------------------
# Conserved-ish quantities
# -----------------------------------------------------------------------------


def total_mass(density: np.ndarray) -> float:
    """Sum of density over all cells."""
    return float(np.sum(density, dtype=np.float64))


def kinetic_energy(u: np.ndarray, v: np.ndarray) -> float:
    """Kinetic energy: E = 0.5 * sum(u^2 + v^2) over all cells."""
    u = u.astype(np.float64)
    v = v.astype(np.float64)
    return 0.5 * float(np.sum(u * u + v * v))
