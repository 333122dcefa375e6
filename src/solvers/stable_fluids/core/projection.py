from numba import njit

from .boundary import SCALAR, VELOCITY_X, VELOCITY_Y, set_boundary
from .diffusion import RELAXATION_ITERATIONS
from .indexing import ix


@njit(cache=True, nogil=True)
def project(u, v, p, div, obstacles, n):
    """
    Remove the divergent part of (u, v) in place.

    ``p`` and ``div`` are work buffers; their previous contents are discarded.
    The pressure Poisson equation gets a fixed number of relaxation sweeps.
    """
    # ––– divergence ––––––––––––––––––––––––––––––––––––––––––––––––––––––
    for i in range(1, n - 1):
        for j in range(1, n - 1):
            k = ix(i, j, n)
            p[k] = 0.0
            if obstacles[k]:
                div[k] = 0.0
                continue
            div[k] = (
                -0.5
                * (
                    u[ix(i + 1, j, n)]
                    - u[ix(i - 1, j, n)]
                    + v[ix(i, j + 1, n)]
                    - v[ix(i, j - 1, n)]
                )
                / n
            )
    set_boundary(SCALAR, div, obstacles, n)
    set_boundary(SCALAR, p, obstacles, n)

    # ––– pressure relaxation ––––––––––––––––––––––––––––––––––––––––––––––
    for _ in range(RELAXATION_ITERATIONS):
        for i in range(1, n - 1):
            for j in range(1, n - 1):
                k = ix(i, j, n)
                if obstacles[k]:
                    continue
                p[k] = (
                    div[k]
                    + p[ix(i - 1, j, n)]
                    + p[ix(i + 1, j, n)]
                    + p[ix(i, j - 1, n)]
                    + p[ix(i, j + 1, n)]
                ) / 4.0
        set_boundary(SCALAR, p, obstacles, n)

    # ––– gradient subtraction ––––––––––––––––––––––––––––––––––––––––––––
    for i in range(1, n - 1):
        for j in range(1, n - 1):
            k = ix(i, j, n)
            if obstacles[k]:
                continue
            u[k] -= 0.5 * n * (p[ix(i + 1, j, n)] - p[ix(i - 1, j, n)])
            v[k] -= 0.5 * n * (p[ix(i, j + 1, n)] - p[ix(i, j - 1, n)])
    set_boundary(VELOCITY_X, u, obstacles, n)
    set_boundary(VELOCITY_Y, v, obstacles, n)
