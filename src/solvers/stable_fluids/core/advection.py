from numba import njit

from .boundary import set_boundary
from .indexing import ix


@njit(cache=True, nogil=True)
def advect(b, d, d0, u, v, dt, obstacles, n):
    """
    Semi-Lagrangian transport of ``d0`` along (u, v) into ``d``.

    Each interior cell is traced back one time step and resampled bilinearly
    from the four surrounding source cells. A cell that is an obstacle, or
    whose stencil touches one, is set to zero instead of interpolated.
    """
    dt0 = dt * n
    lo = 0.5
    hi = n - 1.5

    for i in range(1, n - 1):
        for j in range(1, n - 1):
            k = ix(i, j, n)
            if obstacles[k]:
                d[k] = 0.0
                continue

            x = i - dt0 * u[k]
            y = j - dt0 * v[k]

            if x < lo:
                x = lo
            if x > hi:
                x = hi
            if y < lo:
                y = lo
            if y > hi:
                y = hi

            i0 = int(x)
            i1 = i0 + 1
            j0 = int(y)
            j1 = j0 + 1

            s1 = x - i0
            s0 = 1.0 - s1
            t1 = y - j0
            t0 = 1.0 - t1

            k00 = ix(i0, j0, n)
            k01 = ix(i0, j1, n)
            k10 = ix(i1, j0, n)
            k11 = ix(i1, j1, n)

            if obstacles[k00] or obstacles[k01] or obstacles[k10] or obstacles[k11]:
                d[k] = 0.0
            else:
                d[k] = s0 * (t0 * d0[k00] + t1 * d0[k01]) + s1 * (
                    t0 * d0[k10] + t1 * d0[k11]
                )

    set_boundary(b, d, obstacles, n)
