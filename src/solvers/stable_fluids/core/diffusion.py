from numba import njit

from .boundary import set_boundary
from .indexing import ix

RELAXATION_ITERATIONS = 20


@njit(cache=True, nogil=True)
def diffuse(b, x, x0, rate, dt, obstacles, n):
    """
    Implicit diffusion of ``x0`` into ``x`` by Gauss-Seidel relaxation.

    Runs a fixed number of sweeps with no residual check. The current contents
    of ``x`` are the initial guess; cells updated earlier in a sweep are read by
    later cells of the same sweep.

    Parameters
    ----------
    b : int
        Field kind passed to the boundary enforcer.
    x : ndarray
        Target buffer, updated in place.
    x0 : ndarray
        Source values.
    rate : float
        Diffusion rate or kinematic viscosity.
    """
    a = dt * rate * (n - 2) * (n - 2)
    denom = 1.0 + 4.0 * a

    for _ in range(RELAXATION_ITERATIONS):
        for i in range(1, n - 1):
            for j in range(1, n - 1):
                k = ix(i, j, n)
                if obstacles[k]:
                    continue
                x[k] = (
                    x0[k]
                    + a
                    * (
                        x[ix(i - 1, j, n)]
                        + x[ix(i + 1, j, n)]
                        + x[ix(i, j - 1, n)]
                        + x[ix(i, j + 1, n)]
                    )
                ) / denom
        set_boundary(b, x, obstacles, n)
