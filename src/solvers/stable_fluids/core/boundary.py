from numba import njit

from .indexing import ix

# Field kinds
SCALAR = 0
VELOCITY_X = 1
VELOCITY_Y = 2


@njit(cache=True, nogil=True)
def set_boundary(b, x, obstacles, n):
    """
    Reflective edge condition for field kind ``b``, then zero all obstacle cells.
    Edges first, corners from the fixed edges, obstacles last.
    """
    for i in range(1, n - 1):
        # top/bottom rows
        if b == VELOCITY_Y:
            x[ix(i, 0, n)] = -x[ix(i, 1, n)]
            x[ix(i, n - 1, n)] = -x[ix(i, n - 2, n)]
        else:
            x[ix(i, 0, n)] = x[ix(i, 1, n)]
            x[ix(i, n - 1, n)] = x[ix(i, n - 2, n)]

        # left/right columns
        if b == VELOCITY_X:
            x[ix(0, i, n)] = -x[ix(1, i, n)]
            x[ix(n - 1, i, n)] = -x[ix(n - 2, i, n)]
        else:
            x[ix(0, i, n)] = x[ix(1, i, n)]
            x[ix(n - 1, i, n)] = x[ix(n - 2, i, n)]

    x[ix(0, 0, n)] = 0.5 * (x[ix(1, 0, n)] + x[ix(0, 1, n)])
    x[ix(0, n - 1, n)] = 0.5 * (x[ix(1, n - 1, n)] + x[ix(0, n - 2, n)])
    x[ix(n - 1, 0, n)] = 0.5 * (x[ix(n - 2, 0, n)] + x[ix(n - 1, 1, n)])
    x[ix(n - 1, n - 1, n)] = 0.5 * (x[ix(n - 2, n - 1, n)] + x[ix(n - 1, n - 2, n)])

    # Obstacles override reflection
    for k in range(n * n):
        if obstacles[k]:
            x[k] = 0.0
