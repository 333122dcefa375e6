"""Clamped 2D-to-1D index mapping for flat N x N buffers."""

from numba import njit


@njit(inline="always", cache=True, nogil=True)
def ix(x, y, n):
    """Linear offset of cell (x, y), each coordinate clamped to [0, n-1]."""
    x = max(0, min(x, n - 1))
    y = max(0, min(y, n - 1))
    return x + y * n


def cell_index(x: int, y: int, n: int) -> int:
    """Python-side twin of ``ix`` for the public API (unbounded ints)."""
    x = max(0, min(int(x), n - 1))
    y = max(0, min(int(y), n - 1))
    return x + y * n
