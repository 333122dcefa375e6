"""Compiled Stable Fluids kernels over flat N*N float32 buffers."""

from .indexing import ix, cell_index
from .boundary import SCALAR, VELOCITY_X, VELOCITY_Y, set_boundary
from .diffusion import RELAXATION_ITERATIONS, diffuse
from .advection import advect
from .projection import project

__all__ = [
    "ix",
    "cell_index",
    "SCALAR",
    "VELOCITY_X",
    "VELOCITY_Y",
    "set_boundary",
    "RELAXATION_ITERATIONS",
    "diffuse",
    "advect",
    "project",
]
