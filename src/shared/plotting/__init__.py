"""Plotting utilities for solver snapshots and run diagnostics."""

from .diagnostics import plot_diagnostics
from .fields import plot_fields

# Import style module to trigger sns.set_theme() on package import
from . import style  # noqa: F401

__all__ = [
    "plot_fields",
    "plot_diagnostics",
]
