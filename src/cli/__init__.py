"""CLI output helpers for solver runs."""

from .console import console, ok, fail, dim, header, summary_table

__all__ = [
    "console",
    "ok",
    "fail",
    "dim",
    "header",
    "summary_table",
]
