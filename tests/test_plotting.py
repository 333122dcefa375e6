"""Smoke tests for the plotting helpers."""

import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

from shared.plotting import plot_diagnostics, plot_fields
from solvers.stable_fluids.scenario import Source, add_disc


@pytest.fixture
def stepped_solver(small_solver):
    add_disc(small_solver, 10, 8, 2)
    small_solver.run(3, callback=lambda s, i: Source(4, 8, 10.0, (1.0, 0.0)).apply(s), log_every=0)
    return small_solver


class TestPlots:
    def test_plot_fields_writes_png(self, stepped_solver, tmp_path):
        path = plot_fields(stepped_solver.snapshot(), tmp_path)
        assert path.exists()
        assert path.suffix == ".png"

    def test_plot_diagnostics_writes_png(self, stepped_solver, tmp_path):
        path = plot_diagnostics(stepped_solver.time_series.to_dataframe(), tmp_path / "out")
        assert path.exists()

    def test_plot_diagnostics_empty(self, tmp_path):
        assert plot_diagnostics(pd.DataFrame(), tmp_path) is None
