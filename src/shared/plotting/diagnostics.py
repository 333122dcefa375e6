"""
Diagnostics Plots.

Mass, kinetic energy and divergence history over the run.
"""

import logging
from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

log = logging.getLogger(__name__)


def plot_diagnostics(timeseries_df: pd.DataFrame, output_dir: Path) -> Path:
    """Plot per-step diagnostics, one panel per quantity."""
    if timeseries_df.empty:
        log.warning("No timeseries data available for diagnostics plot")
        return None

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    sns.set_style("darkgrid")

    columns = [c for c in timeseries_df.columns if c != "step"]
    fig, axes = plt.subplots(1, len(columns), figsize=(4.5 * len(columns), 3.8))
    if len(columns) == 1:
        axes = [axes]

    for ax, col in zip(axes, columns):
        ax.plot(timeseries_df["step"], timeseries_df[col])
        if col == "max_divergence" and (timeseries_df[col] > 0).all():
            ax.set_yscale("log")
        ax.set_xlabel("Step")
        ax.set_title(col.replace("_", " ").capitalize())

    fig.patch.set_alpha(0.0)
    plt.tight_layout()

    output_path = output_dir / "diagnostics.png"
    fig.savefig(output_path, facecolor=(0, 0, 0, 0))
    plt.close(fig)

    log.info(f"Saved diagnostics plot: {output_path.name}")
    return output_path
