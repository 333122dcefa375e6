"""
Field Visualization Plots.

Density and speed maps of a solver snapshot, with obstacles overlaid.
"""

import logging
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

log = logging.getLogger(__name__)


def plot_fields(fields, output_dir: Path, title: str = "Stable Fluids") -> Path:
    """Plot density and speed side by side from a ``Fields`` snapshot."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    density = fields.as_grid("density")
    speed = np.hypot(fields.as_grid("u"), fields.as_grid("v"))
    solid = np.ma.masked_where(~fields.as_grid("obstacle"), np.ones_like(density))

    fig, axes = plt.subplots(1, 2, figsize=(11, 4.8))

    im_d = axes[0].imshow(density, origin="lower", cmap="magma", interpolation="bilinear")
    axes[0].set_title("Density", fontsize=12)
    plt.colorbar(im_d, ax=axes[0], label=r"$\rho$")

    im_s = axes[1].imshow(speed, origin="lower", cmap="viridis", interpolation="bilinear")
    axes[1].set_title("Speed", fontsize=12)
    plt.colorbar(im_s, ax=axes[1], label=r"$|\mathbf{u}|$")

    # Subsample the velocity field for a readable quiver
    n = fields.size
    stride = max(1, n // 24)
    ys, xs = np.mgrid[0:n:stride, 0:n:stride]
    axes[1].quiver(
        xs, ys,
        fields.as_grid("u")[::stride, ::stride],
        fields.as_grid("v")[::stride, ::stride],
        color="white", alpha=0.6,
    )

    for ax in axes:
        ax.imshow(solid, origin="lower", cmap="Greys", vmin=0, vmax=1, alpha=0.9)
        ax.set_xlabel(r"$x$", fontsize=11)
        ax.set_ylabel(r"$y$", fontsize=11)
        ax.set_aspect("equal")
        ax.grid(False)

    fig.suptitle(f"{title}, $N={n}$", fontsize=13)
    plt.tight_layout()

    output_path = output_dir / "fields.png"
    fig.savefig(output_path, dpi=150, bbox_inches="tight")
    plt.close(fig)

    log.info(f"Saved field plot: {output_path.name}")
    return output_path
