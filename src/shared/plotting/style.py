"""
Plotting Style Configuration for fluid plots.

Uses seaborn darkgrid theme with serif fonts.
"""

import logging

import matplotlib.pyplot as plt
import seaborn as sns

log = logging.getLogger(__name__)

plt.rcParams.update(
    {
        "font.family": "serif",
        "axes.labelsize": 12,
        "font.size": 11,
        "legend.fontsize": 10,
        "xtick.labelsize": 10,
        "ytick.labelsize": 10,
    }
)

# Set after rcParams so the serif settings survive
sns.set_theme(style="darkgrid", rc={"font.family": "serif"})
