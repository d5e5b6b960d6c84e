"""
Visualization utilities.

- Layout drawing (nodes and links)
- Node trajectories over a recorded run
- Convergence curves
"""

from forcelayout.viz.layout import (
    plot_graph,
    plot_trajectories,
    plot_convergence,
    save_figure,
)

__all__ = [
    "plot_graph",
    "plot_trajectories",
    "plot_convergence",
    "save_figure",
]
