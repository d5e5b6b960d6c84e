"""
Matplotlib rendering of layouts.

The renderer is a host: it reads node positions and link endpoints from
the graph and draws them. Nothing here mutates the graph.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.collections import LineCollection
from matplotlib.figure import Figure
from matplotlib.patches import Rectangle

from forcelayout.analysis.metrics import (
    displacement_per_tick,
    link_index_pairs,
    positions_array,
    trajectory_arrays,
)

if TYPE_CHECKING:
    from forcelayout.core.graph import Graph
    from forcelayout.host.viewport import Viewport


NODE_COLOR = "black"
LINK_COLOR = "black"
NODE_RADIUS = 4.0


def _link_segments(pos: np.ndarray, pairs: np.ndarray) -> np.ndarray:
    """(E, 2, 2) array of line segments for a LineCollection."""
    if len(pairs) == 0:
        return np.zeros((0, 2, 2))
    return np.stack([pos[pairs[:, 0]], pos[pairs[:, 1]]], axis=1)


def plot_graph(
    graph: "Graph",
    ax: Axes | None = None,
    viewport: "Viewport | None" = None,
    title: str = "Graph Layout",
    figsize: tuple[float, float] = (8, 6),
    node_color: str = NODE_COLOR,
    link_color: str = LINK_COLOR,
    node_size: float = NODE_RADIUS ** 2 * 2,
    show_labels: bool = False,
    invert_y: bool = True,
) -> tuple[Figure, Axes]:
    """
    Draw nodes as dots and links as straight lines.

    Args:
        graph: Graph to draw
        ax: Existing axes (creates new if None)
        viewport: If given, draw its outline and use it as the plot limits
        title: Plot title
        node_color: Node fill color
        link_color: Link line color
        node_size: Marker area in points^2
        show_labels: Annotate nodes with their 1-based index
        invert_y: Screen convention, y grows downward

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    pos = positions_array(graph)
    pairs = link_index_pairs(graph)

    lines = LineCollection(_link_segments(pos, pairs), colors=link_color, linewidths=1.0, zorder=1)
    ax.add_collection(lines)

    if len(pos) > 0:
        ax.scatter(pos[:, 0], pos[:, 1], s=node_size, color=node_color, zorder=2)

    if show_labels:
        for i, (x, y) in enumerate(pos, start=1):
            ax.annotate(str(i), (x, y), textcoords="offset points", xytext=(4, 4), fontsize=8)

    if viewport is not None:
        ax.add_patch(Rectangle(
            (viewport.min_x, viewport.min_y), viewport.width, viewport.height,
            fill=False, edgecolor="gray", linestyle="--", linewidth=1,
        ))
        ax.set_xlim(viewport.min_x, viewport.max_x)
        ax.set_ylim(viewport.min_y, viewport.max_y)
    else:
        ax.autoscale_view()

    if invert_y:
        ax.invert_yaxis()

    ax.set_aspect("equal")
    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("y")

    return fig, ax


def plot_trajectories(
    history: Sequence[np.ndarray],
    graph: "Graph | None" = None,
    title: str = "Node Trajectories",
    figsize: tuple[float, float] = (8, 6),
    show_start: bool = True,
    invert_y: bool = True,
) -> Figure:
    """
    Plot the path each node took during a recorded run.

    Args:
        history: Per-tick (N, 2) position snapshots (Simulation.history)
        graph: If given, draw its links at the final positions
        title: Plot title
        show_start: Mark starting positions

    Returns:
        Figure
    """
    fig, ax = plt.subplots(figsize=figsize)
    traj = trajectory_arrays(history)

    if traj.size:
        cmap_lines = matplotlib.colormaps["tab10"]
        n_nodes = traj.shape[1]
        for i in range(n_nodes):
            color = cmap_lines(i % 10)
            ax.plot(traj[:, i, 0], traj[:, i, 1], color=color, linewidth=1.5, zorder=2)
            if show_start:
                ax.scatter([traj[0, i, 0]], [traj[0, i, 1]], color=color, s=30, marker="o", zorder=3)
            ax.scatter([traj[-1, i, 0]], [traj[-1, i, 1]], color=color, s=40, marker="s", zorder=3)

    if graph is not None:
        segments = _link_segments(positions_array(graph), link_index_pairs(graph))
        ax.add_collection(LineCollection(segments, colors="gray", linewidths=0.8, alpha=0.6, zorder=1))

    ax.autoscale_view()
    if invert_y:
        ax.invert_yaxis()
    ax.set_aspect("equal")
    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("y")

    fig.tight_layout()
    return fig


def plot_convergence(
    history: Sequence[np.ndarray],
    title: str = "Convergence",
    figsize: tuple[float, float] = (8, 4),
) -> Figure:
    """
    Mean and max per-tick displacement over a recorded run.

    A layout that has settled shows both curves flattening towards zero.
    """
    fig, ax = plt.subplots(figsize=figsize)
    steps = displacement_per_tick(history)

    if steps.size:
        ticks = np.arange(1, len(steps) + 1)
        ax.plot(ticks, steps.mean(axis=1), label="mean", linewidth=2)
        ax.plot(ticks, steps.max(axis=1), label="max", linewidth=1, linestyle="--")
        ax.legend()

    ax.set_xlabel("Tick")
    ax.set_ylabel("Displacement")
    ax.set_title(title)
    ax.grid(True, alpha=0.3)

    fig.tight_layout()
    return fig


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file."""
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
