"""
Layout diagnostics computed from a graph's current state.

IMPORTANT: This is NOT seen by the engine. One-way derivation only.
Everything here reads positions into numpy arrays and measures them;
nothing writes back to nodes.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

import numpy as np
from scipy.spatial.distance import pdist

if TYPE_CHECKING:
    from forcelayout.core.graph import Graph


def positions_array(graph: "Graph") -> np.ndarray:
    """Node positions as an (N, 2) float64 array, in node order."""
    nodes = graph.get_nodes()
    if not nodes:
        return np.zeros((0, 2), dtype=np.float64)
    return np.array([node.position.as_tuple() for node in nodes], dtype=np.float64)


def link_index_pairs(graph: "Graph") -> np.ndarray:
    """Link endpoints as an (E, 2) array of 0-based node indices."""
    index = {node: i for i, node in enumerate(graph.get_nodes())}
    pairs = [(index[link.first], index[link.second]) for link in graph.get_links()]
    if not pairs:
        return np.zeros((0, 2), dtype=np.int64)
    return np.array(pairs, dtype=np.int64)


def link_lengths(graph: "Graph") -> np.ndarray:
    """Current length of every link, in link order."""
    pos = positions_array(graph)
    pairs = link_index_pairs(graph)
    if len(pairs) == 0:
        return np.zeros(0, dtype=np.float64)
    return np.linalg.norm(pos[pairs[:, 0]] - pos[pairs[:, 1]], axis=1)


def pairwise_distances(graph: "Graph") -> np.ndarray:
    """Condensed pairwise distance vector (see scipy.spatial.distance.pdist)."""
    pos = positions_array(graph)
    if len(pos) < 2:
        return np.zeros(0, dtype=np.float64)
    return pdist(pos)


def min_separation(graph: "Graph") -> float:
    """Smallest distance between any two nodes (inf for fewer than two)."""
    dists = pairwise_distances(graph)
    return float(dists.min()) if dists.size else float("inf")


def bounding_box(graph: "Graph") -> tuple[float, float, float, float]:
    """(min_x, min_y, max_x, max_y) of all nodes."""
    pos = positions_array(graph)
    if len(pos) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    lo = pos.min(axis=0)
    hi = pos.max(axis=0)
    return float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1])


def centroid(graph: "Graph") -> np.ndarray:
    pos = positions_array(graph)
    if len(pos) == 0:
        return np.zeros(2)
    return pos.mean(axis=0)


def has_non_finite(graph: "Graph") -> bool:
    """True if any node position contains NaN or inf."""
    return not bool(np.all(np.isfinite(positions_array(graph))))


def is_colinear(graph: "Graph", tol: float = 1e-6) -> bool:
    """
    Whether all nodes lie on one straight line.

    Uses the singular values of the centered positions: a colinear point
    set has (numerically) rank at most one.
    """
    pos = positions_array(graph)
    if len(pos) < 3:
        return True
    centered = pos - pos.mean(axis=0)
    singular = np.linalg.svd(centered, compute_uv=False)
    return bool(singular[-1] <= tol)


def is_monotonic(graph: "Graph", axis: int = 0, strict: bool = True) -> bool:
    """Whether node coordinates along an axis are sorted in node order."""
    coords = positions_array(graph)[:, axis]
    steps = np.diff(coords)
    return bool(np.all(steps > 0) if strict else np.all(steps >= 0))


@dataclass
class LayoutStats:
    """Summary of a layout at one instant."""

    n_nodes: int
    n_links: int
    bounds: tuple[float, float, float, float]
    centroid: tuple[float, float]
    min_separation: float
    mean_link_length: float
    max_link_length: float
    finite: bool


def compute_layout_stats(graph: "Graph") -> LayoutStats:
    """Collect the usual diagnostics in one pass."""
    lengths = link_lengths(graph)
    c = centroid(graph)
    return LayoutStats(
        n_nodes=len(graph.get_nodes()),
        n_links=len(graph.get_links()),
        bounds=bounding_box(graph),
        centroid=(float(c[0]), float(c[1])),
        min_separation=min_separation(graph),
        mean_link_length=float(lengths.mean()) if lengths.size else 0.0,
        max_link_length=float(lengths.max()) if lengths.size else 0.0,
        finite=not has_non_finite(graph),
    )


def trajectory_arrays(history: Sequence[np.ndarray]) -> np.ndarray:
    """Stack per-tick (N, 2) snapshots into a (T, N, 2) array."""
    if len(history) == 0:
        return np.zeros((0, 0, 2), dtype=np.float64)
    return np.stack(history)


def displacement_per_tick(history: Sequence[np.ndarray]) -> np.ndarray:
    """
    Per-node displacement between consecutive snapshots.

    Returns:
        (T-1, N) array of step lengths
    """
    traj = trajectory_arrays(history)
    if len(traj) < 2:
        return np.zeros((0, traj.shape[1]))
    return np.linalg.norm(np.diff(traj, axis=0), axis=2)
