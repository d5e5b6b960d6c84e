"""
Analysis layer: read-only diagnostics for layouts and runs.

IMPORTANT: This is NOT seen by the engine. One-way derivation only.

- positions_array / link_index_pairs: graph state as numpy arrays
- link_lengths, pairwise_distances, min_separation: spacing measures
- is_colinear, is_monotonic, has_non_finite: shape checks
- compute_layout_stats: one-shot summary
- trajectory_arrays, displacement_per_tick: recorded-run helpers
"""

from forcelayout.analysis.metrics import (
    positions_array,
    link_index_pairs,
    link_lengths,
    pairwise_distances,
    min_separation,
    bounding_box,
    centroid,
    has_non_finite,
    is_colinear,
    is_monotonic,
    LayoutStats,
    compute_layout_stats,
    trajectory_arrays,
    displacement_per_tick,
)

__all__ = [
    "positions_array",
    "link_index_pairs",
    "link_lengths",
    "pairwise_distances",
    "min_separation",
    "bounding_box",
    "centroid",
    "has_non_finite",
    "is_colinear",
    "is_monotonic",
    "LayoutStats",
    "compute_layout_stats",
    "trajectory_arrays",
    "displacement_per_tick",
]
