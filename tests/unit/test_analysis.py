"""Unit tests for analysis module."""

import math

import numpy as np
import pytest

from forcelayout.analysis.metrics import (
    bounding_box,
    centroid,
    compute_layout_stats,
    displacement_per_tick,
    has_non_finite,
    is_colinear,
    is_monotonic,
    link_index_pairs,
    link_lengths,
    min_separation,
    pairwise_distances,
    positions_array,
    trajectory_arrays,
)
from forcelayout.core.graph import Graph
from forcelayout.io import parse_graph


@pytest.fixture
def square_graph():
    """Unit-10 square with its four sides linked."""
    return parse_graph("4\n0 0\n10 0\n10 10\n0 10\n1 2\n2 3\n3 4\n4 1\n")


class TestArrays:
    """Tests for graph -> numpy conversion."""

    def test_positions_array(self, chain_graph):
        pos = positions_array(chain_graph)
        assert pos.shape == (3, 2)
        assert pos.dtype == np.float64
        assert pos[:, 0].tolist() == [0.0, 10.0, 20.0]

    def test_empty(self):
        graph = Graph()
        assert positions_array(graph).shape == (0, 2)
        assert link_index_pairs(graph).shape == (0, 2)
        assert link_lengths(graph).shape == (0,)

    def test_link_index_pairs(self, square_graph):
        assert link_index_pairs(square_graph).tolist() == [[0, 1], [1, 2], [2, 3], [3, 0]]


class TestSpacing:
    """Tests for distance measures."""

    def test_link_lengths(self, square_graph):
        assert np.allclose(link_lengths(square_graph), 10.0)

    def test_pairwise_distances(self, square_graph):
        dists = pairwise_distances(square_graph)
        assert len(dists) == 6  # 4 choose 2
        assert np.isclose(dists.max(), math.sqrt(200))

    def test_min_separation(self, square_graph):
        assert min_separation(square_graph) == pytest.approx(10.0)

    def test_min_separation_single_node(self):
        graph = parse_graph("1\n0 0\n")
        assert min_separation(graph) == math.inf

    def test_bounds_and_centroid(self, square_graph):
        assert bounding_box(square_graph) == (0.0, 0.0, 10.0, 10.0)
        assert np.allclose(centroid(square_graph), [5.0, 5.0])


class TestShape:
    """Tests for shape predicates."""

    def test_colinear(self, chain_graph):
        assert is_colinear(chain_graph)

    def test_diagonal_colinear(self):
        assert is_colinear(parse_graph("3\n0 0\n1 1\n5 5\n"))

    def test_not_colinear(self, square_graph):
        assert not is_colinear(square_graph)

    def test_monotonic(self, chain_graph):
        assert is_monotonic(chain_graph, axis=0)
        assert not is_monotonic(chain_graph, axis=1)
        assert is_monotonic(chain_graph, axis=1, strict=False)

    def test_non_finite(self, chain_graph):
        assert not has_non_finite(chain_graph)
        chain_graph.get_nodes()[0].set_position((math.nan, 0.0))
        assert has_non_finite(chain_graph)

    def test_layout_stats(self, square_graph):
        stats = compute_layout_stats(square_graph)
        assert stats.n_nodes == 4
        assert stats.n_links == 4
        assert stats.mean_link_length == pytest.approx(10.0)
        assert stats.max_link_length == pytest.approx(10.0)
        assert stats.centroid == pytest.approx((5.0, 5.0))
        assert stats.finite


class TestTrajectories:
    """Tests for recorded-run helpers."""

    def test_trajectory_arrays(self):
        history = [np.zeros((2, 2)), np.ones((2, 2))]
        traj = trajectory_arrays(history)
        assert traj.shape == (2, 2, 2)

    def test_displacement_per_tick(self):
        history = [np.array([[0.0, 0.0], [5.0, 5.0]]), np.array([[3.0, 4.0], [5.0, 5.0]])]
        steps = displacement_per_tick(history)
        assert steps.shape == (1, 2)
        assert steps[0].tolist() == [5.0, 0.0]

    def test_short_history(self):
        assert displacement_per_tick([np.zeros((3, 2))]).shape == (0, 3)
        assert trajectory_arrays([]).shape == (0, 0, 2)
