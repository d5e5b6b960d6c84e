"""
Pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import pytest
import numpy as np


CHAIN_INPUT = "3\n0 0\n10 0\n20 0\n1 2\n2 3\n"


@pytest.fixture
def default_config():
    """Default force model."""
    from forcelayout.core import LayoutConfig
    return LayoutConfig()


@pytest.fixture
def chain_graph():
    """Three colinear nodes, chain-linked 1-2-3."""
    from forcelayout.io import parse_graph
    return parse_graph(CHAIN_INPUT)


@pytest.fixture
def pair_graph():
    """Two unlinked nodes 20 units apart."""
    from forcelayout.core import Graph
    graph = Graph()
    graph.create_node((0.0, 0.0))
    graph.create_node((20.0, 0.0))
    return graph


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)
