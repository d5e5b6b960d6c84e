"""
Core engine primitives.

This layer knows NOTHING about screens, files or wall time.
It only knows:
- Vector2 arithmetic
- Nodes with a position and a speed cap
- Links between nodes
- The Graph that owns both and advances the force simulation
- Delta-time providers the host uses to feed advance()
"""

from forcelayout.core.vector import Vector2, distance
from forcelayout.core.node import Node, DEFAULT_MAX_SPEED
from forcelayout.core.link import Link
from forcelayout.core.graph import Graph, LayoutConfig, COINCIDENCE_EPSILON
from forcelayout.core.clock import Clock, FixedClock, DeltaTimeProvider

__all__ = [
    "Vector2",
    "distance",
    "Node",
    "DEFAULT_MAX_SPEED",
    "Link",
    "Graph",
    "LayoutConfig",
    "COINCIDENCE_EPSILON",
    "Clock",
    "FixedClock",
    "DeltaTimeProvider",
]
