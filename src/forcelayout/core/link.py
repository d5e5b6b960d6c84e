"""Link: an undirected edge between two nodes of a graph."""

from __future__ import annotations

from forcelayout.core.node import Node
from forcelayout.errors import SelfLoopError


class Link:
    """
    Edge reference between two nodes.

    The link does not own its endpoints; the graph does. Field order is
    kept because it fixes the direction of the attraction force.
    """

    __slots__ = ("_first", "_second")

    def __init__(self, first: Node, second: Node):
        if first is second:
            raise SelfLoopError("link connects a node to itself")
        self._first = first
        self._second = second

    @property
    def first(self) -> Node:
        return self._first

    @property
    def second(self) -> Node:
        return self._second

    def get_first(self) -> Node:
        return self._first

    def get_second(self) -> Node:
        return self._second

    def endpoints(self) -> tuple[Node, Node]:
        return self._first, self._second

    def length(self) -> float:
        """Current distance between the endpoints."""
        return self._first.position.distance_to(self._second.position)

    def __repr__(self) -> str:
        return f"Link({self._first!r}, {self._second!r})"
