"""
Viewport: boundary clamp policy applied by the host after each tick.

The engine lets nodes drift anywhere. A host that draws into a fixed
window confines positions to that window by overwriting them between
ticks; this module is that policy.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

from forcelayout.core.vector import Vector2

if TYPE_CHECKING:
    from forcelayout.core.graph import Graph


@dataclass(frozen=True)
class Viewport:
    """Axis-aligned rectangle [origin, origin + size] in layout units."""

    width: float = 800.0
    height: float = 600.0
    origin_x: float = 0.0
    origin_y: float = 0.0

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Viewport size must be non-negative, got {self.width}x{self.height}")

    @property
    def min_x(self) -> float:
        return self.origin_x

    @property
    def max_x(self) -> float:
        return self.origin_x + self.width

    @property
    def min_y(self) -> float:
        return self.origin_y

    @property
    def max_y(self) -> float:
        return self.origin_y + self.height

    @property
    def center(self) -> Vector2:
        return Vector2(self.origin_x + self.width / 2, self.origin_y + self.height / 2)

    def contains(self, point: Vector2) -> bool:
        return self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y

    def clamp_point(self, point: Vector2) -> Vector2:
        """Nearest point inside the viewport."""
        return Vector2(
            max(self.min_x, min(self.max_x, point.x)),
            max(self.min_y, min(self.max_y, point.y)),
        )

    def clamp(self, graph: "Graph") -> int:
        """
        Clamp every node of a graph into the viewport.

        Returns:
            Number of nodes that had to be moved
        """
        moved = 0
        for node in graph.get_nodes():
            position = node.get_position()
            clamped = self.clamp_point(position)
            if clamped != position:
                node.set_position(clamped)
                moved += 1
        return moved
