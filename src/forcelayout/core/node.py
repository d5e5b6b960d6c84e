"""
Node: a point mass in the layout.

A node owns its position and nothing else. Each tick the graph hands it
the list of forces it experienced; the node sums them into a velocity,
caps that velocity at max_speed, and moves.
"""

from __future__ import annotations
from typing import Sequence

from forcelayout.core.vector import Vector2

DEFAULT_MAX_SPEED = 300.0


class Node:
    """
    A point mass with a position and a per-step speed cap.

    Nodes compare and hash by identity: two nodes at the same position are
    still different nodes, and the graph keys its force map by node.
    """

    def __init__(
        self,
        position: Vector2 | tuple[float, float] = (0.0, 0.0),
        max_speed: float = DEFAULT_MAX_SPEED,
    ):
        if not max_speed > 0:
            raise ValueError(f"max_speed must be positive, got {max_speed!r}")
        self._position = Vector2.of(position)
        self.max_speed = float(max_speed)

    @property
    def position(self) -> Vector2:
        return self._position

    @position.setter
    def position(self, value: Vector2 | tuple[float, float]):
        self._position = Vector2.of(value)

    def get_position(self) -> Vector2:
        """Current position. No side effects."""
        return self._position

    def set_position(self, position: Vector2 | tuple[float, float]) -> None:
        """
        Overwrite the position unconditionally.

        Used by hosts for boundary clamping; the caller is responsible for
        passing a sensible point.
        """
        self._position = Vector2.of(position)

    def apply_forces(self, forces: Sequence[Vector2]) -> Vector2:
        """
        Integrate one step from the accumulated forces.

        Sums all forces into a single velocity, rescales it to exactly
        max_speed if it is faster than that, and adds it to the position.

        Args:
            forces: Forces accumulated for this node during the tick

        Returns:
            The displacement actually applied (zero vector if none)
        """
        if not forces:
            return Vector2.zero()

        vx = 0.0
        vy = 0.0
        for force in forces:
            vx += force.x
            vy += force.y
        velocity = Vector2(vx, vy)

        speed = velocity.magnitude()
        if speed == 0.0:
            return velocity
        if speed > self.max_speed:
            velocity = velocity * (self.max_speed / speed)

        self._position = self._position + velocity
        return velocity

    def __repr__(self) -> str:
        return f"Node({self._position.x:.2f}, {self._position.y:.2f})"
