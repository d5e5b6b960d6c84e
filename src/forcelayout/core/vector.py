"""
Vector2: 2D point/vector arithmetic used by the layout engine.

A small immutable value type. Positions, forces and displacements are all
Vector2; the engine never shares mutable vectors between nodes.
"""

from __future__ import annotations
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """Immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0.0, 0.0)

    @classmethod
    def of(cls, value: Vector2 | tuple[float, float]) -> Vector2:
        """Coerce an (x, y) pair (or another Vector2) to a Vector2."""
        if isinstance(value, Vector2):
            return value
        x, y = value
        return cls(float(x), float(y))

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)

    def __abs__(self) -> float:
        return self.magnitude()

    def __iter__(self):
        yield self.x
        yield self.y

    def magnitude(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def distance_to(self, other: Vector2) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def normalized(self) -> Vector2:
        """
        Unit vector in the same direction.

        The zero vector normalizes to itself instead of dividing by zero.
        """
        mag = self.magnitude()
        if mag == 0.0:
            return Vector2.zero()
        return self / mag

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def as_tuple(self) -> tuple[float, float]:
        return self.x, self.y

    def __repr__(self) -> str:
        return f"Vector2({self.x:.4f}, {self.y:.4f})"


def distance(a: Vector2, b: Vector2) -> float:
    """Euclidean distance between two points."""
    return a.distance_to(b)
