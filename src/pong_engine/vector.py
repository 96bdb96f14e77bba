"""
Immutable 2D vector used for positions, moves and velocities.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """
    2D vector. Every operation returns a new instance.

    :ivar x (float): Horizontal component.
    :ivar y (float): Vertical component (grows downwards).
    """

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> Vector:
        """The zero vector."""
        return cls(0.0, 0.0)

    def add(self, other: Vector) -> Vector:
        """Component-wise sum."""
        return Vector(self.x + other.x, self.y + other.y)

    def sub(self, other: Vector) -> Vector:
        """Component-wise difference, ``self + (-1 * other)``."""
        return self.add(other.scale(-1))

    def scale(self, factor: float) -> Vector:
        """Multiply both components by ``factor``."""
        return Vector(self.x * factor, self.y * factor)

    def len(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def ortho(self) -> Vector:
        """Rotate 90 degrees clockwise."""
        return Vector(self.y, -self.x)

    def to_tuple(self) -> tuple[float, float]:
        """Return ``(x, y)``."""
        return (self.x, self.y)

    def __add__(self, other: Vector) -> Vector:
        return self.add(other)

    def __sub__(self, other: Vector) -> Vector:
        return self.sub(other)

    def __mul__(self, factor: float) -> Vector:
        return self.scale(factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vector:
        return self.scale(-1)
