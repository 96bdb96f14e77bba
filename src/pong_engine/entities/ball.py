"""
Ball entity for Pong Engine.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from mini_arcade_core.spaces.d2.collision2d import RectCollider
from mini_arcade_core.spaces.d2.geometry2d import Position2D, Size2D

from pong_engine.constants import BALL_RADIUS
from pong_engine.vector import Vector


@dataclass(frozen=True)
class Ball:
    """
    Ball entity.

    :ivar id (str): Identifier the renderer uses to find the ball.
    :ivar position (Vector): Centre of the ball.
    :ivar velocity (Vector): Displacement applied on every ball tick.
    :ivar radius (float): Radius of the ball.
    """

    id: str
    position: Vector
    velocity: Vector
    radius: float = BALL_RADIUS

    @property
    def x_interval(self) -> tuple[float, float]:
        """Horizontal extent ``[cx - r, cx + r]``."""
        return (self.position.x - self.radius, self.position.x + self.radius)

    @property
    def y_interval(self) -> tuple[float, float]:
        """Vertical extent ``[cy - r, cy + r]``."""
        return (self.position.y - self.radius, self.position.y + self.radius)

    @property
    def collider(self) -> RectCollider:
        """Collider for the ball, the square around its circle."""
        return RectCollider(
            Position2D(
                self.position.x - self.radius, self.position.y - self.radius
            ),
            Size2D(2 * self.radius, 2 * self.radius),
        )

    @property
    def speed(self) -> float:
        """Magnitude of the velocity."""
        return self.velocity.len()

    def moved(self, velocity: Vector) -> Ball:
        """Ball with ``velocity`` set and its position advanced by it."""
        return replace(
            self, position=self.position.add(velocity), velocity=velocity
        )
