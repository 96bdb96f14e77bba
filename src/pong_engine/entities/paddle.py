"""
Paddle entity for Pong Engine.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from mini_arcade_core.spaces.d2.collision2d import RectCollider
from mini_arcade_core.spaces.d2.geometry2d import Position2D, Size2D

from pong_engine.constants import CANVAS_HEIGHT, PADDLE_HEIGHT, PADDLE_WIDTH
from pong_engine.vector import Vector


@dataclass(frozen=True)
class Paddle:
    """
    Paddle entity.

    :ivar id (str): Identifier the renderer uses to find the paddle.
    :ivar position (Vector): Top-left corner of the paddle.
    :ivar width (float): Width of the paddle.
    :ivar height (float): Height of the paddle.
    """

    id: str
    position: Vector
    width: float = PADDLE_WIDTH
    height: float = PADDLE_HEIGHT

    @property
    def collider(self) -> RectCollider:
        """Collider for the paddle."""
        return RectCollider(
            Position2D(self.position.x, self.position.y),
            Size2D(self.width, self.height),
        )

    @property
    def centre_y(self) -> float:
        """Vertical centre of the paddle."""
        return self.position.y + self.height / 2

    def out_of_border(
        self, move: Vector, canvas_height: float = CANVAS_HEIGHT
    ) -> bool:
        """
        Whether moving by ``move`` would leave the canvas vertically.

        :param move: Displacement to test.
        :type move: Vector

        :param canvas_height: Height of the playing field.
        :type canvas_height: float

        :return: True if the candidate position is outside the field.
        :rtype: bool
        """
        y = self.position.add(move).y
        return y < 0 or y + self.height > canvas_height

    def move(self, move: Vector, canvas_height: float = CANVAS_HEIGHT) -> Paddle:
        """
        Move the paddle by ``move``.

        A move that would leave the canvas is rejected as a whole: the paddle
        comes back unchanged instead of being clamped to the edge.
        """
        if self.out_of_border(move, canvas_height):
            return self
        moved = replace(self, position=self.position.add(move))
        assert (
            0 <= moved.position.y
            and moved.position.y + moved.height <= canvas_height
        ), "paddle left the canvas"
        return moved

    def at(self, position: Vector) -> Paddle:
        """Same paddle placed at ``position``."""
        return replace(self, position=position)
