"""
Computer paddle controller for Pong Engine.
"""

from __future__ import annotations

from dataclasses import dataclass

from pong_engine.constants import CANVAS_HEIGHT, PADDLE_HEIGHT
from pong_engine.entities import Ball, Paddle
from pong_engine.vector import Vector


@dataclass(frozen=True)
class CpuPaddleController:
    """
    Very simple CPU:
    - Looks at the ball's centre Y on every computer tick.
    - Jumps the paddle so its top sits ``aim_offset`` above the ball.

    Aiming at the top of the paddle instead of its centre is what lets the
    computer miss.

    :ivar aim_offset (float): Distance kept between the paddle's top and the
        ball's centre.
    :ivar canvas_height (float): Height of the playing field.
    """

    aim_offset: float = PADDLE_HEIGHT / 4
    canvas_height: float = CANVAS_HEIGHT

    def compute_move(self, paddle: Paddle, ball: Ball) -> Vector:
        """
        Decide the paddle displacement for this tick.

        :param paddle: The paddle to control.
        :type paddle: Paddle

        :param ball: The ball to track.
        :type ball: Ball

        :return: Vertical displacement, no horizontal motion.
        :rtype: Vector
        """
        dy = ball.position.sub(paddle.position).y - self.aim_offset
        return Vector(0, dy)

    def step(self, paddle: Paddle, ball: Ball) -> Paddle:
        """Move ``paddle`` towards ``ball``, subject to the border check."""
        return paddle.move(self.compute_move(paddle, ball), self.canvas_height)
