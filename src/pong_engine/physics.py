"""
Ball physics: reflection off walls and paddles, and linear motion.
"""

from __future__ import annotations

import math

from pong_engine.collision import Collisions
from pong_engine.constants import CANVAS_WIDTH, MAX_ANGLE
from pong_engine.entities import Ball, Paddle
from pong_engine.rng import SeededRNG
from pong_engine.vector import Vector


def invert_y(velocity: Vector) -> Vector:
    """Flip the vertical component."""
    return Vector(velocity.x, -velocity.y)


def paddle_bounce_velocity(
    paddle: Paddle, ball: Ball, rng: SeededRNG
) -> Vector:
    """
    Velocity of ``ball`` after hitting ``paddle``.

    The further from the paddle's centre the ball hits, the steeper it
    leaves, up to ``MAX_ANGLE``. The horizontal direction sends the ball back
    to the half it came from, the vertical direction is drawn from ``rng``
    and the incoming speed is kept.

    :param paddle: Paddle that was hit.
    :type paddle: Paddle

    :param ball: Ball before the bounce.
    :type ball: Ball

    :param rng: Generator for the vertical direction. Drawn exactly once.
    :type rng: SeededRNG

    :return: New velocity.
    :rtype: Vector
    """
    ratio = (ball.position.y - paddle.centre_y) / (paddle.height / 2)
    angle = ratio * MAX_ANGLE
    x_direction = -1 if ball.position.x > CANVAS_WIDTH / 2 else 1
    y_direction = rng.sign()
    speed = ball.speed
    return Vector(
        x_direction * speed * math.cos(angle),
        y_direction * speed * math.sin(angle),
    )


def advance_ball(
    ball: Ball,
    collisions: Collisions,
    right: Paddle,
    left: Paddle,
    rng: SeededRNG,
) -> Ball:
    """
    Move the ball one tick.

    A wall crossing wins over a paddle hit. If both paddles report a hit the
    right paddle is used.
    """
    if collisions.wall:
        return ball.moved(invert_y(ball.velocity))

    if collisions.paddle:
        assert not (
            collisions.user_paddle and collisions.opp_paddle
        ), "ball cannot touch both paddles"
        paddle = right if collisions.user_paddle else left
        return ball.moved(paddle_bounce_velocity(paddle, ball, rng))

    return ball.moved(ball.velocity)
