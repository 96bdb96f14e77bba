"""
Collision detection for the ball against the canvas walls and the paddles.

Wall tests work on closed intervals ``(lo, hi)``. A wall is crossed
only once the ball has completely left the playable interval, touching it is
not enough.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Callable

from pong_engine.constants import BALL_RADIUS, CANVAS_HEIGHT, CANVAS_WIDTH
from pong_engine.entities import Ball, Paddle

Interval = tuple[float, float]
Compare = Callable[[float, float], bool]

CANVAS_X_INTERVAL: Interval = (BALL_RADIUS, CANVAS_WIDTH - BALL_RADIUS)
CANVAS_Y_INTERVAL: Interval = (BALL_RADIUS, CANVAS_HEIGHT - BALL_RADIUS)


def overlapping(first: Interval, second: Interval) -> bool:
    """Whether two closed intervals share at least one point."""
    a, b = first
    c, d = second
    return not (b < c or d < a)


def wall_crossed(compare: Compare, ball: Interval, canvas: Interval) -> bool:
    """
    Directional wall test.

    :param compare: Applied to the lower bounds of ``ball`` and ``canvas``;
        picks the side of the canvas being tested.
    :type compare: Callable[[float, float], bool]

    :param ball: Ball extent on the tested axis.
    :type ball: Interval

    :param canvas: Playable extent on the same axis.
    :type canvas: Interval

    :return: True if the ball is on that side and fully outside the canvas.
    :rtype: bool
    """
    return compare(ball[0], canvas[0]) and not overlapping(ball, canvas)


def crossed_top(ball: Ball) -> bool:
    """Ball fully above the canvas."""
    return wall_crossed(operator.lt, ball.y_interval, CANVAS_Y_INTERVAL)


def crossed_bottom(ball: Ball) -> bool:
    """Ball fully below the canvas."""
    return wall_crossed(operator.ge, ball.y_interval, CANVAS_Y_INTERVAL)


def crossed_left(ball: Ball) -> bool:
    """Ball fully past the left edge."""
    return wall_crossed(operator.lt, ball.x_interval, CANVAS_X_INTERVAL)


def crossed_right(ball: Ball) -> bool:
    """Ball fully past the right edge."""
    return wall_crossed(operator.ge, ball.x_interval, CANVAS_X_INTERVAL)


def hits_paddle(ball: Ball, paddle: Paddle) -> bool:
    """Ball overlaps the paddle on both axes."""
    return ball.collider.intersects(paddle.collider)


# Justification: one flag per wall and paddle
# pylint: disable=too-many-instance-attributes
@dataclass(frozen=True)
class Collisions:
    """
    Collision flags for one ball tick, taken before the ball moves.

    :ivar top (bool): Ball left through the top wall.
    :ivar bottom (bool): Ball left through the bottom wall.
    :ivar left (bool): Ball left through the left edge.
    :ivar right (bool): Ball left through the right edge.
    :ivar user_paddle (bool): Ball touches the right (user) paddle.
    :ivar opp_paddle (bool): Ball touches the left (computer) paddle.
    """

    top: bool = False
    bottom: bool = False
    left: bool = False
    right: bool = False
    user_paddle: bool = False
    opp_paddle: bool = False

    @property
    def wall(self) -> bool:
        """Top or bottom wall crossed."""
        return self.top or self.bottom

    @property
    def goal(self) -> bool:
        """Left or right edge crossed."""
        return self.left or self.right

    @property
    def paddle(self) -> bool:
        """Either paddle hit."""
        return self.user_paddle or self.opp_paddle

    @classmethod
    def detect(cls, ball: Ball, right: Paddle, left: Paddle) -> Collisions:
        """
        Evaluate every predicate for ``ball``.

        :param ball: Ball before the tick.
        :type ball: Ball

        :param right: User controlled paddle.
        :type right: Paddle

        :param left: Computer controlled paddle.
        :type left: Paddle

        :return: Collision flags.
        :rtype: Collisions
        """
        return cls(
            top=crossed_top(ball),
            bottom=crossed_bottom(ball),
            left=crossed_left(ball),
            right=crossed_right(ball),
            user_paddle=hits_paddle(ball, right),
            opp_paddle=hits_paddle(ball, left),
        )


# pylint: enable=too-many-instance-attributes
