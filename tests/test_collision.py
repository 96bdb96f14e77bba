"""
Tests for interval and collision predicates.
"""

import operator

from pong_engine.collision import (
    Collisions,
    crossed_bottom,
    crossed_left,
    crossed_right,
    crossed_top,
    hits_paddle,
    overlapping,
    wall_crossed,
)
from pong_engine.entities import Ball, Paddle
from pong_engine.vector import Vector


def ball_at(x: float, y: float) -> Ball:
    return Ball(id="ball", position=Vector(x, y), velocity=Vector(2.5, -3.5))


class TestIntervals:
    """Tests for interval overlap"""

    def test_overlap(self) -> None:
        """Intersecting intervals overlap"""
        assert overlapping((0, 5), (3, 8))
        assert overlapping((3, 8), (0, 5))
        assert overlapping((0, 10), (2, 3))

    def test_touching_counts(self) -> None:
        """Closed intervals sharing an end point overlap"""
        assert overlapping((0, 1), (1, 2))

    def test_disjoint(self) -> None:
        """Separated intervals do not overlap"""
        assert not overlapping((0, 1), (1.5, 2))
        assert not overlapping((1.5, 2), (0, 1))

    def test_wall_crossed_needs_full_exit(self) -> None:
        """Being on the side is not enough, the ball must be outside"""
        assert not wall_crossed(operator.lt, (0, 12), (6, 594))
        assert wall_crossed(operator.lt, (-7, 5), (6, 594))


class TestWalls:
    """Tests for the four wall predicates"""

    def test_centre_crosses_nothing(self) -> None:
        """A ball in the middle crosses no wall"""
        ball = ball_at(300, 300)
        assert not any(
            f(ball)
            for f in (crossed_top, crossed_bottom, crossed_left, crossed_right)
        )

    def test_top(self) -> None:
        """Top wall is crossed once the ball is fully above"""
        assert not crossed_top(ball_at(300, 0))
        assert crossed_top(ball_at(300, -1))
        assert not crossed_bottom(ball_at(300, -1))

    def test_bottom(self) -> None:
        """Bottom wall is crossed once the ball is fully below"""
        assert not crossed_bottom(ball_at(300, 600))
        assert crossed_bottom(ball_at(300, 601))
        assert not crossed_top(ball_at(300, 601))

    def test_left(self) -> None:
        """Left edge"""
        assert not crossed_left(ball_at(0, 300))
        assert crossed_left(ball_at(-1, 300))
        assert not crossed_right(ball_at(-1, 300))

    def test_right(self) -> None:
        """Right edge"""
        assert not crossed_right(ball_at(600, 300))
        assert crossed_right(ball_at(601, 300))
        assert not crossed_left(ball_at(601, 300))


class TestPaddleCollision:
    """Tests for ball against paddle"""

    paddle = Paddle(id="rightPaddle", position=Vector(580, 260))

    def test_hit(self) -> None:
        """Overlap on both axes is a hit"""
        assert hits_paddle(ball_at(575, 300), self.paddle)
        assert hits_paddle(ball_at(585, 254), self.paddle)

    def test_miss_horizontally(self) -> None:
        """Overlap on y only is a miss"""
        assert not hits_paddle(ball_at(570, 300), self.paddle)

    def test_miss_vertically(self) -> None:
        """Overlap on x only is a miss"""
        assert not hits_paddle(ball_at(585, 250), self.paddle)
        assert not hits_paddle(ball_at(585, 347), self.paddle)

    def test_detect(self) -> None:
        """Collisions gathers every flag"""
        left = Paddle(id="leftPaddle", position=Vector(10, 260))
        flags = Collisions.detect(ball_at(575, 300), self.paddle, left)
        assert flags.user_paddle and flags.paddle
        assert not flags.opp_paddle
        assert not flags.wall and not flags.goal

        flags = Collisions.detect(ball_at(-10, -10), self.paddle, left)
        assert flags.top and flags.left
        assert flags.wall and flags.goal
