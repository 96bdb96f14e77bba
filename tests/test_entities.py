"""
Tests for paddle movement, colliders and the computer controller.
"""

import pytest

from pong_engine.collision import overlapping
from pong_engine.controllers.cpu import CpuPaddleController
from pong_engine.entities import Ball, Paddle
from pong_engine.vector import Vector


def paddle_at(y: float) -> Paddle:
    return Paddle(id="rightPaddle", position=Vector(580, y))


class TestPaddle:
    """Tests for Paddle.move"""

    @pytest.mark.parametrize("dy", [-260, -10, 0, 10, 260])
    def test_move_inside(self, dy: float) -> None:
        """A move that stays inside adds the vector"""
        paddle = paddle_at(260)
        moved = paddle.move(Vector(0, dy))
        assert moved.position == paddle.position + Vector(0, dy)

    @pytest.mark.parametrize("dy", [-261, -1000, 261, 1000])
    def test_move_outside_is_rejected(self, dy: float) -> None:
        """A move that leaves the canvas keeps the paddle where it was"""
        paddle = paddle_at(260)
        assert paddle.move(Vector(0, dy)) == paddle

    def test_rejected_not_clamped(self) -> None:
        """Near the top a large move is not shortened to fit"""
        paddle = paddle_at(5)
        assert paddle.move(Vector(0, -10)).position.y == 5

    def test_edges_are_allowed(self) -> None:
        """Touching the top or bottom edge is inside"""
        assert paddle_at(10).move(Vector(0, -10)).position.y == 0
        assert paddle_at(510).move(Vector(0, 10)).position.y == 520

    def test_move_returns_new_paddle(self) -> None:
        """The original paddle is untouched"""
        paddle = paddle_at(100)
        paddle.move(Vector(0, 10))
        assert paddle.position.y == 100


class TestCpuPaddleController:
    """Tests for the computer paddle"""

    controller = CpuPaddleController()
    paddle = Paddle(id="leftPaddle", position=Vector(10, 260))

    def test_aims_quarter_paddle_above_ball(self) -> None:
        """The paddle top goes to ball.y - height / 4"""
        ball = Ball(id="ball", position=Vector(300, 300), velocity=Vector(1, 1))
        assert self.controller.compute_move(self.paddle, ball) == Vector(0, 20)
        assert self.controller.step(self.paddle, ball).position == Vector(10, 280)

    def test_border_rejects_move(self) -> None:
        """Tracking a ball near the top edge would leave the canvas"""
        ball = Ball(id="ball", position=Vector(300, 5), velocity=Vector(1, 1))
        assert self.controller.step(self.paddle, ball) == self.paddle


class TestColliders:
    """Tests for the library colliders behind paddle hits"""

    def test_paddle_collider_vertical_extent(self) -> None:
        """The paddle collider spans from its top to top + height"""
        paddle = paddle_at(260)
        for y, hit in ((254, True), (253, False), (346, True), (347, False)):
            ball = Ball(id="ball", position=Vector(585, y), velocity=Vector(1, 1))
            assert bool(ball.collider.intersects(paddle.collider)) is hit

    def test_ball_collider_matches_intervals(self) -> None:
        """The ball collider agrees with the interval test on both axes"""
        paddle = paddle_at(260)
        for x in range(560, 600, 3):
            for y in range(240, 360, 7):
                ball = Ball(
                    id="ball", position=Vector(x, y), velocity=Vector(1, 1)
                )
                expected = overlapping(
                    ball.x_interval, (580, 590)
                ) and overlapping(ball.y_interval, (260, 340))
                assert bool(ball.collider.intersects(paddle.collider)) is expected

    def test_intersects_is_closed(self) -> None:
        """Touching edges count as a hit"""
        ball = Ball(id="ball", position=Vector(574, 300), velocity=Vector(1, 1))
        assert ball.collider.intersects(paddle_at(260).collider)
        ball = Ball(id="ball", position=Vector(573, 300), velocity=Vector(1, 1))
        assert not ball.collider.intersects(paddle_at(260).collider)


class TestPaddleInvariant:
    """The paddle never leaves the canvas"""

    def test_long_move_sequence_stays_inside(self) -> None:
        """Any sequence of moves from a valid paddle keeps it inside"""
        paddle = paddle_at(260)
        moves = [-37, 120, -400, 15, 333, -5, 260, -260, 90, -1]
        for i in range(2000):
            paddle = paddle.move(Vector(0, moves[i % len(moves)] * (i % 3 + 1)))
            assert 0 <= paddle.position.y
            assert paddle.position.y + paddle.height <= 600

    def test_cpu_tracking_stays_inside(self) -> None:
        """The computer paddle stays inside while chasing the ball anywhere"""
        controller = CpuPaddleController()
        paddle = Paddle(id="leftPaddle", position=Vector(10, 260))
        for y in list(range(-50, 700, 13)) + list(range(650, -60, -29)):
            ball = Ball(id="ball", position=Vector(300, y), velocity=Vector(1, 1))
            paddle = controller.step(paddle, ball)
            assert 0 <= paddle.position.y
            assert paddle.position.y + paddle.height <= 600
