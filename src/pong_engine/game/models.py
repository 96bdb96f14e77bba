"""
Pong game model: state and events.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pong_engine.constants import (
    BALL_CENTRE,
    BALL_ID,
    DEFAULT_BALL_VELOCITY,
    FINAL_SCORE,
    LEFT_PADDLE_ID,
    LEFT_PADDLE_START_POSITION,
    RIGHT_PADDLE_ID,
    RIGHT_PADDLE_START_POSITION,
)
from pong_engine.entities import Ball, Paddle
from pong_engine.vector import Vector


@dataclass(frozen=True)
class GameState:
    """
    Pong game state. A new instance is produced for every event.

    :ivar right_paddle (Paddle): User controlled paddle.
    :ivar left_paddle (Paddle): Computer controlled paddle.
    :ivar user_score (int): Points of the user.
    :ivar opp_score (int): Points of the computer.
    :ivar ball (Ball): The ball.
    :ivar game_over (bool): Set once a side reaches the final score.
    """

    right_paddle: Paddle
    left_paddle: Paddle
    user_score: int
    opp_score: int
    ball: Ball
    game_over: bool = False

    @property
    def winner(self) -> str | None:
        """Result message once the game is over."""
        if not self.game_over:
            return None
        return "You Win" if self.user_score >= FINAL_SCORE else "Opponent Win"

    def to_dict(self) -> dict[str, Any]:
        """Plain data snapshot for renderers."""
        return {
            "paddles": {
                paddle.id: {
                    "x": paddle.position.x,
                    "y": paddle.position.y,
                    "width": paddle.width,
                    "height": paddle.height,
                }
                for paddle in (self.right_paddle, self.left_paddle)
            },
            "ball": {
                "id": self.ball.id,
                "x": self.ball.position.x,
                "y": self.ball.position.y,
                "radius": self.ball.radius,
            },
            "scores": {
                "userScore": self.user_score,
                "oppScore": self.opp_score,
            },
            "game_over": self.game_over,
            "winner": self.winner,
        }


def create_paddle(paddle_id: str, position: Vector) -> Paddle:
    """Paddle of the standard size at ``position``."""
    return Paddle(id=paddle_id, position=position)


def create_ball() -> Ball:
    """Ball at the centre of the canvas with the default velocity."""
    return Ball(id=BALL_ID, position=BALL_CENTRE, velocity=DEFAULT_BALL_VELOCITY)


def initial_state() -> GameState:
    """State at the start of a game, also used to restart one."""
    return GameState(
        right_paddle=create_paddle(RIGHT_PADDLE_ID, RIGHT_PADDLE_START_POSITION),
        left_paddle=create_paddle(LEFT_PADDLE_ID, LEFT_PADDLE_START_POSITION),
        user_score=0,
        opp_score=0,
        ball=create_ball(),
        game_over=False,
    )


class EventKind(Enum):
    """Tags of the events the reducer understands."""

    PADDLE_MOVE = "paddle_move"
    COMPUTER_PADDLE_MOVE = "computer_paddle_move"
    BALL_TICK = "ball_tick"


@dataclass(frozen=True)
class Event:
    """
    Event folded into the game state.

    :ivar kind (EventKind): Which transition to run.
    :ivar move (Vector | None): Displacement of the user paddle, only for
        ``PADDLE_MOVE``.
    """

    kind: EventKind
    move: Vector | None = None

    def __post_init__(self):
        if self.kind is EventKind.PADDLE_MOVE and self.move is None:
            raise ValueError("PADDLE_MOVE events need a move vector")
        if self.kind is not EventKind.PADDLE_MOVE and self.move is not None:
            raise ValueError(f"{self.kind.name} events carry no payload")

    @classmethod
    def paddle_move(cls, move: Vector) -> Event:
        """Move the user paddle by ``move``."""
        return cls(EventKind.PADDLE_MOVE, move)

    @classmethod
    def computer_paddle_move(cls) -> Event:
        """Let the computer paddle track the ball."""
        return cls(EventKind.COMPUTER_PADDLE_MOVE)

    @classmethod
    def ball_tick(cls) -> Event:
        """Advance the ball one step."""
        return cls(EventKind.BALL_TICK)
