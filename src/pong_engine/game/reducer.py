"""
The reducer: folds one event into the game state.
"""

from __future__ import annotations

from dataclasses import replace

from pong_engine.collision import Collisions
from pong_engine.controllers.cpu import CpuPaddleController
from pong_engine.game.models import Event, EventKind, GameState
from pong_engine.game.scoring import apply_scoring
from pong_engine.physics import advance_ball
from pong_engine.rng import SeededRNG, default_rng

CPU_CONTROLLER = CpuPaddleController()


def reduce_paddle_move(state: GameState, event: Event) -> GameState:
    """Move the user (right) paddle."""
    return replace(state, right_paddle=state.right_paddle.move(event.move))


def reduce_computer_move(state: GameState) -> GameState:
    """Let the computer (left) paddle follow the ball."""
    return replace(
        state, left_paddle=CPU_CONTROLLER.step(state.left_paddle, state.ball)
    )


def reduce_ball_tick(state: GameState, rng: SeededRNG) -> GameState:
    """
    Advance the ball one step.

    Collisions are detected on the ball before it moves, then the ball is
    reflected and moved, then goals are scored.
    """
    collisions = Collisions.detect(
        state.ball, state.right_paddle, state.left_paddle
    )
    ball = advance_ball(
        state.ball, collisions, state.right_paddle, state.left_paddle, rng
    )
    return apply_scoring(replace(state, ball=ball), collisions, rng)


def reduce(
    state: GameState, event: Event, rng: SeededRNG | None = None
) -> GameState:
    """
    Fold ``event`` into ``state``.

    Every event yields a state; a finished game is not special-cased here,
    stopping the event flow is up to the caller.

    :param state: Current state.
    :type state: GameState

    :param event: Event to apply.
    :type event: Event

    :param rng: Generator for random directions. Defaults to the shared
        generator from :func:`pong_engine.rng.default_rng`.
    :type rng: SeededRNG, optional

    :return: Next state.
    :rtype: GameState
    """
    if event.kind is EventKind.PADDLE_MOVE:
        return reduce_paddle_move(state, event)
    if event.kind is EventKind.COMPUTER_PADDLE_MOVE:
        return reduce_computer_move(state)
    if event.kind is EventKind.BALL_TICK:
        return reduce_ball_tick(state, rng or default_rng())
    raise ValueError(f"Unknown event kind: {event.kind!r}")
