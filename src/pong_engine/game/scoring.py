"""
Scoring rules: goals, round reset and game over.
"""

from __future__ import annotations

from dataclasses import replace

from mini_arcade_core.utils import logger

from pong_engine.collision import Collisions
from pong_engine.constants import (
    BALL_CENTRE,
    DEFAULT_BALL_VELOCITY,
    FINAL_SCORE,
    LEFT_PADDLE_START_POSITION,
    RIGHT_PADDLE_START_POSITION,
)
from pong_engine.game.models import GameState
from pong_engine.rng import SeededRNG
from pong_engine.vector import Vector


def serve_velocity(x_sign: int, rng: SeededRNG) -> Vector:
    """Default velocity heading along ``x_sign`` with a random y direction."""
    return Vector(
        x_sign * DEFAULT_BALL_VELOCITY.x, rng.sign() * DEFAULT_BALL_VELOCITY.y
    )


def is_game_over(user_score: int, opp_score: int) -> bool:
    """Whether either side has reached the final score."""
    return user_score >= FINAL_SCORE or opp_score >= FINAL_SCORE


def apply_scoring(
    state: GameState, collisions: Collisions, rng: SeededRNG
) -> GameState:
    """
    Award a point if the ball left through the left or right edge.

    The ball leaving on the left is a point for the computer, on the right a
    point for the user. This is deliberate: a left exit is never the
    user's point.

    After a point the ball is served again from the centre towards the side
    that scored and both paddles go back to their start positions.

    :param state: State after the ball moved this tick.
    :type state: GameState

    :param collisions: Flags detected at the start of the tick.
    :type collisions: Collisions

    :param rng: Generator for the serve direction.
    :type rng: SeededRNG

    :return: State with score, reset and game over applied.
    :rtype: GameState
    """
    if not collisions.goal:
        return state

    user_score, opp_score = state.user_score, state.opp_score
    if collisions.left:
        opp_score += 1
        velocity = serve_velocity(-1, rng)
    else:
        user_score += 1
        velocity = serve_velocity(1, rng)

    logger.debug(f"Point scored, user {user_score} - {opp_score} opponent")

    return replace(
        state,
        right_paddle=state.right_paddle.at(RIGHT_PADDLE_START_POSITION),
        left_paddle=state.left_paddle.at(LEFT_PADDLE_START_POSITION),
        ball=replace(state.ball, position=BALL_CENTRE, velocity=velocity),
        user_score=user_score,
        opp_score=opp_score,
        game_over=state.game_over or is_game_over(user_score, opp_score),
    )
