"""
Shared fixtures for Pong Engine tests.
"""

from __future__ import annotations

from dataclasses import replace

import pytest

from pong_engine.game.models import GameState, initial_state
from pong_engine.rng import SeededRNG
from pong_engine.vector import Vector


@pytest.fixture
def state() -> GameState:
    """Fresh initial state."""
    return initial_state()


@pytest.fixture
def rng() -> SeededRNG:
    """Generator with a fixed seed."""
    return SeededRNG(20)


def with_ball(state: GameState, x: float, y: float, vx=2.5, vy=-3.5) -> GameState:
    """Copy of ``state`` with the ball placed at ``(x, y)``."""
    ball = replace(state.ball, position=Vector(x, y), velocity=Vector(vx, vy))
    return replace(state, ball=ball)
