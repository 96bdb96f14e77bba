"""
Pong Engine: a deterministic state-transition engine for a one player vs
computer game of Pong.
"""

from __future__ import annotations

from pong_engine.game.models import Event, EventKind, GameState, initial_state
from pong_engine.game.reducer import reduce
from pong_engine.game.session import GameSession, SessionConfig
from pong_engine.rng import SeededRNG, default_rng
from pong_engine.vector import Vector

__all__ = [
    "Event",
    "EventKind",
    "GameSession",
    "GameState",
    "SeededRNG",
    "SessionConfig",
    "Vector",
    "default_rng",
    "initial_state",
    "reduce",
]
