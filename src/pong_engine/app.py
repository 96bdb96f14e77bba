"""
Headless match runner for Pong Engine.
"""

from __future__ import annotations

import time

from mini_arcade_core.utils import logger

from pong_engine.constants import DEFAULT_SEED
from pong_engine.game.models import GameState
from pong_engine.game.session import GameSession, SessionConfig


def run(
    max_ticks: int = 100_000,
    seed: int = DEFAULT_SEED,
    realtime: bool = False,
) -> GameState:
    """
    Main entry point for Pong Engine.

    - Builds a session with the given seed.
    - Ticks the ball and the computer paddle; the user paddle stays idle.
    - Stops at game over or after ``max_ticks`` frames.
    - With ``realtime`` the loop sleeps between frames to match the game
      cadence.

    :return: Final game state.
    :rtype: GameState
    """
    session = GameSession(SessionConfig(seed=seed))
    logger.info(f"Starting Pong Engine match (seed={seed})...")

    score = (0, 0)
    while not session.game_over and session.ticks < max_ticks:
        state = session.tick()
        if (state.user_score, state.opp_score) != score:
            score = (state.user_score, state.opp_score)
            logger.info(f"Score after {session.ticks} ticks: {score[0]}-{score[1]}")
        if realtime:
            time.sleep(session.config.frame_interval)

    if not session.game_over:
        logger.info(f"Stopped after {session.ticks} ticks without a winner")
    return session.state


def main():
    """Console entry point."""
    run()


if __name__ == "__main__":
    main()
