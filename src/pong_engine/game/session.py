"""
Game session: delivers events to the reducer in arrival order.

The session is the driver side of the reducer contract. It owns the single
generator of a game, stops folding events once the game is over and restarts
by building a fresh initial state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from mini_arcade_core.utils import logger

from pong_engine.constants import DEFAULT_SEED, FPS, PADDLE_STEP
from pong_engine.exceptions import UnknownKeyError
from pong_engine.game.models import Event, GameState, initial_state
from pong_engine.game.reducer import reduce
from pong_engine.rng import SeededRNG
from pong_engine.vector import Vector


@dataclass
class SessionConfig:
    """
    Driver settings. Physics is fixed and lives in ``pong_engine.constants``.

    - seed: generator seed, 0 picks a random one
    - fps: ball and computer ticks per second
    - paddle_step: pixels the user paddle moves per key press
    """

    seed: int = DEFAULT_SEED
    fps: float = FPS
    paddle_step: float = PADDLE_STEP

    @property
    def frame_interval(self) -> float:
        """Seconds between two ticks."""
        return 1.0 / self.fps


class GameSession:
    """
    One match between the user and the computer.

    Keys are edge triggered: one press is one move.
    - "w": move the user paddle up
    - "s": move the user paddle down
    - "r": restart, only once the game is over
    """

    def __init__(self, config: SessionConfig | None = None):
        """
        :param config: Session settings.
        :type config: SessionConfig, optional
        """
        self.config = config or SessionConfig()
        self.rng = SeededRNG(self.config.seed)
        self.state: GameState = initial_state()
        self.ticks = 0

    @property
    def game_over(self) -> bool:
        """Whether the current game has finished."""
        return self.state.game_over

    @property
    def winner(self) -> str | None:
        """Result message, or None while playing."""
        return self.state.winner

    def dispatch(self, event: Event) -> GameState:
        """
        Fold one event into the current state.

        Events arriving after the game is over are dropped.

        :param event: Event to deliver.
        :type event: Event

        :return: The current state after delivery.
        :rtype: GameState
        """
        if self.state.game_over:
            logger.debug(f"Game over, ignoring {event.kind.name}")
            return self.state

        self.state = reduce(self.state, event, self.rng)
        if self.state.game_over:
            logger.info(
                f"{self.state.winner}: user {self.state.user_score}"
                f" - {self.state.opp_score} opponent"
            )
        return self.state

    def dispatch_many(self, events: Iterable[Event]) -> GameState:
        """Deliver ``events`` in order."""
        for event in events:
            self.dispatch(event)
        return self.state

    def tick(self) -> GameState:
        """Deliver the periodic events of one frame: ball, then computer."""
        self.ticks += 1
        self.dispatch(Event.ball_tick())
        return self.dispatch(Event.computer_paddle_move())

    def press(self, key: str) -> GameState:
        """
        Handle a key press.

        :param key: Pressed key.
        :type key: str

        :return: The current state after the press.
        :rtype: GameState

        :raises UnknownKeyError: if ``key`` has no binding.
        """
        key = key.lower()
        if key == "w":
            return self.dispatch(
                Event.paddle_move(Vector(0, -self.config.paddle_step))
            )
        if key == "s":
            return self.dispatch(
                Event.paddle_move(Vector(0, self.config.paddle_step))
            )
        if key == "r":
            if self.state.game_over:
                self.restart()
            return self.state
        raise UnknownKeyError(key)

    def restart(self) -> GameState:
        """Start a new game. The generator keeps its current state."""
        logger.info("Restarting game")
        self.state = initial_state()
        self.ticks = 0
        return self.state
