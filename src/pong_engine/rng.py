"""
Seeded pseudo-random generator shared by the engine.

All randomness in a game (the y-direction after a paddle bounce and after a
goal) comes from one generator so that a fixed seed and a fixed event order
always replay the same match.
"""

from __future__ import annotations

import random

from pong_engine.constants import DEFAULT_SEED


class SeededRNG:
    """
    Linear congruential generator using GCC's constants.

    :ivar state (int): Current register value.
    """

    m = 2**31
    a = 1103515245
    c = 12345

    def __init__(self, seed: int = DEFAULT_SEED):
        """
        :param seed: Initial register value. ``0`` picks a random seed.
        :type seed: int
        """
        self.state = seed if seed else random.randrange(self.m - 1)

    def next_int(self) -> int:
        """Advance the register and return it."""
        self.state = (self.a * self.state + self.c) % self.m
        return self.state

    def next_float(self) -> float:
        """Return the next value scaled into ``[0, 1]``."""
        return self.next_int() / (self.m - 1)

    def sign(self) -> int:
        """
        Draw once and map it to a direction.

        :return: ``-1`` or ``1``.
        :rtype: int
        """
        return -1 if self.next_float() * 2 - 1 < 0 else 1

    def __repr__(self) -> str:
        return f"SeededRNG(state={self.state})"


_default: SeededRNG | None = None


def default_rng() -> SeededRNG:
    """
    Process-wide generator used when no generator is passed to the reducer.
    Created on first use with ``DEFAULT_SEED``.
    """
    global _default  # pylint: disable=global-statement
    if _default is None:
        _default = SeededRNG(DEFAULT_SEED)
    return _default
