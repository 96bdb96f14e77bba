"""
Entities package for Pong Engine.
This package contains the paddle and ball value types.
"""

from __future__ import annotations

from .ball import Ball
from .paddle import Paddle

__all__ = [
    "Ball",
    "Paddle",
]
