"""
Controllers for computer driven paddles.
"""

from __future__ import annotations

from .cpu import CpuPaddleController

__all__ = ["CpuPaddleController"]
