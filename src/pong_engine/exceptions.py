"""
Exceptions raised by Pong Engine.
"""

from __future__ import annotations


class PongEngineError(Exception):
    """Base class for Pong Engine errors."""


class UnknownKeyError(PongEngineError):
    """A key with no binding was pressed."""

    def __init__(self, key: str):
        """
        :param key: The key that was pressed.
        :type key: str
        """
        super().__init__(f"No binding for key {key!r}")
        self.key = key
