"""Domain errors raised by the rules engine, game state and search bot.

Every failure is a local validation error: the operation that raises leaves
the board and game state exactly as they were.
"""

from __future__ import annotations


class ReversiError(Exception):
    """Base class for all Reversi domain errors."""


class OutOfRangeError(ReversiError, IndexError):
    """A coordinate lies outside the 8x8 board."""


class IllegalMoveError(ReversiError, ValueError):
    """The requested move is not in the legal set for the current position."""


class GameAlreadyOverError(ReversiError):
    """A move or pass was requested after the game ended."""


class GameNotOverError(ReversiError):
    """The final result was requested while the game is still in progress."""


class InvalidDepthError(ReversiError, ValueError):
    """The search bot was configured with a depth below one."""


class NoLegalMoveError(ReversiError):
    """The search bot was asked to move for a side that has to pass."""
