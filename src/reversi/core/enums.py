"""Core enumerations for the Reversi domain."""

from __future__ import annotations

from enum import IntEnum


class Cell(IntEnum):
    """Content of a single board square."""

    EMPTY = 0
    DARK = 1
    LIGHT = 2

    @property
    def symbol(self) -> str:
        """Disc glyph used by the text renderer."""
        return _SYMBOLS[self]


class Side(IntEnum):
    """One of the two competing disc colors. Dark moves first."""

    DARK = 1
    LIGHT = 2

    @property
    def opposite(self) -> Side:
        return Side.LIGHT if self is Side.DARK else Side.DARK

    @property
    def cell(self) -> Cell:
        """The disc this side places on the board."""
        return Cell(self.value)

    def __str__(self) -> str:
        return self.name.lower()


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    DARK_WINS = 1
    LIGHT_WINS = 2
    DRAW = 3

    @property
    def winner(self) -> Side | None:
        if self == GameResult.DARK_WINS:
            return Side.DARK
        if self == GameResult.LIGHT_WINS:
            return Side.LIGHT
        return None


_SYMBOLS: dict[Cell, str] = {
    Cell.EMPTY: " ",
    Cell.DARK: "●",
    Cell.LIGHT: "○",
}
