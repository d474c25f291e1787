"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from reversi.core.enums import Side
from reversi.core.errors import OutOfRangeError
from reversi.core.types import (
    Square,
    col_of,
    is_valid_square,
    make_square,
    parse_square,
    row_of,
    square_name,
)


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object: a disc placement by *side* on *square*."""

    square: Square
    side: Side

    def __post_init__(self) -> None:
        if not is_valid_square(self.square):
            raise OutOfRangeError(f"Square out of range: {self.square}")

    @classmethod
    def at(cls, row: int, col: int, side: Side) -> Move:
        return cls(make_square(row, col), side)

    @classmethod
    def from_name(cls, name: str, side: Side) -> Move:
        """Parse a square name, e.g. ``Move.from_name("f5", Side.DARK)``."""
        return cls(parse_square(name), side)

    @property
    def row(self) -> int:
        return row_of(self.square)

    @property
    def col(self) -> int:
        return col_of(self.square)

    @property
    def name(self) -> str:
        return square_name(self.square)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Move({self.name}, {self.side})"
