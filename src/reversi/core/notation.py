"""Text notation for positions.

Eight ``/``-separated rows from row 1 (top) to row 8, digits for runs of
empty squares, ``X`` for dark and ``O`` for light discs, followed by a space
and the side to move::

    8/8/8/3OX3/3XO3/8/8/8 X
"""

from __future__ import annotations

from reversi.core.board import Board
from reversi.core.enums import Cell, Side
from reversi.core.position import Position
from reversi.core.types import BOARD_SIZE, make_square

STARTING_POSITION = "8/8/8/3OX3/3XO3/8/8/8 X"

_CELL_CHARS: dict[str, Cell] = {"X": Cell.DARK, "O": Cell.LIGHT}
_SIDE_CHARS: dict[str, Side] = {"X": Side.DARK, "O": Side.LIGHT}
_CHARS_BY_CELL: dict[Cell, str] = {v: k for k, v in _CELL_CHARS.items()}


def position_from_text(text: str) -> Position:
    """Parse a position string into a :class:`Position`."""
    parts = text.split()
    if len(parts) != 2:
        raise ValueError(f"Invalid position (need placement and side): {text!r}")

    placement, side_part = parts
    rows = placement.split("/")
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Invalid position board (must contain 8 rows): {text!r}")

    board = Board()
    for row, row_text in enumerate(rows):
        col = 0
        for ch in row_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid position digit {ch!r}: {text!r}")
                col += step
            else:
                cell = _CELL_CHARS.get(ch.upper())
                if cell is None:
                    raise ValueError(f"Invalid disc character {ch!r}: {text!r}")
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid position row width: {text!r}")
                board[make_square(row, col)] = cell
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid position row width: {text!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid position row width: {text!r}")

    side = _SIDE_CHARS.get(side_part.upper())
    if side is None:
        raise ValueError(f"Invalid side-to-move field: {side_part!r}")
    return Position(board, side)


def position_to_text(position: Position) -> str:
    """Serialize *position* to its text notation."""
    rows: list[str] = []
    for row in range(BOARD_SIZE):
        out = ""
        empty = 0
        for col in range(BOARD_SIZE):
            cell = position.board.get(row, col)
            if cell == Cell.EMPTY:
                empty += 1
                continue
            if empty:
                out += str(empty)
                empty = 0
            out += _CHARS_BY_CELL[cell]
        if empty:
            out += str(empty)
        rows.append(out)
    side = "X" if position.side_to_move == Side.DARK else "O"
    return f"{'/'.join(rows)} {side}"
