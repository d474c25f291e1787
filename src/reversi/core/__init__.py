"""Core domain layer: pure Reversi logic with zero external dependencies.

Quick start::

    from reversi.core import Position, Rules, Side

    pos = Position()
    for move in Rules.legal_moves(pos.board, Side.DARK):
        print(move)
"""

from reversi.core.board import Board
from reversi.core.enums import Cell, GameResult, Side
from reversi.core.errors import (
    GameAlreadyOverError,
    GameNotOverError,
    IllegalMoveError,
    InvalidDepthError,
    NoLegalMoveError,
    OutOfRangeError,
    ReversiError,
)
from reversi.core.move import Move
from reversi.core.move_generator import MoveGenerator
from reversi.core.notation import (
    STARTING_POSITION,
    position_from_text,
    position_to_text,
)
from reversi.core.position import Position
from reversi.core.rules import Rules
from reversi.core.types import (
    DIRECTIONS,
    Square,
    col_of,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "Cell",
    "GameResult",
    "Side",
    # Errors
    "GameAlreadyOverError",
    "GameNotOverError",
    "IllegalMoveError",
    "InvalidDepthError",
    "NoLegalMoveError",
    "OutOfRangeError",
    "ReversiError",
    # Types / helpers
    "DIRECTIONS",
    "Square",
    "col_of",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Position",
    "Rules",
    # Notation
    "STARTING_POSITION",
    "position_from_text",
    "position_to_text",
]
