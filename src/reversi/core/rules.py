"""High-level Reversi rules: move application, terminal detection, scoring."""

from __future__ import annotations

from typing import TYPE_CHECKING

from reversi.core.enums import GameResult, Side
from reversi.core.errors import IllegalMoveError
from reversi.core.move_generator import MoveGenerator
from reversi.core.types import Square

if TYPE_CHECKING:
    from reversi.core.board import Board
    from reversi.core.move import Move


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def legal_moves(board: Board, side: Side) -> list[Move]:
        return MoveGenerator(board).generate_legal_moves(side)

    @staticmethod
    def has_any_legal_move(board: Board, side: Side) -> bool:
        return MoveGenerator(board).has_legal_move(side)

    @staticmethod
    def is_legal(board: Board, move: Move) -> bool:
        return MoveGenerator(board).is_legal(move.square, move.side)

    @staticmethod
    def apply_move_flips(board: Board, move: Move) -> list[Square]:
        """Place *move* on *board* in place and return the flipped squares.

        Raises :class:`IllegalMoveError` without touching the board when the
        placement captures nothing or the square is occupied.
        """
        flipped = MoveGenerator(board).flips(move.square, move.side)
        if not flipped:
            raise IllegalMoveError(f"Illegal move for {move.side}: {move.name}")

        disc = move.side.cell
        board[move.square] = disc
        for sq in flipped:
            board[sq] = disc
        return flipped

    @staticmethod
    def apply_move(board: Board, move: Move) -> Board:
        """Apply *move* to *board* in place and return the same board."""
        Rules.apply_move_flips(board, move)
        return board

    @staticmethod
    def is_terminal(board: Board) -> bool:
        """Neither side can move. A full board is the common special case."""
        if board.is_full():
            return True
        gen = MoveGenerator(board)
        return not (gen.has_legal_move(Side.DARK) or gen.has_legal_move(Side.LIGHT))

    @staticmethod
    def score(board: Board) -> int:
        """Disc differential from Light's point of view."""
        return board.count(Side.LIGHT) - board.count(Side.DARK)

    @staticmethod
    def disc_differential(board: Board, side: Side) -> int:
        """*side*'s discs minus its opponent's."""
        return board.count(side) - board.count(side.opposite)

    @staticmethod
    def final_result(board: Board) -> GameResult:
        """Winner by disc count, assuming the game is over."""
        diff = Rules.score(board)
        if diff > 0:
            return GameResult.LIGHT_WINS
        if diff < 0:
            return GameResult.DARK_WINS
        return GameResult.DRAW

    @staticmethod
    def game_result(board: Board) -> GameResult:
        """Determine the current game result."""
        if not Rules.is_terminal(board):
            return GameResult.IN_PROGRESS
        return Rules.final_result(board)
