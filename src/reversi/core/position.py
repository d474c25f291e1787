"""Position: board snapshot plus the side to move."""

from __future__ import annotations

from reversi.core.board import Board
from reversi.core.enums import GameResult, Side
from reversi.core.errors import IllegalMoveError
from reversi.core.move import Move
from reversi.core.move_generator import MoveGenerator
from reversi.core.rules import Rules
from reversi.core.types import Square


class Position:
    """Board + side to move.

    This is the unit the search bot copies to explore hypothetical lines; the
    game layer owns the authoritative instance.
    """

    __slots__ = ("board", "side_to_move")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Side = Side.DARK,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move

    # ── Transitions ──────────────────────────────────────────────────────

    def play(self, move: Move) -> list[Square]:
        """Apply *move* for the side to move and hand the turn over.

        Returns the flipped squares. Raises :class:`IllegalMoveError` (with
        the position unchanged) when *move* is not legal here.
        """
        if move.side != self.side_to_move:
            raise IllegalMoveError(
                f"It is {self.side_to_move}'s turn, not {move.side}'s"
            )
        flipped = Rules.apply_move_flips(self.board, move)
        self.side_to_move = self.side_to_move.opposite
        return flipped

    def pass_turn(self) -> None:
        """Hand the turn over without placing a disc."""
        self.side_to_move = self.side_to_move.opposite

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_moves(self) -> list[Move]:
        return MoveGenerator(self.board).generate_legal_moves(self.side_to_move)

    def has_legal_move(self, side: Side | None = None) -> bool:
        return MoveGenerator(self.board).has_legal_move(
            self.side_to_move if side is None else side
        )

    @property
    def is_terminal(self) -> bool:
        return Rules.is_terminal(self.board)

    def result(self) -> GameResult:
        return Rules.game_result(self.board)

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Deep copy; the clone shares no state with the original."""
        return Position(self.board.copy(), self.side_to_move)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.side_to_move == other.side_to_move and self.board == other.board

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.board!r}\n{self.side_to_move} to move"
