"""Tests for Rules move application and scoring."""

import pytest

from reversi.core.board import Board
from reversi.core.enums import Cell, GameResult, Side
from reversi.core.errors import IllegalMoveError, OutOfRangeError
from reversi.core.move import Move
from reversi.core.notation import position_from_text
from reversi.core.rules import Rules
from reversi.core.types import A1, D3, D4, E4, E5, F5


class TestApplyMove:
    def test_places_and_flips(self) -> None:
        board = Board.initial()
        flipped = Rules.apply_move_flips(board, Move(F5, Side.DARK))
        assert flipped == [E5]
        assert board[F5] == Cell.DARK
        assert board[E5] == Cell.DARK
        assert board.count(Side.DARK) == 4
        assert board.count(Side.LIGHT) == 1

    def test_apply_move_returns_board(self) -> None:
        board = Board.initial()
        assert Rules.apply_move(board, Move(D3, Side.DARK)) is board
        assert board[D4] == Cell.DARK

    def test_same_move_same_result(self) -> None:
        first, second = Board.initial(), Board.initial()
        Rules.apply_move(first, Move(D3, Side.DARK))
        Rules.apply_move(second, Move(D3, Side.DARK))
        assert first == second

    def test_illegal_move_leaves_board_untouched(self) -> None:
        board = Board.initial()
        snapshot = board.copy()
        with pytest.raises(IllegalMoveError):
            Rules.apply_move_flips(board, Move(A1, Side.DARK))
        assert board == snapshot

    def test_occupied_square_is_illegal(self) -> None:
        board = Board.initial()
        with pytest.raises(IllegalMoveError):
            Rules.apply_move(board, Move(E4, Side.LIGHT))

    @pytest.mark.parametrize("sq", [-1, 64])
    def test_off_board_square_is_out_of_range(self, sq: int) -> None:
        board = Board.initial()
        snapshot = board.copy()
        with pytest.raises(OutOfRangeError):
            Rules.apply_move(board, Move(sq, Side.DARK))
        assert board == snapshot

    def test_illegal_move_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Rules.apply_move(Board(), Move(A1, Side.DARK))


class TestLegality:
    def test_is_legal(self) -> None:
        board = Board.initial()
        assert Rules.is_legal(board, Move(F5, Side.DARK))
        assert not Rules.is_legal(board, Move(F5, Side.LIGHT))

    def test_has_any_legal_move(self) -> None:
        board = Board.initial()
        assert Rules.has_any_legal_move(board, Side.DARK)
        assert not Rules.has_any_legal_move(Board(), Side.DARK)

    def test_legal_moves_sorted(self) -> None:
        squares = [m.square for m in Rules.legal_moves(Board.initial(), Side.DARK)]
        assert squares == sorted(squares)


class TestTerminal:
    def test_start_is_not_terminal(self) -> None:
        assert not Rules.is_terminal(Board.initial())
        assert Rules.game_result(Board.initial()) == GameResult.IN_PROGRESS

    def test_full_board_is_terminal(self) -> None:
        board = Board()
        for sq in range(64):
            board[sq] = Cell.DARK if sq % 3 else Cell.LIGHT
        assert Rules.is_terminal(board)
        assert Rules.game_result(board) == GameResult.DARK_WINS

    def test_both_sides_blocked_is_terminal(self) -> None:
        pos = position_from_text("O7/8/8/8/8/8/8/7X X")
        assert Rules.is_terminal(pos.board)
        assert Rules.game_result(pos.board) == GameResult.DRAW

    def test_one_side_blocked_is_not_terminal(self) -> None:
        pos = position_from_text("OX6/8/8/8/8/8/8/OX6 X")
        assert not Rules.has_any_legal_move(pos.board, Side.DARK)
        assert not Rules.is_terminal(pos.board)

    def test_wiped_out_side_is_terminal(self) -> None:
        pos = position_from_text("OOO5/8/8/8/8/8/8/8 X")
        assert Rules.is_terminal(pos.board)
        assert Rules.game_result(pos.board) == GameResult.LIGHT_WINS


class TestScore:
    def test_score_is_light_minus_dark(self) -> None:
        pos = position_from_text("OOO5/8/8/8/8/8/8/XXXXX3 X")
        assert Rules.score(pos.board) == -2

    def test_disc_differential_per_side(self) -> None:
        pos = position_from_text("OOO5/8/8/8/8/8/8/XXXXX3 X")
        assert Rules.disc_differential(pos.board, Side.DARK) == 2
        assert Rules.disc_differential(pos.board, Side.LIGHT) == -2

    def test_final_result_by_count(self) -> None:
        assert Rules.final_result(Board.initial()) == GameResult.DRAW
        assert GameResult.DARK_WINS.winner == Side.DARK
        assert GameResult.DRAW.winner is None
