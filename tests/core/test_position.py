"""Tests for Position."""

import pytest

from reversi.core.enums import Cell, GameResult, Side
from reversi.core.errors import IllegalMoveError
from reversi.core.move import Move
from reversi.core.notation import position_from_text
from reversi.core.position import Position
from reversi.core.types import A1, E5, F5


class TestPosition:
    def test_default_is_start(self) -> None:
        pos = Position()
        assert pos.side_to_move == Side.DARK
        assert pos.board.count(Side.DARK) == 2
        assert len(pos.legal_moves()) == 4

    def test_play_switches_side(self) -> None:
        pos = Position()
        flipped = pos.play(Move(F5, Side.DARK))
        assert flipped == [E5]
        assert pos.side_to_move == Side.LIGHT

    def test_play_out_of_turn(self) -> None:
        pos = Position()
        snapshot = pos.copy()
        with pytest.raises(IllegalMoveError, match="turn"):
            pos.play(Move(F5, Side.LIGHT))
        assert pos == snapshot

    def test_play_illegal_square(self) -> None:
        pos = Position()
        snapshot = pos.copy()
        with pytest.raises(IllegalMoveError):
            pos.play(Move(A1, Side.DARK))
        assert pos == snapshot

    def test_pass_turn(self) -> None:
        pos = Position()
        pos.pass_turn()
        assert pos.side_to_move == Side.LIGHT
        assert pos.board.count(Side.DARK) == 2

    def test_has_legal_move_for_other_side(self) -> None:
        pos = position_from_text("OX6/8/8/8/8/8/8/OX6 X")
        assert not pos.has_legal_move()
        assert pos.has_legal_move(Side.LIGHT)
        assert not pos.is_terminal
        assert pos.result() == GameResult.IN_PROGRESS

    def test_terminal_result(self) -> None:
        pos = position_from_text("O7/8/8/8/8/8/8/7X X")
        assert pos.is_terminal
        assert pos.result() == GameResult.DRAW


class TestPositionCopy:
    def test_copy_shares_nothing(self) -> None:
        pos = Position()
        clone = pos.copy()
        clone.play(Move(F5, Side.DARK))
        assert pos.board[F5] == Cell.EMPTY
        assert pos.side_to_move == Side.DARK
        assert clone != pos

    def test_equality(self) -> None:
        assert Position() == Position()
        assert Position() != Position(side_to_move=Side.LIGHT)

    def test_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(Position())

    def test_repr_mentions_side(self) -> None:
        assert repr(Position()).endswith("dark to move")


class TestMove:
    def test_from_name(self) -> None:
        move = Move.from_name("F5", Side.DARK)
        assert move == Move(F5, Side.DARK)
        assert (move.row, move.col) == (4, 5)

    def test_at(self) -> None:
        assert Move.at(4, 5, Side.LIGHT).square == F5

    def test_str_and_repr(self) -> None:
        move = Move(F5, Side.DARK)
        assert str(move) == "f5"
        assert repr(move) == "Move(f5, dark)"

    def test_moves_are_hashable(self) -> None:
        assert len({Move(F5, Side.DARK), Move(F5, Side.DARK)}) == 1
