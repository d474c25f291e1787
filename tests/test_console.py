"""Tests for the console renderer and view."""

from reversi.core.board import Board
from reversi.core.enums import GameResult, Side
from reversi.core.move import Move
from reversi.core.position import Position
from reversi.core.types import F5
from reversi.engine.search import SearchLimits
from reversi.game.controller import GameController
from reversi.game.player import BotPlayer, HumanPlayer
from reversi.game.state import GameOutcome, GameState
from reversi.ui.console import (
    CLEAR_SCREEN,
    ConsoleView,
    bold,
    render_board,
    render_outcome,
    render_status,
    side_label,
)


def _new_state() -> GameState:
    state = GameState()
    state.setup()
    return state


class TestRenderBoard:
    def test_layout(self) -> None:
        lines = render_board(Board.initial()).splitlines()
        assert len(lines) == 1 + 8 + 7 + 2
        assert lines[0].split() == list("abcdefgh")
        assert lines[1].startswith("  ╭")
        assert lines[-1].startswith("  ╰")

    def test_discs(self) -> None:
        row4 = render_board(Board.initial()).splitlines()[8]
        assert row4.startswith("4 │")
        assert row4.count("○") == 1
        assert row4.count("●") == 1

    def test_legal_move_hints(self) -> None:
        pos = Position()
        text = render_board(pos.board, pos.legal_moves())
        for name in ("d3", "c4", "f5", "e6"):
            assert name in text
        assert "a1" not in text

    def test_no_hints_by_default(self) -> None:
        assert "f5" not in render_board(Board.initial())


class TestRenderText:
    def test_side_label(self) -> None:
        assert side_label(Side.DARK) == "Dark ●"
        assert side_label(Side.LIGHT) == "Light ○"

    def test_status(self) -> None:
        assert render_status(_new_state()) == "Dark ● 2  Light ○ 2  | Dark to move"

    def test_outcome(self) -> None:
        assert render_outcome(GameOutcome(GameResult.DARK_WINS, 40, 24)) == "Dark wins 40-24"
        assert render_outcome(GameOutcome(GameResult.LIGHT_WINS, 10, 54)) == "Light wins 54-10"
        assert render_outcome(GameOutcome(GameResult.DRAW, 32, 32)) == "Draw 32-32"


class TestConsoleView:
    def test_move_message(self) -> None:
        out: list[str] = []
        state = _new_state()
        record = state.apply_move(Move(F5, Side.DARK))
        ConsoleView(out.append).on_move(record, state)
        assert out == ["Dark ● plays f5 (flips 1 disc)"]

    def test_bot_turn_announces_thinking(self) -> None:
        out: list[str] = []
        ConsoleView(out.append).on_turn(BotPlayer(Side.DARK), _new_state())
        assert out[-1] == "Minimax Bot (depth 3) is thinking..."
        assert "f5" not in out[0]

    def test_human_turn_shows_hints(self) -> None:
        out: list[str] = []
        ConsoleView(out.append).on_turn(HumanPlayer(Side.DARK), _new_state())
        assert "f5" in out[0]
        assert out[1].endswith("Dark to move")

    def test_hints_can_be_disabled(self) -> None:
        out: list[str] = []
        view = ConsoleView(out.append, show_legal_moves=False)
        view.on_turn(HumanPlayer(Side.DARK), _new_state())
        assert "f5" not in out[0]

    def test_attached_game_prints_outcome_last(self) -> None:
        out: list[str] = []
        ctrl = GameController()
        ConsoleView(out.append).attach(ctrl)
        limits = SearchLimits(max_depth=1)
        ctrl.new_game(BotPlayer(Side.DARK, limits), BotPlayer(Side.LIGHT, limits))
        outcome = ctrl.play()
        assert out[-1] == render_outcome(outcome)
        assert any(line.startswith("Dark ● plays") for line in out)

    def test_turn_title_names_player(self) -> None:
        out: list[str] = []
        ConsoleView(out.append).on_turn(HumanPlayer(Side.DARK, "Ann"), _new_state())
        assert out[2] == "Dark ● Ann"
        assert not out[0].startswith(CLEAR_SCREEN)

    def test_clear_screen_before_board(self) -> None:
        out: list[str] = []
        view = ConsoleView(out.append, clear_screen=True)
        view.on_turn(HumanPlayer(Side.DARK, "Ann"), _new_state())
        assert out[0].startswith(CLEAR_SCREEN)
        assert sum(line.count(CLEAR_SCREEN) for line in out) == 1

    def test_color_bolds_title_and_outcome(self) -> None:
        out: list[str] = []
        view = ConsoleView(out.append, color=True)
        view.on_turn(HumanPlayer(Side.DARK, "Ann"), _new_state())
        assert out[2] == bold("Dark ● Ann")
        assert out[2] == "\033[1mDark ● Ann\033[0m"

        out.clear()
        outcome = GameOutcome(GameResult.DRAW, 32, 32)
        view.on_game_over(outcome, _new_state())
        assert out[-1] == bold("Draw 32-32")
