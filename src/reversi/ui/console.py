"""Plain-text rendering of the board and game events for terminals."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from reversi.core.enums import Cell, GameResult, Side
from reversi.core.types import BOARD_SIZE, make_square, square_name

if TYPE_CHECKING:
    from reversi.core.board import Board
    from reversi.core.move import Move
    from reversi.game.controller import GameController
    from reversi.game.interfaces import IPlayer
    from reversi.game.state import GameOutcome, GameState, MoveRecord

_CELL_WIDTH = 4

# ANSI escapes: clear the screen and move the cursor home, bold on/off.
CLEAR_SCREEN = "\033[2J\033[H"
_BOLD = "\033[1m"
_RESET = "\033[0m"


def _rule(left: str, mid: str, right: str) -> str:
    return "  " + left + mid.join("─" * _CELL_WIDTH for _ in range(BOARD_SIZE)) + right


def render_board(board: Board, legal_moves: Iterable[Move] | None = None) -> str:
    """Boxed 8x8 grid; empty squares in *legal_moves* show their name."""
    targets = {move.square for move in legal_moves or ()}
    lines = ["   " + "".join(f" {chr(ord('a') + c)}   " for c in range(BOARD_SIZE))]
    lines.append(_rule("╭", "┬", "╮"))
    for row in range(BOARD_SIZE):
        if row:
            lines.append(_rule("├", "┼", "┤"))
        cells: list[str] = []
        for col in range(BOARD_SIZE):
            sq = make_square(row, col)
            cell = board[sq]
            if cell != Cell.EMPTY:
                cells.append(f" {cell.symbol}  ")
            elif sq in targets:
                cells.append(f" {square_name(sq)} ")
            else:
                cells.append(" " * _CELL_WIDTH)
        lines.append(f"{row + 1} │" + "│".join(cells) + "│")
    lines.append(_rule("╰", "┴", "╯"))
    return "\n".join(lines)


def side_label(side: Side) -> str:
    return f"{side.name.capitalize()} {side.cell.symbol}"


def bold(text: str) -> str:
    return f"{_BOLD}{text}{_RESET}"


def render_status(state: GameState) -> str:
    board = state.position.board
    counts = (
        f"{side_label(Side.DARK)} {board.count(Side.DARK)}"
        f"  {side_label(Side.LIGHT)} {board.count(Side.LIGHT)}"
    )
    if state.is_game_over:
        return f"{counts}  | game over"
    return f"{counts}  | {state.side_to_move.name.capitalize()} to move"


def render_outcome(outcome: GameOutcome) -> str:
    """Final line, e.g. ``Dark wins 40-24`` or ``Draw 32-32``."""
    if outcome.result == GameResult.DRAW:
        return f"Draw {outcome.dark}-{outcome.light}"
    winner = outcome.winner
    assert winner is not None
    own = outcome.dark if winner == Side.DARK else outcome.light
    other = outcome.light if winner == Side.DARK else outcome.dark
    return f"{winner.name.capitalize()} wins {own}-{other}"


class ConsoleView:
    """Subscribes to :class:`GameController` events and prints the game."""

    __slots__ = ("_write", "_show_legal_moves", "_clear_screen", "_color")

    def __init__(
        self,
        write: Callable[[str], None] = print,
        *,
        show_legal_moves: bool = True,
        clear_screen: bool = False,
        color: bool = False,
    ) -> None:
        self._write = write
        self._show_legal_moves = show_legal_moves
        self._clear_screen = clear_screen
        self._color = color

    def attach(self, controller: GameController) -> None:
        events = controller.events
        events.on_turn.append(self.on_turn)
        events.on_move.append(self.on_move)
        events.on_pass.append(self.on_pass)
        events.on_game_over.append(self.on_game_over)

    def on_turn(self, player: IPlayer, state: GameState) -> None:
        hints = state.legal_moves() if player.is_human and self._show_legal_moves else None
        self._write_board(render_board(state.position.board, hints))
        self._write(render_status(state))
        title = f"{side_label(player.side)} {player.name}"
        self._write(bold(title) if self._color else title)
        if not player.is_human:
            self._write(f"{player.name} is thinking...")

    def on_move(self, record: MoveRecord, state: GameState) -> None:
        count = len(record.flipped)
        noun = "disc" if count == 1 else "discs"
        self._write(
            f"{side_label(record.side)} plays {record.notation} (flips {count} {noun})"
        )

    def on_pass(self, record: MoveRecord, state: GameState) -> None:
        self._write(f"{side_label(record.side)} has no legal move and passes")

    def on_game_over(self, outcome: GameOutcome, state: GameState) -> None:
        self._write_board(render_board(state.position.board))
        text = render_outcome(outcome)
        self._write(bold(text) if self._color else text)

    def _write_board(self, text: str) -> None:
        self._write(CLEAR_SCREEN + text if self._clear_screen else text)
