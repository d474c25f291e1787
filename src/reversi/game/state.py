"""Game state machine. Tracks turns, passes, game over and move history."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from reversi.core.enums import GameResult, Side
from reversi.core.errors import (
    GameAlreadyOverError,
    GameNotOverError,
    IllegalMoveError,
)
from reversi.core.move import Move
from reversi.core.position import Position
from reversi.core.rules import Rules
from reversi.core.types import Square
from reversi.game.interfaces import GamePhase

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveRecord:
    """A single entry in the move history.

    ``move`` is ``None`` for a pass. ``position_before`` is a private copy
    used by :meth:`GameState.undo_last_move`.
    """

    side: Side
    move: Move | None
    flipped: tuple[Square, ...]
    position_before: Position = field(repr=False, compare=False)
    automatic: bool = False

    @property
    def is_pass(self) -> bool:
        return self.move is None

    @property
    def notation(self) -> str:
        return "pass" if self.move is None else self.move.name


@dataclass(frozen=True)
class GameOutcome:
    """Final score of a finished game."""

    result: GameResult
    dark: int
    light: int

    @property
    def differential(self) -> int:
        """Light's discs minus Dark's discs."""
        return self.light - self.dark

    @property
    def winner(self) -> Side | None:
        return self.result.winner


@dataclass
class GameState:
    """Manages game lifecycle: phase, passes, result and move history.

    This is a pure data/logic class without threads or I/O. Every failed
    transition leaves the state untouched.
    """

    position: Position = field(default_factory=Position, init=False)
    phase: GamePhase = field(default=GamePhase.IN_PROGRESS, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, position: Position | None = None) -> None:
        """Initialise (or reset) the game, from the standard start by default."""
        self.position = position.copy() if position is not None else Position()
        self.move_history.clear()
        self.phase = GamePhase.IN_PROGRESS
        self._check_game_over()

    # ── Transitions ──────────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Apply a legal *move* and advance the turn.

        If the opponent then has no legal move the turn passes straight back
        (recorded as an automatic pass); if neither side can move the game
        ends.
        """
        self._ensure_in_progress()
        if move not in self.legal_moves():
            raise IllegalMoveError(
                f"Illegal move for {self.position.side_to_move}: {move.name}"
            )

        before = self.position.copy()
        flipped = self.position.play(move)
        record = MoveRecord(
            side=move.side,
            move=move,
            flipped=tuple(flipped),
            position_before=before,
        )
        self.move_history.append(record)

        if self._check_game_over():
            return record

        if not self.position.has_legal_move():
            # Opponent is blocked but the mover is not (else it is game over).
            self._record_pass(automatic=True)
        return record

    def pass_turn(self) -> MoveRecord:
        """Forfeit the turn of a side that has no legal move."""
        self._ensure_in_progress()
        if self.position.has_legal_move():
            raise IllegalMoveError(
                f"{self.position.side_to_move} has a legal move and cannot pass"
            )
        return self._record_pass(automatic=False)

    def undo_last_move(self) -> MoveRecord | None:
        """Undo the last history entry. Returns it, or None if history is empty.

        An automatic pass is undone together with the move that caused it.
        """
        if not self.move_history:
            return None

        record = self.move_history.pop()
        if record.automatic and self.move_history:
            record = self.move_history.pop()
        self.position = record.position_before.copy()
        self.phase = GamePhase.IN_PROGRESS
        return record

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Side:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of disc placements made."""
        return sum(1 for record in self.move_history if not record.is_pass)

    @property
    def pass_count(self) -> int:
        return sum(1 for record in self.move_history if record.is_pass)

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move; empty once the game is over."""
        if self.is_game_over:
            return []
        return self.position.legal_moves()

    def has_legal_move(self) -> bool:
        return not self.is_game_over and self.position.has_legal_move()

    def result(self) -> GameOutcome:
        """Final outcome. Raises :class:`GameNotOverError` while in progress."""
        if not self.is_game_over:
            raise GameNotOverError("The game is still in progress")
        board = self.position.board
        return GameOutcome(
            result=Rules.final_result(board),
            dark=board.count(Side.DARK),
            light=board.count(Side.LIGHT),
        )

    # ── Internal ─────────────────────────────────────────────────────────

    def _ensure_in_progress(self) -> None:
        if self.is_game_over:
            raise GameAlreadyOverError("The game is already over")

    def _record_pass(self, *, automatic: bool) -> MoveRecord:
        side = self.position.side_to_move
        record = MoveRecord(
            side=side,
            move=None,
            flipped=(),
            position_before=self.position.copy(),
            automatic=automatic,
        )
        self.position.pass_turn()
        self.move_history.append(record)
        _LOGGER.info("%s has no legal move and passes", side)
        return record

    def _check_game_over(self) -> bool:
        if self.position.is_terminal:
            self.phase = GamePhase.GAME_OVER
            _LOGGER.info("Game over: %s", Rules.final_result(self.position.board).name)
            return True
        return False
