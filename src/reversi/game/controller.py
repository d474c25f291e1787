"""GameController: the central orchestrator of a Reversi game.

Coordinates: Players and GameState.
Emits events via simple callbacks so the console front end / tests can
subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from reversi.core.enums import Side
from reversi.core.errors import GameAlreadyOverError
from reversi.core.position import Position
from reversi.game.interfaces import IPlayer
from reversi.game.state import GameOutcome, GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

TurnCallback = Callable[[IPlayer, GameState], None]
MoveCallback = Callable[[MoveRecord, GameState], None]
PassCallback = Callable[[MoveRecord, GameState], None]
GameOverCallback = Callable[[GameOutcome, GameState], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_turn: list[TurnCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_pass: list[PassCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates a full game: asks players for moves, applies them,
    reports passes and the final outcome to listeners.

    Runs synchronously on the caller's thread.
    """

    __slots__ = ("_state", "_players", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[Side, IPlayer] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.side_to_move)

    def player(self, side: Side) -> IPlayer | None:
        return self._players.get(side)

    # ── Game flow ────────────────────────────────────────────────────────

    def new_game(
        self,
        dark: IPlayer,
        light: IPlayer,
        position: Position | None = None,
    ) -> None:
        if dark.side != Side.DARK or light.side != Side.LIGHT:
            raise ValueError("Players must be given as (dark, light)")
        self._players = {Side.DARK: dark, Side.LIGHT: light}
        self._state = GameState()
        self._state.setup(position)
        _LOGGER.debug("New game: %s (dark) vs %s (light)", dark.name, light.name)
        if self._state.is_game_over:
            self._emit_game_over()

    def step(self) -> MoveRecord:
        """Play one turn: a player's move, or a forced pass.

        Raises :class:`GameAlreadyOverError` once the game has ended.
        """
        state = self._state
        if state.is_game_over:
            raise GameAlreadyOverError("The game is already over")
        if not state.has_legal_move():
            record = state.pass_turn()
            self._emit_pass(record)
            return record

        player = self.current_player
        if player is None:
            raise RuntimeError("No game in progress; call new_game() first")

        for cb in self.events.on_turn:
            cb(player, state)

        history_len = len(state.move_history)
        record = state.apply_move(player.select_move(state))
        self._emit_move(record)

        # apply_move may have appended an automatic pass after the move.
        for extra in state.move_history[history_len + 1 :]:
            self._emit_pass(extra)

        if state.is_game_over:
            self._emit_game_over()
        return record

    def play(self) -> GameOutcome:
        """Run turns until the game is over and return the outcome."""
        while not self._state.is_game_over:
            self.step()
        return self._state.result()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_pass(self, record: MoveRecord) -> None:
        for cb in self.events.on_pass:
            cb(record, self._state)

    def _emit_game_over(self) -> None:
        outcome = self._state.result()
        for cb in self.events.on_game_over:
            cb(outcome, self._state)
