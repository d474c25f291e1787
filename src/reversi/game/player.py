"""Concrete player implementations."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from reversi.core.enums import Side
from reversi.core.move import Move
from reversi.core.types import parse_square
from reversi.engine import DefaultEngine
from reversi.engine.search import IEngine, SearchLimits, SearchResult
from reversi.game.interfaces import IPlayer

if TYPE_CHECKING:
    from reversi.game.state import GameState

_LOGGER = logging.getLogger(__name__)


class HumanPlayer(IPlayer):
    """A human participant. Moves are typed as square names, e.g. ``f5``.

    Unparsable input and illegal squares are reported through *write* and
    the player is asked again. ``EOFError``/``KeyboardInterrupt`` from
    *read_line* propagate to the caller.
    """

    __slots__ = ("_side", "_name", "_read_line", "_write")

    def __init__(
        self,
        side: Side,
        name: str = "",
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self._side = side
        self._name = name or f"Player ({side})"
        self._read_line = read_line
        self._write = write

    @property
    def side(self) -> Side:
        return self._side

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def select_move(self, state: GameState) -> Move:
        legal = state.legal_moves()
        while True:
            text = self._read_line(f"{self._name}, enter a square: ")
            try:
                move = Move(parse_square(text), self._side)
            except ValueError as exc:
                _LOGGER.debug("Rejected input %r: %s", text, exc)
                self._write(f"Invalid input: {text.strip()!r} (expected e.g. f5)")
                continue

            if move in legal:
                return move
            if not state.position.board.is_empty(move.square):
                self._write(f"Invalid move: {move.name} is already occupied")
            else:
                self._write(f"Invalid move: {move.name} captures no discs")


class BotPlayer(IPlayer):
    """A bot participant that asks a search engine for its moves.

    Args:
        side: Side the bot plays.
        limits: Search limits, depth 3 by default.
        engine: Engine instance; a fresh :data:`DefaultEngine` if omitted.
        name: Display name.
    """

    __slots__ = ("_side", "_name", "_engine", "_limits", "_last_result")

    def __init__(
        self,
        side: Side,
        limits: SearchLimits | None = None,
        engine: IEngine | None = None,
        name: str = "",
    ) -> None:
        self._side = side
        self._limits = limits or SearchLimits()
        self._engine = engine or DefaultEngine()
        self._name = name or f"Minimax Bot (depth {self._limits.max_depth})"
        self._last_result: SearchResult | None = None

    @property
    def side(self) -> Side:
        return self._side

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    @property
    def limits(self) -> SearchLimits:
        return self._limits

    @property
    def last_result(self) -> SearchResult | None:
        """Result of the most recent search, for display."""
        return self._last_result

    def select_move(self, state: GameState) -> Move:
        result = self._engine.search(state.position, self._limits)
        self._last_result = result
        return result.best_move
