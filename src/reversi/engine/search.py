"""Shared engine search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from reversi.core.errors import InvalidDepthError

if TYPE_CHECKING:
    from reversi.core.move import Move
    from reversi.core.position import Position

DEFAULT_DEPTH = 3


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation.

    ``use_alpha_beta`` only changes the work performed, never the chosen
    move or its score.
    """

    max_depth: int = DEFAULT_DEPTH
    use_alpha_beta: bool = True

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise InvalidDepthError(
                f"Search depth must be >= 1, got {self.max_depth}"
            )


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search.

    A side with no legal move never gets a result: the search raises
    :class:`NoLegalMoveError` instead.
    """

    best_move: Move
    score: int
    depth: int
    nodes: int


class IEngine(Protocol):
    """Protocol for Reversi engines used by the game layer."""

    def search(self, position: Position, limits: SearchLimits) -> SearchResult: ...
