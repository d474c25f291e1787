"""Static evaluation functions for the search bot.

Scores are from the point of view of the side to move.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from reversi.core.enums import Cell
from reversi.core.rules import Rules

if TYPE_CHECKING:
    from reversi.core.position import Position


class IEvaluator(Protocol):
    def evaluate(self, position: Position) -> int: ...


class MaterialEvaluator:
    """Disc differential: own discs minus opponent discs."""

    name = "material"

    def evaluate(self, position: Position) -> int:
        return Rules.disc_differential(position.board, position.side_to_move)


# Classic square weights: corners are stable, X- and C-squares next to an
# empty corner give it away.
SQUARE_WEIGHTS: tuple[int, ...] = (
    100, -20, 10, 5, 5, 10, -20, 100,
    -20, -50, -2, -2, -2, -2, -50, -20,
    10, -2, -1, -1, -1, -1, -2, 10,
    5, -2, -1, -1, -1, -1, -2, 5,
    5, -2, -1, -1, -1, -1, -2, 5,
    10, -2, -1, -1, -1, -1, -2, 10,
    -20, -50, -2, -2, -2, -2, -50, -20,
    100, -20, 10, 5, 5, 10, -20, 100,
)  # fmt: skip


class PositionalEvaluator:
    """Sum of square weights of own discs minus those of opponent discs."""

    name = "positional"

    __slots__ = ("_weights",)

    def __init__(self, weights: tuple[int, ...] = SQUARE_WEIGHTS) -> None:
        if len(weights) != 64:
            raise ValueError(f"Expected 64 square weights, got {len(weights)}")
        self._weights = weights

    def evaluate(self, position: Position) -> int:
        own = position.side_to_move.cell
        score = 0
        for weight, cell in zip(self._weights, position.board.cells):
            if cell == Cell.EMPTY:
                continue
            score += weight if cell == own else -weight
        return score


EVALUATORS: dict[str, type[MaterialEvaluator] | type[PositionalEvaluator]] = {
    MaterialEvaluator.name: MaterialEvaluator,
    PositionalEvaluator.name: PositionalEvaluator,
}


def evaluator_for(name: str) -> IEvaluator:
    """Build the evaluator registered under *name*."""
    try:
        return EVALUATORS[name]()
    except KeyError:
        choices = ", ".join(sorted(EVALUATORS))
        raise ValueError(f"Unknown evaluator {name!r} (choose from {choices})") from None
