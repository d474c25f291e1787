"""Pure-Python Reversi search (negamax, optional alpha-beta)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from reversi.core.errors import NoLegalMoveError
from reversi.core.move import Move
from reversi.core.rules import Rules
from reversi.engine.evaluation import IEvaluator, MaterialEvaluator
from reversi.engine.search import IEngine, SearchLimits, SearchResult

if TYPE_CHECKING:
    from reversi.core.position import Position

_LOGGER = logging.getLogger(__name__)

_INF_SCORE = 1_000_000
# Any finished game outranks every heuristic score.
WIN_SCORE = 100_000


class MinimaxEngine(IEngine):
    """Depth-limited negamax over row-major move order.

    The caller's position is never touched: every node works on its own
    :meth:`Position.copy`. Among equally scored moves the one enumerated
    first wins, so identical inputs always give identical results.
    """

    __slots__ = ("_evaluator", "_nodes", "_use_alpha_beta")

    def __init__(self, evaluator: IEvaluator | None = None) -> None:
        self._evaluator: IEvaluator = evaluator or MaterialEvaluator()
        self._nodes = 0
        self._use_alpha_beta = True

    @property
    def evaluator(self) -> IEvaluator:
        return self._evaluator

    def search(self, position: Position, limits: SearchLimits) -> SearchResult:
        root = position.copy()
        root_moves = root.legal_moves()
        if not root_moves:
            raise NoLegalMoveError(
                f"{root.side_to_move} has no legal move and must pass"
            )

        self._nodes = 0
        self._use_alpha_beta = limits.use_alpha_beta

        score, best_move = self._search_root(root, root_moves, limits.max_depth)
        result = SearchResult(best_move, score, limits.max_depth, self._nodes)
        _LOGGER.debug(
            "search %s depth=%d score=%d nodes=%d best=%s",
            root.side_to_move,
            result.depth,
            result.score,
            result.nodes,
            result.best_move,
        )
        return result

    def _search_root(
        self,
        position: Position,
        root_moves: list[Move],
        depth: int,
    ) -> tuple[int, Move]:
        best_score = -_INF_SCORE
        best_move = root_moves[0]
        alpha = -_INF_SCORE
        beta = _INF_SCORE

        for move in root_moves:
            child = position.copy()
            child.play(move)
            score = -self._negamax(child, depth - 1, -beta, -alpha)

            # Strict comparison keeps the first of equally scored moves.
            if score > best_score:
                best_score = score
                best_move = move
            if self._use_alpha_beta and score > alpha:
                alpha = score

        return best_score, best_move

    def _negamax(
        self,
        position: Position,
        depth: int,
        alpha: int,
        beta: int,
    ) -> int:
        self._nodes += 1

        legal = position.legal_moves()
        if not legal:
            if not position.has_legal_move(position.side_to_move.opposite):
                return self._terminal_score(position)
            if depth <= 0:
                return self._evaluator.evaluate(position)
            # A pass hands the turn over without consuming a ply.
            child = position.copy()
            child.pass_turn()
            return -self._negamax(child, depth, -beta, -alpha)

        if depth <= 0:
            return self._evaluator.evaluate(position)

        best_score = -_INF_SCORE
        for move in legal:
            child = position.copy()
            child.play(move)
            score = -self._negamax(child, depth - 1, -beta, -alpha)

            if score > best_score:
                best_score = score
            if self._use_alpha_beta:
                if score > alpha:
                    alpha = score
                if alpha >= beta:
                    break

        return best_score

    def _terminal_score(self, position: Position) -> int:
        diff = Rules.disc_differential(position.board, position.side_to_move)
        if diff > 0:
            return WIN_SCORE + diff
        if diff < 0:
            return -WIN_SCORE + diff
        return 0
