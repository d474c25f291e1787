"""Search bot package: negamax engine, evaluators and search models.

The Qt worker bridge lives in :mod:`reversi.engine.qt_bridge` and is imported
from there so that console use does not load Qt.
"""

from reversi.engine.evaluation import (
    EVALUATORS,
    MaterialEvaluator,
    PositionalEvaluator,
    evaluator_for,
)
from reversi.engine.minimax import WIN_SCORE, MinimaxEngine
from reversi.engine.search import DEFAULT_DEPTH, IEngine, SearchLimits, SearchResult

DefaultEngine: type[IEngine] = MinimaxEngine

__all__ = [
    "DEFAULT_DEPTH",
    "DefaultEngine",
    "EVALUATORS",
    "IEngine",
    "MaterialEvaluator",
    "MinimaxEngine",
    "PositionalEvaluator",
    "SearchLimits",
    "SearchResult",
    "WIN_SCORE",
    "evaluator_for",
]
