"""Qt bridge to run engine search in a worker thread."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from reversi.core.errors import ReversiError
from reversi.core.position import Position
from reversi.engine.evaluation import evaluator_for
from reversi.engine.minimax import MinimaxEngine
from reversi.engine.search import DEFAULT_DEPTH, SearchLimits


class EngineWorker(QObject):
    """Thread-affine worker that computes bot moves on demand.

    A front end moves the worker to a ``QThread`` and connects a queued
    signal to :meth:`request_move`; results come back through signals
    tagged with the caller's request id.
    """

    best_move_ready = pyqtSignal(int, object, int, int, int)
    search_no_move = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_engine", "_limits")

    def __init__(
        self,
        *,
        max_depth: int = DEFAULT_DEPTH,
        evaluator: str = "material",
    ) -> None:
        super().__init__()
        self._engine = MinimaxEngine(evaluator_for(evaluator))
        self._limits = SearchLimits(max_depth=max_depth)

    @property
    def limits(self) -> SearchLimits:
        return self._limits

    @pyqtSlot(object, int)
    def request_move(self, position_obj: object, request_id: int) -> None:
        """Search for the best move in *position_obj* and emit result."""
        if not isinstance(position_obj, Position):
            self.search_error.emit(request_id, "Engine received invalid position")
            return

        if not position_obj.has_legal_move():
            self.search_no_move.emit(request_id)
            return

        try:
            result = self._engine.search(position_obj, self._limits)
        except ReversiError as exc:
            self.search_error.emit(request_id, str(exc))
            return

        self.best_move_ready.emit(
            request_id,
            result.best_move,
            result.score,
            result.depth,
            result.nodes,
        )

    @pyqtSlot(int)
    def set_depth(self, max_depth: int) -> None:
        """Update search depth (takes effect on the next search)."""
        try:
            self._limits = SearchLimits(max_depth=max_depth)
        except ReversiError as exc:
            self.search_error.emit(-1, str(exc))
