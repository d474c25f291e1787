"""Console front end."""

from reversi.ui.console import (
    CLEAR_SCREEN,
    ConsoleView,
    bold,
    render_board,
    render_outcome,
    render_status,
)

__all__ = [
    "CLEAR_SCREEN",
    "ConsoleView",
    "bold",
    "render_board",
    "render_outcome",
    "render_status",
]
