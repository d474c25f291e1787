"""Application settings assembled from CLI arguments and the environment."""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from reversi.core.enums import Side
from reversi.core.errors import InvalidDepthError
from reversi.engine.evaluation import EVALUATORS
from reversi.engine.search import DEFAULT_DEPTH, SearchLimits

DEPTH_ENV = "REVERSI_DEPTH"
LOG_LEVEL_ENV = "REVERSI_LOG_LEVEL"


class GameMode(Enum):
    """Who sits across the board from the first human."""

    PLAYER = "player"
    BOT = "bot"


@dataclass
class AppSettings:
    """All user-configurable settings."""

    mode: GameMode = GameMode.BOT
    depth: int = DEFAULT_DEPTH
    evaluator: str = "material"
    human_side: Side = Side.DARK
    show_legal_moves: bool = True
    clear_screen: bool = False
    color: bool = False
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.depth < 1:
            raise InvalidDepthError(f"Search depth must be >= 1, got {self.depth}")
        if self.evaluator not in EVALUATORS:
            raise ValueError(f"Unknown evaluator: {self.evaluator!r}")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    def search_limits(self) -> SearchLimits:
        return SearchLimits(max_depth=self.depth)


def parse_depth(text: str) -> int:
    """Parse a search depth, rejecting non-integers and values below one."""
    try:
        depth = int(text)
    except ValueError:
        raise InvalidDepthError(f"Search depth must be an integer, got {text!r}") from None
    if depth < 1:
        raise InvalidDepthError(f"Search depth must be >= 1, got {depth}")
    return depth


def settings_from_args(
    args: argparse.Namespace,
    environ: Mapping[str, str] | None = None,
) -> AppSettings:
    """Build :class:`AppSettings` from parsed arguments.

    Command-line values win over ``REVERSI_DEPTH`` / ``REVERSI_LOG_LEVEL``.
    """
    env = os.environ if environ is None else environ

    depth = DEFAULT_DEPTH
    if args.depth is not None:
        depth = args.depth
    elif env.get(DEPTH_ENV):
        depth = parse_depth(env[DEPTH_ENV])

    if args.verbose:
        log_level = "DEBUG"
    else:
        log_level = env.get(LOG_LEVEL_ENV, "WARNING").strip().upper() or "WARNING"

    return AppSettings(
        mode=GameMode.PLAYER if args.player else GameMode.BOT,
        depth=depth,
        evaluator=args.evaluator,
        human_side=Side[args.human_side.upper()],
        show_legal_moves=not args.no_hints,
        clear_screen=args.clear,
        color=args.color,
        log_level=log_level,
    )
