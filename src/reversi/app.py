"""Application entry point: command-line Reversi."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence

from reversi import __version__
from reversi.config import AppSettings, GameMode, parse_depth, settings_from_args
from reversi.core.enums import Side
from reversi.core.errors import InvalidDepthError
from reversi.engine import MinimaxEngine, evaluator_for
from reversi.engine.evaluation import EVALUATORS
from reversi.game.controller import GameController
from reversi.game.interfaces import IPlayer
from reversi.game.player import BotPlayer, HumanPlayer
from reversi.ui.console import ConsoleView

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

EXIT_OK = 0
EXIT_INTERRUPTED = 130


def _depth_arg(text: str) -> int:
    try:
        return parse_depth(text)
    except InvalidDepthError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reversi",
        description="Play Reversi against another player or the computer.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-p", "--player", action="store_true", help="play against another player"
    )
    mode.add_argument(
        "-b", "--bot", action="store_true", help="play against the bot (default)"
    )
    parser.add_argument(
        "-d",
        "--depth",
        type=_depth_arg,
        default=None,
        metavar="N",
        help="bot search depth in plies, implies --bot (default: 3)",
    )
    parser.add_argument(
        "--evaluator",
        choices=sorted(EVALUATORS),
        default="material",
        help="bot evaluation function (default: material)",
    )
    parser.add_argument(
        "--human-side",
        choices=("dark", "light"),
        default="dark",
        help="side the human plays against the bot; dark moves first (default: dark)",
    )
    parser.add_argument(
        "--no-hints", action="store_true", help="do not mark legal moves on the board"
    )
    parser.add_argument(
        "--clear", action="store_true", help="clear the screen before each board"
    )
    parser.add_argument(
        "--color", action="store_true", help="highlight player names and the result"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log search details"
    )
    return parser


def _make_players(
    settings: AppSettings,
    read_line: Callable[[str], str],
    write: Callable[[str], None],
) -> tuple[IPlayer, IPlayer]:
    def human(side: Side, name: str) -> HumanPlayer:
        return HumanPlayer(side, name, read_line=read_line, write=write)

    if settings.mode == GameMode.PLAYER:
        return human(Side.DARK, "Dark"), human(Side.LIGHT, "Light")

    bot_side = settings.human_side.opposite
    bot = BotPlayer(
        bot_side,
        limits=settings.search_limits(),
        engine=MinimaxEngine(evaluator_for(settings.evaluator)),
    )
    you = human(settings.human_side, "You")
    return (you, bot) if settings.human_side == Side.DARK else (bot, you)


def main(
    argv: Sequence[str] | None = None,
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> int:
    """Run a console game. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.player and args.depth is not None:
        parser.error("argument -d/--depth: not allowed with argument -p/--player")

    try:
        settings = settings_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(level=settings.log_level, format=_LOG_FORMAT)
    _LOGGER.debug("Settings: %s", settings)

    controller = GameController()
    view = ConsoleView(
        write,
        show_legal_moves=settings.show_legal_moves,
        clear_screen=settings.clear_screen,
        color=settings.color,
    )
    view.attach(controller)
    dark, light = _make_players(settings, read_line, write)
    controller.new_game(dark, light)

    try:
        controller.play()
    except (EOFError, KeyboardInterrupt):
        write("\nGame aborted.")
        return EXIT_INTERRUPTED

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
