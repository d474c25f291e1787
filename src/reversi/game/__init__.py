"""Game management layer: controller, players and the state machine.

Quick start::

    from reversi.core import Side
    from reversi.game import BotPlayer, GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        dark=HumanPlayer(Side.DARK, "Alice"),
        light=BotPlayer(Side.LIGHT),
    )
    outcome = ctrl.play()
"""

from reversi.game.controller import GameController, GameEvents
from reversi.game.interfaces import GamePhase, IPlayer
from reversi.game.player import BotPlayer, HumanPlayer
from reversi.game.state import GameOutcome, GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IPlayer",
    # Concrete
    "BotPlayer",
    "GameController",
    "GameEvents",
    "GameOutcome",
    "GameState",
    "HumanPlayer",
    "MoveRecord",
]
