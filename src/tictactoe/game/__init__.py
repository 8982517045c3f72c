"""Game management layer — players, controllers, turn cycle.

Quick start::

    from tictactoe.game import GameCycle, PlayerBuilder, RandomController

    builder = PlayerBuilder()
    x = builder.new_player("X", RandomController())
    o = builder.new_player("O", RandomController())
    winner = GameCycle(x, o).run()
"""

from tictactoe.game.controllers import (
    KeyboardController,
    RandomController,
    ScriptedController,
)
from tictactoe.game.cycle import CycleEvents, GameCycle
from tictactoe.game.interfaces import GamePhase, IController
from tictactoe.game.navigation import (
    Direction,
    InputEvent,
    direction_to,
    format_cursor_status,
    nearest_position,
)
from tictactoe.game.player import Player, PlayerBuilder, SymbolUsed

__all__ = [
    # Interfaces
    "GamePhase",
    "IController",
    # Navigation
    "Direction",
    "InputEvent",
    "direction_to",
    "format_cursor_status",
    "nearest_position",
    # Concrete
    "CycleEvents",
    "GameCycle",
    "KeyboardController",
    "Player",
    "PlayerBuilder",
    "RandomController",
    "ScriptedController",
    "SymbolUsed",
]
