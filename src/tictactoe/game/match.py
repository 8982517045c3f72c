"""Match setup: register two players and hand back a ready cycle."""

from __future__ import annotations

import random
from collections.abc import Callable

from tictactoe.game.cycle import GameCycle
from tictactoe.game.interfaces import IController
from tictactoe.game.player import PlayerBuilder

ControllerFactory = Callable[[str], IController]


def create_match(
    symbols: tuple[str, str],
    make_controller: ControllerFactory,
    rng: random.Random | None = None,
) -> GameCycle:
    """Register one player per symbol and build the cycle.

    ``make_controller(symbol)`` supplies each player's controller.
    Registry errors (``SymbolUsed``, malformed symbols) propagate before
    any move is asked for.
    """
    rng = rng if rng is not None else random.Random()
    builder = PlayerBuilder(rng)
    first, second = (
        builder.new_player(symbol, make_controller(symbol)) for symbol in symbols
    )
    return GameCycle(first, second, rng=rng)
