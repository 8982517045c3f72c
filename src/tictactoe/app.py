"""Application entry point."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from tictactoe.config import AppSettings
from tictactoe.game.controllers import RandomController
from tictactoe.game.match import create_match

_LOGGER = logging.getLogger(__name__)


def play_headless(settings: AppSettings) -> int:
    """Let two random players finish a match and print the outcome."""
    rng = settings.make_rng()
    cycle = create_match(settings.symbols, lambda _symbol: RandomController(rng), rng)
    winner = cycle.run()

    print(cycle.board.render())
    if winner is None:
        print("Draw")
    else:
        print(f"{winner.player.symbol} wins")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Launch the tic-tac-toe application."""
    settings = AppSettings.from_args(argv)
    settings.configure_logging()

    try:
        if settings.headless:
            return play_headless(settings)

        from tictactoe.ui.bootstrap import run_application

        return run_application(settings)
    except ValueError as exc:
        # Bad player setup (duplicate or malformed symbol)
        _LOGGER.error("Cannot start match: %s", exc)
        print(f"tictactoe: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
