"""Application settings and their command-line parsing."""

from __future__ import annotations

import argparse
import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Players
    symbols: tuple[str, str] = ("X", "O")

    # Keyboard controller pacing, seconds
    pace_seconds: float = 0.2

    # Match
    seed: int | None = None
    headless: bool = False

    # Logging
    log_level: str = "WARNING"

    def make_rng(self) -> random.Random:
        """Randomness source for first-mover choice, ids and random players."""
        return random.Random(self.seed)

    def configure_logging(self) -> None:
        logging.basicConfig(
            level=getattr(logging, self.log_level),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    @classmethod
    def build_parser(cls) -> argparse.ArgumentParser:
        defaults = cls()
        parser = argparse.ArgumentParser(
            prog="tictactoe",
            description="Two-player tic-tac-toe on a 3x3 board.",
        )
        parser.add_argument(
            "--headless",
            action="store_true",
            help="play two random players in the console instead of opening a window",
        )
        parser.add_argument(
            "--symbols",
            default="".join(defaults.symbols),
            help="the two player symbols, e.g. XO (default: %(default)s)",
        )
        parser.add_argument("--seed", type=int, default=None, help="random seed")
        parser.add_argument(
            "--pace",
            type=float,
            default=defaults.pace_seconds,
            help="pause after each cursor move, in seconds (default: %(default)s)",
        )
        parser.add_argument(
            "--log-level",
            choices=_LOG_LEVELS,
            default=defaults.log_level,
            type=str.upper,
        )
        return parser

    @classmethod
    def from_args(cls, argv: Sequence[str] | None = None) -> AppSettings:
        parser = cls.build_parser()
        args = parser.parse_args(argv)
        if len(args.symbols) != 2:
            parser.error(f"--symbols needs exactly two characters, got {args.symbols!r}")
        if args.pace < 0:
            parser.error("--pace must not be negative")
        return cls(
            symbols=(args.symbols[0], args.symbols[1]),
            pace_seconds=args.pace,
            seed=args.seed,
            headless=args.headless,
            log_level=args.log_level,
        )
