"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tictactoe.core.types import Position

if TYPE_CHECKING:
    from tictactoe.game.player import Player


@dataclass(frozen=True, slots=True)
class Move:
    """A single placement by ``player`` on cell ``(x, y)``."""

    x: int
    y: int
    player: Player

    @property
    def position(self) -> Position:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"{self.player.symbol}@{self.x},{self.y}"
