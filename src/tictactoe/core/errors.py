"""Move rejection errors raised by :class:`~tictactoe.core.board.Board`."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tictactoe.game.player import Player


class MoveError(Exception):
    """A move that cannot be applied. The board is left unchanged."""


class OutOfBounds(MoveError):
    """Coordinates outside ``[0, 3)``."""

    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"Position ({x}, {y}) is outside the board")
        self.x = x
        self.y = y


class PositionAlreadyFilled(MoveError):
    """Target cell is taken; ``occupant`` is the player holding it."""

    def __init__(self, occupant: Player) -> None:
        super().__init__(f"Position already filled by {occupant}")
        self.occupant = occupant
