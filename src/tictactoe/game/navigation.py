"""Cursor navigation among open cells for interactive controllers."""

from __future__ import annotations

import math
from collections.abc import Sequence
from enum import Enum
from typing import TYPE_CHECKING

from tictactoe.core.types import Position

if TYPE_CHECKING:
    from tictactoe.game.player import Player


class Direction(Enum):
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"


class InputEvent(Enum):
    """Discrete input consumed by the keyboard controller."""

    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"
    CONFIRM = "confirm"

    @property
    def direction(self) -> Direction | None:
        if self is InputEvent.CONFIRM:
            return None
        return Direction(self.value)


def direction_to(
    start: Position, other: Position
) -> tuple[Direction | None, Direction | None]:
    """Return ``(LEFT/RIGHT/None, UP/DOWN/None)`` from *start* towards *other*.

    ``y`` grows downwards, so a smaller ``y`` is ``UP``.
    """
    sx, sy = start
    ox, oy = other

    horizontal = None
    if sx > ox:
        horizontal = Direction.LEFT
    elif sx < ox:
        horizontal = Direction.RIGHT

    vertical = None
    if sy > oy:
        vertical = Direction.UP
    elif sy < oy:
        vertical = Direction.DOWN

    return horizontal, vertical


def nearest_position(
    positions: Sequence[Position], start: Position, direction: Direction
) -> Position:
    """Closest position lying in *direction* from *start*.

    A position qualifies when either its horizontal or its vertical
    relation to *start* matches *direction*, so diagonal neighbours are
    reachable. Ties keep the order of *positions*. Returns *start* when
    nothing qualifies.
    """
    candidates = [pos for pos in positions if direction in direction_to(start, pos)]
    if not candidates:
        return start
    return min(candidates, key=lambda pos: math.dist(start, pos))


def format_cursor_status(player: Player, position: Position) -> str:
    """Status line shown while a human picks a cell."""
    x, y = position
    return f"[{player.symbol}] - Playing at {x}, {y}"
