"""Concrete controller implementations."""

from __future__ import annotations

import logging
import random
import time
from collections import deque
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from tictactoe.core.move import Move
from tictactoe.core.types import Position
from tictactoe.game.interfaces import IController
from tictactoe.game.navigation import InputEvent, format_cursor_status, nearest_position

if TYPE_CHECKING:
    from tictactoe.core.board import Board
    from tictactoe.game.player import Player

_LOGGER = logging.getLogger(__name__)

EventSource = Callable[[], InputEvent]
CursorCallback = Callable[["Player", Position], None]


class KeyboardController(IController):
    """A human picks a cell by moving a cursor among open positions.

    ``read_event`` blocks until the next :class:`InputEvent` is available.
    The cursor starts on the first open cell; directional events jump to
    the nearest open cell in that direction and ``CONFIRM`` plays it.

    Args:
        read_event: ``() -> InputEvent``, blocking input source.
        on_cursor: ``(Player, Position) -> None``, called whenever the
            candidate cell changes (and once at the start of the turn).
        pace_seconds: Pause after each cursor move and after confirming.
        sleep: Injected for tests.
    """

    __slots__ = ("_read_event", "_on_cursor", "_pace_seconds", "_sleep")

    def __init__(
        self,
        read_event: EventSource,
        *,
        on_cursor: CursorCallback | None = None,
        pace_seconds: float = 0.2,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._read_event = read_event
        self._on_cursor = on_cursor
        self._pace_seconds = pace_seconds
        self._sleep = sleep

    def get_next_move(self, player: Player, board: Board) -> Move:
        positions = board.open_positions()
        if not positions:
            raise ValueError("No open position left to play")

        cursor = positions[0]
        self._show(player, cursor)

        while True:
            event = self._read_event()
            if event is InputEvent.CONFIRM:
                self._pause()
                break

            direction = event.direction if isinstance(event, InputEvent) else None
            if direction is None:
                continue

            cursor = nearest_position(positions, cursor, direction)
            self._show(player, cursor)
            self._pause()

        x, y = cursor
        return Move(x, y, player)

    def _show(self, player: Player, cursor: Position) -> None:
        _LOGGER.debug("%s", format_cursor_status(player, cursor))
        if self._on_cursor is not None:
            self._on_cursor(player, cursor)

    def _pause(self) -> None:
        if self._pace_seconds > 0:
            self._sleep(self._pace_seconds)


class ScriptedController(IController):
    """Plays a fixed sequence of positions, valid or not."""

    __slots__ = ("_queue",)

    def __init__(self, positions: Iterable[Position]) -> None:
        self._queue: deque[Position] = deque(positions)

    @property
    def remaining(self) -> int:
        return len(self._queue)

    def get_next_move(self, player: Player, board: Board) -> Move:
        if not self._queue:
            raise RuntimeError(f"Script for {player} has no moves left")
        x, y = self._queue.popleft()
        return Move(x, y, player)


class RandomController(IController):
    """Picks uniformly among the open positions."""

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def get_next_move(self, player: Player, board: Board) -> Move:
        positions = board.open_positions()
        if not positions:
            raise ValueError("No open position left to play")
        x, y = self._rng.choice(positions)
        return Move(x, y, player)
