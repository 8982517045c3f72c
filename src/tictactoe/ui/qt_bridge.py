"""Qt bridge to run a match in a worker thread."""

from __future__ import annotations

import logging
import queue

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from tictactoe.core.board import Board
from tictactoe.core.errors import MoveError
from tictactoe.core.move import Move
from tictactoe.core.types import Position
from tictactoe.game.cycle import GameCycle
from tictactoe.game.navigation import InputEvent
from tictactoe.game.player import Player

_LOGGER = logging.getLogger(__name__)


class InputClosed(RuntimeError):
    """The input source was closed while a controller was waiting on it."""


class KeyEventQueue:
    """Hands :class:`InputEvent` values from the GUI thread to a blocked controller.

    Instances are callables and plug straight into
    :class:`~tictactoe.game.controllers.KeyboardController`.
    """

    __slots__ = ("_queue", "_closed", "__weakref__")

    def __init__(self) -> None:
        self._queue: queue.Queue[InputEvent | None] = queue.Queue()
        self._closed = False

    def put(self, event: InputEvent) -> None:
        if not self._closed:
            self._queue.put(event)

    def close(self) -> None:
        """Wake any waiting reader; every later read raises :class:`InputClosed`."""
        self._closed = True
        self._queue.put(None)

    def __call__(self) -> InputEvent:
        event = self._queue.get()
        if event is None:
            # Keep the sentinel for any further reader.
            self._queue.put(None)
            raise InputClosed("input source closed")
        return event


class CycleWorker(QObject):
    """Thread-affine worker that plays a whole match and reports progress."""

    turn_started = pyqtSignal(object)  # Player
    cursor_moved = pyqtSignal(object, int, int)  # Player, x, y
    move_applied = pyqtSignal(object, object)  # Move, Board snapshot
    move_rejected = pyqtSignal(object, str)  # Move, reason
    game_over = pyqtSignal(object)  # Winner | None
    aborted = pyqtSignal(str)
    finished = pyqtSignal()

    def __init__(self) -> None:
        super().__init__()
        self._cycle: GameCycle | None = None

    @property
    def cycle(self) -> GameCycle | None:
        return self._cycle

    def attach(self, cycle: GameCycle) -> None:
        """Forward *cycle* events as signals."""
        self._cycle = cycle
        events = cycle.events
        events.on_turn_started.append(self.turn_started.emit)
        events.on_move.append(self._on_move)
        events.on_move_rejected.append(self._on_move_rejected)
        events.on_game_over.append(self.game_over.emit)

    def report_cursor(self, player: Player, position: Position) -> None:
        """``on_cursor`` hook for keyboard controllers."""
        x, y = position
        self.cursor_moved.emit(player, x, y)

    @pyqtSlot()
    def run(self) -> None:
        """Play the attached match to completion."""
        if self._cycle is None:
            self.aborted.emit("No match attached")
            self.finished.emit()
            return

        try:
            self._cycle.run()
        except InputClosed:
            _LOGGER.info("Match abandoned: input closed")
            self.aborted.emit("Match abandoned")
        except Exception as exc:
            _LOGGER.exception("Match failed")
            self.aborted.emit(str(exc))
        self.finished.emit()

    def _on_move(self, move: Move, board: Board) -> None:
        self.move_applied.emit(move, board.copy())

    def _on_move_rejected(self, move: Move, error: MoveError) -> None:
        self.move_rejected.emit(move, str(error))
