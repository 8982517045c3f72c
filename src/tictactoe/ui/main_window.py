"""MainWindow: board, status line and the worker thread running the match."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QThread
from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from tictactoe.config import AppSettings
from tictactoe.core.board import Board, Winner
from tictactoe.core.move import Move
from tictactoe.game.controllers import KeyboardController
from tictactoe.game.cycle import GameCycle
from tictactoe.game.match import create_match
from tictactoe.game.navigation import format_cursor_status
from tictactoe.game.player import Player
from tictactoe.ui.board_widget import BoardWidget
from tictactoe.ui.qt_bridge import CycleWorker, KeyEventQueue

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Two humans share the keyboard; the match runs on a worker thread."""

    _THREAD_STOP_TIMEOUT_MS = 2000

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self._settings = settings if settings is not None else AppSettings()

        self.setWindowTitle("Tic-tac-toe")

        self._board_widget = BoardWidget()
        self._status = QLabel()
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.addWidget(self._board_widget, 1)
        layout.addWidget(self._status)
        self.setCentralWidget(central)

        self._keys = KeyEventQueue()
        self._worker = CycleWorker()
        self._cycle = self._create_match()
        self._worker.attach(self._cycle)

        self._board_widget.input_event.connect(self._keys.put)
        self._worker.turn_started.connect(self._on_turn_started)
        self._worker.cursor_moved.connect(self._on_cursor_moved)
        self._worker.move_applied.connect(self._on_move_applied)
        self._worker.move_rejected.connect(self._on_move_rejected)
        self._worker.game_over.connect(self._on_game_over)
        self._worker.aborted.connect(self._status.setText)

        self._thread = QThread(self)
        self._worker.moveToThread(self._thread)
        self._thread.started.connect(self._worker.run)
        self._worker.finished.connect(self._thread.quit)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board_widget(self) -> BoardWidget:
        return self._board_widget

    @property
    def status_text(self) -> str:
        return self._status.text()

    @property
    def cycle(self) -> GameCycle:
        return self._cycle

    @property
    def is_match_running(self) -> bool:
        return self._thread.isRunning()

    # ── Lifecycle ────────────────────────────────────────────────────────

    def start(self) -> None:
        """Start the match on the worker thread."""
        self._board_widget.setFocus()
        self._thread.start()

    def closeEvent(self, event: QCloseEvent | None) -> None:
        # Unblock a controller still waiting for keys, then join the thread.
        self._keys.close()
        if self._thread.isRunning():
            self._thread.quit()
            if not self._thread.wait(self._THREAD_STOP_TIMEOUT_MS):
                _LOGGER.warning("Match thread did not stop in time")
        super().closeEvent(event)

    def _create_match(self) -> GameCycle:
        s = self._settings

        def make_controller(_symbol: str) -> KeyboardController:
            return KeyboardController(
                self._keys,
                on_cursor=self._worker.report_cursor,
                pace_seconds=s.pace_seconds,
            )

        return create_match(s.symbols, make_controller, s.make_rng())

    # ── Worker slots (GUI thread) ────────────────────────────────────────

    def _on_turn_started(self, player: Player) -> None:
        self._status.setText(f"[{player.symbol}] to move")

    def _on_cursor_moved(self, player: Player, x: int, y: int) -> None:
        self._board_widget.set_cursor((x, y))
        self._status.setText(format_cursor_status(player, (x, y)))

    def _on_move_applied(self, move: Move, board: Board) -> None:
        del move
        self._board_widget.set_board(board)
        self._board_widget.set_cursor(None)

    def _on_move_rejected(self, move: Move, reason: str) -> None:
        self._status.setText(f"[{move.player.symbol}] {reason}, try again")

    def _on_game_over(self, winner: Winner | None) -> None:
        self._board_widget.set_interactive(False)
        if winner is None:
            self._status.setText("Draw")
        else:
            self._board_widget.set_winning_line(winner.line)
            self._status.setText(f"{winner.player.symbol} wins")
        _LOGGER.info("Final board:\n%s", self._board_widget.board.render())
