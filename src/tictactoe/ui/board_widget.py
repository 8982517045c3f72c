"""BoardWidget paints the 3x3 grid and turns key presses into input events."""

from __future__ import annotations

from PyQt6.QtCore import QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QColor, QFont, QKeyEvent, QPainter, QPaintEvent, QPen
from PyQt6.QtWidgets import QSizePolicy, QWidget

from tictactoe.core.board import Board, Line
from tictactoe.core.types import BOARD_SIZE, Position
from tictactoe.game.navigation import InputEvent

KEY_EVENTS: dict[int, InputEvent] = {
    Qt.Key.Key_Up.value: InputEvent.UP,
    Qt.Key.Key_Right.value: InputEvent.RIGHT,
    Qt.Key.Key_Down.value: InputEvent.DOWN,
    Qt.Key.Key_Left.value: InputEvent.LEFT,
    Qt.Key.Key_Return.value: InputEvent.CONFIRM,
    Qt.Key.Key_Enter.value: InputEvent.CONFIRM,
    Qt.Key.Key_Space.value: InputEvent.CONFIRM,
}


class BoardWidget(QWidget):
    """Displays a board snapshot with the cursor and the winning line.

    Signals:
        input_event(InputEvent): Arrow keys and Enter/Return/Space while
            the widget is interactive.
    """

    input_event = pyqtSignal(object)

    _BG = QColor("#1e1e1e")
    _GRID = QColor("#5a5a5a")
    _SYMBOL = QColor("#e0e0e0")
    _CURSOR = QColor(255, 255, 0, 90)
    _WIN = QColor(155, 199, 0, 120)
    _MARGIN = 8

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._board = Board()
        self._cursor: Position | None = None
        self._winning_line: Line | None = None
        self._interactive = True

        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(240, 240)

    # ── State ────────────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def cursor(self) -> Position | None:
        return self._cursor

    @property
    def winning_line(self) -> Line | None:
        return self._winning_line

    @property
    def interactive(self) -> bool:
        return self._interactive

    def set_board(self, board: Board) -> None:
        self._board = board
        self.update()

    def set_cursor(self, position: Position | None) -> None:
        self._cursor = position
        self.update()

    def set_winning_line(self, line: Line | None) -> None:
        self._winning_line = line
        self.update()

    def set_interactive(self, interactive: bool) -> None:
        self._interactive = interactive
        if not interactive:
            self._cursor = None
        self.update()

    # ── Geometry ─────────────────────────────────────────────────────────

    def cell_rect(self, x: int, y: int) -> QRectF:
        side = min(self.width(), self.height()) - 2 * self._MARGIN
        cell = max(side, 0) / BOARD_SIZE
        left = (self.width() - cell * BOARD_SIZE) / 2
        top = (self.height() - cell * BOARD_SIZE) / 2
        return QRectF(left + x * cell, top + y * cell, cell, cell)

    # ── Qt events ────────────────────────────────────────────────────────

    def keyPressEvent(self, event: QKeyEvent | None) -> None:
        if event is None:
            return
        mapped = KEY_EVENTS.get(event.key())
        if mapped is None or not self._interactive:
            super().keyPressEvent(event)
            return
        event.accept()
        self.input_event.emit(mapped)

    def paintEvent(self, event: QPaintEvent | None) -> None:
        del event
        p = QPainter(self)
        p.setRenderHint(QPainter.RenderHint.Antialiasing)
        p.fillRect(0, 0, self.width(), self.height(), self._BG)

        if self._winning_line is not None:
            for x, y in self._winning_line:
                p.fillRect(self.cell_rect(x, y), self._WIN)
        if self._cursor is not None:
            p.fillRect(self.cell_rect(*self._cursor), self._CURSOR)

        p.setPen(QPen(self._GRID, 2))
        for y in range(BOARD_SIZE):
            for x in range(BOARD_SIZE):
                p.drawRect(self.cell_rect(x, y))

        p.setPen(self._SYMBOL)
        for y in range(BOARD_SIZE):
            for x in range(BOARD_SIZE):
                occupant = self._board.occupant(x, y)
                if occupant is None:
                    continue
                rect = self.cell_rect(x, y)
                font = QFont()
                font.setPixelSize(max(int(rect.height() * 0.6), 1))
                font.setBold(True)
                p.setFont(font)
                p.drawText(rect, Qt.AlignmentFlag.AlignCenter, occupant.symbol)
        p.end()
