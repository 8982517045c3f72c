"""Tests for BoardWidget."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtTest import QSignalSpy, QTest

from tictactoe.core.board import Board
from tictactoe.core.move import Move
from tictactoe.game.controllers import ScriptedController
from tictactoe.game.navigation import InputEvent
from tictactoe.game.player import Player
from tictactoe.ui.board_widget import BoardWidget

X = Player(1, "X", ScriptedController([]))


class TestBoardWidget:
    def test_arrow_keys_emit_input_events(self, qapp) -> None:
        widget = BoardWidget()
        spy = QSignalSpy(widget.input_event)

        QTest.keyClick(widget, Qt.Key.Key_Up)
        QTest.keyClick(widget, Qt.Key.Key_Right)
        QTest.keyClick(widget, Qt.Key.Key_Down)
        QTest.keyClick(widget, Qt.Key.Key_Left)
        QTest.keyClick(widget, Qt.Key.Key_Return)

        assert [spy[i][0] for i in range(len(spy))] == [
            InputEvent.UP,
            InputEvent.RIGHT,
            InputEvent.DOWN,
            InputEvent.LEFT,
            InputEvent.CONFIRM,
        ]

    def test_space_confirms(self, qapp) -> None:
        widget = BoardWidget()
        spy = QSignalSpy(widget.input_event)
        QTest.keyClick(widget, Qt.Key.Key_Space)
        assert len(spy) == 1
        assert spy[0][0] == InputEvent.CONFIRM

    def test_other_keys_ignored(self, qapp) -> None:
        widget = BoardWidget()
        spy = QSignalSpy(widget.input_event)
        QTest.keyClick(widget, Qt.Key.Key_A)
        assert len(spy) == 0

    def test_not_interactive_after_game(self, qapp) -> None:
        widget = BoardWidget()
        widget.set_cursor((1, 1))
        widget.set_interactive(False)
        spy = QSignalSpy(widget.input_event)
        QTest.keyClick(widget, Qt.Key.Key_Up)
        assert len(spy) == 0
        assert widget.cursor is None

    def test_state_setters(self, qapp) -> None:
        widget = BoardWidget()
        board = Board()
        board.make_move(Move(0, 0, X))
        widget.set_board(board)
        widget.set_winning_line(((0, 0), (1, 0), (2, 0)))
        assert widget.board is board
        assert widget.winning_line == ((0, 0), (1, 0), (2, 0))

    def test_paints_without_error(self, qapp) -> None:
        widget = BoardWidget()
        board = Board()
        board.make_move(Move(1, 1, X))
        widget.set_board(board)
        widget.set_cursor((0, 0))
        widget.resize(300, 300)
        pixmap = widget.grab()
        assert not pixmap.isNull()

    def test_cells_are_square_and_inside(self, qapp) -> None:
        widget = BoardWidget()
        widget.resize(300, 200)
        rect = widget.cell_rect(2, 2)
        assert rect.width() == rect.height()
        assert rect.right() <= 300
        assert rect.bottom() <= 200
