"""Tests for the concrete controllers."""

import random

import pytest

from tictactoe.core.board import Board
from tictactoe.core.move import Move
from tictactoe.game.controllers import (
    KeyboardController,
    RandomController,
    ScriptedController,
)
from tictactoe.game.navigation import InputEvent
from tictactoe.game.player import Player

X = Player(1, "X", ScriptedController([]))
O = Player(2, "O", ScriptedController([]))


def _keyboard(events: list, cursor_log: list | None = None, sleeps: list | None = None):
    feed = iter(events)
    return KeyboardController(
        lambda: next(feed),
        on_cursor=(lambda p, pos: cursor_log.append(pos)) if cursor_log is not None else None,
        sleep=(lambda s: sleeps.append(s)) if sleeps is not None else (lambda s: None),
    )


class TestKeyboardController:
    def test_confirm_immediately_plays_first_open_cell(self) -> None:
        ctrl = _keyboard([InputEvent.CONFIRM])
        assert ctrl.get_next_move(X, Board()) == Move(0, 0, X)

    def test_navigate_then_confirm(self) -> None:
        cursor_log: list = []
        ctrl = _keyboard(
            [InputEvent.RIGHT, InputEvent.DOWN, InputEvent.CONFIRM], cursor_log
        )
        move = ctrl.get_next_move(O, Board())
        assert move == Move(1, 1, O)
        assert move.player is O
        assert cursor_log == [(0, 0), (1, 0), (1, 1)]

    def test_cursor_skips_filled_cells(self) -> None:
        board = Board()
        board.make_move(Move(0, 0, X))
        board.make_move(Move(1, 0, O))
        cursor_log: list = []
        ctrl = _keyboard([InputEvent.RIGHT, InputEvent.CONFIRM], cursor_log)
        # Starts on (2, 0), the first open cell; nothing lies to its right.
        assert ctrl.get_next_move(X, board) == Move(2, 0, X)
        assert cursor_log == [(2, 0), (2, 0)]

    def test_moves_between_rows(self) -> None:
        ctrl = _keyboard(
            [InputEvent.DOWN, InputEvent.DOWN, InputEvent.UP, InputEvent.CONFIRM]
        )
        assert ctrl.get_next_move(X, Board()) == Move(0, 1, X)

    def test_unknown_events_are_ignored(self) -> None:
        cursor_log: list = []
        ctrl = _keyboard(["noise", None, InputEvent.RIGHT, InputEvent.CONFIRM], cursor_log)
        assert ctrl.get_next_move(X, Board()) == Move(1, 0, X)
        assert cursor_log == [(0, 0), (1, 0)]

    def test_pacing_after_moves_and_confirm(self) -> None:
        sleeps: list = []
        ctrl = _keyboard([InputEvent.LEFT, InputEvent.RIGHT, InputEvent.CONFIRM], sleeps=sleeps)
        ctrl.get_next_move(X, Board())
        assert sleeps == [0.2, 0.2, 0.2]

    def test_zero_pace_never_sleeps(self) -> None:
        sleeps: list = []
        ctrl = KeyboardController(
            lambda: InputEvent.CONFIRM, pace_seconds=0, sleep=sleeps.append
        )
        ctrl.get_next_move(X, Board())
        assert sleeps == []

    def test_full_board_raises(self) -> None:
        ctrl = _keyboard([InputEvent.CONFIRM])
        full = Board()
        for y in range(3):
            for x in range(3):
                full.make_move(Move(x, y, X if (x + y) % 2 else O))
        with pytest.raises(ValueError):
            ctrl.get_next_move(X, full)


class TestScriptedController:
    def test_plays_in_order(self) -> None:
        ctrl = ScriptedController([(0, 0), (5, 5)])
        assert ctrl.get_next_move(X, Board()) == Move(0, 0, X)
        assert ctrl.get_next_move(X, Board()) == Move(5, 5, X)
        assert ctrl.remaining == 0

    def test_exhausted_script_raises(self) -> None:
        with pytest.raises(RuntimeError):
            ScriptedController([]).get_next_move(X, Board())


class TestRandomController:
    def test_picks_open_positions_only(self) -> None:
        board = Board()
        board.make_move(Move(1, 1, O))
        ctrl = RandomController(random.Random(1))
        for _ in range(50):
            move = ctrl.get_next_move(X, board)
            assert move.position in board.open_positions()
            assert move.player == X

    def test_last_open_cell(self) -> None:
        board = Board()
        for x, y in board.open_positions()[:-1]:
            board.make_move(Move(x, y, Player(100 + x * 3 + y, "#", ScriptedController([]))))
        assert RandomController().get_next_move(X, board) == Move(2, 2, X)

    def test_seeded_choice_is_reproducible(self) -> None:
        a = RandomController(random.Random(9)).get_next_move(X, Board())
        b = RandomController(random.Random(9)).get_next_move(X, Board())
        assert a == b
