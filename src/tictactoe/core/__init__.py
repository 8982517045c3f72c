"""Core domain layer — board rules with zero external dependencies.

Quick start::

    from tictactoe.core import Board, Move

    board = Board()
    winner = board.make_move(Move(1, 1, player))
    print(board.render())
"""

from tictactoe.core.board import WINNING_LINES, Board, Winner
from tictactoe.core.errors import MoveError, OutOfBounds, PositionAlreadyFilled
from tictactoe.core.move import Move
from tictactoe.core.types import (
    BOARD_SIZE,
    CELL_COUNT,
    Position,
    all_positions,
    is_on_board,
)

__all__ = [
    # Types / helpers
    "BOARD_SIZE",
    "CELL_COUNT",
    "Position",
    "all_positions",
    "is_on_board",
    # Domain objects
    "Board",
    "Move",
    "WINNING_LINES",
    "Winner",
    # Errors
    "MoveError",
    "OutOfBounds",
    "PositionAlreadyFilled",
]
