"""Position type alias and coordinate helpers.

Board layout (x = column, y = row, y = 0 is the top row)::

    (0,0) (1,0) (2,0)
    (0,1) (1,1) (2,1)
    (0,2) (1,2) (2,2)
"""

from __future__ import annotations

from typing import TypeAlias

Position: TypeAlias = tuple[int, int]  # (x, y)

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


def is_on_board(x: int, y: int) -> bool:
    """Check whether ``(x, y)`` addresses one of the nine cells."""
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def all_positions() -> list[Position]:
    """Every cell in row-major order: ``y`` ascending, then ``x``."""
    return [(x, y) for y in range(BOARD_SIZE) for x in range(BOARD_SIZE)]
