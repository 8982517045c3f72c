"""Board - the 3x3 tic-tac-toe state machine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tictactoe.core.errors import OutOfBounds, PositionAlreadyFilled
from tictactoe.core.types import BOARD_SIZE, CELL_COUNT, Position, is_on_board

if TYPE_CHECKING:
    from tictactoe.core.move import Move
    from tictactoe.game.player import Player

Line = tuple[Position, Position, Position]

# Scan order decides which winner is reported: rows, columns, then diagonals.
WINNING_LINES: tuple[Line, ...] = (
    *(tuple((x, y) for x in range(BOARD_SIZE)) for y in range(BOARD_SIZE)),
    *(tuple((x, y) for y in range(BOARD_SIZE)) for x in range(BOARD_SIZE)),
    ((0, 0), (1, 1), (2, 2)),
    ((2, 0), (1, 1), (0, 2)),
)


@dataclass(frozen=True, slots=True)
class Winner:
    """The player who completed ``line``."""

    player: Player
    line: Line


class Board:
    """Mutable 3x3 grid of cells, each empty or held by a :class:`Player`.

    Cells only ever go from empty to occupied, and only through
    :meth:`make_move`.
    """

    __slots__ = ("_cells", "_filled")

    def __init__(self) -> None:
        # [y][x] -> occupant or None
        self._cells: list[list[Player | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        self._filled = 0

    # -- Element access -----------------------------------------------------

    def occupant(self, x: int, y: int) -> Player | None:
        if not is_on_board(x, y):
            raise OutOfBounds(x, y)
        return self._cells[y][x]

    def __getitem__(self, pos: Position) -> Player | None:
        x, y = pos
        return self.occupant(x, y)

    def is_empty(self, x: int, y: int) -> bool:
        return self.occupant(x, y) is None

    # -- Query helpers ------------------------------------------------------

    def open_positions(self) -> list[Position]:
        """Empty cells in row-major order."""
        return [
            (x, y)
            for y in range(BOARD_SIZE)
            for x in range(BOARD_SIZE)
            if self._cells[y][x] is None
        ]

    def filled_positions(self) -> int:
        return self._filled

    @property
    def is_full(self) -> bool:
        return self._filled == CELL_COUNT

    # -- Mutation -----------------------------------------------------------

    def make_move(self, move: Move) -> Winner | None:
        """Occupy the move's cell and return the winner, if any.

        A board that already has a winner still accepts moves on open
        cells; :class:`~tictactoe.game.cycle.GameCycle` stops asking for
        moves once the match is over.

        Raises:
            OutOfBounds: either coordinate is outside ``[0, 3)``.
            PositionAlreadyFilled: the cell already has an occupant.
        """
        x, y = move.x, move.y
        if not is_on_board(x, y):
            raise OutOfBounds(x, y)

        current = self._cells[y][x]
        if current is not None:
            raise PositionAlreadyFilled(current)

        self._cells[y][x] = move.player
        self._filled += 1
        return self.winner()

    # -- Win detection ------------------------------------------------------

    def winner(self) -> Winner | None:
        """First complete line in scan order, or ``None``."""
        for line in WINNING_LINES:
            player = self._line_owner(line)
            if player is not None:
                return Winner(player, line)
        return None

    def _line_owner(self, line: Line) -> Player | None:
        (x0, y0), (x1, y1), (x2, y2) = line
        first = self._cells[y0][x0]
        if first is None:
            return None
        # Player equality is by id, never by symbol.
        if first == self._cells[y1][x1] and first == self._cells[y2][x2]:
            return first
        return None

    # -- Copy / display -----------------------------------------------------

    def copy(self) -> Board:
        """Snapshot sharing the same Player handles."""
        board = Board.__new__(Board)
        board._cells = [row[:] for row in self._cells]
        board._filled = self._filled
        return board

    def render(self) -> str:
        """Occupant symbols (or blanks), ``|`` between cells, one row per line."""
        return "\n".join(
            "|".join(" " if cell is None else cell.symbol for cell in row)
            for row in self._cells
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board(filled={self._filled})"
