"""Abstract interfaces for the game layer.

The cycle and the players depend on :class:`IController`, not on any
concrete way of choosing a move.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tictactoe.core.board import Board
    from tictactoe.core.move import Move
    from tictactoe.game.player import Player


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a single match."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IController(ABC):
    """Source of moves for a player (keyboard, script, strategy...)."""

    @abstractmethod
    def get_next_move(self, player: Player, board: Board) -> Move:
        """Return the next move for *player* on *board*.

        May block for as long as it needs (interactive controllers wait on
        input) but must eventually return a :class:`Move` naming *player*.
        """
