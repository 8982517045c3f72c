"""GameCycle — runs one match between two players.

Picks who moves first, asks each player's controller for moves, applies
them to the board and stops on a win or after nine applied moves.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from tictactoe.core.board import Board, Winner
from tictactoe.core.errors import MoveError
from tictactoe.core.move import Move
from tictactoe.core.types import CELL_COUNT
from tictactoe.game.interfaces import GamePhase
from tictactoe.game.player import Player

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

TurnCallback = Callable[[Player], None]
MoveCallback = Callable[[Move, Board], None]
RejectedCallback = Callable[[Move, MoveError], None]
GameOverCallback = Callable[[Winner | None], None]


@dataclass
class CycleEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_turn_started: list[TurnCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_move_rejected: list[RejectedCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Cycle ────────────────────────────────────────────────────────────────────


class GameCycle:
    """Alternates turns between two players until a win or a full board.

    A rejected move (out of bounds or on a filled cell) is dropped and the
    same player is asked again; the turn only passes after an accepted move.

    Thread-safety: the whole match runs on the thread that calls
    :meth:`run`; controllers are invoked one at a time.
    """

    __slots__ = (
        "_board",
        "_players",
        "_current",
        "_first",
        "_moves_applied",
        "_phase",
        "_winner",
        "events",
    )

    def __init__(
        self,
        player1: Player,
        player2: Player,
        *,
        rng: random.Random | None = None,
    ) -> None:
        if player1 == player2:
            raise ValueError(f"A match needs two distinct players, got {player1!r} twice")

        rng = rng if rng is not None else random.Random()
        self._players = (player1, player2)
        self._first = player1 if rng.random() < 0.5 else player2
        self._current = self._first
        self._board = Board()
        self._moves_applied = 0
        self._phase = GamePhase.NOT_STARTED
        self._winner: Winner | None = None
        self.events = CycleEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def players(self) -> tuple[Player, Player]:
        return self._players

    @property
    def first_player(self) -> Player:
        return self._first

    @property
    def current_player(self) -> Player:
        return self._current

    @property
    def moves_applied(self) -> int:
        return self._moves_applied

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def winner(self) -> Winner | None:
        return self._winner

    @property
    def is_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    def opponent(self, player: Player) -> Player:
        first, second = self._players
        return second if player == first else first

    # ── Running ──────────────────────────────────────────────────────────

    def run(self) -> Winner | None:
        """Play the match to the end; ``None`` means a draw."""
        while not self.is_over:
            self.play_turn()
        return self._winner

    def play_turn(self) -> Winner | None:
        """Ask the current player until one move is accepted, then pass the turn.

        Finishes the match on a win or on the ninth applied move. Once the
        match is over the board is frozen: no player is asked and the
        stored outcome is returned.
        """
        if self.is_over:
            return self._winner
        if self._phase == GamePhase.NOT_STARTED:
            _LOGGER.info(
                "Match %s vs %s, %s moves first",
                self._players[0],
                self._players[1],
                self._first,
            )
            self._phase = GamePhase.AWAITING_MOVE

        player = self._current
        self._emit_turn_started(player)

        while True:
            move = player.next_move(self._board)
            try:
                winner = self._board.make_move(move)
            except MoveError as exc:
                _LOGGER.info("Rejected %s: %s", move, exc)
                self._emit_move_rejected(move, exc)
                continue
            break

        self._moves_applied += 1
        _LOGGER.debug("Applied %s (%d/%d)", move, self._moves_applied, CELL_COUNT)
        self._emit_move(move)

        if winner is not None or self._moves_applied >= CELL_COUNT:
            return self._finish(winner)
        self._current = self.opponent(player)
        return None

    # ── Internal helpers ─────────────────────────────────────────────────

    def _finish(self, winner: Winner | None) -> Winner | None:
        self._winner = winner
        self._phase = GamePhase.GAME_OVER
        if winner is None:
            _LOGGER.info("Match drawn after %d moves", self._moves_applied)
        else:
            _LOGGER.info("%s wins on line %s", winner.player, winner.line)
        for cb in self.events.on_game_over:
            cb(winner)
        return winner

    def _emit_turn_started(self, player: Player) -> None:
        for cb in self.events.on_turn_started:
            cb(player)

    def _emit_move(self, move: Move) -> None:
        for cb in self.events.on_move:
            cb(move, self._board)

    def _emit_move_rejected(self, move: Move, error: MoveError) -> None:
        for cb in self.events.on_move_rejected:
            cb(move, error)
