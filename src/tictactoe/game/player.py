"""Players and the registry that hands out their ids and symbols."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tictactoe.core.board import Board
    from tictactoe.core.move import Move
    from tictactoe.game.interfaces import IController

_LOGGER = logging.getLogger(__name__)
_ID_BITS = 31


class SymbolUsed(ValueError):
    """The symbol was already issued by this registry."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Symbol {symbol!r} is already in use")
        self.symbol = symbol


class Player:
    """A match participant bound to one controller.

    Equality and hashing use ``id`` only: two handles to the same player
    compare equal, players sharing a symbol or a controller do not.
    """

    __slots__ = ("_id", "_symbol", "_controller")

    def __init__(self, player_id: int, symbol: str, controller: IController) -> None:
        self._id = player_id
        self._symbol = symbol
        self._controller = controller

    @property
    def id(self) -> int:
        return self._id

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def controller(self) -> IController:
        return self._controller

    def next_move(self, board: Board) -> Move:
        """Ask the bound controller for this player's next move."""
        move = self._controller.get_next_move(self, board)
        if move.player != self:
            raise ValueError(
                f"{type(self._controller).__name__} returned a move for "
                f"{move.player} while asked for {self}"
            )
        return move

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        return self._symbol

    def __repr__(self) -> str:
        return f"Player(id={self._id}, symbol={self._symbol!r})"


class PlayerBuilder:
    """Allocates players with unique ids and unique symbols.

    Used ids and symbols are only ever added, never released.
    """

    __slots__ = ("_rng", "_used_ids", "_used_symbols")

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._used_ids: set[int] = set()
        self._used_symbols: set[str] = set()

    @property
    def used_ids(self) -> frozenset[int]:
        return frozenset(self._used_ids)

    @property
    def used_symbols(self) -> frozenset[str]:
        return frozenset(self._used_symbols)

    def new_player(self, symbol: str, controller: IController) -> Player:
        """Register *symbol* and return a fresh player bound to *controller*.

        Raises:
            SymbolUsed: *symbol* was issued before.
            ValueError: *symbol* is not a single visible character.
        """
        if len(symbol) != 1 or symbol.isspace():
            raise ValueError(f"Player symbol must be one visible character, got {symbol!r}")
        if symbol in self._used_symbols:
            raise SymbolUsed(symbol)

        # Expected O(1) draws: the id space dwarfs the number of players.
        player_id = self._rng.getrandbits(_ID_BITS)
        while player_id in self._used_ids:
            player_id = self._rng.getrandbits(_ID_BITS)

        self._used_ids.add(player_id)
        self._used_symbols.add(symbol)
        _LOGGER.debug("Registered player %r with id %d", symbol, player_id)
        return Player(player_id, symbol, controller)
