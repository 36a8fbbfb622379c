"""
utils.py - Constants and enumerations for the Cookies & Milk engine

This module provides the board geometry, the tile/player/result enumerations,
the glyph table and the input validation helpers shared by every component.
"""

from enum import Enum, auto
from typing import Iterator, Optional, Tuple, Union

import numpy as np

from cookiemilk.errors import InvalidColumnError, InvalidPlayerError

# Board geometry: a wall border frames a 4x4 playable interior
ROWS = 5
COLS = 6
INTERIOR_ROWS = range(0, 4)
INTERIOR_COLS = range(1, 5)
CONNECT_N = 4  # Number of matching tiles in a line to win

# Seed used by the random board until it is reseeded
DEFAULT_SEED = 2024


class Tile(Enum):
    """Enumeration representing the contents of a board cell."""
    EMPTY = 0
    COOKIE = 1
    MILK = 2
    WALL = 3

    @property
    def glyph(self) -> str:
        return GLYPHS[self]

    @property
    def player(self) -> Optional['Player']:
        """The player occupying this tile, or None for empty and wall tiles."""
        if self == Tile.COOKIE:
            return Player.COOKIE
        elif self == Tile.MILK:
            return Player.MILK
        return None

    def is_occupied(self) -> bool:
        return self.player is not None

    def __str__(self):
        return self.glyph


class Player(Enum):
    """Enumeration representing the two players. Values match their tiles."""
    COOKIE = 1   # Player A
    MILK = 2     # Player B

    def other(self) -> 'Player':
        """Get the other player."""
        return Player.MILK if self == Player.COOKIE else Player.COOKIE

    @property
    def tile(self) -> Tile:
        return Tile(self.value)

    @property
    def glyph(self) -> str:
        return self.tile.glyph

    @property
    def identifier(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, player: Union['Player', str]) -> 'Player':
        """
        Resolve a player from a Player, an identifier or a glyph.

        Args:
            player: ``Player.COOKIE``, ``"cookie"``, ``"🍪"`` and so on

        Returns:
            The matching player

        Raises:
            InvalidPlayerError: for any other value
        """
        if isinstance(player, cls):
            return player
        if isinstance(player, str):
            key = player.strip()
            for candidate in cls:
                if key.lower() == candidate.identifier or key == candidate.glyph:
                    return candidate
        raise InvalidPlayerError(player)

    def __str__(self):
        return self.glyph


class GameResult(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    COOKIE_WIN = auto()
    MILK_WIN = auto()
    TIE = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS

    @property
    def winner(self) -> Optional[Player]:
        if self == GameResult.COOKIE_WIN:
            return Player.COOKIE
        elif self == GameResult.MILK_WIN:
            return Player.MILK
        return None

    @classmethod
    def for_winner(cls, player: Player) -> 'GameResult':
        return cls.COOKIE_WIN if player == Player.COOKIE else cls.MILK_WIN

    def summary(self) -> str:
        """The line shown under a finished board, empty while in progress."""
        if self.winner is not None:
            return f"{self.winner.glyph} wins!"
        elif self == GameResult.TIE:
            return "No winner."
        return ""


GLYPHS = {
    Tile.EMPTY: "⬛",       # black large square
    Tile.WALL: "⬜",        # white large square
    Tile.COOKIE: "\U0001f36a",  # cookie
    Tile.MILK: "\U0001f95b",    # glass of milk
}


def is_valid_position(row: int, col: int) -> bool:
    """Check if a position is within the board boundaries."""
    return 0 <= row < ROWS and 0 <= col < COLS


def is_interior(row: int, col: int) -> bool:
    """Check if a position is inside the playable interior."""
    return row in INTERIOR_ROWS and col in INTERIOR_COLS


def interior_positions() -> Iterator[Tuple[int, int]]:
    """Yield every interior (row, col) in row-major order."""
    for row in INTERIOR_ROWS:
        for col in INTERIOR_COLS:
            yield row, col


def validate_column(column) -> int:
    """
    Check that ``column`` names an interior column.

    Returns:
        The column as a plain int

    Raises:
        InvalidColumnError: for non-integers and columns outside the interior
    """
    if isinstance(column, bool) or not isinstance(column, (int, np.integer)):
        raise InvalidColumnError(column)
    if int(column) not in INTERIOR_COLS:
        raise InvalidColumnError(column)
    return int(column)
