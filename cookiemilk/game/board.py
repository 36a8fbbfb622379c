"""
board.py - Board representation and gravity placement for Cookies & Milk

This module implements the Board class: a 5x6 grid whose wall border frames a
4x4 playable interior. Tokens dropped into an interior column fall to the
lowest empty cell of that column.
"""

from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from cookiemilk.debug import debug
from cookiemilk.utils import (ROWS, COLS, INTERIOR_ROWS, INTERIOR_COLS, Player, Tile,
                              interior_positions, is_interior, validate_column)


def _fresh_grid() -> np.ndarray:
    grid = np.full((ROWS, COLS), Tile.WALL.value, dtype=np.int8)
    grid[INTERIOR_ROWS.start:INTERIOR_ROWS.stop,
         INTERIOR_COLS.start:INTERIOR_COLS.stop] = Tile.EMPTY.value
    return grid


class Board:
    """
    Represents a Cookies & Milk board.

    Walls are placed once, in ``reset``; every later write goes through
    ``place`` or ``fill`` which only ever touch interior cells.
    """

    def __init__(self):
        """Initialize a board with an empty interior."""
        debug.trace("Initializing new Board", "board")
        self.reset()

    def reset(self):
        """Reset the board to walls around an empty interior."""
        self.grid = _fresh_grid()

    def copy(self) -> 'Board':
        """
        Create a deep copy of the current board.

        Returns:
            A new Board instance with the same cells
        """
        new_board = Board()
        new_board.grid = self.grid.copy()
        return new_board

    def tile_at(self, row: int, col: int) -> Tile:
        return Tile(int(self.grid[row, col]))

    def interior(self) -> np.ndarray:
        """Read-only view of the 4x4 playable region."""
        view = self.grid[INTERIOR_ROWS.start:INTERIOR_ROWS.stop,
                         INTERIOR_COLS.start:INTERIOR_COLS.stop]
        view.flags.writeable = False
        return view

    def empty_cells(self) -> List[Tuple[int, int]]:
        return [(row, col) for row, col in interior_positions()
                if self.grid[row, col] == Tile.EMPTY.value]

    def is_full(self) -> bool:
        """Check whether no interior cell is empty."""
        return not np.any(self.interior() == Tile.EMPTY.value)

    def drop_row(self, column: int) -> Optional[int]:
        """
        Find the row a token dropped into ``column`` would land on.

        Args:
            column: Interior column index (1-4)

        Returns:
            The bottommost empty interior row, or None if the column is full
        """
        column = validate_column(column)
        for row in reversed(INTERIOR_ROWS):
            if self.grid[row, column] == Tile.EMPTY.value:
                return row
        return None

    def valid_columns(self) -> List[int]:
        """
        Get the interior columns that can still take a token.

        Returns:
            List of column indices
        """
        return [col for col in INTERIOR_COLS if self.grid[INTERIOR_ROWS.start, col] == Tile.EMPTY.value]

    def place(self, player: Player, column: int) -> Optional[int]:
        """
        Drop a token for ``player`` into ``column``.

        Win detection is not run here; callers sequence it after a
        successful placement.

        Args:
            player: The player placing the token
            column: Interior column index (1-4)

        Returns:
            The row the token landed on, or None if the column is full

        Raises:
            InvalidPlayerError: if ``player`` is not a Player
            InvalidColumnError: if ``column`` is outside the interior
        """
        player = Player.parse(player)
        row = self.drop_row(column)
        if row is None:
            debug.debug(f"Column {column} is full", "board")
            return None

        debug.trace(f"Placing {player.name} at ({row}, {column})", "board")
        self.grid[row, column] = player.tile.value
        return row

    def fill(self, positions: Iterable[Tuple[Tuple[int, int], Player]]) -> None:
        """Assign players to interior cells directly, bypassing gravity."""
        for (row, col), player in positions:
            if not is_interior(row, col):
                raise IndexError(f"({row}, {col}) is not an interior cell")
            self.grid[row, col] = player.tile.value

    def iter_glyphs(self) -> Iterator[str]:
        """
        Yield the board's glyphs in row-major order.

        Rows are separated by a newline glyph; nothing follows the last row.
        Each call starts a new pass over the current cells.
        """
        for row in range(ROWS):
            if row:
                yield "\n"
            for col in range(COLS):
                yield self.tile_at(row, col).glyph

    def render(self) -> str:
        """
        Render the board as a string.

        Returns:
            One line of glyphs per row, newline terminated
        """
        return "".join(self.iter_glyphs()) + "\n"

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D numpy array of tile values
        """
        return self.grid.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self.grid, other.grid)

    __hash__ = None

    def __str__(self) -> str:
        """String representation of the board."""
        return self.render()
