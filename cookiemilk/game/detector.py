"""
detector.py - Win and tie detection for Cookies & Milk

The detector classifies a whole board rather than the last move: rows are
checked first, then columns, then the two interior diagonals, so a board with
several complete lines always reports the first one in that order.
"""

from typing import Iterator, List, Optional, Tuple

import numpy as np

from cookiemilk.debug import debug
from cookiemilk.errors import BoardInvariantError
from cookiemilk.game.board import Board
from cookiemilk.utils import CONNECT_N, INTERIOR_COLS, INTERIOR_ROWS, GameResult, Player, Tile

Line = List[Tuple[int, int]]


def _lines() -> Iterator[Tuple[str, Line]]:
    """Yield every candidate line of the interior, in precedence order."""
    for row in INTERIOR_ROWS:
        yield "row", [(row, col) for col in INTERIOR_COLS]

    for col in INTERIOR_COLS:
        yield "column", [(row, col) for row in INTERIOR_ROWS]

    first_col, last_col = INTERIOR_COLS[0], INTERIOR_COLS[-1]
    yield "diagonal", [(i, first_col + i) for i in range(CONNECT_N)]
    yield "diagonal", [(i, last_col - i) for i in range(CONNECT_N)]


def line_owner(board: Board, line: Line) -> Optional[Player]:
    """
    Get the player holding every cell of ``line``.

    Args:
        board: The board to inspect
        line: Interior cells to compare

    Returns:
        The owning player, or None if the line is mixed or empty

    Raises:
        BoardInvariantError: if the line is uniformly made of a non-player tile
    """
    values = np.array([board.grid[row, col] for row, col in line])
    first = int(values[0])
    if first == Tile.EMPTY.value or not np.all(values == first):
        return None

    try:
        tile = Tile(first)
    except ValueError:
        raise BoardInvariantError(f"Line {line} holds unknown tile value {first}") from None
    if tile.player is None:
        raise BoardInvariantError(f"Line {line} is uniformly {tile.name}")
    return tile.player


def winning_line(board: Board) -> Line:
    """
    Get the first complete line on the board.

    Returns:
        List of (row, col) positions, or an empty list if nobody has won
    """
    for _, line in _lines():
        if line_owner(board, line) is not None:
            return line
    return []


def evaluate(board: Board) -> GameResult:
    """
    Classify a board.

    Args:
        board: The board to classify

    Returns:
        The winner's result for the first complete line, TIE for a full
        board without one, IN_PROGRESS otherwise
    """
    for kind, line in _lines():
        owner = line_owner(board, line)
        if owner is not None:
            debug.info(f"{owner.name} completes a {kind} at {line[0]}-{line[-1]}", "detector")
            return GameResult.for_winner(owner)

    if board.is_full():
        debug.info("Board is full with no winner", "detector")
        return GameResult.TIE

    return GameResult.IN_PROGRESS
