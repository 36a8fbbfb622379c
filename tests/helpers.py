"""Board builders shared by the test modules."""

from typing import List, Sequence

from cookiemilk.game.board import Board
from cookiemilk.utils import INTERIOR_COLS, INTERIOR_ROWS, Player

C, M = Player.COOKIE, Player.MILK

# Full interior with no complete row, column or diagonal
TIE_PATTERN = [
    [C, C, M, M],
    [M, M, C, C],
    [C, C, M, M],
    [M, M, C, C],
]


def board_from_pattern(pattern: Sequence[Sequence[Player]]) -> Board:
    """Build a board whose interior rows are ``pattern`` (None leaves a cell empty)."""
    b = Board()
    b.fill(
        ((row, col), pattern[i][j])
        for i, row in enumerate(INTERIOR_ROWS)
        for j, col in enumerate(INTERIOR_COLS)
        if pattern[i][j] is not None
    )
    return b


def render_lines(rendering: str) -> List[str]:
    return rendering.splitlines()
