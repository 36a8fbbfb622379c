"""
randomizer.py - Seeded random boards for display

A RandomBoard owns its own board and generator and never touches the live
game. Successive calls advance one deterministic sequence; ``reseed`` starts
the sequence over.
"""

from typing import Callable, Optional

import numpy as np

from cookiemilk.debug import debug
from cookiemilk.game.board import Board
from cookiemilk.utils import DEFAULT_SEED, Player, interior_positions


class RandomBoard:
    """
    A fully occupied board filled from a seeded generator.

    Args:
        seed: Seed for the generator created here and on ``reseed``
        rng_factory: Builds the generator from a seed, here and on ``reseed``
    """

    def __init__(self, seed: int = DEFAULT_SEED,
                 rng_factory: Callable[[int], np.random.Generator] = np.random.default_rng):
        self.seed = seed
        self.rng_factory = rng_factory
        self.rng = rng_factory(seed)
        self.board = Board()
        self.generation = 0

    def reseed(self, seed: Optional[int] = None) -> None:
        """Replace the generator with a fresh one and clear the board."""
        if seed is not None:
            self.seed = seed
        debug.debug(f"Reseeding random board with {self.seed}", "random")
        self.rng = self.rng_factory(self.seed)
        self.board = Board()
        self.generation = 0

    def randomize(self) -> Board:
        """
        Fill every interior cell with one draw from the generator.

        Cells are drawn in row-major order; a true draw is a cookie, a false
        draw is milk. No cell is left empty.

        Returns:
            The randomized board
        """
        self.board.fill(
            (position, Player.COOKIE if bool(self.rng.integers(0, 2)) else Player.MILK)
            for position in interior_positions()
        )
        self.generation += 1
        debug.debug(f"Randomized board #{self.generation}", "random")
        return self.board

    def render(self) -> str:
        return self.board.render()
