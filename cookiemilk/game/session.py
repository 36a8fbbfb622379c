"""
session.py - Shared, lockable access to the live game and the random board

GameSession is the object a transport layer holds on to. The live game and
the random board each sit behind their own asyncio.Lock, so placing a token
never waits on a randomization and vice versa. No operation holds both locks
at the same time.
"""

import asyncio
from dataclasses import dataclass
from typing import Callable, Union

import numpy as np

from cookiemilk.debug import debug
from cookiemilk.game.randomizer import RandomBoard
from cookiemilk.game.rules import CookieMilkGame, MoveOutcome
from cookiemilk.utils import DEFAULT_SEED, Player


@dataclass(frozen=True)
class SessionReply:
    """A move outcome together with the board as it stands afterwards."""
    outcome: MoveOutcome
    board: str

    @property
    def ok(self) -> bool:
        return self.outcome.placed


class GameSession:
    """
    Serializes callers over one live game and one random board.

    Args:
        seed: Seed for the random board, reused on every reset
        rng_factory: Builds the random board's generator from the seed, on
            construction and again on every reset
    """

    def __init__(self, seed: int = DEFAULT_SEED,
                 rng_factory: Callable[[int], np.random.Generator] = np.random.default_rng):
        self.seed = seed
        self.rng_factory = rng_factory
        self._game = CookieMilkGame()
        self._random = RandomBoard(seed=seed, rng_factory=rng_factory)
        self._game_lock = asyncio.Lock()
        self._random_lock = asyncio.Lock()

    async def reset(self) -> str:
        """
        Start a new game and a freshly seeded random board.

        Returns:
            The rendering of the new, empty game
        """
        async with self._game_lock:
            self._game = CookieMilkGame()
            rendering = self._game.render()

        async with self._random_lock:
            self._random = RandomBoard(seed=self.seed, rng_factory=self.rng_factory)

        debug.info("Session reset", "session")
        return rendering

    async def inspect(self) -> str:
        """Render the live game."""
        async with self._game_lock:
            return self._game.render()

    async def place(self, player: Union[Player, str], column: int) -> SessionReply:
        """
        Place a token and classify the board in one critical section.

        Args:
            player: The player, or its identifier
            column: Interior column index (1-4)

        Returns:
            The outcome and the resulting rendering; refused moves carry
            the unchanged board

        Raises:
            InvalidPlayerError: for an unknown player
            InvalidColumnError: for a column outside the interior
        """
        async with self._game_lock:
            outcome = self._game.place(player, column)
            rendering = self._game.render()

        if outcome.placed:
            debug.debug(f"{outcome.player.name} placed at ({outcome.row}, {outcome.column})", "session")
        else:
            debug.debug(f"Move refused: {outcome.status.name}", "session")
        return SessionReply(outcome=outcome, board=rendering)

    async def randomize(self) -> str:
        """Advance the random board and render it."""
        async with self._random_lock:
            return self._random.randomize().render()
