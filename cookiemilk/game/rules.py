"""
rules.py - Game state management and Gymnasium environment for Cookies & Milk

This module provides:
1. The game state: one board plus its result, with move validation and
   terminal-state handling
2. A gymnasium-compatible environment for reinforcement learning
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, List, Optional, Tuple, Union

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from cookiemilk.debug import debug
from cookiemilk.game.board import Board
from cookiemilk.game.detector import evaluate, winning_line
from cookiemilk.utils import (COLS, INTERIOR_COLS, ROWS, GameResult, Player, Tile,
                              validate_column)


class MoveStatus(Enum):
    """Outcome of a placement request."""
    PLACED = auto()
    COLUMN_FULL = auto()
    GAME_OVER = auto()

    @property
    def unavailable(self) -> bool:
        return self != MoveStatus.PLACED


@dataclass(frozen=True)
class MoveOutcome:
    status: MoveStatus
    result: GameResult
    row: Optional[int] = None
    column: Optional[int] = None
    player: Optional[Player] = None

    @property
    def placed(self) -> bool:
        return self.status == MoveStatus.PLACED

    @property
    def unavailable(self) -> bool:
        return self.status.unavailable


class CookieMilkGame:
    """
    The live game: one board and its result.

    Either player may move at any time; turn order is left to the caller.
    Once the result is terminal every placement is refused until ``reset``.
    """

    def __init__(self):
        """Initialize a new game."""
        debug.debug("Initializing CookieMilkGame", "game")
        self.board = Board()
        self.result = GameResult.IN_PROGRESS
        self.moves_made: List[Tuple[Player, int, int]] = []

    def reset(self) -> None:
        """Reset the game to initial state."""
        debug.debug("Resetting game", "game")
        self.board.reset()
        self.result = GameResult.IN_PROGRESS
        self.moves_made = []

    def place(self, player: Union[Player, str], column: int) -> MoveOutcome:
        """
        Drop a token and re-evaluate the board.

        Args:
            player: The player, or its identifier
            column: Interior column index (1-4)

        Returns:
            A MoveOutcome; refused moves leave the board untouched

        Raises:
            InvalidPlayerError: for an unknown player
            InvalidColumnError: for a column outside the interior
        """
        player = Player.parse(player)
        column = validate_column(column)

        if self.result.is_game_over():
            debug.debug(f"Refusing move: game is over (result: {self.result.name})", "game")
            return MoveOutcome(MoveStatus.GAME_OVER, self.result, column=column, player=player)

        row = self.board.place(player, column)
        if row is None:
            return MoveOutcome(MoveStatus.COLUMN_FULL, self.result, column=column, player=player)

        self.moves_made.append((player, row, column))
        with debug.timed("win_check", "game"):
            self.result = evaluate(self.board)

        return MoveOutcome(MoveStatus.PLACED, self.result, row=row, column=column, player=player)

    def is_game_over(self) -> bool:
        return self.result.is_game_over()

    @property
    def winner(self) -> Optional[Player]:
        return self.result.winner

    def get_valid_moves(self) -> List[int]:
        """
        Get a list of columns that accept a token.

        Returns:
            List of valid column indices, empty once the game is over
        """
        if self.result.is_game_over():
            return []
        return self.board.valid_columns()

    def render(self) -> str:
        """
        Render the game as a string.

        Returns:
            The board, followed by the result line once the game is over
        """
        rendering = self.board.render()
        if self.result.is_game_over():
            rendering += self.result.summary() + "\n"
        return rendering

    def __str__(self) -> str:
        return self.render()


class CookieMilkEnv(gym.Env):
    """
    Cookies & Milk environment following the Gymnasium interface.

    Players alternate, COOKIE first. Action ``a`` drops into column ``a + 1``.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None):
        """
        Initialize the environment.

        Args:
            render_mode: Mode for rendering the environment
        """
        debug.debug("Initializing CookieMilkEnv", "env")

        self.action_space = spaces.Discrete(len(INTERIOR_COLS))

        # Observation: the whole 5x6 grid of tile values, walls included
        self.observation_space = spaces.Box(
            low=0, high=max(t.value for t in Tile), shape=(ROWS, COLS), dtype=np.int8
        )

        self.game = CookieMilkGame()
        self.current_player = Player.COOKIE
        self.last_move: Optional[Tuple[int, int]] = None
        self.render_mode = render_mode

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Reset the environment to initial state.

        Args:
            seed: Random seed for reproducibility
            options: Additional options for reset

        Returns:
            Initial observation and info dictionary
        """
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)

        self.game.reset()
        self.current_player = Player.COOKIE
        self.last_move = None

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Take a step in the environment by making a move.

        Args:
            action: Interior column offset (0-3)

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        debug.debug(f"Environment step with action {action}", "env")

        if not self.action_space.contains(action):
            debug.warning(f"Invalid action: {action}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        mover = self.current_player
        outcome = self.game.place(mover, int(action) + INTERIOR_COLS.start)

        if outcome.unavailable:
            debug.warning(f"Unavailable action {action}: {outcome.status.name}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        self.last_move = (outcome.row, outcome.column)
        reward = self.reward_step
        terminated = False

        if outcome.result.winner is not None:
            debug.info(f"Game over: {outcome.result.winner.name} wins", "env")
            reward = self.reward_win if outcome.result.winner == mover else self.reward_lose
            terminated = True
        elif outcome.result == GameResult.TIE:
            debug.info("Game over: tie", "env")
            reward = self.reward_draw
            terminated = True
        else:
            self.current_player = mover.other()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        """
        Render the current state of the environment.

        Returns:
            The rendered board in ``ascii`` mode, None otherwise
        """
        if self.render_mode == "ascii":
            return self.game.render()
        elif self.render_mode == "human":
            print(self.game.render())
        return None

    def valid_actions(self) -> List[int]:
        return [col - INTERIOR_COLS.start for col in self.game.get_valid_moves()]

    def _get_observation(self) -> np.ndarray:
        return self.game.board.get_state()

    def _get_info(self) -> Dict:
        """
        Get additional information about the current state.

        Returns:
            Dictionary with info about the current state
        """
        valid_actions = self.valid_actions()
        return {
            'valid_actions': valid_actions,
            'num_valid_actions': len(valid_actions),
            'current_player': self.current_player.identifier,
            'game_result': self.game.result.name,
            'moves_made': len(self.game.moves_made),
            'winning_line': winning_line(self.game.board),
            'last_move': self.last_move
        }

    def close(self):
        """Clean up resources."""
        pass
