"""
cookiemilk.game - Core game mechanics for Cookies & Milk

This package contains the board representation, win detection, the random
board, game state management and the concurrent session.
"""

from cookiemilk.game.board import Board
from cookiemilk.game.detector import evaluate, winning_line
from cookiemilk.game.randomizer import RandomBoard
from cookiemilk.game.rules import CookieMilkEnv, CookieMilkGame, MoveOutcome, MoveStatus
from cookiemilk.game.session import GameSession, SessionReply

__all__ = ['Board', 'evaluate', 'winning_line', 'RandomBoard', 'CookieMilkEnv',
           'CookieMilkGame', 'MoveOutcome', 'MoveStatus', 'GameSession', 'SessionReply']
