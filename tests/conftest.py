"""Shared fixtures for the Cookies & Milk test-suite."""

import pytest

from cookiemilk.debug import debug, DebugLevel
from cookiemilk.game.board import Board
from cookiemilk.game.rules import CookieMilkGame
from cookiemilk.game.session import GameSession


@pytest.fixture(autouse=True)
def _quiet_debug():
    debug.configure(level=DebugLevel.WARNING, components=[], log_file="")
    yield
    debug.configure(level=DebugLevel.WARNING, components=[], log_file="")


@pytest.fixture
def board() -> Board:
    return Board()


@pytest.fixture
def game() -> CookieMilkGame:
    return CookieMilkGame()


@pytest.fixture
def session() -> GameSession:
    return GameSession()
