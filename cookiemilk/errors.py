"""
errors.py - Exceptions raised by the Cookies & Milk engine

Refused moves (full column, finished game) are reported as move outcomes,
not exceptions. Exceptions are reserved for caller errors and for broken
board invariants.
"""


class CookieMilkError(Exception):
    """Base class for all engine errors."""

    pass


class InvalidInputError(CookieMilkError, ValueError):
    """Raised when a request is malformed; no state has been touched."""

    pass


class InvalidPlayerError(InvalidInputError):
    """Raised for anything that is not one of the two players."""

    def __init__(self, player):
        super().__init__(f"Unknown player: {player!r}")
        self.player = player


class InvalidColumnError(InvalidInputError):
    """Raised for a column outside the playable interior."""

    def __init__(self, column):
        super().__init__(f"Column must be an interior column, got {column!r}")
        self.column = column


class BoardInvariantError(CookieMilkError, RuntimeError):
    """Raised when the board holds a state no sequence of moves can produce."""

    pass
