"""
cli.py - Command-line interface for the Cookies & Milk engine

This module provides a CLI for playing a game against the shared session,
printing seeded random boards and benchmarking the engine.
"""

import argparse
import asyncio
import sys
from typing import List, Optional, Tuple

import numpy as np

from cookiemilk.debug import debug, DebugLevel
from cookiemilk.errors import InvalidInputError
from cookiemilk.game.randomizer import RandomBoard
from cookiemilk.game.rules import CookieMilkGame
from cookiemilk.game.session import GameSession
from cookiemilk.utils import DEFAULT_SEED, INTERIOR_COLS, Player

QUIT, RESET, RANDOM = "q", "r", "x"


def positive_int(text: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser shared by ``run.py`` and ``main``."""
    parser = argparse.ArgumentParser(
        description='Cookies & Milk',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
    Examples:

    # Play a game, entering moves such as "cookie 2" or "milk 4"
    python run.py play

    # Print three random boards from seed 7
    python run.py random --count 3 --seed 7

    # Benchmark 5000 random placements with debug timings
    python run.py benchmark --iterations 5000 --debug
    """
    )
    parser.add_argument('--debug',
        action='store_true',
        help='Enable debug mode (equivalent to --debug-level debug)')
    parser.add_argument('--debug-level',
        choices=[level.name.lower() for level in DebugLevel],
        default='warning',
        help='Set debug level: none (silent), warning, info, debug, trace (most verbose)')
    parser.add_argument('--log-file',
        type=str,
        default=None,
        help='Also write log records to this file')
    parser.add_argument('--seed',
        type=int,
        default=DEFAULT_SEED,
        help=f'Seed for random boards (default: {DEFAULT_SEED})')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    subparsers.add_parser('play', help='Play a game interactively')

    random_parser = subparsers.add_parser('random', help='Print seeded random boards')
    random_parser.add_argument('--count', type=positive_int, default=1,
                               help='Number of boards to print')

    benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark performance')
    benchmark_parser.add_argument('--iterations', type=positive_int, default=1000,
                                  help='Number of placements to time')
    benchmark_parser.add_argument('--callers', type=positive_int, default=8,
                                  help='Concurrent callers for the session benchmark')

    return parser


def configure_debug(args: argparse.Namespace) -> None:
    """Configure debug level based on args.debug or args.debug_level."""
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    else:
        debug.set_from_string(args.debug_level)
    if args.log_file:
        debug.configure(log_file=args.log_file)


def parse_move(text: str) -> Tuple[Player, int]:
    """
    Parse a move such as ``"cookie 2"``.

    Raises:
        InvalidInputError: if the player or column is not valid
    """
    parts = text.split()
    if len(parts) != 2:
        raise InvalidInputError(f"Expected '<player> <column>', got {text!r}")
    player = Player.parse(parts[0])
    try:
        column = int(parts[1])
    except ValueError:
        raise InvalidInputError(f"Column must be a number, got {parts[1]!r}") from None
    return player, column


class SimpleCLI:
    """Simple command-line interface for the Cookies & Milk engine."""

    def __init__(self, argv: Optional[List[str]] = None):
        """Initialize the CLI."""
        self.argv = argv
        self.args = None

    def parse_args(self) -> None:
        """Parse command-line arguments."""
        self.args = build_parser().parse_args(self.argv)
        configure_debug(self.args)

    def run(self) -> int:
        """Run the CLI based on the parsed arguments."""
        if not self.args:
            self.parse_args()

        if self.args.command == 'play':
            asyncio.run(self.play_game())
        elif self.args.command == 'random':
            self.print_random_boards()
        elif self.args.command == 'benchmark':
            self.benchmark()
        else:
            print("Please specify a command. Use --help for options.")
            return 1
        return 0

    async def play_game(self) -> None:
        """Play a game interactively against a shared session."""
        session = GameSession(seed=self.args.seed)
        print("Starting a new Cookies & Milk game!")
        print(f"Enter '<player> <column>' with player cookie or milk and column "
              f"{INTERIOR_COLS[0]}-{INTERIOR_COLS[-1]}.")
        print(f"Other commands: '{QUIT}' to quit, '{RESET}' to reset, '{RANDOM}' for a random board.")
        print(await session.inspect())

        while True:
            try:
                user_input = input("Your move: ").strip().lower()
            except EOFError:
                user_input = QUIT

            if user_input == QUIT:
                print("Quitting game.")
                return
            elif user_input == RESET:
                print("Game reset.")
                print(await session.reset())
                continue
            elif user_input == RANDOM:
                print(await session.randomize())
                continue

            try:
                player, column = parse_move(user_input)
                reply = await session.place(player, column)
            except InvalidInputError as e:
                print(f"Invalid move: {e}")
                continue

            if reply.outcome.unavailable:
                print(f"Unavailable: {reply.outcome.status.name.lower().replace('_', ' ')}")
            print(reply.board)

    def print_random_boards(self) -> None:
        """Print ``--count`` boards from one seeded sequence."""
        random_board = RandomBoard(seed=self.args.seed)
        for i in range(self.args.count):
            if i:
                print()
            print(random_board.randomize().render(), end="")

    def benchmark(self) -> None:
        """Benchmark placements on a bare game and on a contended session."""
        iterations = self.args.iterations
        rng = np.random.default_rng(self.args.seed)
        columns = rng.integers(INTERIOR_COLS.start, INTERIOR_COLS.stop, size=iterations)
        print(f"Running benchmark with {iterations} iterations...")

        game = CookieMilkGame()
        games_finished = 0
        with debug.timed("moves", "cli") as moves:
            for i, column in enumerate(columns):
                game.place(Player.COOKIE if i % 2 == 0 else Player.MILK, int(column))
                if game.is_game_over():
                    games_finished += 1
                    game.reset()
        print(f"Game placements: {moves.elapsed:.6f} seconds total, "
              f"{moves.elapsed / iterations * 1000:.6f} ms per move, {games_finished} games finished")

        with debug.timed("session", "cli") as session_watch:
            placed = asyncio.run(self._contended_placements(columns, self.args.callers))
        print(f"Session placements ({self.args.callers} callers): {session_watch.elapsed:.6f} seconds total, "
              f"{placed} tokens placed")

        random_board = RandomBoard(seed=self.args.seed)
        with debug.timed("randomize", "cli") as randomizing:
            for _ in range(iterations):
                random_board.randomize()
        print(f"Random boards: {randomizing.elapsed:.6f} seconds total, "
              f"{randomizing.elapsed / iterations * 1000:.6f} ms per board")

    async def _contended_placements(self, columns: np.ndarray, callers: int) -> int:
        session = GameSession(seed=self.args.seed)
        placed = 0

        async def caller(offset: int) -> None:
            nonlocal placed
            player = Player.COOKIE if offset % 2 == 0 else Player.MILK
            for column in columns[offset::callers]:
                reply = await session.place(player, int(column))
                if reply.ok:
                    placed += 1
                elif reply.outcome.result.is_game_over():
                    await session.reset()
                await asyncio.sleep(0)

        await asyncio.gather(*(caller(i) for i in range(callers)))
        return placed


def main(argv: Optional[List[str]] = None) -> int:
    return SimpleCLI(argv).run()


if __name__ == "__main__":
    sys.exit(main())
