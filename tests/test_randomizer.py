"""Tests for seeded random boards."""

from itertools import cycle

import numpy as np

from cookiemilk.game.board import Board
from cookiemilk.game.randomizer import RandomBoard
from cookiemilk.utils import DEFAULT_SEED, Tile, interior_positions


class StubGenerator:
    """Deterministic stand-in for numpy's Generator."""

    def __init__(self, draws):
        self._draws = cycle(draws)
        self.calls = 0

    def integers(self, low, high):
        self.calls += 1
        return next(self._draws)


def test_randomized_board_has_no_empty_cells():
    random_board = RandomBoard()
    for _ in range(5):
        board = random_board.randomize()
        assert board.is_full()
        assert board.empty_cells() == []
        assert Tile.EMPTY.glyph not in random_board.render()


def test_walls_are_untouched():
    board = RandomBoard(seed=3).randomize()
    fresh = Board()
    for row in range(fresh.grid.shape[0]):
        for col in range(fresh.grid.shape[1]):
            if fresh.tile_at(row, col) == Tile.WALL:
                assert board.tile_at(row, col) == Tile.WALL


def test_one_draw_per_interior_cell_in_row_major_order():
    stub = StubGenerator([1, 0])
    board = RandomBoard(rng_factory=lambda seed: stub).randomize()
    assert stub.calls == 16
    expected = [Tile.COOKIE if i % 2 == 0 else Tile.MILK for i in range(16)]
    assert [board.tile_at(r, c) for r, c in interior_positions()] == expected


def test_same_seed_gives_same_sequence():
    first, second = RandomBoard(seed=99), RandomBoard(seed=99)
    for _ in range(3):
        assert first.randomize().render() == second.randomize().render()


def test_sequence_advances_between_calls():
    random_board = RandomBoard()
    renders = {random_board.randomize().render() for _ in range(6)}
    assert len(renders) > 1


def test_reseed_restarts_the_sequence():
    random_board = RandomBoard()
    first = random_board.randomize().render()
    random_board.randomize()
    random_board.reseed()
    assert random_board.generation == 0
    assert random_board.randomize().render() == first


def test_reseed_with_new_seed():
    random_board = RandomBoard()
    random_board.reseed(5)
    assert random_board.seed == 5
    assert random_board.randomize().render() == RandomBoard(seed=5).randomize().render()


def test_default_generator_matches_numpy_seed():
    expected_rng = np.random.default_rng(DEFAULT_SEED)
    board = RandomBoard().randomize()
    expected = [Tile.COOKIE if expected_rng.integers(0, 2) else Tile.MILK for _ in range(16)]
    assert [board.tile_at(r, c) for r, c in interior_positions()] == expected


def test_reseed_keeps_the_generator_factory():
    seeds = []

    def factory(seed):
        seeds.append(seed)
        return StubGenerator([1])

    random_board = RandomBoard(seed=8, rng_factory=factory)
    random_board.reseed()
    board = random_board.randomize()
    assert seeds == [8, 8]
    assert all(board.tile_at(r, c) == Tile.COOKIE for r, c in interior_positions())
