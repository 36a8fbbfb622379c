"""Tests for the command-line interface."""

import argparse

import pytest

from cookiemilk.debug import debug, DebugLevel
from cookiemilk.errors import InvalidColumnError, InvalidInputError, InvalidPlayerError
from cookiemilk.game.randomizer import RandomBoard
from cookiemilk.interfaces.cli import build_parser, main, parse_move, positive_int
from cookiemilk.utils import Player, Tile


def _feed(monkeypatch, lines):
    answers = iter(lines)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))


class TestParseMove:
    def test_valid_move(self):
        assert parse_move("cookie 3") == (Player.COOKIE, 3)
        assert parse_move("MILK   1") == (Player.MILK, 1)

    @pytest.mark.parametrize("text", ["cookie", "cookie 1 2", ""])
    def test_wrong_shape(self, text):
        with pytest.raises(InvalidInputError):
            parse_move(text)

    def test_bad_column_text(self):
        with pytest.raises(InvalidInputError, match="Column must be a number"):
            parse_move("milk left")

    def test_bad_player(self):
        with pytest.raises(InvalidPlayerError):
            parse_move("tea 1")


class TestPositiveCounts:
    def test_accepts_positive(self):
        assert positive_int("3") == 3

    @pytest.mark.parametrize("text", ["0", "-2", "many"])
    def test_rejects_non_positive(self, text):
        with pytest.raises(argparse.ArgumentTypeError):
            positive_int(text)

    @pytest.mark.parametrize("argv", [
        ["benchmark", "--iterations", "0"],
        ["benchmark", "--callers", "0"],
        ["random", "--count", "0"],
    ])
    def test_zero_counts_are_usage_errors(self, argv, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 2
        assert "must be at least 1" in capsys.readouterr().err


class TestCommands:
    def test_no_command(self, capsys):
        assert main([]) == 1
        assert "Please specify a command" in capsys.readouterr().out

    def test_random_boards_follow_seed(self, capsys):
        assert main(["--seed", "7", "random", "--count", "2"]) == 0
        out = capsys.readouterr().out

        expected = RandomBoard(seed=7)
        assert out == expected.randomize().render() + "\n" + expected.randomize().render()

    def test_play_session(self, monkeypatch, capsys):
        _feed(monkeypatch, ["cookie 1", "tea 1", "milk 9", "x", "r", "q"])
        assert main(["play"]) == 0
        out = capsys.readouterr().out
        assert "Starting a new Cookies & Milk game!" in out
        assert Tile.COOKIE.glyph in out
        assert out.count("Invalid move:") == 2
        assert "Game reset." in out
        assert "Quitting game." in out

    def test_play_reports_unavailable_moves(self, monkeypatch, capsys):
        moves = ["cookie 1", "milk 2"] * 3 + ["cookie 1", "milk 3", "q"]
        _feed(monkeypatch, moves)
        main(["play"])
        out = capsys.readouterr().out
        assert f"{Tile.COOKIE.glyph} wins!" in out
        assert "Unavailable: game over" in out

    def test_play_stops_on_end_of_input(self, monkeypatch, capsys):
        def _eof(prompt=""):
            raise EOFError

        monkeypatch.setattr("builtins.input", _eof)
        assert main(["play"]) == 0
        assert "Quitting game." in capsys.readouterr().out

    def test_benchmark(self, capsys):
        assert main(["benchmark", "--iterations", "200", "--callers", "3"]) == 0
        out = capsys.readouterr().out
        assert "Game placements:" in out
        assert "Session placements (3 callers):" in out
        assert "Random boards:" in out

    def test_debug_flags(self, tmp_path):
        log_file = tmp_path / "cookiemilk.log"
        args = build_parser().parse_args(["--debug", "--log-file", str(log_file), "random"])
        assert args.debug and args.command == "random"
        assert main(["--debug", "--log-file", str(log_file), "random"]) == 0
        assert debug.level == DebugLevel.DEBUG
        assert "[random]" in log_file.read_text()

    def test_invalid_column_error_message(self):
        err = InvalidColumnError(7)
        assert err.column == 7
        assert isinstance(err, ValueError)

    def test_debug_level_by_name(self, tmp_path):
        log_file = tmp_path / "cookiemilk.log"
        assert main(["--debug-level", "info", "--log-file", str(log_file), "random"]) == 0
        assert debug.level == DebugLevel.INFO
        assert "Randomized board" not in log_file.read_text()
