"""
Tests for the command-line entry point.
"""

import logging

import pytest

import main


def feed_input(monkeypatch, answers):
    answers = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def test_parser_defaults():
    args = main.build_parser().parse_args([])
    assert args.max_attempts == 20
    assert not args.verbose


def test_full_game_from_the_terminal(monkeypatch, capsys):
    feed_input(monkeypatch, ["Alice", "Bob", "1", "4", "2", "5", "3", "n"])

    assert main.main([]) == 0

    out = capsys.readouterr().out
    assert "* * * GAME STARTED * * *" in out
    assert " X | X | X " in out
    assert "Alice won!" in out
    assert "* * * GAME EXIT * * *" in out
    assert out.rstrip().endswith("Goodbye!")


def test_too_many_bad_answers_exits_with_error(monkeypatch, capsys):
    feed_input(monkeypatch, ["Sam", "Sam", "Sam", "Sam"])

    assert main.main(["--max-attempts", "2"]) == 1

    out = capsys.readouterr().out
    assert "Too many invalid answers (duplicate_name)" in out
    assert "Goodbye!" in out


def test_end_of_input_exits_cleanly(monkeypatch, capsys):
    feed_input(monkeypatch, ["Alice"])

    assert main.main([]) == 0
    assert "Goodbye!" in capsys.readouterr().out


@pytest.mark.parametrize("value", ["0", "-1"])
def test_max_attempts_must_be_positive(value, capsys):
    assert main.main(["--max-attempts", value]) == 2
    assert "--max-attempts" in capsys.readouterr().err


@pytest.mark.parametrize("argv, level", [
    ([], logging.WARNING),
    (["--verbose"], logging.DEBUG),
])
def test_verbose_sets_log_level(monkeypatch, argv, level):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    feed_input(monkeypatch, [])

    assert main.main(argv) == 0

    assert len(calls) == 1
    assert calls[0]["level"] == level
    assert calls[0]["format"] == main.GameConfig.LOG_FORMAT
