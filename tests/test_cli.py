import io
import sys

import pytest

from ultimengine.board import State
from ultimengine.cli import SAVE_FILE, _load_game, _save_game, main, redraw
from ultimengine.game import Game


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ("BENCHMARK", "BENCHMARK_PERF", "BENCH_PERF", "LOAD_GAME"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _feed(monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))


def test_redraw_undecided(capsys):
    game = Game()
    assert redraw(game) is None
    assert capsys.readouterr().out == "\x1b[2J\x1b[1;1H" + game.render() + "\n"


@pytest.mark.parametrize(
    "state, message",
    [
        (State.WON, "YOU HAVE LOST!!!!!"),
        (State.LOST, "YOU HAVE WON!!!!!"),
        (State.TIED, "tie game :("),
    ],
)
def test_redraw_finished(capsys, state, message):
    game = Game(state=state)
    with pytest.raises(SystemExit) as info:
        redraw(game)
    assert info.value.code == 1
    assert capsys.readouterr().out.endswith(message + "\n")


def test_main_bad_board_letter(clean_env, monkeypatch, capsys):
    _feed(monkeypatch, "zz\n\n")
    assert main([]) == 0
    assert "game must be within a to i (press enter to continue)" in capsys.readouterr().out


def test_main_shorthand_needs_active_board(clean_env, monkeypatch, capsys):
    _feed(monkeypatch, "5\n\n")
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Can only use shorthand notation when a specific board is active" in out


def test_main_prompt_and_engscore(clean_env, monkeypatch, capsys):
    _feed(monkeypatch, "engscore\n\n")
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Enter your move (ex. a5, active board:  ): " in out
    assert "engines score of its last move: 0" in out


def test_save_and_load_round_trip(clean_env):
    game = Game.random(10)
    path = clean_env / "state.json"
    _save_game(game, path)
    assert _load_game(path) == game


def test_main_save_writes_file(clean_env, monkeypatch):
    _feed(monkeypatch, "save\n")
    assert main([]) == 0
    assert _load_game(clean_env / SAVE_FILE) == Game()


def test_main_undosave_writes_previous(clean_env, monkeypatch):
    _feed(monkeypatch, "undosave\n")
    assert main([]) == 0
    assert _load_game(clean_env / SAVE_FILE) == Game()


def test_main_loads_finished_game(clean_env, monkeypatch, capsys):
    game = Game.sample()
    game.state = State.LOST
    _save_game(game, clean_env / SAVE_FILE)
    monkeypatch.setenv("LOAD_GAME", "1")
    _feed(monkeypatch, "")
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 1
    assert "YOU HAVE WON!!!!!" in capsys.readouterr().out


def test_main_load_missing_file(clean_env, monkeypatch):
    monkeypatch.setenv("LOAD_GAME", "1")
    _feed(monkeypatch, "")
    with pytest.raises(FileNotFoundError):
        main([])