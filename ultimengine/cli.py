"""Interactive terminal game against the engine."""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path

from .benchmark import benchmark
from .bitboard import BitBoard
from .board import Slot, State
from .counting import alpha_beta
from .game import Game
from .moves import ANY_BOARD, IllegalMoveError, Move, parse_move

SAVE_FILE = "gamestate"

_CLEAR = "\x1b[2J\x1b[1;1H"

_OUTCOMES = {
    State.WON: "YOU HAVE LOST!!!!!",
    State.LOST: "YOU HAVE WON!!!!!",
    State.TIED: "tie game :(",
}


def redraw(game: Game) -> None:
    """Redraw the board; announce the result and exit if the game is over."""
    print(_CLEAR, end="")
    print(game.render())

    message = _OUTCOMES.get(game.state)
    if message is None:
        return
    print(message)
    raise SystemExit(1)


def _save_game(game: Game, path: Path) -> None:
    last = game.last_move
    data = {
        "boards": [board.bits for board in game.boards],
        "active": game.active,
        "state": game.state.value,
        "last_move": None if last is None else [last.game, last.index],
    }
    path.write_text(json.dumps(data), encoding="utf-8")


def _load_game(path: Path) -> Game:
    data = json.loads(path.read_text(encoding="utf-8"))
    last = data["last_move"]
    return Game(
        boards=[BitBoard(bits) for bits in data["boards"]],
        active=data["active"],
        state=State(data["state"]),
        last_move=None if last is None else Move(*last),
    )


def _prompt(game: Game) -> None:
    board = " " if game.active == ANY_BOARD else chr(ord("a") + game.active)
    print(f"Enter your move (ex. a5, active board: {board}): ", end="", flush=True)


def main(argv: list[str] | None = None) -> int:
    """Run the game; the player is O and the engine answers as X."""
    parser = argparse.ArgumentParser(
        prog="ultimengine",
        description="Play ultimate tic-tac-toe against the engine. "
        "Commands: undo, engscore, save, undosave, skip.",
    )
    parser.parse_args(argv)

    if os.environ.get("BENCHMARK") is not None or os.environ.get("BENCHMARK_PERF") is not None:
        benchmark()
        return 0

    game = _load_game(Path(SAVE_FILE)) if "LOAD_GAME" in os.environ else Game()
    last_score = 0
    last_game = Game()

    while True:
        redraw(game)
        _prompt(game)

        line = sys.stdin.readline()
        if not line:
            print()
            return 0
        command = line.strip()

        if command == "undo":
            game, last_game = last_game, game
        elif command == "engscore":
            print(f"engines score of its last move: {last_score}", end="", flush=True)
            sys.stdin.readline()
            continue
        elif command in ("save", "undosave"):
            _save_game(game if command == "save" else last_game, Path(SAVE_FILE))
            return 0
        elif command != "skip":
            try:
                game.make_move(parse_move(command, game.active), Slot.O)
            except IllegalMoveError as error:
                print(f"\x1b[0;31m{error} (press enter to continue)\x1b[0m")
                sys.stdin.readline()
                continue

        redraw(game)

        last_score, move = alpha_beta(game)
        last_game = game.copy()
        game.make_move(move, Slot.X)