"""Play the engine against the reference heuristic and report the results."""

from __future__ import annotations

import os
import queue
import random
import time
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from functools import reduce

from .board import Slot, State
from .counting import alpha_beta
from .game import Game
from .moves import Move, legal_moves
from .ref_counting import ref_score_game

GAMES = 360
"""Number of games played by a default benchmark run."""

_CLEAR = "\x1b[2J\x1b[1;1H"
_POLL_SECONDS = 0.4


def _default_threads() -> int:
    return 1 if os.environ.get("BENCH_PERF") is not None else 8


def _pick_reference_move(game: Game, rng: random.Random) -> Move:
    """Choose O's move by the reference heuristic, breaking ties at random."""
    flipped = game.flip()
    moves = legal_moves(flipped)
    if not moves:
        raise ValueError("there is no legal move to pick")

    scored = (
        (move, ref_score_game(flipped.sim_move(move, Slot.X))) for move in moves
    )

    def better(acc: tuple[Move, int], cur: tuple[Move, int]) -> tuple[Move, int]:
        if acc[1] < cur[1]:
            return cur
        if acc[1] > cur[1]:
            return acc
        return acc if rng.getrandbits(1) else cur

    return reduce(better, scored)[0]


def play_game(rng: random.Random | None = None) -> State:
    """Play one game, engine as X against the reference heuristic as O."""
    rng = rng if rng is not None else random.Random()
    game = Game()

    while game.state is State.UNDECIDED:
        _, move = alpha_beta(game)
        game.make_move(move, Slot.X)
        if game.state is not State.UNDECIDED:
            break
        game.make_move(_pick_reference_move(game, rng), Slot.O)

    return game.state


@dataclass
class _Tally:
    won: int = 0
    lost: int = 0
    tied: int = 0

    @property
    def total(self) -> int:
        return self.won + self.lost + self.tied

    def record(self, state: State) -> None:
        if state is State.WON:
            self.won += 1
        elif state is State.LOST:
            self.lost += 1
        elif state is State.TIED:
            self.tied += 1
        else:
            raise ValueError("an unfinished game cannot be counted")

    def as_dict(self) -> dict[State, int]:
        return {State.WON: self.won, State.LOST: self.lost, State.TIED: self.tied}

    def progress(self, games: int, elapsed: float) -> str:
        played = self.total
        if not played:
            raise ValueError("no game has finished yet")
        millis = int(elapsed * 1000)
        remaining = (games - played) * (millis // played) // 1000
        return "\n".join(
            [
                f"time spent: {int(elapsed)}s, estimated time remaining: {remaining}s"
                f" (avg. time/game: {elapsed / played:.2f}s)",
                f"{played / games * 100:.3f}% ({played}): finished",
                f"win%: {self.won / played * 100:.3f} ({self.won}),"
                f" loss%: {self.lost / played * 100:.3f} ({self.lost}),"
                f" tie%: {self.tied / played * 100:.3f} ({self.tied})",
            ]
        )

    def summary(self) -> str:
        return f"won: {self.won}, lost: {self.lost}, tied: {self.tied}"


def _shares(games: int, threads: int) -> list[int]:
    base, extra = divmod(games, threads)
    return [base + (1 if idx < extra else 0) for idx in range(threads)]


def _raise_failures(futures: list[Future]) -> None:
    for future in futures:
        if future.done():
            error = future.exception()
            if error is not None:
                raise error


def benchmark(games: int = GAMES, threads: int | None = None) -> dict[State, int]:
    """Play ``games`` games on several threads, printing progress; return the counts."""
    if games < 0:
        raise ValueError("the number of games cannot be negative")
    threads = _default_threads() if threads is None else threads
    if threads < 1:
        raise ValueError("at least one thread is needed")

    outcomes: queue.Queue[State] = queue.Queue()

    def worker(count: int) -> None:
        rng = random.Random()
        for _ in range(count):
            outcomes.put(play_game(rng))

    tally = _Tally()
    start = time.monotonic()
    print("Waiting for first game to finish, this should only take a few seconds.")

    with ThreadPoolExecutor(max_workers=threads) as pool:
        futures = [pool.submit(worker, n) for n in _shares(games, threads) if n]
        while tally.total < games:
            try:
                tally.record(outcomes.get(timeout=_POLL_SECONDS))
            except queue.Empty:
                _raise_failures(futures)
            if tally.total:
                print(_CLEAR + tally.progress(games, time.monotonic() - start))

    print(tally.summary())
    return tally.as_dict()