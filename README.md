# ultimengine

An engine for ultimate tic-tac-toe, together with a small terminal game
where you play against it.

Ultimate tic-tac-toe is played on nine small boards arranged in a 3×3
grid. The square you pick inside a small board decides which board your
opponent must play in next. Win a small board to claim its place in the
big grid; win three in a row on the big grid to win the game.

## Installing

```
pip install .
```

No third-party libraries are needed. To run the tests:

```
pip install .[test]
pytest
```

## Playing

```
ultimengine
```

You play `O` and move first; the engine plays `X` and answers each of
your moves. The boards are named `a` to `i`, left to right and top to
bottom, and the squares inside each board are numbered `1` to `9` in the
same order. The board is drawn with ANSI colours: won, lost and tied
boards each get their own colour, the boards you may play in are
highlighted, and the last move played is marked.

At the prompt, enter:

- a board letter and a square number, such as `a5`, to play there;
- only a square number, such as `5`, when a specific board is active;
- `skip` to let the engine move without playing yourself;
- `undo` to go back to the position just before the engine's last reply
  (the engine then moves again from there);
- `engscore` to see the score the engine gave its last move (press Enter
  to go on);
- `save` to write the current game to a file named `gamestate` in the
  current directory and quit;
- `undosave` to write the position from before the engine's last reply to
  `gamestate` and quit.

An illegal or unreadable move is reported in red; press Enter to try
again. When the game is won, lost or tied the result is printed and the
program exits with status 1. End of input quits with status 0.

Environment variables change how the command starts:

- `LOAD_GAME` (any value): continue the game saved in `gamestate`
  (a JSON file) instead of starting a new one;
- `BENCHMARK` or `BENCHMARK_PERF` (any value): run the benchmark
  described below instead of a game.

## Using the engine from Python

```python
from ultimengine.board import Slot
from ultimengine.counting import alpha_beta
from ultimengine.game import Game
from ultimengine.moves import parse_move

game = Game()
game.make_move(parse_move("e5", game.active), Slot.O)

score, move = alpha_beta(game)
game.make_move(move, Slot.X)
print(game.render())
```

The main pieces:

- `ultimengine.game.Game` holds the nine boards, the active board
  (`9` when any board may be played), the overall `State` and the last
  move. `make_move` plays a move in place, `sim_move` returns a new game
  with the move played, `copy`, `flip` (X and O swapped), `shrink` (the
  3×3 board of small-board outcomes) and `render` are there too.
  `Game.random(times)` plays a fixed, seeded series of random moves, and
  `Game.sample()` gives a position whose first three boards are tied, won
  and lost.
- `ultimengine.moves` has `Move`, `parse_move`, `check_move`, `is_legal`
  and `legal_moves`. An illegal or unparsable move raises
  `IllegalMoveError`, a subclass of `ValueError`.
- `ultimengine.counting` has `alpha_beta(game)`, which searches for X's
  best move and returns `(score, move)` (the move is `None` when there is
  nothing to play), and the heuristics `score_game`, `score` and
  `possible_to_win`.
- `ultimengine.bitboard.BitBoard` packs one 3×3 board and its state into
  an integer; `ultimengine.board` defines `Slot` and `State`.

Scores are always from X's point of view.

## Measuring strength

`ultimengine.benchmark.benchmark(games=360, threads=None)` plays the
engine as `X` against an older reference evaluator from
`ultimengine.ref_counting` (as `O`, breaking ties at random) on a pool of
threads. It prints progress while it runs and a final
`won: …, lost: …, tied: …` line, and returns the counts as a dictionary
keyed by `State`. When `threads` is not given it uses 8 threads, or 1 if
the `BENCH_PERF` environment variable is set. `play_game(rng)` plays a
single such game and returns its outcome.

## What it does not do

The search depth is fixed and there is no option to set it; the engine
always plays `X` in the terminal game. There is no play between two
people and no network play.