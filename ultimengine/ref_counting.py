"""A fixed earlier scoring function, kept as an opponent for comparisons."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .bitboard import BitBoard
from .board import Slot, State
from .generated import POSSIBLE_TO_WIN
from .moves import ANY_BOARD

if TYPE_CHECKING:
    from .game import Game


def ref_score_game(game: Game) -> int:
    """Score a game from X's point of view with the reference heuristic."""
    total = score(game.shrink(), Slot.O) * 100
    last = game.last_move

    if last is not None:
        total += score(game.boards[last.game], Slot.X)
        if last.index == game.active:
            total += score(game.boards[game.active], Slot.O)

    if game.active != ANY_BOARD and (last is None or last.game != game.active):
        total += score(game.boards[game.active], Slot.O)

    for board in game.boards:
        state = board.state()
        if state is State.WON:
            total += 100
        elif state is State.LOST:
            total -= 100

    if game.active == ANY_BOARD:
        total -= 3

    return total


def score(board: BitBoard, turn: Slot) -> int:
    """Score a single 3x3 board from X's point of view."""
    value = board.corners(Slot.X)

    if turn is Slot.X:
        value += 5 * board.one_aways_x()
    if turn is Slot.O:
        value -= 5 * board.one_aways_x()

    value -= 5 * board.one_aways_o()

    if board.won_by_x():
        value = 10_000
    if board.won_by_o():
        value = -10_000

    return value


def possible_to_win(board: BitBoard) -> bool:
    """Return whether either side can still complete a line."""
    return any(mask & board.bits == mask for mask in POSSIBLE_TO_WIN)