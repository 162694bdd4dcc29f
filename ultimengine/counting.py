"""Position scoring and the alpha-beta search used by the engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .bitboard import BitBoard
from .board import Slot, State
from .generated import POSSIBLE_TO_WIN
from .moves import ANY_BOARD, Move, legal_moves

if TYPE_CHECKING:
    from .game import Game

MAX_DEPTH = 9

_LOWEST = -(2**31)
_HIGHEST = 2**31 - 1


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def alpha_beta(game: Game) -> tuple[int, Move | None]:
    """Search for X's best move; return its score and the move.

    The move is None when the game is already decided or has no legal move.
    """
    choice: Move | None = None

    def search(node: Game, depth: int, alpha: int, beta: int, maximizing: bool) -> int:
        nonlocal choice

        if depth >= MAX_DEPTH or node.state is not State.UNDECIDED:
            return score_game(node, Slot.O if maximizing else Slot.X)

        moves = legal_moves(node)

        # Ordering the moves costs a scoring pass, but pruning gains far more.
        if depth <= 4:
            moves.sort(
                key=lambda mv: score_game(node.sim_move(mv, Slot.X), Slot.X),
                reverse=maximizing,
            )

        if maximizing:
            value = _LOWEST
            for move in moves:
                child = node.sim_move(move, Slot.X)
                step = 2 if child.active == ANY_BOARD else 1
                evaluation = search(child, depth + step, alpha, beta, False)
                if evaluation > value and depth == 0:
                    choice = move
                value = max(value, evaluation)
                if value >= beta:
                    break
                alpha = max(alpha, value)
            return value

        value = _HIGHEST
        for move in moves:
            child = node.sim_move(move, Slot.O)
            step = 3 if child.active == ANY_BOARD else 1
            evaluation = search(child, depth + step, alpha, beta, True)
            if evaluation < value and depth == 0:
                choice = move
            value = min(value, evaluation)
            if value <= alpha:
                break
            beta = min(beta, value)
        return value

    result = search(game, 0, _LOWEST, _HIGHEST, True)
    return result, choice


def score_game(game: Game, turn: Slot) -> int:
    """Score a whole game from X's point of view, with ``turn`` to move."""
    total = score(game.shrink(), turn) * 100
    total += sum(_trunc_div(score(board, turn), 4) for board in game.boards)

    for board in game.boards:
        state = board.state()
        if state is State.WON:
            total += 100
        elif state is State.LOST:
            total -= 100

    if game.active == ANY_BOARD:
        if turn is Slot.X:
            total -= _trunc_div(total, 3)
        elif turn is Slot.O:
            total += _trunc_div(total, 3)

    return total


def score(board: BitBoard, turn: Slot) -> int:
    """Score a single 3x3 board from X's point of view."""
    # Corners open up diagonals, which edges and the centre-line cells do not.
    value = board.corners(Slot.X) - board.corners(Slot.O)

    if turn is Slot.X:
        value += 6 * board.one_aways_x() + 3 * board.one_aways_o()
    elif turn is Slot.O:
        value -= 6 * board.one_aways_o() + 3 * board.one_aways_x()

    if board.won_by_x():
        value = 10_000
    if board.won_by_o():
        value = -10_000

    return value


def possible_to_win(board: BitBoard) -> bool:
    """Return whether either side can still complete a line."""
    return any(mask & board.bits == mask for mask in POSSIBLE_TO_WIN)