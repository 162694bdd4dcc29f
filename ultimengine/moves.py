"""Moves, move legality and move parsing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .board import State

if TYPE_CHECKING:
    from .game import Game

ANY_BOARD = 9
"""Value of ``Game.active`` when the player may choose any board."""


@dataclass(frozen=True)
class Move:
    """A cell on the big board: which small board and which cell in it."""

    game: int
    index: int

    def __str__(self) -> str:
        return f"{chr(ord('A') + self.game)}{self.index + 1}"


class IllegalMoveError(ValueError):
    """Raised for a move that cannot be played or cannot be parsed."""


def check_move(game: Game, move: Move) -> None:
    """Raise IllegalMoveError if the move cannot be played in this game."""
    if not (0 <= move.game < 9 and 0 <= move.index < 9):
        raise IllegalMoveError("move is off the board")

    board = game.boards[move.game]
    if board.state() is not State.UNDECIDED:
        raise IllegalMoveError("That game has been finished")

    empty_bit = 1 << (18 + move.index)
    if not board.bits & empty_bit:
        raise IllegalMoveError("square is not empty")

    if game.active not in (move.game, ANY_BOARD):
        raise IllegalMoveError("must play in the active board")


def is_legal(game: Game, move: Move) -> bool:
    """Return whether the move can be played in this game."""
    try:
        check_move(game, move)
    except IllegalMoveError:
        return False
    return True


def parse_move(text: str, active: int) -> Move:
    """Parse a move such as ``a5``, or ``5`` when a board is active."""
    if not text or len(text) > 2:
        raise IllegalMoveError("Move string must be 1 or 2 chars")

    if active == ANY_BOARD and len(text) == 1:
        raise IllegalMoveError(
            "Can only use shorthand notation when a specific board is active"
        )

    game = active
    if len(text) == 2:
        letter = text[0]
        if not "a" <= letter <= "i":
            raise IllegalMoveError("game must be within a to i")
        game = ord(letter) - ord("a")

    digit = text[-1]
    if digit not in "123456789":
        raise IllegalMoveError("index must be between 1 and 9")

    return Move(game, int(digit) - 1)


def legal_moves(game: Game) -> list[Move]:
    """Return every legal move, board by board and cell by cell."""
    return [
        move
        for move in (Move(board, cell) for board in range(9) for cell in range(9))
        if is_legal(game, move)
    ]