"""The big board: nine small boards and the rules that connect them."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .bitboard import BitBoard
from .board import Slot, State
from .counting import possible_to_win
from .moves import ANY_BOARD, Move, check_move, legal_moves

_SIDE_OFFSETS = {Slot.X: 0, Slot.O: 9, Slot.EMPTY: 18}

_SHRINK_SLOTS = {
    State.WON: Slot.X,
    State.LOST: Slot.O,
    State.TIED: Slot.DISABLED,
    State.UNDECIDED: Slot.EMPTY,
}

_STATE_COLOURS = {State.WON: "1", State.LOST: "2", State.TIED: "3"}
_LAST_MOVE_COLOUR = "4"
_PLAYABLE_COLOUR = "5"
_IDLE_COLOUR = "7"
_RESET = "\x1b[0m"


def _colour(code: str) -> str:
    return f"\x1b[0;3{code}m"


def _fresh_boards() -> list[BitBoard]:
    return [BitBoard() for _ in range(9)]


@dataclass
class Game:
    """A game of ultimate tic-tac-toe, scored from X's point of view."""

    boards: list[BitBoard] = field(default_factory=_fresh_boards)
    active: int = ANY_BOARD
    state: State = State.UNDECIDED
    last_move: Move | None = None

    @classmethod
    def random(cls, times: int) -> Game:
        """Play up to ``times`` seeded random moves, X first."""
        game = cls()
        rng = random.Random(42)
        side = Slot.X

        for _ in range(times):
            moves = legal_moves(game)
            if not moves:
                break
            game.make_move(rng.choice(moves), side)
            side = side.flip()

        return game

    @classmethod
    def sample(cls) -> Game:
        """Return a game whose first three boards are tied, won and lost."""
        x, o, e = Slot.X, Slot.O, Slot.EMPTY
        game = cls()
        game.boards[0] = BitBoard.new_with([x, o, x, x, o, o, o, x, x]).with_state(
            State.TIED
        )
        game.boards[1] = BitBoard.new_with([x, x, x, e, e, e, e, e, e]).with_state(
            State.WON
        )
        game.boards[2] = BitBoard.new_with([o, o, o, e, e, e, e, e, e]).with_state(
            State.LOST
        )
        return game

    def copy(self) -> Game:
        """Return an independent copy of the game."""
        return Game(list(self.boards), self.active, self.state, self.last_move)

    def flip(self) -> Game:
        """Return the game with X and O swapped everywhere."""
        return Game(
            [board.flipped() for board in self.boards],
            self.active,
            self.state.flip(),
            self.last_move,
        )

    def shrink(self) -> BitBoard:
        """Return the 3x3 board of small-board outcomes."""
        return BitBoard.new_with([_SHRINK_SLOTS[board.state()] for board in self.boards])

    def sim_move(self, move: Move, side: Slot) -> Game:
        """Return a copy of the game with the move played."""
        new = self.copy()
        new.make_move(move, side)
        return new

    def make_move(self, move: Move, side: Slot) -> None:
        """Play a move, raising IllegalMoveError if it is not allowed."""
        check_move(self, move)
        offset = _SIDE_OFFSETS.get(side)
        if offset is None:
            raise ValueError(f"cannot place {side!r} on the board")

        board = self.boards[move.game]
        bits = (board.bits | (1 << (move.index + offset))) & ~(1 << (18 + move.index))
        board = BitBoard(bits)

        if board.won_by_x():
            board = board.with_state(State.WON)
        elif board.won_by_o():
            board = board.with_state(State.LOST)
        elif not possible_to_win(board):
            board = board.with_state(State.TIED)
        self.boards[move.game] = board

        shrunken = self.shrink()
        if shrunken.won_by_x():
            self.state = State.WON
        elif shrunken.won_by_o():
            self.state = State.LOST
        elif not possible_to_win(shrunken):
            self.state = State.TIED

        if self.boards[move.index].state() is not State.UNDECIDED:
            self.active = ANY_BOARD
        else:
            self.active = move.index

        self.last_move = move

    def _board_colour(self, idx: int) -> str:
        state = self.boards[idx].state()
        if state in _STATE_COLOURS:
            return _STATE_COLOURS[state]
        if self.active in (idx, ANY_BOARD):
            return _PLAYABLE_COLOUR
        return _IDLE_COLOUR

    def render(self) -> str:
        """Draw the board with ANSI colours for the terminal."""
        outer = [self._board_colour(idx) for idx in range(9)]
        cells = [board.to_arr() for board in self.boards]

        def cell(board: int, index: int) -> str:
            inner = _LAST_MOVE_COLOUR if self.last_move == Move(board, index) else outer[board]
            return f"{_colour(inner)}{cells[board][index].to_chr()}{_colour(outer[board])}"

        def cell_line(big_row: int, row: int) -> str:
            segments = (
                _colour(outer[board])
                + " | ".join(cell(board, 3 * row + col) for col in range(3))
                + _RESET
                for board in range(3 * big_row, 3 * big_row + 3)
            )
            return "  " + "   |   ".join(segments) + "   "

        def divider(big_row: int) -> str:
            segments = (
                f"{_colour(outer[board])}{'-' * 11}{_RESET}"
                for board in range(3 * big_row, 3 * big_row + 3)
            )
            return " " + "  |  ".join(segments) + "  "

        lines = [""]
        for big_row in range(3):
            if big_row:
                lines.append("-" * 45)
                lines.append(f"{' ' * 14}|{' ' * 15}|")
            for row in range(3):
                if row:
                    lines.append(divider(big_row))
                lines.append(cell_line(big_row, row))
            if big_row < 2:
                lines.append(f"{' ' * 14}|{' ' * 15}|{' ' * 15}")

        return "\n".join(lines) + "\n"