"""Cell contents and board outcomes."""

from __future__ import annotations

from enum import Enum


class Slot(Enum):
    """The content of a single cell."""

    EMPTY = 0
    X = 1
    O = 2  # noqa: E741
    DISABLED = 3

    def to_chr(self) -> str:
        """Return the character used to draw this cell."""
        return _SLOT_CHARS[self]

    def flip(self) -> Slot:
        """Swap X and O; other slots stay as they are."""
        if self is Slot.X:
            return Slot.O
        if self is Slot.O:
            return Slot.X
        return self

    def __str__(self) -> str:
        return self.to_chr()


_SLOT_CHARS = {
    Slot.EMPTY: " ",
    Slot.X: "X",
    Slot.O: "O",
    Slot.DISABLED: "_",
}


class State(Enum):
    """The outcome of a board, seen from X's side."""

    WON = "won"
    LOST = "lost"
    TIED = "tied"
    UNDECIDED = "undecided"

    def to_u32(self) -> int:
        """Return the numeric code stored in a bitboard."""
        return _STATE_CODES[self]

    @classmethod
    def from_u32(cls, bits: int) -> State:
        """Return the state for a numeric code; raise ValueError if unknown."""
        try:
            return _CODE_STATES[bits]
        except KeyError:
            raise ValueError(f"invalid state code: {bits}") from None

    def flip(self) -> State:
        """Swap a win and a loss; other states stay as they are."""
        if self is State.WON:
            return State.LOST
        if self is State.LOST:
            return State.WON
        return self


_STATE_CODES = {
    State.UNDECIDED: 0,
    State.WON: 1,
    State.LOST: 2,
    State.TIED: 3,
}
_CODE_STATES = {code: state for state, code in _STATE_CODES.items()}