"""A 3x3 board packed into a single integer."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .board import Slot, State
from .generated import ONE_AWAY_O, ONE_AWAY_X, WON_BY_O, WON_BY_X

_CELL_MASK = (1 << 9) - 1
_PLAYER_MASK = (1 << 18) - 1
_STATE_SHIFT = 27
_STATE_MASK = 0b11111 << _STATE_SHIFT
_CORNER_MASK = 0b101000101
_EMPTY_BITS = _CELL_MASK << 18

_SLOT_OFFSETS = {Slot.X: 0, Slot.O: 9, Slot.EMPTY: 18}


def _count_matching(masks: Iterable[int], bits: int) -> int:
    return sum(1 for mask in masks if mask & bits == mask)


def _any_matching(masks: Iterable[int], bits: int) -> bool:
    return any(mask & bits == mask for mask in masks)


@dataclass(frozen=True)
class BitBoard:
    """Nine cells as X, O and empty bit sets, plus a 5-bit state field.

    Bits 0-8 are X, 9-17 are O, 18-26 are empty, 27-31 hold the state.
    """

    bits: int = _EMPTY_BITS

    @classmethod
    def new_with(cls, slots: Sequence[Slot]) -> BitBoard:
        """Build a board from nine slots; disabled slots set no bit."""
        if len(slots) != 9:
            raise ValueError("a board needs exactly 9 slots")
        bits = 0
        for idx, slot in enumerate(slots):
            offset = _SLOT_OFFSETS.get(slot)
            if offset is not None:
                bits |= 1 << (offset + idx)
        return cls(bits)

    def to_arr(self) -> list[Slot]:
        """Return the nine slots; a cell with no bit set reads as disabled."""
        cells = []
        for idx in range(9):
            for slot in (Slot.X, Slot.O, Slot.EMPTY):
                if self.bits & (1 << (_SLOT_OFFSETS[slot] + idx)):
                    cells.append(slot)
                    break
            else:
                cells.append(Slot.DISABLED)
        return cells

    def flipped(self) -> BitBoard:
        """Return the board with X and O swapped and the state flipped."""
        xs = self.bits & _CELL_MASK
        os_ = self.bits & (_CELL_MASK << 9)
        bits = (self.bits & ~_PLAYER_MASK) | (xs << 9) | (os_ >> 9)
        return BitBoard(bits).with_state(self.state().flip())

    def state(self) -> State:
        """Return the state stored in the top bits."""
        return State.from_u32(self.bits >> _STATE_SHIFT)

    def with_state(self, state: State) -> BitBoard:
        """Return a copy carrying the given state."""
        bits = (self.bits & ~_STATE_MASK) | (state.to_u32() << _STATE_SHIFT)
        return BitBoard(bits)

    def corners(self, side: Slot) -> int:
        """Count the corners held by X or O."""
        if side is Slot.X:
            return (self.bits & _CORNER_MASK).bit_count() if hasattr(int, "bit_count") else bin(self.bits & _CORNER_MASK).count("1")
        if side is Slot.O:
            return bin(self.bits & (_CORNER_MASK << 9)).count("1")
        raise ValueError(f"corners are counted for X or O only, not {side!r}")

    def one_aways_x(self) -> int:
        """Count lines where X needs one more mark to win."""
        return _count_matching(ONE_AWAY_X, self.bits)

    def one_aways_o(self) -> int:
        """Count lines where O needs one more mark to win."""
        return _count_matching(ONE_AWAY_O, self.bits)

    def won_by_x(self) -> bool:
        """Return whether X holds a full line."""
        return _any_matching(WON_BY_X, self.bits)

    def won_by_o(self) -> bool:
        """Return whether O holds a full line."""
        return _any_matching(WON_BY_O, self.bits)


def to_3x3(slots: Sequence[Slot]) -> str:
    """Render nine slots as three lines of three cells."""
    return "".join(
        " ".join(str(slot) for slot in slots[row : row + 3]) + "\n"
        for row in range(0, 9, 3)
    )