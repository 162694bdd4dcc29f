import pytest

from ultimengine.bitboard import BitBoard, to_3x3
from ultimengine.board import Slot, State

E = Slot.EMPTY
X = Slot.X
O = Slot.O  # noqa: E741


def test_set_state():
    brd = BitBoard()
    assert brd.state() is State.UNDECIDED

    brd = brd.with_state(State.WON)
    assert brd.state() is State.WON

    brd = brd.with_state(State.TIED)
    assert brd.state() is State.TIED


def test_default_is_all_empty():
    assert BitBoard() == BitBoard.new_with([E] * 9)
    assert BitBoard().to_arr() == [E] * 9


def test_flip():
    brd = BitBoard.new_with([X, X, O, E, E, E, O, O, X]).flipped()
    assert brd == BitBoard.new_with([O, O, X, E, E, E, X, X, O])


def test_flip_swaps_state():
    brd = BitBoard.new_with([X, X, X, E, E, E, E, E, E]).with_state(State.WON)
    flipped = brd.flipped()
    assert flipped.state() is State.LOST
    assert flipped.won_by_o()
    assert flipped.flipped() == brd


def test_to_arr():
    brd = BitBoard.new_with([X, E, X, X, X, O, O, O, O])
    assert BitBoard.new_with(brd.to_arr()) == brd


def test_to_arr_disabled():
    slots = [X, Slot.DISABLED, O, E, E, E, E, E, E]
    assert BitBoard.new_with(slots).to_arr() == slots


def test_new_with_wrong_length():
    with pytest.raises(ValueError):
        BitBoard.new_with([E] * 8)


def test_won_by_x():
    assert BitBoard.new_with([X, X, X, E, E, E, E, E, E]).won_by_x()
    assert BitBoard.new_with([X, E, X, E, X, E, E, E, X]).won_by_x()
    assert not BitBoard.new_with([X, X, E, E, E, E, E, E, E]).won_by_x()


def test_won_by_o():
    assert BitBoard.new_with([O, O, O, E, E, E, E, E, E]).won_by_o()
    assert BitBoard.new_with([O, E, O, E, O, E, E, E, O]).won_by_o()
    assert not BitBoard.new_with([O, O, O, E, E, E, E, E, E]).won_by_x()


def test_one_aways_x():
    assert BitBoard.new_with([E, E, E, X, E, X, E, E, X]).one_aways_x() == 2
    assert BitBoard.new_with([E] * 9).one_aways_x() == 0
    assert BitBoard.new_with([X] * 9).one_aways_x() == 0
    assert BitBoard.new_with([X, X, E, X, X, E, E, E, E]).one_aways_x() == 5


def test_one_aways_o():
    assert BitBoard.new_with([E, E, E, O, E, O, E, E, O]).one_aways_o() == 2
    assert BitBoard.new_with([E] * 9).one_aways_o() == 0
    assert BitBoard.new_with([O] * 9).one_aways_o() == 0
    assert BitBoard.new_with([O, O, E, O, O, E, E, E, E]).one_aways_o() == 5


def test_state_won():
    brd = BitBoard(BitBoard().bits | (1 << 27))
    assert brd.state() is State.WON


def test_state_lost():
    brd = BitBoard(BitBoard().bits | (2 << 27))
    assert brd.state() is State.LOST


def test_state_tied():
    brd = BitBoard(BitBoard().bits | (3 << 27))
    assert brd.state() is State.TIED


def test_state_undecided():
    brd = BitBoard(BitBoard().bits | (0 << 27))
    assert brd.state() is State.UNDECIDED


def test_corners():
    brd = BitBoard.new_with([X, O, X, O, O, O, X, O, O])
    assert brd.corners(X) == 3
    assert brd.corners(O) == 1


def test_corners_rejects_empty():
    with pytest.raises(ValueError):
        BitBoard().corners(E)


def test_to_3x3():
    text = to_3x3([X, O, E, E, X, E, O, E, X])
    assert text == "X O  \n  X  \nO   X\n"
    assert text.count("\n") == 3