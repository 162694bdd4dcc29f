import pytest

from ultimengine.board import Slot
from ultimengine.game import Game
from ultimengine.moves import (
    ANY_BOARD,
    IllegalMoveError,
    Move,
    check_move,
    is_legal,
    legal_moves,
    parse_move,
)


def test_move_str():
    assert str(Move(0, 4)) == "A5"
    assert str(Move(8, 0)) == "I1"


def test_parse_full_notation():
    assert parse_move("a5", ANY_BOARD) == Move(0, 4)
    assert parse_move("i9", 3) == Move(8, 8)


def test_parse_shorthand_uses_active_board():
    assert parse_move("5", 3) == Move(3, 4)


@pytest.mark.parametrize(
    ("text", "active", "message"),
    [
        ("", ANY_BOARD, "Move string must be 1 or 2 chars"),
        ("abc", ANY_BOARD, "Move string must be 1 or 2 chars"),
        ("5", ANY_BOARD, "Can only use shorthand notation"),
        ("z5", ANY_BOARD, "game must be within a to i"),
        ("ax", ANY_BOARD, "index must be between 1 and 9"),
        ("a0", ANY_BOARD, "index must be between 1 and 9"),
    ],
)
def test_parse_errors(text, active, message):
    with pytest.raises(IllegalMoveError, match=message):
        parse_move(text, active)


def test_legal_moves_on_new_game():
    moves = legal_moves(Game())
    assert len(moves) == 81
    assert len(set(moves)) == len(moves)


def test_legal_moves_follow_active_board():
    game = Game()
    game.make_move(Move(0, 4), Slot.X)
    moves = legal_moves(game)
    assert moves
    assert all(move.game == 4 for move in moves)


def test_occupied_square_is_illegal():
    game = Game()
    game.make_move(Move(4, 4), Slot.X)
    assert not is_legal(game, Move(4, 4))
    with pytest.raises(IllegalMoveError, match="square is not empty"):
        check_move(game, Move(4, 4))


def test_wrong_board_is_illegal():
    game = Game()
    game.make_move(Move(0, 4), Slot.X)
    with pytest.raises(IllegalMoveError, match="must play in the active board"):
        check_move(game, Move(1, 0))


def test_finished_board_is_illegal():
    game = Game.sample()
    with pytest.raises(IllegalMoveError, match="That game has been finished"):
        check_move(game, Move(1, 5))
    assert all(move.game >= 3 for move in legal_moves(game))


def test_off_board_move_is_illegal():
    assert not is_legal(Game(), Move(9, 0))
    assert not is_legal(Game(), Move(0, 9))