from __future__ import annotations

import pytest

from tris3d.board import Board, Status
from tris3d.errors import BoardIsFull, InvalidPosition, PositionAlreadyTaken, ThereIsAlreadyAWinner
from tris3d.positions import POSITIONS

# Player i owns every third cell starting at i, and none of the three sets
# of nine cells contains a line.
TIED_MATCH = "HAJBGPFI*CDMEQXRKSYOWZLTUNV"


def _play(moves: str) -> tuple[Board, list[int]]:
    board = Board()
    results = [board.add_move(m) for m in moves]
    return board, results


def test_empty_board() -> None:
    board = Board()
    assert board.status is Status.PLAYING
    assert board.num_moves == 0
    assert board.next_player_index == 0
    assert board.get_num_winning_combinations() == 0
    assert board.winner_index is None
    assert board.free_positions() == list(POSITIONS)


@pytest.mark.parametrize("position", POSITIONS)
def test_add_move_accepts_valid_position(position: str) -> None:
    board = Board()
    assert board.add_move(position) == 0
    assert board.moves == (position,)
    assert board.next_player_index == 1


def test_add_move_checks_position_is_valid() -> None:
    board = Board()
    with pytest.raises(InvalidPosition):
        board.add_move(" ")
    with pytest.raises(InvalidPosition):
        board.add_move("a")
    assert board.num_moves == 0


def test_add_move_checks_position_is_not_already_taken() -> None:
    board = Board()
    board.add_move("A")
    with pytest.raises(PositionAlreadyTaken):
        board.add_move("A")
    assert board.moves == ("A",)


def test_no_winner_before_seventh_move() -> None:
    board, results = _play("AHG*IF")
    assert results == [0] * 6
    assert board.get_num_winning_combinations() == 0
    assert board.status is Status.PLAYING


def test_line_through_the_center_wins() -> None:
    board, results = _play("AHG*IFV")
    assert results == [0, 0, 0, 0, 0, 0, 1]
    assert board.status is Status.HAS_WINNER
    assert board.get_num_winning_combinations() == 1
    assert board.winning_combinations() == [("A", "*", "V")]
    assert board.winner_index == 0
    assert board.is_over
    assert board.num_moves == 7


def test_one_move_can_complete_two_lines() -> None:
    board, results = _play("ABCGFETSRVWY*")
    assert results == [0] * 12 + [2]
    assert board.get_num_winning_combinations() == 2
    assert board.winning_combinations() == [("A", "V", "*"), ("G", "T", "*")]
    assert board.status is Status.HAS_WINNER


def test_only_cells_of_the_last_player_count() -> None:
    # A, H, G is a line, but its cells belong to three different players.
    board, results = _play("AHGBIFC")
    assert results[-1] == 1
    assert board.winning_combinations() == [("A", "B", "C")]
    board, _ = _play("ABHCGDE")
    assert board.status is Status.PLAYING


def test_no_move_after_a_win() -> None:
    board, _ = _play("AHG*IFV")
    with pytest.raises(ThereIsAlreadyAWinner):
        board.add_move("B")
    with pytest.raises(ThereIsAlreadyAWinner):
        board.add_move("A")
    assert board.num_moves == 7
    assert board.status is Status.HAS_WINNER


def test_full_board_without_lines_is_tied() -> None:
    assert sorted(TIED_MATCH) == sorted(POSITIONS)
    board, results = _play(TIED_MATCH)
    assert results == [0] * 27
    assert board.status is Status.TIED
    assert board.get_num_winning_combinations() == 0
    assert board.winner_index is None
    assert board.free_positions() == []
    with pytest.raises(BoardIsFull):
        board.add_move("A")


def test_moves_of_player() -> None:
    board, _ = _play("ABCGFETS")
    assert board.moves_of_player(0) == ("A", "G", "T")
    assert board.moves_of_player(1) == ("B", "F", "S")
    assert board.moves_of_player(2) == ("C", "E")
    with pytest.raises(ValueError):
        board.moves_of_player(3)
