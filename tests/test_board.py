"""
Tests for Board class.
"""
import numpy as np
import pytest

from connectfour.errors import InvalidArgumentError, InvalidColumnError
from connectfour.game.board import Board


def test_board_initialization():
    """Test that a board starts with 42 empty cells."""
    board = Board()

    assert len(board) == 42
    assert board.cells.shape == (42,)
    assert board.cells.dtype == np.int8
    assert np.all(board.cells == 0)
    assert board.turn_count() == 0
    assert board.is_full() is False


def test_cells_view_is_read_only():
    """Test that the cells view cannot be used to change the board."""
    board = Board()

    with pytest.raises(ValueError):
        board.cells[0] = 1

    assert board.turn_count() == 0


def test_landing_index_empty_column():
    """Test that a piece dropped into an empty column lands on the bottom row."""
    board = Board()

    for col in range(7):
        assert board.landing_index(col) == 35 + col


def test_landing_index_stacks_upwards():
    """Test that each piece lands directly on top of the previous one."""
    board = Board()

    expected = [38, 31, 24, 17, 10, 3]
    for i, index in enumerate(expected):
        assert board.landing_index(3) == index
        board.place(index, 1 if i % 2 == 0 else 2)

    assert board.landing_index(3) is None
    assert board.is_column_full(3) is True


def test_landing_index_stops_above_first_occupied_cell():
    """Test that the scan from the top stops before the first occupied cell."""
    board = Board()
    board.place(24, 1)  # row 3, column 3

    assert board.landing_index(3) == 17


def test_is_column_full_rejects_bad_columns():
    """Test that column checks outside the board raise InvalidColumnError."""
    board = Board()

    for column in (-1, 7, 100):
        with pytest.raises(InvalidColumnError):
            board.is_column_full(column)


def test_valid_columns():
    """Test that only columns with an empty top cell are valid."""
    board = Board()
    assert board.valid_columns() == list(range(7))

    for i, index in enumerate([36, 29, 22, 15, 8, 1]):
        board.place(index, 1 if i % 2 == 0 else 2)

    assert board.valid_columns() == [0, 2, 3, 4, 5, 6]


def test_place_rejects_invalid_moves():
    """Test that place refuses bad indices, bad players and occupied cells."""
    board = Board()

    with pytest.raises(InvalidArgumentError):
        board.place(-1, 1)
    with pytest.raises(InvalidArgumentError):
        board.place(42, 1)
    with pytest.raises(InvalidArgumentError):
        board.place(10, 0)
    with pytest.raises(InvalidArgumentError):
        board.place(10, 3)

    board.place(10, 1)
    with pytest.raises(InvalidArgumentError):
        board.place(10, 2)

    assert board.cells[10] == 1
    assert board.turn_count() == 1


def test_reset_clears_board():
    """Test that reset empties every cell."""
    board = Board()
    board.place(35, 1)
    board.place(36, 2)

    board.reset()

    assert board.turn_count() == 0
    assert np.all(board.cells == 0)


def test_from_cells():
    """Test building a board from a flat list of values."""
    values = [0] * 42
    values[41] = 2
    values[40] = 1

    board = Board.from_cells(values)

    assert board.cells[41] == 2
    assert board.cells[40] == 1
    assert board.turn_count() == 2


def test_from_cells_rejects_bad_input():
    """Test that from_cells validates length and values."""
    with pytest.raises(InvalidArgumentError):
        Board.from_cells([0] * 41)
    with pytest.raises(InvalidArgumentError):
        Board.from_cells([0] * 43)
    with pytest.raises(InvalidArgumentError):
        Board.from_cells([0] * 41 + [3])


def test_copy_is_independent():
    """Test that a copied board does not share cells with the original."""
    board = Board()
    board.place(35, 1)

    clone = board.copy()
    clone.place(36, 2)

    assert board.turn_count() == 1
    assert clone.turn_count() == 2


def test_render():
    """Test the ASCII rendering of a board."""
    board = Board()
    board.place(35, 1)
    board.place(36, 2)

    lines = board.render().split("\n")

    assert len(lines) == 9
    assert lines[6] == "|X O          |"
    assert lines[8] == "|0 1 2 3 4 5 6|"
    assert board.render(highlight=[35]).split("\n")[6] == "|x O          |"
    assert str(board) == board.render()


def test_from_cells_rejects_non_integer_values():
    """Test that float, string and bool cells are refused rather than truncated."""
    for bad in (1.7, 1.0, "1", True, None):
        values = [0] * 42
        values[41] = bad
        with pytest.raises(InvalidArgumentError):
            Board.from_cells(values)

    values = [np.int8(0)] * 41 + [np.int64(2)]
    assert Board.from_cells(values).cells[41] == 2
