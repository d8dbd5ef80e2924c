import pytest

from sudoku_game.errors import InvalidSizeError
from sudoku_game.grid import (
    Position, count_empty, empty_grid, empty_positions, format_grid, subgrid_size,
    validate_grid,
)

from tests.tools import SOLUTION_4X4, with_holes

# ---------- Size Tests ----------


@pytest.mark.parametrize("size,box", [(4, 2), (9, 3), (16, 4), (25, 5)])
def test_subgrid_size_for_perfect_squares(size, box):
    assert subgrid_size(size) == box


@pytest.mark.parametrize("size", [0, -4, 1, 2, 8, 10, 9.0, True, "9", None])
def test_subgrid_size_rejects_bad_sizes(size):
    with pytest.raises(InvalidSizeError):
        subgrid_size(size)


def test_invalid_size_is_a_value_error():
    with pytest.raises(ValueError):
        empty_grid(6)


# ---------- Position Tests ----------


def test_position_flat_index_round_trip():
    assert Position.from_index(5, 4) == (1, 1)
    assert Position(2, 3).to_index(9) == 21
    assert Position.from_index(80, 9) == Position(8, 8)


def test_position_compares_equal_to_tuple():
    assert Position(0, 3) == (0, 3)
    assert (0, 3) in {Position(0, 3)}


# ---------- Grid Helper Tests ----------


def test_empty_positions_are_row_major():
    grid = with_holes(SOLUTION_4X4, (2, 1), (0, 3), (1, 0))
    assert empty_positions(grid) == [(0, 3), (1, 0), (2, 1)]
    assert count_empty(grid) == 3


def test_format_grid_marks_empty_cells_and_boxes():
    lines = format_grid(with_holes(SOLUTION_4X4, (0, 1))).splitlines()

    assert len(lines) == 5
    assert lines[0] == "1 . | 3 4"
    assert lines[2] == "-" * len(lines[0])


def test_format_grid_pads_two_digit_values():
    grid = empty_grid(16)
    grid[0][0] = 16
    first = format_grid(grid).splitlines()[0]
    assert first.startswith("16  .")


def test_validate_grid_accepts_partial_grid():
    assert validate_grid(with_holes(SOLUTION_4X4, (0, 0))) == 4


@pytest.mark.parametrize("value", [0, 5, -1, "1", 1.0])
def test_validate_grid_rejects_bad_values(value):
    grid = with_holes(SOLUTION_4X4)
    grid[1][1] = value
    with pytest.raises(ValueError):
        validate_grid(grid)


def test_validate_grid_rejects_ragged_rows():
    grid = with_holes(SOLUTION_4X4)
    grid[2] = grid[2][:3]
    with pytest.raises(ValueError):
        validate_grid(grid)
