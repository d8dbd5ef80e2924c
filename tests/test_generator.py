import pytest

from sudoku_game.errors import InvalidSizeError, UnsolvableStateError
from sudoku_game.generator import (
    PuzzleCarver, SolutionGenerator, carve_puzzle, cells_to_clear, generate_solution,
)
from sudoku_game.grid import count_empty
from sudoku_game.rng import SeededRandom

from tests.tools import SOLUTION_4X4, is_valid_sudoku

# ---------- Solution Generator Tests ----------


@pytest.mark.parametrize("size", [4, 9])
def test_generated_solution_is_valid(size):
    solution = generate_solution(size)

    assert len(solution) == size
    assert all(len(row) == size for row in solution)
    assert is_valid_sudoku(solution)


def test_seeded_16x16_solution_is_valid():
    solution = generate_solution(16, SeededRandom(1))

    assert len(solution) == 16
    assert is_valid_sudoku(solution)


def test_seeded_generation_is_reproducible():
    assert generate_solution(9, SeededRandom(7)) == generate_solution(9, SeededRandom(7))


def test_shuffling_produces_different_solutions():
    solutions = {tuple(map(tuple, generate_solution(4, SeededRandom(seed)))) for seed in range(30)}
    assert len(solutions) > 1


@pytest.mark.parametrize("size", [0, -9, 1, 8, 12])
def test_generator_refuses_invalid_size(size):
    with pytest.raises(InvalidSizeError):
        generate_solution(size)


def test_exhausted_search_is_a_hard_failure():
    class DeadEndGenerator(SolutionGenerator):
        def fill_board(self, board, index):
            return False

    with pytest.raises(UnsolvableStateError):
        DeadEndGenerator(4).generate()


# ---------- Puzzle Carver Tests ----------


@pytest.mark.parametrize("size,fill,expected", [
    (4, 0.5, 8),
    (9, 0.5, 40),
    (9, 0.35, 52),
    (9, 0.25, 60),
    (16, 0.25, 192),
])
def test_cells_to_clear(size, fill, expected):
    assert cells_to_clear(size, fill) == expected


@pytest.mark.parametrize("fill", [0, 1, -0.1, 1.5])
def test_cells_to_clear_rejects_out_of_range_fill(fill):
    with pytest.raises(ValueError):
        cells_to_clear(9, fill)


def test_4x4_half_filled_puzzle_has_8_holes():
    solution = generate_solution(4)
    puzzle = carve_puzzle(solution, 0.5)

    assert is_valid_sudoku(solution)
    assert count_empty(puzzle) == 8


def test_carving_keeps_solution_values_and_source():
    solution = generate_solution(9, SeededRandom(3))
    puzzle = carve_puzzle(solution, 0.35, SeededRandom(3))

    assert count_empty(puzzle) == 52
    assert count_empty(solution) == 0
    for r in range(9):
        for c in range(9):
            assert puzzle[r][c] is None or puzzle[r][c] == solution[r][c]


def test_carver_can_clear_every_cell_or_none():
    carver = PuzzleCarver(SeededRandom(11))
    assert count_empty(carver.carve(SOLUTION_4X4, 16)) == 16
    assert carver.carve(SOLUTION_4X4, 0) == SOLUTION_4X4


@pytest.mark.parametrize("count", [-1, 17])
def test_carver_rejects_impossible_counts(count):
    with pytest.raises(ValueError):
        PuzzleCarver().carve(SOLUTION_4X4, count)


def test_seeded_carving_is_reproducible():
    first = PuzzleCarver(SeededRandom(9)).carve(SOLUTION_4X4, 6)
    second = PuzzleCarver(SeededRandom(9)).carve(SOLUTION_4X4, 6)
    assert first == second
