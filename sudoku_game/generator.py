# =========================================================================
# PUZZLE GENERATOR
# Builds a full valid board by randomised backtracking, then clears cells
# to create the puzzle.
# =========================================================================

import logging
import math
import random

from .constraints import is_safe_to_place
from .errors import UnsolvableStateError
from .grid import Position, copy_grid, empty_grid, subgrid_size

logger = logging.getLogger(__name__)


class SolutionGenerator:
    def __init__(self, size, rng=None):
        # Validate before any search so bad sizes never reach the box math
        subgrid_size(size)
        self.size = size
        self.rng = rng or random

    def generate(self):
        """Generates a completely filled, valid grid."""
        board = empty_grid(self.size)
        if not self.fill_board(board, 0):
            raise UnsolvableStateError(f"No solution found for a {self.size}x{self.size} grid")
        logger.debug("Generated %dx%d solution", self.size, self.size)
        return board

    def fill_board(self, board, index):
        """
        Recursively fills cells from flat `index` onwards in row-major order,
        trying candidate values in shuffled order.
        """
        if index == self.size * self.size:
            return True

        row, col = divmod(index, self.size)
        if board[row][col] is not None:
            return self.fill_board(board, index + 1)

        numbers = list(range(1, self.size + 1))
        self.rng.shuffle(numbers)
        for num in numbers:
            if is_safe_to_place(board, row, col, num):
                board[row][col] = num
                if self.fill_board(board, index + 1):
                    return True
                board[row][col] = None
        return False


class PuzzleCarver:
    def __init__(self, rng=None):
        self.rng = rng or random

    def carve(self, solution, cells_to_clear):
        """
        Clears exactly `cells_to_clear` randomly chosen cells from a copy of
        `solution`. The puzzle is not checked for a unique solution.
        """
        size = len(solution)
        total = size * size
        if not 0 <= cells_to_clear <= total:
            raise ValueError(f"Cannot clear {cells_to_clear} cells from a {size}x{size} grid")

        puzzle = copy_grid(solution)
        cleared = 0
        while cleared < cells_to_clear:
            pos = Position.from_index(self.rng.randrange(total), size)
            if puzzle[pos.row][pos.col] is not None:
                puzzle[pos.row][pos.col] = None
                cleared += 1
        return puzzle


def cells_to_clear(size, fill_percent):
    """Number of cells to empty so roughly `fill_percent` of the grid stays filled."""
    if not 0 < fill_percent < 1:
        raise ValueError(f"fill_percent must be between 0 and 1, got {fill_percent}")
    return math.floor(size * size * (1 - fill_percent))


def generate_solution(size, rng=None):
    return SolutionGenerator(size, rng).generate()


def carve_puzzle(solution, fill_percent, rng=None):
    """Main entry point: returns a puzzle carved from `solution` for a fill percentage."""
    target = cells_to_clear(len(solution), fill_percent)
    return PuzzleCarver(rng).carve(solution, target)
