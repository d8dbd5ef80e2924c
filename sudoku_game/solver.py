# =========================================================================
# BACKTRACKING SOLVER
# A standard DFS used for solution counting (uniqueness checks).
# =========================================================================

from .constraints import all_conflicts, is_safe_to_place
from .grid import copy_grid, subgrid_size

DEFAULT_CAP = 2


class BacktrackingSolver:
    def __init__(self, board):
        self.size = len(board)
        subgrid_size(self.size)
        self.board = copy_grid(board)
        self.count = 0

    def search(self, index, cap):
        """
        Walks the cells from flat `index` onwards to the first empty one and
        tries every safe value there, counting completed boards. Returns True
        once `cap` solutions have been seen so callers unwind immediately.
        """
        total = self.size * self.size
        while index < total and self.board[index // self.size][index % self.size] is not None:
            index += 1

        if index == total:
            self.count += 1
            return self.count >= cap

        row, col = divmod(index, self.size)
        for num in range(1, self.size + 1):
            if is_safe_to_place(self.board, row, col, num):
                self.board[row][col] = num
                if self.search(index + 1, cap):
                    self.board[row][col] = None
                    return True
                self.board[row][col] = None
        return False

    def count_solutions(self, cap=DEFAULT_CAP):
        """Counts solutions, stopping once `cap` have been found (2 is enough for uniqueness)."""
        if cap < 1:
            raise ValueError(f"cap must be at least 1, got {cap}")
        self.count = 0
        # Givens that already clash can never be completed
        if all_conflicts(self.board):
            return 0
        self.search(0, cap)
        return self.count


def count_solutions(grid, cap=DEFAULT_CAP):
    return BacktrackingSolver(grid).count_solutions(cap)


def has_unique_solution(grid):
    """Returns True if the grid has exactly one completion."""
    return count_solutions(grid) == 1
