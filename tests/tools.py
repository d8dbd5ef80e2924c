"""Shared grids and helpers for the test suite."""

# A valid 4x4 solution with a swappable rectangle at (0,0),(0,1),(2,0),(2,1)
SOLUTION_4X4 = [
    [1, 2, 3, 4],
    [3, 4, 1, 2],
    [2, 1, 4, 3],
    [4, 3, 2, 1],
]

SOLUTION_9X9 = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]

PUZZLE_9X9 = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]


def with_holes(grid, *cells):
    """Copy of `grid` with the given (row, col) cells emptied; 0 is read as empty."""
    board = [[value or None for value in row] for row in grid]
    for row, col in cells:
        board[row][col] = None
    return board


def is_valid_sudoku(grid):
    size = len(grid)
    box = int(size ** 0.5)
    expected = list(range(1, size + 1))
    for i in range(size):
        if sorted(grid[i]) != expected:
            return False
        if sorted(grid[r][i] for r in range(size)) != expected:
            return False
    for box_row in range(0, size, box):
        for box_col in range(0, size, box):
            cells = [grid[r][c] for r in range(box_row, box_row + box)
                     for c in range(box_col, box_col + box)]
            if sorted(cells) != expected:
                return False
    return True
