# =========================================================================
# CONSTRAINT CHECKER
# Row / column / box rules evaluated against a live, possibly partial grid.
# =========================================================================

from .grid import Position, box_origin, iter_positions, subgrid_size


def is_safe_to_place(grid, row, col, value):
    """Checks that no other cell in the row, column or box already holds `value`."""
    size = len(grid)
    box = subgrid_size(size)

    # Check Row and Column
    for i in range(size):
        if i != col and grid[row][i] == value:
            return False
        if i != row and grid[i][col] == value:
            return False

    # Check Subgrid
    box_row, box_col = box_origin(row, col, box)
    for i in range(box_row, box_row + box):
        for j in range(box_col, box_col + box):
            if (i != row or j != col) and grid[i][j] == value:
                return False
    return True


def find_conflicts(grid, row, col=None):
    """
    Returns the peers of a cell holding the same value as it. The cell is
    given either as (row, col) or as a single Position.
    """
    if col is None:
        row, col = row
    conflicts = set()
    value = grid[row][col]
    if value is None:
        return conflicts
    size = len(grid)
    box = subgrid_size(size)

    # Row and column conflicts
    for i in range(size):
        if i != col and grid[row][i] == value:
            conflicts.add(Position(row, i))
        if i != row and grid[i][col] == value:
            conflicts.add(Position(i, col))

    # Box conflicts
    box_row, box_col = box_origin(row, col, box)
    for i in range(box_row, box_row + box):
        for j in range(box_col, box_col + box):
            if (i != row or j != col) and grid[i][j] == value:
                conflicts.add(Position(i, j))
    return conflicts


def all_conflicts(grid):
    """Every cell on the board that takes part in at least one conflict."""
    conflicts = set()
    for pos in iter_positions(len(grid)):
        peers = find_conflicts(grid, pos.row, pos.col)
        if peers:
            conflicts.add(pos)
            conflicts.update(peers)
    return conflicts


def candidates(grid, row, col):
    """Values in 1..N not excluded by any row, column or box peer of (row, col)."""
    size = len(grid)
    box = subgrid_size(size)
    possible = set(range(1, size + 1))
    for i in range(size):
        if i != col:
            possible.discard(grid[row][i])
        if i != row:
            possible.discard(grid[i][col])
    box_row, box_col = box_origin(row, col, box)
    for i in range(box_row, box_row + box):
        for j in range(box_col, box_col + box):
            if i != row or j != col:
                possible.discard(grid[i][j])
    return possible


def _units(size, box):
    """Yields the cell lists of every row, column and box."""
    for i in range(size):
        yield [(i, j) for j in range(size)]
        yield [(j, i) for j in range(size)]
    for box_row in range(0, size, box):
        for box_col in range(0, size, box):
            yield [(r, c) for r in range(box_row, box_row + box)
                   for c in range(box_col, box_col + box)]


def is_complete_solution(grid):
    """
    A grid is solved when every cell is filled and no row, column or box
    repeats a value.
    """
    size = len(grid)
    box = subgrid_size(size)
    for unit in _units(size, box):
        seen = set()
        for r, c in unit:
            value = grid[r][c]
            if value is None or value in seen:
                return False
            seen.add(value)
    return True
