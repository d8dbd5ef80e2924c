"""
Grid model shared by the engine and the session.

A grid is an N x N list of rows. Empty cells hold None, filled cells an
integer in 1..N. N must be a perfect square so the boxes are sqrt(N) wide.
"""

import math
from collections import namedtuple

from .errors import InvalidSizeError

MIN_SIZE = 4


class Position(namedtuple("Position", ["row", "col"])):
    """A 0-indexed (row, col) cell address."""

    __slots__ = ()

    @classmethod
    def from_index(cls, index, size):
        row, col = divmod(index, size)
        return cls(row, col)

    def to_index(self, size):
        return self.row * size + self.col


def subgrid_size(size):
    """Returns the box width for a grid of `size`, or raises InvalidSizeError."""
    if isinstance(size, bool) or not isinstance(size, int) or size < MIN_SIZE:
        raise InvalidSizeError(size)
    root = math.isqrt(size)
    if root * root != size:
        raise InvalidSizeError(size)
    return root


def box_origin(row, col, box):
    """Top-left corner of the box holding (row, col)."""
    return row - row % box, col - col % box


def empty_grid(size):
    subgrid_size(size)
    return [[None] * size for _ in range(size)]


def copy_grid(grid):
    return [row[:] for row in grid]


def iter_positions(size):
    """Yields every Position in row-major order."""
    for index in range(size * size):
        yield Position.from_index(index, size)


def empty_positions(grid):
    return [pos for pos in iter_positions(len(grid)) if grid[pos.row][pos.col] is None]


def count_empty(grid):
    return sum(1 for row in grid for cell in row if cell is None)


def validate_grid(grid):
    """
    Checks the shape and cell values of an externally supplied grid.

    Raises InvalidSizeError for a bad dimension and ValueError for ragged
    rows or out-of-range values. Duplicates are allowed here; they are a
    rule violation, not a malformed grid.
    """
    size = len(grid)
    subgrid_size(size)
    for r, row in enumerate(grid):
        if len(row) != size:
            raise ValueError(f"Row {r} has {len(row)} cells, expected {size}")
        for c, value in enumerate(row):
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= size:
                raise ValueError(f"Invalid value at ({r},{c}): {value!r}")
    return size


def format_grid(grid):
    """
    Formats a grid as text, '.' for empty cells and rules between boxes.

    Args:
        grid: N x N grid (None = empty)

    Returns:
        Multi-line string.
    """
    size = len(grid)
    box = subgrid_size(size)
    width = len(str(size))
    lines = []
    for r, row in enumerate(grid):
        groups = []
        for start in range(0, size, box):
            cells = row[start:start + box]
            groups.append(" ".join(
                (str(cell) if cell is not None else ".").rjust(width) for cell in cells
            ))
        line = " | ".join(groups)
        lines.append(line)
        if (r + 1) % box == 0 and r + 1 < size:
            lines.append("-" * len(line))
    return "\n".join(lines)
