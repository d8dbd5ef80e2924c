"""Exceptions raised by the puzzle engine."""


class SudokuError(Exception):
    """Base class for engine failures that indicate a misconfigured request."""


class InvalidSizeError(SudokuError, ValueError):
    """Grid size is not a perfect square of at least 4."""

    def __init__(self, size):
        self.size = size
        super().__init__(f"Grid size must be a perfect square >= 4, got {size!r}")


class UnsolvableStateError(SudokuError, RuntimeError):
    """The generator exhausted every candidate at the root of its search."""
