"""
Game configuration.

Difficulty table and window settings. Unset fields of GameConfig are read
from SUDOKU_* environment variables (a .env file is loaded by the app).
"""

import os
from collections import namedtuple
from dataclasses import dataclass

Difficulty = namedtuple("Difficulty", ["name", "fill_percent", "bonus"])

# fill_percent is the share of cells left filled; bonus is awarded on
# moving to the next puzzle after a solve
DIFFICULTY_LEVELS = {
    1: Difficulty("Easy", 0.50, 10),
    2: Difficulty("Medium", 0.35, 50),
    3: Difficulty("Hard", 0.25, 100),
}

SUPPORTED_SIZES = (4, 9, 16)


def get_difficulty(level):
    try:
        return DIFFICULTY_LEVELS[level]
    except KeyError:
        raise ValueError(f"Unknown level {level!r}, expected one of {sorted(DIFFICULTY_LEVELS)}") from None


def _env_int(name):
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class GameConfig:
    """Configuration for a game window."""

    # Puzzle selection (None = read from environment, then default)
    grid_size: int = None
    level: int = None
    seed: int = None

    # Window
    window_width: int = 860
    window_height: int = 640
    fps: int = 60

    log_level: str = ""

    def __post_init__(self):
        if self.grid_size is None:
            self.grid_size = _env_int("SUDOKU_GRID_SIZE") or 9
        if self.level is None:
            self.level = _env_int("SUDOKU_LEVEL") or 1
        if self.seed is None:
            seed = _env_int("SUDOKU_SEED")
            self.seed = 1 if seed is None else seed
        if not self.log_level:
            self.log_level = os.getenv("SUDOKU_LOG_LEVEL", "INFO").upper()
        get_difficulty(self.level)
