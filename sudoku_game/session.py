"""
Game session: the one mutable grid plus score, level, seed and undo log.

The front end keeps a single GameSession and calls into it for every
action; engine modules never see the session.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .config import get_difficulty
from .constraints import all_conflicts, find_conflicts, is_complete_solution
from .generator import carve_puzzle, generate_solution
from .grid import Position, copy_grid, format_grid, iter_positions, subgrid_size, validate_grid
from .hints import Hint, HintSelector
from .rng import SeededRandom

logger = logging.getLogger(__name__)

SOLVE_POINTS = 1


@dataclass(frozen=True)
class Move:
    """One reversible edit in the undo log."""

    position: Position
    old_value: Optional[int]
    new_value: Optional[int]
    was_hint: bool = False
    old_hinted: bool = False


class SolutionStatus(Enum):
    INCOMPLETE = "incomplete"
    INCORRECT = "incorrect"
    SOLVED = "solved"


@dataclass(frozen=True)
class SolutionCheck:
    status: SolutionStatus
    conflicts: frozenset = frozenset()


class GameSession:
    def __init__(self, size=9, level=1, seed=1):
        subgrid_size(size)
        get_difficulty(level)
        self.size = size
        self.level = level
        self.seed = seed
        self.score = 0
        self.grid = None
        self.solution = None
        self.prefilled = set()
        self.hinted = set()
        self.moves = []
        self.solved = False
        self.new_puzzle()

    @property
    def difficulty(self):
        return get_difficulty(self.level)

    # ------------------------------------------------------------------
    # Puzzle lifecycle
    # ------------------------------------------------------------------

    def new_puzzle(self):
        """Generates a fresh puzzle for the current size, level and seed. Score is kept."""
        rng = SeededRandom(self.seed)
        solution = generate_solution(self.size, rng)
        puzzle = carve_puzzle(solution, self.difficulty.fill_percent, rng)
        self._start(puzzle, solution)
        logger.info("New %dx%d %s puzzle (seed %d)", self.size, self.size,
                    self.difficulty.name, self.seed)
        logger.debug("Puzzle:\n%s", format_grid(puzzle))

    def _start(self, puzzle, solution):
        self.grid = puzzle
        self.solution = solution
        self.prefilled = {pos for pos in iter_positions(self.size)
                          if puzzle[pos.row][pos.col] is not None}
        self.hinted = set()
        self.moves = []
        self.solved = False

    def set_level(self, level):
        get_difficulty(level)
        self.level = level
        self.new_puzzle()

    def set_grid_size(self, size):
        subgrid_size(size)
        self.size = size
        self.new_puzzle()

    def set_seed(self, seed):
        self.seed = int(seed)
        self.new_puzzle()

    def start_new_game(self):
        """Back to seed 1 with the score reset."""
        self.seed = 1
        self.score = 0
        self.new_puzzle()

    def load_puzzle(self, grid):
        """Adopts an externally built grid; its filled cells become the givens."""
        size = validate_grid(grid)
        self.size = size
        self._start(copy_grid(grid), None)
        logger.info("Loaded %dx%d puzzle", size, size)

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------

    def is_prefilled(self, row, col):
        return (row, col) in self.prefilled

    def _check_position(self, row, col):
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise ValueError(f"Cell ({row},{col}) is outside a {self.size}x{self.size} grid")

    def _apply(self, pos, value):
        self.moves.append(Move(pos, self.grid[pos.row][pos.col], value,
                               old_hinted=pos in self.hinted))
        self.grid[pos.row][pos.col] = value
        self.solved = False

    def fill_cell(self, row, col, value):
        """
        Places `value` in an editable cell and returns the cells it now
        conflicts with. Returns None when the cell is a given.
        """
        self._check_position(row, col)
        if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= self.size:
            raise ValueError(f"Value must be between 1 and {self.size}, got {value!r}")
        if self.is_prefilled(row, col):
            return None

        pos = Position(row, col)
        self._apply(pos, value)
        self.hinted.discard(pos)
        return find_conflicts(self.grid, row, col)

    def clear_cell(self, row, col):
        """Empties an editable cell. Returns False if there was nothing to clear."""
        self._check_position(row, col)
        if self.is_prefilled(row, col) or self.grid[row][col] is None:
            return False
        pos = Position(row, col)
        self._apply(pos, None)
        self.hinted.discard(pos)
        return True

    def undo(self):
        """Reverts the last edit. Returns the undone Move, or None if the log is empty."""
        if not self.moves:
            return None
        move = self.moves.pop()
        pos = move.position
        self.grid[pos.row][pos.col] = move.old_value
        if move.old_hinted:
            self.hinted.add(pos)
        elif move.was_hint:
            self.hinted.discard(pos)
        self.solved = False
        return move

    def request_hint(self):
        """Runs the hint selector and applies a successful hint to the session."""
        result = HintSelector(self.grid, self.hinted).select_hint()
        if not isinstance(result, Hint):
            return result

        pos = result.position
        # The selector already placed the value; log it as an edit from empty
        self.moves.append(Move(pos, None, result.value, was_hint=True))
        self.hinted.add(pos)
        self.score = max(0, self.score + result.score_delta)
        logger.info("Hint %d at %s, score now %d", result.value, tuple(pos), self.score)
        return result

    # ------------------------------------------------------------------
    # Checking and scoring
    # ------------------------------------------------------------------

    def conflicts(self):
        return all_conflicts(self.grid)

    def check_solution(self):
        conflicts = frozenset(self.conflicts())
        if is_complete_solution(self.grid):
            if not self.solved:
                self.solved = True
                self.score += SOLVE_POINTS
                logger.info("Puzzle solved, score now %d", self.score)
            return SolutionCheck(SolutionStatus.SOLVED)
        if any(None in row for row in self.grid):
            return SolutionCheck(SolutionStatus.INCOMPLETE, conflicts)
        return SolutionCheck(SolutionStatus.INCORRECT, conflicts)

    def next_puzzle(self):
        """
        Awards the level bonus and moves on to the next seed. Only allowed
        after a solve; returns the points awarded.
        """
        if not self.solved:
            return 0
        bonus = self.difficulty.bonus
        self.score += bonus
        self.seed += 1
        self.new_puzzle()
        return bonus
