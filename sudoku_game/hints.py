# =========================================================================
# HINT SYSTEM
# Offers forced cells only, and only when revealing one keeps the puzzle
# uniquely solvable.
# =========================================================================

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .constraints import candidates
from .grid import Position, iter_positions
from .solver import count_solutions

logger = logging.getLogger(__name__)

HINT_PENALTY = 1


class NoHintReason(Enum):
    NO_FORCED_CELL = "no cell has a single candidate"
    BREAKS_UNIQUENESS = "the forced value would leave more than one solution"
    NO_SOLUTION = "the current entries cannot be completed"


@dataclass(frozen=True)
class Hint:
    position: Position
    value: int
    score_delta: int = -HINT_PENALTY


@dataclass(frozen=True)
class NoHint:
    reason: NoHintReason
    position: Optional[Position] = None


class HintSelector:
    def __init__(self, grid, hinted=()):
        self.grid = grid
        self.hinted = set(hinted)

    def find_forced_cell(self):
        """
        First empty, not yet hinted cell in row-major order whose candidate
        set has exactly one member. Returns (Position, value) or None.
        """
        for pos in iter_positions(len(self.grid)):
            if self.grid[pos.row][pos.col] is not None or pos in self.hinted:
                continue
            possible = candidates(self.grid, pos.row, pos.col)
            if len(possible) == 1:
                return pos, next(iter(possible))
        return None

    def select_hint(self):
        """
        Places the forced value in the grid if the result still has exactly
        one solution. Otherwise the grid is left untouched.
        """
        forced = self.find_forced_cell()
        if forced is None:
            return NoHint(NoHintReason.NO_FORCED_CELL)

        pos, value = forced
        self.grid[pos.row][pos.col] = value
        count = count_solutions(self.grid)
        if count == 1:
            return Hint(pos, value)

        self.grid[pos.row][pos.col] = None
        if count == 0:
            logger.info("Forced value %d at %s rejected: no completion exists", value, tuple(pos))
            return NoHint(NoHintReason.NO_SOLUTION, pos)
        logger.info("Forced value %d at %s rejected: puzzle not unique", value, tuple(pos))
        return NoHint(NoHintReason.BREAKS_UNIQUENESS, pos)
