from .constraints import (
    all_conflicts, candidates, find_conflicts, is_complete_solution, is_safe_to_place,
)
from .errors import InvalidSizeError, SudokuError, UnsolvableStateError
from .generator import (
    PuzzleCarver, SolutionGenerator, carve_puzzle, cells_to_clear, generate_solution,
)
from .grid import Position, format_grid
from .hints import Hint, HintSelector, NoHint, NoHintReason
from .rng import SeededRandom
from .session import GameSession, Move, SolutionCheck, SolutionStatus
from .solver import BacktrackingSolver, count_solutions, has_unique_solution
