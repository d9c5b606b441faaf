"""Sudoku puzzle generator with fixed difficulty presets."""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ..core.board import SudokuBoard, GRID_SIZE, DIGITS, empty_grid
from ..core.validator import is_valid_placement, has_unique_solution
from ..errors import GenerationError

logger = logging.getLogger(__name__)

TOTAL_CELLS = GRID_SIZE * GRID_SIZE


class Difficulty(Enum):
    """Difficulty levels for Sudoku puzzles."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def cells_to_remove(self) -> int:
        """Number of cells cleared from the solved grid."""
        removals = {
            Difficulty.EASY: 30,     # 51 clues
            Difficulty.MEDIUM: 45,   # 36 clues
            Difficulty.HARD: 55,     # 26 clues
        }
        return removals[self]

    @property
    def clues(self) -> int:
        """Number of filled cells left in the puzzle."""
        return TOTAL_CELLS - self.cells_to_remove

    @property
    def base_score(self) -> int:
        """Score awarded before time, error and hint penalties."""
        scores = {
            Difficulty.EASY: 1000,
            Difficulty.MEDIUM: 2000,
            Difficulty.HARD: 3000,
        }
        return scores[self]


@dataclass(frozen=True)
class Puzzle:
    """
    A puzzle and the solution it was cut from.

    Both boards are read-only. Every filled cell of ``puzzle`` equals the
    matching cell of ``solution``. Players work on ``new_working_grid()``.
    """
    puzzle: SudokuBoard
    solution: SudokuBoard
    difficulty: Difficulty

    def __post_init__(self):
        # Own private frozen copies so callers cannot alias them
        object.__setattr__(self, "puzzle", self.puzzle.copy().freeze())
        object.__setattr__(self, "solution", self.solution.copy().freeze())

    def new_working_grid(self) -> SudokuBoard:
        """A writable copy of the puzzle for the player to fill in."""
        return self.puzzle.copy()

    def to_dict(self) -> dict:
        return {
            "difficulty": self.difficulty.value,
            "puzzle": self.puzzle.to_string(),
            "solution": self.solution.to_string(),
            "clues": self.puzzle.count_filled(),
        }


def solve(board: SudokuBoard, rng: Optional[random.Random] = None) -> bool:
    """
    Fill the board in place using randomized backtracking.

    The first empty cell in row-major order gets the digits 1-9 in shuffled
    order; each digit that fits is placed and the search recurses. A digit
    that leads nowhere is cleared again before the next one is tried.

    Returns:
        True once no empty cell remains, False if this branch is a dead end.
    """
    rng = rng or random
    empty = (board.grid == 0).ravel().nonzero()[0]
    if not len(empty):
        return True

    row, col = divmod(int(empty[0]), GRID_SIZE)
    digits = list(DIGITS)
    rng.shuffle(digits)

    for value in digits:
        if is_valid_placement(board, row, col, value):
            board.set(row, col, value)
            if solve(board, rng):
                return True
            board.clear(row, col)  # Backtrack

    return False


def generate_solved(rng: Optional[random.Random] = None, max_attempts: int = 3) -> SudokuBoard:
    """
    Generate a complete valid grid.

    Solving an empty grid should never fail. If it does, the partially
    filled grid is thrown away and a new empty one is tried.

    Raises:
        GenerationError: if every attempt fails.
    """
    for attempt in range(1, max_attempts + 1):
        board = empty_grid()
        if solve(board, rng):
            return board
        logger.warning("Solver failed on an empty grid (attempt %d/%d)", attempt, max_attempts)

    raise GenerationError(f"Could not generate a solved grid in {max_attempts} attempts")


def remove_cells(
    solution: SudokuBoard,
    difficulty: Difficulty,
    rng: Optional[random.Random] = None,
    ensure_unique: bool = False
) -> SudokuBoard:
    """
    Clear cells from a solved grid to create a puzzle.

    All 81 positions are shuffled and the first ``cells_to_remove`` of them
    are cleared. The result is not checked for a unique solution unless
    ``ensure_unique`` is set, in which case a removal that would allow a
    second solution is undone and the puzzle may keep extra clues.
    """
    rng = rng or random
    difficulty = Difficulty(difficulty)
    puzzle = solution.copy()

    positions = [(row, col) for row in range(GRID_SIZE) for col in range(GRID_SIZE)]
    rng.shuffle(positions)

    if not ensure_unique:
        for row, col in positions[:difficulty.cells_to_remove]:
            puzzle.clear(row, col)
        return puzzle

    removed = 0
    for row, col in positions:
        if removed >= difficulty.cells_to_remove:
            break

        original_value = puzzle.get(row, col)
        puzzle.clear(row, col)

        if has_unique_solution(puzzle):
            removed += 1
        else:
            puzzle.set(row, col, original_value)

    if removed < difficulty.cells_to_remove:
        logger.debug("Unique puzzle kept %d extra clues", difficulty.cells_to_remove - removed)
    return puzzle


def generate_puzzle(
    difficulty: Difficulty,
    rng: Optional[random.Random] = None,
    ensure_unique: bool = False
) -> Puzzle:
    """
    Generate a puzzle together with its solution.

    The solution is returned so moves can be checked without solving again.
    """
    difficulty = Difficulty(difficulty)
    solution = generate_solved(rng)
    puzzle = remove_cells(solution, difficulty, rng, ensure_unique=ensure_unique)
    logger.debug("Generated %s puzzle with %d clues", difficulty.value, puzzle.count_filled())
    return Puzzle(puzzle, solution, difficulty)


class SudokuGenerator:
    """
    Seeded generator for Sudoku puzzles.

    Algorithm:
    1. Fill an empty grid using randomized backtracking
    2. Clear a fixed number of cells based on difficulty
    """

    def __init__(self, seed: Optional[int] = None, ensure_unique: bool = False):
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducibility.
            ensure_unique: Only clear cells that keep the solution unique.
        """
        self.rng = random.Random(seed)
        self.ensure_unique = ensure_unique

    def generate_solved(self) -> SudokuBoard:
        """Generate a complete valid grid."""
        return generate_solved(self.rng)

    def remove_cells(self, solution: SudokuBoard, difficulty: Difficulty) -> SudokuBoard:
        """Clear cells from ``solution`` for the given difficulty."""
        return remove_cells(solution, difficulty, self.rng, ensure_unique=self.ensure_unique)

    def generate(self, difficulty: Difficulty = Difficulty.MEDIUM) -> Puzzle:
        """Generate a puzzle with its solution."""
        return generate_puzzle(difficulty, self.rng, ensure_unique=self.ensure_unique)

    def generate_batch(self, count: int, difficulty: Difficulty = Difficulty.MEDIUM) -> List[Puzzle]:
        """
        Generate multiple puzzles of the same difficulty.

        Args:
            count: Number of puzzles to generate.
            difficulty: Desired difficulty level.
        """
        return [self.generate(difficulty) for _ in range(count)]
