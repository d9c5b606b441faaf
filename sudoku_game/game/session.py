"""Single-player game session built on the puzzle engine."""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Dict, List, Optional, Set

from ..config import GameConfig
from ..core.board import SudokuBoard, Position, GRID_SIZE
from ..core.conflicts import ConflictSet, detect_conflicts
from ..core.validator import is_grid_complete
from ..errors import MoveError, HintLimitError
from ..generator import Difficulty, Puzzle, SudokuGenerator
from ..scoring.score import PlayerScore, calculate_score
from .hints import random_empty_cell

logger = logging.getLogger(__name__)


class GameState(Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    PAUSED = "paused"
    COMPLETE = "complete"


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a single placement."""
    conflicts: ConflictSet
    correct: bool
    complete: bool


def _monotonic_ms() -> float:
    return time.monotonic() * 1000


class GameSession:
    """
    One game from puzzle generation to completion.

    Tracks the player's working grid, highlighted error cells, pencil
    notes, the error and hint counters, and playing time with pauses
    excluded. The game completes when ``is_grid_complete`` holds after a
    move or a hint.
    """

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.EASY,
        generator: Optional[SudokuGenerator] = None,
        config: Optional[GameConfig] = None,
        clock: Optional[Callable[[], float]] = None
    ):
        """
        Args:
            difficulty: Difficulty of the puzzle to generate.
            generator: Puzzle source; a fresh unseeded one by default.
            config: Hint limit and other settings.
            clock: Returns the current time in milliseconds.
        """
        self.difficulty = Difficulty(difficulty)
        self.generator = generator or SudokuGenerator()
        self.config = config or GameConfig()
        self.clock = clock or _monotonic_ms

        self.state = GameState.NOT_STARTED
        self.puzzle: Optional[Puzzle] = None
        self.grid: Optional[SudokuBoard] = None
        self.errors: Set[Position] = set()
        self.notes: Dict[Position, List[int]] = {}
        self.notes_mode = False
        self.error_count = 0
        self.hints_used = 0

        self._start_time = 0.0
        self._end_time: Optional[float] = None
        self._pause_started: Optional[float] = None
        self._paused_total = 0.0

    def start(self, puzzle: Optional[Puzzle] = None) -> Puzzle:
        """Begin a new game, generating a puzzle unless one is given."""
        self.puzzle = puzzle or self.generator.generate(self.difficulty)
        self.difficulty = self.puzzle.difficulty
        self.grid = self.puzzle.new_working_grid()
        self.errors = set()
        self.notes = {}
        self.notes_mode = False
        self.error_count = 0
        self.hints_used = 0

        self._start_time = self.clock()
        self._end_time = None
        self._pause_started = None
        self._paused_total = 0.0
        self.state = GameState.IN_PROGRESS
        logger.debug("Started %s game", self.difficulty.value)
        return self.puzzle

    @property
    def solution(self) -> SudokuBoard:
        return self.puzzle.solution

    @property
    def hints_remaining(self) -> int:
        return max(0, self.config.max_hints - self.hints_used)

    def is_given(self, row: int, col: int) -> bool:
        """True for cells filled in the original puzzle."""
        return not self.puzzle.puzzle.is_empty(row, col)

    def _require_in_progress(self) -> None:
        if self.state is not GameState.IN_PROGRESS:
            raise MoveError(f"Game is {self.state.value}")

    def _require_editable(self, row: int, col: int) -> None:
        self._require_in_progress()
        if self.is_given(row, col):
            raise MoveError(f"Cell ({row}, {col}) is part of the puzzle")

    def place(self, row: int, col: int, value: Optional[int]) -> Optional[MoveResult]:
        """
        Enter a digit, or clear the cell with None.

        In notes mode a digit toggles a pencil mark instead and None is
        returned. Conflicting cells are flagged rather than rejected; a digit
        that differs from the solution counts as an error.
        """
        self._require_editable(row, col)
        if value is not None and not 1 <= value <= GRID_SIZE:
            raise MoveError(f"Value must be 1-{GRID_SIZE}, got {value}")

        if self.notes_mode and value is not None:
            self.toggle_note(row, col, value)
            return None

        pos = (row, col)
        self.grid.set(row, col, value or 0)
        self.errors.discard(pos)
        self.notes.pop(pos, None)

        conflicts: ConflictSet = frozenset()
        correct = True
        if value is not None:
            conflicts = detect_conflicts(self.grid, row, col, value)
            self.errors |= conflicts
            correct = value == self.solution.get(row, col)
            if not correct:
                self.error_count += 1

        complete = self._check_complete()
        return MoveResult(conflicts=conflicts, correct=correct, complete=complete)

    def toggle_notes_mode(self) -> bool:
        """Switch between entering digits and pencil marks."""
        self.notes_mode = not self.notes_mode
        return self.notes_mode

    def toggle_note(self, row: int, col: int, value: int) -> List[int]:
        """Add or remove a pencil mark. Returns the cell's marks."""
        self._require_editable(row, col)
        pos = (row, col)
        marks = list(self.notes.get(pos, []))
        if value in marks:
            marks.remove(value)
        else:
            marks.append(value)

        if marks:
            self.notes[pos] = marks
        else:
            self.notes.pop(pos, None)
        return marks

    def check_errors(self) -> Set[Position]:
        """Flag every filled cell that disagrees with the solution."""
        self._require_in_progress()
        wrong = (self.grid.grid != 0) & (self.grid.grid != self.solution.grid)
        rows, cols = wrong.nonzero()
        self.errors = {(int(r), int(c)) for r, c in zip(rows, cols)}
        return set(self.errors)

    def hint(self) -> Optional[Position]:
        """
        Reveal the solution value of a random empty cell.

        Returns:
            The revealed position, or None if no cell is empty.

        Raises:
            HintLimitError: when no hints remain.
        """
        self._require_in_progress()
        if self.hints_used >= self.config.max_hints:
            raise HintLimitError(f"All {self.config.max_hints} hints have been used")

        pos = random_empty_cell(self.grid, self.generator.rng)
        if pos is None:
            return None

        row, col = pos
        self.grid.set(row, col, self.solution.get(row, col))
        self.notes.pop(pos, None)
        self.hints_used += 1
        self._check_complete()
        return pos

    def pause(self) -> None:
        self._require_in_progress()
        self._pause_started = self.clock()
        self.state = GameState.PAUSED

    def resume(self) -> None:
        if self.state is not GameState.PAUSED:
            raise MoveError(f"Game is {self.state.value}")
        self._paused_total += self.clock() - self._pause_started
        self._pause_started = None
        self.state = GameState.IN_PROGRESS

    def elapsed_ms(self) -> int:
        """Playing time so far, excluding pauses."""
        if self.state is GameState.NOT_STARTED:
            return 0
        if self._end_time is not None:
            now = self._end_time
        elif self._pause_started is not None:
            now = self._pause_started
        else:
            now = self.clock()
        return int(now - self._start_time - self._paused_total)

    def _check_complete(self) -> bool:
        if not is_grid_complete(self.grid):
            return False
        self._end_time = self.clock()
        self.state = GameState.COMPLETE
        logger.debug("Completed %s game in %d ms", self.difficulty.value, self.elapsed_ms())
        return True

    def score(self) -> int:
        """Score for the time, errors and hints so far."""
        return calculate_score(self.elapsed_ms(), self.error_count, self.hints_used, self.difficulty)

    def result(self, player_name: str, now: Optional[datetime] = None) -> PlayerScore:
        """Leaderboard entry for a completed game."""
        if self.state is not GameState.COMPLETE:
            raise MoveError("Game is not complete")
        now = now or datetime.now()
        return PlayerScore(
            player_name=player_name,
            time=self.elapsed_ms(),
            difficulty=self.difficulty.value,
            errors=self.error_count,
            hints_used=self.hints_used,
            date=now.isoformat(),
            score=self.score(),
        )
