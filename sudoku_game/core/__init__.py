"""Core module for Sudoku grid representation, validation and conflicts."""

from .board import SudokuBoard, Position, empty_grid
from .validator import is_valid_placement, is_grid_complete, has_unique_solution
from .conflicts import ConflictSet, detect_conflicts, find_all_conflicts

__all__ = [
    "SudokuBoard",
    "Position",
    "empty_grid",
    "is_valid_placement",
    "is_grid_complete",
    "has_unique_solution",
    "ConflictSet",
    "detect_conflicts",
    "find_all_conflicts",
]
