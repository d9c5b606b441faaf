"""Sudoku puzzle engine: generation, validation, conflicts, hints and scoring."""

from .core import SudokuBoard, empty_grid, is_valid_placement, is_grid_complete, detect_conflicts
from .generator import Difficulty, Puzzle, SudokuGenerator, generate_puzzle, generate_solved, remove_cells, solve
from .game import GameSession, random_empty_cell
from .scoring import calculate_score, format_time

__version__ = "1.0.0"
