"""Generator module for creating Sudoku puzzles."""

from .generator import (
    Difficulty,
    Puzzle,
    SudokuGenerator,
    generate_puzzle,
    generate_solved,
    remove_cells,
    solve,
)

__all__ = [
    "Difficulty",
    "Puzzle",
    "SudokuGenerator",
    "generate_puzzle",
    "generate_solved",
    "remove_cells",
    "solve",
]
