"""Validation utilities for Sudoku grids."""

from __future__ import annotations
from typing import TYPE_CHECKING

from .board import GRID_SIZE, BOX_SIZE, box_origin, has_duplicates

if TYPE_CHECKING:
    from .board import SudokuBoard


def is_valid_placement(board: SudokuBoard, row: int, col: int, value: int) -> bool:
    """
    Check if placing a value at (row, col) is valid.

    The target cell is treated as not yet placed: whatever it currently
    holds is ignored, so a filled cell can be re-checked against its peers.

    Args:
        board: The Sudoku board.
        row: Row index.
        col: Column index.
        value: Value to check (1 to 9).

    Returns:
        True if value does not already appear in the row, column or box.
    """
    if value < 1 or value > GRID_SIZE:
        return False

    grid = board.grid

    # Check row
    for c in range(GRID_SIZE):
        if c != col and grid[row, c] == value:
            return False

    # Check column
    for r in range(GRID_SIZE):
        if r != row and grid[r, col] == value:
            return False

    # Check box
    box_row, box_col = box_origin(row, col)
    for r in range(box_row, box_row + BOX_SIZE):
        for c in range(box_col, box_col + BOX_SIZE):
            if (r != row or c != col) and grid[r, c] == value:
                return False

    return True


def is_grid_complete(board: SudokuBoard) -> bool:
    """
    Check whether the grid is fully filled with no duplicates.

    This is the check that ends a game: it is True exactly when every cell
    is filled and every row, column and box holds distinct digits.
    """
    if board.count_empty():
        return False

    for i in range(GRID_SIZE):
        if has_duplicates(board.get_row(i)):
            return False

    for j in range(GRID_SIZE):
        if has_duplicates(board.get_col(j)):
            return False

    for box_row in range(0, GRID_SIZE, BOX_SIZE):
        for box_col in range(0, GRID_SIZE, BOX_SIZE):
            if has_duplicates(board.get_box(box_row, box_col)):
                return False

    return True


def count_solutions(board: SudokuBoard, limit: int = 2) -> int:
    """
    Count the number of solutions for a puzzle (up to limit).

    Uses backtracking and stops early once limit is reached.

    Args:
        board: The puzzle board.
        limit: Maximum solutions to count before stopping.

    Returns:
        Number of solutions found (up to limit).
    """
    if not board.is_valid():
        return 0

    work_board = board.copy()
    count = [0]  # Use list to allow modification in nested function

    def backtrack() -> bool:
        """Returns True if limit reached."""
        empty_cells = work_board.get_empty_cells()
        if not empty_cells:
            count[0] += 1
            return count[0] >= limit

        # MRV: pick the cell with the fewest candidates
        best_cell = None
        best_candidates = None
        for cell in empty_cells:
            candidates = work_board.get_candidates(*cell)
            if best_candidates is None or len(candidates) < len(best_candidates):
                best_cell, best_candidates = cell, candidates
                if not candidates:
                    return False

        row, col = best_cell
        for val in sorted(best_candidates):
            work_board.set(row, col, val)
            if backtrack():
                return True
            work_board.clear(row, col)

        return False

    backtrack()
    return count[0]


def has_unique_solution(board: SudokuBoard) -> bool:
    """Check if a puzzle has exactly one solution."""
    return count_solutions(board, limit=2) == 1


def validate_solution(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is complete, valid and keeps every puzzle clue.
    """
    clues = puzzle.grid != 0
    if (puzzle.grid[clues] != solution.grid[clues]).any():
        return False

    return is_grid_complete(solution)
