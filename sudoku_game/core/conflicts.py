"""Conflict detection for player moves."""

from __future__ import annotations
from typing import FrozenSet, Set, TYPE_CHECKING

from .board import GRID_SIZE, Position, peers_of

if TYPE_CHECKING:
    from .board import SudokuBoard

ConflictSet = FrozenSet[Position]


def detect_conflicts(board: SudokuBoard, row: int, col: int, value: int) -> ConflictSet:
    """
    Find the cells clashing with a value that has just been placed.

    The board is expected to already hold ``value`` at (row, col). Every
    peer in the same row, column or box holding the same value is returned
    together with (row, col) itself. If no peer holds the value the result
    is empty.

    Unlike ``is_valid_placement`` this runs after the move: invalid
    placements are allowed and the returned cells are highlighted instead.
    """
    grid = board.grid
    clashes: Set[Position] = {
        (r, c) for r, c in peers_of(row, col) if grid[r, c] == value
    }
    if clashes:
        clashes.add((row, col))
    return frozenset(clashes)


def find_all_conflicts(board: SudokuBoard) -> ConflictSet:
    """Every filled cell that shares its digit with a peer."""
    conflicts: Set[Position] = set()
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            value = int(board.grid[row, col])
            if value and (row, col) not in conflicts:
                conflicts |= detect_conflicts(board, row, col, value)
    return frozenset(conflicts)
