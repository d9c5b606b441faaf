"""Hint cell selection."""

from __future__ import annotations
import random
from typing import Optional

from ..core.board import SudokuBoard, Position


def random_empty_cell(board: SudokuBoard, rng: Optional[random.Random] = None) -> Optional[Position]:
    """
    Pick an empty cell uniformly at random.

    Only chooses where a hint goes; the caller reveals the value from the
    solution and enforces the hint limit.

    Returns:
        (row, col) of an empty cell, or None if the board is full.
    """
    empty_cells = board.get_empty_cells()
    if not empty_cells:
        return None
    return (rng or random).choice(empty_cells)
