"""Sudoku grid representation backed by a numpy array."""

from __future__ import annotations
import numpy as np
from typing import List, Tuple, Optional, Set, Sequence

GRID_SIZE = 9
BOX_SIZE = 3
DIGITS = range(1, GRID_SIZE + 1)

Position = Tuple[int, int]


class SudokuBoard:
    """
    A 9x9 Sudoku grid.

    Cells hold 0 when empty and 1-9 otherwise. Rows and columns are
    indexed 0-8 in row-major order: ``board.get(row, col)``.
    """

    size = GRID_SIZE
    box_size = BOX_SIZE

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a Sudoku board.

        Args:
            grid: Optional initial 9x9 grid. If None, creates an empty board.
        """
        if grid is not None:
            grid = np.asarray(grid)
            if grid.shape != (GRID_SIZE, GRID_SIZE):
                raise ValueError(f"Grid shape must be ({GRID_SIZE}, {GRID_SIZE}), got {grid.shape}")
            if grid.min() < 0 or grid.max() > GRID_SIZE:
                raise ValueError(f"Grid values must be 0-{GRID_SIZE}")
            self.grid = grid.astype(np.int32)
        else:
            self.grid = np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int32)

    def copy(self) -> SudokuBoard:
        """Create a deep, writable copy of the board."""
        return SudokuBoard(self.grid.copy())

    def freeze(self) -> SudokuBoard:
        """Make the board read-only. Returns self for chaining."""
        self.grid.flags.writeable = False
        return self

    @property
    def frozen(self) -> bool:
        return not self.grid.flags.writeable

    @staticmethod
    def _check_position(row: int, col: int) -> None:
        if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
            raise ValueError(f"Position out of range: ({row}, {col})")

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        self._check_position(row, col)
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        self._check_position(row, col)
        if value < 0 or value > GRID_SIZE:
            raise ValueError(f"Value must be 0-{GRID_SIZE}, got {value}")
        self.grid[row, col] = value

    def clear(self, row: int, col: int) -> None:
        """Clear the cell at position (row, col)."""
        self.set(row, col, 0)

    def is_empty(self, row: int, col: int) -> bool:
        """Check if cell is empty (value is 0)."""
        return self.get(row, col) == 0

    def get_row(self, row: int) -> np.ndarray:
        """Get all values in a row."""
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        """Get all values in a column."""
        return self.grid[:, col]

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        box_row, box_col = box_origin(row, col)
        return self.grid[box_row:box_row + BOX_SIZE,
                        box_col:box_col + BOX_SIZE].flatten()

    def get_candidates(self, row: int, col: int) -> Set[int]:
        """
        Get all digits that could go into an empty cell.

        Returns an empty set if the cell is already filled.
        """
        if not self.is_empty(row, col):
            return set()

        used = set(self.get_row(row).tolist())
        used |= set(self.get_col(col).tolist())
        used |= set(self.get_box(row, col).tolist())

        return set(DIGITS) - used

    def get_peers(self, row: int, col: int) -> Set[Position]:
        """
        Get all peer cell positions (those in same row, column, or box).
        Args:
            row, col: Cell position.
        Returns:
            Set of (r, c) tuples, excluding (row, col) itself.
        """
        return set(peers_of(row, col))

    def get_empty_cells(self) -> List[Position]:
        """Get all empty cell positions in row-major order."""
        rows, cols = np.nonzero(self.grid == 0)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.grid == 0))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.grid != 0))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check that no row, column or box holds a digit twice.
        Empty cells are ignored, so a partial board can be valid.
        """
        for i in range(GRID_SIZE):
            if has_duplicates(self.get_row(i)) or has_duplicates(self.get_col(i)):
                return False

        for box_row in range(0, GRID_SIZE, BOX_SIZE):
            for box_col in range(0, GRID_SIZE, BOX_SIZE):
                if has_duplicates(self.get_box(box_row, box_col)):
                    return False

        return True

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_complete() and self.is_valid()

    def to_string(self) -> str:
        """Convert board to an 81-char string, 0 for empty cells."""
        return ''.join(str(v) for v in self.grid.flatten().tolist())

    @classmethod
    def from_string(cls, s: str) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: String of 81 characters. 0 or . for empty, 1-9 for digits.
               Whitespace is ignored.
        """
        s = ''.join(s.split())
        if len(s) != GRID_SIZE * GRID_SIZE:
            raise ValueError(f"String length must be {GRID_SIZE * GRID_SIZE}, got {len(s)}")

        values = []
        for c in s:
            if c == '.':
                values.append(0)
            elif c.isdigit():
                values.append(int(c))
            else:
                raise ValueError(f"Invalid cell character: {c!r}")

        return cls(np.array(values, dtype=np.int32).reshape(GRID_SIZE, GRID_SIZE))

    def to_list(self) -> List[List[Optional[int]]]:
        """Convert to nested lists with None for empty cells."""
        return [[v or None for v in row] for row in self.grid.tolist()]

    @classmethod
    def from_2d_list(cls, data: Sequence[Sequence[Optional[int]]]) -> SudokuBoard:
        """Create a board from a 2D list. Empty cells may be None or 0."""
        rows = [[0 if v is None else v for v in row] for row in data]
        return cls(np.array(rows, dtype=np.int32))

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (BOX_SIZE * 2 + 1)) + '+') * BOX_SIZE

        for i in range(GRID_SIZE):
            if i % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(GRID_SIZE):
                val = self.grid[i, j]
                row_str += ' .' if val == 0 else f' {val}'
                if (j + 1) % BOX_SIZE == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())


def box_origin(row: int, col: int) -> Position:
    """Top-left position of the 3x3 box containing (row, col)."""
    return (row // BOX_SIZE) * BOX_SIZE, (col // BOX_SIZE) * BOX_SIZE


def peers_of(row: int, col: int) -> List[Position]:
    """
    Positions sharing a row, column or box with (row, col), excluding it.

    Row peers come first, then column peers, then the remaining box peers.
    """
    peers = [(row, c) for c in range(GRID_SIZE) if c != col]
    peers += [(r, col) for r in range(GRID_SIZE) if r != row]
    box_row, box_col = box_origin(row, col)
    for r in range(box_row, box_row + BOX_SIZE):
        for c in range(box_col, box_col + BOX_SIZE):
            if r != row and c != col:
                peers.append((r, c))
    return peers


def empty_grid() -> SudokuBoard:
    """Return a 9x9 board with every cell empty."""
    return SudokuBoard()


def has_duplicates(values: np.ndarray) -> bool:
    non_zero = values[values != 0]
    return len(non_zero) != len(np.unique(non_zero))
