"""Exceptions raised at the edges of the sudoku_game package."""


class SudokuError(Exception):
    """Base exception for any errors defined in this package."""


class GenerationError(SudokuError, RuntimeError):
    """Raised when a solved grid could not be produced from an empty one.

    Backtracking over an empty 9x9 grid always succeeds, so reaching this
    means something is broken. Each retry starts again from a fresh empty
    grid rather than resuming a partially filled one.
    """


class MoveError(SudokuError, ValueError):
    """Raised when a session rejects a move: a given cell, a digit out of
    range, or a game that is not in progress.
    """


class HintLimitError(MoveError):
    """Raised when a hint is requested after the per-game limit is used up."""


class StoreError(SudokuError, IOError):
    """Raised when the persisted score store cannot be read or written."""
