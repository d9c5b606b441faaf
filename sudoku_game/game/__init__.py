"""Game layer: hint selection and the single-player session."""

from .hints import random_empty_cell
from .session import GameSession, GameState, MoveResult

__all__ = ["random_empty_cell", "GameSession", "GameState", "MoveResult"]
