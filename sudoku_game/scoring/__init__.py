"""Scoring, statistics and leaderboard persistence."""

from .score import PlayerScore, calculate_score, format_time, add_score, filter_by_difficulty
from .stats import GameStats, record_win
from .store import KeyValueStore, MemoryStore, JsonFileStore, ScoreRepository

__all__ = [
    "PlayerScore",
    "calculate_score",
    "format_time",
    "add_score",
    "filter_by_difficulty",
    "GameStats",
    "record_win",
    "KeyValueStore",
    "MemoryStore",
    "JsonFileStore",
    "ScoreRepository",
]
