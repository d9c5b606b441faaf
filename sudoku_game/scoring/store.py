"""Persistence for leaderboard entries and game statistics.

Scoring functions never read or write storage. Callers pass a
``KeyValueStore`` to ``ScoreRepository``, which does the reads and writes.
"""

from __future__ import annotations
import copy
import json
import logging
import os
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..config import GameConfig
from ..errors import StoreError
from .score import PlayerScore, DifficultyLike, add_score, filter_by_difficulty
from .stats import GameStats, record_win

logger = logging.getLogger(__name__)

SCORES_KEY = "scores"
STATS_KEY = "stats"


class KeyValueStore(ABC):
    """Abstract store holding whole JSON-serializable records by name."""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return the record stored under key, or None."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Replace the record stored under key."""


class MemoryStore(KeyValueStore):
    """In-process store, mainly for tests and one-off sessions."""

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = copy.deepcopy(data) if data else {}

    def get(self, key: str) -> Optional[Any]:
        return copy.deepcopy(self._data.get(key))

    def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)


class JsonFileStore(KeyValueStore):
    """Store backed by a single JSON document on disk."""

    def __init__(self, path: str):
        self.path = path

    def _load(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise StoreError(f"Cannot read score store {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StoreError(f"Score store {self.path} does not hold a JSON object")
        return data

    def get(self, key: str) -> Optional[Any]:
        return self._load().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._load()
        data[key] = value
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        try:
            with open(self.path, "w") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            raise StoreError(f"Cannot write score store {self.path}: {e}") from e
        logger.debug("Wrote %s to %s", key, self.path)


class ScoreRepository:
    """Reads and writes the leaderboard and stats records of a store."""

    def __init__(self, store: KeyValueStore, config: Optional[GameConfig] = None):
        self.store = store
        self.config = config or GameConfig()

    def get_scores(self) -> List[PlayerScore]:
        """Leaderboard entries, highest score first."""
        return [PlayerScore.from_dict(d) for d in self.store.get(SCORES_KEY) or []]

    def get_scores_by_difficulty(self, difficulty: DifficultyLike) -> List[PlayerScore]:
        return filter_by_difficulty(self.get_scores(), difficulty)

    def save_score(self, score: PlayerScore) -> List[PlayerScore]:
        """Insert a score, keeping the leaderboard sorted and capped."""
        scores = add_score(self.get_scores(), score, limit=self.config.leaderboard_size)
        self.store.set(SCORES_KEY, [s.to_dict() for s in scores])
        return scores

    def get_game_stats(self) -> GameStats:
        """Stored stats, writing fresh defaults the first time."""
        data = self.store.get(STATS_KEY)
        if data is None:
            stats = GameStats()
            self.save_game_stats(stats)
            return stats
        return GameStats.from_dict(data)

    def save_game_stats(self, stats: GameStats) -> None:
        self.store.set(STATS_KEY, stats.to_dict())

    def record_completion(self, result: PlayerScore, now=None) -> GameStats:
        """Fold a finished game into the stats and save its score."""
        stats = record_win(
            self.get_game_stats(),
            result.time,
            result.difficulty,
            hints_used=result.hints_used,
            errors=result.errors,
            now=now,
        )
        self.save_game_stats(stats)
        self.save_score(result)
        return stats
