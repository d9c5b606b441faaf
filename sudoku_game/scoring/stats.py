"""Aggregate player statistics across finished games."""

from __future__ import annotations
import copy
from dataclasses import dataclass, field, asdict
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from ..generator import Difficulty
from .score import DifficultyLike


def _per_difficulty(default: Any = None) -> Dict[str, Any]:
    return {d.value: default for d in Difficulty}


@dataclass
class GameStats:
    """Counters, streaks and per-difficulty times for one player."""
    games_played: int = 0
    games_won: int = 0
    best_time: Dict[str, Optional[int]] = field(default_factory=_per_difficulty)
    average_time: Dict[str, Optional[int]] = field(default_factory=_per_difficulty)
    wins_by_difficulty: Dict[str, int] = field(default_factory=lambda: _per_difficulty(0))
    total_hints_used: int = 0
    total_errors: int = 0
    longest_streak: int = 0
    current_streak: int = 0
    last_played: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GameStats:
        stats = cls()
        for key, value in data.items():
            if not hasattr(stats, key):
                continue
            if isinstance(value, dict):
                merged = dict(getattr(stats, key))
                merged.update(value)
                value = merged
            setattr(stats, key, value)
        return stats


def _update_streak(stats: GameStats, now: datetime) -> None:
    if stats.last_played is None:
        stats.current_streak = 1
    else:
        last = datetime.fromisoformat(stats.last_played).date()
        today = now.date()
        if last == today - timedelta(days=1):
            stats.current_streak += 1
        elif last != today:
            stats.current_streak = 1
        # Already played today: streak unchanged
    stats.longest_streak = max(stats.longest_streak, stats.current_streak)


def record_win(
    stats: GameStats,
    time_ms: int,
    difficulty: DifficultyLike,
    hints_used: int = 0,
    errors: int = 0,
    now: Optional[datetime] = None
) -> GameStats:
    """
    Return a copy of ``stats`` updated with a completed game.

    Best time keeps the minimum. Average time is the rounded running mean
    over wins at that difficulty. The streak grows when the previous game
    was played yesterday, is kept when it was played today and restarts at
    1 otherwise.
    """
    now = now or datetime.now()
    key = Difficulty(difficulty).value
    updated = copy.deepcopy(stats)

    updated.games_played += 1
    updated.games_won += 1
    updated.total_hints_used += hints_used
    updated.total_errors += errors

    best = updated.best_time.get(key)
    if best is None or time_ms < best:
        updated.best_time[key] = time_ms

    wins = updated.wins_by_difficulty.get(key, 0) + 1
    updated.wins_by_difficulty[key] = wins
    average = updated.average_time.get(key)
    if average is None:
        updated.average_time[key] = time_ms
    else:
        updated.average_time[key] = round((average * (wins - 1) + time_ms) / wins)

    _update_streak(updated, now)
    updated.last_played = now.isoformat()
    return updated
