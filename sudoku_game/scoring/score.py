"""Score calculation, time formatting and leaderboard helpers."""

from __future__ import annotations
import math
from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, List, Union

from ..generator import Difficulty

TIME_PENALTY_PER_MINUTE = 10
ERROR_PENALTY = 50
HINT_PENALTY = 100
LEADERBOARD_SIZE = 50

DifficultyLike = Union[Difficulty, str]


def calculate_score(time_ms: float, errors: int, hints_used: int, difficulty: DifficultyLike) -> int:
    """
    Compute the final score of a finished game.

    Starts from the difficulty's base score and subtracts 10 points per
    elapsed minute (fractional minutes truncated after scaling), 50 per
    error and 100 per hint. Never negative.

    Args:
        time_ms: Elapsed playing time in milliseconds.
        errors: Number of wrong digits entered.
        hints_used: Number of hints revealed.
        difficulty: A Difficulty or its value ("easy", "medium", "hard").
    """
    if time_ms < 0 or errors < 0 or hints_used < 0:
        raise ValueError(
            f"time, errors and hints must be non-negative, got {time_ms}, {errors}, {hints_used}"
        )

    base = Difficulty(difficulty).base_score
    time_penalty = math.floor(time_ms / 60000 * TIME_PENALTY_PER_MINUTE)
    error_penalty = errors * ERROR_PENALTY
    hint_penalty = hints_used * HINT_PENALTY

    return max(0, base - time_penalty - error_penalty - hint_penalty)


def format_time(ms: float) -> str:
    """Format milliseconds as MM:SS. Minutes do not roll over into hours."""
    total_seconds = int(ms // 1000)
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"


@dataclass(frozen=True)
class PlayerScore:
    """A finished game entered on the leaderboard."""
    player_name: str
    time: int
    difficulty: str
    errors: int
    hints_used: int
    date: str
    score: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> PlayerScore:
        return cls(
            player_name=data["player_name"],
            time=int(data["time"]),
            difficulty=Difficulty(data["difficulty"]).value,
            errors=int(data["errors"]),
            hints_used=int(data["hints_used"]),
            date=data["date"],
            score=int(data["score"]),
        )


def add_score(scores: Iterable[PlayerScore], score: PlayerScore, limit: int = LEADERBOARD_SIZE) -> List[PlayerScore]:
    """
    Return a new leaderboard with ``score`` added.

    Entries are sorted by score, highest first; ties keep insertion order.
    Only the top ``limit`` entries are kept.
    """
    board = list(scores)
    board.append(score)
    board.sort(key=lambda s: s.score, reverse=True)
    return board[:limit]


def filter_by_difficulty(scores: Iterable[PlayerScore], difficulty: DifficultyLike) -> List[PlayerScore]:
    """Leaderboard entries for a single difficulty, order preserved."""
    value = Difficulty(difficulty).value
    return [s for s in scores if s.difficulty == value]
