"""Runtime configuration for the game layer and the CLI."""

from __future__ import annotations
import os
from dataclasses import dataclass, field, replace
from typing import Any, Dict

ENV_HOME = "SUDOKU_GAME_HOME"
DEFAULT_HOME = os.path.join("~", ".sudoku_game")


def _default_data_dir() -> str:
    return os.path.expanduser(os.environ.get(ENV_HOME, DEFAULT_HOME))


@dataclass(frozen=True)
class GameConfig:
    """Settings shared by game sessions and the score repository."""
    max_hints: int = 3
    leaderboard_size: int = 50
    data_dir: str = field(default_factory=_default_data_dir)
    store_filename: str = "sudoku_game.json"

    def __post_init__(self):
        if self.max_hints < 0:
            raise ValueError(f"max_hints must be >= 0, got {self.max_hints}")
        if self.leaderboard_size < 1:
            raise ValueError(f"leaderboard_size must be >= 1, got {self.leaderboard_size}")

    @property
    def store_path(self) -> str:
        """Location of the JSON score store."""
        return os.path.join(self.data_dir, self.store_filename)

    @classmethod
    def from_env(cls, **overrides: Any) -> GameConfig:
        """
        Build a config from the environment.

        ``SUDOKU_GAME_HOME`` sets the data directory. Keyword overrides whose
        value is None are ignored, so argparse namespaces can be passed
        straight through.
        """
        config = cls()
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(config, **changes) if changes else config

    def to_dict(self) -> Dict[str, Any]:
        return {
            "max_hints": self.max_hints,
            "leaderboard_size": self.leaderboard_size,
            "data_dir": self.data_dir,
            "store_path": self.store_path,
        }
