"""Unit tests for score persistence."""

import json
from datetime import datetime

import pytest
from sudoku_game.config import GameConfig
from sudoku_game.errors import StoreError
from sudoku_game.scoring.score import PlayerScore
from sudoku_game.scoring.stats import GameStats
from sudoku_game.scoring.store import (
    MemoryStore,
    JsonFileStore,
    ScoreRepository,
    SCORES_KEY,
    STATS_KEY,
)


def _entry(name, score, difficulty="easy", time=60000):
    return PlayerScore(name, time, difficulty, 1, 2, "2026-03-01T10:00:00", score)


class TestMemoryStore:

    def test_get_missing(self):
        assert MemoryStore().get("nothing") is None

    def test_values_are_copied(self):
        store = MemoryStore()
        value = {"a": [1]}
        store.set("k", value)
        value["a"].append(2)
        assert store.get("k") == {"a": [1]}


class TestJsonFileStore:

    def test_round_trip(self, tmp_path):
        path = tmp_path / "nested" / "store.json"
        store = JsonFileStore(str(path))
        assert store.get(SCORES_KEY) is None
        store.set(SCORES_KEY, [{"x": 1}])
        store.set(STATS_KEY, {"games_played": 2})
        assert JsonFileStore(str(path)).get(SCORES_KEY) == [{"x": 1}]
        assert json.loads(path.read_text())[STATS_KEY] == {"games_played": 2}

    def test_corrupt_file(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("{not json")
        with pytest.raises(StoreError):
            JsonFileStore(str(path)).get(SCORES_KEY)


class TestScoreRepository:

    def test_stats_initialized_once(self):
        store = MemoryStore()
        repo = ScoreRepository(store)
        assert repo.get_game_stats() == GameStats()
        assert store.get(STATS_KEY) == GameStats().to_dict()

    def test_save_score_sorted_and_capped(self):
        repo = ScoreRepository(MemoryStore(), GameConfig(leaderboard_size=3, data_dir="."))
        for name, points in [("a", 10), ("b", 40), ("c", 30), ("d", 20)]:
            repo.save_score(_entry(name, points))
        assert [s.player_name for s in repo.get_scores()] == ["b", "c", "d"]

    def test_scores_by_difficulty(self):
        repo = ScoreRepository(MemoryStore())
        repo.save_score(_entry("a", 10, "hard"))
        repo.save_score(_entry("b", 20, "easy"))
        assert [s.player_name for s in repo.get_scores_by_difficulty("hard")] == ["a"]

    def test_record_completion(self, tmp_path):
        repo = ScoreRepository(JsonFileStore(str(tmp_path / "s.json")))
        now = datetime(2026, 3, 1, 12, 0)
        stats = repo.record_completion(_entry("ada", 900, "medium", time=240000), now=now)

        assert stats.games_won == 1
        assert stats.best_time["medium"] == 240000
        assert stats.total_errors == 1
        assert stats.total_hints_used == 2
        assert repo.get_game_stats() == stats
        assert repo.get_scores() == [_entry("ada", 900, "medium", time=240000)]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
