"""Tests for the command-line interface."""

import json

import pytest
from sudoku_game import cli
from sudoku_game.config import GameConfig
from sudoku_game.core.board import SudokuBoard
from sudoku_game.game.session import GameSession, GameState
from sudoku_game.scoring.store import JsonFileStore, ScoreRepository


class TestGenerate:

    def test_json_output(self, tmp_path, capsys):
        out = tmp_path / "puzzles.json"
        cli.main(["generate", "-n", "2", "-d", "hard", "-s", "7", "-q", "-o", str(out)])

        data = json.loads(out.read_text())
        assert len(data) == 2
        for item in data:
            assert item["difficulty"] == "hard"
            assert item["clues"] == 26
            assert SudokuBoard.from_string(item["solution"]).is_solved()
        assert "Total puzzles generated: 2" in capsys.readouterr().out

    def test_all_difficulties(self, capsys):
        puzzles = cli.run(["generate", "-n", "1", "-d", "all", "-s", "1"])
        assert [p["difficulty"] for p in puzzles] == ["easy", "medium", "hard"]
        assert "Easy Puzzle 1 (51 clues)" in capsys.readouterr().out


class TestCheck:

    def test_complete(self, solved_board, capsys):
        assert cli.run(["check", "-p", solved_board.to_string()])
        out = capsys.readouterr().out
        assert "No conflicts" in out
        assert "✓ Complete" in out

    def test_conflicts(self, capsys):
        grid = "55" + "0" * 79
        assert not cli.run(["check", "-p", grid])
        assert "Conflicts: (1,1), (1,2)" in capsys.readouterr().out

    def test_bad_grid(self):
        with pytest.raises(SystemExit):
            cli.main(["check", "-p", "123"])


class TestScore:

    def test_score(self, capsys):
        assert cli.run(["score", "-t", "61000", "-e", "1", "--hints", "1", "-d", "hard"]) == 3000 - 10 - 50 - 100
        assert "Time: 01:01" in capsys.readouterr().out


class RecordingSession(GameSession):
    instances = []

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        RecordingSession.instances.append(self)


class TestPlay:

    def _args(self, tmp_path, *extra):
        args = cli.build_parser().parse_args(["--data-dir", str(tmp_path), "play", "-s", "5", *extra])
        return args, GameConfig.from_env(data_dir=str(tmp_path))

    def test_full_game_saved(self, tmp_path, monkeypatch, capsys):
        RecordingSession.instances = []
        monkeypatch.setattr(cli, "GameSession", RecordingSession)

        def moves():
            yield "h"
            yield "c"
            game = RecordingSession.instances[0]
            for row, col in game.grid.get_empty_cells():
                yield f"{row + 1} {col + 1} {game.solution.get(row, col)}"

        answers = moves()
        args, config = self._args(tmp_path, "--name", "ada")
        session = cli.cmd_play(args, config, input_fn=lambda prompt: next(answers))

        assert session.state is GameState.COMPLETE
        assert session.hints_used == 1
        repo = ScoreRepository(JsonFileStore(config.store_path), config)
        scores = repo.get_scores()
        assert [s.player_name for s in scores] == ["ada"]
        assert repo.get_game_stats().games_won == 1
        assert "Saved ada" in capsys.readouterr().out

    def test_quit(self, tmp_path, capsys):
        answers = iter(["n", "p", "p", "bogus", "q"])
        args, config = self._args(tmp_path)
        assert cli.cmd_play(args, config, input_fn=lambda prompt: next(answers)) is None
        out = capsys.readouterr().out
        assert "Notes mode on" in out
        assert "Game abandoned." in out

    def test_end_of_input_quits(self, tmp_path):
        def eof(prompt):
            raise EOFError

        args, config = self._args(tmp_path)
        assert cli.cmd_play(args, config, input_fn=eof) is None


class TestLeaderboardAndStats:

    def test_empty(self, tmp_path, capsys):
        assert cli.run(["--data-dir", str(tmp_path), "leaderboard"]) == []
        assert "No scores yet." in capsys.readouterr().out

    def test_stats(self, tmp_path, capsys):
        stats = cli.run(["--data-dir", str(tmp_path), "stats"])
        assert stats.games_played == 0
        assert "Easy     best --:--" in capsys.readouterr().out


def test_no_command():
    with pytest.raises(SystemExit):
        cli.main([])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
