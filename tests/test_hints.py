"""Unit tests for hint cell selection."""

import random

import pytest
from sudoku_game.core.board import empty_grid
from sudoku_game.game.hints import random_empty_cell


class TestRandomEmptyCell:

    def test_full_grid(self, solved_board):
        assert random_empty_cell(solved_board) is None

    def test_single_empty_cell(self, solved_board):
        solved_board.clear(6, 2)
        rng = random.Random(0)
        for _ in range(20):
            assert random_empty_cell(solved_board, rng) == (6, 2)

    def test_only_empty_cells_chosen(self, solved_board):
        for pos in [(0, 0), (4, 4), (8, 1)]:
            solved_board.clear(*pos)
        rng = random.Random(1)
        picks = {random_empty_cell(solved_board, rng) for _ in range(100)}
        assert picks == {(0, 0), (4, 4), (8, 1)}

    def test_does_not_fill(self):
        board = empty_grid()
        random_empty_cell(board)
        assert board.count_empty() == 81


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
