"""Unit tests for the Sudoku board."""

import numpy as np
import pytest
from sudoku_game.core.board import SudokuBoard, empty_grid, peers_of


class TestSudokuBoard:
    """Tests for SudokuBoard class."""

    def test_empty_grid(self):
        """empty_grid returns 81 empty cells."""
        board = empty_grid()
        assert board.size == 9
        assert board.box_size == 3
        assert board.count_empty() == 81
        assert board.count_filled() == 0
        assert board.to_list() == [[None] * 9 for _ in range(9)]

    def test_empty_grids_are_independent(self):
        first = empty_grid()
        second = empty_grid()
        first.set(0, 0, 5)
        assert second.is_empty(0, 0)

    def test_set_and_get(self):
        """Test setting and getting values."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        assert board.get(0, 0) == 5
        assert not board.is_empty(0, 0)

        board.clear(0, 0)
        assert board.is_empty(0, 0)

    def test_out_of_range_position_rejected(self):
        board = SudokuBoard()
        with pytest.raises(ValueError):
            board.get(-1, 0)
        with pytest.raises(ValueError):
            board.set(0, 9, 1)

    def test_out_of_range_value_rejected(self):
        board = SudokuBoard()
        with pytest.raises(ValueError):
            board.set(0, 0, 10)

    def test_bad_shape_rejected(self):
        with pytest.raises(ValueError):
            SudokuBoard(np.zeros((4, 4), dtype=np.int32))

    def test_get_candidates(self):
        """Test getting valid candidates for a cell."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        board.set(0, 1, 3)

        candidates = board.get_candidates(0, 2)
        assert 5 not in candidates
        assert 3 not in candidates
        assert len(candidates) == 7

    def test_peers(self):
        peers = peers_of(4, 4)
        assert len(peers) == 20
        assert len(set(peers)) == 20
        assert (4, 4) not in peers
        assert (3, 3) in peers and (4, 0) in peers and (0, 4) in peers

    def test_empty_cells_row_major(self):
        board = SudokuBoard()
        board.grid[:] = 1
        board.clear(5, 2)
        board.clear(1, 7)
        assert board.get_empty_cells() == [(1, 7), (5, 2)]

    def test_is_valid(self):
        """Test board validation."""
        board = SudokuBoard()
        assert board.is_valid()

        board.set(0, 0, 5)
        board.set(0, 1, 5)
        assert not board.is_valid()

    def test_from_string(self):
        """Test creating board from string."""
        board = SudokuBoard.from_string("." * 80 + "9")
        assert board.get(8, 8) == 9
        assert board.count_filled() == 1

    def test_from_string_rejects_bad_input(self):
        with pytest.raises(ValueError):
            SudokuBoard.from_string("123")
        with pytest.raises(ValueError):
            SudokuBoard.from_string("x" * 81)

    def test_to_string(self, solved_board):
        s = solved_board.to_string()
        assert len(s) == 81
        assert SudokuBoard.from_string(s) == solved_board

    def test_list_codec_uses_none(self):
        data = [[None] * 9 for _ in range(9)]
        data[2][3] = 7
        board = SudokuBoard.from_2d_list(data)
        assert board.get(2, 3) == 7
        assert board.to_list() == data

    def test_copy(self):
        """Modifying a copy leaves the original unchanged."""
        board = SudokuBoard()
        board.set(4, 4, 7)
        copy = board.copy()

        assert copy.get(4, 4) == 7
        copy.set(4, 4, 8)
        assert board.get(4, 4) == 7

    def test_freeze(self):
        board = SudokuBoard().freeze()
        assert board.frozen
        with pytest.raises(ValueError):
            board.set(0, 0, 1)
        assert not board.copy().frozen

    def test_str(self, solved_board):
        text = str(solved_board)
        assert text.count("+") == 16
        assert "| 5 3 4 | 6 7 8 | 9 1 2 |" in text


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
