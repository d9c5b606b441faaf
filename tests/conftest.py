"""Shared fixtures for the test suite."""

import pytest
from sudoku_game.core.board import SudokuBoard

SOLVED = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


@pytest.fixture
def solved_board():
    return SudokuBoard.from_string(SOLVED)


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()
