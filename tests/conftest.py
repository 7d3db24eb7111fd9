"""Shared fixtures for the test suite."""

import pytest
from sudokugen.core.board import SudokuBoard

# A known valid solution
SOLUTION = (
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
def solution_board():
    return SudokuBoard.from_string(SOLUTION)


@pytest.fixture
def solution_string():
    return SOLUTION
