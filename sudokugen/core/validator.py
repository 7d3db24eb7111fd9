"""Validation utilities for solutions, puzzles and player entries."""

from __future__ import annotations
import numpy as np
from typing import TYPE_CHECKING, List, Optional, Tuple

from .board import DIGITS, EMPTY, SIZE

if TYPE_CHECKING:
    from .board import SudokuBoard

_FULL_UNIT = np.array(DIGITS, dtype=np.int32)


def is_valid_placement(board: SudokuBoard, row: int, col: int, value: int) -> bool:
    """
    Check if placing a value at (row, col) is valid.

    Args:
        board: The Sudoku board.
        row: Row index.
        col: Column index.
        value: Digit to check (1-9).

    Returns:
        True if the value does not yet appear in the cell's row, column
        or block.
    """
    if value < 1 or value > SIZE:
        return False

    if value in board.get_row(row):
        return False

    if value in board.get_col(col):
        return False

    if value in board.get_box(row, col):
        return False

    return True


def is_valid_board(board: SudokuBoard) -> bool:
    """True if no constraint is violated among the filled cells."""
    return board.is_valid()


def _is_permutation(unit: np.ndarray) -> bool:
    return np.array_equal(np.sort(unit), _FULL_UNIT)


def is_valid_solution(board: SudokuBoard) -> bool:
    """
    Check that every row, column and block holds each digit exactly once.

    Each unit family is checked on its own; nothing is inferred from
    symmetry, so a board whose transpose is valid is not assumed valid.
    """
    for i in range(SIZE):
        if not _is_permutation(board.get_row(i)):
            return False
    for j in range(SIZE):
        if not _is_permutation(board.get_col(j)):
            return False
    for b in range(SIZE):
        if not _is_permutation(board.get_box_by_index(b)):
            return False
    return True


def puzzle_matches_solution(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """
    Check that every given of the puzzle agrees with the solution.

    Args:
        puzzle: The carved puzzle.
        solution: The solution it was carved from.

    Returns:
        True if each non-empty puzzle cell equals the solution cell.
    """
    filled = puzzle.grid != EMPTY
    return bool(np.array_equal(puzzle.grid[filled], solution.grid[filled]))


def check_entries(entries: SudokuBoard, solution: SudokuBoard) -> bool:
    """True only if the player's grid equals the solution cell for cell."""
    return bool(np.array_equal(entries.grid, solution.grid))


def mismatched_cells(entries: SudokuBoard, solution: SudokuBoard) -> List[Tuple[int, int]]:
    """Positions where the player's grid differs from the solution, empty cells included."""
    rows, cols = np.nonzero(entries.grid != solution.grid)
    return [(int(r), int(c)) for r, c in zip(rows, cols)]


def cell_status(entries: SudokuBoard, solution: SudokuBoard) -> List[List[Optional[bool]]]:
    """
    Per-cell hint grid for the player's entries.

    Returns:
        9x9 nested lists: None for an empty cell, True where the entry
        matches the solution, False where it does not. Empty cells are
        left unmarked rather than counted as wrong.
    """
    status: List[List[Optional[bool]]] = []
    for i in range(SIZE):
        row: List[Optional[bool]] = []
        for j in range(SIZE):
            if entries.is_empty(i, j):
                row.append(None)
            else:
                row.append(entries.get(i, j) == solution.get(i, j))
        status.append(row)
    return status
