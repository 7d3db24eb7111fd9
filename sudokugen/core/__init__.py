"""Core module for Sudoku board representation and validation."""

from .board import SudokuBoard, EMPTY, SIZE, BOX_SIZE, DIGITS, box_index
from .validator import (
    is_valid_placement,
    is_valid_board,
    is_valid_solution,
    puzzle_matches_solution,
    check_entries,
    mismatched_cells,
    cell_status,
)

__all__ = [
    "SudokuBoard",
    "EMPTY",
    "SIZE",
    "BOX_SIZE",
    "DIGITS",
    "box_index",
    "is_valid_placement",
    "is_valid_board",
    "is_valid_solution",
    "puzzle_matches_solution",
    "check_entries",
    "mismatched_cells",
    "cell_status",
]
