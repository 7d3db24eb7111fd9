"""Carving puzzles out of complete solutions."""

from __future__ import annotations
import random
from typing import Optional

from ..core.board import SIZE, SudokuBoard
from .difficulty import validate_removals


class PuzzleCarver:
    """Blanks a fixed number of random cells in every row of a solution."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def carve(self, solution: SudokuBoard, removals_per_row: int) -> SudokuBoard:
        """
        Create a puzzle from a solution.

        Rows are carved independently: a random column is drawn until it
        hits a cell that is still filled, which is then blanked, until the
        row holds exactly `removals_per_row` blanks.

        Args:
            solution: Complete solution. It is not modified.
            removals_per_row: Blanks per row, 0-9.

        Returns:
            A new board holding the puzzle.
        """
        validate_removals(removals_per_row)
        puzzle = solution.copy()

        for row in range(SIZE):
            self._carve_row(puzzle, row, removals_per_row)

        return puzzle

    def _carve_row(self, puzzle: SudokuBoard, row: int, removals: int) -> None:
        removed = 0
        while removed < removals:
            col = self.rng.randrange(SIZE)
            if puzzle.is_empty(row, col):
                continue
            puzzle.clear(row, col)
            removed += 1
