"""Randomized construction of complete Sudoku solutions."""

from __future__ import annotations
import logging
import random
from typing import List, Optional, Set

from ..core.board import DIGITS, EMPTY, SIZE, SudokuBoard, box_index, iter_cells
from ..exceptions import ConfigError, GenerationError, UnsatisfiableAssignment

logger = logging.getLogger(__name__)


class Availability:
    """
    Digits not yet placed in each row, column and block.

    Every set starts as {1..9} and only shrinks while an attempt runs.
    """

    def __init__(self):
        self.rows: List[Set[int]] = [set(DIGITS) for _ in range(SIZE)]
        self.cols: List[Set[int]] = [set(DIGITS) for _ in range(SIZE)]
        self.boxes: List[Set[int]] = [set(DIGITS) for _ in range(SIZE)]

    def candidates(self, row: int, col: int) -> Set[int]:
        """Digits still free in the cell's row, column and block."""
        return self.rows[row] & self.cols[col] & self.boxes[box_index(row, col)]

    def place(self, row: int, col: int, value: int) -> None:
        self.rows[row].discard(value)
        self.cols[col].discard(value)
        self.boxes[box_index(row, col)].discard(value)


class SolutionGenerator:
    """
    Builds full solutions by random assignment with whole-attempt restarts.

    Algorithm:
    1. Visit the 81 cells in row-major order
    2. Pick a digit uniformly among those still free in the cell's row,
       column and block
    3. If a cell has no free digit, throw the attempt away and start over
       from an empty grid

    There is no backtracking and nothing is remembered between attempts.
    """

    def __init__(self, rng: Optional[random.Random] = None, max_attempts: Optional[int] = None):
        """
        Args:
            rng: Random source. A fresh unseeded one is used if None.
            max_attempts: Upper bound on attempts per solution, or None to
                retry until success.
        """
        if max_attempts is not None:
            if isinstance(max_attempts, bool) or not isinstance(max_attempts, int):
                raise ConfigError(f"max_attempts must be an integer, got {max_attempts!r}")
            if max_attempts < 1:
                raise ConfigError(f"max_attempts must be positive, got {max_attempts}")
        self.rng = rng if rng is not None else random.Random()
        self.max_attempts = max_attempts
        self.last_attempts = 0

    def generate_solution(self) -> SudokuBoard:
        """
        Generate one complete, valid solution.

        Raises:
            GenerationError: Only when max_attempts is set and exhausted.
        """
        attempts = 0
        while self.max_attempts is None or attempts < self.max_attempts:
            attempts += 1
            try:
                board = self.try_make_solution()
            except UnsatisfiableAssignment as e:
                logger.debug("Attempt %d discarded: %s", attempts, e)
                continue
            self.last_attempts = attempts
            logger.debug("Solution found after %d attempt(s)", attempts)
            return board

        self.last_attempts = attempts
        logger.error("No solution after %d attempts", attempts)
        raise GenerationError(f"Failed to build a solution in {attempts} attempts")

    def try_make_solution(self) -> SudokuBoard:
        """
        Run a single construction attempt.

        Raises:
            UnsatisfiableAssignment: A cell had no candidates left.
        """
        grid = [[EMPTY] * SIZE for _ in range(SIZE)]
        availability = Availability()

        for row, col in iter_cells():
            options = self._candidates(availability, row, col)
            if not options:
                raise UnsatisfiableAssignment(row, col)

            value = self.rng.choice(sorted(options))
            grid[row][col] = value
            availability.place(row, col, value)

        return SudokuBoard.from_2d_list(grid)

    def _candidates(self, availability: Availability, row: int, col: int) -> Set[int]:
        return availability.candidates(row, col)
