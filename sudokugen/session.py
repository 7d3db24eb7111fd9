"""Game state for a front end: current puzzle, solution and player grid."""

from __future__ import annotations
import logging
from typing import List, Optional, Union

from .core.board import EMPTY, SIZE, SudokuBoard
from .core.validator import cell_status, check_entries
from .exceptions import InvalidMoveError, NoActiveGameError
from .generator import Difficulty, SudokuGenerator

logger = logging.getLogger(__name__)


class GameSession:
    """
    Holds one game at a time for a presentation layer.

    The solution is never modified. The player edits `entries`, a copy of
    the puzzle; cells given by the puzzle cannot be changed. Starting a new
    game discards the previous one.
    """

    def __init__(
        self,
        generator: Optional[SudokuGenerator] = None,
        difficulty: Union[str, Difficulty] = Difficulty.MEDIUM,
        hints: bool = False,
    ):
        self.generator = generator if generator is not None else SudokuGenerator()
        self.difficulty = Difficulty.from_name(difficulty)
        self.hints = hints
        self.puzzle: Optional[SudokuBoard] = None
        self.solution: Optional[SudokuBoard] = None
        self.entries: Optional[SudokuBoard] = None

    @property
    def active(self) -> bool:
        return self.solution is not None

    def new_game(self, difficulty: Union[str, Difficulty, None] = None) -> SudokuBoard:
        """
        Generate a fresh puzzle, replacing any game in progress.

        Args:
            difficulty: New level; keeps the current selection if None.

        Returns:
            The player's editable grid.
        """
        if difficulty is not None:
            self.difficulty = Difficulty.from_name(difficulty)
        self.puzzle, self.solution = self.generator.create_puzzle(self.difficulty)
        self.entries = self.puzzle.copy()
        logger.info("New %s game with %d blanks", self.difficulty.value, self.puzzle.count_empty())
        return self.entries

    def _require_game(self) -> None:
        if not self.active:
            raise NoActiveGameError("No game in progress; call new_game() first")

    def is_given(self, row: int, col: int) -> bool:
        """True if the cell was filled in the puzzle."""
        self._require_game()
        return not self.puzzle.is_empty(row, col)

    def enter(self, row: int, col: int, value: int) -> None:
        """Write a digit (or EMPTY) into a blank cell of the player's grid."""
        self._require_game()
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise InvalidMoveError(f"Cell ({row}, {col}) is outside the grid")
        if self.is_given(row, col):
            raise InvalidMoveError(f"Cell ({row}, {col}) is part of the puzzle")
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidMoveError(f"Value must be an integer, got {value!r}")
        if value < EMPTY or value > SIZE:
            raise InvalidMoveError(f"Value must be {EMPTY}-{SIZE}, got {value}")
        self.entries.set(row, col, value)

    def clear(self, row: int, col: int) -> None:
        self.enter(row, col, EMPTY)

    def reset(self) -> None:
        """Drop all player entries, keeping the current puzzle."""
        self._require_game()
        self.entries = self.puzzle.copy()

    def remaining(self) -> int:
        """Number of cells the player has not filled yet."""
        self._require_game()
        return self.entries.count_empty()

    def hint_grid(self) -> Optional[List[List[Optional[bool]]]]:
        """Per-cell correctness of the player's grid, or None when hints are off."""
        self._require_game()
        if not self.hints:
            return None
        return cell_status(self.entries, self.solution)

    def validate(self) -> bool:
        """True if the player's grid equals the solution."""
        self._require_game()
        return check_entries(self.entries, self.solution)
