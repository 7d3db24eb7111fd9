"""Generator module for creating Sudoku puzzles."""

from .difficulty import Difficulty, DifficultyPolicy, validate_removals
from .solution import Availability, SolutionGenerator
from .carver import PuzzleCarver
from .generator import SudokuGenerator, create_puzzle

__all__ = [
    "Difficulty",
    "DifficultyPolicy",
    "validate_removals",
    "Availability",
    "SolutionGenerator",
    "PuzzleCarver",
    "SudokuGenerator",
    "create_puzzle",
]
