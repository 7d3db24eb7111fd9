"""Random Sudoku puzzle generation."""

from .core import SudokuBoard, EMPTY
from .generator import Difficulty, DifficultyPolicy, SudokuGenerator, create_puzzle
from .config import GeneratorConfig
from .session import GameSession

__version__ = "1.0.0"

__all__ = [
    "SudokuBoard",
    "EMPTY",
    "Difficulty",
    "DifficultyPolicy",
    "SudokuGenerator",
    "create_puzzle",
    "GeneratorConfig",
    "GameSession",
]
