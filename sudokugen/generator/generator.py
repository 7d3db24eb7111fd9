"""Sudoku puzzle generator with per-row difficulty levels."""

from __future__ import annotations
import logging
import os
import random
from typing import TYPE_CHECKING, List, Optional, Tuple, Union

from ..core.board import SudokuBoard
from .carver import PuzzleCarver
from .difficulty import Difficulty, DifficultyPolicy
from .solution import SolutionGenerator

if TYPE_CHECKING:
    from ..config import GeneratorConfig

logger = logging.getLogger(__name__)

PuzzlePair = Tuple[SudokuBoard, SudokuBoard]


class SudokuGenerator:
    """
    Generator for (puzzle, solution) pairs.

    Algorithm:
    1. Build a complete solution by random assignment, restarting the
       whole grid whenever a cell runs out of candidates
    2. Blank the difficulty's number of cells in every row

    The carved puzzle is not checked for a unique solution.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        policy: Optional[DifficultyPolicy] = None,
        max_attempts: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducibility. Ignored if rng is given.
            policy: Removal counts per difficulty (defaults 4/5/6).
            max_attempts: Cap on solution attempts, None for unbounded.
            rng: Random source shared by solution building and carving.
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self.policy = policy if policy is not None else DifficultyPolicy()
        self.solutions = SolutionGenerator(self.rng, max_attempts=max_attempts)
        self.carver = PuzzleCarver(self.rng)

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> SudokuGenerator:
        return cls(
            seed=config.seed,
            policy=config.to_policy(),
            max_attempts=config.max_attempts,
        )

    def create_puzzle(self, difficulty: Union[str, Difficulty] = Difficulty.MEDIUM) -> PuzzlePair:
        """
        Generate a puzzle along with its solution.

        Args:
            difficulty: Level deciding how many cells each row loses.

        Returns:
            Tuple of (puzzle, solution) boards sharing no storage.
        """
        difficulty = Difficulty.from_name(difficulty)
        removals = self.policy.removals_for(difficulty)

        solution = self.solutions.generate_solution()
        puzzle = self.carver.carve(solution, removals)

        logger.debug(
            "Created %s puzzle (%d blanks) after %d attempt(s)",
            difficulty.value, puzzle.count_empty(), self.solutions.last_attempts,
        )
        return puzzle, solution

    def generate_batch(self, count: int, difficulty: Union[str, Difficulty] = Difficulty.MEDIUM) -> List[PuzzlePair]:
        """Generate `count` independent (puzzle, solution) pairs."""
        return [self.create_puzzle(difficulty) for _ in range(count)]

    @staticmethod
    def save_to_folder(pairs: List[PuzzlePair], folder_path: str, prefix: str = "puzzle") -> List[str]:
        """
        Save puzzle/solution pairs to a folder as individual text files.

        Args:
            pairs: List of (puzzle, solution) tuples.
            folder_path: Directory to save into; created if missing.
            prefix: Prefix for the filenames.

        Returns:
            Paths of the written files.
        """
        os.makedirs(folder_path, exist_ok=True)

        paths = []
        for i, (puzzle, solution) in enumerate(pairs, 1):
            file_path = os.path.join(folder_path, f"{prefix}_{i}.txt")
            with open(file_path, "w") as f:
                f.write(puzzle.to_string())
                f.write("\n")
                f.write(solution.to_string())
                f.write("\n\nPuzzle:\n")
                f.write(str(puzzle))
                f.write("\n\nSolution:\n")
                f.write(str(solution))
                f.write("\n")
            paths.append(file_path)
        return paths


def create_puzzle(
    difficulty: Union[str, Difficulty] = Difficulty.MEDIUM,
    seed: Optional[int] = None,
) -> PuzzlePair:
    """Generate one (puzzle, solution) pair with the default policy."""
    return SudokuGenerator(seed=seed).create_puzzle(difficulty)
