"""Timing and retry statistics for puzzle generation."""

from __future__ import annotations
import time
import tracemalloc
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from tqdm import tqdm

from .difficulty import Difficulty
from .generator import SudokuGenerator


@dataclass
class GenerationStats:
    """Statistics from one create_puzzle call."""
    difficulty: str = ""
    attempts: int = 0
    time_seconds: float = 0.0
    memory_bytes: int = 0
    blanks: int = 0
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "difficulty": self.difficulty,
            "attempts": self.attempts,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "blanks": self.blanks,
            **self.extra
        }


def measure(generator: SudokuGenerator, difficulty: Union[str, Difficulty]) -> GenerationStats:
    """Run one generation with timing and memory tracking."""
    difficulty = Difficulty.from_name(difficulty)
    stats = GenerationStats(difficulty=difficulty.value)

    tracemalloc.start()
    start_time = time.perf_counter()
    try:
        puzzle, _ = generator.create_puzzle(difficulty)
    finally:
        stats.time_seconds = time.perf_counter() - start_time
        _, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()

    stats.memory_bytes = peak
    stats.attempts = generator.solutions.last_attempts
    stats.blanks = puzzle.count_empty()
    return stats


def profile_generation(
    count: int,
    difficulty: Union[str, Difficulty] = Difficulty.MEDIUM,
    seed: Optional[int] = None,
    generator: Optional[SudokuGenerator] = None,
    show_progress: bool = True,
) -> List[GenerationStats]:
    """
    Generate `count` puzzles and collect per-run statistics.

    Args:
        count: Number of puzzles to generate.
        difficulty: Level used for every run.
        seed: Seed for a new generator. Ignored if generator is given.
        generator: Generator to reuse.
        show_progress: Show a tqdm progress bar.
    """
    generator = generator if generator is not None else SudokuGenerator(seed=seed)
    return [
        measure(generator, difficulty)
        for _ in tqdm(range(count), desc="Generating", disable=not show_progress)
    ]


def summarize(stats: List[GenerationStats]) -> Dict[str, Any]:
    """Aggregate a list of runs into mean/max figures."""
    if not stats:
        return {"runs": 0}

    attempts = [s.attempts for s in stats]
    times = [s.time_seconds for s in stats]
    return {
        "runs": len(stats),
        "mean_attempts": sum(attempts) / len(attempts),
        "max_attempts": max(attempts),
        "min_attempts": min(attempts),
        "mean_time_seconds": sum(times) / len(times),
        "max_time_seconds": max(times),
        "peak_memory_bytes": max(s.memory_bytes for s in stats),
    }
