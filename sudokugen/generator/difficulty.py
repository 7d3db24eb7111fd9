"""Difficulty levels and the removal counts they map to."""

from __future__ import annotations
from enum import Enum
from typing import Dict, Mapping, Optional, Union

from ..core.board import SIZE
from ..exceptions import InvalidDifficultyError


class Difficulty(Enum):
    """Difficulty levels for generated puzzles."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def removals_per_row(self) -> int:
        """Default number of cells blanked in every row."""
        return DEFAULT_REMOVALS[self]

    @classmethod
    def from_name(cls, name: Union[str, Difficulty]) -> Difficulty:
        """Parse a level name case-insensitively."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            choices = ", ".join(d.value for d in cls)
            raise InvalidDifficultyError(
                f"Unknown difficulty {name!r} (expected one of: {choices})"
            ) from None


DEFAULT_REMOVALS: Dict[Difficulty, int] = {
    Difficulty.EASY: 4,
    Difficulty.MEDIUM: 5,
    Difficulty.HARD: 6,
}


def validate_removals(count: int) -> int:
    """
    Check a per-row removal count.

    Returns:
        The count, unchanged.

    Raises:
        InvalidDifficultyError: If count is not an int in [0, 9].
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidDifficultyError(f"Removal count must be an integer, got {count!r}")
    if count < 0 or count > SIZE:
        raise InvalidDifficultyError(f"Removal count must be 0-{SIZE}, got {count}")
    return count


class DifficultyPolicy:
    """
    Maps each difficulty level to the number of cells removed per row.

    Overrides are validated when the policy is built so a bad count never
    reaches the carver.
    """

    def __init__(self, overrides: Optional[Mapping[Union[str, Difficulty], int]] = None):
        self._removals = dict(DEFAULT_REMOVALS)
        for level, count in (overrides or {}).items():
            self._removals[Difficulty.from_name(level)] = validate_removals(count)

    def removals_for(self, level: Union[str, Difficulty]) -> int:
        return self._removals[Difficulty.from_name(level)]

    def as_dict(self) -> Dict[str, int]:
        return {level.value: count for level, count in self._removals.items()}

    def __repr__(self) -> str:
        return f"DifficultyPolicy({self.as_dict()})"
