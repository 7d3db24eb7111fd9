"""Exception hierarchy for puzzle generation."""


class SudokuGenError(Exception):
    """Base class for all sudokugen errors."""


class UnsatisfiableAssignment(SudokuGenError):
    """No candidate digit remains for the cell being filled.

    Raised inside a single construction attempt and always recovered by
    starting a fresh attempt; callers never see it.
    """

    def __init__(self, row: int, col: int):
        super().__init__(f"No candidates left for cell ({row}, {col})")
        self.row = row
        self.col = col


class GenerationError(SudokuGenError, RuntimeError):
    """The solution generator exhausted its attempt budget."""


class InvalidDifficultyError(SudokuGenError, ValueError):
    """Unknown difficulty level or a removal count outside [0, 9]."""


class ConfigError(SudokuGenError, ValueError):
    """Malformed generator configuration."""


class InvalidMoveError(SudokuGenError, ValueError):
    """A session edit targets a given cell or uses an illegal value."""


class NoActiveGameError(SudokuGenError, RuntimeError):
    """A session operation needs a game but none has been generated."""
