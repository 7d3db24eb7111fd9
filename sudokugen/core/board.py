"""9x9 Sudoku grid backed by a numpy array."""

from __future__ import annotations
import numpy as np
from typing import Iterator, List, Optional, Tuple

SIZE = 9
BOX_SIZE = 3
DIGITS = tuple(range(1, SIZE + 1))

# Marker for a blank cell; never a valid digit.
EMPTY = 0


def box_index(row: int, col: int) -> int:
    """Index (0-8) of the 3x3 block containing (row, col)."""
    return (row // BOX_SIZE) * BOX_SIZE + (col // BOX_SIZE)


def iter_cells() -> Iterator[Tuple[int, int]]:
    """Yield every (row, col) position in row-major order."""
    for row in range(SIZE):
        for col in range(SIZE):
            yield row, col


class SudokuBoard:
    """
    A 9x9 Sudoku grid.

    Cells hold a digit 1-9 or EMPTY. The same class represents solutions
    (every cell filled), puzzles (some cells EMPTY) and the player's
    working grid.
    """

    size = SIZE
    box_size = BOX_SIZE

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a board.

        Args:
            grid: Optional 9x9 array of values in 0-9. The board keeps its
                own copy. If None, creates an empty board.
        """
        if grid is not None:
            grid = np.asarray(grid)
            if grid.shape != (SIZE, SIZE):
                raise ValueError(f"Grid shape must be ({SIZE}, {SIZE}), got {grid.shape}")
            if grid.min() < EMPTY or grid.max() > SIZE:
                raise ValueError(f"Grid values must be {EMPTY}-{SIZE}")
            self.grid = grid.astype(np.int32, copy=True)
        else:
            self.grid = np.full((SIZE, SIZE), EMPTY, dtype=np.int32)

    def copy(self) -> SudokuBoard:
        """Create a copy that shares no storage with this board."""
        return SudokuBoard(self.grid)

    def get(self, row: int, col: int) -> int:
        """Get value at (row, col). EMPTY means blank."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at (row, col). Use EMPTY to clear."""
        if value < EMPTY or value > SIZE:
            raise ValueError(f"Value must be {EMPTY}-{SIZE}, got {value}")
        self.grid[row, col] = value

    def clear(self, row: int, col: int) -> None:
        self.grid[row, col] = EMPTY

    def is_empty(self, row: int, col: int) -> bool:
        return bool(self.grid[row, col] == EMPTY)

    def get_row(self, row: int) -> np.ndarray:
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        return self.grid[:, col]

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the block containing (row, col)."""
        box_row = (row // BOX_SIZE) * BOX_SIZE
        box_col = (col // BOX_SIZE) * BOX_SIZE
        return self.grid[box_row:box_row + BOX_SIZE,
                         box_col:box_col + BOX_SIZE].flatten()

    def get_box_by_index(self, index: int) -> np.ndarray:
        """Get all values of block `index` (0-8, row-major over blocks)."""
        return self.get_box((index // BOX_SIZE) * BOX_SIZE, (index % BOX_SIZE) * BOX_SIZE)

    def get_box_index(self, row: int, col: int) -> int:
        return box_index(row, col)

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """List of all empty positions, row-major."""
        rows, cols = np.nonzero(self.grid == EMPTY)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def count_empty(self) -> int:
        return int(np.sum(self.grid == EMPTY))

    def count_filled(self) -> int:
        return int(np.sum(self.grid != EMPTY))

    def count_empty_in_row(self, row: int) -> int:
        return int(np.sum(self.grid[row, :] == EMPTY))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check that no row, column or block repeats a digit.

        Empty cells are ignored, so a partially filled board can be valid.
        """
        units = [self.get_row(i) for i in range(SIZE)]
        units += [self.get_col(j) for j in range(SIZE)]
        units += [self.get_box_by_index(b) for b in range(SIZE)]
        for unit in units:
            filled = unit[unit != EMPTY]
            if len(filled) != len(set(filled.tolist())):
                return False
        return True

    def is_solved(self) -> bool:
        """Check if the board is completely and correctly filled."""
        return self.is_complete() and self.is_valid()

    def transpose(self) -> SudokuBoard:
        """Board with rows and columns swapped."""
        return SudokuBoard(self.grid.T)

    def to_string(self) -> str:
        """Compact 81-character form, '0' for empty cells."""
        return ''.join(str(int(v)) for v in self.grid.flatten())

    @classmethod
    def from_string(cls, s: str) -> SudokuBoard:
        """
        Create a board from an 81-character string.

        '0' or '.' mark empty cells, '1'-'9' are digits.
        """
        s = s.strip()
        if len(s) != SIZE * SIZE:
            raise ValueError(f"String length must be {SIZE * SIZE}, got {len(s)}")

        values = []
        for c in s:
            if c == '.':
                values.append(EMPTY)
            elif c.isdigit():
                values.append(int(c))
            else:
                raise ValueError(f"Invalid character {c!r} in board string")
        return cls(np.array(values, dtype=np.int32).reshape(SIZE, SIZE))

    @classmethod
    def from_2d_list(cls, data: List[List[int]]) -> SudokuBoard:
        return cls(np.array(data, dtype=np.int32))

    def to_2d_list(self) -> List[List[int]]:
        """Nested lists of plain ints, EMPTY for blanks."""
        return self.grid.tolist()

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (BOX_SIZE * 2 + 1)) + '+') * BOX_SIZE

        for i in range(SIZE):
            if i % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(SIZE):
                val = self.grid[i, j]
                row_str += ' .' if val == EMPTY else f' {val}'
                if (j + 1) % BOX_SIZE == 0:
                    row_str += ' |'
            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())
