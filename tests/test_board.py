"""Unit tests for Sudoku board and validation."""

import pytest
import numpy as np
from sudokugen.core.board import SudokuBoard, EMPTY, box_index
from sudokugen.core.validator import (
    is_valid_placement,
    is_valid_board,
    is_valid_solution,
    puzzle_matches_solution,
    check_entries,
    mismatched_cells,
    cell_status,
)


class TestSudokuBoard:
    """Tests for SudokuBoard class."""

    def test_create_empty_board(self):
        """Test creating an empty 9x9 board."""
        board = SudokuBoard()
        assert board.size == 9
        assert board.box_size == 3
        assert board.count_empty() == 81
        assert board.count_filled() == 0

    def test_rejects_wrong_shape(self):
        with pytest.raises(ValueError):
            SudokuBoard(np.zeros((4, 4), dtype=np.int32))

    def test_rejects_out_of_range_values(self):
        grid = np.zeros((9, 9), dtype=np.int32)
        grid[0, 0] = 10
        with pytest.raises(ValueError):
            SudokuBoard(grid)

    def test_set_and_get(self):
        """Test setting and getting values."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        assert board.get(0, 0) == 5
        assert not board.is_empty(0, 0)

        board.clear(0, 0)
        assert board.is_empty(0, 0)
        assert board.get(0, 0) == EMPTY

    def test_set_rejects_non_digit(self):
        board = SudokuBoard()
        with pytest.raises(ValueError):
            board.set(0, 0, 10)
        with pytest.raises(ValueError):
            board.set(0, 0, -1)

    def test_box_index(self):
        """Block index is (row // 3) * 3 + col // 3."""
        assert box_index(0, 0) == 0
        assert box_index(0, 5) == 1
        assert box_index(4, 4) == 4
        assert box_index(8, 0) == 6
        assert box_index(8, 8) == 8

    def test_get_box_by_index(self, solution_board):
        box = solution_board.get_box_by_index(4)
        assert list(box) == [7, 6, 1, 8, 5, 3, 9, 2, 4]

    def test_is_valid(self):
        """Test board validation."""
        board = SudokuBoard()
        assert board.is_valid()  # Empty board is valid

        board.set(0, 0, 5)
        board.set(0, 1, 5)  # Duplicate in row
        assert not board.is_valid()

    def test_is_solved(self, solution_board):
        assert solution_board.is_solved()
        solution_board.clear(3, 3)
        assert not solution_board.is_solved()
        assert solution_board.is_valid()

    def test_from_string(self):
        """Test creating board from string."""
        board = SudokuBoard.from_string("." * 80 + "9")
        assert board.get(8, 8) == 9
        assert board.count_empty() == 80

    def test_from_string_rejects_bad_input(self):
        with pytest.raises(ValueError):
            SudokuBoard.from_string("123")
        with pytest.raises(ValueError):
            SudokuBoard.from_string("x" * 81)

    def test_to_string_roundtrip(self, solution_string):
        assert SudokuBoard.from_string(solution_string).to_string() == solution_string

    def test_to_2d_list(self, solution_board):
        rows = solution_board.to_2d_list()
        assert rows[0] == [5, 3, 4, 6, 7, 8, 9, 1, 2]
        assert SudokuBoard.from_2d_list(rows) == solution_board

    def test_copy(self):
        """Test board copy."""
        board = SudokuBoard()
        board.set(4, 4, 7)
        copy = board.copy()

        assert copy.get(4, 4) == 7

        # Modify copy, original should be unchanged
        copy.set(4, 4, 8)
        assert board.get(4, 4) == 7

    def test_transpose(self, solution_board):
        transposed = solution_board.transpose()
        assert list(transposed.get_row(0)) == list(solution_board.get_col(0))

    def test_str_marks_empty_cells(self):
        board = SudokuBoard()
        board.set(0, 0, 3)
        text = str(board)
        assert text.splitlines()[1].startswith("| 3 . .")


class TestValidator:
    """Tests for validation utilities."""

    def test_is_valid_placement(self):
        """Test placement validation."""
        board = SudokuBoard()
        board.set(0, 0, 5)

        # Can't place 5 in same row
        assert not is_valid_placement(board, 0, 5, 5)

        # Can't place 5 in same column
        assert not is_valid_placement(board, 5, 0, 5)

        # Can't place 5 in same box
        assert not is_valid_placement(board, 1, 1, 5)

        # Can place different value
        assert is_valid_placement(board, 0, 5, 7)
        assert not is_valid_placement(board, 0, 5, 0)

    def test_is_valid_solution(self, solution_board):
        assert is_valid_solution(solution_board)
        assert is_valid_board(solution_board)

    def test_incomplete_board_is_not_a_solution(self, solution_board):
        solution_board.clear(0, 0)
        assert not is_valid_solution(solution_board)

    def test_rows_alone_do_not_make_a_solution(self):
        """Every row is a permutation but columns repeat."""
        board = SudokuBoard.from_2d_list([list(range(1, 10)) for _ in range(9)])
        assert not is_valid_solution(board)
        # Swapping rows and columns moves the defect, it does not remove it
        assert not is_valid_solution(board.transpose())

    def test_blocks_checked_independently(self):
        """A Latin square with valid rows and columns but broken blocks."""
        board = SudokuBoard.from_2d_list(
            [[(i + j) % 9 + 1 for j in range(9)] for i in range(9)]
        )
        for i in range(9):
            assert sorted(board.get_row(i)) == list(range(1, 10))
            assert sorted(board.get_col(i)) == list(range(1, 10))
        assert not is_valid_solution(board)
        assert not is_valid_solution(board.transpose())

    def test_puzzle_matches_solution(self, solution_board):
        puzzle = solution_board.copy()
        puzzle.clear(0, 0)
        puzzle.clear(5, 7)
        assert puzzle_matches_solution(puzzle, solution_board)

        puzzle.set(1, 1, 1 if solution_board.get(1, 1) != 1 else 2)
        assert not puzzle_matches_solution(puzzle, solution_board)

    def test_check_entries_success(self, solution_board):
        """A grid filled exactly like the solution passes."""
        entries = solution_board.copy()
        assert check_entries(entries, solution_board)
        assert mismatched_cells(entries, solution_board) == []

    def test_check_entries_single_mismatch(self, solution_board):
        """Any single wrong cell fails."""
        entries = solution_board.copy()
        entries.set(6, 2, 9 if solution_board.get(6, 2) != 9 else 8)
        assert not check_entries(entries, solution_board)
        assert mismatched_cells(entries, solution_board) == [(6, 2)]

    def test_check_entries_with_blank_fails(self, solution_board):
        entries = solution_board.copy()
        entries.clear(8, 8)
        assert not check_entries(entries, solution_board)

    def test_cell_status(self, solution_board):
        entries = solution_board.copy()
        entries.clear(0, 0)
        entries.set(0, 1, 9)  # solution has 3
        status = cell_status(entries, solution_board)
        assert status[0][0] is None
        assert status[0][1] is False
        assert status[0][2] is True


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
