"""Unit tests for Binairo board, task codec and validation."""

import pytest
import numpy as np
from binairo.core.board import BinairoBoard, Cell, UNKNOWN, WHITE, BLACK
from binairo.core.validator import (
    is_valid,
    is_solved,
    is_valid_board,
    count_solutions,
    has_unique_solution,
    validate_solution,
)
from binairo.errors import InvalidBoardError, MalformedTaskError, SolverContractError


# A valid 6x6 solution, row by row
SOLUTION_6 = (
    "001011"
    "110100"
    "010011"
    "101100"
    "001101"
    "110010"
)

# SOLUTION_6 with the main diagonal left unknown
DIAGONAL_TASK = "a010111a010001a011101a000011a111001a"


def diagonal_puzzle():
    board = BinairoBoard.from_string(SOLUTION_6)
    for i in range(board.size):
        board.clear(i, i)
    return board


class TestBinairoBoard:
    """Tests for BinairoBoard class."""

    def test_create_empty_board(self):
        """Test creating an empty 6x6 board."""
        board = BinairoBoard()
        assert board.size == 6
        assert board.count_unknown() == 36
        assert board.count_filled() == 0
        assert not board.is_complete()

    def test_rejects_odd_size(self):
        """Odd sizes cannot be balanced."""
        with pytest.raises(InvalidBoardError):
            BinairoBoard(size=5)
        with pytest.raises(InvalidBoardError):
            BinairoBoard(size=0)

    def test_rejects_bad_grid(self):
        """Grid shape and values are checked."""
        with pytest.raises(InvalidBoardError):
            BinairoBoard(4, np.zeros((4, 6), dtype=np.int8))
        with pytest.raises(InvalidBoardError):
            BinairoBoard(2, np.array([[0, 2], [1, 0]]))

    def test_set_and_get(self):
        """Test setting and getting values."""
        board = BinairoBoard(4)
        board.set(0, 0, BLACK)
        assert board.get(0, 0) == BLACK
        assert not board.is_unknown(0, 0)

        board.clear(0, 0)
        assert board.is_unknown(0, 0)

        with pytest.raises(InvalidBoardError):
            board.set(0, 0, 3)

    def test_cell_opposite(self):
        """White and black are each other's opposite."""
        assert Cell.WHITE.opposite() is Cell.BLACK
        assert Cell.BLACK.opposite() is Cell.WHITE
        with pytest.raises(SolverContractError):
            Cell.UNKNOWN.opposite()

    def test_neighbours_solved(self):
        """Only orthogonal neighbours inside the grid are counted."""
        board = BinairoBoard(4)
        assert board.neighbours_solved(0, 0) == 0

        board.set(0, 1, WHITE)
        board.set(1, 0, BLACK)
        board.set(1, 1, BLACK)  # diagonal, not a neighbour of (0, 0)
        assert board.neighbours_solved(0, 0) == 2
        assert board.neighbours_solved(1, 1) == 2
        assert board.neighbours_solved(2, 1) == 1

    def test_lines_are_views(self):
        """Rows then columns are yielded, and writes reach the board."""
        board = BinairoBoard(4)
        lines = list(board.lines())
        assert len(lines) == 8

        lines[5][2] = BLACK  # column 1, row 2
        assert board.get(2, 1) == BLACK

    def test_from_string(self):
        """Test creating board from a dense string."""
        board = BinairoBoard.from_string(SOLUTION_6)
        assert board.size == 6
        assert board.get(0, 2) == BLACK
        assert board.get(5, 5) == WHITE
        assert board.is_complete()

        partial = BinairoBoard.from_string("0.-1")
        assert partial.size == 2
        assert partial.get(0, 1) == UNKNOWN
        assert partial.get(1, 0) == UNKNOWN

    def test_to_string(self):
        """Test converting board to string."""
        board = BinairoBoard(4)
        board.set(0, 0, BLACK)
        s = board.to_string()
        assert len(s) == 16
        assert s[0] == '1'
        assert s[1] == '.'

    def test_from_2d_list(self):
        """None and -1 both mean unknown."""
        board = BinairoBoard.from_2d_list([[0, None], [-1, 1]])
        assert board.size == 2
        assert board.is_unknown(0, 1)
        assert board.is_unknown(1, 0)
        assert board.get(1, 1) == BLACK

    def test_from_2d_list_rejects_bad_data(self):
        """Ragged rows and out-of-range values are board errors."""
        with pytest.raises(InvalidBoardError):
            BinairoBoard.from_2d_list([[0, 1], [1]])
        with pytest.raises(InvalidBoardError):
            BinairoBoard.from_2d_list([[0, 300], [1, 0]])
        with pytest.raises(InvalidBoardError):
            BinairoBoard.from_2d_list([])

    def test_get_col_and_count_color(self):
        """Columns are views and colors are counted per line."""
        board = BinairoBoard.from_string(SOLUTION_6)
        col = board.get_col(2)

        assert list(col) == [1, 0, 0, 1, 1, 0]
        assert BinairoBoard.count_color(col, BLACK) == 3
        assert BinairoBoard.count_color(board.get_row(0), WHITE) == 3
        assert BinairoBoard.count_color(BinairoBoard(4).get_row(1), UNKNOWN) == 4

        col[0] = WHITE
        assert board.get(0, 2) == WHITE

    def test_copy(self):
        """Test board copy."""
        board = BinairoBoard(4)
        board.set(2, 2, WHITE)
        copy = board.copy()

        assert copy.get(2, 2) == WHITE
        assert copy == board

        # Modify copy, original should be unchanged
        copy.set(2, 2, BLACK)
        assert board.get(2, 2) == WHITE
        assert copy != board

    def test_render(self):
        """Every row renders to one line of symbols."""
        board = BinairoBoard.from_2d_list([[0, 1], [None, 0]])
        assert board.render() == "◼◻\n-◼"
        assert board.render({-1: ".", 0: "0", 1: "1"}) == "01\n.0"


class TestTaskCodec:
    """Tests for the run-length task encoding."""

    def test_digits_and_skips(self):
        """Digits color a cell, letters skip cells."""
        board = BinairoBoard.from_task("0a1", 2)
        assert board.get(0, 0) == WHITE
        assert board.is_unknown(0, 1)
        assert board.get(1, 0) == BLACK
        # Cells after the end of the task stay unknown
        assert board.is_unknown(1, 1)

    def test_long_skip(self):
        """'z' skips 26 cells."""
        board = BinairoBoard.from_task("z0", 6)
        assert board.count_filled() == 1
        assert board.get(4, 2) == WHITE

    def test_decodes_known_puzzle(self):
        """A hand-encoded task matches the board it describes."""
        assert BinairoBoard.from_task(DIAGONAL_TASK, 6) == diagonal_puzzle()

    def test_invalid_symbol(self):
        """Unknown symbols are rejected."""
        with pytest.raises(MalformedTaskError):
            BinairoBoard.from_task("01#", 4)
        with pytest.raises(MalformedTaskError):
            BinairoBoard.from_task("0A", 4)

    def test_overrun(self):
        """A task describing more cells than the board holds is rejected."""
        with pytest.raises(MalformedTaskError):
            BinairoBoard.from_task("1" * 37, 6)
        with pytest.raises(MalformedTaskError):
            BinairoBoard.from_task("zz", 6)

    def test_malformed_task_is_value_error(self):
        """Callers catching ValueError also see malformed tasks."""
        with pytest.raises(ValueError):
            BinairoBoard.from_task("?", 4)

    def test_to_task(self):
        """Encoding splits long unknown runs and keeps the trailing run."""
        assert BinairoBoard(6).to_task() == "zj"
        assert diagonal_puzzle().to_task() == DIAGONAL_TASK


class TestValidator:
    """Tests for validation utilities."""

    def test_solution_is_valid_and_solved(self):
        """A correct complete board passes every check."""
        board = BinairoBoard.from_string(SOLUTION_6)
        assert is_valid(board)
        assert is_solved(board)
        assert board.is_solved()

    def test_empty_board_is_valid(self):
        """Unknown rows are never duplicates of each other."""
        board = BinairoBoard(6)
        assert is_valid(board)
        assert not is_solved(board)

    @pytest.mark.parametrize("row,col", [(0, 0), (2, 3), (5, 5), (3, 1)])
    def test_single_flip_is_invalid(self, row, col):
        """Flipping any cell of a solution unbalances its row."""
        board = BinairoBoard.from_string(SOLUTION_6)
        board.set(row, col, 1 - board.get(row, col))
        assert not is_valid(board)
        assert not is_solved(board)

    def test_three_in_a_row(self):
        """Three equal cells in a row or column are invalid."""
        board = BinairoBoard.from_string("000." + "." * 12)
        assert not is_valid(board)

        board = BinairoBoard.from_string("1..." "1..." "1..." "....")
        assert not is_valid(board)

    def test_is_valid_board(self):
        """The board-level check agrees with is_valid, also on partial boards."""
        assert is_valid_board(BinairoBoard.from_string(SOLUTION_6))
        assert is_valid_board(diagonal_puzzle())
        assert not is_valid_board(BinairoBoard.from_string("000." + "." * 12))

    def test_over_balanced_partial_line(self):
        """A partial line with more than N/2 of one color is invalid."""
        board = BinairoBoard.from_string("11011." + "." * 30)
        assert not is_valid(board)

    def test_duplicate_rows(self):
        """Two equal complete rows are invalid."""
        board = BinairoBoard.from_string("0101" "0101" "1010" "1010")
        assert not is_valid(board)

    def test_duplicate_columns(self):
        """Two equal complete columns are invalid."""
        # Columns 0 and 2 are both 0,1,1,0; the rows are still partial
        board = BinairoBoard.from_string("0.0." "1.1." "1.1." "0.0.")
        assert not is_valid(board)

        board = BinairoBoard.from_string("0.1." "1.0." "1.0." "0.1.")
        assert is_valid(board)

    def test_partial_lines_are_not_duplicates(self):
        """Rows that still hold unknown cells are not compared."""
        board = BinairoBoard.from_string("01.." "01.." + "." * 8)
        assert is_valid(board)

    def test_count_solutions(self):
        """Solution counting stops at the limit."""
        assert count_solutions(BinairoBoard.from_string(SOLUTION_6)) == 1
        assert count_solutions(diagonal_puzzle()) == 1
        assert count_solutions(BinairoBoard(4), limit=2) == 2
        assert has_unique_solution(diagonal_puzzle())
        assert not has_unique_solution(BinairoBoard(4))

    def test_count_solutions_of_impossible_board(self):
        """A board breaking a rule has no solution."""
        board = BinairoBoard.from_string("000." + "." * 12)
        assert count_solutions(board) == 0

    def test_validate_solution(self):
        """A solution must be solved and keep every given cell."""
        puzzle = diagonal_puzzle()
        solution = BinairoBoard.from_string(SOLUTION_6)
        assert validate_solution(puzzle, solution)

        other = BinairoBoard(6)
        other.set(0, 1, 1 - solution.get(0, 1))
        assert not validate_solution(other, solution)
        assert not validate_solution(puzzle, BinairoBoard(4))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
