"""Validation utilities for Binairo puzzles."""

from __future__ import annotations
from typing import TYPE_CHECKING, Iterable, List

import numpy as np

from .board import UNKNOWN, WHITE, BLACK

if TYPE_CHECKING:
    from .board import BinairoBoard


def has_three_in_a_row(line: np.ndarray) -> bool:
    """True if three consecutive cells of the line share a color."""
    if len(line) < 3:
        return False
    first, middle, last = line[:-2], line[1:-1], line[2:]
    return bool(np.any((first == middle) & (middle == last) & (first != UNKNOWN)))


def is_over_balanced(line: np.ndarray) -> bool:
    """True if either color fills more than half of the line."""
    half = len(line) // 2
    return (
        np.count_nonzero(line == WHITE) > half
        or np.count_nonzero(line == BLACK) > half
    )


def has_duplicate_lines(lines: Iterable[np.ndarray]) -> bool:
    """
    True if two complete lines are equal.

    Lines that still hold unknown cells never count as duplicates,
    so an empty board is not rejected.
    """
    seen = set()
    for line in lines:
        if np.any(line == UNKNOWN):
            continue
        key = line.tobytes()
        if key in seen:
            return True
        seen.add(key)
    return False


def is_valid(board: BinairoBoard) -> bool:
    """
    Check that no rule is broken by the colored cells of a board.

    A board is invalid if a row or column has three equal cells in a row,
    holds more than N/2 of one color, or if two complete rows (or two
    complete columns) are equal. Unknown cells break no rule, so partial
    boards can be checked too.

    Args:
        board: The board to validate.

    Returns:
        True if no constraint is violated.
    """
    grid = board.grid

    for line in board.lines():
        if has_three_in_a_row(line) or is_over_balanced(line):
            return False

    if has_duplicate_lines(grid):
        return False
    if has_duplicate_lines(grid.T):
        return False

    return True


def is_solved(board: BinairoBoard) -> bool:
    """True if every cell is colored and no rule is broken."""
    return board.count_unknown() == 0 and is_valid(board)


def is_valid_board(board: BinairoBoard) -> bool:
    """
    Check if the entire board state is valid (no conflicts).

    Args:
        board: The Binairo board to validate.

    Returns:
        True if no constraints are violated.
    """
    return is_valid(board)


def count_solutions(board: BinairoBoard, limit: int = 2) -> int:
    """
    Count the number of solutions for a puzzle (up to limit).

    Exhaustive search: every branch is propagated to a fixed point before
    it is checked, and the two colors of the first unknown cell are tried
    when propagation stalls. Stops early once limit is reached.

    Args:
        board: The puzzle board.
        limit: Maximum solutions to count before stopping.

    Returns:
        Number of solutions found (up to limit).
    """
    from ..solvers.propagation import propagate_inplace

    count = 0
    stack: List[BinairoBoard] = [board.copy()]

    while stack:
        work_board = stack.pop()
        propagate_inplace(work_board)

        if not is_valid(work_board):
            continue

        unknown = np.argwhere(work_board.grid == UNKNOWN)
        if len(unknown) == 0:
            count += 1
            if count >= limit:
                break
            continue

        row, col = (int(v) for v in unknown[0])
        for value in (BLACK, WHITE):
            child = work_board.copy()
            child.set(row, col, value)
            stack.append(child)

    return count


def has_unique_solution(board: BinairoBoard) -> bool:
    """
    Check if a puzzle has exactly one solution.

    Args:
        board: The puzzle board.

    Returns:
        True if the puzzle has exactly one solution.
    """
    return count_solutions(board, limit=2) == 1


def validate_solution(puzzle: BinairoBoard, solution: BinairoBoard) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is solved and keeps every given cell.
    """
    if puzzle.size != solution.size:
        return False

    given = puzzle.grid != UNKNOWN
    if not np.array_equal(puzzle.grid[given], solution.grid[given]):
        return False

    return is_solved(solution)
