"""Binairo board representation with support for any even size."""

from __future__ import annotations
from enum import IntEnum
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from ..config import MAX_SKIP, RENDER_SYMBOLS
from ..errors import InvalidBoardError, MalformedTaskError, SolverContractError


class Cell(IntEnum):
    """State of a single board position."""
    UNKNOWN = -1
    WHITE = 0
    BLACK = 1

    def opposite(self) -> Cell:
        """The other color. UNKNOWN has no opposite."""
        if self is Cell.UNKNOWN:
            raise SolverContractError("UNKNOWN has no opposite color")
        return Cell(1 - self.value)


UNKNOWN = int(Cell.UNKNOWN)
WHITE = int(Cell.WHITE)
BLACK = int(Cell.BLACK)

_CELL_VALUES = (UNKNOWN, WHITE, BLACK)


class BinairoBoard:
    """
    Represents a Binairo (Takuzu) board of configurable even size.

    Cells hold -1 (unknown), 0 (white) or 1 (black). A solved board has
    N/2 of each color in every row and column, never three equal cells
    in a row, and no two equal rows or columns.
    """

    def __init__(self, size: int = 6, grid: Optional[np.ndarray] = None):
        """
        Initialize a Binairo board.

        Args:
            size: Board size. Must be a positive even number.
            grid: Optional initial grid. If None, every cell is unknown.
        """
        if size <= 0 or size % 2 != 0:
            raise InvalidBoardError(f"Size must be a positive even number, got {size}")

        self.size = size

        if grid is not None:
            grid = np.asarray(grid)
            if grid.shape != (size, size):
                raise InvalidBoardError(f"Grid shape must be ({size}, {size}), got {grid.shape}")
            if not np.isin(grid, _CELL_VALUES).all():
                raise InvalidBoardError("Grid values must be -1 (unknown), 0 (white) or 1 (black)")
            self.grid = grid.astype(np.int8)
        else:
            self.grid = np.full((size, size), UNKNOWN, dtype=np.int8)

    def copy(self) -> BinairoBoard:
        """Create a deep copy of the board."""
        new_board = BinairoBoard(self.size)
        new_board.grid = self.grid.copy()
        return new_board

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). -1 means unknown."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use -1 to clear."""
        if value not in _CELL_VALUES:
            raise InvalidBoardError(f"Value must be -1, 0 or 1, got {value}")
        self.grid[row, col] = value

    def clear(self, row: int, col: int) -> None:
        """Reset the cell at position (row, col) to unknown."""
        self.grid[row, col] = UNKNOWN

    def is_unknown(self, row: int, col: int) -> bool:
        """Check if the cell has not been colored yet."""
        return self.grid[row, col] == UNKNOWN

    def get_row(self, row: int) -> np.ndarray:
        """Get all values in a row (a view, writes go through)."""
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        """Get all values in a column (a view, writes go through)."""
        return self.grid[:, col]

    def lines(self) -> Iterator[np.ndarray]:
        """Yield every row, then every column, as writable views."""
        for i in range(self.size):
            yield self.get_row(i)
        for j in range(self.size):
            yield self.get_col(j)

    @staticmethod
    def count_color(line: np.ndarray, color: int) -> int:
        """Count the cells of a line holding the given value."""
        return int(np.count_nonzero(line == color))

    def neighbours_solved(self, row: int, col: int) -> int:
        """How many of the four orthogonal neighbours are already colored."""
        solved = 0
        if row > 0 and self.grid[row - 1, col] != UNKNOWN:
            solved += 1
        if row < self.size - 1 and self.grid[row + 1, col] != UNKNOWN:
            solved += 1
        if col > 0 and self.grid[row, col - 1] != UNKNOWN:
            solved += 1
        if col < self.size - 1 and self.grid[row, col + 1] != UNKNOWN:
            solved += 1
        return solved

    def get_unknown_cells(self) -> List[Tuple[int, int]]:
        """Get list of all unknown cell positions, row-major."""
        rows, cols = np.nonzero(self.grid == UNKNOWN)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def count_unknown(self) -> int:
        """Count the number of unknown cells."""
        return int(np.sum(self.grid == UNKNOWN))

    def count_filled(self) -> int:
        """Count the number of colored cells."""
        return int(np.sum(self.grid != UNKNOWN))

    def is_complete(self) -> bool:
        """Check if all cells are colored."""
        return self.count_unknown() == 0

    def is_valid(self) -> bool:
        """
        Check if the current board state breaks no rule.
        Does not check if the board is complete.
        """
        from .validator import is_valid
        return is_valid(self)

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_complete() and self.is_valid()

    def to_string(self) -> str:
        """
        Convert board to a dense string, one character per cell.
        Uses '0' for white, '1' for black and '.' for unknown.
        """
        chars = {UNKNOWN: '.', WHITE: '0', BLACK: '1'}
        return ''.join(chars[int(v)] for v in self.grid.flat)

    @classmethod
    def from_string(cls, s: str, size: Optional[int] = None) -> BinairoBoard:
        """
        Create a board from a dense string representation.

        Args:
            s: String of length size*size. '0' white, '1' black,
               '.' or '-' unknown.
            size: Board size. Inferred from the string length if omitted.
        """
        if size is None:
            size = int(round(np.sqrt(len(s))))
        if len(s) != size * size:
            raise InvalidBoardError(f"String length must be {size*size}, got {len(s)}")

        values = {'0': WHITE, '1': BLACK, '.': UNKNOWN, '-': UNKNOWN}
        try:
            flat = [values[c] for c in s]
        except KeyError as e:
            raise InvalidBoardError(f"Invalid character in board string: {e.args[0]!r}") from None

        return cls(size, np.array(flat, dtype=np.int8).reshape(size, size))

    @classmethod
    def from_task(cls, task: str, size: int) -> BinairoBoard:
        """
        Decode a run-length task string as served by the puzzle site.

        '0' and '1' color the current cell and advance by one; 'a' to 'z'
        skip 1 to 26 cells, leaving them unknown. Cells after the end of
        the task stay unknown.

        Raises:
            MalformedTaskError: on an unknown symbol, or if the task
                describes more cells than the board holds.
        """
        if size <= 0 or size % 2 != 0:
            raise InvalidBoardError(f"Size must be a positive even number, got {size}")

        total = size * size
        flat = np.full(total, UNKNOWN, dtype=np.int8)
        pos = 0

        for c in task:
            if c in '01':
                if pos >= total:
                    raise MalformedTaskError(
                        f"Task {task!r} overruns a {size}x{size} board"
                    )
                flat[pos] = int(c)
                pos += 1
            elif 'a' <= c <= 'z':
                pos += ord(c) - ord('a') + 1
            else:
                raise MalformedTaskError(f"Invalid character in task {task!r}: {c!r}")

        if pos > total:
            raise MalformedTaskError(f"Task {task!r} overruns a {size}x{size} board")

        return cls(size, flat.reshape(size, size))

    def to_task(self) -> str:
        """Encode the board as a run-length task string (inverse of from_task)."""
        out = []
        skip = 0

        def flush() -> None:
            nonlocal skip
            while skip > 0:
                step = min(skip, MAX_SKIP)
                out.append(chr(ord('a') + step - 1))
                skip -= step

        for v in self.grid.flat:
            if v == UNKNOWN:
                skip += 1
            else:
                flush()
                out.append(str(int(v)))
        flush()

        return ''.join(out)

    @classmethod
    def from_2d_list(cls, data: Sequence[Sequence[Optional[int]]]) -> BinairoBoard:
        """Create a board from a 2D list. None and -1 both mean unknown."""
        rows = [[UNKNOWN if v is None else v for v in row] for row in data]
        try:
            arr = np.array(rows, dtype=np.int64)
        except (ValueError, TypeError, OverflowError) as e:
            raise InvalidBoardError(f"Board data must be a rectangular 2D list of -1, 0 or 1: {e}") from e
        if arr.ndim != 2:
            raise InvalidBoardError("Board data must be a rectangular 2D list")
        size = arr.shape[0]
        return cls(size, arr)

    def render(self, symbols: Optional[Dict[int, str]] = None) -> str:
        """Render the board, one text line per row."""
        symbols = symbols or RENDER_SYMBOLS
        return '\n'.join(
            ''.join(symbols[int(v)] for v in row) for row in self.grid
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"BinairoBoard(size={self.size}, filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinairoBoard):
            return False
        return self.size == other.size and np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())
