"""Binairo puzzle generator with configurable difficulty levels."""

from __future__ import annotations
import os
import random
from enum import Enum
from typing import List, Tuple, Optional

import numpy as np

from ..core.board import BinairoBoard, WHITE, BLACK
from ..core.validator import has_unique_solution, is_valid
from ..logging_utils import get_logger
from ..solvers.propagation import propagate_inplace

logger = get_logger("generator")


class Difficulty(Enum):
    """Difficulty levels for Binairo puzzles."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"

    @property
    def clue_fraction(self) -> Tuple[float, float]:
        """Get the share of cells given as clues for this difficulty (min, max)."""
        ranges = {
            Difficulty.EASY: (0.45, 0.55),
            Difficulty.MEDIUM: (0.35, 0.45),
            Difficulty.HARD: (0.25, 0.35),
            Difficulty.EXPERT: (0.15, 0.25),   # usually stops above this: clues must keep the solution unique
        }
        return ranges[self]


class BinairoGenerator:
    """
    Generator for Binairo puzzles with various difficulty levels.

    Algorithm:
    1. Generate a complete valid board using randomized backtracking
    2. Remove cells based on difficulty level
    3. Keep only removals after which the puzzle still has a unique solution
    """

    def __init__(self, size: int = 6, seed: Optional[int] = None):
        """
        Initialize the generator.

        Args:
            size: Board size (even, default 6).
            seed: Random seed for reproducibility.
        """
        # Validates the size
        BinairoBoard(size)
        self.size = size
        if seed is not None:
            random.seed(seed)
            np.random.seed(seed)

    def generate(self, difficulty: Difficulty = Difficulty.MEDIUM) -> BinairoBoard:
        """
        Generate a Binairo puzzle with the specified difficulty.

        Args:
            difficulty: Desired difficulty level.

        Returns:
            A BinairoBoard with the puzzle (clues only, no solution).
        """
        puzzle, _ = self.generate_with_solution(difficulty)
        return puzzle

    def generate_batch(self, count: int, difficulty: Difficulty = Difficulty.MEDIUM) -> List[BinairoBoard]:
        """
        Generate multiple puzzles of the same difficulty.

        Args:
            count: Number of puzzles to generate.
            difficulty: Desired difficulty level.

        Returns:
            List of BinairoBoard puzzles.
        """
        return [self.generate(difficulty) for _ in range(count)]

    def generate_with_solution(self, difficulty: Difficulty = Difficulty.MEDIUM) -> Tuple[BinairoBoard, BinairoBoard]:
        """
        Generate a puzzle along with its solution.

        Args:
            difficulty: Desired difficulty level.

        Returns:
            Tuple of (puzzle, solution) BinairoBoards.
        """
        solution = self.generate_solution()
        puzzle = self._remove_cells(solution, difficulty)
        return puzzle, solution

    def generate_solution(self) -> BinairoBoard:
        """Generate a complete valid board."""
        board = self._fill_board(BinairoBoard(self.size))
        if board is None:
            # Every even size has solutions, so the search cannot come back empty
            raise RuntimeError(f"Could not fill a {self.size}x{self.size} board")
        return board

    def _fill_board(self, board: BinairoBoard) -> Optional[BinairoBoard]:
        """
        Fill the board using randomized backtracking.

        Each guess is a random unknown cell with a random color, followed
        by propagation; contradictions are undone by dropping the copy.
        """
        propagate_inplace(board)
        if not is_valid(board):
            return None

        empty_cells = board.get_unknown_cells()
        if not empty_cells:
            return board

        row, col = random.choice(empty_cells)
        values = [WHITE, BLACK]
        random.shuffle(values)  # Randomize for variety

        for val in values:
            child = board.copy()
            child.set(row, col, val)
            result = self._fill_board(child)
            if result is not None:
                return result

        return None

    def _remove_cells(self, solution: BinairoBoard, difficulty: Difficulty) -> BinairoBoard:
        """
        Remove cells from a complete solution to create a puzzle.

        Ensures the resulting puzzle has a unique solution.
        """
        puzzle = solution.copy()
        min_fraction, max_fraction = difficulty.clue_fraction

        # Calculate target number of cells to remove
        total_cells = self.size * self.size
        target_clues = int(round(random.uniform(min_fraction, max_fraction) * total_cells))
        cells_to_remove = total_cells - target_clues

        filled_cells = [(i, j) for i in range(self.size) for j in range(self.size)]
        random.shuffle(filled_cells)

        removed = 0
        for row, col in filled_cells:
            if removed >= cells_to_remove:
                break

            # Try removing this cell
            original_value = puzzle.get(row, col)
            puzzle.clear(row, col)

            # Check if puzzle still has unique solution
            if has_unique_solution(puzzle):
                removed += 1
            else:
                # Restore the cell
                puzzle.set(row, col, original_value)

        logger.debug(
            "Generated %s %dx%d puzzle with %d clues",
            difficulty.value, self.size, self.size, puzzle.count_filled(),
        )
        return puzzle

    @staticmethod
    def save_to_folder(puzzles: List[BinairoBoard], folder_path: str, prefix: str = "puzzle") -> None:
        """
        Save a list of puzzles to a folder as individual text files.

        Args:
            puzzles: List of BinairoBoard objects.
            folder_path: Directory to save the puzzles.
            prefix: Prefix for the filename (default: "puzzle").
        """
        os.makedirs(folder_path, exist_ok=True)

        for i, puzzle in enumerate(puzzles, 1):
            file_path = os.path.join(folder_path, f"{prefix}_{i}.txt")
            with open(file_path, "w", encoding="utf-8") as f:
                f.write(f"size={puzzle.size}\n")
                f.write(puzzle.to_task())
                f.write("\n\nPretty format:\n")
                f.write(str(puzzle))
