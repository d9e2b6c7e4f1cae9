"""Core module for Binairo board representation and validation."""

from .board import BinairoBoard, Cell, UNKNOWN, WHITE, BLACK
from .validator import (
    is_valid,
    is_solved,
    is_valid_board,
    count_solutions,
    has_unique_solution,
    validate_solution,
)

__all__ = [
    "BinairoBoard",
    "Cell",
    "UNKNOWN",
    "WHITE",
    "BLACK",
    "is_valid",
    "is_solved",
    "is_valid_board",
    "count_solutions",
    "has_unique_solution",
    "validate_solution",
]
