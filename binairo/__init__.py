"""Binairo (Takuzu) puzzle solver: propagation plus one-level lookahead."""

from .core import BinairoBoard, Cell, is_valid, is_solved
from .errors import (
    BinairoError,
    InvalidBoardError,
    MalformedTaskError,
    SolverContractError,
    FetchError,
)
from .solvers import LookaheadSolver, DFSSolver, propagate, rank_candidates, solve

__version__ = "1.0.0"

__all__ = [
    "BinairoBoard",
    "Cell",
    "is_valid",
    "is_solved",
    "BinairoError",
    "InvalidBoardError",
    "MalformedTaskError",
    "SolverContractError",
    "FetchError",
    "LookaheadSolver",
    "DFSSolver",
    "propagate",
    "rank_candidates",
    "solve",
]
