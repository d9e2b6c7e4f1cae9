"""Solvers module for Binairo puzzles."""

from .base_solver import BaseSolver, SolverStats
from .propagation import propagate, propagate_inplace, fill_balanced_lines, complete_pairs
from .ranking import rank_candidates, score_cell
from .lookahead_solver import LookaheadSolver, probe, search_pass, solve
from .dfs_solver import DFSSolver

__all__ = [
    "BaseSolver",
    "SolverStats",
    "propagate",
    "propagate_inplace",
    "fill_balanced_lines",
    "complete_pairs",
    "rank_candidates",
    "score_cell",
    "LookaheadSolver",
    "probe",
    "search_pass",
    "solve",
    "DFSSolver",
]
