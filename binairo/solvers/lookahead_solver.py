"""One-level lookahead solver: guess a cell, propagate, keep what contradicts."""

from __future__ import annotations
from typing import Optional, Tuple

from .base_solver import BaseSolver, SolverStats
from .propagation import propagate_inplace
from .ranking import rank_candidates
from ..core.board import BinairoBoard, WHITE, BLACK
from ..core.validator import is_valid, is_solved
from ..logging_utils import get_logger

logger = get_logger("lookahead")


def probe(
    board: BinairoBoard,
    cell: Tuple[int, int],
    value: int,
    stats: Optional[SolverStats] = None,
) -> bool:
    """
    Try a value on a scratch copy of the board.

    The copy gets the value, is propagated to a fixed point and then
    validated. The board passed in is never modified.

    Returns:
        False if the value leads to a contradiction.
    """
    trial = board.copy()
    trial.set(cell[0], cell[1], value)
    passes = propagate_inplace(trial)

    if stats is not None:
        stats.nodes_explored += 1
        stats.propagations += passes

    return is_valid(trial)


def search_pass(board: BinairoBoard, stats: Optional[SolverStats] = None) -> BinairoBoard:
    """
    Run one guess-and-propagate pass and return the improved board.

    Unknown cells are tried most constrained first. A cell whose white
    trial contradicts is committed black (and vice versa); after every
    commit the board is propagated and the candidates are ranked again.
    Cells where both trials hold are left unknown. The pass ends when the
    candidate list runs out or the board is complete.

    The board passed in is never modified.
    """
    board = board.copy()
    if board.is_complete():
        return board

    candidates = tuple(rank_candidates(board))
    cursor = 0

    while cursor < len(candidates):
        row, col = candidates[cursor]
        cursor += 1

        if not board.is_unknown(row, col):
            continue

        if not probe(board, (row, col), WHITE, stats):
            value = BLACK
        elif not probe(board, (row, col), BLACK, stats):
            value = WHITE
        else:
            continue

        logger.debug("cell (%d, %d) forced to %d", row, col, value)
        board.set(row, col, value)
        passes = propagate_inplace(board)

        if stats is not None:
            stats.propagations += passes
            stats.extra["commits"] = stats.extra.get("commits", 0) + 1

        if board.is_complete():
            break

        candidates = tuple(rank_candidates(board))
        cursor = 0

    return board


def solve(board: BinairoBoard, stats: Optional[SolverStats] = None) -> BinairoBoard:
    """
    Solve a board as far as propagation plus one-level lookahead allow.

    The board is first propagated; lookahead passes then repeat until the
    board is solved or a pass makes no progress at all. The result may
    still hold unknown cells; check it with ``is_solved``.

    The board passed in is never modified.
    """
    board = board.copy()
    passes = propagate_inplace(board)
    if stats is not None:
        stats.propagations += passes

    if is_solved(board) or board.is_complete():
        return board

    logger.info(
        "Deterministic solving ended with %d unknown cells, beginning lookahead search",
        board.count_unknown(),
    )

    while True:
        previous = board
        board = search_pass(board, stats)
        if stats is not None:
            stats.iterations += 1

        if is_solved(board):
            return board

        if board == previous or board.is_complete():
            logger.info("Lookahead made no further progress, %d cells left", board.count_unknown())
            return board


class LookaheadSolver(BaseSolver):
    """
    Binairo solver using propagation plus one-level lookahead.

    Features:
    - Balance fill and pair completion to a fixed point
    - Candidate cells ranked by solved neighbours, then line fill
    - Never backtracks: only values proven by a contradiction are kept

    Puzzles needing deeper reasoning come back partially filled.
    """

    name = "Lookahead"

    def _solve(self, board: BinairoBoard) -> Optional[BinairoBoard]:
        """Solve using propagation and guess-and-propagate passes."""
        self.stats.extra["commits"] = 0
        return solve(board, self.stats)
