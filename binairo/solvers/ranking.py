"""Ordering of unknown cells for the lookahead search."""

from __future__ import annotations
from typing import List, Sequence, Tuple

import numpy as np

from ..config import NEIGHBOUR_WEIGHT
from ..core.board import BinairoBoard, UNKNOWN
from ..errors import SolverContractError


def score_cell(
    board: BinairoBoard,
    row: int,
    col: int,
    row_fill: Sequence[int],
    col_fill: Sequence[int],
) -> int:
    """
    Score how constrained an unknown cell is.

    Each colored orthogonal neighbour is worth NEIGHBOUR_WEIGHT; the number
    of colored cells in the cell's row and column breaks ties.
    """
    return (
        NEIGHBOUR_WEIGHT * board.neighbours_solved(row, col)
        + int(row_fill[row])
        + int(col_fill[col])
    )


def rank_candidates(board: BinairoBoard) -> List[Tuple[int, int]]:
    """
    Return every unknown cell, most constrained first.

    Cells with equal scores keep row-major order.

    Raises:
        SolverContractError: if the board has no unknown cell. Callers
            must check for a complete board first.
    """
    filled = board.grid != UNKNOWN
    row_fill = np.count_nonzero(filled, axis=1)
    col_fill = np.count_nonzero(filled, axis=0)

    scored = [
        (score_cell(board, row, col, row_fill, col_fill), (row, col))
        for row, col in board.get_unknown_cells()
    ]

    if not scored:
        raise SolverContractError(
            "No candidate cell left: the board is complete but was not detected as solved"
        )

    scored.sort(key=lambda item: item[0], reverse=True)
    return [cell for _, cell in scored]
