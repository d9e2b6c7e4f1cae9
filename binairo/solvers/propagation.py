"""
Deterministic constraint propagation for Binairo boards.

Two rules are applied over every row and column until neither changes
the board:

- balance fill: a line that already holds N/2 cells of one color gets
  all its unknown cells set to the other color;
- pair completion: in every window of three cells, ``XX?``, ``X?X`` and
  ``?XX`` force the unknown cell to the opposite of ``X``.

Propagation only ever turns unknown cells into colors, so it reaches a
fixed point after at most N*N assignments.
"""

from __future__ import annotations

import numpy as np

from ..core.board import BinairoBoard, UNKNOWN, WHITE, BLACK
from ..logging_utils import get_logger

logger = get_logger("propagation")


def _fill_line(line: np.ndarray) -> bool:
    half = len(line) // 2
    unknown = line == UNKNOWN
    if not unknown.any():
        return False

    whites = BinairoBoard.count_color(line, WHITE)
    blacks = BinairoBoard.count_color(line, BLACK)

    if whites == half:
        line[unknown] = BLACK
        return True
    if blacks == half:
        line[unknown] = WHITE
        return True
    return False


def _complete_line_pairs(line: np.ndarray) -> bool:
    changed = False
    # Windows are scanned left to right and see the writes of earlier windows.
    for i in range(len(line) - 2):
        a, b, c = line[i], line[i + 1], line[i + 2]
        if a != UNKNOWN and a == b and c == UNKNOWN:      # XX?
            line[i + 2] = 1 - a
            changed = True
        elif a != UNKNOWN and a == c and b == UNKNOWN:    # X?X
            line[i + 1] = 1 - a
            changed = True
        elif b != UNKNOWN and b == c and a == UNKNOWN:    # ?XX
            line[i] = 1 - b
            changed = True
    return changed


def fill_balanced_lines(board: BinairoBoard) -> bool:
    """
    Apply the balance rule to every row, then every column, in place.

    Returns:
        True if any cell was colored.
    """
    changed = False
    for line in board.lines():
        changed |= _fill_line(line)
    return changed


def complete_pairs(board: BinairoBoard) -> bool:
    """
    Apply the no-three-in-a-row completion to every row, then every column,
    in place.

    Returns:
        True if any cell was colored.
    """
    changed = False
    for line in board.lines():
        changed |= _complete_line_pairs(line)
    return changed


def propagate_inplace(board: BinairoBoard) -> int:
    """
    Run both rules on the board until a full pass changes nothing.

    Every pass but the last colors at least one cell, so the loop runs at
    most N*N + 1 times.

    Returns:
        The number of passes made, including the final unchanged one.
    """
    passes = 0
    while True:
        passes += 1
        changed = fill_balanced_lines(board)
        changed |= complete_pairs(board)
        if not changed:
            break
    logger.debug("propagation reached a fixed point after %d passes", passes)
    return passes


def propagate(board: BinairoBoard) -> BinairoBoard:
    """Return a propagated copy of the board; the input is left untouched."""
    result = board.copy()
    propagate_inplace(result)
    return result
