"""
Settings shared across the Binairo package.

Edit these to change the default puzzle size, the ranking weights or the
puzzle source without touching the solver code.
"""

from __future__ import annotations

from typing import Dict

# ==== Puzzle source =========================================================

# Size requested from the puzzle site when none is given
DEFAULT_SIZE: int = 30

# Base URL of the puzzle site; the size is passed as a query parameter
PUZZLE_URL: str = "https://www.puzzle-binairo.com/"

# Seconds to wait for the puzzle site before giving up
REQUEST_TIMEOUT: float = 10.0

# ==== Task encoding =========================================================

# Largest skip a single letter can encode ('z' skips 26 cells)
MAX_SKIP: int = 26

# ==== Candidate ranking =====================================================

# Weight of each solved orthogonal neighbour; dominates the line-fill terms
NEIGHBOUR_WEIGHT: int = 100

# ==== Rendering =============================================================

RENDER_SYMBOLS: Dict[int, str] = {
    -1: "-",
    0: "◼",
    1: "◻",
}

# ==== Benchmark =============================================================

# Maximum seconds per puzzle per solver
DEFAULT_BENCHMARK_TIMEOUT: float = 60.0
