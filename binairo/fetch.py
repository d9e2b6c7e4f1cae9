"""Download puzzles from puzzle-binairo.com."""

from __future__ import annotations
import re
from typing import Optional, Tuple

import requests

from .config import DEFAULT_SIZE, PUZZLE_URL, REQUEST_TIMEOUT
from .core.board import BinairoBoard
from .errors import FetchError
from .logging_utils import get_logger

logger = get_logger("fetch")

_TASK_RE = re.compile(r"var task = '([^']*)'")
_PUZZLE_ID_RE = re.compile(r'id="puzzleID">([^<]*)<')

SPECIAL_PUZZLE = "Special puzzle"


def fetch_body(size: int = DEFAULT_SIZE, session: Optional[requests.Session] = None) -> str:
    """
    Download the puzzle page for the given board size.

    Raises:
        FetchError: if the site cannot be reached or answers with an error.
    """
    http = session or requests
    logger.info("Fetching %dx%d puzzle from %s", size, size, PUZZLE_URL)
    try:
        response = http.get(PUZZLE_URL, params={"size": size}, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(f"Could not fetch puzzle page: {e}") from e
    return response.text


def scrape_task(body: str) -> str:
    """
    Extract the run-length task string from a puzzle page.

    The page declares it as ``var task = '...';``.
    """
    match = _TASK_RE.search(body)
    if match is None:
        raise FetchError("No task found in puzzle page")
    return match.group(1)


def scrape_puzzle_id(body: str) -> str:
    """Extract the puzzle id shown on the page, or "Special puzzle" when absent."""
    match = _PUZZLE_ID_RE.search(body)
    if match is None:
        return SPECIAL_PUZZLE
    return match.group(1).strip()


def fetch_puzzle(
    size: int = DEFAULT_SIZE,
    session: Optional[requests.Session] = None,
) -> Tuple[str, BinairoBoard]:
    """
    Fetch and decode a puzzle.

    Returns:
        Tuple of (puzzle id, board).
    """
    body = fetch_body(size, session=session)
    task = scrape_task(body)
    puzzle_id = scrape_puzzle_id(body)
    logger.debug("Puzzle %s task: %s", puzzle_id, task)
    return puzzle_id, BinairoBoard.from_task(task, size)
