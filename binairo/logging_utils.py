"""
Logging setup for the Binairo package.

All modules log through children of one "binairo" logger so the CLI can
raise or lower verbosity in a single place.
"""

from __future__ import annotations

import logging
from typing import Optional

LOGGER_NAME = "binairo"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return the package logger, or one of its children.

    A console handler is attached to the package logger the first time
    it is requested; the default level only lets warnings through.
    """
    root = logging.getLogger(LOGGER_NAME)

    if not root.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
        root.setLevel(logging.WARNING)

    if name is None:
        return root
    return root.getChild(name)


def set_verbosity(verbose: bool) -> None:
    """Show progress messages (INFO), or every solver step (DEBUG) when verbose."""
    get_logger().setLevel(logging.DEBUG if verbose else logging.INFO)
