"""Exception types raised by the Binairo package."""


class BinairoError(Exception):
    """Base class for all Binairo errors."""


class InvalidBoardError(BinairoError, ValueError):
    """Raised when a board has an unsupported size, shape or cell value."""


class MalformedTaskError(BinairoError, ValueError):
    """Raised when a run-length task string cannot be decoded."""


class SolverContractError(BinairoError, RuntimeError):
    """
    Raised when a solver component is called in a state its caller must
    never produce (e.g. ranking a board that has no unknown cells).

    These indicate a bug, not bad input, and are never caught by the solvers.
    """


class FetchError(BinairoError):
    """Raised when a puzzle cannot be downloaded or scraped."""
