"""Generator module for creating Binairo puzzles."""

from .generator import BinairoGenerator, Difficulty

__all__ = ["BinairoGenerator", "Difficulty"]
