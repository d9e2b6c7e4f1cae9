"""Unit tests for puzzle generator."""

import pytest
from binairo.core.board import BinairoBoard
from binairo.core.validator import has_unique_solution, validate_solution
from binairo.errors import InvalidBoardError
from binairo.generator import BinairoGenerator, Difficulty


class TestBinairoGenerator:
    """Tests for BinairoGenerator class."""

    def test_generate_creates_valid_puzzle(self):
        """Test that generated puzzles are valid."""
        generator = BinairoGenerator(seed=42)
        puzzle = generator.generate(Difficulty.EASY)

        assert puzzle.is_valid()
        assert puzzle.count_unknown() > 0
        assert puzzle.count_filled() > 0

    def test_generate_solution(self):
        """A generated solution satisfies every rule."""
        generator = BinairoGenerator(size=8, seed=7)
        solution = generator.generate_solution()

        assert solution.size == 8
        assert solution.is_solved()

    def test_generate_with_solution(self):
        """Test generating puzzle with solution."""
        generator = BinairoGenerator(seed=42)
        puzzle, solution = generator.generate_with_solution(Difficulty.MEDIUM)

        assert puzzle.is_valid()
        assert solution.is_solved()
        assert validate_solution(puzzle, solution)

    def test_puzzle_has_unique_solution(self):
        """Cells are only removed while the answer stays unique."""
        generator = BinairoGenerator(seed=3)
        puzzle = generator.generate(Difficulty.EXPERT)
        assert has_unique_solution(puzzle)

    def test_easy_keeps_enough_clues(self):
        """Removal stops once the target clue count is reached."""
        generator = BinairoGenerator(seed=11)
        puzzle = generator.generate(Difficulty.EASY)

        min_fraction, _ = Difficulty.EASY.clue_fraction
        assert puzzle.count_filled() >= int(min_fraction * 36)

    def test_generate_batch(self):
        """Test batch generation."""
        generator = BinairoGenerator(size=4, seed=42)
        puzzles = generator.generate_batch(3, Difficulty.MEDIUM)

        assert len(puzzles) == 3
        for puzzle in puzzles:
            assert puzzle.size == 4
            assert puzzle.is_valid()

    def test_rejects_odd_size(self):
        """Odd boards cannot be generated."""
        with pytest.raises(InvalidBoardError):
            BinairoGenerator(size=7)

    def test_save_to_folder(self, tmp_path):
        """Saved files start with the size and the task string."""
        generator = BinairoGenerator(size=4, seed=1)
        puzzles = generator.generate_batch(2, Difficulty.EASY)

        BinairoGenerator.save_to_folder(puzzles, str(tmp_path), prefix="p")

        lines = (tmp_path / "p_1.txt").read_text(encoding="utf-8").splitlines()
        assert lines[0] == "size=4"
        assert BinairoBoard.from_task(lines[1], 4) == puzzles[0]
        assert (tmp_path / "p_2.txt").exists()


class TestDifficultyLevels:
    """Test difficulty level clue ranges."""

    def test_ranges_are_ordered(self):
        """Harder levels give fewer clues."""
        levels = [Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD, Difficulty.EXPERT]
        lows = [level.clue_fraction[0] for level in levels]
        assert lows == sorted(lows, reverse=True)

    def test_fractions_are_shares(self):
        """Every range lies within 0 and 1."""
        for level in Difficulty:
            low, high = level.clue_fraction
            assert 0 < low < high < 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
