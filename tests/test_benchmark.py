"""Tests for the benchmark runner and its charts."""

import json

import pytest
from binairo.benchmark import Benchmark
from binairo.benchmark.visualizer import Visualizer
from binairo.generator import Difficulty


@pytest.fixture
def benchmark():
    bench = Benchmark(
        puzzles_per_difficulty=2,
        difficulties=[Difficulty.EASY, Difficulty.HARD],
        seed=42,
        size=4,
        timeout_seconds=30.0,
    )
    bench.run(show_progress=False)
    return bench


class TestBenchmark:
    """Tests for Benchmark class."""

    def test_runs_every_solver_on_every_puzzle(self, benchmark):
        """2 difficulties x 2 puzzles x 2 solvers."""
        assert len(benchmark.results) == 8
        assert {r.algorithm for r in benchmark.results} == {"Lookahead", "DFS"}

    def test_dfs_always_solves(self, benchmark):
        """Generated puzzles are solvable, so backtracking never fails."""
        dfs = [r for r in benchmark.results if r.algorithm == "DFS"]
        assert all(r.solved for r in dfs)
        assert all(r.cells_left == 0 for r in dfs)

    def test_summary(self, benchmark):
        """Summary groups results by algorithm and difficulty."""
        summary = benchmark.get_summary()

        assert summary["total_puzzles"] == 4
        assert summary["board_size"] == 4
        assert summary["results_by_algorithm"]["DFS"]["accuracy"] == 100
        assert set(summary["results_by_difficulty"]) == {"easy", "hard"}
        assert summary["results_by_difficulty"]["easy"]["DFS"]["total_tested"] == 2

    def test_save_results(self, benchmark, tmp_path):
        """Results, summary and puzzles are written to the output directory."""
        benchmark.save_results(str(tmp_path))

        results = json.loads((tmp_path / "benchmark_results.json").read_text())
        assert len(results) == 8
        assert "memory_mb" in results[0]
        assert "extra" not in results[0]
        assert (tmp_path / "benchmark_summary.json").exists()
        assert (tmp_path / "puzzles" / "easy" / "puzzle_easy_1.txt").exists()


class TestVisualizer:
    """Tests for chart generation."""

    def test_generate_all(self, benchmark, tmp_path):
        """Every chart and the markdown table are written."""
        visualizer = Visualizer(benchmark.results, str(tmp_path))
        charts = visualizer.generate_all()
        table = visualizer.generate_summary_table()

        assert len(charts) == 3
        for chart in charts:
            assert chart.endswith(".png")
        assert "| Lookahead |" in open(table).read()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
