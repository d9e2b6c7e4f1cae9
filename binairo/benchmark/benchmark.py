"""Run the Binairo solvers side by side on generated puzzles."""

from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import List, Dict, Any, Optional
from concurrent.futures import ThreadPoolExecutor, TimeoutError
import json
import os

from tqdm import tqdm

from ..config import DEFAULT_BENCHMARK_TIMEOUT
from ..core.board import BinairoBoard
from ..generator import BinairoGenerator, Difficulty
from ..logging_utils import get_logger
from ..solvers import BaseSolver, SolverStats, LookaheadSolver, DFSSolver

logger = get_logger("benchmark")


@dataclass
class BenchmarkResult:
    """One solver run on one puzzle."""
    puzzle_id: int
    difficulty: str
    algorithm: str
    solved: bool
    time_seconds: float
    memory_bytes: int
    iterations: int
    backtracks: int
    nodes_explored: int
    cells_left: int
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_stats(cls, puzzle_id: int, difficulty: str, algorithm: str,
                   stats: SolverStats) -> BenchmarkResult:
        return cls(
            puzzle_id=puzzle_id,
            difficulty=difficulty,
            algorithm=algorithm,
            solved=stats.solved,
            time_seconds=stats.time_seconds,
            memory_bytes=stats.memory_bytes,
            iterations=stats.iterations,
            backtracks=stats.backtracks,
            nodes_explored=stats.nodes_explored,
            cells_left=stats.cells_left,
            extra=dict(stats.extra),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra")
        data["memory_mb"] = self.memory_bytes / (1024 * 1024)
        data.update(extra)
        return data


def _aggregate(results: List[BenchmarkResult]) -> Dict[str, Any]:
    solved = sum(1 for r in results if r.solved)
    times = [r.time_seconds for r in results]
    return {
        "accuracy": solved / len(results) * 100,
        "avg_time_seconds": sum(times) / len(times),
        "max_time_seconds": max(times),
        "avg_memory_mb": sum(r.memory_bytes for r in results) / len(results) / (1024 * 1024),
        "avg_cells_left": sum(r.cells_left for r in results) / len(results),
        "total_solved": solved,
        "total_tested": len(results),
    }


class Benchmark:
    """
    Generates puzzles per difficulty and runs every solver on each of them.

    Each run is bounded by ``timeout_seconds``; a timeout or a crash is
    recorded as an unsolved result with the error in ``extra``.
    """

    def __init__(
        self,
        puzzles_per_difficulty: int = 10,
        difficulties: Optional[List[Difficulty]] = None,
        solvers: Optional[Dict[str, BaseSolver]] = None,
        timeout_seconds: float = DEFAULT_BENCHMARK_TIMEOUT,
        seed: Optional[int] = None,
        size: int = 6,
    ):
        self.puzzles_per_difficulty = puzzles_per_difficulty
        self.difficulties = difficulties or list(Difficulty)
        self.timeout_seconds = timeout_seconds
        self.seed = seed
        self.size = size
        self.solvers = solvers or {
            "Lookahead": LookaheadSolver(),
            "DFS": DFSSolver(),
        }

        self.puzzles: Dict[str, List[BinairoBoard]] = {}
        self.results: List[BenchmarkResult] = []

    def generate_puzzles(self) -> None:
        generator = BinairoGenerator(size=self.size, seed=self.seed)

        logger.info("Generating %d puzzles of size %d per difficulty",
                    self.puzzles_per_difficulty, self.size)
        for difficulty in self.difficulties:
            self.puzzles[difficulty.value] = generator.generate_batch(
                self.puzzles_per_difficulty, difficulty
            )

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """Run every solver on every puzzle, generating puzzles first if needed."""
        if not self.puzzles:
            self.generate_puzzles()

        self.results = []
        total = sum(len(p) for p in self.puzzles.values()) * len(self.solvers)

        with tqdm(total=total, desc="Benchmarking", disable=not show_progress) as pbar:
            for difficulty, puzzles in self.puzzles.items():
                for puzzle_id, puzzle in enumerate(puzzles):
                    for solver_name, solver in self.solvers.items():
                        self.results.append(
                            self._run_single(puzzle, puzzle_id, difficulty, solver_name, solver)
                        )
                        pbar.update(1)

        return self.results

    def _failed_result(
        self, puzzle: BinairoBoard, puzzle_id: int, difficulty: str, solver_name: str, error: str
    ) -> BenchmarkResult:
        return BenchmarkResult(
            puzzle_id=puzzle_id,
            difficulty=difficulty,
            algorithm=solver_name,
            solved=False,
            time_seconds=self.timeout_seconds,
            memory_bytes=0,
            iterations=0,
            backtracks=0,
            nodes_explored=0,
            cells_left=puzzle.count_unknown(),
            extra={"error": error},
        )

    def _run_single(
        self,
        puzzle: BinairoBoard,
        puzzle_id: int,
        difficulty: str,
        solver_name: str,
        solver: BaseSolver,
    ) -> BenchmarkResult:
        with ThreadPoolExecutor(max_workers=1) as executor:
            future = executor.submit(solver.solve, puzzle)
            try:
                _, stats = future.result(timeout=self.timeout_seconds)
            except TimeoutError:
                logger.warning("%s timed out on %s puzzle %d", solver_name, difficulty, puzzle_id)
                return self._failed_result(puzzle, puzzle_id, difficulty, solver_name, "Timeout")
            except Exception as e:
                logger.warning("%s crashed on %s puzzle %d: %s", solver_name, difficulty, puzzle_id, e)
                return self._failed_result(puzzle, puzzle_id, difficulty, solver_name, str(e))

        return BenchmarkResult.from_stats(puzzle_id, difficulty, solver_name, stats)

    def get_summary(self) -> Dict[str, Any]:
        """Aggregate results per solver, and per difficulty and solver."""
        by_algorithm = {}
        by_difficulty: Dict[str, Dict[str, Any]] = {}

        for solver_name in self.solvers:
            runs = [r for r in self.results if r.algorithm == solver_name]
            if runs:
                by_algorithm[solver_name] = _aggregate(runs)

            for difficulty in self.difficulties:
                cell = [r for r in runs if r.difficulty == difficulty.value]
                if cell:
                    by_difficulty.setdefault(difficulty.value, {})[solver_name] = _aggregate(cell)

        return {
            "total_puzzles": len(self.results) // max(len(self.solvers), 1),
            "board_size": self.size,
            "solvers_tested": list(self.solvers),
            "difficulties": [d.value for d in self.difficulties],
            "results_by_algorithm": by_algorithm,
            "results_by_difficulty": by_difficulty,
        }

    def save_results(self, output_dir: str) -> None:
        """Write results and summary as JSON, and the puzzles as task files."""
        os.makedirs(output_dir, exist_ok=True)

        with open(os.path.join(output_dir, "benchmark_results.json"), "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        with open(os.path.join(output_dir, "benchmark_summary.json"), "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        for difficulty, puzzles in self.puzzles.items():
            BinairoGenerator.save_to_folder(
                puzzles,
                os.path.join(output_dir, "puzzles", difficulty),
                prefix=f"puzzle_{difficulty}",
            )

        logger.info("Results and puzzles saved to %s", output_dir)
