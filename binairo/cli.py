"""Command-line interface for the Binairo solver."""

import argparse
import json
import os
import sys

from .config import DEFAULT_SIZE
from .core.board import BinairoBoard
from .core.validator import is_solved, is_valid_board
from .errors import BinairoError
from .fetch import fetch_puzzle
from .generator import BinairoGenerator, Difficulty
from .logging_utils import set_verbosity
from .solvers import LookaheadSolver, DFSSolver
from .benchmark import Benchmark
from .benchmark.visualizer import Visualizer


SOLVERS = {
    "lookahead": ("Lookahead", LookaheadSolver),
    "dfs": ("DFS", DFSSolver),
}


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Binairo (Takuzu) Puzzle Solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve today's 30x30 puzzle from puzzle-binairo.com
  python -m binairo.cli fetch --size 30

  # Solve a run-length encoded 6x6 puzzle
  python -m binairo.cli solve --size 6 --task "b1c0e1a1d0g0"

  # Generate 5 hard 8x8 puzzles
  python -m binairo.cli generate --count 5 --difficulty hard --size 8
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Binairo puzzle")
    solve_parser.add_argument(
        "--task", "-t", type=str, required=True,
        help="Run-length task string ('0'/'1' cells, 'a'-'z' skip 1-26 cells)"
    )
    solve_parser.add_argument(
        "--size", "-n", type=int, required=True,
        help="Board size (even)"
    )
    solve_parser.add_argument(
        "--algorithm", "-a",
        choices=["lookahead", "dfs", "all"],
        default="lookahead",
        help="Solving algorithm to use (default: lookahead)"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show detailed solving statistics"
    )

    # Fetch command
    fetch_parser = subparsers.add_parser("fetch", help="Fetch a puzzle from puzzle-binairo.com and solve it")
    fetch_parser.add_argument(
        "--size", "-n", type=int, default=DEFAULT_SIZE,
        help=f"Board size to request (default: {DEFAULT_SIZE})"
    )
    fetch_parser.add_argument(
        "--algorithm", "-a",
        choices=["lookahead", "dfs", "all"],
        default="lookahead",
        help="Solving algorithm to use (default: lookahead)"
    )
    fetch_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show detailed solving statistics"
    )

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate Binairo puzzles")
    gen_parser.add_argument(
        "--count", "-c", type=int, default=5,
        help="Number of puzzles to generate (default: 5)"
    )
    gen_parser.add_argument(
        "--difficulty", "-d",
        choices=["easy", "medium", "hard", "expert", "all"],
        default="medium",
        help="Difficulty level (default: medium)"
    )
    gen_parser.add_argument(
        "--size", "-n", type=int, default=6,
        help="Board size (default: 6)"
    )
    gen_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output file for puzzles (JSON format)"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Run solver benchmarks")
    bench_parser.add_argument(
        "--puzzles", "-p", type=int, default=10,
        help="Puzzles per difficulty (default: 10)"
    )
    bench_parser.add_argument(
        "--difficulty", "-d",
        choices=["easy", "medium", "hard", "expert", "all"],
        default="all",
        help="Difficulty to benchmark (default: all)"
    )
    bench_parser.add_argument(
        "--size", "-n", type=int, default=6,
        help="Board size (default: 6)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--seed", "-s", type=int, default=42,
        help="Random seed for reproducibility (default: 42)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    set_verbosity(getattr(args, "verbose", False))

    if args.command == "solve":
        cmd_solve(args)
    elif args.command == "fetch":
        cmd_fetch(args)
    elif args.command == "generate":
        cmd_generate(args)
    elif args.command == "benchmark":
        cmd_benchmark(args)


def _difficulties(name):
    if name == "all":
        return list(Difficulty)
    return [Difficulty(name)]


def _run_solvers(board, algorithm, verbose):
    """Solve the board with the chosen algorithm(s) and print the outcome."""
    if algorithm == "all":
        selected = list(SOLVERS.values())
    else:
        selected = [SOLVERS[algorithm]]

    for name, solver_cls in selected:
        print(f"Solving with {name}...")
        solution, stats = solver_cls().solve(board)

        if stats.solved:
            print(f"✓ Solved in {stats.time_seconds:.4f}s")
        else:
            print(f"✗ Failed to solve ({stats.cells_left} cells left)")
        if solution is not None and not is_solved(solution):
            print("The solution is invalid!")

        if verbose:
            print(f"  Time: {stats.time_seconds:.4f}s")
            print(f"  Iterations: {stats.iterations:,}")
            print(f"  Probes: {stats.nodes_explored:,}")
            print(f"  Backtracks: {stats.backtracks:,}")
            print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")
            if solution is not None:
                print(f"  Rules respected: {is_valid_board(solution)}")

        if solution is not None:
            print(solution)
        print()


def cmd_solve(args):
    """Handle the solve command."""
    try:
        board = BinairoBoard.from_task(args.task, args.size)
    except BinairoError as e:
        print(f"Error parsing puzzle: {e}")
        sys.exit(1)

    print("Input puzzle:")
    print(board)
    print()

    _run_solvers(board, args.algorithm, args.verbose)


def cmd_fetch(args):
    """Handle the fetch command."""
    try:
        puzzle_id, board = fetch_puzzle(args.size)
    except BinairoError as e:
        print(f"Error fetching puzzle: {e}")
        sys.exit(1)

    print(f"Puzzle ID: {puzzle_id}")
    print(board)
    print()

    _run_solvers(board, args.algorithm, args.verbose)


def cmd_generate(args):
    """Handle the generate command."""
    generator = BinairoGenerator(size=args.size, seed=args.seed)
    difficulties = _difficulties(args.difficulty)

    all_puzzles = []

    for difficulty in difficulties:
        print(f"\nGenerating {args.count} {difficulty.value} {args.size}x{args.size} puzzles...")
        puzzles = generator.generate_batch(args.count, difficulty)

        for i, puzzle in enumerate(puzzles, 1):
            all_puzzles.append({
                "difficulty": difficulty.value,
                "index": i,
                "size": puzzle.size,
                "task": puzzle.to_task(),
                "clues": puzzle.count_filled()
            })

            print(f"\n--- {difficulty.value.capitalize()} Puzzle {i} ({puzzle.count_filled()} clues) ---")
            print(puzzle.to_task())
            print(puzzle)

        if not args.output:
            diff_dir = os.path.join("puzzles", difficulty.value)
            BinairoGenerator.save_to_folder(puzzles, diff_dir, prefix=f"puzzle_{difficulty.value}")

    if args.output:
        with open(args.output, "w") as f:
            json.dump(all_puzzles, f, indent=2)
        print(f"\nAll puzzles saved to {args.output}")
    else:
        print("\nPuzzles saved individually in the 'puzzles/' directory")

    print(f"\nTotal puzzles generated: {len(all_puzzles)}")


def cmd_benchmark(args):
    """Handle the benchmark command."""
    difficulties = _difficulties(args.difficulty)

    print("=" * 60)
    print("BINAIRO SOLVER BENCHMARK")
    print("=" * 60)
    print(f"Board size: {args.size}x{args.size}")
    print(f"Puzzles per difficulty: {args.puzzles}")
    print(f"Difficulties: {[d.value for d in difficulties]}")

    benchmark = Benchmark(
        puzzles_per_difficulty=args.puzzles,
        difficulties=difficulties,
        seed=args.seed,
        size=args.size
    )

    print(f"Algorithms: {', '.join(benchmark.solvers.keys())}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)

    for algo, stats in summary["results_by_algorithm"].items():
        print(f"\n{algo}:")
        print(f"  Accuracy: {stats['accuracy']:.1f}% ({stats['total_solved']}/{stats['total_tested']})")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")
        print(f"  Avg Cells Left: {stats['avg_cells_left']:.1f}")

    benchmark.save_results(args.output)

    if not args.no_charts:
        print("\nGenerating charts...")
        visualizer = Visualizer(results, args.output)
        charts = visualizer.generate_all()
        visualizer.generate_summary_table()
        print(f"Charts saved to {args.output}/")
        for chart in charts:
            print(f"  - {os.path.basename(chart)}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")


if __name__ == "__main__":
    main()
