"""Visualization utilities for benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult


class Visualizer:
    """
    Visualization generator for Binairo solver benchmark results.

    Creates charts comparing algorithm performance across various metrics.
    """

    # Color palette for algorithms
    COLORS = {
        "Lookahead": "#3498db",  # Blue
        "DFS": "#2ecc71",        # Green
    }

    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        # Set style
        sns.set_theme(style="whitegrid")
        sns.set_palette("husl")

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_time_comparison(),
            self.plot_accuracy_comparison(),
            self.plot_cells_left(),
        ]

    def _algorithms(self) -> List[str]:
        return sorted(set(r.algorithm for r in self.results))

    def _difficulties(self) -> List[str]:
        return sorted(set(r.difficulty for r in self.results))

    def _save(self, name: str) -> str:
        plt.tight_layout()
        path = os.path.join(self.output_dir, name)
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()
        return path

    def plot_time_comparison(self) -> str:
        """Create bar chart comparing average solve times."""
        fig, ax = plt.subplots(figsize=(10, 6))

        algorithms = self._algorithms()
        avg_times = []
        colors = []

        for algo in algorithms:
            times = [r.time_seconds for r in self.results if r.algorithm == algo]
            avg_times.append(np.mean(times))
            colors.append(self.COLORS.get(algo, "#95a5a6"))

        bars = ax.bar(algorithms, avg_times, color=colors, edgecolor='black', linewidth=0.5)

        # Add value labels on bars
        for bar, time in zip(bars, avg_times):
            height = bar.get_height()
            ax.annotate(f'{time:.4f}s',
                        xy=(bar.get_x() + bar.get_width() / 2, height),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)

        ax.set_xlabel('Algorithm', fontsize=12)
        ax.set_ylabel('Average Time (seconds)', fontsize=12)
        ax.set_title('Average Solve Time by Algorithm', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        return self._save("time_comparison.png")

    def _grouped_bars(self, ax, metric) -> None:
        algorithms = self._algorithms()
        difficulties = self._difficulties()

        x = np.arange(len(difficulties))
        width = 0.8 / len(algorithms)

        for i, algo in enumerate(algorithms):
            values = []
            for diff in difficulties:
                subset = [
                    r for r in self.results
                    if r.algorithm == algo and r.difficulty == diff
                ]
                values.append(metric(subset) if subset else 0)

            offset = (i - len(algorithms) / 2 + 0.5) * width
            ax.bar(x + offset, values, width,
                   label=algo,
                   color=self.COLORS.get(algo, "#95a5a6"),
                   edgecolor='black', linewidth=0.5)

        ax.set_xlabel('Difficulty', fontsize=12)
        ax.set_xticks(x)
        ax.set_xticklabels([d.capitalize() for d in difficulties])
        ax.legend(title='Algorithm', bbox_to_anchor=(1.05, 1), loc='upper left')

    def plot_accuracy_comparison(self) -> str:
        """Create grouped bar chart comparing solve accuracy by difficulty."""
        fig, ax = plt.subplots(figsize=(12, 6))

        self._grouped_bars(
            ax, lambda subset: sum(1 for r in subset if r.solved) / len(subset) * 100
        )

        ax.set_ylabel('Accuracy (%)', fontsize=12)
        ax.set_title('Solve Accuracy by Difficulty and Algorithm', fontsize=14, fontweight='bold')
        ax.set_ylim(0, 115)
        ax.axhline(y=100, color='gray', linestyle='--', alpha=0.3)

        return self._save("accuracy_comparison.png")

    def plot_cells_left(self) -> str:
        """Create grouped bar chart of unknown cells left behind, by difficulty."""
        fig, ax = plt.subplots(figsize=(12, 6))

        self._grouped_bars(ax, lambda subset: np.mean([r.cells_left for r in subset]))

        ax.set_ylabel('Average Unknown Cells Left', fontsize=12)
        ax.set_title('Unresolved Cells by Difficulty and Algorithm', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        return self._save("cells_left.png")

    def generate_summary_table(self) -> str:
        """Generate a markdown summary table."""
        lines = [
            "# Benchmark Summary\n",
            "| Algorithm | Accuracy | Avg Time | Avg Memory | Avg Cells Left |",
            "|-----------|----------|----------|------------|----------------|"
        ]

        for algo in self._algorithms():
            algo_results = [r for r in self.results if r.algorithm == algo]

            solved = sum(1 for r in algo_results if r.solved)
            accuracy = (solved / len(algo_results)) * 100 if algo_results else 0

            avg_time = np.mean([r.time_seconds for r in algo_results])
            avg_memory = np.mean([r.memory_bytes / (1024 * 1024) for r in algo_results])
            avg_left = np.mean([r.cells_left for r in algo_results])

            lines.append(
                f"| {algo} | {accuracy:.1f}% | {avg_time:.4f}s | {avg_memory:.2f} MB | {avg_left:.1f} |"
            )

        content = "\n".join(lines)

        path = os.path.join(self.output_dir, "benchmark_summary.md")
        with open(path, "w") as f:
            f.write(content)

        return path
