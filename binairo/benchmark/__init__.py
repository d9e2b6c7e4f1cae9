"""Benchmark module for comparing Binairo solvers."""

from .benchmark import Benchmark, BenchmarkResult

__all__ = ["Benchmark", "BenchmarkResult"]
