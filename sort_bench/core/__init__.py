"""Core components for the sorting benchmark."""

from sort_bench.core.benchmark_result import BenchmarkResult
from sort_bench.core.sequence import generate_sequence, is_sorted
from sort_bench.core.stopwatch import Stopwatch

__all__ = [
    "BenchmarkResult",
    "Stopwatch",
    "generate_sequence",
    "is_sorted",
]
