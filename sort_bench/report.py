"""Console report for benchmark results."""

import sys
from typing import Iterable, Optional, TextIO

from .algorithms import get_strategy
from .config import BenchmarkConfig
from .core import BenchmarkResult

TITLE = "=== Sorting algorithms benchmark ==="
OPTIMIZED_HEADER = "--- Optimized algorithm ---"


def _is_optimized(name: str) -> bool:
    try:
        return get_strategy(name).optimized
    except KeyError:
        return False


def format_result(result: BenchmarkResult) -> str:
    """Format one result as a table row.

    Example:
        ``Quick sort           |      3 ms | Sorted: True``
    """
    return f"{result.name:<20} | {result.elapsed_ms:6d} ms | Sorted: {result.sorted}"


def print_report(
    config: BenchmarkConfig,
    results: Iterable[BenchmarkResult],
    out: Optional[TextIO] = None,
) -> list[BenchmarkResult]:
    """Print the report while consuming results.

    Rows are written as each result arrives, so a lazy iterable streams
    its output. Results of optimized strategies are printed under their
    own section header.

    Args:
        config: The configuration the results were produced with.
        results: Benchmark results in run order.
        out: Text stream to write to (default: sys.stdout).

    Returns:
        The consumed results as a list.
    """
    out = out or sys.stdout

    print(TITLE, file=out)
    print(f"Array size: {config.length} (seed {config.seed})", file=out)
    print(file=out)

    collected = []
    optimized_section = False
    for result in results:
        if _is_optimized(result.name) and not optimized_section:
            print(f"\n{OPTIMIZED_HEADER}", file=out)
            optimized_section = True

        print(format_result(result), file=out, flush=True)
        collected.append(result)

    print("\nDone.", file=out)
    return collected
