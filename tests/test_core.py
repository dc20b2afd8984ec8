import subprocess
import sys
from pathlib import Path

import pytest

from sort_bench.core import BenchmarkResult, Stopwatch, generate_sequence, is_sorted
from sort_bench.core.sequence import MAX_VALUE


def test_generate_sequence_is_deterministic():
    assert generate_sequence(1000, 42) == generate_sequence(1000, 42)


def test_generate_sequence_differs_by_seed():
    assert generate_sequence(100, 1) != generate_sequence(100, 2)


def test_generate_sequence_length_and_range():
    values = generate_sequence(500, 7)
    assert len(values) == 500
    assert all(0 <= v < MAX_VALUE for v in values)


def test_generate_sequence_same_across_processes():
    code = "from sort_bench.core import generate_sequence; print(generate_sequence(20, 42))"
    result = subprocess.run(
        [sys.executable, "-c", code],
        capture_output=True,
        text=True,
        check=True,
        cwd=Path(__file__).resolve().parent.parent,
    )
    assert result.stdout.strip() == str(generate_sequence(20, 42))


def test_generate_sequence_empty():
    assert generate_sequence(0, 42) == []


def test_generate_sequence_rejects_negative_length():
    with pytest.raises(ValueError, match="non-negative"):
        generate_sequence(-1, 42)


@pytest.mark.parametrize("seq, expected", [
    ([], True),
    ([7], True),
    ([1, 1, 2, 3], True),
    ((1, 2, 3), True),
    ([2, 1], False),
    ([1, 2, 5, 4, 6], False),
])
def test_is_sorted(seq, expected):
    assert is_sorted(seq) is expected


def test_stopwatch_uses_injected_clock():
    ticks = iter([100.0, 100.75])
    stopwatch = Stopwatch(lambda: next(ticks))
    stopwatch.start()
    assert stopwatch.elapsed() == pytest.approx(0.75)


def test_stopwatch_requires_start():
    with pytest.raises(RuntimeError):
        Stopwatch().elapsed()


def test_benchmark_result_elapsed_ms_truncates():
    result = BenchmarkResult(name="Quick sort", elapsed=0.0129, sorted=True)
    assert result.elapsed_ms == 12


def test_benchmark_result_is_immutable():
    result = BenchmarkResult(name="Quick sort", elapsed=0.1, sorted=True)
    with pytest.raises(AttributeError):
        result.sorted = False


def test_benchmark_result_rejects_negative_elapsed():
    with pytest.raises(ValueError):
        BenchmarkResult(name="Quick sort", elapsed=-1.0, sorted=True)
