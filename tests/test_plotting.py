import pytest

from sort_bench.core import BenchmarkResult
from sort_bench.plotting import plot_results


def test_plot_results_writes_image(tmp_path):
    results = [
        BenchmarkResult("Quick sort", 0.004, True),
        BenchmarkResult("Merge sort", 0.006, False),
    ]
    output = plot_results(results, str(tmp_path / "charts" / "timings.png"))
    assert output.exists()
    assert output.stat().st_size > 0


def test_plot_results_requires_results(tmp_path):
    with pytest.raises(ValueError):
        plot_results([], str(tmp_path / "empty.png"))
