"""Bar chart of benchmark timings."""

import logging
from pathlib import Path
from typing import Sequence

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from .core import BenchmarkResult  # noqa: E402

logger = logging.getLogger(__name__)


def plot_results(results: Sequence[BenchmarkResult], output_file: str, title: str = None) -> Path:
    """Plot elapsed time per strategy as a horizontal bar chart.

    Unsorted results are drawn in red so failures stand out.

    Args:
        results: Results to plot, in display order (top to bottom).
        output_file: Path of the image to write; parent directories are created.
        title: Optional chart title.

    Returns:
        Path the chart was saved to.

    Raises:
        ValueError: If there are no results to plot.
    """
    if not results:
        raise ValueError("No results to plot")

    names = [r.name for r in results]
    times = [r.elapsed * 1000 for r in results]
    colors = ['tab:blue' if r.sorted else 'tab:red' for r in results]

    fig, ax = plt.subplots(figsize=(10, 1 + 0.6 * len(results)))
    positions = range(len(results))
    ax.barh(positions, times, color=colors)
    ax.set_yticks(list(positions))
    ax.set_yticklabels(names)
    ax.invert_yaxis()
    ax.set_xlabel('Elapsed time (ms)', fontsize=12)
    ax.grid(True, axis='x', alpha=0.3)

    for pos, value in zip(positions, times):
        ax.annotate(f"{value:.1f}", (value, pos), xytext=(4, 0),
                    textcoords='offset points', va='center', fontsize=9)

    ax.set_title(title or 'Sorting Algorithm Benchmark', fontsize=14, fontweight='bold')
    fig.tight_layout()

    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close(fig)

    logger.info("Plot saved to: %s", output_path)
    return output_path
