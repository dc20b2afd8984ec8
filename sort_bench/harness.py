"""Benchmark harness that times each sort strategy on an identical input."""

import logging
from typing import Callable, Iterator, Optional

from .algorithms import SortStrategy
from .config import BenchmarkConfig
from .core import BenchmarkResult, Stopwatch, generate_sequence, is_sorted

logger = logging.getLogger(__name__)


class BenchmarkHarness:
    """Runs sort strategies against fresh clones of one base sequence.

    The harness workflow for each strategy:
    1. Clone the base sequence
    2. Time the strategy on the clone
    3. Validate the clone is sorted
    4. Return a BenchmarkResult

    Strategies run one at a time and never see each other's clones.
    """

    def __init__(
        self,
        config: BenchmarkConfig,
        clock: Optional[Callable[[], float]] = None,
    ):
        """Initialize the harness and generate the base sequence.

        Args:
            config: Sequence length, seed and strategy selection.
            clock: Monotonic clock returning seconds; defaults to time.perf_counter.
        """
        self.config = config
        self._clock = clock
        self._base = tuple(generate_sequence(config.length, config.seed))

        logger.info(
            "Initialized BenchmarkHarness: length=%d, seed=%d, strategies=%d",
            config.length,
            config.seed,
            len(config.selected_strategies()),
        )

    @property
    def base_sequence(self) -> tuple[int, ...]:
        return self._base

    def run_one(self, strategy: SortStrategy) -> BenchmarkResult:
        """Run a single strategy on a fresh clone of the base sequence.

        Args:
            strategy: The strategy to benchmark.

        Returns:
            BenchmarkResult with the strategy name, elapsed time and sortedness.
        """
        data = list(self._base)
        logger.debug("Running %s on %d elements", strategy.name, len(data))

        stopwatch = Stopwatch(self._clock)
        stopwatch.start()
        strategy(data)
        elapsed = stopwatch.elapsed()

        result = BenchmarkResult(
            name=strategy.name,
            elapsed=elapsed,
            sorted=is_sorted(data),
        )

        if result.sorted:
            logger.info("%s finished in %d ms", result.name, result.elapsed_ms)
        else:
            logger.warning("%s produced an unsorted sequence", result.name)

        return result

    def run_all(self) -> Iterator[BenchmarkResult]:
        """Run every selected strategy sequentially, yielding each result."""
        strategies = self.config.selected_strategies()
        logger.info("Starting benchmark of %d strategies", len(strategies))

        for strategy in strategies:
            yield self.run_one(strategy)

        logger.info("Benchmark completed")
