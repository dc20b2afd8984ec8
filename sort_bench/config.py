"""Benchmark configuration."""

from dataclasses import dataclass, field

from .algorithms import STRATEGIES, SortStrategy, get_strategy

DEFAULT_LENGTH = 10000
DEFAULT_SEED = 42


@dataclass
class BenchmarkConfig:
    """Parameters for one benchmark run.

    Attributes:
        length: Number of elements in the generated base sequence.
        seed: Seed for the sequence generator.
        algorithms: Strategy names to run; empty runs every strategy.
    """
    length: int = DEFAULT_LENGTH
    seed: int = DEFAULT_SEED
    algorithms: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Validate configuration values."""
        if self.length < 0:
            raise ValueError("length must be non-negative")

        self.algorithms = tuple(self.algorithms)
        for name in self.algorithms:
            try:
                get_strategy(name)
            except KeyError as e:
                raise ValueError(e.args[0]) from e

    def selected_strategies(self) -> list[SortStrategy]:
        """Strategies to run, always in registry order."""
        if not self.algorithms:
            return list(STRATEGIES)

        wanted = {get_strategy(name).name for name in self.algorithms}
        return [strategy for strategy in STRATEGIES if strategy.name in wanted]
