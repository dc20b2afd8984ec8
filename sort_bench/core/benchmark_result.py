from dataclasses import dataclass


@dataclass(frozen=True)
class BenchmarkResult:
    """Outcome of running one sort strategy against a cloned sequence.

    Attributes:
        name: Display name of the strategy.
        elapsed: Wall-clock duration of the sort call, in seconds.
        sorted: Whether the sequence was non-decreasing afterwards.
    """
    name: str
    elapsed: float
    sorted: bool

    def __post_init__(self):
        """Validate result fields."""
        if not self.name:
            raise ValueError("name must be non-empty")

        if self.elapsed < 0:
            raise ValueError("elapsed must be non-negative")

    @property
    def elapsed_ms(self) -> int:
        """Elapsed time truncated to whole milliseconds."""
        return int(self.elapsed * 1000)
