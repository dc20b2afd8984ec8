import time
from typing import Callable, Optional


class Stopwatch:
    """Measures elapsed time against an injectable monotonic clock.

    The clock is any zero-argument callable returning seconds as a float.
    Tests pass a fake clock; production code uses ``time.perf_counter``.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self._clock = clock or time.perf_counter
        self._started_at: Optional[float] = None

    def start(self) -> None:
        self._started_at = self._clock()

    def elapsed(self) -> float:
        """Seconds since the last ``start()`` call.

        Raises:
            RuntimeError: If the stopwatch was never started.
        """
        if self._started_at is None:
            raise RuntimeError("Stopwatch has not been started")
        return max(0.0, self._clock() - self._started_at)
