"""Named sort strategies in report order."""

import logging
from dataclasses import dataclass
from typing import Callable

from .divide_and_conquer import merge_sort, quick_sort
from .quadratic import (
    bubble_sort_basic,
    bubble_sort_optimized,
    insertion_sort,
    selection_sort,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SortStrategy:
    """A sort function paired with the name it is reported under.

    Attributes:
        name: Display name, unique within the registry.
        sort: Function sorting a list in place.
        optimized: True for the optimized variant reported in its own section.
    """
    name: str
    sort: Callable[[list], None]
    optimized: bool = False

    def __call__(self, data: list) -> None:
        self.sort(data)


STRATEGIES: tuple[SortStrategy, ...] = (
    SortStrategy("Bubble (basic)", bubble_sort_basic),
    SortStrategy("Selection sort", selection_sort),
    SortStrategy("Insertion sort", insertion_sort),
    SortStrategy("Quick sort", quick_sort),
    SortStrategy("Merge sort", merge_sort),
    SortStrategy("Bubble (optimized)", bubble_sort_optimized, optimized=True),
)


def strategy_names() -> list[str]:
    return [strategy.name for strategy in STRATEGIES]


def get_strategy(name: str) -> SortStrategy:
    """Look up a strategy by name, ignoring case.

    Args:
        name: Strategy name, e.g. "Quick sort".

    Returns:
        The matching SortStrategy.

    Raises:
        KeyError: If no strategy has that name.
    """
    wanted = name.strip().lower()
    for strategy in STRATEGIES:
        if strategy.name.lower() == wanted:
            return strategy

    logger.debug("Unknown strategy requested: %s", name)
    raise KeyError(f"Unknown sort strategy {name!r}; known: {', '.join(strategy_names())}")
