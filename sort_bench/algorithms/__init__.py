"""Sort strategies for the benchmark."""

from .divide_and_conquer import merge_sort, quick_sort
from .quadratic import (
    bubble_sort_basic,
    bubble_sort_optimized,
    insertion_sort,
    selection_sort,
)
from .registry import STRATEGIES, SortStrategy, get_strategy, strategy_names

__all__ = [
    "STRATEGIES",
    "SortStrategy",
    "bubble_sort_basic",
    "bubble_sort_optimized",
    "get_strategy",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "selection_sort",
    "strategy_names",
]
