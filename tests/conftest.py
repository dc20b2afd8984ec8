import functools

import pytest

from sort_bench.algorithms import STRATEGIES


@functools.total_ordering
class Keyed:
    """Compares by key only, so equal keys with different tags expose ordering."""

    comparisons = 0

    def __init__(self, key, tag=None):
        self.key = key
        self.tag = tag

    def __eq__(self, other):
        Keyed.comparisons += 1
        return self.key == other.key

    def __lt__(self, other):
        Keyed.comparisons += 1
        return self.key < other.key

    def __gt__(self, other):
        Keyed.comparisons += 1
        return self.key > other.key

    def __repr__(self):
        return f"Keyed({self.key!r}, {self.tag!r})"


@pytest.fixture(params=STRATEGIES, ids=lambda s: s.name)
def strategy(request):
    return request.param


@pytest.fixture
def keyed():
    Keyed.comparisons = 0
    return Keyed
