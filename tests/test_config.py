import pytest

from sort_bench.config import DEFAULT_LENGTH, DEFAULT_SEED, BenchmarkConfig


def test_defaults():
    config = BenchmarkConfig()
    assert config.length == DEFAULT_LENGTH == 10000
    assert config.seed == DEFAULT_SEED == 42
    assert len(config.selected_strategies()) == 6


def test_negative_length_rejected():
    with pytest.raises(ValueError, match="length"):
        BenchmarkConfig(length=-5)


def test_unknown_algorithm_rejected():
    with pytest.raises(ValueError, match="Unknown sort strategy"):
        BenchmarkConfig(algorithms=["Quick sort", "Sleep sort"])


def test_algorithms_normalized_to_tuple():
    config = BenchmarkConfig(algorithms=["Quick sort"])
    assert config.algorithms == ("Quick sort",)
    assert [s.name for s in config.selected_strategies()] == ["Quick sort"]
