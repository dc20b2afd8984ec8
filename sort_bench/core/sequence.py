"""Deterministic input generation and sortedness checks."""

import logging
import random
from typing import Sequence

logger = logging.getLogger(__name__)

# Exclusive upper bound of generated values (Int32.MaxValue).
MAX_VALUE = 2**31 - 1


def generate_sequence(length: int, seed: int) -> list[int]:
    """Generate a reproducible list of non-negative integers.

    The same (length, seed) pair yields the same list on every call and
    in every process.

    Args:
        length: Number of elements to produce.
        seed: Seed for the pseudo-random generator.

    Returns:
        A new list of ``length`` integers in ``[0, MAX_VALUE)``.

    Raises:
        ValueError: If length is negative.
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")

    rng = random.Random(seed)
    values = [rng.randrange(MAX_VALUE) for _ in range(length)]
    logger.debug("Generated %d values with seed %d", length, seed)
    return values


def is_sorted(seq: Sequence) -> bool:
    """Return True if every element is <= its successor."""
    for i in range(1, len(seq)):
        if seq[i - 1] > seq[i]:
            return False
    return True
