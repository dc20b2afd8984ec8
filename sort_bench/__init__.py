"""Sorting algorithm benchmark suite."""

__version__ = "0.1.0"
