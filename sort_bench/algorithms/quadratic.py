"""Quadratic-time in-place sorts.

Each function sorts ``data`` in place and returns None.
"""


def bubble_sort_basic(data: list) -> None:
    """Bubble sort with no early exit: n full passes over every adjacent pair."""
    n = len(data)
    for _ in range(n):
        for j in range(n - 1):
            if data[j] > data[j + 1]:
                data[j], data[j + 1] = data[j + 1], data[j]


def selection_sort(data: list) -> None:
    n = len(data)
    for i in range(n - 1):
        min_index = i
        for j in range(i + 1, n):
            if data[j] < data[min_index]:
                min_index = j

        if min_index != i:
            data[i], data[min_index] = data[min_index], data[i]


def insertion_sort(data: list) -> None:
    """Insertion sort. Stable: elements shift only past strictly greater keys."""
    for i in range(1, len(data)):
        key = data[i]
        j = i - 1

        while j >= 0 and data[j] > key:
            data[j + 1] = data[j]
            j -= 1

        data[j + 1] = key


def bubble_sort_optimized(data: list) -> None:
    """Bubble sort that stops after a pass with no swaps.

    After every pass the largest remaining element has reached the end of
    the effective range, so the range shrinks by one. An already sorted
    input costs a single pass.
    """
    n = len(data)

    swapped = True
    while swapped:
        swapped = False

        for i in range(1, n):
            if data[i - 1] > data[i]:
                data[i - 1], data[i] = data[i], data[i - 1]
                swapped = True

        n -= 1
