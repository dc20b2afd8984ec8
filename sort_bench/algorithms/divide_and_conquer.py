"""Recursive divide-and-conquer sorts: quicksort and merge sort."""


def quick_sort(data: list) -> None:
    """Sort in place with Hoare-style quicksort using the middle element as pivot."""
    _quick_sort(data, 0, len(data) - 1)


def _quick_sort(data: list, left: int, right: int) -> None:
    if left >= right:
        return

    pivot = data[(left + right) // 2]

    i = left
    j = right

    # The pivot value stays inside [left, right], which bounds both scans.
    while i <= j:
        while data[i] < pivot:
            i += 1
        while data[j] > pivot:
            j -= 1

        if i <= j:
            data[i], data[j] = data[j], data[i]
            i += 1
            j -= 1

    if left < j:
        _quick_sort(data, left, j)
    if i < right:
        _quick_sort(data, i, right)


def merge_sort(data: list) -> None:
    """Stable top-down merge sort.

    A scratch buffer the size of ``data`` is allocated per call and shared by
    every merge step of that call only.
    """
    scratch = [None] * len(data)
    _merge_sort(data, scratch, 0, len(data) - 1)


def _merge_sort(data: list, scratch: list, left: int, right: int) -> None:
    if left >= right:
        return

    mid = (left + right) // 2

    _merge_sort(data, scratch, left, mid)
    _merge_sort(data, scratch, mid + 1, right)
    _merge(data, scratch, left, mid, right)


def _merge(data: list, scratch: list, left: int, mid: int, right: int) -> None:
    """Merge sorted runs [left, mid] and [mid+1, right] through the scratch buffer."""
    i = left
    j = mid + 1
    k = left

    while i <= mid and j <= right:
        # Ties take the left run, which keeps the sort stable.
        if data[i] <= data[j]:
            scratch[k] = data[i]
            i += 1
        else:
            scratch[k] = data[j]
            j += 1
        k += 1

    while i <= mid:
        scratch[k] = data[i]
        i += 1
        k += 1

    while j <= right:
        scratch[k] = data[j]
        j += 1
        k += 1

    data[left:right + 1] = scratch[left:right + 1]
