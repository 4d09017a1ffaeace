"""Classic comparison sorts, each returning a new sorted list."""

from __future__ import annotations

from collections.abc import Sequence


def bubble_sort(values: Sequence[int]) -> list[int]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    result = list(values)
    for i in range(len(result) - 1, -1, -1):
        for j in range(i):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def insertion_sort(values: Sequence[int]) -> list[int]:
    """Sort by inserting each element into the sorted prefix before it."""
    result = list(values)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Sequence[int]) -> list[int]:
    """Stable sort by splitting in halves and merging the sorted halves."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[int], low: int, high: int) -> int:
    """Place the first element of the range at its final position and return it."""
    pivot = items[low]
    i, j = low, high
    while i < j:
        while items[i] <= pivot and i <= high - 1:
            i += 1
        while items[j] >= pivot and j >= low + 1:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def quick_sort(values: Sequence[int]) -> list[int]:
    """Sort by partitioning around the first element of each range."""
    result = list(values)

    def sort_range(low: int, high: int) -> None:
        if low < high:
            pivot_index = _partition(result, low, high)
            sort_range(low, pivot_index - 1)
            sort_range(pivot_index + 1, high)

    sort_range(0, len(result) - 1)
    return result


def recursive_bubble_sort(values: Sequence[int]) -> list[int]:
    """Bubble sort where each pass recurses on the unsorted prefix."""
    result = list(values)

    def bubble(n: int) -> None:
        if n <= 1:
            return
        for j in range(n - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
        bubble(n - 1)

    bubble(len(result))
    return result


def recursive_insertion_sort(values: Sequence[int]) -> list[int]:
    """Insertion sort where each insertion recurses on the next element."""
    result = list(values)

    def insert_from(i: int) -> None:
        if i >= len(result):
            return
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
        insert_from(i + 1)

    insert_from(1)
    return result


def selection_sort(values: Sequence[int]) -> list[int]:
    """Sort by swapping the smallest remaining element into place."""
    result = list(values)
    n = len(result)
    for i in range(n - 1):
        smallest = min(range(i, n), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result