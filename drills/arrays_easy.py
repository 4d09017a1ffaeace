"""Introductory array exercises, each in several approaches."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from functools import reduce
from operator import xor


def is_sorted(values: Sequence[int]) -> bool:
    """Return True if ``values`` never decreases."""
    return all(a <= b for a, b in zip(values, values[1:]))


def union_set(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Sorted distinct values found in either sequence."""
    return sorted(set(a) | set(b))


def union_sorted(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Union of two sorted sequences by merging with two pointers."""
    result: list[int] = []

    def add(value: int) -> None:
        if not result or result[-1] != value:
            result.append(value)

    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] <= b[j]:
            add(a[i])
            i += 1
        else:
            add(b[j])
            j += 1
    for value in a[i:]:
        add(value)
    for value in b[j:]:
        add(value)
    return result


def _require_values(values: Sequence[int]) -> None:
    if not values:
        raise ValueError("no values given")


def largest_sorted(values: Sequence[int]) -> int:
    """Largest value, taken as the last element after sorting."""
    _require_values(values)
    return sorted(values)[-1]


def largest(values: Sequence[int]) -> int:
    """Largest value, found in a single scan."""
    _require_values(values)
    best = values[0]
    for value in values:
        best = max(best, value)
    return best


def left_rotate_by_one(values: Sequence[int]) -> list[int]:
    """Move the first element to the end."""
    items = list(values)
    return items[1:] + items[:1]


def left_rotate(values: Sequence[int], k: int) -> list[int]:
    """Rotate left by ``k`` places using a buffer of the first ``k`` elements."""
    items = list(values)
    if not items:
        return items
    k %= len(items)
    moved = items[:k]
    return items[k:] + moved


def _reverse_range(items: list[int], start: int, end: int) -> None:
    while start < end:
        items[start], items[end] = items[end], items[start]
        start += 1
        end -= 1


def left_rotate_reversal(values: Sequence[int], k: int) -> list[int]:
    """Rotate left by ``k`` places with three in-place reversals."""
    items = list(values)
    n = len(items)
    if not n:
        return items
    k %= n
    _reverse_range(items, 0, k - 1)
    _reverse_range(items, k, n - 1)
    _reverse_range(items, 0, n - 1)
    return items


def right_rotate(values: Sequence[int], k: int) -> list[int]:
    """Rotate right by ``k`` places using a buffer of the last ``k`` elements."""
    items = list(values)
    if not items:
        return items
    k %= len(items)
    moved = items[len(items) - k :]
    return moved + items[: len(items) - k]


def right_rotate_reversal(values: Sequence[int], k: int) -> list[int]:
    """Rotate right by ``k`` places with three in-place reversals."""
    items = list(values)
    n = len(items)
    if not n:
        return items
    k %= n
    _reverse_range(items, 0, n - k - 1)
    _reverse_range(items, n - k, n - 1)
    _reverse_range(items, 0, n - 1)
    return items


def longest_subarray_brute(values: Sequence[int], target: int) -> list[int]:
    """Longest contiguous run summing to ``target``, trying every start.

    The first such run of the greatest length wins; empty if none exists.
    """
    best_start, best_len = 0, 0
    for i in range(len(values)):
        total = 0
        for j in range(i, len(values)):
            total += values[j]
            if total == target and j + 1 - i > best_len:
                best_start, best_len = i, j + 1 - i
    return list(values[best_start : best_start + best_len])


def longest_subarray_prefix(values: Sequence[int], target: int) -> int:
    """Length of the longest contiguous run summing to ``target``, via prefix sums."""
    first_seen: dict[int, int] = {}
    total = 0
    best = 0
    for i, value in enumerate(values):
        total += value
        if total == target:
            best = max(best, i + 1)
        rest = total - target
        if rest in first_seen:
            best = max(best, i - first_seen[rest])
        first_seen.setdefault(total, i)
    return best


def longest_subarray_window(values: Sequence[int], target: int) -> list[int]:
    """Longest contiguous run summing to ``target`` with a sliding window.

    Correct only when every value is non-negative.
    """
    n = len(values)
    if not n:
        return []
    left = right = 0
    total = values[0]
    best_len, best_start = 0, 0
    while right < n:
        while left <= right and total > target:
            total -= values[left]
            left += 1
        if total == target and right - left + 1 > best_len:
            best_len = right - left + 1
            best_start = left
        right += 1
        if right < n:
            total += values[right]
    return list(values[best_start : best_start + best_len])


def max_consecutive_ones(values: Sequence[int]) -> int:
    """Length of the longest run of ones."""
    best = run = 0
    for value in values:
        run = run + 1 if value == 1 else 0
        best = max(best, run)
    return best


def _present(values: Sequence[int], n: int) -> Sequence[int]:
    return values[: max(n - 1, 0)]


def missing_number_brute(values: Sequence[int], n: int) -> int:
    """Missing number of 1..n among the first ``n - 1`` values, searching each."""
    present = _present(values, n)
    for candidate in range(1, n + 1):
        if candidate not in present:
            return candidate
    raise ValueError("no number is missing")


def missing_number_hash(values: Sequence[int], n: int) -> int:
    """Missing number of 1..n, counting the values seen."""
    seen = Counter(_present(values, n))
    for candidate in range(1, n + 1):
        if not seen[candidate]:
            return candidate
    raise ValueError("no number is missing")


def missing_number_sum(values: Sequence[int], n: int) -> int:
    """Missing number of 1..n from the difference of sums."""
    return n * (n + 1) // 2 - sum(_present(values, n))


def missing_number_xor(values: Sequence[int], n: int) -> int:
    """Missing number of 1..n by XOR-ing the values against 1..n."""
    return reduce(xor, _present(values, n), 0) ^ reduce(xor, range(1, n + 1), 0)


def move_zeros(values: Sequence[int]) -> list[int]:
    """Non-zero values in order, followed by every zero."""
    non_zero = [value for value in values if value != 0]
    return non_zero + [0] * (len(values) - len(non_zero))


def move_zeros_swap(values: Sequence[int]) -> list[int]:
    """Move zeros to the end by swapping from the first zero onward."""
    items = list(values)
    try:
        j = items.index(0)
    except ValueError:
        return items
    for i in range(j + 1, len(items)):
        if items[i] != 0:
            items[i], items[j] = items[j], items[i]
            j += 1
    return items


def single_element_brute(values: Sequence[int]) -> int:
    """First value that occurs exactly once, counting each in turn."""
    for value in values:
        if values.count(value) == 1:
            return value
    raise ValueError("no value occurs exactly once")


def single_element_counting(values: Sequence[int]) -> int:
    """Smallest value whose count is not two."""
    for value, count in sorted(Counter(values).items()):
        if count != 2:
            return value
    raise ValueError("every value occurs twice")


def single_element_xor(values: Sequence[int]) -> int:
    """XOR of all values: the lone value when every other occurs twice."""
    return reduce(xor, values, 0)


def remove_duplicates_set(values: Sequence[int]) -> list[int]:
    """Distinct values in ascending order."""
    return sorted(set(values))


def remove_duplicates(values: Sequence[int]) -> list[int]:
    """Distinct values of a sorted sequence, compacted with two pointers."""
    items = list(values)
    if not items:
        return items
    i = 0
    for j in range(1, len(items)):
        if items[i] != items[j]:
            i += 1
            items[i] = items[j]
    return items[: i + 1]


def second_largest_sorted(values: Sequence[int]) -> int:
    """Second-to-last element after sorting; assumes no duplicates."""
    if len(values) < 2:
        raise ValueError("at least two values are needed")
    return sorted(values)[-2]


def second_largest_two_pass(values: Sequence[int]) -> int:
    """Largest value strictly below the maximum, in two scans."""
    _require_values(values)
    top = max(values)
    below = [value for value in values if value < top]
    if not below:
        raise ValueError("no second largest value")
    return max(below)


def second_largest_one_pass(values: Sequence[int]) -> int:
    """Largest value strictly below the maximum, in one scan."""
    top: int | None = None
    second: int | None = None
    for value in values:
        if top is None or value > top:
            second, top = top, value
        elif value < top and (second is None or value > second):
            second = value
    if second is None:
        raise ValueError("no second largest value")
    return second