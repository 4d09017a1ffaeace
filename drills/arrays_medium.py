"""Intermediate array and matrix exercises, each in several approaches."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class PairMatch:
    """Two values adding up to a target, with the positions they came from."""

    first: int
    second: int
    first_index: int
    second_index: int


def count_subarrays_cubic(values: Sequence[int], k: int) -> int:
    """Count contiguous runs summing to ``k`` by re-adding every run."""
    n = len(values)
    return sum(
        1 for i in range(n) for j in range(i, n) if sum(values[i : j + 1]) == k
    )


def count_subarrays_quadratic(values: Sequence[int], k: int) -> int:
    """Count contiguous runs summing to ``k`` with a running sum per start."""
    count = 0
    for i in range(len(values)):
        total = 0
        for value in values[i:]:
            total += value
            if total == k:
                count += 1
    return count


def count_subarrays(values: Sequence[int], k: int) -> int:
    """Count contiguous runs summing to ``k`` using prefix-sum counts."""
    seen: Counter[int] = Counter({0: 1})
    count = 0
    prefix = 0
    for value in values:
        prefix += value
        count += seen[prefix - k]
        seen[prefix] += 1
    return count


def leaders(values: Sequence[int]) -> list[int]:
    """Values greater than everything to their right, listed right to left.

    The last value is always a leader.
    """
    if not values:
        return []
    result = [values[-1]]
    best = values[-1]
    for value in reversed(values[:-1]):
        if value > best:
            result.append(value)
            best = value
    return result


def longest_consecutive_brute(values: Sequence[int]) -> int:
    """Longest run of consecutive integers, searching linearly for each successor."""
    if not values:
        return 0
    longest = 1
    for x in values:
        count = 1
        while x + 1 in values:
            x += 1
            count += 1
        longest = max(longest, count)
    return longest


def longest_consecutive_sorted(values: Sequence[int]) -> int:
    """Longest run of consecutive integers, scanning a sorted copy."""
    if not values:
        return 0
    last: int | None = None
    longest = 1
    count = 0
    for value in sorted(values):
        if last is not None and value - 1 == last:
            count += 1
            last = value
        elif value != last:
            count = 1
            last = value
        longest = max(longest, count)
    return longest


def longest_consecutive(values: Sequence[int]) -> int:
    """Longest run of consecutive integers, counting only from run starts in a set."""
    present = set(values)
    longest = 0
    for value in present:
        if value - 1 in present:
            continue
        end = value
        while end + 1 in present:
            end += 1
        longest = max(longest, end - value + 1)
    return longest


def majority_element_brute(values: Sequence[int]) -> int | None:
    """Value occurring more than half the time, counting each in turn; None if none."""
    half = len(values) // 2
    for value in values:
        if values.count(value) > half:
            return value
    return None


def majority_element_counting(values: Sequence[int]) -> int | None:
    """Value occurring more than half the time, from a full count; None if none."""
    half = len(values) // 2
    for value, count in sorted(Counter(values).items()):
        if count > half:
            return value
    return None


def majority_element(values: Sequence[int]) -> int | None:
    """Value occurring more than half the time, stopping as soon as it is known."""
    half = len(values) // 2
    counts: Counter[int] = Counter()
    for value in values:
        counts[value] += 1
        if counts[value] > half:
            return value
    return None


def max_profit_brute(prices: Sequence[int]) -> int:
    """Best single buy-then-sell profit, trying every pair of days; 0 if none."""
    best = 0
    for i, buy in enumerate(prices):
        for sell in prices[i + 1 :]:
            if sell > buy:
                best = max(best, sell - buy)
    return best


def max_profit(prices: Sequence[int]) -> int:
    """Best single buy-then-sell profit, tracking the cheapest day so far."""
    best = 0
    cheapest: int | None = None
    for price in prices:
        cheapest = price if cheapest is None else min(cheapest, price)
        best = max(best, price - cheapest)
    return best


def max_subarray_sum_cubic(values: Sequence[int]) -> int:
    """Largest sum of a contiguous run, re-adding every run; the empty run gives 0."""
    n = len(values)
    best = 0
    for i in range(n):
        for j in range(i, n):
            best = max(best, sum(values[i : j + 1]))
    return best


def max_subarray_sum_quadratic(values: Sequence[int]) -> int:
    """Largest sum of a contiguous run with a running sum per start."""
    best = 0
    for i in range(len(values)):
        total = 0
        for value in values[i:]:
            total += value
            best = max(best, total)
    return best


def max_subarray(values: Sequence[int]) -> tuple[int, list[int]]:
    """Largest contiguous-run sum by Kadane's method, with the run itself.

    When no run has a positive sum, the empty run and 0 are returned.
    """
    best = 0
    total = 0
    start = 0
    span: tuple[int, int] | None = None
    for i, value in enumerate(values):
        if total == 0:
            start = i
        total += value
        if total > best:
            best = total
            span = (start, i)
        if total < 0:
            total = 0
    if span is None:
        return 0, []
    return best, list(values[span[0] : span[1] + 1])


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Elements of a rectangular matrix in clockwise spiral order from the top left."""
    if not matrix or not matrix[0]:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    result: list[int] = []
    while left <= right and top <= bottom:
        result.extend(matrix[top][left : right + 1])
        top += 1
        result.extend(matrix[row][right] for row in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][col] for col in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            result.extend(matrix[row][left] for row in range(bottom, top - 1, -1))
            left += 1
    return result


def _interleave(first: list[int], second: list[int]) -> list[int]:
    return [value for pair in zip(first, second) for value in pair]


def rearrange_alternating_split(values: Sequence[int]) -> list[int]:
    """Alternate positives and the rest, starting with a positive.

    Zero counts with the negatives. Both groups must be the same size.
    """
    positives = [value for value in values if value > 0]
    others = [value for value in values if value <= 0]
    if len(positives) != len(others):
        raise ValueError("positives and negatives must be equally many")
    return _interleave(positives, others)


def rearrange_alternating(values: Sequence[int]) -> list[int]:
    """Place non-negatives at even positions and negatives at odd ones.

    Both groups must be the same size.
    """
    non_negatives = [value for value in values if value >= 0]
    negatives = [value for value in values if value < 0]
    if len(non_negatives) != len(negatives):
        raise ValueError("positives and negatives must be equally many")
    return _interleave(non_negatives, negatives)


def rearrange_with_leftover(values: Sequence[int]) -> list[int]:
    """Alternate positives and the rest while both last, then append the leftovers."""
    positives = [value for value in values if value > 0]
    others = [value for value in values if value <= 0]
    shared = min(len(positives), len(others))
    return _interleave(positives, others) + positives[shared:] + others[shared:]


def _require_square(matrix: Sequence[Sequence[int]]) -> None:
    if any(len(row) != len(matrix) for row in matrix):
        raise ValueError("the matrix must be square")


def rotate_matrix_copy(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Square matrix turned a quarter clockwise, written into a new matrix."""
    _require_square(matrix)
    n = len(matrix)
    rotated = [[0] * n for _ in range(n)]
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            rotated[j][n - 1 - i] = value
    return rotated


def rotate_matrix(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Square matrix turned a quarter clockwise by transposing then mirroring rows."""
    _require_square(matrix)
    grid = [list(row) for row in matrix]
    n = len(grid)
    for i in range(n):
        for j in range(i):
            grid[i][j], grid[j][i] = grid[j][i], grid[i][j]
    for row in grid:
        row.reverse()
    return grid


def sort_colours_sorted(values: Sequence[int]) -> list[int]:
    """Sort a sequence of 0s, 1s and 2s with a general sort."""
    return sorted(values)


def sort_colours_counting(values: Sequence[int]) -> list[int]:
    """Sort a sequence of 0s, 1s and 2s by counting each."""
    counts = Counter(values)
    unexpected = set(counts) - {0, 1, 2}
    if unexpected:
        raise ValueError(f"only 0, 1 and 2 are allowed, got {sorted(unexpected)}")
    return [colour for colour in (0, 1, 2) for _ in range(counts[colour])]


def sort_colours_dutch_flag(values: Sequence[int]) -> list[int]:
    """Sort a sequence of 0s, 1s and 2s in one pass with three pointers."""
    items = list(values)
    low = mid = 0
    high = len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
    return items


def two_sum_brute(values: Sequence[int], target: int) -> PairMatch | None:
    """First pair (by left index, then right) summing to ``target``; None if none."""
    for i, first in enumerate(values):
        for j in range(i + 1, len(values)):
            if first + values[j] == target:
                return PairMatch(first, values[j], i, j)
    return None


def two_sum_hashing(values: Sequence[int], target: int) -> PairMatch | None:
    """Pair summing to ``target`` found with a map of earlier values; None if none."""
    seen: dict[int, int] = {}
    for i, value in enumerate(values):
        other = target - value
        if other in seen:
            return PairMatch(other, value, seen[other], i)
        seen[value] = i
    return None


def two_sum_sorted(values: Sequence[int], target: int) -> PairMatch | None:
    """Pair summing to ``target`` in a sorted sequence, with two pointers; None if none."""
    i, j = 0, len(values) - 1
    while i < j:
        total = values[i] + values[j]
        if total == target:
            return PairMatch(values[i], values[j], i, j)
        if total < target:
            i += 1
        else:
            j -= 1
    return None