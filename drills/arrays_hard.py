"""Harder array exercises: frequent elements, Pascal's triangle and three-sum."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence


def elements_above_fraction(values: Sequence[int], k: int) -> list[int]:
    """Values occurring more than ``len(values) // k`` times.

    They are listed in the order in which each first passes the threshold.
    At most ``k - 1`` values can qualify, so the scan stops once that many are found.
    """
    if k <= 0:
        raise ValueError("k must be positive")
    limit = k - 1
    needed = len(values) // k + 1
    counts: Counter[int] = Counter()
    found: list[int] = []
    for value in values:
        counts[value] += 1
        if counts[value] == needed:
            found.append(value)
            if len(found) == limit:
                break
    return found


def factorial(n: int) -> int:
    """Return ``n!``; zero and negative ``n`` give 1."""
    return math.prod(range(1, n + 1))


def ncr(r: int, c: int) -> int:
    """Entry ``c`` of row ``r`` of Pascal's triangle, both counted from zero."""
    if r < 0 or c < 0 or c > r:
        raise ValueError("need 0 <= c <= r")
    return factorial(r) // (factorial(c) * factorial(r - c))


def pascal_row(n: int) -> list[int]:
    """The ``n``-th row of Pascal's triangle, counted from one."""
    return [ncr(n - 1, i) for i in range(n)]


def pascal_triangle(n: int) -> list[list[int]]:
    """The first ``n`` rows of Pascal's triangle."""
    return [pascal_row(row) for row in range(1, n + 1)]


Triplet = tuple[int, int, int]


def three_sum_brute(values: Sequence[int], target: int) -> list[Triplet]:
    """Distinct sorted triplets summing to ``target``, trying every triple of positions."""
    found: set[Triplet] = set()
    n = len(values)
    for i in range(n):
        for j in range(i + 1, n):
            for m in range(j + 1, n):
                if values[i] + values[j] + values[m] == target:
                    a, b, c = sorted((values[i], values[j], values[m]))
                    found.add((a, b, c))
    return sorted(found)


def three_sum_hashing(values: Sequence[int], target: int) -> list[Triplet]:
    """Distinct sorted triplets summing to ``target``, looking up the third value in a set."""
    found: set[Triplet] = set()
    for i, first in enumerate(values):
        seen: set[int] = set()
        for second in values[i + 1 :]:
            third = target - (first + second)
            if third in seen:
                a, b, c = sorted((first, second, third))
                found.add((a, b, c))
            seen.add(second)
    return sorted(found)


def three_sum(values: Sequence[int], target: int) -> list[Triplet]:
    """Distinct sorted triplets summing to ``target``, with a sort and two pointers."""
    items = sorted(values)
    n = len(items)
    result: list[Triplet] = []
    for i in range(n):
        if i and items[i] == items[i - 1]:
            continue
        j, m = i + 1, n - 1
        while j < m:
            total = items[i] + items[j] + items[m]
            if total < target:
                j += 1
            elif total > target:
                m -= 1
            else:
                result.append((items[i], items[j], items[m]))
                j += 1
                m -= 1
                while j < m and items[j] == items[j - 1]:
                    j += 1
                while m > j and items[m] == items[m + 1]:
                    m -= 1
    return result