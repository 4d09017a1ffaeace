"""Small exercises usually solved recursively."""

from __future__ import annotations

from collections.abc import Sequence


def factorial(n: int) -> int:
    """Return ``n!`` for a natural number ``n``."""
    if n <= 0:
        raise ValueError("Invalid Number, N is not Natural Number")
    return n if n == 1 else n * factorial(n - 1)


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number; values of ``n`` up to 1 are returned as is."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def number_range(n: int) -> list[int]:
    """Return 1 up to ``n``; the first number is always present."""
    return list(range(1, max(n, 1) + 1))


def reverse_range(n: int) -> list[int]:
    """Return ``n`` down to 1, empty when ``n`` is not positive."""
    return list(range(n, 0, -1))


def reverse_array(values: Sequence[int]) -> list[int]:
    """Return a reversed copy of ``values``, swapping ends towards the middle."""
    result = list(values)

    def swap(start: int, end: int) -> None:
        if start < end:
            result[start], result[end] = result[end], result[start]
            swap(start + 1, end - 1)

    swap(0, len(result) - 1)
    return result


def is_palindrome(text: str) -> bool:
    """Return True if ``text`` reads the same backwards."""

    def check(i: int) -> bool:
        if i >= len(text) // 2:
            return True
        if text[i] != text[-i - 1]:
            return False
        return check(i + 1)

    return check(0)


def natural_sum(n: int) -> int:
    """Return the sum of the first ``n`` natural numbers."""
    if n <= 0:
        raise ValueError("Invalid Number, N is not Natural Number")
    return sum(range(1, n + 1))