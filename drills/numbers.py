"""Digit, divisor and frequency exercises on integers."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable


def _digits(n: int) -> list[int]:
    """Return the decimal digits of ``abs(n)``, least significant first."""
    n = abs(n)
    digits = []
    while n:
        n, digit = divmod(n, 10)
        digits.append(digit)
    return digits


def is_armstrong(n: int) -> bool:
    """Return True if ``n`` equals the sum of its digits each raised to the digit count."""
    if n < 0:
        raise ValueError("an Armstrong number must not be negative")
    width = len(str(n))
    return sum(digit**width for digit in _digits(n)) == n


def reverse_number(n: int) -> int:
    """Return ``n`` with its decimal digits reversed, keeping the sign."""
    sign = -1 if n < 0 else 1
    return sign * int(str(abs(n))[::-1])


def is_palindrome_number(n: int) -> bool:
    """Return True if ``n`` reads the same with its digits reversed."""
    return reverse_number(n) == n


def is_prime(n: int) -> bool:
    """Primality by trial division over every candidate below ``n``."""
    if n <= 1:
        return False
    return all(n % i for i in range(2, n))


def is_prime_sqrt(n: int) -> bool:
    """Primality by trial division up to the square root of ``n``."""
    if n <= 1:
        return False
    return all(n % i for i in range(2, math.isqrt(n) + 1))


def count_digits(n: int) -> int:
    """Count the decimal digits of ``n`` by repeated division; zero has none."""
    return len(_digits(n))


def count_digits_log(n: int) -> int:
    """Count the decimal digits of a positive ``n`` with a logarithm."""
    if n <= 0:
        raise ValueError("the logarithmic digit count needs a positive number")
    return int(math.log10(n)) + 1


def frequencies(values: Iterable[int]) -> dict[int, int]:
    """Return how often each value occurs, keyed in ascending order."""
    return dict(sorted(Counter(values).items()))


def highest_lowest_frequency(values: Iterable[int]) -> tuple[int, int]:
    """Return the most and the least frequent values.

    Ties go to the smallest value.
    """
    freq = frequencies(values)
    if not freq:
        raise ValueError("no values to count")
    return max(freq, key=freq.__getitem__), min(freq, key=freq.__getitem__)


def _require_positive(a: int, b: int) -> None:
    if a <= 0 or b <= 0:
        raise ValueError("both numbers must be positive")


def gcd_brute(a: int, b: int) -> int:
    """Greatest common divisor by testing every candidate upwards."""
    _require_positive(a, b)
    result = 1
    for i in range(1, min(a, b) + 1):
        if a % i == 0 and b % i == 0:
            result = i
    return result


def gcd_descending(a: int, b: int) -> int:
    """Greatest common divisor by testing candidates from the smaller number down."""
    _require_positive(a, b)
    return next(i for i in range(min(a, b), 0, -1) if a % i == 0 and b % i == 0)


def gcd_euclid(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's remainder method."""
    if a < 0 or b < 0:
        raise ValueError("numbers must not be negative")
    while a > 0 and b > 0:
        if a > b:
            a %= b
        else:
            b %= a
    return b if a == 0 else a


def divisors(n: int) -> list[int]:
    """Return every divisor of ``n`` in ascending order."""
    return [i for i in range(1, n + 1) if n % i == 0]


def divisors_paired(n: int) -> list[int]:
    """Return the divisors of ``n``, each small one followed by its partner."""
    result = []
    for i in range(1, math.isqrt(n) + 1 if n > 0 else 1):
        if n % i == 0:
            result.append(i)
            if i != n // i:
                result.append(n // i)
    return result