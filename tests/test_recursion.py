import math

import pytest

from drills import recursion


@pytest.mark.parametrize("n", range(1, 30))
def test_factorial_matches_math(n):
    assert recursion.factorial(n) == math.factorial(n)


@pytest.mark.parametrize("n", [0, -3])
def test_factorial_rejects_non_natural(n):
    with pytest.raises(ValueError, match="not Natural Number"):
        recursion.factorial(n)


def test_fibonacci_base_cases():
    assert recursion.fibonacci(0) == 0
    assert recursion.fibonacci(1) == 1


def test_fibonacci_recurrence():
    for n in range(2, 60):
        assert recursion.fibonacci(n) == recursion.fibonacci(n - 1) + recursion.fibonacci(n - 2)


def test_fibonacci_negative_returned_unchanged():
    assert recursion.fibonacci(-4) == -4


def test_number_range():
    assert recursion.number_range(5) == list(range(1, 6))


def test_number_range_always_starts_at_one():
    assert recursion.number_range(0) == [1]
    assert recursion.number_range(-2) == [1]


def test_reverse_range():
    assert recursion.reverse_range(5) == list(range(5, 0, -1))
    assert recursion.reverse_range(0) == []


def test_reverse_array_source_example():
    assert recursion.reverse_array([1, 2, 3, 4, 5]) == [5, 4, 3, 2, 1]


def test_reverse_array_leaves_input_alone_and_round_trips():
    values = [3, 8, 1, 9, 2, 7]
    reversed_values = recursion.reverse_array(values)
    assert values == [3, 8, 1, 9, 2, 7]
    assert recursion.reverse_array(reversed_values) == values


def test_reverse_array_empty():
    assert recursion.reverse_array([]) == []


def test_palindrome_source_example():
    assert recursion.is_palindrome("madam")


@pytest.mark.parametrize("text", ["", "a", "abba", "racecar"])
def test_palindromes(text):
    assert recursion.is_palindrome(text)


@pytest.mark.parametrize("text", ["ab", "abca", "madame"])
def test_not_palindromes(text):
    assert not recursion.is_palindrome(text)


@pytest.mark.parametrize("n", range(1, 100))
def test_natural_sum_closed_form(n):
    assert recursion.natural_sum(n) == n * (n + 1) // 2


def test_natural_sum_rejects_zero():
    with pytest.raises(ValueError, match="not Natural Number"):
        recursion.natural_sum(0)