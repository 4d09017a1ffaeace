import math
from collections import Counter

import pytest

from drills import numbers


def test_single_digits_are_armstrong():
    assert all(numbers.is_armstrong(n) for n in range(1, 10))


def test_three_digit_armstrong_numbers():
    found = [n for n in range(100, 1000) if numbers.is_armstrong(n)]
    assert found == [153, 370, 371, 407]


def test_armstrong_rejects_negative():
    with pytest.raises(ValueError):
        numbers.is_armstrong(-5)


@pytest.mark.parametrize("n", range(-50, 300))
def test_palindrome_matches_string_reversal(n):
    text = str(abs(n))
    assert numbers.is_palindrome_number(n) == (text == text[::-1])


def test_reverse_number_round_trip():
    for n in range(1, 2000):
        if n % 10:
            assert numbers.reverse_number(numbers.reverse_number(n)) == n


def test_reverse_number_drops_trailing_zeros():
    assert numbers.reverse_number(1200) == 21


def test_reverse_keeps_sign():
    assert numbers.reverse_number(-123) == -numbers.reverse_number(123)


def test_primes_below_thirty():
    assert [n for n in range(30) if numbers.is_prime(n)] == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_prime_methods_agree():
    for n in range(-5, 300):
        assert numbers.is_prime(n) == numbers.is_prime_sqrt(n)


def test_products_are_not_prime():
    for a in range(2, 15):
        for b in range(2, 15):
            assert not numbers.is_prime_sqrt(a * b)
            assert not numbers.is_prime(a * b)


def test_count_digits_powers_of_ten():
    for k in range(8):
        assert numbers.count_digits(10**k) == k + 1
        assert numbers.count_digits(10**k - 1) == max(k, 0)


def test_count_digits_zero():
    assert numbers.count_digits(0) == 0


def test_count_digits_methods_agree():
    for n in range(1, 20000, 7):
        assert numbers.count_digits_log(n) == numbers.count_digits(n) == len(str(n))


def test_count_digits_log_rejects_zero():
    with pytest.raises(ValueError):
        numbers.count_digits_log(0)


def test_frequencies_match_counter_in_key_order():
    values = [10, 5, 10, 15, 10, 5]
    result = numbers.frequencies(values)
    assert result == dict(Counter(values))
    assert list(result) == sorted(result)


def test_highest_lowest_frequency():
    assert numbers.highest_lowest_frequency([10, 5, 10, 15, 10, 5]) == (10, 15)


def test_highest_lowest_ties_prefer_smallest():
    assert numbers.highest_lowest_frequency([7, 3]) == (3, 3)


def test_highest_lowest_empty():
    with pytest.raises(ValueError):
        numbers.highest_lowest_frequency([])


def test_gcd_methods_match_math_gcd():
    for a in range(1, 40):
        for b in range(1, 40):
            expected = math.gcd(a, b)
            assert numbers.gcd_brute(a, b) == expected
            assert numbers.gcd_descending(a, b) == expected
            assert numbers.gcd_euclid(a, b) == expected


def test_gcd_euclid_with_zero():
    assert numbers.gcd_euclid(0, 12) == 12
    assert numbers.gcd_euclid(12, 0) == 12


@pytest.mark.parametrize("func", [numbers.gcd_brute, numbers.gcd_descending])
def test_gcd_rejects_non_positive(func):
    with pytest.raises(ValueError):
        func(0, 4)


def test_gcd_euclid_rejects_negative():
    with pytest.raises(ValueError):
        numbers.gcd_euclid(-4, 6)


def test_divisors_divide():
    for n in range(1, 200):
        found = numbers.divisors(n)
        assert all(n % d == 0 for d in found)
        assert found[0] == 1 and found[-1] == n


def test_paired_divisors_same_set():
    for n in range(1, 300):
        paired = numbers.divisors_paired(n)
        assert sorted(paired) == numbers.divisors(n)
        assert len(paired) == len(set(paired))


def test_paired_divisors_pair_order():
    paired = numbers.divisors_paired(36)
    assert paired[0] == 1 and paired[1] == 36