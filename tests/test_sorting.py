import random

import pytest

from drills.sorting import (
    bubble_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    recursive_bubble_sort,
    recursive_insertion_sort,
    selection_sort,
)

INPUTS = [
    [6, 5, 4, 3, 2, 1],
    [13, 46, 24, 52, 20, 9],
    [9, 4, 7, 6, 3, 1, 5],
    [4, 6, 2, 5, 7, 9, 1, 3],
    [],
    [7],
    [2, 2, 2],
    [3, -1, 0, -1, 3, 8, -5],
    [1, 2, 3, 4, 5],
]


@pytest.mark.parametrize("values", INPUTS)
def test_matches_builtin_sorted(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert recursive_bubble_sort(values) == expected
    assert recursive_insertion_sort(values) == expected
    assert selection_sort(values) == expected


def test_does_not_mutate_input():
    values = [5, 1, 4, 2, 3]
    original = list(values)
    assert bubble_sort(values) == [1, 2, 3, 4, 5]
    assert values == original
    assert insertion_sort(values) == [1, 2, 3, 4, 5]
    assert values == original
    assert merge_sort(values) == [1, 2, 3, 4, 5]
    assert values == original
    assert quick_sort(values) == [1, 2, 3, 4, 5]
    assert values == original
    assert recursive_bubble_sort(values) == [1, 2, 3, 4, 5]
    assert values == original
    assert recursive_insertion_sort(values) == [1, 2, 3, 4, 5]
    assert values == original
    assert selection_sort(values) == [1, 2, 3, 4, 5]
    assert values == original


def test_random_lists():
    rng = random.Random(1234)
    for _ in range(30):
        values = [rng.randint(-50, 50) for _ in range(rng.randint(0, 40))]
        expected = sorted(values)
        assert bubble_sort(values) == expected
        assert insertion_sort(values) == expected
        assert merge_sort(values) == expected
        assert quick_sort(values) == expected
        assert recursive_bubble_sort(values) == expected
        assert recursive_insertion_sort(values) == expected
        assert selection_sort(values) == expected


def test_accepts_tuples():
    values = (3, 1, 2)
    expected = [1, 2, 3]
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert recursive_bubble_sort(values) == expected
    assert recursive_insertion_sort(values) == expected
    assert selection_sort(values) == expected


def test_idempotent():
    values = [8, 3, 3, 9, 0, -2]
    once = bubble_sort(values)
    assert bubble_sort(once) == once
    once = insertion_sort(values)
    assert insertion_sort(once) == once
    once = merge_sort(values)
    assert merge_sort(once) == once
    once = quick_sort(values)
    assert quick_sort(once) == once
    once = recursive_bubble_sort(values)
    assert recursive_bubble_sort(once) == once
    once = recursive_insertion_sort(values)
    assert recursive_insertion_sort(once) == once
    once = selection_sort(values)
    assert selection_sort(once) == once
    assert once == [-2, 0, 3, 3, 8, 9]


def test_source_example_bubble():
    assert bubble_sort([6, 5, 4, 3, 2, 1]) == [1, 2, 3, 4, 5, 6]