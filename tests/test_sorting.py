import random

import pytest

from dsakit.sorting import bubble_sort, insertion_sort, selection_sort


@pytest.mark.parametrize(
    "data, expected",
    [
        ([3, 6, 1, 8, 3], [1, 3, 3, 6, 8]),
        ([23, 4, 56, 2, 7, 1], [1, 2, 4, 7, 23, 56]),
        (["pear", "apple", "fig", "banana"], ["apple", "banana", "fig", "pear"]),
    ],
)
def test_pinned_inputs(data, expected):
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected


@pytest.mark.parametrize("data", [[], [1], [2, 1], [1, 2, 3], [3, 2, 1], [5, 5, 5]])
def test_small_inputs(data):
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected


def test_random_inputs_agree_with_sorted():
    rng = random.Random(1234)
    for _ in range(50):
        data = [rng.randint(-100, 100) for _ in range(rng.randint(0, 40))]
        expected = sorted(data)
        assert bubble_sort(data) == expected
        assert insertion_sort(data) == expected
        assert selection_sort(data) == expected


def test_input_is_not_modified():
    data = [4, 1, 3, 2]
    assert bubble_sort(data) == [1, 2, 3, 4]
    assert insertion_sort(data) == [1, 2, 3, 4]
    assert selection_sort(data) == [1, 2, 3, 4]
    assert data == [4, 1, 3, 2]


def test_accepts_any_iterable():
    assert bubble_sort(x for x in (9, 7, 8)) == [7, 8, 9]
    assert insertion_sort(x for x in (9, 7, 8)) == [7, 8, 9]
    assert selection_sort(x for x in (9, 7, 8)) == [7, 8, 9]