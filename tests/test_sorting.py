import pytest

from algodrills.sorting import (
    bubble_sort,
    insertion_sort,
    selection_sort,
    union_by_set,
    union_of_sorted,
)

SAMPLES = [
    [],
    [1],
    [2, 1],
    [15, 3, 8, 9, 3],
    [5, 4, 3, 2, 1],
    [1, 2, 3, 4, 5],
    [0, -1, 7, -1, 3, 3, 10],
    [9, 9, 9],
]


@pytest.mark.parametrize("values", SAMPLES)
def test_sorts_match_builtin(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert selection_sort(values) == expected


def test_sorts_leave_input_untouched():
    values = [4, 2, 9, 1]
    bubble_sort(values)
    assert values == [4, 2, 9, 1]
    insertion_sort(values)
    assert values == [4, 2, 9, 1]
    selection_sort(values)
    assert values == [4, 2, 9, 1]


def test_sorts_accept_iterables():
    assert bubble_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert insertion_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert selection_sort(iter([3, 1, 2])) == [1, 2, 3]


def test_sorts_work_on_strings():
    words = ["pear", "apple", "fig", "banana"]
    expected = ["apple", "banana", "fig", "pear"]
    assert bubble_sort(words) == expected
    assert insertion_sort(words) == expected
    assert selection_sort(words) == expected


@pytest.mark.parametrize(
    "first, second",
    [
        ([1, 2, 3, 4, 5], [2, 3, 4, 4, 5]),
        ([], [1, 1, 2]),
        ([3, 3], []),
        ([], []),
        ([1, 1, 2, 5], [2, 3, 5, 7]),
        ([-3, 0, 4], [-3, -1, 4, 8]),
    ],
)
def test_unions_agree_on_sorted_inputs(first, second):
    expected = sorted(set(first) | set(second))
    assert union_of_sorted(first, second) == expected
    assert union_by_set(first, second) == expected


def test_union_by_set_handles_unsorted_inputs():
    first = [5, 1, 5, 3]
    second = [2, 3, 9, 1]
    result = union_by_set(first, second)
    assert result == sorted(result)
    assert set(result) == set(first) | set(second)
    assert len(result) == len(set(result))


def test_union_of_sorted_has_no_adjacent_repeats():
    result = union_of_sorted([1, 1, 1, 2, 2], [1, 2, 2, 3])
    assert all(a != b for a, b in zip(result, result[1:]))
    assert set(result) == {1, 2, 3}


def test_union_of_sorted_accepts_iterators():
    assert union_of_sorted(iter([1, 3]), iter([2, 3])) == [1, 2, 3]