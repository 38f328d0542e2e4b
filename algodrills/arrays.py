"""Easy array drills: sortedness, extremes, rotations, searching and clean-up.

Every function leaves its input untouched and returns a new list, except
``move_zeroes_in_place``, which rearranges the list it is given.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from itertools import groupby, pairwise
from typing import Any, TypeVar

T = TypeVar("T")


def is_sorted(values: Iterable[Any]) -> bool:
    """Whether every item is at least as large as the one before it."""
    return all(later >= earlier for earlier, later in pairwise(values))


def largest(values: Iterable[int]) -> int:
    """The largest value, found by a scan that starts from zero.

    Because the running maximum starts at zero, the result is never negative:
    an empty input or one holding only negative numbers gives ``0``.
    """
    return max(0, max(values, default=0))


def _check_places(places: int) -> None:
    if places < 0:
        raise ValueError("places must not be negative")


def rotate_left(values: Iterable[T], places: int) -> list[T]:
    """Copy shifted left by ``places``, with the front items moved to the back.

    ``places`` larger than the length is first reduced modulo the length.
    Raises ValueError for negative ``places``.
    """
    _check_places(places)
    items = list(values)
    if not items:
        return items
    if places > len(items):
        places %= len(items)
    return items[places:] + items[:places]


def _reverse_between(items: MutableSequence[Any], left: int, right: int) -> None:
    """Reverse ``items[left:right + 1]`` by swapping the ends inwards."""
    while left < right:
        items[left], items[right] = items[right], items[left]
        left += 1
        right -= 1


def rotate_left_by_reversal(values: Iterable[T], places: int) -> list[T]:
    """Left rotation done with three reversals: front, back, then the whole.

    Raises ValueError for negative ``places``.
    """
    _check_places(places)
    items = list(values)
    if not items:
        return items
    size = len(items)
    places %= size
    _reverse_between(items, 0, places - 1)
    _reverse_between(items, places, size - 1)
    _reverse_between(items, 0, size - 1)
    return items


def rotate_left_once(values: Iterable[T]) -> list[T]:
    """Copy with the first item moved to the end."""
    items = list(values)
    return items[1:] + items[:1]


def rotate_right_once(values: Iterable[T]) -> list[T]:
    """Copy with the last item moved to the front.

    Built by swapping each earlier item with the last slot in turn.
    """
    items = list(values)
    if not items:
        return items
    last = len(items) - 1
    for i in range(last):
        items[i], items[last] = items[last], items[i]
    return items


def linear_search(values: Iterable[T], target: T) -> int:
    """Zero-based index of the first item equal to ``target``.

    Raises ValueError when ``target`` does not occur.
    """
    for index, item in enumerate(values):
        if item == target:
            return index
    raise ValueError(f"{target!r} not found")


def move_zeroes_to_end(values: Iterable[int]) -> list[int]:
    """Copy with the non-zero items first, in order, followed by the zeroes."""
    items = list(values)
    non_zero = [item for item in items if item != 0]
    return non_zero + [0] * (len(items) - len(non_zero))


def move_zeroes_in_place(values: MutableSequence[int]) -> None:
    """Move the zeroes of ``values`` to its end, keeping the others in order."""
    try:
        gap = next(i for i, item in enumerate(values) if item == 0)
    except StopIteration:
        return
    for i in range(gap + 1, len(values)):
        if values[i] != 0:
            values[i], values[gap] = values[gap], values[i]
            gap += 1


def remove_sorted_duplicates(values: Iterable[T]) -> list[T]:
    """Sorted input with each run of equal items reduced to one."""
    return [key for key, _ in groupby(values)]


def _distinct(values: Iterable[T]) -> Sequence[T]:
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")
    return items


def second_largest(values: Iterable[int]) -> int | None:
    """The largest value below the maximum, or None if all values are equal.

    Raises ValueError for an empty input.
    """
    items = _distinct(values)
    top = items[0]
    runner_up: int | None = None
    for item in items:
        if item > top:
            runner_up, top = top, item
        elif item < top and (runner_up is None or item > runner_up):
            runner_up = item
    return runner_up


def second_smallest(values: Iterable[int]) -> int | None:
    """The smallest value above the minimum, or None if all values are equal.

    Raises ValueError for an empty input.
    """
    items = _distinct(values)
    bottom = items[0]
    runner_up: int | None = None
    for item in items:
        if item < bottom:
            runner_up, bottom = bottom, item
        elif item > bottom and (runner_up is None or item < runner_up):
            runner_up = item
    return runner_up