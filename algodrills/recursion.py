"""Small recursion drills: counting, sums, factorials, palindromes, reversal.

The functions are written recursively on purpose, so very large arguments
run into Python's recursion limit.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any, TypeVar

T = TypeVar("T")

_STOP_AT = 5


def count_up(n: int) -> list[int]:
    """Numbers ``1`` to ``n``, collected after the recursive call returns."""
    if n < 1:
        return []
    return count_up(n - 1) + [n]


def count_down(n: int) -> list[int]:
    """Numbers ``n`` down to ``1``, collected before the recursive call."""
    if n <= 0:
        return []
    return [n] + count_down(n - 1)


def count_up_from_one(n: int) -> list[int]:
    """Numbers ``1`` to ``n``, collected before the recursive call."""

    def step(i: int) -> list[int]:
        if i > n:
            return []
        return [i] + step(i + 1)

    return step(1)


def repeat_name(name: str, times: int) -> list[str]:
    """``name`` repeated ``times`` times."""
    if times < 1:
        return []
    return [name] + repeat_name(name, times - 1)


def count_until_five(start: int) -> list[int]:
    """Numbers from ``start`` up to, but not including, five.

    Raises ValueError when ``start`` is five or more, since counting up from
    there never reaches the stopping point.
    """
    if start >= _STOP_AT:
        raise ValueError(f"counting up from {start} never reaches {_STOP_AT}")
    following = start + 1
    if following == _STOP_AT:
        return [start]
    return [start] + count_until_five(following)


def is_palindrome(text: str) -> bool:
    """Whether ``text`` reads the same backwards, comparing from both ends."""
    length = len(text)

    def check(i: int) -> bool:
        if i >= length // 2:
            return True
        if text[i] != text[length - i - 1]:
            return False
        return check(i + 1)

    return check(0)


def _reverse_in_place(items: MutableSequence[Any], i: int = 0) -> None:
    length = len(items)
    if i >= length // 2:
        return
    items[i], items[length - i - 1] = items[length - i - 1], items[i]
    _reverse_in_place(items, i + 1)


def is_palindrome_by_reversal(text: str) -> bool:
    """Whether ``text`` equals its own reversal, built by recursive swapping."""
    characters = list(text)
    _reverse_in_place(characters)
    return "".join(characters) == text


def sum_to(n: int) -> int:
    """Sum of ``1`` to ``n`` carried along in an accumulator; zero if ``n < 1``."""

    def step(total: int, i: int) -> int:
        if i > n:
            return total
        return step(total + i, i + 1)

    return step(0, 1)


def sum_to_functional(n: int) -> int:
    """Sum of ``0`` to ``n`` as ``n + f(n - 1)``.

    Raises ValueError for negative ``n``, which never reaches the base case.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0
    return n + sum_to_functional(n - 1)


def sum_to_parameterised(n: int) -> int:
    """Sum of ``n`` down to ``0`` passed along as a parameter; zero if ``n < 0``."""

    def step(i: int, total: int) -> int:
        if i < 0:
            return total
        return step(i - 1, total + i)

    return step(n, 0)


def factorial(n: int) -> int:
    """``n!`` computed with an accumulator.

    Raises ValueError for negative ``n``.
    """
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")

    def step(product: int, k: int) -> int:
        if k == 0:
            return product
        return step(product * k, k - 1)

    return step(1, n)


def reverse_list(values: Iterable[T]) -> list[T]:
    """A reversed copy of ``values``, built by recursively swapping the ends."""
    items = list(values)
    _reverse_in_place(items)
    return items