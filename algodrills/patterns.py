"""Text patterns built from stars, digits and letters.

Every function takes the number of rows ``n`` and returns the rows as a list
of strings.  A non-positive ``n`` yields no rows.
"""

from __future__ import annotations

from itertools import count

_FIRST_LETTER = ord("A")


def _digits_up_to(i: int) -> str:
    return "".join(str(j) for j in range(1, i + 1))


def _letters(length: int) -> list[str]:
    return [chr(_FIRST_LETTER + j) for j in range(length)]


def _spaced(tokens) -> str:
    """Join tokens with a space after each one, trailing space included."""
    return "".join(f"{token} " for token in tokens)


def square(n: int) -> list[str]:
    """An ``n`` by ``n`` block of stars."""
    return ["*" * n for _ in range(n)]


def ascending_stars(n: int) -> list[str]:
    """Right triangle of stars growing by one per row."""
    return ["*" * i for i in range(1, n + 1)]


def ascending_numbers(n: int) -> list[str]:
    """Row ``i`` holds the digits ``1`` to ``i``."""
    return [_digits_up_to(i) for i in range(1, n + 1)]


def repeated_numbers(n: int) -> list[str]:
    """Row ``i`` holds the number ``i`` written ``i`` times."""
    return [str(i) * i for i in range(1, n + 1)]


def descending_stars(n: int) -> list[str]:
    """Triangle of stars shrinking from ``n`` to one."""
    return ["*" * (n - i + 1) for i in range(1, n + 1)]


def pyramid(n: int) -> list[str]:
    """Centred pyramid of stars with its point at the top."""
    return [" " * (n - i) + "*" * (2 * i - 1) for i in range(1, n + 1)]


def reverse_pyramid(n: int) -> list[str]:
    """Centred pyramid of stars with its point at the bottom."""
    return [" " * i + "*" * (2 * n - (2 * i + 1)) for i in range(n)]


def kite(n: int) -> list[str]:
    """A pyramid followed by its reverse."""
    return pyramid(n) + reverse_pyramid(n)


def symmetric_triangle(n: int) -> list[str]:
    """Stars growing to ``n`` per row and shrinking back to one."""
    if n <= 0:
        return []
    growing = ascending_stars(n)
    return growing + growing[-2::-1]


def binary_triangle(n: int) -> list[str]:
    """Triangle of alternating 0 and 1; even rows start with 0."""
    rows = []
    for i in range(n):
        start = i % 2
        rows.append(_spaced((start + j) % 2 for j in range(i + 1)))
    return rows


def double_number_pyramid(n: int) -> list[str]:
    """Two number triangles facing each other across a gap."""
    return [
        _digits_up_to(i) + " " * (n - i) + _digits_up_to(i)
        for i in range(1, n + 1)
    ]


def counting_triangle(n: int) -> list[str]:
    """Triangle filled with consecutive numbers starting at 1."""
    numbers = count(1)
    return [_spaced(next(numbers) for _ in range(i + 1)) for i in range(n)]


def alphabet_triangle(n: int) -> list[str]:
    """Row ``i`` holds the first ``i`` capital letters."""
    return ["".join(_letters(i + 1)) for i in range(n)]


def descending_alphabet(n: int) -> list[str]:
    """Rows of spaced capital letters shrinking from ``n`` letters to one."""
    return [_spaced(_letters(n - i + 1)) for i in range(1, n + 1)]


def same_letter_triangle(n: int) -> list[str]:
    """Row ``i`` repeats the ``i``-th capital letter ``i`` times."""
    return [_spaced(chr(_FIRST_LETTER + i - 1) * i) for i in range(1, n + 1)]