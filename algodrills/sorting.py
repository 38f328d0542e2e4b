"""Classic quadratic sorts and unions of two lists."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from itertools import groupby
from typing import Any, TypeVar

T = TypeVar("T")


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Sorted copy; each pass bubbles the largest remaining item to the end."""
    items: list[Any] = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Sorted copy; each item is swapped leftwards into its place."""
    items: list[Any] = list(values)
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j - 1] > items[j]:
            items[j - 1], items[j] = items[j], items[j - 1]
            j -= 1
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Sorted copy; each pass moves the smallest remaining item to the front."""
    items: list[Any] = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def union_by_set(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Distinct items of both inputs in ascending order."""
    return sorted(set(first) | set(second))  # type: ignore[type-var]


def union_of_sorted(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Union of two sorted inputs by merging them, skipping repeats.

    Ties take the item from ``first``; an item is dropped when it equals the
    last one kept.
    """
    merged = heapq.merge(first, second)  # type: ignore[type-var]
    return [key for key, _ in groupby(merged)]