"""Frequency tables answering "how many times does this appear" queries."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable


class FrequencyTable:
    """Occurrence counts precomputed once, then queried in constant time."""

    def __init__(self, items: Iterable[Hashable]) -> None:
        self._counts = Counter(items)

    def count(self, item: Hashable) -> int:
        """How many times ``item`` occurred; zero if never."""
        return self._counts[item]

    def counts(self, queries: Iterable[Hashable]) -> list[int]:
        """Answer a batch of queries in order."""
        return [self.count(query) for query in queries]

    def __contains__(self, item: object) -> bool:
        return self._counts[item] > 0  # type: ignore[index]

    def __len__(self) -> int:
        return sum(self._counts.values())

    def __repr__(self) -> str:
        return f"FrequencyTable({dict(self._counts)!r})"


def character_counts(text: str) -> FrequencyTable:
    """Frequency table of the characters in ``text``."""
    return FrequencyTable(text)


def number_counts(values: Iterable[int]) -> FrequencyTable:
    """Frequency table of the given numbers."""
    return FrequencyTable(values)