"""Simple record types: books and students with marks."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import count
from statistics import fmean
from typing import ClassVar, Iterator


@dataclass
class Book:
    """A book with its title, author and publication year."""

    title: str
    author: str
    year: int


class Student:
    """A student with an automatically assigned id and a list of marks."""

    _ids: ClassVar[Iterator[int]] = count(1)

    def __init__(self, name: str = "Unnamed") -> None:
        self.name = name
        self.id = next(Student._ids)
        self.marks: list[int] = []

    def add_mark(self, mark: int) -> None:
        """Record one mark."""
        self.marks.append(mark)

    def average(self) -> float:
        """Mean of the marks, or 0.0 when there are none."""
        return fmean(self.marks) if self.marks else 0.0

    def __str__(self) -> str:
        return f'Student{{id={self.id}, name="{self.name}", avg={self.average():.2f}}}'

    def __repr__(self) -> str:
        return f"Student(name={self.name!r}, id={self.id}, marks={self.marks!r})"