"""Counting occurrences of members of an airport enumeration."""

from __future__ import annotations

from enum import Enum
from typing import Generic, Iterable, TypeVar

A = TypeVar("A", bound=Enum)


class AirportCounter(Generic[A]):
    """Per-member counts for every member of an enumeration."""

    def __init__(self, airport_type: type[A], airports: Iterable[A] = ()) -> None:
        self._counts: dict[A, int] = {airport: 0 for airport in airport_type}
        for airport in airports:
            self.insert(airport)

    def get(self, airport: A) -> int:
        """Return how many times *airport* was counted."""
        return self._counts[airport]

    def insert(self, airport: A) -> None:
        """Count *airport* once more."""
        self._counts[airport] += 1

    def erase_one(self, airport: A) -> None:
        """Remove one count of *airport*, never going below zero."""
        if self._counts[airport] > 0:
            self._counts[airport] -= 1

    def erase_all(self, airport: A) -> None:
        """Reset the count of *airport* to zero."""
        self._counts[airport] = 0

    def items(self) -> list[tuple[A, int]]:
        """Return ``(airport, count)`` pairs in declaration order."""
        return list(self._counts.items())