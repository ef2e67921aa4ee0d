"""An ordered store of events keyed by date."""

from __future__ import annotations

from bisect import bisect_right, insort
from typing import Callable, Iterator, TextIO

from beltworks.dates import Date

Predicate = Callable[[Date, str], bool]


class Database:
    """Events grouped by date; each date keeps its events in insertion order."""

    def __init__(self) -> None:
        self._dates: list[Date] = []
        self._events: dict[Date, list[str]] = {}
        self._seen: set[tuple[Date, str]] = set()

    def _entries(self) -> Iterator[tuple[Date, str]]:
        for date in self._dates:
            for event in self._events[date]:
                yield date, event

    def add(self, date: Date, event: str) -> None:
        """Store *event* on *date* unless that exact pair is already stored."""
        if (date, event) in self._seen:
            return
        self._seen.add((date, event))
        if date not in self._events:
            insort(self._dates, date)
            self._events[date] = []
        self._events[date].append(event)

    def print_to(self, out: TextIO) -> None:
        """Write every entry as ``date event``, one per line."""
        for date, event in self._entries():
            out.write(f"{date} {event}\n")

    def last(self, date: Date) -> str:
        """Return the latest-added event on the nearest date not after *date*."""
        idx = bisect_right(self._dates, date)
        if idx == 0:
            raise LookupError("No entries")
        found = self._dates[idx - 1]
        return f"{found} {self._events[found][-1]}"

    def find_if(self, predicate: Predicate) -> list[tuple[Date, str]]:
        """Return all entries for which *predicate* holds, in storage order."""
        return [(date, event) for date, event in self._entries() if predicate(date, event)]

    def remove_if(self, predicate: Predicate) -> int:
        """Delete all entries for which *predicate* holds; return how many."""
        removed = 0
        remaining_dates = []
        for date in self._dates:
            kept = []
            for event in self._events[date]:
                if predicate(date, event):
                    self._seen.discard((date, event))
                    removed += 1
                else:
                    kept.append(event)
            if kept:
                self._events[date] = kept
                remaining_dates.append(date)
            else:
                del self._events[date]
        self._dates = remaining_dates
        return removed