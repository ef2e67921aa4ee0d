"""Calendar dates as stored in the event database."""

from __future__ import annotations

import re
from dataclasses import dataclass

# Three integers, each optionally preceded by whitespace and separated by
# exactly one arbitrary character (usually '-').
_DATE_RE = re.compile(r"\s*([+-]?\d+).\s*([+-]?\d+).\s*([+-]?\d+)", re.DOTALL)


@dataclass(frozen=True, order=True)
class Date:
    """A year, month and day; instances order chronologically."""

    year: int
    month: int
    day: int

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


def parse_date(text: str) -> Date:
    """Read a ``year-month-day`` date from the start of *text*.

    Leading whitespace and anything after the day are ignored.
    """
    match = _DATE_RE.match(text)
    if match is None:
        raise ValueError(f"Wrong date format: {text!r}")
    year, month, day = (int(part) for part in match.groups())
    return Date(year, month, day)