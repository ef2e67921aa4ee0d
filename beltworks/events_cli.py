"""Command interpreter for the dated event database."""

from __future__ import annotations

import re
import sys
from typing import Iterable, Optional, Sequence, TextIO

from beltworks.condition import parse_condition
from beltworks.database import Database
from beltworks.dates import parse_date

_FIRST_WORD = re.compile(r"\s*\S*")


def parse_event(text: str) -> str:
    """Return the event name: leading whitespace skipped, up to the end of the line."""
    return text.lstrip().split("\n", 1)[0]


def _split_command(line: str) -> tuple[str, str]:
    parts = line.split(None, 1)
    if not parts:
        return "", ""
    return parts[0], parts[1] if len(parts) > 1 else ""


def run(lines: Iterable[str], out: TextIO) -> None:
    """Execute database commands from *lines*, writing results to *out*."""
    db = Database()
    for raw in lines:
        line = raw.rstrip("\n")
        command, rest = _split_command(line)
        if command == "Add":
            date = parse_date(rest)
            date_end = _FIRST_WORD.match(rest).end()
            db.add(date, parse_event(rest[date_end:]))
        elif command == "Print":
            db.print_to(out)
        elif command == "Del":
            condition = parse_condition(rest)
            count = db.remove_if(condition.evaluate)
            out.write(f"Removed {count} entries\n")
        elif command == "Find":
            condition = parse_condition(rest)
            entries = db.find_if(condition.evaluate)
            for date, event in entries:
                out.write(f"{date} {event}\n")
            out.write(f"Found {len(entries)} entries\n")
        elif command == "Last":
            try:
                out.write(db.last(parse_date(rest)) + "\n")
            except LookupError:
                out.write("No entries\n")
        elif not command:
            continue
        else:
            raise ValueError(f"Unknown command: {command}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run commands from the file named in *argv*, or from standard input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        with open(args[0], encoding="utf-8") as stream:
            run(stream, sys.stdout)
    else:
        run(sys.stdin, sys.stdout)
    return 0