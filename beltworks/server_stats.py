"""Request statistics for a web server log."""

from __future__ import annotations

from dataclasses import dataclass

KNOWN_METHODS = ("GET", "PUT", "POST", "DELETE")
UNKNOWN_METHOD = "UNKNOWN"
KNOWN_URIS = ("/", "/order", "/product", "/basket", "/help")
UNKNOWN_URI = "unknown"


@dataclass(frozen=True)
class HttpRequest:
    method: str
    uri: str
    protocol: str


def _count(counts: dict[str, int], key: str, fallback: str) -> None:
    if key in counts and key != fallback:
        counts[key] += 1
    else:
        counts[fallback] += 1


class Stats:
    """Counts of request methods and URIs; unrecognised ones go to a catch-all."""

    def __init__(self) -> None:
        self._methods = dict.fromkeys(KNOWN_METHODS + (UNKNOWN_METHOD,), 0)
        self._uris = dict.fromkeys(KNOWN_URIS + (UNKNOWN_URI,), 0)

    def add_method(self, method: str) -> None:
        _count(self._methods, method, UNKNOWN_METHOD)

    def add_uri(self, uri: str) -> None:
        _count(self._uris, uri, UNKNOWN_URI)

    def method_stats(self) -> dict[str, int]:
        """Method counts, ordered by method name."""
        return dict(sorted(self._methods.items()))

    def uri_stats(self) -> dict[str, int]:
        """URI counts, ordered by URI."""
        return dict(sorted(self._uris.items()))


def parse_request(line: str) -> HttpRequest:
    """Split a ``METHOD URI PROTOCOL`` line, ignoring leading spaces."""
    parts = line.lstrip(" ").split(" ", 3)
    parts += [""] * (3 - len(parts))
    return HttpRequest(parts[0], parts[1], parts[2])