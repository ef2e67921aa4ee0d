"""Text requests to the transit catalog and the query loop that runs them."""

from __future__ import annotations

import math
import re
import sys
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, TextIO, Union

from beltworks.catalog import Coord, TransitCatalog

_DIGITS = re.compile(r"\d*", re.ASCII)


@dataclass(frozen=True)
class RouteInfo:
    """Answer to a route query; the counts are None when the bus is unknown."""

    bus_number: int
    stops_on_route: Optional[int] = None
    unique_stops: Optional[int] = None
    route_length: Optional[float] = None

    @property
    def found(self) -> bool:
        return self.stops_on_route is not None

    def __str__(self) -> str:
        if not self.found:
            return f"Bus {self.bus_number}: not found"
        return (
            f"Bus {self.bus_number}: {self.stops_on_route} stops on route, "
            f"{self.unique_stops} unique stops, {self.route_length:g} route length"
        )


@dataclass(frozen=True)
class AddStopRequest:
    """Register a stop at a latitude and longitude given in degrees."""

    name: str
    latitude: float
    longitude: float

    def process(self, catalog: TransitCatalog) -> None:
        coord = Coord(math.radians(self.latitude), math.radians(self.longitude))
        catalog.add_stop(self.name, coord)


@dataclass(frozen=True)
class AddRouteRequest:
    """Register a bus route."""

    bus_number: int
    stops: tuple[str, ...]
    is_cyclic: bool

    def process(self, catalog: TransitCatalog) -> None:
        catalog.add_route(self.bus_number, self.stops, self.is_cyclic)


@dataclass(frozen=True)
class RouteInfoRequest:
    """Ask for statistics of a bus route."""

    bus_number: int

    def process(self, catalog: TransitCatalog) -> RouteInfo:
        route = catalog.route_data(self.bus_number)
        if route is None:
            return RouteInfo(self.bus_number)
        return RouteInfo(
            self.bus_number,
            stops_on_route=route.stops_count(),
            unique_stops=route.unique_stops_count(),
            route_length=route.route_length(),
        )


Request = Union[AddStopRequest, AddRouteRequest, RouteInfoRequest]


def _first_word(text: str) -> str:
    return text.partition(" ")[0]


def _parse_stop(text: str) -> AddStopRequest:
    name, _, rest = text.partition(": ")
    latitude, _, rest = rest.partition(", ")
    return AddStopRequest(name, float(latitude), float(_first_word(rest)))


def _parse_route(text: str) -> AddRouteRequest:
    number, _, rest = text.partition(": ")
    marker = re.search(r"[>-]", rest)
    if marker is None:
        raise ValueError(f"Route has no stop separator: {rest!r}")
    is_cyclic = marker.group() == ">"
    stops = tuple(rest.split(" > " if is_cyclic else " - ")) if rest else ()
    return AddRouteRequest(int(number), stops, is_cyclic)


def parse_request(line: str) -> Optional[Request]:
    """Build the request described by *line*, or None for an unknown kind."""
    kind, _, rest = line.partition(" ")
    if kind == "Stop":
        return _parse_stop(rest)
    if kind == "Bus":
        if _DIGITS.fullmatch(rest):
            return RouteInfoRequest(int(_first_word(rest)))
        return _parse_route(rest)
    return None


def process_query(catalog: TransitCatalog, line: str) -> Optional[str]:
    """Apply one request line; return its answer text if it has one."""
    request = parse_request(line.rstrip("\r\n"))
    if request is None:
        return None
    result = request.process(catalog)
    return None if result is None else str(result)


def _read_batch(lines) -> Iterable[str]:
    count = int(next(lines))
    for _ in range(count):
        yield next(lines)


def run(stream: TextIO, out: TextIO) -> None:
    """Read a batch of updates then a batch of queries, answering to *out*."""
    catalog = TransitCatalog()
    lines = iter(stream)
    for _ in range(2):
        for line in _read_batch(lines):
            answer = process_query(catalog, line)
            if answer is not None:
                out.write(answer + "\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Answer transit requests from standard input on standard output."""
    run(sys.stdin, sys.stdout)
    return 0