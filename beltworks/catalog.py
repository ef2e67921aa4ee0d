"""Bus stops, bus routes and the distances between stops."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import pairwise
from typing import Iterable, Mapping, Optional

EARTH_RADIUS = 6371 * 1000


def calc_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in metres between two points given in radians."""
    cosine = (
        math.sin(lat1) * math.sin(lat2)
        + math.cos(lat1) * math.cos(lat2) * math.cos(lon2 - lon1)
    )
    return EARTH_RADIUS * math.acos(max(-1.0, min(1.0, cosine)))


@dataclass(frozen=True)
class Coord:
    """A position on the globe, latitude and longitude in radians."""

    latitude: float
    longitude: float


class RouteData:
    """A bus route: its stops in order and whether it loops back on itself."""

    def __init__(
        self,
        stops: Mapping[str, Optional[Coord]],
        route: Iterable[str],
        is_cyclic: bool,
    ) -> None:
        self._stops = stops
        self._route = tuple(route)
        self._is_cyclic = is_cyclic

    @property
    def route(self) -> tuple[str, ...]:
        return self._route

    @property
    def is_cyclic(self) -> bool:
        return self._is_cyclic

    def unique_stops_count(self) -> int:
        """Number of distinct stops on the route."""
        return len(set(self._route))

    def stops_count(self) -> int:
        """Number of stops a bus makes on one full trip."""
        if self._is_cyclic:
            return len(self._route)
        return len(self._route) * 2 - 1

    def route_length(self) -> float:
        """Length of a full trip in metres; every stop must have coordinates."""
        total = 0.0
        for start, finish in pairwise(self._route):
            origin = self._stops.get(start)
            target = self._stops.get(finish)
            if origin is None or target is None:
                raise RuntimeError("stop data was not set")
            total += calc_distance(
                origin.latitude, origin.longitude, target.latitude, target.longitude
            )
        return total if self._is_cyclic else total * 2


class TransitCatalog:
    """All known stops and routes."""

    def __init__(self) -> None:
        self._stops: dict[str, Optional[Coord]] = {}
        self._routes: dict[int, RouteData] = {}

    def add_route(self, bus_number: int, stops: Iterable[str], is_cyclic: bool) -> None:
        """Register a route; stops it mentions become known without coordinates.

        A bus number that is already registered keeps its first route.
        """
        names = list(stops)
        for name in names:
            self._stops.setdefault(name, None)
        if bus_number not in self._routes:
            self._routes[bus_number] = RouteData(self._stops, names, is_cyclic)

    def add_stop(self, name: str, coord: Optional[Coord]) -> bool:
        """Register a stop or set its coordinates; return True if it was new."""
        if name not in self._stops:
            self._stops[name] = coord
            return True
        if coord is not None:
            self._stops[name] = coord
        return False

    def route_data(self, bus_number: int) -> Optional[RouteData]:
        """The route of *bus_number*, or None if it is unknown."""
        return self._routes.get(bus_number)