"""Hotel booking statistics over a sliding 24-hour window."""

from __future__ import annotations

import sys
from collections import Counter, deque
from dataclasses import dataclass, field
from typing import Optional, Sequence, TextIO

WINDOW_SECONDS = 86400


@dataclass(frozen=True)
class _Booking:
    hotel: str
    time: int
    client_id: int
    room_count: int


@dataclass
class _HotelData:
    clients: Counter = field(default_factory=Counter)
    rooms: int = 0


class HotelManager:
    """Tracks bookings made in the last day before the latest booking time."""

    def __init__(self) -> None:
        self._bookings: deque[_Booking] = deque()
        self._hotels: dict[str, _HotelData] = {}

    def book(self, time: int, hotel: str, client_id: int, room_count: int) -> None:
        """Record a booking and drop those older than the window."""
        data = self._hotels.setdefault(hotel, _HotelData())
        self._bookings.append(_Booking(hotel, time, client_id, room_count))
        data.rooms += room_count
        data.clients[client_id] += 1

        while self._bookings:
            oldest = self._bookings[0]
            if time - WINDOW_SECONDS < oldest.time:
                break
            old_data = self._hotels[oldest.hotel]
            old_data.rooms -= oldest.room_count
            old_data.clients[oldest.client_id] -= 1
            if old_data.clients[oldest.client_id] == 0:
                del old_data.clients[oldest.client_id]
            self._bookings.popleft()

    def occupied_rooms(self, hotel: str) -> int:
        """Rooms booked in *hotel* within the window."""
        data = self._hotels.get(hotel)
        return data.rooms if data else 0

    def unique_clients(self, hotel: str) -> int:
        """Distinct clients who booked in *hotel* within the window."""
        data = self._hotels.get(hotel)
        return len(data.clients) if data else 0


def run(stream: TextIO, out: TextIO) -> None:
    """Process a query count followed by BOOK, CLIENTS and ROOMS queries."""
    words = iter(stream.read().split())
    manager = HotelManager()
    query_count = int(next(words))
    for _ in range(query_count):
        query = next(words)
        if query == "BOOK":
            time = int(next(words))
            hotel = next(words)
            client_id = int(next(words))
            room_count = int(next(words))
            manager.book(time, hotel, client_id, room_count)
        elif query == "CLIENTS":
            out.write(f"{manager.unique_clients(next(words))}\n")
        elif query == "ROOMS":
            out.write(f"{manager.occupied_rooms(next(words))}\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read queries from standard input and answer on standard output."""
    run(sys.stdin, sys.stdout)
    return 0