"""A value guarded by a lock, reachable only while the lock is held."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


@dataclass
class _Handle(Generic[T]):
    value: T


class Synchronized(Generic[T]):
    """Holds a value that is read and written under a mutex.

    ``with box.access() as handle:`` gives exclusive use of
    ``handle.value``; whatever it holds on leaving the block is stored.
    """

    def __init__(self, initial: T = None) -> None:
        self._value = initial
        self._lock = threading.Lock()

    @contextmanager
    def access(self) -> Iterator[_Handle[T]]:
        """Lock the value and yield a handle to it."""
        with self._lock:
            handle = _Handle(self._value)
            try:
                yield handle
            finally:
                self._value = handle.value