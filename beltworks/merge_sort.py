"""Three-way merge sort."""

from __future__ import annotations

from heapq import merge
from typing import Any, MutableSequence


def merge_sort(items: MutableSequence[Any]) -> None:
    """Sort *items* in place, stably, splitting into three parts each time."""
    size = len(items)
    if size < 2:
        return
    part = size // 3
    parts = [list(items[:part]), list(items[part:2 * part]), list(items[2 * part:])]
    for chunk in parts:
        merge_sort(chunk)
    items[:] = list(merge(merge(parts[0], parts[1]), parts[2]))