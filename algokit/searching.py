"""Binary search over sorted sequences."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from typing import Any


def binary_search(values: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in the sorted ``values``, or -1 if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def contains_sorted(values: Iterable[Any], target: Any) -> bool:
    """Sort ``values`` and report whether ``target`` is among them."""
    ordered = sorted(values)
    pos = bisect_left(ordered, target)
    return pos < len(ordered) and ordered[pos] == target