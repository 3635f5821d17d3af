"""Comparison and distribution sorts that return new sorted lists."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T")


def _sift_down(heap: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(values: Iterable[T]) -> list[T]:
    """Sort with a max-heap built in place, then repeatedly extract the maximum."""
    heap = list(values)
    size = len(heap)
    for root in reversed(range(size // 2)):
        _sift_down(heap, size, root)
    for end in reversed(range(1, size)):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, end, 0)
    return heap


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    for settled in range(1, len(items)):
        for j in range(len(items) - settled):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Sort by moving the minimum of the unsorted tail to its front."""
    items = list(values)
    for i in range(len(items)):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def exchange_sort(values: Iterable[T]) -> list[T]:
    """Sort by swapping the current slot with any later, smaller element."""
    items = list(values)
    for i in range(len(items) - 1):
        for j in range(i + 1, len(items)):
            if items[j] < items[i]:
                items[i], items[j] = items[j], items[i]
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and key < items[j]:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[T]) -> list[T]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[Any], low: int, high: int) -> int:
    i = low + 1
    j = high
    key = items[low]
    while True:
        while i < high and items[i] <= key:
            i += 1
        while j >= low and items[j] > key:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
        else:
            items[low], items[j] = items[j], items[low]
            return j


def quick_sort(values: Iterable[T]) -> list[T]:
    """Quicksort using the first element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(items, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Stable counting sort for non-negative integers.

    Raises ValueError if any value is negative.
    """
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("counting sort needs non-negative integers")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    for k in range(1, len(counts)):
        counts[k] += counts[k - 1]
    output = [0] * len(items)
    for value in reversed(items):
        counts[value] -= 1
        output[counts[value]] = value
    return output


def cycle_sort(values: Iterable[T]) -> list[T]:
    """Cycle sort, which writes each element directly into its final slot."""
    items = list(values)
    for start in range(len(items) - 1):
        item = items[start]
        pos = start + sum(1 for other in items[start + 1:] if other < item)
        if pos == start:
            continue
        while item == items[pos]:
            pos += 1
        items[pos], item = item, items[pos]
        while pos != start:
            pos = start + sum(1 for other in items[start + 1:] if other < item)
            while item == items[pos]:
                pos += 1
            if item != items[pos]:
                items[pos], item = item, items[pos]
    return items