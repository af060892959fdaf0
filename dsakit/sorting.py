"""Classic comparison sorts and a counting sort for 'a'/'b'/'c' characters."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable
from typing import Any

__all__ = ["bubble_sort", "quick_sort", "merge_sort", "sort_abc"]


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new ascending list, built by repeated adjacent swaps."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def _partition(values: list[Any], low: int, high: int) -> int:
    pivot = values[high]
    boundary = low
    for j in range(low, high):
        if values[j] < pivot:
            values[boundary], values[j] = values[j], values[boundary]
            boundary += 1
    values[boundary], values[high] = values[high], values[boundary]
    return boundary


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new ascending list, sorted by quicksort with the last element as pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot_index = _partition(result, low, high)
        pending.append((pivot_index + 1, high))
        pending.append((low, pivot_index - 1))
    return result


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new ascending list, sorted by a stable top-down merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) - 1) // 2 + 1
    return list(heapq.merge(merge_sort(values[:mid]), merge_sort(values[mid:])))


def sort_abc(chars: Iterable[str]) -> list[str]:
    """Sort characters by counting: 'a's, then 'b's, then 'c's.

    Any character other than 'a' or 'b' is counted, and written back, as 'c'.
    """
    counts = Counter("a" if ch == "a" else "b" if ch == "b" else "c" for ch in chars)
    return ["a"] * counts["a"] + ["b"] * counts["b"] + ["c"] * counts["c"]