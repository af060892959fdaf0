"""Searching a sequence for a key."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

__all__ = ["binary_search", "ternary_search", "linear_search"]


def binary_search(items: Sequence[Any], key: Any) -> int | None:
    """Return the index of ``key`` in the ascending ``items``, or None if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        value = items[mid]
        if value == key:
            return mid
        if value < key:
            low = mid + 1
        else:
            high = mid - 1
    return None


def ternary_search(items: Sequence[Any], key: Any) -> int | None:
    """Return the index of ``key`` in the ascending ``items``, or None if absent.

    The range is cut into thirds at each step instead of halves.
    """
    low, high = 0, len(items) - 1
    while low <= high:
        third = (high - low) // 3
        mid1 = low + third
        mid2 = high - third
        if items[mid1] == key:
            return mid1
        if items[mid2] == key:
            return mid2
        if items[mid1] > key:
            high = mid1 - 1
        elif items[mid2] < key:
            low = mid2 + 1
        else:
            low, high = mid1 + 1, mid2 - 1
    return None


def linear_search(items: Sequence[Any], key: Any) -> int | None:
    """Return the index of the first ``key`` in ``items``, or None if absent."""
    return next((index for index, value in enumerate(items) if value == key), None)