"""Queues and reversal of a queue's leading items."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

__all__ = [
    "DEFAULT_CAPACITY",
    "QueueEmptyError",
    "QueueFullError",
    "LinkedQueue",
    "BoundedQueue",
    "reverse_first_k",
]

# A ring of 100 slots with one slot always kept free.
DEFAULT_CAPACITY = 99


class QueueEmptyError(IndexError):
    """Raised when an item is taken from an empty queue."""


class QueueFullError(OverflowError):
    """Raised when an item is added to a full queue."""


@dataclass(eq=False)
class _Node:
    item: Any
    next: Optional[_Node] = field(default=None, repr=False)


class LinkedQueue:
    """An unbounded first-in first-out queue of linked nodes."""

    def __init__(self) -> None:
        self._front: _Node | None = None
        self._rear: _Node | None = None
        self._size = 0

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the rear."""
        node = _Node(item)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the item at the front."""
        if self._front is None:
            raise QueueEmptyError("queue is empty, unable to dequeue")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.item

    def __iter__(self) -> Iterator[Any]:
        """Yield the items from front to rear."""
        node = self._front
        while node is not None:
            yield node.item
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{item}->" for item in self) + "NULL"


class BoundedQueue:
    """A first-in first-out queue that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def push(self, item: Any) -> None:
        """Add ``item`` at the rear."""
        if len(self._items) >= self.capacity:
            raise QueueFullError("queue is full")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the item at the front."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def front(self) -> Any:
        """Return the item at the front without removing it."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[0]

    def __iter__(self) -> Iterator[Any]:
        """Yield the items from front to rear."""
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


def reverse_first_k(queue: BoundedQueue, k: int) -> BoundedQueue:
    """Return a copy of ``queue`` with its first ``k`` items in reverse order."""
    if k < 0:
        raise ValueError("k must not be negative")
    result = BoundedQueue(queue.capacity)
    for item in queue:
        result.push(item)
    head = [result.pop() for _ in range(k)]
    for item in reversed(head):
        result.push(item)
    for _ in range(len(result) - k):
        result.push(result.pop())
    return result