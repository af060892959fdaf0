"""Singly linked and circular linked lists."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

__all__ = ["LinkedList", "CircularList"]


@dataclass(eq=False)
class _Node:
    item: Any
    next: Optional[_Node] = field(default=None, repr=False)


def _reverse_chain(head: _Node | None) -> _Node | None:
    previous: _Node | None = None
    node = head
    while node is not None:
        node.next, previous, node = previous, node, node.next
    return previous


class LinkedList:
    """A singly linked list that grows at its head."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._size = 0

    def push(self, item: Any) -> None:
        """Insert ``item`` at the head."""
        self._head = _Node(item, self._head)
        self._size += 1

    def delete_at(self, position: int) -> Any:
        """Remove and return the item at the 1-based ``position``."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} is out of range for {self._size} items")
        if position == 1:
            node = self._head
            self._head = node.next
        else:
            previous = self._head
            for _ in range(position - 2):
                previous = previous.next
            node = previous.next
            previous.next = node.next
        self._size -= 1
        return node.item

    def reverse(self) -> None:
        """Reverse the list in place."""
        self._head = _reverse_chain(self._head)

    def split_and_reverse(self) -> None:
        """Reverse the second half of the list in place.

        For an odd length the middle item stays with the first half.
        """
        if self._head is None:
            return
        slow = self._head
        fast = slow.next
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
        slow.next = _reverse_chain(slow.next)

    def __iter__(self) -> Iterator[Any]:
        """Yield the items from head to tail."""
        node = self._head
        while node is not None:
            yield node.item
            node = node.next

    def __len__(self) -> int:
        return self._size


@dataclass(eq=False)
class _Entry:
    key: Any
    data: Any
    next: Optional[_Entry] = field(default=None, repr=False)


class CircularList:
    """A circular linked list of (key, data) pairs."""

    def __init__(self) -> None:
        self._tail: _Entry | None = None
        self._size = 0

    def insert_first(self, key: Any, data: Any) -> None:
        """Insert a (key, data) pair at the head."""
        entry = _Entry(key, data)
        if self._tail is None:
            entry.next = entry
            self._tail = entry
        else:
            entry.next = self._tail.next
            self._tail.next = entry
        self._size += 1

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        """Yield (key, data) pairs once around, starting at the head."""
        if self._tail is None:
            return
        head = self._tail.next
        node = head
        while True:
            yield node.key, node.data
            node = node.next
            if node is head:
                break

    def __len__(self) -> int:
        return self._size