"""Stacks, stack sorting and reversal through a stack."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional, Union

__all__ = [
    "DEFAULT_CAPACITY",
    "StackUnderflowError",
    "StackOverflowError",
    "LinkedStack",
    "BoundedStack",
    "sort_stack",
    "reverse_with_stack",
    "reverse_recursive",
]

DEFAULT_CAPACITY = 100


class StackUnderflowError(IndexError):
    """Raised when an item is taken from an empty stack."""


class StackOverflowError(OverflowError):
    """Raised when an item is pushed onto a full stack."""


@dataclass(eq=False)
class _Node:
    item: Any
    next: Optional[_Node] = field(default=None, repr=False)


class LinkedStack:
    """An unbounded stack built from singly linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._size = 0

    def push(self, item: Any) -> None:
        """Put ``item`` on top of the stack."""
        self._top = _Node(item, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self._top is None:
            raise StackUnderflowError("stack underflow")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.item

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self._top is None:
            raise StackUnderflowError("stack is empty")
        return self._top.item

    def __iter__(self) -> Iterator[Any]:
        """Yield the items from top to bottom."""
        node = self._top
        while node is not None:
            yield node.item
            node = node.next

    def __len__(self) -> int:
        return self._size


class BoundedStack:
    """A stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        """Put ``item`` on top of the stack."""
        if self.is_full():
            raise StackOverflowError("stack is full")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def is_full(self) -> bool:
        """Return True when no further item fits."""
        return len(self._items) >= self.capacity

    def __iter__(self) -> Iterator[Any]:
        """Yield the items from top to bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)


def sort_stack(stack: Union[BoundedStack, LinkedStack]) -> BoundedStack:
    """Move the items of ``stack`` into a new stack with the largest on top.

    The given stack is left empty.
    """
    result = BoundedStack(getattr(stack, "capacity", len(stack)))
    while stack:
        item = stack.pop()
        while result and result.peek() > item:
            stack.push(result.pop())
        result.push(item)
    return result


def reverse_with_stack(items: Iterable[Any]) -> list[Any]:
    """Return ``items`` reversed by pushing all of them and popping them back."""
    stack = BoundedStack()
    values = list(items)
    for value in values:
        stack.push(value)
    return [stack.pop() for _ in values]


def _unwind(values: list[Any], index: int, stack: BoundedStack, out: list[Any]) -> None:
    if index == len(values):
        return
    stack.push(values[index])
    _unwind(values, index + 1, stack, out)
    out.append(stack.pop())


def reverse_recursive(items: Iterable[Any]) -> list[Any]:
    """Return ``items`` reversed, pushing on the way down the recursion and popping on the way up."""
    values = list(items)
    out: list[Any] = []
    _unwind(values, 0, BoundedStack(), out)
    return out