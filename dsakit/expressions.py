"""Bracket balancing and postfix expression evaluation."""

from __future__ import annotations

import operator
import string
from collections.abc import Callable

__all__ = [
    "UnbalancedError",
    "check_parentheses",
    "is_balanced",
    "is_valid_brackets",
    "evaluate_postfix",
]


class UnbalancedError(ValueError):
    """Raised for an unbalanced parenthesis sequence; ``index`` marks where."""

    def __init__(self, index: int) -> None:
        super().__init__(f"unbalanced parenthesis sequence, error at index {index}")
        self.index = index


def check_parentheses(text: str) -> None:
    """Raise UnbalancedError unless every '(' in ``text`` has a matching ')'.

    The index is that of an unmatched ')', or the length of ``text`` when
    some '(' is left open. Other characters are ignored.
    """
    depth = 0
    for index, char in enumerate(text):
        if char == "(":
            depth += 1
        elif char == ")":
            if depth == 0:
                raise UnbalancedError(index)
            depth -= 1
    if depth:
        raise UnbalancedError(len(text))


def is_balanced(text: str) -> bool:
    """Return True when the parentheses in ``text`` are balanced."""
    try:
        check_parentheses(text)
    except UnbalancedError:
        return False
    return True


_OPENING = frozenset("([{")
_MATCHING = {")": "(", "]": "[", "}": "{"}


def is_valid_brackets(text: str) -> bool:
    """Return True when '()', '[]' and '{}' in ``text`` nest correctly.

    Every character that is not an opening bracket closes the innermost one.
    """
    if len(text) % 2:
        return False
    stack: list[str] = []
    for char in text:
        if char in _OPENING:
            stack.append(char)
            continue
        if not stack:
            return False
        opening = stack.pop()
        if char in _MATCHING and _MATCHING[char] != opening:
            return False
    return not stack


def _divide(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
}


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands.

    Division truncates toward zero. Whitespace is ignored.
    """
    stack: list[int] = []
    for index, char in enumerate(expression):
        if char in string.digits:
            stack.append(int(char))
        elif char in _OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"missing operand for {char!r} at index {index}")
            right = stack.pop()
            left = stack.pop()
            stack.append(_OPERATORS[char](left, right))
        elif not char.isspace():
            raise ValueError(f"unexpected character {char!r} at index {index}")
    if len(stack) != 1:
        raise ValueError("malformed postfix expression")
    return stack[0]