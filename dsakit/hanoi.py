"""Tower of Hanoi move generation."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

__all__ = ["Move", "tower_of_hanoi", "main"]


@dataclass(frozen=True)
class Move:
    """One disk moved from one peg to another."""

    disk: int
    source: str
    destination: str

    def __str__(self) -> str:
        return f"Move disk {self.disk} from {self.source} to {self.destination}"


def tower_of_hanoi(
    n: int, source: str = "A", destination: str = "C", auxiliary: str = "B"
) -> Iterator[Move]:
    """Yield the moves that carry ``n`` disks from ``source`` to ``destination``."""
    if n < 1:
        raise ValueError("number of disks must be at least 1")
    return _moves(n, source, destination, auxiliary)


def _moves(n: int, source: str, destination: str, auxiliary: str) -> Iterator[Move]:
    if n == 1:
        yield Move(1, source, destination)
        return
    yield from _moves(n - 1, source, auxiliary, destination)
    yield Move(n, source, destination)
    yield from _moves(n - 1, auxiliary, destination, source)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the moves for a number of disks given as argument or read from input."""
    parser = argparse.ArgumentParser(description="Solve the Tower of Hanoi.")
    parser.add_argument("disks", nargs="?", type=int, help="number of disks")
    args = parser.parse_args(argv)
    disks = args.disks
    if disks is None:
        answer = input("Enter the number of disks: ")
        try:
            disks = int(answer)
        except ValueError:
            parser.error(f"invalid number of disks: {answer!r}")
    try:
        moves = tower_of_hanoi(disks, "A", "C", "B")
    except ValueError as exc:
        parser.error(str(exc))
    for move in moves:
        print(move)
    return 0