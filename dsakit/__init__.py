"""Classic data structures and algorithms in plain Python."""

__version__ = "0.1.0"
__all__ = [
    "searching",
    "sorting",
    "graphs",
    "trees",
    "hanoi",
    "stacks",
    "queues",
    "linked_lists",
    "expressions",
]