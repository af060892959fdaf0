"""Breadth-first and depth-first traversal of an adjacency-matrix graph."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

__all__ = ["bfs", "dfs"]


def _check(graph: Sequence[Sequence[object]], start: int) -> int:
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= start < size:
        raise IndexError(f"start vertex {start} is out of range for {size} vertices")
    return size


def bfs(graph: Sequence[Sequence[object]], start: int) -> list[int]:
    """Return vertices reachable from ``start`` in breadth-first order.

    ``graph[v][u]`` is truthy when there is an edge from v to u; neighbours
    are visited in ascending order.
    """
    size = _check(graph, start)
    visited = [False] * size
    visited[start] = True
    queue = deque([start])
    order: list[int] = []
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for neighbour, edge in enumerate(graph[vertex]):
            if edge and not visited[neighbour]:
                visited[neighbour] = True
                queue.append(neighbour)
    return order


def dfs(graph: Sequence[Sequence[object]], start: int) -> list[int]:
    """Return vertices reachable from ``start`` in depth-first order.

    Uses an explicit stack; lower-numbered neighbours are explored first.
    """
    size = _check(graph, start)
    visited = [False] * size
    stack = [start]
    order: list[int] = []
    while stack:
        vertex = stack.pop()
        if visited[vertex]:
            continue
        visited[vertex] = True
        order.append(vertex)
        stack.extend(
            neighbour
            for neighbour in range(size - 1, -1, -1)
            if graph[vertex][neighbour] and not visited[neighbour]
        )
    return order