"""Undirected graphs over the vertices 0..n-1 with traversal and path queries."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Iterator, Sequence


class Graph:
    """An undirected graph held as a weighted adjacency map.

    Vertices are the integers ``0`` to ``vertices - 1``. An edge given without
    a weight has weight 1; a weight of 0 means there is no edge.
    """

    def __init__(self, vertices: int, edges: Iterable[Sequence[int]] = ()) -> None:
        if vertices < 0:
            raise ValueError(f"vertex count must not be negative, got {vertices}")
        self._adjacent: list[dict[int, int]] = [{} for _ in range(vertices)]
        for edge in edges:
            self.add_edge(*edge)

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacent):
            raise ValueError(
                f"vertex {vertex} is outside 0..{len(self._adjacent) - 1}"
            )

    def add_edge(self, first: int, second: int, weight: int = 1) -> None:
        """Join two vertices in both directions; a weight of 0 removes the edge."""
        self._check_vertex(first)
        self._check_vertex(second)
        if weight == 0:
            self._adjacent[first].pop(second, None)
            self._adjacent[second].pop(first, None)
        else:
            self._adjacent[first][second] = weight
            self._adjacent[second][first] = weight

    def _neighbours(self, vertex: int) -> list[int]:
        return sorted(other for other in self._adjacent[vertex] if other != vertex)

    def _walk_depth_first(self, start: int, visited: set[int]) -> Iterator[int]:
        visited.add(start)
        yield start
        stack = [iter(self._neighbours(start))]
        while stack:
            for nxt in stack[-1]:
                if nxt not in visited:
                    visited.add(nxt)
                    yield nxt
                    stack.append(iter(self._neighbours(nxt)))
                    break
            else:
                stack.pop()

    def count_triangles(self) -> int:
        """Number of distinct 3-cycles in the graph."""
        ordered = sum(
            1
            for first, links in enumerate(self._adjacent)
            for second in links
            for third in self._adjacent[second]
            if third in links
        )
        return ordered // 6

    def dfs_order(self) -> list[int]:
        """Depth-first visiting order, restarting at each unvisited vertex."""
        visited: set[int] = set()
        order: list[int] = []
        for vertex in range(len(self._adjacent)):
            if vertex not in visited:
                order.extend(self._walk_depth_first(vertex, visited))
        return order

    def bfs_order(self) -> list[int]:
        """Breadth-first visiting order, restarting at each unvisited vertex."""
        visited: set[int] = set()
        order: list[int] = []
        for source in range(len(self._adjacent)):
            if source in visited:
                continue
            visited.add(source)
            pending = deque([source])
            while pending:
                front = pending.popleft()
                order.append(front)
                for nxt in self._neighbours(front):
                    if nxt not in visited:
                        visited.add(nxt)
                        pending.append(nxt)
        return order

    def connected_components(self) -> list[list[int]]:
        """Each component's vertices in depth-first order, by lowest vertex."""
        visited: set[int] = set()
        return [
            list(self._walk_depth_first(vertex, visited))
            for vertex in range(len(self._adjacent))
            if vertex not in visited
        ]

    def dfs_path(self, start: int, end: int) -> list[int] | None:
        """A path found by depth-first search, listed from ``end`` back to ``start``.

        Returns None when ``end`` cannot be reached from ``start``.
        """
        self._check_vertex(start)
        self._check_vertex(end)
        if start == end:
            return [start]
        visited = {start}
        path = [start]
        stack = [iter(self._neighbours(start))]
        while stack:
            for nxt in stack[-1]:
                if nxt in visited:
                    continue
                if nxt == end:
                    return [end, *reversed(path)]
                visited.add(nxt)
                path.append(nxt)
                stack.append(iter(self._neighbours(nxt)))
                break
            else:
                stack.pop()
                path.pop()
        return None

    def has_path(self, start: int, end: int) -> bool:
        """Whether ``end`` can be reached from ``start``."""
        return self.dfs_path(start, end) is not None

    def is_connected(self) -> bool:
        """Whether every vertex can be reached from vertex 0."""
        if not self._adjacent:
            return True
        return len(set(self._walk_depth_first(0, set()))) == len(self._adjacent)

    def count_islands(self) -> int:
        """Number of connected components."""
        return len(self.connected_components())

    def shortest_distances(self) -> list[float]:
        """Dijkstra distances from vertex 0; unreachable vertices get ``math.inf``."""
        count = len(self._adjacent)
        if count == 0:
            return []
        distance: list[float] = [math.inf] * count
        distance[0] = 0
        remaining = set(range(count))
        while remaining:
            nearest = min(remaining, key=lambda v: (distance[v], v))
            if distance[nearest] == math.inf:
                break
            remaining.discard(nearest)
            for other, weight in self._adjacent[nearest].items():
                if other in remaining:
                    candidate = distance[nearest] + weight
                    if candidate < distance[other]:
                        distance[other] = candidate
        return distance