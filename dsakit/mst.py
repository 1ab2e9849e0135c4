"""Minimum spanning trees by Kruskal's algorithm."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from operator import attrgetter


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge."""

    first: int
    second: int
    weight: int


def kruskal(vertices: int, edges: Iterable[Edge | Sequence[int]]) -> list[Edge]:
    """Return the edges of a minimum spanning tree, lightest first.

    Raises ValueError when the graph has no vertices, when an edge names a
    vertex outside ``0..vertices-1`` or when the graph is not connected.
    """
    if vertices < 1:
        raise ValueError("a spanning tree needs at least one vertex")
    candidates = [e if isinstance(e, Edge) else Edge(*e) for e in edges]
    for edge in candidates:
        for vertex in (edge.first, edge.second):
            if not 0 <= vertex < vertices:
                raise ValueError(f"vertex {vertex} is outside 0..{vertices - 1}")
    candidates.sort(key=attrgetter("weight"))

    parent = list(range(vertices))

    def root(vertex: int) -> int:
        while parent[vertex] != vertex:
            vertex = parent[vertex]
        return vertex

    tree: list[Edge] = []
    for edge in candidates:
        if len(tree) == vertices - 1:
            break
        first_root, second_root = root(edge.first), root(edge.second)
        if first_root != second_root:
            parent[first_root] = second_root
            tree.append(edge)
    if len(tree) != vertices - 1:
        raise ValueError("the graph is not connected")
    return tree