"""Undirected and directed graphs stored as adjacency lists, with depth-first traversal."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from typing import Optional

UNDIRECTED_EDGES = [
    (0, 1), (1, 2), (1, 7), (2, 3), (3, 4), (3, 5),
    (3, 7), (4, 5), (5, 6), (6, 7), (6, 8), (7, 8),
]
DIRECTED_EDGES = [
    (0, 1), (0, 5), (1, 2), (2, 4), (2, 6), (3, 2), (6, 5), (5, 8), (7, 5),
]
EXAMPLE_VERTICES = 9


def _check_edge(vertices: int, src: int, dest: int) -> None:
    if src == dest:
        raise ValueError(f"self-loop on vertex {src} is not allowed")
    for vertex in (src, dest):
        if not 0 <= vertex < vertices:
            raise ValueError(f"vertex {vertex} out of range for {vertices} vertices")


class UndirectedGraph:
    """A graph whose edges join vertices in both directions."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError(f"vertex count must not be negative, got {vertices}")
        self.vertices = vertices
        self.edges = 0
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def __repr__(self) -> str:
        return f"UndirectedGraph(vertices={self.vertices}, edges={self.edges})"

    def add_edge(self, src: int, dest: int) -> None:
        """Join ``src`` and ``dest``; each direction counts as one stored edge."""
        _check_edge(self.vertices, src, dest)
        self._adjacency[src].append(dest)
        self._adjacency[dest].append(src)
        self.edges += 2

    def neighbors(self, vertex: int) -> list[int]:
        """Return the neighbours of ``vertex`` in the order they were added."""
        if not 0 <= vertex < self.vertices:
            raise ValueError(f"vertex {vertex} out of range for {self.vertices} vertices")
        return list(self._adjacency[vertex])

    def dfs(self, start: int = 0) -> list[int]:
        """Return the vertices reachable from ``start`` in depth-first visit order."""
        if not 0 <= start < self.vertices:
            raise ValueError(f"vertex {start} out of range for {self.vertices} vertices")
        visited = [False] * self.vertices
        order = [start]
        visited[start] = True
        stack: list[Iterator[int]] = [iter(self._adjacency[start])]
        while stack:
            for neighbor in stack[-1]:
                if not visited[neighbor]:
                    visited[neighbor] = True
                    order.append(neighbor)
                    stack.append(iter(self._adjacency[neighbor]))
                    break
            else:
                stack.pop()
        return order


class DirectedGraph:
    """A graph whose edges point from a source vertex to a target vertex."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError(f"vertex count must not be negative, got {vertices}")
        self.vertices = vertices
        self.edges = 0
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def __repr__(self) -> str:
        return f"DirectedGraph(vertices={self.vertices}, edges={self.edges})"

    def add_edge(self, src: int, dest: int) -> None:
        """Add an edge from ``src`` to ``dest``."""
        _check_edge(self.vertices, src, dest)
        self._adjacency[src].append(dest)
        self.edges += 1

    def targets(self, vertex: int) -> list[int]:
        """Return the targets of edges leaving ``vertex``, in insertion order."""
        if not 0 <= vertex < self.vertices:
            raise ValueError(f"vertex {vertex} out of range for {self.vertices} vertices")
        return list(self._adjacency[vertex])

    def dfs(self) -> list[tuple[int, Optional[int]]]:
        """Run a depth-first search started from every vertex in turn.

        Returns the steps taken: ``(vertex, None)`` when a search enters
        ``vertex`` and ``(vertex, target)`` when it follows a tree edge. Each
        vertex is entered once as a starting point, even if already visited,
        and once more for every tree edge that reaches it.
        """
        visited = [False] * self.vertices
        steps: list[tuple[int, Optional[int]]] = []
        for root in range(self.vertices):
            visited[root] = True
            steps.append((root, None))
            stack: list[tuple[int, Iterator[int]]] = [(root, iter(self._adjacency[root]))]
            while stack:
                vertex, targets = stack[-1]
                for target in targets:
                    if not visited[target]:
                        steps.append((vertex, target))
                        visited[target] = True
                        steps.append((target, None))
                        stack.append((target, iter(self._adjacency[target])))
                        break
                else:
                    stack.pop()
        return steps


def _format_undirected(order: Sequence[int]) -> str:
    return "".join(f"{vertex} -> " for vertex in order)


def _format_directed(steps: Sequence[tuple[int, Optional[int]]]) -> str:
    return "".join(
        f"\n{vertex}: " if target is None else f"\t{vertex} -> {target}, "
        for vertex, target in steps
    )


def main(argv: Sequence[str] | None = None) -> int:
    graph = UndirectedGraph(EXAMPLE_VERTICES)
    print(f"Undirected graph with {EXAMPLE_VERTICES} vertices:")
    for src, dest in UNDIRECTED_EDGES:
        graph.add_edge(src, dest)
    sys.stdout.write(_format_undirected(graph.dfs(0)))

    print(f"\n\nDirected graph with {EXAMPLE_VERTICES} vertices:")
    digraph = DirectedGraph(EXAMPLE_VERTICES)
    for src, dest in DIRECTED_EDGES:
        digraph.add_edge(src, dest)
    sys.stdout.write(_format_directed(digraph.dfs()))
    return 0


if __name__ == "__main__":
    sys.exit(main())