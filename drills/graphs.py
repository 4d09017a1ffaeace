"""Undirected graphs as adjacency lists, with traversals and matrix views."""

from __future__ import annotations

from collections import deque


class _BaseGraph:
    """Vertices are numbered from 0 to ``vertices`` inclusive."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("the vertex count must not be negative")
        self.vertices = vertices

    def _check(self, *nodes: int) -> None:
        for node in nodes:
            if not 0 <= node <= self.vertices:
                raise ValueError(f"vertex {node} is out of range 0..{self.vertices}")


class Graph(_BaseGraph):
    """Unweighted undirected graph."""

    def __init__(self, vertices: int) -> None:
        super().__init__(vertices)
        self.adjacency: list[list[int]] = [[] for _ in range(vertices + 1)]

    def add_edge(self, v1: int, v2: int) -> None:
        """Connect ``v1`` and ``v2`` in both directions."""
        self._check(v1, v2)
        self.adjacency[v1].append(v2)
        self.adjacency[v2].append(v1)

    def bfs(self, start: int = 0) -> list[int]:
        """Vertices reachable from ``start`` in breadth-first order."""
        self._check(start)
        visited = {start}
        queue = deque([start])
        order: list[int] = []
        while queue:
            node = queue.popleft()
            order.append(node)
            for neighbour in self.adjacency[node]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self, start: int = 0) -> list[int]:
        """Vertices reachable from ``start`` in depth-first order."""
        self._check(start)
        visited = {start}
        order = [start]
        stack = [iter(self.adjacency[start])]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(self.adjacency[neighbour]))
                    break
            else:
                stack.pop()
        return order

    def adjacency_matrix(self) -> list[list[int]]:
        """Square 0/1 matrix with a 1 wherever two vertices share an edge."""
        size = self.vertices + 1
        matrix = [[0] * size for _ in range(size)]
        for node, neighbours in enumerate(self.adjacency):
            for neighbour in neighbours:
                matrix[node][neighbour] = 1
        return matrix

    def describe(self) -> str:
        """One line per vertex that has neighbours, listing them in insertion order."""
        return "\n".join(
            f"Vertex {node}: " + " ".join(map(str, neighbours))
            for node, neighbours in enumerate(self.adjacency)
            if neighbours
        )


class WeightedGraph(_BaseGraph):
    """Undirected graph whose edges carry weights."""

    def __init__(self, vertices: int) -> None:
        super().__init__(vertices)
        self.adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertices + 1)]

    def add_edge(self, v1: int, v2: int, weight: int) -> None:
        """Connect ``v1`` and ``v2`` in both directions with ``weight``."""
        self._check(v1, v2)
        self.adjacency[v1].append((v2, weight))
        self.adjacency[v2].append((v1, weight))

    def adjacency_matrix(self) -> list[list[int]]:
        """Square matrix holding each edge's weight, 0 where there is no edge."""
        size = self.vertices + 1
        matrix = [[0] * size for _ in range(size)]
        for node, neighbours in enumerate(self.adjacency):
            for neighbour, weight in neighbours:
                matrix[node][neighbour] = weight
        return matrix

    def describe(self) -> str:
        """One line per vertex with neighbours, each written as ``vertex:weight``."""
        return "\n".join(
            f"Vertex {node}: "
            + " ".join(f"{neighbour}:{weight}" for neighbour, weight in neighbours)
            for node, neighbours in enumerate(self.adjacency)
            if neighbours
        )


def _read_numbers(text: str) -> list[int]:
    try:
        return [int(token) for token in text.split()]
    except ValueError as exc:
        raise ValueError(f"graph text must hold integers only: {exc}") from None


def _header(numbers: list[int], per_edge: int) -> tuple[int, int, list[int]]:
    if len(numbers) < 2:
        raise ValueError("graph text must start with the vertex and edge counts")
    vertices, edges, *rest = numbers
    if edges < 0 or len(rest) != edges * per_edge:
        raise ValueError(f"expected {edges} edges of {per_edge} numbers each")
    return vertices, edges, rest


def parse_graph(text: str) -> Graph:
    """Build a graph from ``V E`` followed by ``E`` pairs of vertices."""
    vertices, _, rest = _header(_read_numbers(text), 2)
    graph = Graph(vertices)
    for v1, v2 in zip(rest[::2], rest[1::2]):
        graph.add_edge(v1, v2)
    return graph


def parse_weighted_graph(text: str) -> WeightedGraph:
    """Build a weighted graph from ``V E`` followed by ``E`` triples ``v1 v2 weight``."""
    vertices, _, rest = _header(_read_numbers(text), 3)
    graph = WeightedGraph(vertices)
    for v1, v2, weight in zip(rest[::3], rest[1::3], rest[2::3]):
        graph.add_edge(v1, v2, weight)
    return graph