"""All-pairs shortest paths by repeated Bellman-Ford relaxation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from simplegraph.graph import SimpleGraph

INFINITY = math.inf


class NegativeCycleError(RuntimeError):
    """Raised when shortest paths are asked of a graph with a negative cycle."""

    def __init__(self, message: str = "Graph contains negative cycle"):
        super().__init__(message)


@dataclass
class PathInfo:
    """A shortest path between two vertices and its total weight."""

    path: list[int] = field(default_factory=list)
    distance: float = INFINITY


class BellmanFord:
    """Shortest distances and paths between every pair of vertices.

    Unreachable pairs have distance ``INFINITY`` and an empty path. The
    search stops at the first source from which a negative cycle is
    reachable; after that every query raises ``NegativeCycleError``.
    """

    def __init__(self, graph: SimpleGraph | None):
        self._graph = graph
        self._negative_cycle = False
        self._distances: list[list[float]] = []
        self._paths: list[list[list[int]]] = []
        self.restart()

    def set_graph(self, graph: SimpleGraph | None) -> None:
        """Switch to another graph and compute its paths."""
        self._graph = graph
        self._negative_cycle = False
        self.restart()

    def restart(self) -> None:
        """Compute the paths of the current graph again."""
        graph = self._graph
        if graph is None:
            return
        count = graph.vertex_count
        self._distances = [[INFINITY] * count for _ in range(count)]
        self._paths = [[[] for _ in range(count)] for _ in range(count)]
        for i in range(count):
            self._distances[i][i] = 0
            self._paths[i][i] = [i]
            for j in range(count):
                if graph.get_edge(i, j) is not None:
                    self._paths[i][j] = [i, j]

        edges = [(e.v1.index, e.v2.index, e.weight) for e in graph.edges()]
        for source in range(count):
            distances = self._distances[source]
            paths = self._paths[source]
            for _ in range(count - 1):
                for u, v, weight in edges:
                    if distances[u] != INFINITY and distances[v] > distances[u] + weight:
                        distances[v] = distances[u] + weight
                        paths[v] = [*paths[u], v]
            if any(
                distances[u] != INFINITY and distances[v] > distances[u] + weight
                for u, v, weight in edges
            ):
                self._negative_cycle = True
                return

    def _vertex_count(self) -> int:
        return self._graph.vertex_count if self._graph is not None else 0

    def _check(self, source: int, target: int) -> None:
        if self._negative_cycle:
            raise NegativeCycleError()
        count = self._vertex_count()
        if not (0 <= source < count and 0 <= target < count):
            raise IndexError("Invalid vertex indices")

    def distance(self, source: int, target: int) -> float:
        """The length of the shortest path from ``source`` to ``target``."""
        self._check(source, target)
        return self._distances[source][target]

    def path(self, source: int, target: int) -> list[int]:
        """The vertex indices along the shortest path from ``source`` to ``target``."""
        self._check(source, target)
        return list(self._paths[source][target])

    def all_paths(self) -> list[list[PathInfo]]:
        """Path and distance for every ordered pair of vertices."""
        if self._negative_cycle:
            raise NegativeCycleError()
        count = self._vertex_count()
        return [
            [PathInfo(list(self._paths[i][j]), self._distances[i][j]) for j in range(count)]
            for i in range(count)
        ]

    def result(self) -> list[list[float]]:
        """The matrix of shortest distances."""
        if self._negative_cycle:
            raise NegativeCycleError()
        return [list(row) for row in self._distances]

    def contains_negative_cycle(self) -> bool:
        return self._negative_cycle