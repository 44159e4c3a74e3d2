"""Search for simple cycles of a given length through a given vertex."""

from __future__ import annotations

from simplegraph.graph import SimpleGraph


class CycleFinder:
    """All cycles that visit ``length`` distinct vertices starting at ``start``.

    Each cycle is a list of vertex indices that begins and ends with ``start``.
    """

    def __init__(self, graph: SimpleGraph | None, length: int, start: int):
        self._graph = graph
        self._length = length
        self._start = start
        self._cycles: list[list[int]] = []
        self.restart()

    def restart(self) -> None:
        """Search the current graph again."""
        self._cycles = []
        if self._graph is None:
            return
        count = self._graph.vertex_count
        if not 0 <= self._start < count:
            raise IndexError(f"start vertex {self._start} out of range")
        self._search(self._start, [], [False] * count)

    def _search(self, current: int, path: list[int], visited: list[bool]) -> None:
        path.append(current)
        visited[current] = True
        if len(path) == self._length:
            if self._graph.get_edge(current, self._start) is not None:
                self._cycles.append([*path, self._start])
        else:
            for edge in self._graph.adjacent_edges(current):
                following = edge.v2.index
                if not visited[following]:
                    self._search(following, path, visited)
        visited[current] = False
        path.pop()

    def set_graph(self, graph: SimpleGraph | None) -> None:
        self._graph = graph
        self.restart()

    def result(self) -> list[list[int]]:
        return [list(cycle) for cycle in self._cycles]


def find_cycles(graph: SimpleGraph | None, length: int, start: int) -> list[list[int]]:
    """The cycles of ``length`` vertices through ``start``."""
    return CycleFinder(graph, length, start).result()