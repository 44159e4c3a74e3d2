"""Graph storage as an adjacency matrix."""

from __future__ import annotations

from simplegraph.elements import Edge, Vertex
from simplegraph.forms import GraphForm


class MatrixForm(GraphForm):
    """A square matrix whose cell ``[i][j]`` holds the edge from i to j or None."""

    def __init__(self, size: int, directed: bool):
        super().__init__(size, directed)
        self._matrix: list[list[Edge | None]] = [[None] * size for _ in range(size)]

    def _check(self, *indices: int) -> None:
        for index in indices:
            if not 0 <= index < self.size:
                raise IndexError(f"vertex index {index} out of range")

    def has_edge(self, i: int, j: int) -> bool:
        self._check(i, j)
        return self._matrix[i][j] is not None

    def get_edge(self, v1: Vertex | int, v2: Vertex | int) -> Edge | None:
        i, j = self._index(v1), self._index(v2)
        self._check(i, j)
        return self._matrix[i][j]

    def insert_edge(self, v1: Vertex, v2: Vertex, weight: int = 1) -> Edge | None:
        if v1 is None or v2 is None:
            return None
        i, j = v1.index, v2.index
        if not (0 <= i < self.size and 0 <= j < self.size):
            return None
        source = self.vertices[i]
        target = self.vertices[j]
        if not self.directed:
            self._matrix[j][i] = Edge(target, source, weight)
        edge = Edge(source, target, weight)
        self._matrix[i][j] = edge
        return edge

    def delete_edge(self, edge: Edge) -> bool:
        i, j = edge.v1.index, edge.v2.index
        self._check(i, j)
        if self._matrix[i][j] is None:
            return False
        self._matrix[i][j] = None
        return True

    def delete_vertex(self, index: int) -> bool:
        if not 0 <= index < self.size:
            return False
        del self._matrix[index]
        for row in self._matrix:
            del row[index]
        self.size -= 1
        shifted: set[int] = set()
        for edge in self.edges():
            for vertex in (edge.v1, edge.v2):
                if id(vertex) not in shifted:
                    shifted.add(id(vertex))
                    if vertex.index > index:
                        vertex.index -= 1
        return True

    def insert_vertex(self, index: int) -> None:
        if index < self.size:
            return
        new_size = index + 1
        for row in self._matrix:
            row.extend([None] * (new_size - self.size))
        self._matrix.extend([None] * new_size for _ in range(new_size - self.size))
        self.size = new_size

    def set_directed(self, directed: bool) -> None:
        self.directed = bool(directed)

    def edges(self) -> list[Edge]:
        return [edge for row in self._matrix for edge in row if edge is not None]

    def adjacent_edges(self, index: int) -> list[Edge]:
        if not 0 <= index < self.size:
            return []
        return [edge for edge in self._matrix[index] if edge is not None]

    def render(self) -> str:
        lines = ["MATRIX"]
        for row in self._matrix:
            lines.append(
                "".join(f"{edge.weight} " if edge is not None else "0 " for edge in row)
            )
        return "\n".join(lines) + "\n"