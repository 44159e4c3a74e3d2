"""Graph storage as adjacency lists."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field

from simplegraph.elements import Edge, Vertex
from simplegraph.forms import GraphForm


@dataclass
class _Node:
    index: int
    edges: list[Edge] = field(default_factory=list)


class ListForm(GraphForm):
    """Adjacency lists kept in vertex-index order; new edges go to the front."""

    def __init__(self, size: int, directed: bool):
        super().__init__(size, directed)
        self._nodes: list[_Node] = [_Node(i) for i in range(size)]

    def _node(self, index: int) -> _Node | None:
        return next((node for node in self._nodes if node.index == index), None)

    def has_edge(self, i: int, j: int) -> bool:
        return any(
            edge.v1.index == i and edge.v2.index == j
            for node in self._nodes
            for edge in node.edges
        )

    def get_edge(self, v1: Vertex | int, v2: Vertex | int) -> Edge | None:
        node = self._node(self._index(v1))
        if node is None:
            return None
        target = self._index(v2)
        return next((edge for edge in node.edges if edge.v2.index == target), None)

    def _insert(self, v1: Vertex | None, v2: Vertex | None, weight: int) -> Edge | None:
        if v1 is None or v2 is None:
            return None
        count = len(self.vertices)
        if not (0 <= v1.index < count and 0 <= v2.index < count):
            return None
        node = self._node(v1.index)
        if node is None:
            return None
        if any(edge.v2.index == v2.index for edge in node.edges):
            return None
        edge = Edge(self.vertices[v1.index], self.vertices[v2.index], weight)
        node.edges.insert(0, edge)
        return edge

    def insert_edge(self, v1: Vertex, v2: Vertex, weight: int = 1) -> Edge | None:
        edge = self._insert(v1, v2, weight)
        if edge is not None and not self.directed:
            self._insert(v2, v1, weight)
        return edge

    def delete_edge(self, edge: Edge) -> bool:
        for node in self._nodes:
            for position, stored in enumerate(node.edges):
                if stored.v1 is edge.v1 and stored.v2 is edge.v2:
                    del node.edges[position]
                    return True
        return False

    def delete_vertex(self, index: int) -> bool:
        for position, node in enumerate(self._nodes):
            if node.index == index:
                del self._nodes[position]
                self.size -= 1
                return True
        return False

    def insert_vertex(self, index: int) -> None:
        if index < 0:
            return
        keys = [node.index for node in self._nodes]
        position = bisect_left(keys, index)
        if position < len(keys) and keys[position] == index:
            return
        self._nodes.insert(position, _Node(index))
        self.size = max(self.size, index + 1)

    def set_directed(self, directed: bool) -> None:
        self.directed = bool(directed)

    def edges(self) -> list[Edge]:
        return [
            edge
            for node in self._nodes
            for edge in node.edges
            if edge.v1.index < self.size and edge.v2.index < self.size
        ]

    def adjacent_edges(self, index: int) -> list[Edge]:
        node = self._node(index)
        return list(node.edges) if node is not None else []

    def render(self) -> str:
        lines = ["LIST"]
        for node in self._nodes:
            parts = [f"*{node.index} [{self.vertices[node.index].name}]"]
            parts.extend(
                f"->{edge.v2.index},{edge.weight},{edge.data}" for edge in node.edges
            )
            lines.append("".join(parts))
        return "\n".join(lines) + "\n"