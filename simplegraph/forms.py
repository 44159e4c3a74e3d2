"""The interface every graph storage form implements."""

from __future__ import annotations

from abc import ABC, abstractmethod

from simplegraph.elements import Edge, Vertex


class GraphForm(ABC):
    """Storage of a graph's edges, as adjacency lists or as a matrix.

    ``vertices`` holds the vertex objects by position; a fresh form holds
    ``size`` vertices named after their index.
    """

    def __init__(self, size: int, directed: bool):
        self.size = size
        self.directed = bool(directed)
        self.vertices: list[Vertex] = [Vertex(name=str(i), index=i) for i in range(size)]

    @staticmethod
    def _index(vertex: Vertex | int) -> int:
        return vertex.index if isinstance(vertex, Vertex) else int(vertex)

    @abstractmethod
    def has_edge(self, i: int, j: int) -> bool:
        """Whether an edge leads from vertex ``i`` to vertex ``j``."""

    @abstractmethod
    def get_edge(self, v1: Vertex | int, v2: Vertex | int) -> Edge | None:
        """The edge from ``v1`` to ``v2``, given as vertices or indices, or None."""

    @abstractmethod
    def insert_edge(self, v1: Vertex, v2: Vertex, weight: int = 1) -> Edge | None:
        """Add an edge and return it, or None when it cannot be added."""

    @abstractmethod
    def delete_edge(self, edge: Edge) -> bool:
        """Remove the stored edge with the same endpoints; report success."""

    @abstractmethod
    def delete_vertex(self, index: int) -> bool:
        """Remove the vertex at ``index`` and its edges; report success."""

    @abstractmethod
    def insert_vertex(self, index: int) -> None:
        """Make room for a vertex at ``index``."""

    @abstractmethod
    def set_directed(self, directed: bool) -> None:
        """Set whether new edges are one-way."""

    @abstractmethod
    def edges(self) -> list[Edge]:
        """All stored edges."""

    @abstractmethod
    def adjacent_edges(self, index: int) -> list[Edge]:
        """The edges leaving the vertex at ``index``."""

    @abstractmethod
    def render(self) -> str:
        """A printable picture of the stored graph."""