"""A simple graph that can switch between list and matrix storage."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator

from simplegraph.elements import Edge, Vertex
from simplegraph.forms import GraphForm
from simplegraph.list_form import ListForm
from simplegraph.matrix_form import MatrixForm

_EdgeSpec = tuple[int, int, int, int]


class SimpleGraph:
    """A graph without parallel edges stored as adjacency lists or a matrix.

    ``dense`` selects the matrix form. With ``edge_count`` above zero the
    graph is filled with that many random edges, capped at the most the
    graph can hold. Fresh vertices are named after their index and carry
    ``index + 10`` as data.
    """

    def __init__(
        self,
        vertex_count: int = 0,
        edge_count: int = 0,
        directed: bool = False,
        dense: bool = False,
        rng: random.Random | None = None,
    ):
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self._directed = bool(directed)
        self._dense = bool(dense)
        self._edge_count = 0
        form_class = MatrixForm if self._dense else ListForm
        self._form: GraphForm = form_class(vertex_count, self._directed)
        for vertex in self._form.vertices:
            vertex.data = vertex.index + 10
        if edge_count > 0:
            self._fill_random(edge_count, rng if rng is not None else random.Random())

    def _fill_random(self, wanted: int, rng: random.Random) -> None:
        count = self.vertex_count
        most = count * (count - 1)
        if not self._directed:
            most //= 2
        target = min(wanted, most)
        vertices = self._form.vertices
        while self._edge_count < target:
            a = rng.randrange(count)
            b = rng.randrange(count)
            if a == b or self._form.has_edge(a, b):
                continue
            if self._form.insert_edge(vertices[a], vertices[b]) is not None:
                self._edge_count += 1

    @property
    def vertex_count(self) -> int:
        return len(self._form.vertices)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def dense(self) -> bool:
        """True when the graph is stored as a matrix."""
        return self._dense

    def _edge_specs(self) -> list[_EdgeSpec]:
        return [(e.v1.index, e.v2.index, e.weight, e.data) for e in self._form.edges()]

    def _rebuild(
        self, form_class: type[GraphForm], vertices: list[Vertex], specs: Iterable[_EdgeSpec]
    ) -> tuple[GraphForm, int]:
        form = form_class(len(vertices), True)
        form.vertices = list(vertices)
        inserted = 0
        for i, j, weight, data in specs:
            edge = form.insert_edge(form.vertices[i], form.vertices[j], weight)
            if edge is not None:
                edge.data = data
                inserted += 1
        form.set_directed(self._directed)
        return form, inserted

    def copy(self) -> SimpleGraph:
        """An independent graph with copies of every vertex and edge."""
        clone = SimpleGraph(0, 0, self._directed, self._dense)
        vertices = [Vertex(v.name, v.data, v.index) for v in self._form.vertices]
        form_class = MatrixForm if self._dense else ListForm
        clone._form, _ = clone._rebuild(form_class, vertices, self._edge_specs())
        clone._edge_count = self._edge_count
        return clone

    def saturation(self) -> int:
        """The saturation figure: edges over possible edges when directed,
        otherwise the number of possible edges."""
        count = self.vertex_count
        if self._directed:
            return self._edge_count // (count * (count - 1))
        return count * (count - 1) // 2

    def _switch(self, form_class: type[GraphForm]) -> None:
        self._form, self._edge_count = self._rebuild(
            form_class, self._form.vertices, self._edge_specs()
        )

    def to_matrix(self) -> None:
        """Store the graph as an adjacency matrix."""
        if self._dense:
            return
        self._switch(MatrixForm)
        self._dense = True

    def to_list(self) -> None:
        """Store the graph as adjacency lists."""
        if not self._dense:
            return
        self._switch(ListForm)
        self._dense = False

    def insert_vertex(self, name: str | None = None) -> Vertex:
        """Append a new vertex and return it."""
        index = self.vertex_count
        vertex = Vertex(name=name, index=index)
        self._form.vertices.append(vertex)
        self._form.insert_vertex(index)
        return vertex

    def delete_vertex(self, vertex: Vertex | int) -> bool:
        """Remove a vertex with its edges; later vertices move down by one."""
        index = vertex.index if isinstance(vertex, Vertex) else int(vertex)
        vertices = self._form.vertices
        if not 0 <= index < len(vertices):
            return False
        specs: list[_EdgeSpec] = []
        deleted = 0
        for edge in self._form.edges():
            a, b = edge.v1.index, edge.v2.index
            if index in (a, b):
                if self._directed or a == index:
                    deleted += 1
                continue
            specs.append((a - (a > index), b - (b > index), edge.weight, edge.data))
        survivors = [v for position, v in enumerate(vertices) if position != index]
        for position, survivor in enumerate(survivors):
            survivor.index = position
        form_class = MatrixForm if self._dense else ListForm
        self._form, _ = self._rebuild(form_class, survivors, specs)
        self._edge_count -= deleted
        return True

    @staticmethod
    def _as_vertex(vertex: Vertex | int) -> Vertex:
        return vertex if isinstance(vertex, Vertex) else Vertex(index=int(vertex))

    def insert_edge(self, v1: Vertex | int, v2: Vertex | int, weight: int = 1) -> Edge | None:
        """Add an edge between two vertices or indices; None if it cannot be added."""
        edge = self._form.insert_edge(self._as_vertex(v1), self._as_vertex(v2), weight)
        if edge is not None:
            self._edge_count += 1
        return edge

    def delete_edge(self, edge: Edge) -> bool:
        """Remove an edge; report whether it was stored."""
        deleted = self._form.delete_edge(edge)
        if deleted:
            self._edge_count -= 1
        return deleted

    def get_edge(self, v1: Vertex | int, v2: Vertex | int) -> Edge | None:
        return self._form.get_edge(v1, v2)

    def render(self) -> str:
        return self._form.render()

    def vertices(self) -> Iterator[Vertex]:
        return iter(list(self._form.vertices))

    def edges(self) -> Iterator[Edge]:
        return iter(self._form.edges())

    def adjacent_edges(self, index: int) -> Iterator[Edge]:
        return iter(self._form.adjacent_edges(index))