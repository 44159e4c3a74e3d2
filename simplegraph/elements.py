"""Vertices and edges shared by every graph representation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class Vertex:
    """A graph vertex: a name, a data value and its position in the graph."""

    name: str | None = None
    data: int = 0
    index: int = 0


class Edge:
    """A directed connection between two vertices with a weight and a data value.

    When no data value is given it defaults to ``v1.index * 10 + v2.index``.
    """

    __slots__ = ("v1", "v2", "weight", "data")

    def __init__(self, v1: Vertex, v2: Vertex, weight: int = 1, data: int | None = None):
        self.v1 = v1
        self.v2 = v2
        self.weight = weight
        self.data = v1.index * 10 + v2.index if data is None else data

    def __repr__(self) -> str:
        return (
            f"Edge({self.v1.index} -> {self.v2.index}, "
            f"weight={self.weight!r}, data={self.data!r})"
        )