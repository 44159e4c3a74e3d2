# simplegraph

A small graph library whose storage can be switched between adjacency lists
and an adjacency matrix at any time, together with two algorithms that work
on it:

- a search for every simple cycle of a given length through a given vertex
  (`simplegraph.cycles`);
- all-pairs shortest paths computed with Bellman-Ford, with detection of
  negative cycles (`simplegraph.paths`).

An interactive menu-driven shell (`simplegraph.cli`) is included for
exploring graphs by hand.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from simplegraph.graph import SimpleGraph
from simplegraph.cycles import find_cycles
from simplegraph.paths import BellmanFord, NegativeCycleError

graph = SimpleGraph(4, directed=True, dense=False)
vertices = list(graph.vertices())
graph.insert_edge(vertices[0], vertices[1], 2)
graph.insert_edge(vertices[1], vertices[2], 3)
graph.insert_edge(vertices[2], vertices[0], 1)

print(graph.render())          # adjacency-list view, headed "LIST"
graph.to_matrix()
print(graph.render())          # adjacency-matrix view, headed "MATRIX"

print(find_cycles(graph, 3, 0))  # [[0, 1, 2, 0]]

try:
    paths = BellmanFord(graph)
    print(paths.distance(0, 2), paths.path(0, 2))  # 5 [0, 1, 2]
except NegativeCycleError:
    print("the graph has a negative cycle")
```

### `SimpleGraph`

`SimpleGraph(vertex_count, edge_count, directed, dense, rng)` builds a graph
of `vertex_count` vertices named `"0"`, `"1"`, … whose data is
`index + 10`. `dense=True` stores it as a matrix (`MatrixForm`), otherwise
as adjacency lists (`ListForm`). With `edge_count` above zero it inserts
that many distinct random edges between distinct vertices, capped at the
most the graph can hold; pass a `random.Random` as `rng` for repeatable
results.

It offers `vertex_count`, `edge_count`, `directed` and `dense`,
`insert_vertex`, `delete_vertex`, `insert_edge`, `delete_edge`, `get_edge`,
`to_matrix`, `to_list`, `copy`, `saturation`, `render`, and the iterators
`vertices()`, `edges()` and `adjacent_edges(index)`. Vertices and edges may
be given as `Vertex` objects or as indices. In an undirected graph an edge
is stored in both directions. Deleting a vertex moves every later vertex
down by one index.

### Cycles

`CycleFinder(graph, length, start)` (or `find_cycles`) returns each cycle
that visits `length` distinct vertices starting at `start`, as a list of
indices that begins and ends with `start`. A start vertex outside the graph
raises `IndexError`.

### Shortest paths

`BellmanFord(graph)` computes distances and paths for every ordered pair of
vertices. Unreachable pairs have distance `INFINITY` (`math.inf`). Query with
`distance`, `path`, `all_paths` (a table of `PathInfo`) or `result`; bad
indices raise `IndexError`, and when a negative cycle was found
(`contains_negative_cycle()`) every query raises `NegativeCycleError`.

## The interactive shell

```
simplegraph
```

The shell reads numbered menu choices from standard input. From the main
menu you can create a graph (empty, with vertices only, or randomly filled),
add and remove vertices and edges, query vertex and edge counts, direction,
representation and saturation, switch between list and matrix storage,
print the graph, step through vertex and edge iterators, search for cycles
and print all shortest paths. Entering `13`, or the end of input, leaves the
shell. `GraphShell(stdin, stdout)` runs the same session on any text streams.

## What it does not do

Graphs live only in memory: there is no way to save a graph to a file or
load one, in the library or in the shell.