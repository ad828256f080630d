# graphlabs

A small shortest-path toolkit with no dependencies outside the standard
library. It provides Dijkstra and Floyd–Warshall over adjacency matrices, some
matrix helpers, a singly linked list, and two interactive commands.

## Installation

```
pip install .
```

To install the test requirements too and run the tests:

```
pip install .[test]
pytest
```

## Modules

### `graphlabs.dijkstra`

- `dijkstra(adjacency, start)` takes a square matrix of integers and returns a
  `ShortestPaths`.
  - An entry counts as an edge only when it is greater than zero. Zero entries
    and negative entries are ignored.
  - Use `graphlabs.dijkstra.INF` (1 000 000 000) for "no edge".
  - It raises `ValueError` if the matrix is not square or if `start` is out of
    range.
- `ShortestPaths` has the fields `start`, `distances` and `predecessors`.
  Unreachable vertices have the distance `INF` and the predecessor `None`.
  - `has_path(vertex)` tells whether a vertex can be reached.
  - `path_to(vertex)` returns the list of vertices from `start` to `vertex`. It
    raises `ValueError` when no path exists.
- `describe_path(paths, end)` renders one path as text.
- `describe_all(paths)` renders the path to every vertex as text.
- `EXAMPLE_ADJACENCY` is the built-in 7-vertex example graph.

```python
from graphlabs.dijkstra import INF, describe_path, dijkstra

adjacency = [
    [0, 4, 10],
    [INF, 0, 1],
    [INF, INF, 0],
]
paths = dijkstra(adjacency, 0)
print(paths.distances)        # (0, 4, 5)
print(paths.path_to(2))       # [0, 1, 2]
print(describe_path(paths, 2), end="")
# Shortest path from vertex 0 to vertex 2 is 5.
# Path: 0 -> 1 -> 2
```

### `graphlabs.floyd_warshall`

In this module the value for "no edge" is `INF` = 99999. Negative weights are
allowed.

- `initial_predecessors(weights)` builds the starting predecessor matrix. The
  diagonal is `0` and every other cell holds the 1-based row number.
- `floyd(weights, predecessors)` returns a `FloydResult` and leaves its inputs
  unchanged. It raises `ValueError` if either matrix has the wrong shape.
- `FloydResult` has the following:
  - `distances` and `predecessors`: the final matrices.
  - `trace`: snapshots of `(d, p)` before the first step and after every step.
  - `negative_cycle`: a flag that is true when some diagonal distance is
    negative.
  - `format_trace()`: renders every `d(k)` / `p(k)` pair, followed by a warning
    if there is a negative cycle.
- `format_matrix(matrix, symbol, k)` renders a single matrix.
- `path(u, v, predecessors)` takes 0-based vertex numbers and returns the route
  as 1-based vertex numbers. It raises `NoPathError` (a subclass of
  `ValueError`) when there is no route.

```python
from graphlabs.floyd_warshall import floyd, initial_predecessors, path

weights = [[0, 3, 99999], [99999, 0, -1], [2, 99999, 0]]
result = floyd(weights, initial_predecessors(weights))
print(result.distances[0][2])             # 2
print(path(0, 2, result.predecessors))    # [1, 2, 3]
```

### `graphlabs.graph_utils`

This module uses `INF` = 2147483647.

- `parse_weight_matrix(tokens, n)` builds an `n`×`n` matrix from tokens given in
  row order. The value `-1` becomes `INF`. It raises `ValueError` if there are
  too few tokens.
- `read_weight_matrix(n, stream)` prints a prompt and then reads the matrix from
  a text stream, which is standard input by default.
- `initialize_path_matrix(n)` returns a matrix holding the row index off the
  diagonal and `-1` on the diagonal.
- `format_matrix(matrix)` renders values right-aligned, with `INF` for missing
  edges.
- `format_path(path)` renders a 0-based path as `Shortest path: v1 -> v2 ...`,
  or `No path exists.` when the path is empty.

### `graphlabs.linked_list`

`LinkedList` is a singly linked list. It can be built from any iterable.

- Adding: `push_back`, `push_front`.
- Removing: `pop_front`, which does nothing on an empty list, and `clear`.
- Inspecting: `is_empty` and `front`. `front` raises `IndexError` on an empty
  list.
- The list supports iteration and `len()`.

## Commands

### `graphlabs-dijkstra`

```
graphlabs-dijkstra
```

This command reads a mode and vertex numbers from standard input and works on
the built-in 7-vertex graph.

- Mode `1` prints the shortest path between two vertices.
- Mode `2` prints the shortest paths from one vertex to every vertex.

Vertices are numbered 0 to 6. The command exits with status 1 for a bad mode,
an out-of-range vertex, or input that is not a number.

### `graphlabs-floyd`

```
graphlabs-floyd
```

This command runs Floyd–Warshall on the built-in 6-vertex graph and prints the
`d(k)` and `p(k)` matrices after every step. It then reads two vertex numbers
(1–6) from standard input and prints the path between them and its length. If
the vertices are not connected, it says that there is no path.

## What it does not do

- The package has no graph-traversal routines such as depth-first or
  breadth-first search.
- It has no conversion or evaluation of infix, prefix or postfix expressions.
- It provides no stack or queue types beyond what `LinkedList` offers.
- The commands always work on their built-in example graphs. They cannot load
  a graph from a file.