# classicalgo

Readable Python versions of the algorithms taught in most introductory
algorithms courses:

- **Sorting** (`classicalgo.sorting`): `bubble_sort`, `selection_sort`,
  `insertion_sort`, `merge_sort`, `quick_sort` and `heap_sort`. Each takes
  any iterable and returns a new sorted list. The input is not changed.
- **Searching** (`classicalgo.searching`): `linear_search`, `ordered_search`
  and `binary_search`. `ordered_search` is a linear scan of an ascending
  sequence that stops once an element is larger than the target. Each
  function returns the index of the target, or `None` when the target is
  absent.
- **Geometry** (`classicalgo.geometry`): `Point`, a mutable dataclass with
  `x` and `y` fields and a `distance(other)` method that returns the
  Euclidean distance.
- **String matching** (`classicalgo.kmp`):
  - `prefix_function(pattern)` builds the prefix table.
  - `kmp_search(text, pattern)` returns the start index of every occurrence,
    overlapping ones included. It raises `ValueError` for an empty pattern.
  - `describe_matches(indices)` turns a list of indices into a sentence
    (in Portuguese).
- **Graphs** (`classicalgo.graph`):
  - `Graph` is a directed graph on the vertices `0 .. n-1`. Its vertices are
    `Vertex` dataclasses that carry a `Color`, `d`, `parent`, `f` and
    `neighbours`.
  - `Graph.add_edge(origin, dest)` adds an edge. It raises `ValueError` for
    a vertex that is not in the graph.
  - `Graph.bfs(start)` runs a breadth-first search and returns the vertices
    in the order they were visited. It sets each vertex's distance `d` and
    `parent`. A vertex that cannot be reached keeps a distance of `-1`.
  - `Graph.dfs()` runs a depth-first search over the whole graph and returns
    the vertices in the order they were discovered. It sets the discovery
    time `d`, the finishing time `f` and `parent` of each vertex.
  - `format_adjacency()`, `format_distances()` and `format_times()` render
    the graph's state as text.
  - `parse_edges(text)` builds a `Graph` from an edge list.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

```python
from classicalgo.sorting import merge_sort
from classicalgo.searching import binary_search
from classicalgo.geometry import Point
from classicalgo.kmp import kmp_search, describe_matches

data = merge_sort([5, 3, 8, 1])        # [1, 3, 5, 8]
binary_search(data, 8)                  # 3
binary_search(data, 4)                  # None

Point(10, 21).distance(Point(7, 25))    # 5.0

indices = kmp_search("abababa", "aba")  # [0, 2, 4]
print(describe_matches(indices))
```

```python
from classicalgo.graph import parse_edges

graph = parse_edges("4\n0 1\n0 2\n1 3\n")
graph.bfs(0)       # [0, 1, 2, 3]
print(graph.format_distances())
graph.dfs()        # [0, 1, 3, 2]
print(graph.format_times())
```

The edge text gives the number of vertices on its first non-blank line. Each
following line holds one edge as `origin destination`, separated by
whitespace. Malformed lines raise `ValueError`.

## Commands

Installing the package provides four commands:

```
classicalgo-search [TARGET] [--method {binary,linear,ordered}] [--values N ...]
classicalgo-distance [x1 y1 x2 y2]
classicalgo-kmp [FILE] [PATTERN]
classicalgo-graph [FILE]
```

- `classicalgo-search` searches `--values` for `TARGET` and prints the
  position it found. By default it looks for `4` in `1 .. 10` with binary
  search. It exits with status 1 when the target is absent.
- `classicalgo-distance` prints the distance between two points. With no
  arguments it uses `(10, 21)` and `(7, 25)`.
- `classicalgo-kmp` reads a UTF-8 text file and reports where a pattern
  occurs. It asks for the file name and the pattern when they are not given
  as arguments.
- `classicalgo-graph` reads an edge file, `arestas.txt` by default. It prints
  the adjacency list, each step of a BFS from vertex 0 with the queue
  contents, the distances, the DFS discovery order and the DFS times.

## Limitations

All sorts and searches work in memory on Python sequences. There is no
command for sorting. The graph tools handle directed, unweighted graphs only.