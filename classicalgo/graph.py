"""Directed graphs with breadth-first and depth-first traversal."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

__all__ = ["Color", "Vertex", "Graph", "parse_edges", "main"]


class Color(Enum):
    """Traversal state of a vertex."""

    WHITE = "w"
    GREY = "g"
    BLACK = "b"


@dataclass
class Vertex:
    """A vertex with its traversal attributes and outgoing neighbours.

    ``d`` is the BFS distance (-1 when unreachable) or the DFS discovery time;
    ``f`` is the DFS finishing time.
    """

    value: int
    color: Color = Color.WHITE
    d: int = 0
    parent: int = -1
    f: int = 0
    neighbours: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class _BfsStep:
    queue: tuple[int, ...]
    visited: int
    emptied: bool


class Graph:
    """A directed graph on vertices ``0 .. vertex_count - 1``."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self.vertices = [Vertex(i) for i in range(vertex_count)]

    def __len__(self) -> int:
        return len(self.vertices)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self.vertices):
            raise ValueError(f"vertex {index} is not in the graph")

    def add_edge(self, origin: int, dest: int) -> None:
        """Add a directed edge from ``origin`` to ``dest``."""
        self._check(origin)
        self._check(dest)
        self.vertices[origin].neighbours.append(dest)

    def _bfs_steps(self, start: int) -> Iterator[_BfsStep]:
        self._check(start)
        for vertex in self.vertices:
            vertex.color = Color.WHITE
            vertex.d = -1
            vertex.parent = -1
        source = self.vertices[start]
        source.color = Color.GREY
        source.d = 0
        queue = deque([start])
        while queue:
            snapshot = tuple(queue)
            current = self.vertices[queue.popleft()]
            yield _BfsStep(snapshot, current.value, not queue)
            for index in current.neighbours:
                neighbour = self.vertices[index]
                if neighbour.color is Color.WHITE:
                    neighbour.color = Color.GREY
                    neighbour.d = current.d + 1
                    neighbour.parent = current.value
                    queue.append(neighbour.value)
            current.color = Color.BLACK

    def bfs(self, start: int) -> list[int]:
        """Breadth-first search from ``start``; return vertices in visiting order."""
        return [step.visited for step in self._bfs_steps(start)]

    def _dfs_steps(self) -> Iterator[int]:
        for vertex in self.vertices:
            vertex.color = Color.WHITE
            vertex.d = 0
            vertex.parent = -1
            vertex.f = 0
        time = 0
        for root in self.vertices:
            if root.color is not Color.WHITE:
                continue
            time += 1
            root.d = time
            root.color = Color.GREY
            yield root.value
            stack = [(root, iter(root.neighbours))]
            while stack:
                current, pending = stack[-1]
                for index in pending:
                    neighbour = self.vertices[index]
                    if neighbour.color is Color.WHITE:
                        neighbour.parent = current.value
                        time += 1
                        neighbour.d = time
                        neighbour.color = Color.GREY
                        yield neighbour.value
                        stack.append((neighbour, iter(neighbour.neighbours)))
                        break
                else:
                    current.color = Color.BLACK
                    time += 1
                    current.f = time
                    stack.pop()

    def dfs(self) -> list[int]:
        """Depth-first search over the whole graph; return vertices in discovery order."""
        return list(self._dfs_steps())

    def format_adjacency(self) -> str:
        """One line per vertex listing its neighbours."""
        lines = []
        for vertex in self.vertices:
            targets = " ->".join(f" {index}" for index in vertex.neighbours)
            lines.append(f"[ vertice: {vertex.value} ] -> {targets}\n")
        return "".join(lines)

    def format_distances(self) -> str:
        """Colour, parent and distance of every vertex after a BFS."""
        return "\n\n" + "".join(
            f"[ vertice: {v.value} | cor: {v.color.value} | π: {v.parent} "
            f"| distancia: {v.d}]\n\n"
            for v in self.vertices
        )

    def format_times(self) -> str:
        """Colour, parent, discovery and finishing times of every vertex after a DFS."""
        return "\n\n" + "".join(
            f"[ vertice: {v.value} | cor:{v.color.value} | π: {v.parent} "
            f"| d: {v.d} | f: {v.f}]\n\n"
            for v in self.vertices
        )


def parse_edges(text: str) -> Graph:
    """Build a graph from a vertex count line followed by ``origin dest`` lines."""
    rows = [line.split() for line in text.splitlines() if line.strip()]
    if not rows:
        raise ValueError("missing vertex count")
    try:
        graph = Graph(int(rows[0][0]))
    except ValueError as error:
        raise ValueError(f"invalid vertex count: {rows[0][0]!r}") from error
    for row in rows[1:]:
        if len(row) < 2:
            raise ValueError(f"invalid edge line: {' '.join(row)!r}")
        try:
            origin, dest = int(row[0]), int(row[1])
        except ValueError as error:
            raise ValueError(f"invalid edge line: {' '.join(row)!r}") from error
        graph.add_edge(origin, dest)
    return graph


def main(argv: list[str] | None = None) -> int:
    """Read an edge file, then show the graph, a BFS from 0 and a DFS."""
    parser = argparse.ArgumentParser(description="BFS and DFS over a graph.")
    parser.add_argument("file", nargs="?", default="arestas.txt", help="edge file")
    args = parser.parse_args(argv)

    try:
        graph = parse_edges(Path(args.file).read_text(encoding="utf-8"))
    except (OSError, ValueError) as error:
        print(f"error: {error}")
        return 1

    print("--------------------------- Grafo e suas adjacências ---------------------------")
    print(graph.format_adjacency(), end="")
    print("--------------------------------- Função de BFS --------------------------------")
    if len(graph):
        for step in graph._bfs_steps(0):
            print("\nA fila contem...")
            print("".join(f"{index} " for index in step.queue))
            if step.emptied:
                print("Resetando fila...")
            print(f"Visitado {step.visited}")
    print("------------------------------- Distâncias Pós BFS ------------------------------")
    print(graph.format_distances(), end="")
    print("--------------------------------- Função de DFS --------------------------------")
    for visited in graph._dfs_steps():
        print(f"Visitando Vertice: {visited}")
    print("--------------------------------- Tempos de DFS --------------------------------")
    print(graph.format_times(), end="")
    return 0