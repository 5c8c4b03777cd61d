"""Graph on an adjacency matrix with breadth- and depth-first traversal."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO


class Graph:
    """A graph given by a square adjacency matrix.

    An entry of 1 at ``[i][j]`` is an edge from ``i`` to ``j``. Vertices are
    numbered from 1; column 0 is never followed during a traversal.
    """

    def __init__(self, matrix: Sequence[Sequence[int]]) -> None:
        rows = tuple(tuple(row) for row in matrix)
        if any(len(row) != len(rows) for row in rows):
            raise ValueError("adjacency matrix must be square")
        self._matrix = rows

    def __len__(self) -> int:
        return len(self._matrix)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._matrix):
            raise IndexError(f"vertex {vertex} out of range")

    def _neighbours(self, vertex: int) -> Iterator[int]:
        row = self._matrix[vertex]
        return (j for j, edge in enumerate(row[1:], start=1) if edge == 1)

    def bfs(self, start: int) -> list[int]:
        """Return the vertices in breadth-first order from ``start``."""
        self._check(start)
        visited = {start}
        order = [start]
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            for neighbour in self._neighbours(vertex):
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return the vertices in depth-first order from ``start``."""
        self._check(start)
        visited: set[int] = set()
        order: list[int] = []

        def visit(vertex: int) -> None:
            visited.add(vertex)
            order.append(vertex)
            for neighbour in self._neighbours(vertex):
                if neighbour not in visited:
                    visit(neighbour)

        visit(start)
        return order

    def has_edges(self, vertex: int) -> bool:
        """Whether ``vertex`` is in the graph and has at least one edge."""
        if not 0 <= vertex < len(self._matrix):
            return False
        return any(edge == 1 for edge in self._matrix[vertex])


def _ints(stream: Iterable[str]) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def _run(stream: TextIO) -> int:
    print("\n Graph operations")
    print("1. Graph BFS")
    print("2. Graph DFS")
    print("3. Search graph")
    print("4. Exit")
    tokens = _ints(stream)
    try:
        print("\nEnter number of vertices:")
        size = next(tokens)
        graph = Graph([[next(tokens) for _ in range(size)] for _ in range(size)])
        while True:
            print("\nEnter choice:")
            choice = next(tokens, None)
            if choice is None or choice == 4:
                print("Exiting")
                return 0
            if choice in (1, 2):
                print("Enter the start vertex")
                start = next(tokens)
                try:
                    order = graph.bfs(start) if choice == 1 else graph.dfs(start)
                except IndexError as error:
                    print(error)
                    continue
                print(" ".join(str(vertex) for vertex in order))
            elif choice == 3:
                print("Enter the value to search in the graph: ")
                vertex = next(tokens)
                found = "found" if graph.has_edges(vertex) else "not found"
                print(f"Vertex {vertex} is {found} in the graph.")
    except StopIteration:
        print("error: unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Read a matrix and menu choices and run the chosen traversals."""
    parser = argparse.ArgumentParser(
        prog="dsakit-graph",
        description="Traverse and search a graph given as an adjacency matrix.",
    )
    parser.add_argument("input", nargs="?", help="file to read (default: stdin)")
    args = parser.parse_args(argv)
    if args.input is None:
        return _run(sys.stdin)
    with open(args.input, encoding="utf-8") as stream:
        return _run(stream)


if __name__ == "__main__":
    sys.exit(main())