"""Undirected graphs with breadth-first and depth-first traversal, plus a small command."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterator, Sequence
from typing import TextIO


class Graph:
    """An undirected graph on the vertices ``0 .. vertex_count - 1``.

    Neighbours are kept in the order their edges were added, which fixes the
    order in which the traversals visit them.
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex count must not be negative: {vertex_count}")
        self.vertex_count = vertex_count
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise ValueError(
                f"vertex {vertex} out of range for a graph of {self.vertex_count} vertices"
            )

    def neighbours(self, vertex: int) -> list[int]:
        """Return the neighbours of ``vertex`` in insertion order."""
        self._check(vertex)
        return list(self._adjacency[vertex])

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append(v)
        self._adjacency[v].append(u)

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        self._check(start)
        visited = {start}
        queue = deque([start])
        order: list[int] = []
        while queue:
            u = queue.popleft()
            order.append(u)
            for v in self._adjacency[u]:
                if v not in visited:
                    visited.add(v)
                    queue.append(v)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in depth-first order."""
        self._check(start)
        visited = {start}
        order = [start]
        stack: list[Iterator[int]] = [iter(self._adjacency[start])]
        while stack:
            for v in stack[-1]:
                if v not in visited:
                    visited.add(v)
                    order.append(v)
                    stack.append(iter(self._adjacency[v]))
                    break
            else:
                stack.pop()
        return order


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"not an integer: {token!r}") from None


def _format_order(order: Sequence[int]) -> str:
    return "".join(f"{vertex} " for vertex in order)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a graph from standard input and print its traversals from vertex 0."""
    parser = argparse.ArgumentParser(
        prog="pardemos-graph",
        description="Traverse an undirected graph read from standard input.",
    )
    parser.parse_args(argv)

    out = sys.stdout
    tokens = _tokens(sys.stdin)
    try:
        out.write("Enter the number of vertices: ")
        out.flush()
        graph = Graph(_read_int(tokens))

        out.write("Enter the number of edges: ")
        out.flush()
        edge_count = _read_int(tokens)
        if edge_count < 0:
            raise ValueError(f"number of edges must not be negative: {edge_count}")

        out.write("Enter the edges (in format 'source destination'): \n")
        out.flush()
        for _ in range(edge_count):
            u = _read_int(tokens)
            v = _read_int(tokens)
            graph.add_edge(u, v)

        bfs_order = graph.bfs(0)
        dfs_order = graph.dfs(0)
    except ValueError as error:
        print(f"\nerror: {error}", file=sys.stderr)
        return 1

    out.write(f"BFS traversal starting from node 0: {_format_order(bfs_order)}\n")
    out.write(f"DFS traversal starting from node 0: {_format_order(dfs_order)}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())