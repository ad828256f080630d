"""Dijkstra's single-source shortest paths on an adjacency matrix."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

INF = 1_000_000_000

EXAMPLE_ADJACENCY: tuple[tuple[int, ...], ...] = (
    (0, 1, 5, INF, INF, INF, INF),
    (INF, 0, 3, INF, 2, 8, 20),
    (INF, INF, 0, INF, INF, 4, INF),
    (INF, INF, 9, 0, INF, INF, INF),
    (INF, INF, INF, INF, INF, INF, INF),
    (INF, INF, INF, INF, INF, 0, 7),
    (INF, INF, INF, INF, INF, INF, 0),
)


@dataclass(frozen=True)
class ShortestPaths:
    """Distances and predecessors found from one start vertex."""

    start: int
    distances: tuple[int, ...]
    predecessors: tuple[Optional[int], ...]

    def has_path(self, vertex: int) -> bool:
        """Return True if the vertex is reachable from the start."""
        return self.distances[vertex] < INF

    def path_to(self, vertex: int) -> list[int]:
        """Return the vertices from the start to the given vertex."""
        if not self.has_path(vertex):
            raise ValueError(f"no path from vertex {self.start} to vertex {vertex}")
        route = []
        current: Optional[int] = vertex
        while current is not None:
            route.append(current)
            current = self.predecessors[current]
        route.reverse()
        return route


def dijkstra(adjacency: Sequence[Sequence[int]], start: int) -> ShortestPaths:
    """Compute shortest paths from start; positive entries below INF are edges."""
    size = len(adjacency)
    if any(len(row) != size for row in adjacency):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= start < size:
        raise ValueError(f"start vertex {start} out of range 0..{size - 1}")

    distances = [INF] * size
    predecessors: list[Optional[int]] = [None] * size
    distances[start] = 0
    pending = list(range(size))

    while pending:
        u = min(pending, key=distances.__getitem__)
        if distances[u] >= INF:
            break
        pending.remove(u)
        for v in pending:
            weight = adjacency[u][v]
            if weight > 0 and distances[u] + weight < distances[v]:
                distances[v] = distances[u] + weight
                predecessors[v] = u

    return ShortestPaths(start, tuple(distances), tuple(predecessors))


def _arrow(route: list[int]) -> str:
    return " -> ".join(str(vertex) for vertex in route)


def describe_path(paths: ShortestPaths, end: int) -> str:
    """Describe the shortest path from the start to one vertex."""
    if not paths.has_path(end):
        return f"No path from vertex {paths.start} to vertex {end}.\n"
    return (
        f"Shortest path from vertex {paths.start} to vertex {end} is "
        f"{paths.distances[end]}.\n"
        f"Path: {_arrow(paths.path_to(end))}\n"
    )


def describe_all(paths: ShortestPaths) -> str:
    """Describe the shortest paths from the start to every vertex."""
    lines = [f"Shortest paths from vertex {paths.start}:\n"]
    for vertex, distance in enumerate(paths.distances):
        if paths.has_path(vertex):
            lines.append(
                f"To vertex {vertex}: {distance} | Path: "
                f"{_arrow(paths.path_to(vertex))}\n"
            )
        else:
            lines.append(f"To vertex {vertex}: No path.\n")
    return "".join(lines)