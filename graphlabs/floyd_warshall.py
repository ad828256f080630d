"""Floyd-Warshall all-pairs shortest paths with a predecessor matrix."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

INF = 99999

Matrix = list[list[int]]


class NoPathError(ValueError):
    """Raised when the predecessor matrix holds no path between two vertices."""


@dataclass(frozen=True)
class FloydResult:
    """Final matrices plus a snapshot of both after every step."""

    distances: Matrix
    predecessors: Matrix
    trace: tuple[tuple[Matrix, Matrix], ...]
    negative_cycle: bool

    def format_trace(self) -> str:
        """Render every step's matrices, then a negative-cycle warning if any."""
        parts = [
            format_matrix(d, "d", k) + format_matrix(p, "p", k)
            for k, (d, p) in enumerate(self.trace)
        ]
        if self.negative_cycle:
            parts.append("Graph contains a negative cycle!\n")
        return "".join(parts)


def _copy(matrix: Sequence[Sequence[int]]) -> Matrix:
    return [list(row) for row in matrix]


def initial_predecessors(weights: Sequence[Sequence[int]]) -> Matrix:
    """Predecessor matrix: 0 on the diagonal, else the 1-based row number."""
    size = len(weights)
    return [[0 if i == j else i + 1 for j in range(size)] for i in range(size)]


def floyd(weights: Sequence[Sequence[int]], predecessors: Sequence[Sequence[int]]) -> FloydResult:
    """Run Floyd-Warshall; inputs are left unchanged."""
    size = len(weights)
    if any(len(row) != size for row in weights):
        raise ValueError("weight matrix must be square")
    if len(predecessors) != size or any(len(row) != size for row in predecessors):
        raise ValueError("predecessor matrix must match the weight matrix")

    d = _copy(weights)
    p = _copy(predecessors)
    trace = [(_copy(d), _copy(p))]
    for k in range(size):
        row_k = d[k]
        for i, row_i in enumerate(d):
            through = row_i[k]
            if through >= INF:
                continue
            for j, onward in enumerate(row_k):
                if onward < INF and through + onward < row_i[j]:
                    row_i[j] = through + onward
                    p[i][j] = p[k][j]
        trace.append((_copy(d), _copy(p)))

    negative = any(d[i][i] < 0 for i in range(size))
    return FloydResult(d, p, tuple(trace), negative)


def format_matrix(matrix: Sequence[Sequence[int]], symbol: str, k: int) -> str:
    """Render a matrix headed by symbol(k), rows separated by commas."""
    lines = [f"{symbol}({k})\n\n"]
    last = len(matrix) - 1
    for index, row in enumerate(matrix):
        cells = " ".join(" INF" if value >= INF else str(value) for value in row)
        lines.append(f"{cells}{',' if index < last else ''}\n\n")
    return "".join(lines)


def path(u: int, v: int, predecessors: Sequence[Sequence[int]]) -> list[int]:
    """Return the 1-based vertices on the path from u to v (0-based inputs)."""
    if predecessors[u][v] == 0:
        raise NoPathError("No path exists.")
    route = [v]
    limit = len(predecessors)
    while v != u:
        v = predecessors[u][v] - 1
        if v < 0 or len(route) > limit:
            raise NoPathError("No path exists.")
        route.append(v)
    route.reverse()
    return [vertex + 1 for vertex in route]