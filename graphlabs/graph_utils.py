"""Reading and printing helpers for weight and path matrices."""

from __future__ import annotations

import sys
from itertools import islice
from typing import Iterable, Sequence, TextIO, Union

INF = 2_147_483_647


def parse_weight_matrix(tokens: Iterable[Union[str, int]], n: int) -> list[list[int]]:
    """Build an n-by-n matrix from tokens in row order; -1 means INF."""
    values = [int(token) for token in islice(iter(tokens), n * n)]
    if len(values) < n * n:
        raise ValueError(f"expected {n * n} values, got {len(values)}")
    values = [INF if value == -1 else value for value in values]
    return [values[row * n:(row + 1) * n] for row in range(n)]


def read_weight_matrix(n: int, stream: TextIO = sys.stdin) -> list[list[int]]:
    """Prompt for and read an n-by-n weight matrix from a text stream."""
    print("Enter the weight matrix (use -1 for INF):")
    return parse_weight_matrix(stream.read().split(), n)


def initialize_path_matrix(n: int) -> list[list[int]]:
    """Path matrix holding the row index off the diagonal and -1 on it."""
    return [[i if i != j else -1 for j in range(n)] for i in range(n)]


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render a matrix with right-aligned values and INF for missing edges."""
    return "".join(
        "".join("INF " if value == INF else f"{value:4d} " for value in row) + "\n"
        for row in matrix
    )


def format_path(path: Sequence[int]) -> str:
    """Render a 0-based vertex path as v1 -> v2 ..."""
    if not path:
        return "No path exists.\n"
    return "Shortest path: " + " -> ".join(f"v{vertex + 1}" for vertex in path) + "\n"