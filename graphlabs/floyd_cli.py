"""Interactive command running Floyd-Warshall on the example graph."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from graphlabs.floyd_warshall import INF, NoPathError, floyd, initial_predecessors, path

EXAMPLE_WEIGHTS: tuple[tuple[int, ...], ...] = (
    (0, 1, 6, INF, INF, INF),
    (INF, 0, 4, INF, -2, INF),
    (INF, INF, 0, INF, 5, 3),
    (2, INF, INF, 0, -5, INF),
    (INF, INF, INF, 8, 0, 4),
    (INF, INF, INF, INF, INF, 0),
)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print every step of the algorithm, then a path between two vertices."""
    parser = argparse.ArgumentParser(
        prog="floyd", description="All-pairs shortest paths on the example graph."
    )
    parser.parse_args(argv)

    size = len(EXAMPLE_WEIGHTS)
    result = floyd(EXAMPLE_WEIGHTS, initial_predecessors(EXAMPLE_WEIGHTS))
    print(result.format_trace(), end="")

    print(f"Enter two vertex numbers (1-{size}): ", end="", flush=True)
    tokens = sys.stdin.read().split()
    try:
        u, v = (int(token) - 1 for token in tokens[:2])
    except ValueError:
        print("Invalid input.")
        return 1
    if not (0 <= u < size and 0 <= v < size):
        print("Invalid vertex numbers.")
        return 1

    distance = result.distances[u][v]
    if distance >= INF:
        print(f"No path from {u + 1} to {v + 1}.")
        return 0

    print(f"Shortest path from {u + 1} to {v + 1}: ", end="")
    try:
        print(" -> ".join(str(vertex) for vertex in path(u, v, result.predecessors)))
    except NoPathError:
        print("No path exists.")
    print(f"Length: {distance}")
    return 0


if __name__ == "__main__":
    sys.exit(main())