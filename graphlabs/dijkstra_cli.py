"""Interactive command for Dijkstra shortest paths on the example graph."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Optional, Sequence, TextIO

from graphlabs.dijkstra import EXAMPLE_ADJACENCY, describe_all, describe_path, dijkstra


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    token = next(tokens, None)
    if token is None:
        raise ValueError("unexpected end of input")
    return int(token)


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Ask for a mode and vertices, then print the shortest paths."""
    parser = argparse.ArgumentParser(
        prog="dijkstra", description="Shortest paths on the example graph."
    )
    parser.parse_args(argv)

    size = len(EXAMPLE_ADJACENCY)
    tokens = _tokens(sys.stdin)
    print("Choose mode:")
    print("1 - Shortest path between two vertices")
    print("2 - Shortest paths from a given vertex to all others")
    try:
        _prompt("Enter mode (1 or 2): ")
        mode = _read_int(tokens)
        _prompt(f"Enter start vertex (0 to {size - 1}): ")
        start = _read_int(tokens)
        if not 0 <= start < size:
            print("Invalid start vertex.")
            return 1

        if mode == 1:
            _prompt(f"Enter end vertex (0 to {size - 1}): ")
            end = _read_int(tokens)
            if not 0 <= end < size:
                print("Invalid end vertex.")
                return 1
            print(describe_path(dijkstra(EXAMPLE_ADJACENCY, start), end), end="")
        elif mode == 2:
            print(describe_all(dijkstra(EXAMPLE_ADJACENCY, start)), end="")
        else:
            print("Invalid mode.")
            return 1
    except ValueError:
        print("Invalid input.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())