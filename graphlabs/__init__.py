"""Dijkstra and Floyd-Warshall shortest paths, matrix helpers, a linked list and two commands."""

__version__ = "0.1.0"

__all__ = [
    "dijkstra",
    "dijkstra_cli",
    "floyd_cli",
    "floyd_warshall",
    "graph_utils",
    "linked_list",
]