"""Shortest paths: Dijkstra, Bellman-Ford and Floyd-Warshall."""

from .bellman_ford import (
    BellmanFordResult,
    bellman_ford,
    bellman_ford_path,
    has_negative_cycle,
)
from .dijkstra import (
    PathResult,
    dijkstra,
    dijkstra_path,
    single_source_shortest_path_length,
)
from .floyd_warshall import floyd_warshall

__all__ = [
    "PathResult",
    "BellmanFordResult",
    "dijkstra",
    "dijkstra_path",
    "single_source_shortest_path_length",
    "bellman_ford",
    "bellman_ford_path",
    "has_negative_cycle",
    "floyd_warshall",
]
