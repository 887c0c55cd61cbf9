"""Graph traversal: BFS (with shortest-path counting), DFS, cycles, topological order."""

from .bfs import (
    PathCountingResult,
    TraversalResult,
    bfs,
    bfs_distances,
    bfs_with_path_counting,
)
from .dfs import dfs, has_cycle, topological_sort

__all__ = [
    "TraversalResult",
    "PathCountingResult",
    "bfs",
    "bfs_distances",
    "bfs_with_path_counting",
    "dfs",
    "has_cycle",
    "topological_sort",
]
