"""
All-pairs shortest paths: Floyd-Warshall.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.2 (Floyd-Warshall).
"""

from typing import Dict, List, Optional, Tuple

import numpy as np

from ..core.graph import Graph, NodeId
from ..exceptions import NegativeCycle
from ..utils import node_index_map


def floyd_warshall(
    graph: Graph,
) -> Tuple[
    Dict[Tuple[NodeId, NodeId], float],
    Dict[Tuple[NodeId, NodeId], Optional[List[NodeId]]],
]:
    """
    Floyd-Warshall algorithm for all-pairs shortest paths.

    Negative edge weights are allowed; undirected edges are usable in both
    directions.

    Returns:
        Tuple of:
        - dist: (u, v) -> shortest distance (inf if no path)
        - path: (u, v) -> nodes on a shortest path, or None if no path

    Raises:
        NegativeCycle: If any node reaches itself with negative total weight.

    Complexity: O(n^3).

    Example:
        >>> G = Graph(directed=True)
        >>> _ = G.add_edge('A', 'B', 1.0)
        >>> _ = G.add_edge('B', 'C', 2.0)
        >>> dist, path = floyd_warshall(G)
        >>> dist[('A', 'C')]
        3.0
        >>> path[('A', 'C')]
        ['A', 'B', 'C']
    """
    node_to_idx, idx_to_node = node_index_map(graph.nodes())
    n = len(idx_to_node)

    dist_matrix = np.full((n, n), np.inf)
    next_matrix = np.full((n, n), -1, dtype=int)
    for i in range(n):
        dist_matrix[i, i] = 0.0
        next_matrix[i, i] = i

    for edge in graph.edges():
        i, j = node_to_idx[edge.source], node_to_idx[edge.target]
        pairs = [(i, j)] if graph.directed else [(i, j), (j, i)]
        for a, b in pairs:
            if edge.weight < dist_matrix[a, b]:
                dist_matrix[a, b] = edge.weight
                next_matrix[a, b] = b

    for k in range(n):
        via_k = dist_matrix[:, k : k + 1] + dist_matrix[k : k + 1, :]
        improved = via_k < dist_matrix
        dist_matrix = np.where(improved, via_k, dist_matrix)
        next_matrix = np.where(improved, next_matrix[:, k : k + 1], next_matrix)

    negative = [idx_to_node[i] for i in range(n) if dist_matrix[i, i] < 0]
    if negative:
        raise NegativeCycle(f"Graph contains a negative cycle through {negative[0]}")

    def build_path(i: int, j: int) -> Optional[List[NodeId]]:
        if not np.isfinite(dist_matrix[i, j]):
            return None
        nodes = [idx_to_node[i]]
        current = i
        while current != j:
            current = int(next_matrix[current, j])
            if current < 0:
                return None
            nodes.append(idx_to_node[current])
        return nodes

    dist: Dict[Tuple[NodeId, NodeId], float] = {}
    path: Dict[Tuple[NodeId, NodeId], Optional[List[NodeId]]] = {}
    for i in range(n):
        for j in range(n):
            key = (idx_to_node[i], idx_to_node[j])
            dist[key] = float(dist_matrix[i, j])
            path[key] = build_path(i, j)

    return dist, path
