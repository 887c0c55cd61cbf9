"""
Utility functions for graph algorithms.

Provides helpers for node ordering and indexing, canonical undirected edge
keys, and path reconstruction from predecessor maps.
"""

from typing import Any, Dict, Hashable, Iterable, List, Optional, Tuple


def node_sort_key(node: Hashable) -> Tuple[int, Any]:
    """
    Total-order key for node ids that may mix ints and strings.

    Numbers sort numerically before strings; strings sort lexically. Any
    other hashable falls back to its string form.

    Example:
        >>> sorted(["b", 2, "a", 1], key=node_sort_key)
        [1, 2, 'a', 'b']
    """
    if isinstance(node, bool):
        return (2, str(node))
    if isinstance(node, (int, float)):
        return (0, node)
    if isinstance(node, str):
        return (1, node)
    return (2, str(node))


def canonical_edge_key(u: Hashable, v: Hashable) -> Tuple[Hashable, Hashable]:
    """
    Orientation-free key for an undirected edge: smaller id first.

    Example:
        >>> canonical_edge_key("b", "a")
        ('a', 'b')
    """
    if node_sort_key(v) < node_sort_key(u):
        return v, u
    return u, v


def node_index_map(nodes: Iterable[Hashable]) -> Tuple[Dict[Hashable, int], List[Hashable]]:
    """
    Create a mapping from nodes to indices 0..n-1.

    The given iteration order is kept (duplicates dropped), so passing
    ``graph.nodes()`` yields rows/columns in graph insertion order.

    Returns:
        Tuple of (node_to_index dict, index_to_node list).

    Example:
        >>> node_to_idx, idx_to_node = node_index_map(['c', 'a', 'c'])
        >>> node_to_idx
        {'c': 0, 'a': 1}
    """
    index_to_node: List[Hashable] = list(dict.fromkeys(nodes))
    node_to_index = {node: idx for idx, node in enumerate(index_to_node)}
    return node_to_index, index_to_node


def reconstruct_path(
    parent: Dict[Hashable, Optional[Hashable]], target: Hashable
) -> Optional[List[Hashable]]:
    """
    Reconstruct path from source to target using a predecessor map.

    ``parent[node]`` is the previous node on the shortest path, or None for
    the source. Nodes absent from the map are unreachable.

    Returns:
        List of nodes from source to target (inclusive), or None if target
        is unreachable or the map loops.

    Example:
        >>> parent = {'A': None, 'B': 'A', 'C': 'B'}
        >>> reconstruct_path(parent, 'C')
        ['A', 'B', 'C']
    """
    if target not in parent:
        return None

    path = []
    visited = set()
    current: Optional[Hashable] = target
    while current is not None:
        if current in visited:
            # Predecessor maps under a negative cycle can loop
            return None
        visited.add(current)
        path.append(current)
        current = parent.get(current)

    path.reverse()
    return path
