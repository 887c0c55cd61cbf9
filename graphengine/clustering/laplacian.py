"""
Adjacency and Laplacian matrices.

Rows and columns follow graph node insertion order. Directed graphs are
treated as undirected: an edge u -> v adds its weight to both A[u, v] and
A[v, u], so a reciprocal pair of arcs sums.

Laplacian variants (d_i is the weighted degree, i.e. row sum of A):

- ``unnormalized``: L = D - A
- ``normalized``:   L_ii = 1 if d_i > 0 else 0, L_ij = -A_ij / sqrt(d_i d_j)
- ``random_walk``:  L_ii = 1 if d_i > 0 else 0, L_ij = -A_ij / d_i

Isolated nodes produce all-zero rows in the normalized variants.

References:
    - von Luxburg, U. "A Tutorial on Spectral Clustering",
      Statistics and Computing 17(4), 2007.
"""

from enum import Enum
from typing import List, Tuple, Union

import numpy as np

from ..core.graph import Graph, NodeId
from ..exceptions import InvalidParameter
from ..utils import node_index_map


class LaplacianType(str, Enum):
    """Laplacian normalization used by spectral clustering."""

    UNNORMALIZED = "unnormalized"
    NORMALIZED = "normalized"
    RANDOM_WALK = "random_walk"


def coerce_laplacian_type(laplacian: Union[LaplacianType, str]) -> LaplacianType:
    """Convert ``"normalized"`` etc. to :class:`LaplacianType` (``"randomWalk"`` accepted)."""
    if laplacian == "randomWalk":
        return LaplacianType.RANDOM_WALK
    try:
        return LaplacianType(laplacian)
    except ValueError:
        valid = ", ".join(repr(t.value) for t in LaplacianType)
        raise InvalidParameter(f"laplacian must be one of {valid}, got {laplacian!r}") from None


def adjacency_matrix(graph: Graph) -> Tuple[np.ndarray, List[NodeId]]:
    """
    Symmetric weighted adjacency matrix.

    Opposite arcs u -> v and v -> u of a directed graph add up in both
    cells. A self-loop contributes its weight once to the diagonal.

    Returns:
        Tuple of (n x n matrix, node order of its rows).
    """
    node_to_idx, nodes = node_index_map(graph.nodes())
    n = len(nodes)
    matrix = np.zeros((n, n), dtype=float)
    for edge in graph.edges():
        i, j = node_to_idx[edge.source], node_to_idx[edge.target]
        matrix[i, j] += edge.weight
        if i != j:
            matrix[j, i] += edge.weight
    return matrix, nodes


def laplacian_from_adjacency(
    adjacency: np.ndarray, laplacian: Union[LaplacianType, str] = LaplacianType.NORMALIZED
) -> np.ndarray:
    """Build a Laplacian of the given type from a symmetric adjacency matrix."""
    kind = coerce_laplacian_type(laplacian)
    degrees = adjacency.sum(axis=1)
    off_diagonal = adjacency - np.diag(np.diag(adjacency))
    has_degree = degrees > 0

    if kind is LaplacianType.UNNORMALIZED:
        return np.diag(degrees) - off_diagonal

    if kind is LaplacianType.NORMALIZED:
        inv_sqrt = np.zeros_like(degrees)
        inv_sqrt[has_degree] = 1.0 / np.sqrt(degrees[has_degree])
        scaled = off_diagonal * inv_sqrt[:, None] * inv_sqrt[None, :]
    else:
        inv = np.zeros_like(degrees)
        inv[has_degree] = 1.0 / degrees[has_degree]
        scaled = off_diagonal * inv[:, None]

    return np.diag(has_degree.astype(float)) - scaled


def graph_laplacian_matrix(
    graph: Graph, laplacian: Union[LaplacianType, str] = LaplacianType.NORMALIZED
) -> Tuple[np.ndarray, List[NodeId]]:
    """
    Laplacian matrix of a graph.

    Args:
        graph: Input graph.
        laplacian: ``"unnormalized"``, ``"normalized"`` or ``"random_walk"``.

    Returns:
        Tuple of (n x n Laplacian, node order of its rows).

    Raises:
        InvalidParameter: If laplacian is not a known type.

    Example:
        >>> G = Graph()
        >>> _ = G.add_edge('a', 'b')
        >>> L, order = graph_laplacian_matrix(G, "unnormalized")
        >>> L.tolist()
        [[1.0, -1.0], [-1.0, 1.0]]
    """
    kind = coerce_laplacian_type(laplacian)
    adjacency, nodes = adjacency_matrix(graph)
    return laplacian_from_adjacency(adjacency, kind), nodes
