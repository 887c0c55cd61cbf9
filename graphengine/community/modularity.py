"""
Newman-Girvan modularity with a resolution parameter.

Directed graphs are symmetrized: every edge contributes its weight to both
endpoints. A self-loop adds twice its weight to its node's strength.

    Q = sum_c [ L_c / m - resolution * (K_c / 2m)^2 ]

where L_c is the total weight of edges inside community c, K_c the total
strength of its nodes and m the total edge weight.

References:
    - Newman, M. E. J. "Modularity and community structure in networks",
      PNAS 103(23), 2006.
"""

from typing import Dict, Hashable, Iterable, List, Sequence, Tuple

from ..core.graph import Graph, NodeId
from ..diagnostics import is_partition
from ..exceptions import InvalidParameter

Adjacency = Dict[NodeId, Dict[NodeId, float]]


def symmetric_weights(graph: Graph) -> Tuple[Adjacency, Dict[NodeId, float], float]:
    """
    Undirected weighted view of ``graph``.

    Returns:
        Tuple of:
        - adjacency: node -> {neighbor: weight}; a self-loop appears once under
          the node itself, and u -> v plus v -> u on a directed graph merge
        - strength: node -> weighted degree (self-loops count twice)
        - m: total edge weight
    """
    adjacency: Adjacency = {node: {} for node in graph.nodes()}
    strength: Dict[NodeId, float] = {node: 0.0 for node in graph.nodes()}
    m = 0.0

    for edge in graph.edges():
        u, v, w = edge.source, edge.target, edge.weight
        m += w
        if u == v:
            adjacency[u][u] = adjacency[u].get(u, 0.0) + w
            strength[u] += 2.0 * w
        else:
            adjacency[u][v] = adjacency[u].get(v, 0.0) + w
            adjacency[v][u] = adjacency[v].get(u, 0.0) + w
            strength[u] += w
            strength[v] += w

    return adjacency, strength, m


def modularity_of_assignment(
    adjacency: Adjacency,
    strength: Dict[NodeId, float],
    m: float,
    assignment: Dict[NodeId, Hashable],
    resolution: float = 1.0,
) -> float:
    """Modularity of a node -> community mapping over a symmetric view (0 when m is 0)."""
    if m <= 0:
        return 0.0

    internal: Dict[Hashable, float] = {}
    totals: Dict[Hashable, float] = {}
    for u, nbrs in adjacency.items():
        cu = assignment[u]
        totals[cu] = totals.get(cu, 0.0) + strength[u]
        for v, w in nbrs.items():
            if assignment[v] != cu:
                continue
            # Each non-loop edge is seen from both endpoints
            internal[cu] = internal.get(cu, 0.0) + (w if u == v else w / 2.0)

    q = 0.0
    for c, total in totals.items():
        q += internal.get(c, 0.0) / m - resolution * (total / (2.0 * m)) ** 2
    return q


def modularity(
    graph: Graph,
    communities: Sequence[Iterable[NodeId]],
    resolution: float = 1.0,
) -> float:
    """
    Modularity of a partition of ``graph``.

    Args:
        graph: Input graph (directed graphs are symmetrized).
        communities: Node lists that partition the graph's nodes.
        resolution: Weight of the null-model term; larger values favor
            smaller communities.

    Returns:
        Modularity; 0.0 for a graph without edge weight.

    Raises:
        InvalidParameter: If communities do not partition the node set.

    Example:
        >>> G = Graph()
        >>> _ = G.add_edge(1, 2)
        >>> _ = G.add_edge(3, 4)
        >>> modularity(G, [[1, 2], [3, 4]])
        0.5
    """
    groups: List[List[NodeId]] = [list(c) for c in communities]
    if not is_partition(graph.nodes(), groups):
        raise InvalidParameter("communities must partition the graph's nodes exactly once each")

    assignment = {node: idx for idx, group in enumerate(groups) for node in group}
    adjacency, strength, m = symmetric_weights(graph)
    return modularity_of_assignment(adjacency, strength, m, assignment, resolution)
