"""
Closeness centrality (standard and harmonic).

Distances are hop counts unless ``weighted=True``, in which case Dijkstra
distances over edge weights are used.

References:
    - Wasserman, S., Faust, K. "Social Network Analysis" (1994).
    - Marchiori, M., Latora, V. "Harmony in the small-world" (2000).
"""

from typing import Dict, Optional

from ..core.graph import Graph, NodeId
from ..exceptions import InvalidParameter, NodeNotFound
from ..shortest.dijkstra import single_source_shortest_path_length
from ..traversal.bfs import bfs_distances


def _distances_from(
    graph: Graph, node: NodeId, cutoff: Optional[float], weighted: bool
) -> Dict[NodeId, float]:
    if weighted:
        return single_source_shortest_path_length(graph, node, cutoff=cutoff)
    hop_cutoff = None if cutoff is None else int(cutoff)
    return {n: float(d) for n, d in bfs_distances(graph, node, cutoff=hop_cutoff).items()}


def node_closeness_centrality(
    graph: Graph,
    node: NodeId,
    normalized: bool = False,
    harmonic: bool = False,
    cutoff: Optional[float] = None,
    weighted: bool = False,
) -> float:
    """
    Closeness centrality of one node.

    Standard closeness is ``1 / sum(d)`` over the nodes reachable from
    ``node``. Normalized, it is scaled by ``r / (n - 1)`` where r is the
    number of reachable nodes, so nodes in small components are not
    over-rated. Harmonic closeness is ``sum(1 / d)``, divided by ``n - 1``
    when normalized.

    Args:
        graph: Input graph (successors are followed on directed graphs).
        node: Node to score.
        normalized: Apply the normalization above.
        harmonic: Use harmonic closeness.
        cutoff: Ignore nodes farther than this.
        weighted: Use weighted shortest-path distances.

    Returns:
        Closeness score; 0.0 for a node that reaches nothing.

    Raises:
        NodeNotFound: If node is not in graph.
        InvalidParameter: If cutoff is negative.
    """
    if not graph.has_node(node):
        raise NodeNotFound(node)
    if cutoff is not None and cutoff < 0:
        raise InvalidParameter(f"cutoff must be >= 0, got {cutoff}")

    n = graph.node_count
    if n <= 1:
        return 0.0

    distances = _distances_from(graph, node, cutoff, weighted)
    others = [d for other, d in distances.items() if other != node and d > 0]
    if not others:
        return 0.0

    if harmonic:
        total = sum(1.0 / d for d in others)
        return total / (n - 1) if normalized else total

    closeness = 1.0 / sum(others)
    if normalized:
        closeness *= len(others) / (n - 1)
    return closeness


def closeness_centrality(
    graph: Graph,
    normalized: bool = False,
    harmonic: bool = False,
    cutoff: Optional[float] = None,
    weighted: bool = False,
) -> Dict[NodeId, float]:
    """
    Closeness centrality for every node.

    See :func:`node_closeness_centrality` for the definitions.

    Complexity: O(V * (V + E)) unweighted, O(V * E log V) weighted.

    Example:
        >>> G = Graph()
        >>> _ = G.add_edge('A', 'B')
        >>> _ = G.add_edge('B', 'C')
        >>> closeness_centrality(G)['B']
        0.5
    """
    return {
        node: node_closeness_centrality(
            graph,
            node,
            normalized=normalized,
            harmonic=harmonic,
            cutoff=cutoff,
            weighted=weighted,
        )
        for node in graph.nodes()
    }
