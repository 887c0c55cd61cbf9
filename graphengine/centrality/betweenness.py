"""
Betweenness centrality using Brandes' algorithm.

For each source a BFS with shortest-path counting yields a stack in
non-decreasing distance order, path counts sigma and predecessor lists.
Walking the stack backwards folds ``sigma[v] / sigma[w] * (1 + delta[w])``
into every predecessor v of w. Paths are counted by hops; edge weights are
ignored.

References:
    - Brandes, U. "A Faster Algorithm for Betweenness Centrality",
      Journal of Mathematical Sociology 25(2), 2001.
"""

from typing import Dict, List, Tuple

from ..core.graph import Graph, NodeId
from ..exceptions import NodeNotFound
from ..logging import get_logger
from ..traversal.bfs import PathCountingResult, bfs_with_path_counting

logger = get_logger(__name__)

EdgeKey = Tuple[NodeId, NodeId]


def _dependency(result: PathCountingResult, source: NodeId, endpoints: bool, v: NodeId, w: NodeId, delta_w: float) -> float:
    """Contribution of w's dependency to predecessor v for one source."""
    sigma_v = result.sigma.get(v, 0.0)
    sigma_w = result.sigma.get(w, 0.0)
    if sigma_v <= 0 or sigma_w <= 0:
        return 0.0

    contribution = (sigma_v / sigma_w) * (1.0 + delta_w)
    if not endpoints and len(result.predecessors.get(w, [])) == 0 and w != source:
        contribution = 0.0
    return contribution


def _accumulate_nodes(
    result: PathCountingResult,
    source: NodeId,
    centrality: Dict[NodeId, float],
    endpoints: bool,
) -> None:
    delta: Dict[NodeId, float] = {node: 0.0 for node in result.stack}

    for w in reversed(result.stack):
        delta_w = delta[w]
        for v in result.predecessors.get(w, []):
            delta[v] += _dependency(result, source, endpoints, v, w, delta_w)
        if w != source:
            centrality[w] += delta_w


def _accumulate_edges(
    graph: Graph,
    result: PathCountingResult,
    source: NodeId,
    centrality: Dict[EdgeKey, float],
    endpoints: bool,
) -> None:
    delta: Dict[NodeId, float] = {node: 0.0 for node in result.stack}

    for w in reversed(result.stack):
        delta_w = delta[w]
        for v in result.predecessors.get(w, []):
            contribution = _dependency(result, source, endpoints, v, w, delta_w)
            edge = graph.get_edge(v, w)
            centrality[(edge.source, edge.target)] += contribution
            delta[v] += contribution


def _normalization_factor(n: int, directed: bool) -> float:
    factor = (n - 1) * (n - 2)
    return float(factor) if directed else factor / 2.0


def betweenness_centrality(
    graph: Graph,
    normalized: bool = False,
    endpoints: bool = False,
) -> Dict[NodeId, float]:
    """
    Betweenness centrality for every node.

    Args:
        graph: Input graph (directed or undirected).
        normalized: Divide by (n-1)(n-2) on directed graphs or
            (n-1)(n-2)/2 on undirected graphs (skipped when that is 0).
        endpoints: When False, a dependency contribution is dropped if its
            target has no shortest-path predecessors and is not the source.

    Returns:
        Dictionary mapping node -> betweenness, in node insertion order.

    Complexity: O(V * E).

    Example:
        >>> G = Graph()
        >>> _ = G.add_edge(1, 2)
        >>> _ = G.add_edge(2, 3)
        >>> betweenness_centrality(G)
        {1: 0.0, 2: 1.0, 3: 0.0}
    """
    nodes = graph.nodes()
    centrality: Dict[NodeId, float] = {node: 0.0 for node in nodes}

    for source in nodes:
        result = bfs_with_path_counting(graph, source)
        _accumulate_nodes(result, source, centrality, endpoints)

    if not graph.directed:
        for node in nodes:
            centrality[node] /= 2.0

    if normalized:
        factor = _normalization_factor(len(nodes), graph.directed)
        if factor > 0:
            for node in nodes:
                centrality[node] /= factor

    logger.debug("Betweenness computed over %d sources", len(nodes))
    return centrality


def node_betweenness_centrality(
    graph: Graph,
    node: NodeId,
    normalized: bool = False,
    endpoints: bool = False,
) -> float:
    """
    Betweenness centrality of a single node.

    Runs the full computation; prefer :func:`betweenness_centrality` when
    scoring several nodes.

    Raises:
        NodeNotFound: If node is not in graph.
    """
    if not graph.has_node(node):
        raise NodeNotFound(node)
    return betweenness_centrality(graph, normalized=normalized, endpoints=endpoints)[node]


def edge_betweenness_centrality(
    graph: Graph,
    normalized: bool = False,
    endpoints: bool = False,
) -> Dict[EdgeKey, float]:
    """
    Edge betweenness centrality.

    The same dependency quantity is accumulated on the traversed edge.

    Returns:
        Dictionary keyed by each edge's stored ``(source, target)`` pair, in
        edge insertion order. An undirected edge has a single entry whichever
        direction paths traverse it.
    """
    nodes = graph.nodes()
    centrality: Dict[EdgeKey, float] = {edge.endpoints(): 0.0 for edge in graph.edges()}

    for source in nodes:
        result = bfs_with_path_counting(graph, source)
        _accumulate_edges(graph, result, source, centrality, endpoints)

    keys: List[EdgeKey] = list(centrality)
    if not graph.directed:
        for key in keys:
            centrality[key] /= 2.0

    if normalized:
        factor = _normalization_factor(len(nodes), graph.directed)
        if factor > 0:
            for key in keys:
                centrality[key] /= factor

    return centrality
