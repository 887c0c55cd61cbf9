"""Degree centrality."""

from typing import Dict, Union

from ..core.graph import DegreeMode, Graph, NodeId, coerce_degree_mode
from ..exceptions import NodeNotFound


def degree_centrality(
    graph: Graph,
    mode: Union[DegreeMode, str] = DegreeMode.TOTAL,
    normalized: bool = False,
) -> Dict[NodeId, float]:
    """
    Degree centrality for every node.

    Args:
        graph: Input graph.
        mode: ``"in"``, ``"out"`` or ``"total"`` degree on directed graphs.
            Ignored on undirected graphs.
        normalized: Divide by |V| - 1 (no-op for graphs with a single node,
            which score 0).

    Returns:
        Dictionary mapping node -> centrality, in node insertion order.

    Raises:
        InvalidParameter: If mode is not a valid degree mode.

    Example:
        >>> G = Graph()
        >>> _ = G.add_edge('A', 'B')
        >>> _ = G.add_edge('A', 'C')
        >>> degree_centrality(G)
        {'A': 2.0, 'B': 1.0, 'C': 1.0}
    """
    mode = coerce_degree_mode(mode)
    n = graph.node_count
    scale = 1.0 / (n - 1) if normalized and n > 1 else 1.0

    centrality: Dict[NodeId, float] = {}
    for node in graph.nodes():
        if normalized and n <= 1:
            centrality[node] = 0.0
        else:
            centrality[node] = graph.degree(node, mode) * scale
    return centrality


def node_degree_centrality(
    graph: Graph,
    node: NodeId,
    mode: Union[DegreeMode, str] = DegreeMode.TOTAL,
    normalized: bool = False,
) -> float:
    """
    Degree centrality of a single node.

    Raises:
        NodeNotFound: If node is not in graph.
    """
    if not graph.has_node(node):
        raise NodeNotFound(node)
    mode = coerce_degree_mode(mode)
    degree = graph.degree(node, mode)
    if not normalized:
        return float(degree)
    n = graph.node_count
    return degree / (n - 1) if n > 1 else 0.0
