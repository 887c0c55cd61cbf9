"""
Minimum spanning tree algorithms: Kruskal and Prim.

Both operate on undirected graphs and fail with ``Disconnected`` rather
than returning a spanning forest.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 23 (Minimum Spanning Trees).
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from ..core.graph import Edge, Graph, NodeId
from ..diagnostics import assert_spanning_tree, is_debug_enabled
from ..exceptions import Disconnected, NodeNotFound, WrongGraphKind
from ..logging import get_logger
from ..structures.priority_queue import PriorityQueue
from ..structures.union_find import UnionFind
from ..utils import canonical_edge_key

logger = get_logger(__name__)


@dataclass
class MSTResult:
    """
    A minimum spanning tree.

    Attributes:
        edges: Tree edges in the order they were accepted.
        total_weight: Sum of the tree edge weights.
    """

    edges: List[Edge] = field(default_factory=list)
    total_weight: float = 0.0


def _check_tree(graph: Graph, result: MSTResult) -> None:
    if is_debug_enabled():
        assert_spanning_tree(graph.nodes(), [edge.endpoints() for edge in result.edges])


def kruskal_mst(graph: Graph) -> MSTResult:
    """
    Kruskal's algorithm for a minimum spanning tree.

    Edges are de-duplicated by their canonical key, then sorted by weight
    with a stable sort, so equal weights keep edge insertion order. Each edge
    joining two different Union-Find sets is accepted until |V| - 1 edges are
    in the tree.

    Args:
        graph: Undirected graph.

    Returns:
        MSTResult with the accepted edges and their total weight. Empty and
        single-node graphs give an empty tree.

    Raises:
        WrongGraphKind: If graph is directed.
        Disconnected: If fewer than |V| - 1 edges can be accepted.

    Complexity: O(E log E).

    Example:
        >>> G = Graph()
        >>> _ = G.add_edge('A', 'B', 1.0)
        >>> _ = G.add_edge('B', 'C', 2.0)
        >>> _ = G.add_edge('A', 'C', 3.0)
        >>> kruskal_mst(G).total_weight
        3.0
    """
    if graph.directed:
        raise WrongGraphKind("Kruskal's algorithm requires an undirected graph")

    nodes = graph.nodes()
    needed = max(len(nodes) - 1, 0)

    unique: Dict[Tuple[NodeId, NodeId], Edge] = {}
    for edge in graph.edges():
        unique.setdefault(canonical_edge_key(edge.source, edge.target), edge)
    candidates = sorted(unique.values(), key=lambda e: e.weight)

    uf = UnionFind(nodes)
    result = MSTResult()
    for edge in candidates:
        if len(result.edges) >= needed:
            break
        if uf.union(edge.source, edge.target):
            result.edges.append(edge)
            result.total_weight += edge.weight

    if len(result.edges) < needed:
        raise Disconnected(
            f"Graph is disconnected: spanning tree needs {needed} edges, found {len(result.edges)}"
        )

    _check_tree(graph, result)
    logger.debug("Kruskal accepted %d of %d edges", len(result.edges), len(candidates))
    return result


def prim_mst(graph: Graph, start: Optional[NodeId] = None) -> MSTResult:
    """
    Prim's algorithm for a minimum spanning tree.

    Grows a single tree from ``start`` (the first node by default), always
    taking the lightest edge leaving it; ties go to the edge pushed first.

    Args:
        graph: Undirected graph.
        start: Root of the growth.

    Raises:
        WrongGraphKind: If graph is directed.
        NodeNotFound: If start is not in graph.
        Disconnected: If some node cannot be reached from start.

    Complexity: O(E log V).
    """
    if graph.directed:
        raise WrongGraphKind("Prim's algorithm requires an undirected graph")

    nodes = graph.nodes()
    if not nodes:
        return MSTResult()
    if start is None:
        start = nodes[0]
    elif not graph.has_node(start):
        raise NodeNotFound(start, role="Start node")

    result = MSTResult()
    in_tree: Set[NodeId] = {start}
    pq: PriorityQueue = PriorityQueue()
    for v, edge in graph.incident_edges(start):
        pq.push((start, v), edge.weight)

    while pq and len(in_tree) < len(nodes):
        (u, v), weight = pq.pop()
        if v in in_tree:
            continue

        in_tree.add(v)
        edge = graph.get_edge(u, v)
        result.edges.append(edge)
        result.total_weight += weight

        for nbr, nbr_edge in graph.incident_edges(v):
            if nbr not in in_tree:
                pq.push((v, nbr), nbr_edge.weight)

    if len(in_tree) < len(nodes):
        raise Disconnected(
            f"Graph is disconnected: reached {len(in_tree)} of {len(nodes)} nodes from {start}"
        )

    _check_tree(graph, result)
    return result
