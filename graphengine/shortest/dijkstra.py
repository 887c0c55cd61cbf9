"""
Dijkstra's algorithm for single-source shortest paths.

Works on directed and undirected graphs whose traversed edge weights are
non-negative. The priority queue has no decrease-key: an improved node is
pushed again and stale entries are skipped when they surface.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

from ..core.graph import Graph, NodeId
from ..exceptions import NodeNotFound, UnsupportedWeight
from ..logging import get_logger
from ..structures.priority_queue import PriorityQueue
from ..utils import reconstruct_path

logger = get_logger(__name__)


@dataclass
class PathResult:
    """
    A single shortest path.

    Attributes:
        distance: Total weight of the path.
        path: Nodes from source to target inclusive.
    """

    distance: float
    path: List[NodeId]


def dijkstra(
    graph: Graph,
    source: NodeId,
    target: Optional[NodeId] = None,
    cutoff: Optional[float] = None,
) -> Tuple[Dict[NodeId, float], Dict[NodeId, Optional[NodeId]]]:
    """
    Dijkstra's algorithm from ``source``.

    Args:
        graph: Graph with non-negative weights on every edge reachable
            from source.
        source: Source node.
        target: If given, stop as soon as target is finalized.
        cutoff: If given, do not finalize nodes farther than this.

    Returns:
        Tuple of:
        - distances: node -> shortest distance, for finalized nodes only
          (unreached nodes are absent rather than infinite)
        - predecessors: node -> previous node on the shortest path
          (None for the source)

    Raises:
        NodeNotFound: If source or target is not in graph.
        UnsupportedWeight: If a negative edge weight is met during relaxation.

    Complexity: O((V + E) log V) with a binary heap.

    Example:
        >>> G = Graph(directed=True)
        >>> _ = G.add_edge('A', 'B', 1.0)
        >>> _ = G.add_edge('B', 'C', 2.0)
        >>> dist, parent = dijkstra(G, 'A')
        >>> dist['C']
        3.0
    """
    if not graph.has_node(source):
        raise NodeNotFound(source, role="Source node")
    if target is not None and not graph.has_node(target):
        raise NodeNotFound(target, role="Target node")

    tentative: Dict[NodeId, float] = {source: 0.0}
    parent: Dict[NodeId, Optional[NodeId]] = {source: None}
    distances: Dict[NodeId, float] = {}
    finalized: Set[NodeId] = set()

    pq: PriorityQueue = PriorityQueue()
    pq.push(source, 0.0)

    while pq:
        u, d = pq.pop()
        if u in finalized:
            continue
        if cutoff is not None and d > cutoff:
            break

        finalized.add(u)
        distances[u] = d

        if target is not None and u == target:
            logger.debug("Dijkstra reached target %r after %d nodes", target, len(finalized))
            break

        for v, edge in graph.incident_edges(u):
            if edge.weight < 0:
                raise UnsupportedWeight(
                    f"Dijkstra requires non-negative weights. "
                    f"Found negative weight {edge.weight} on edge ({u}, {v})"
                )
            if v in finalized:
                continue

            new_dist = d + edge.weight
            if new_dist < tentative.get(v, float("inf")):
                tentative[v] = new_dist
                parent[v] = u
                pq.push(v, new_dist)

    predecessors = {node: parent[node] for node in distances}
    return distances, predecessors


def dijkstra_path(graph: Graph, source: NodeId, target: NodeId) -> Optional[PathResult]:
    """
    Shortest path between two nodes.

    Returns:
        PathResult, or None if target is unreachable. ``source == target``
        gives distance 0 and path ``[source]``.

    Raises:
        NodeNotFound: If source or target is not in graph.
        UnsupportedWeight: If a negative edge weight is met during relaxation.
    """
    if not graph.has_node(source):
        raise NodeNotFound(source, role="Source node")
    if not graph.has_node(target):
        raise NodeNotFound(target, role="Target node")

    if source == target:
        return PathResult(distance=0.0, path=[source])

    distances, predecessors = dijkstra(graph, source, target=target)
    if target not in distances:
        return None

    path = reconstruct_path(predecessors, target)
    if path is None:
        return None
    return PathResult(distance=distances[target], path=path)


def single_source_shortest_path_length(
    graph: Graph, source: NodeId, cutoff: Optional[float] = None
) -> Dict[NodeId, float]:
    """Weighted distances from source to every node within ``cutoff``."""
    distances, _ = dijkstra(graph, source, cutoff=cutoff)
    return distances
