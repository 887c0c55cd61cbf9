"""
Bellman-Ford single-source shortest paths with negative-cycle detection.

Negative edge weights are allowed. A reachable negative cycle is reported
through ``BellmanFordResult.has_negative_cycle`` rather than raised; only a
path query under a negative cycle fails.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.1 (Bellman-Ford).
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from ..core.graph import Graph, NodeId
from ..exceptions import NegativeCycle, NodeNotFound
from ..logging import get_logger
from ..utils import reconstruct_path
from .dijkstra import PathResult

logger = get_logger(__name__)

INF = float("inf")


@dataclass
class BellmanFordResult:
    """
    Result of a Bellman-Ford run.

    Attributes:
        distances: node -> shortest distance for every node (inf if unreached).
        predecessors: node -> previous node on the shortest path (None for the
            source and unreached nodes).
        has_negative_cycle: True if a negative cycle is reachable from source.
        negative_cycle_nodes: Endpoints of edges that still relaxed on the
            detection pass.
    """

    distances: Dict[NodeId, float]
    predecessors: Dict[NodeId, Optional[NodeId]]
    has_negative_cycle: bool = False
    negative_cycle_nodes: Set[NodeId] = field(default_factory=set)


def _directed_arcs(graph: Graph) -> List[Tuple[NodeId, NodeId, float]]:
    """Edges as arcs; an undirected edge yields both orientations."""
    arcs = []
    for edge in graph.edges():
        arcs.append((edge.source, edge.target, edge.weight))
        if not graph.directed and edge.source != edge.target:
            arcs.append((edge.target, edge.source, edge.weight))
    return arcs


def bellman_ford(graph: Graph, source: NodeId) -> BellmanFordResult:
    """
    Bellman-Ford algorithm from ``source``.

    Runs up to |V|-1 relaxation passes over every arc, stopping early after
    a pass without improvement, then one detection pass.

    Raises:
        NodeNotFound: If source is not in graph.

    Complexity: O(V * E).

    Example:
        >>> G = Graph(directed=True)
        >>> _ = G.add_edge('A', 'B', 1.0)
        >>> _ = G.add_edge('B', 'C', -2.0)
        >>> result = bellman_ford(G, 'A')
        >>> result.has_negative_cycle
        False
        >>> result.distances['C']
        -1.0
    """
    if not graph.has_node(source):
        raise NodeNotFound(source, role="Source node")

    distances: Dict[NodeId, float] = {node: INF for node in graph.nodes()}
    predecessors: Dict[NodeId, Optional[NodeId]] = {node: None for node in graph.nodes()}
    distances[source] = 0.0

    arcs = _directed_arcs(graph)
    n = graph.node_count

    passes = 0
    for _ in range(n - 1):
        passes += 1
        updated = False
        for u, v, weight in arcs:
            if distances[u] != INF and distances[u] + weight < distances[v]:
                distances[v] = distances[u] + weight
                predecessors[v] = u
                updated = True
        if not updated:
            break

    cycle_nodes: Set[NodeId] = set()
    for u, v, weight in arcs:
        if distances[u] != INF and distances[u] + weight < distances[v]:
            cycle_nodes.add(u)
            cycle_nodes.add(v)

    if cycle_nodes:
        logger.debug("Negative cycle reachable from %r through %d nodes", source, len(cycle_nodes))
    else:
        logger.debug("Bellman-Ford from %r converged after %d passes", source, passes)

    return BellmanFordResult(
        distances=distances,
        predecessors=predecessors,
        has_negative_cycle=bool(cycle_nodes),
        negative_cycle_nodes=cycle_nodes,
    )


def bellman_ford_path(graph: Graph, source: NodeId, target: NodeId) -> Optional[PathResult]:
    """
    Shortest path between two nodes, allowing negative weights.

    Returns:
        PathResult, or None if target is unreachable.

    Raises:
        NodeNotFound: If source or target is not in graph.
        NegativeCycle: If a negative cycle is reachable from source.
    """
    if not graph.has_node(target):
        raise NodeNotFound(target, role="Target node")

    result = bellman_ford(graph, source)
    if result.has_negative_cycle:
        raise NegativeCycle(
            f"Graph contains a negative cycle reachable from {source}; "
            f"shortest path to {target} is undefined"
        )

    if source == target:
        return PathResult(distance=0.0, path=[source])
    if result.distances[target] == INF:
        return None

    parent = {node: pred for node, pred in result.predecessors.items() if result.distances[node] != INF}
    path = reconstruct_path(parent, target)
    if path is None:
        return None
    return PathResult(distance=result.distances[target], path=path)


def has_negative_cycle(graph: Graph) -> bool:
    """
    Check whether any part of the graph contains a negative cycle.

    Starts a run from every node not reached by an earlier run, so cycles
    confined to a part of the graph unreachable from earlier sources are found.
    """
    checked: Set[NodeId] = set()
    for node in graph.nodes():
        if node in checked:
            continue
        result = bellman_ford(graph, node)
        if result.has_negative_cycle:
            return True
        checked.update(n for n, d in result.distances.items() if d != INF)
    return False
