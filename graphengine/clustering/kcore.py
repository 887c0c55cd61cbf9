"""
K-core decomposition.

The k-core is the largest subgraph in which every node has at least k
neighbors. A node's coreness is the largest k whose k-core contains it.
Computed by repeatedly peeling a minimum-degree node; direction is ignored
and self-loops do not count toward degree.

References:
    - Batagelj, V., Zaversnik, M. "An O(m) Algorithm for Cores Decomposition
      of Networks" (2003).
"""

from dataclasses import dataclass, field
from typing import Dict, List, Set

from ..core.graph import Graph, NodeId
from ..exceptions import InvalidParameter
from ..structures.priority_queue import PriorityQueue


@dataclass
class KCoreResult:
    """
    Attributes:
        coreness: node -> core number.
        cores: k -> nodes of the k-core (coreness >= k), for k = 0..max_core.
        max_core: Largest coreness in the graph (0 when empty).
    """

    coreness: Dict[NodeId, int] = field(default_factory=dict)
    cores: Dict[int, List[NodeId]] = field(default_factory=dict)
    max_core: int = 0


def _undirected_neighbors(graph: Graph) -> Dict[NodeId, Set[NodeId]]:
    neighbors: Dict[NodeId, Set[NodeId]] = {node: set() for node in graph.nodes()}
    for edge in graph.edges():
        if edge.source != edge.target:
            neighbors[edge.source].add(edge.target)
            neighbors[edge.target].add(edge.source)
    return neighbors


def k_core_decomposition(graph: Graph) -> KCoreResult:
    """
    Coreness of every node.

    Complexity: O(E log V).

    Example:
        >>> G = Graph()
        >>> for u, v in [(1, 2), (2, 3), (1, 3), (3, 4)]:
        ...     _ = G.add_edge(u, v)
        >>> k_core_decomposition(G).coreness
        {1: 2, 2: 2, 3: 2, 4: 1}
    """
    nodes = graph.nodes()
    if not nodes:
        return KCoreResult()

    neighbors = _undirected_neighbors(graph)
    degree = {node: len(neighbors[node]) for node in nodes}
    pq: PriorityQueue = PriorityQueue()
    for node in nodes:
        pq.push(node, degree[node])

    removed: Set[NodeId] = set()
    peeled: Dict[NodeId, int] = {}
    current_core = 0

    while pq:
        node, d = pq.pop()
        if node in removed or d != degree[node]:
            continue
        removed.add(node)
        current_core = max(current_core, int(d))
        peeled[node] = current_core

        for nbr in neighbors[node]:
            if nbr not in removed and degree[nbr] > 0:
                degree[nbr] -= 1
                pq.push(nbr, degree[nbr])

    coreness = {node: peeled[node] for node in nodes}
    max_core = max(coreness.values())
    cores = {k: [node for node in nodes if coreness[node] >= k] for k in range(max_core + 1)}
    return KCoreResult(coreness=coreness, cores=cores, max_core=max_core)


def k_core(graph: Graph, k: int) -> List[NodeId]:
    """
    Nodes of the k-core, in node insertion order.

    Raises:
        InvalidParameter: If k is negative.
    """
    if k < 0:
        raise InvalidParameter(f"k must be >= 0, got {k}")
    coreness = k_core_decomposition(graph).coreness
    return [node for node, core in coreness.items() if core >= k]
