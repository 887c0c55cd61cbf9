"""
Breadth-first search variants.

- ``bfs``: plain traversal with visit order, hop distances and a BFS tree.
- ``bfs_with_path_counting``: single-source BFS that also counts shortest
  paths (sigma) and records every shortest-path predecessor. This is the
  first phase of Brandes' betweenness algorithm.
- ``bfs_distances``: distances only, with an optional cutoff.

Neighbors are visited in graph insertion order.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 22.2 (BFS).
    - Brandes, U. "A Faster Algorithm for Betweenness Centrality" (2001).
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Set

from ..core.graph import Graph, NodeId
from ..exceptions import InvalidParameter, NodeNotFound


@dataclass
class TraversalResult:
    """
    Outcome of a BFS or DFS traversal.

    Attributes:
        order: Nodes in visitation order (pre- or post-order for DFS).
        parent: Traversal-tree parent per visited node (None for the root).
        depth: Tree depth per visited node (hop distance for BFS).
    """

    order: List[NodeId] = field(default_factory=list)
    parent: Dict[NodeId, Optional[NodeId]] = field(default_factory=dict)
    depth: Dict[NodeId, int] = field(default_factory=dict)

    @property
    def visited(self) -> Set[NodeId]:
        return set(self.parent)


@dataclass
class PathCountingResult:
    """
    Per-source intermediate data for Brandes' algorithm.

    Attributes:
        stack: Nodes in order of non-decreasing distance from the source.
        predecessors: node -> shortest-path predecessors, in discovery order.
        sigma: node -> number of shortest paths from the source.
        distances: node -> hop distance from the source.
    """

    stack: List[NodeId]
    predecessors: Dict[NodeId, List[NodeId]]
    sigma: Dict[NodeId, float]
    distances: Dict[NodeId, int]


def bfs(
    graph: Graph,
    source: NodeId,
    target: Optional[NodeId] = None,
    max_depth: Optional[int] = None,
    visitor: Optional[Callable[[NodeId, int], None]] = None,
) -> TraversalResult:
    """
    Breadth-first search from a source node.

    Args:
        graph: Graph to traverse (successors are followed on directed graphs).
        source: Source node to start BFS from.
        target: Stop as soon as this node is dequeued.
        max_depth: Do not expand nodes at this depth or deeper.
        visitor: Called as ``visitor(node, depth)`` when a node is dequeued.

    Returns:
        TraversalResult with BFS order, hop distances and BFS tree.

    Raises:
        NodeNotFound: If source is not in graph.
        InvalidParameter: If max_depth is negative.

    Complexity: O(V + E).

    Example:
        >>> G = Graph()
        >>> _ = G.add_edge('A', 'B')
        >>> _ = G.add_edge('A', 'C')
        >>> bfs(G, 'A').order
        ['A', 'B', 'C']
    """
    if not graph.has_node(source):
        raise NodeNotFound(source, role="Source node")
    if max_depth is not None and max_depth < 0:
        raise InvalidParameter(f"max_depth must be >= 0, got {max_depth}")

    result = TraversalResult()
    result.parent[source] = None
    result.depth[source] = 0
    queue = deque([source])

    while queue:
        u = queue.popleft()
        result.order.append(u)
        if visitor is not None:
            visitor(u, result.depth[u])

        if target is not None and u == target:
            break
        if max_depth is not None and result.depth[u] >= max_depth:
            continue

        for v in graph.neighbors(u):
            if v not in result.parent:
                result.parent[v] = u
                result.depth[v] = result.depth[u] + 1
                queue.append(v)

    return result


def bfs_with_path_counting(graph: Graph, source: NodeId) -> PathCountingResult:
    """
    BFS that counts shortest paths and records all shortest-path predecessors.

    For each node w reached from ``source``:
    - ``distances[w]`` is its hop distance,
    - ``sigma[w]`` is the number of distinct shortest paths source -> w,
    - ``predecessors[w]`` lists every v with an edge v -> w and
      ``distances[v] + 1 == distances[w]``.

    ``stack`` holds nodes in dequeue order, so distances along it never
    decrease; Brandes' accumulation walks it backwards.

    Raises:
        NodeNotFound: If source is not in graph.

    Complexity: O(V + E).
    """
    if not graph.has_node(source):
        raise NodeNotFound(source, role="Source node")

    distances: Dict[NodeId, int] = {source: 0}
    sigma: Dict[NodeId, float] = {source: 1.0}
    predecessors: Dict[NodeId, List[NodeId]] = {source: []}
    stack: List[NodeId] = []
    queue = deque([source])

    while queue:
        current = queue.popleft()
        stack.append(current)
        next_distance = distances[current] + 1

        for neighbor in graph.neighbors(current):
            if neighbor not in distances:
                distances[neighbor] = next_distance
                sigma[neighbor] = 0.0
                predecessors[neighbor] = []
                queue.append(neighbor)

            if distances[neighbor] == next_distance:
                sigma[neighbor] += sigma[current]
                predecessors[neighbor].append(current)

    return PathCountingResult(
        stack=stack,
        predecessors=predecessors,
        sigma=sigma,
        distances=distances,
    )


def bfs_distances(
    graph: Graph, source: NodeId, cutoff: Optional[int] = None
) -> Dict[NodeId, int]:
    """
    Hop distances from source to every reachable node.

    Args:
        graph: Graph to traverse.
        source: Source node.
        cutoff: Only report nodes at distance <= cutoff.

    Raises:
        NodeNotFound: If source is not in graph.
    """
    if not graph.has_node(source):
        raise NodeNotFound(source, role="Source node")

    distances: Dict[NodeId, int] = {source: 0}
    queue = deque([source])

    while queue:
        current = queue.popleft()
        d = distances[current]
        if cutoff is not None and d >= cutoff:
            continue
        for neighbor in graph.neighbors(current):
            if neighbor not in distances:
                distances[neighbor] = d + 1
                queue.append(neighbor)

    return distances
