"""
Depth-first search, cycle detection and topological sort.

Every routine here simulates recursion with an explicit stack of
``(node, neighbor iterator)`` frames, so traversal depth is bounded by
memory rather than by the interpreter's recursion limit. Neighbors are
visited in graph insertion order.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.3 (DFS) and 22.4 (Topological sort).
"""

from typing import Dict, Iterator, List, Optional, Tuple

from ..core.graph import Graph, NodeId
from ..exceptions import InvalidParameter, NodeNotFound, WrongGraphKind
from ..logging import get_logger
from .bfs import TraversalResult

logger = get_logger(__name__)

# Colors for three-state DFS
_WHITE, _GRAY, _BLACK = 0, 1, 2


def dfs(
    graph: Graph,
    source: NodeId,
    postorder: bool = False,
    max_depth: Optional[int] = None,
) -> TraversalResult:
    """
    Depth-first search from a source node (iterative).

    The traversal matches the recursive formulation exactly: a node is
    discovered the first time an edge leads to it, and neighbors are tried
    in insertion order.

    Args:
        graph: Graph to traverse.
        source: Source node to start DFS from.
        postorder: If True, ``order`` lists nodes when they finish instead of
            when they are discovered.
        max_depth: Do not descend below this tree depth.

    Returns:
        TraversalResult with visit order, DFS tree parents and tree depths.

    Raises:
        NodeNotFound: If source is not in graph.
        InvalidParameter: If max_depth is negative.

    Complexity: O(V + E).

    Example:
        >>> G = Graph()
        >>> _ = G.add_edge('A', 'B')
        >>> _ = G.add_edge('B', 'C')
        >>> _ = G.add_edge('A', 'D')
        >>> dfs(G, 'A').order
        ['A', 'B', 'C', 'D']
    """
    if not graph.has_node(source):
        raise NodeNotFound(source, role="Source node")
    if max_depth is not None and max_depth < 0:
        raise InvalidParameter(f"max_depth must be >= 0, got {max_depth}")

    result = TraversalResult()
    result.parent[source] = None
    result.depth[source] = 0
    if not postorder:
        result.order.append(source)

    stack: List[Tuple[NodeId, Iterator[NodeId]]] = [(source, iter(graph.neighbors(source)))]

    while stack:
        u, children = stack[-1]
        advanced = False

        if max_depth is None or result.depth[u] < max_depth:
            for v in children:
                if v not in result.parent:
                    result.parent[v] = u
                    result.depth[v] = result.depth[u] + 1
                    if not postorder:
                        result.order.append(v)
                    stack.append((v, iter(graph.neighbors(v))))
                    advanced = True
                    break

        if not advanced:
            stack.pop()
            if postorder:
                result.order.append(u)

    return result


def has_cycle(graph: Graph) -> bool:
    """
    Check whether the graph contains a cycle.

    Directed graphs use three-color DFS (an edge into a GRAY node closes a
    cycle). Undirected graphs look for a non-tree edge, ignoring the edge
    back to the DFS parent. A self-loop is a cycle in both cases.

    Complexity: O(V + E).
    """
    if graph.directed:
        return _has_directed_cycle(graph)
    return _has_undirected_cycle(graph)


def _has_directed_cycle(graph: Graph) -> bool:
    color: Dict[NodeId, int] = {node: _WHITE for node in graph.nodes()}

    for root in graph.nodes():
        if color[root] != _WHITE:
            continue

        color[root] = _GRAY
        stack: List[Tuple[NodeId, Iterator[NodeId]]] = [(root, iter(graph.neighbors(root)))]

        while stack:
            u, children = stack[-1]
            descended = False
            for v in children:
                if color[v] == _GRAY:
                    return True
                if color[v] == _WHITE:
                    color[v] = _GRAY
                    stack.append((v, iter(graph.neighbors(v))))
                    descended = True
                    break
            if not descended:
                color[u] = _BLACK
                stack.pop()

    return False


def _has_undirected_cycle(graph: Graph) -> bool:
    visited = set()

    for root in graph.nodes():
        if root in visited:
            continue

        visited.add(root)
        stack: List[Tuple[NodeId, Optional[NodeId], Iterator[NodeId]]] = [
            (root, None, iter(graph.neighbors(root)))
        ]

        while stack:
            u, parent, children = stack[-1]
            descended = False
            for v in children:
                if v == u:
                    return True
                if v not in visited:
                    visited.add(v)
                    stack.append((v, u, iter(graph.neighbors(v))))
                    descended = True
                    break
                if v != parent:
                    return True
            if not descended:
                stack.pop()

    return False


def topological_sort(graph: Graph) -> Optional[List[NodeId]]:
    """
    Topological ordering of a directed acyclic graph.

    Roots are taken in insertion order and each finished node is prepended,
    so for every edge u -> v, u comes before v.

    Returns:
        List of nodes in topological order, or None if the graph has a cycle.

    Raises:
        WrongGraphKind: If graph is undirected.

    Complexity: O(V + E).

    Example:
        >>> G = Graph(directed=True)
        >>> _ = G.add_edge('a', 'b')
        >>> _ = G.add_edge('b', 'c')
        >>> topological_sort(G)
        ['a', 'b', 'c']
    """
    if not graph.directed:
        raise WrongGraphKind("Topological sort requires a directed graph")

    color: Dict[NodeId, int] = {node: _WHITE for node in graph.nodes()}
    finished: List[NodeId] = []

    for root in graph.nodes():
        if color[root] != _WHITE:
            continue

        color[root] = _GRAY
        stack: List[Tuple[NodeId, Iterator[NodeId]]] = [(root, iter(graph.neighbors(root)))]

        while stack:
            u, children = stack[-1]
            descended = False
            for v in children:
                if color[v] == _GRAY:
                    logger.debug("Cycle through %r; no topological order", v)
                    return None
                if color[v] == _WHITE:
                    color[v] = _GRAY
                    stack.append((v, iter(graph.neighbors(v))))
                    descended = True
                    break
            if not descended:
                color[u] = _BLACK
                finished.append(u)
                stack.pop()

    finished.reverse()
    return finished
