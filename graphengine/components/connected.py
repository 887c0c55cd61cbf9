"""
Connected, weakly connected and strongly connected components.

Undirected and weak connectivity union edge endpoints in a Union-Find
forest; strong connectivity uses Tarjan's algorithm with an explicit DFS
work stack.

References:
    - Tarjan, R. "Depth-first search and linear graph algorithms",
      SIAM Journal on Computing 1(2), 1972.
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 21 and 22.5.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Set, Tuple

from ..core.graph import Graph, NodeId
from ..diagnostics import assert_partition, is_debug_enabled
from ..exceptions import NodeNotFound, WrongGraphKind
from ..logging import get_logger
from ..structures.union_find import UnionFind

logger = get_logger(__name__)


@dataclass
class CondensationResult:
    """
    Quotient graph of strongly connected components.

    Attributes:
        graph: New directed graph with one node per SCC (ids 0..k-1, payload
            is the member list) and one edge per connected SCC pair.
        component_map: Original node -> SCC index.
        components: SCC member lists, indexed like the condensed nodes.
    """

    graph: Graph
    component_map: Dict[NodeId, int]
    components: List[List[NodeId]]


def _union_find_components(graph: Graph) -> List[List[NodeId]]:
    nodes = graph.nodes()
    uf = UnionFind(nodes)
    for edge in graph.edges():
        uf.union(edge.source, edge.target)
    components = uf.get_all_components()
    if is_debug_enabled():
        assert_partition(nodes, components)
    return components


def connected_components(graph: Graph) -> List[List[NodeId]]:
    """
    Connected components of an undirected graph via Union-Find.

    Returns:
        List of components ordered by first node appearance; members keep
        node insertion order. Every node appears in exactly one component.

    Raises:
        WrongGraphKind: If graph is directed.

    Complexity: O((V + E) * alpha(V)).

    Example:
        >>> G = Graph()
        >>> _ = G.add_edge(1, 2)
        >>> G.add_node(3)
        >>> connected_components(G)
        [[1, 2], [3]]
    """
    if graph.directed:
        raise WrongGraphKind("Connected components algorithm requires an undirected graph")
    return _union_find_components(graph)


def connected_components_dfs(graph: Graph) -> List[List[NodeId]]:
    """
    Connected components of an undirected graph via iterative DFS.

    Components are ordered by their first node; members are in DFS
    discovery order.

    Raises:
        WrongGraphKind: If graph is directed.
    """
    if graph.directed:
        raise WrongGraphKind("Connected components algorithm requires an undirected graph")

    visited: Set[NodeId] = set()
    components: List[List[NodeId]] = []
    for root in graph.nodes():
        if root in visited:
            continue
        components.append(_collect_component(graph, root, visited))
    return components


def _collect_component(graph: Graph, root: NodeId, visited: Set[NodeId]) -> List[NodeId]:
    component = []
    stack = [root]
    visited.add(root)
    while stack:
        u = stack.pop()
        component.append(u)
        for v in reversed(graph.neighbors(u)):
            if v not in visited:
                visited.add(v)
                stack.append(v)
    return component


def number_of_connected_components(graph: Graph) -> int:
    return len(connected_components(graph))


def is_connected(graph: Graph) -> bool:
    """True if an undirected graph has at most one component (the empty graph counts)."""
    return number_of_connected_components(graph) <= 1


def largest_connected_component(graph: Graph) -> List[NodeId]:
    """Largest component of an undirected graph; the first one wins ties. Empty graph -> []."""
    components = connected_components(graph)
    if not components:
        return []
    largest = components[0]
    for component in components[1:]:
        if len(component) > len(largest):
            largest = component
    return largest


def get_connected_component(graph: Graph, node: NodeId) -> List[NodeId]:
    """
    Nodes in the same component as ``node``, in DFS discovery order.

    Raises:
        NodeNotFound: If node is not in graph.
        WrongGraphKind: If graph is directed.
    """
    if not graph.has_node(node):
        raise NodeNotFound(node)
    if graph.directed:
        raise WrongGraphKind("Connected components algorithm requires an undirected graph")
    return _collect_component(graph, node, set())


def strongly_connected_components(graph: Graph) -> List[List[NodeId]]:
    """
    Strongly connected components via Tarjan's algorithm.

    Each node gets a discovery index and a low-link value; when a node's
    low-link equals its own index, the stack is popped down to it to emit
    one SCC. Recursion is simulated with a stack of (node, neighbor
    iterator) frames.

    Returns:
        SCCs in the order Tarjan emits them (reverse topological order of
        the condensation); members in pop order.

    Raises:
        WrongGraphKind: If graph is undirected.

    Complexity: O(V + E).

    Example:
        >>> G = Graph(directed=True)
        >>> _ = G.add_edge(1, 2)
        >>> _ = G.add_edge(2, 1)
        >>> _ = G.add_edge(2, 3)
        >>> strongly_connected_components(G)
        [[3], [2, 1]]
    """
    if not graph.directed:
        raise WrongGraphKind("Strongly connected components require a directed graph")

    index: Dict[NodeId, int] = {}
    low_link: Dict[NodeId, int] = {}
    on_stack: Set[NodeId] = set()
    scc_stack: List[NodeId] = []
    components: List[List[NodeId]] = []
    counter = 0

    for root in graph.nodes():
        if root in index:
            continue

        index[root] = low_link[root] = counter
        counter += 1
        scc_stack.append(root)
        on_stack.add(root)
        work: List[Tuple[NodeId, Iterator[NodeId]]] = [(root, iter(graph.neighbors(root)))]

        while work:
            u, children = work[-1]
            descended = False

            for v in children:
                if v not in index:
                    index[v] = low_link[v] = counter
                    counter += 1
                    scc_stack.append(v)
                    on_stack.add(v)
                    work.append((v, iter(graph.neighbors(v))))
                    descended = True
                    break
                if v in on_stack:
                    low_link[u] = min(low_link[u], index[v])

            if descended:
                continue

            work.pop()
            if work:
                parent = work[-1][0]
                low_link[parent] = min(low_link[parent], low_link[u])

            if low_link[u] == index[u]:
                component = []
                while True:
                    w = scc_stack.pop()
                    on_stack.discard(w)
                    component.append(w)
                    if w == u:
                        break
                components.append(component)

    if is_debug_enabled():
        assert_partition(graph.nodes(), components)
    logger.debug("Tarjan found %d SCCs over %d nodes", len(components), graph.node_count)
    return components


def is_strongly_connected(graph: Graph) -> bool:
    """
    True if every node reaches every other node.

    Raises:
        WrongGraphKind: If graph is undirected.
    """
    if not graph.directed:
        raise WrongGraphKind("Strong connectivity check requires a directed graph")
    return len(strongly_connected_components(graph)) <= 1


def weakly_connected_components(graph: Graph) -> List[List[NodeId]]:
    """
    Components of a directed graph with edge direction ignored.

    Raises:
        WrongGraphKind: If graph is undirected.
    """
    if not graph.directed:
        raise WrongGraphKind(
            "Weakly connected components are for directed graphs. "
            "Use connected_components for undirected graphs."
        )
    return _union_find_components(graph)


def is_weakly_connected(graph: Graph) -> bool:
    if not graph.directed:
        raise WrongGraphKind("Weak connectivity check requires a directed graph")
    return len(weakly_connected_components(graph)) <= 1


def condensation_graph(graph: Graph) -> CondensationResult:
    """
    Build the condensation (SCC quotient graph) of a directed graph.

    The input graph is not modified. Parallel inter-component edges are
    merged into one edge of weight 1; intra-component edges are dropped,
    so the result is acyclic.

    Raises:
        WrongGraphKind: If graph is undirected.
    """
    if not graph.directed:
        raise WrongGraphKind("Condensation graph requires a directed graph")

    components = strongly_connected_components(graph)
    component_map: Dict[NodeId, int] = {}
    condensed = Graph(directed=True)

    for i, component in enumerate(components):
        for node in component:
            component_map[node] = i
        condensed.add_node(i, list(component))

    for edge in graph.edges():
        cs = component_map[edge.source]
        ct = component_map[edge.target]
        if cs != ct and not condensed.has_edge(cs, ct):
            condensed.add_edge(cs, ct)

    return CondensationResult(graph=condensed, component_map=component_map, components=components)
