"""
Core graph data structure.

Provides a single ``Graph`` class for directed and undirected, weighted and
unweighted graphs. Storage is a set of flat tables keyed by node id:

- ``_nodes``: node -> optional payload
- ``_succ``: node -> {successor: Edge}
- ``_pred``: node -> {predecessor: Edge} (directed graphs only)
- ``_edges``: (source, target) -> Edge, in insertion order

Adjacency holds ids, never references to other node objects, so a graph can
be copied or rebuilt without aliasing. Nodes, neighbors and edges are
returned in insertion order; algorithms rely on that order for
deterministic tie-breaking.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Hashable, Iterator, List, Optional, Tuple, Union

from ..exceptions import InvalidParameter, NodeNotFound

NodeId = Hashable


class DegreeMode(str, Enum):
    """Which incident edges a degree query counts on a directed graph."""

    IN = "in"
    OUT = "out"
    TOTAL = "total"


@dataclass
class Edge:
    """
    A single edge.

    For undirected graphs ``source``/``target`` record the orientation the
    edge was added with; ``(u, v)`` and ``(v, u)`` resolve to the same Edge.

    Attributes:
        source: Source node id.
        target: Target node id.
        weight: Numeric weight (default 1.0).
        data: Optional opaque payload.
    """

    source: NodeId
    target: NodeId
    weight: float = 1.0
    data: Any = None

    def endpoints(self) -> Tuple[NodeId, NodeId]:
        """Return ``(source, target)``."""
        return self.source, self.target


class Graph:
    """
    Graph with adjacency-table representation.

    Supports directed and undirected graphs. ``directed`` is fixed at
    construction. ``is_weighted`` becomes True once any edge carries a
    weight other than 1.

    Complexity:
        - add_node / add_edge / has_edge / get_edge: O(1) average
        - neighbors: O(deg(v))
        - remove_node: O(deg(v))
        - nodes / edges: O(V) / O(E)

    Example:
        >>> G = Graph()
        >>> _ = G.add_edge("A", "B", 2.0)
        >>> G.degree("A")
        1
    """

    def __init__(self, directed: bool = False):
        """
        Initialize an empty graph.

        Args:
            directed: If True, graph is directed; otherwise undirected.
        """
        self._directed = bool(directed)
        self._nodes: Dict[NodeId, Any] = {}
        self._succ: Dict[NodeId, Dict[NodeId, Edge]] = {}
        self._pred: Dict[NodeId, Dict[NodeId, Edge]] = {}
        self._edges: Dict[Tuple[NodeId, NodeId], Edge] = {}
        self._weighted = False

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"Graph({kind}, nodes={self.node_count}, edges={self.edge_count})"

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node: NodeId) -> bool:
        return node in self._nodes

    def __iter__(self) -> Iterator[NodeId]:
        return iter(self._nodes)

    @property
    def directed(self) -> bool:
        """True for directed graphs."""
        return self._directed

    @property
    def is_weighted(self) -> bool:
        """True once any edge has been given a weight other than 1."""
        return self._weighted

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        """Number of edges (an undirected edge counts once)."""
        return len(self._edges)

    # ------------------------------------------------------------------
    # mutation
    # ------------------------------------------------------------------

    def add_node(self, node: NodeId, data: Any = None) -> None:
        """
        Add a node to the graph.

        Adding an existing node keeps its adjacency and replaces the payload
        only when ``data`` is given.

        Args:
            node: Hashable node identifier (int or str).
            data: Optional payload.
        """
        if node not in self._nodes:
            self._nodes[node] = data
            self._succ[node] = {}
            if self._directed:
                self._pred[node] = {}
        elif data is not None:
            self._nodes[node] = data

    def add_edge(
        self,
        u: NodeId,
        v: NodeId,
        weight: float = 1.0,
        data: Any = None,
    ) -> Edge:
        """
        Add an edge from u to v, creating missing endpoints.

        Re-adding an existing edge (in either orientation for undirected
        graphs) updates its weight and payload instead of creating a
        parallel edge.

        Args:
            u: Source node.
            v: Target node.
            weight: Edge weight (default 1.0).
            data: Optional payload.

        Returns:
            The stored Edge.
        """
        self.add_node(u)
        self.add_node(v)

        weight = float(weight)
        if weight != 1.0:
            self._weighted = True

        existing = self._succ[u].get(v)
        if existing is not None:
            existing.weight = weight
            existing.data = data
            return existing

        edge = Edge(u, v, weight, data)
        self._edges[(u, v)] = edge
        self._succ[u][v] = edge
        if self._directed:
            self._pred[v][u] = edge
        else:
            self._succ[v][u] = edge
        return edge

    def remove_edge(self, u: NodeId, v: NodeId) -> bool:
        """
        Remove the edge u -> v (or u - v).

        Returns:
            True if an edge was removed, False if none existed.
        """
        edge = self._succ.get(u, {}).get(v)
        if edge is None:
            return False

        del self._edges[(edge.source, edge.target)]
        del self._succ[u][v]
        if self._directed:
            del self._pred[v][u]
        elif u != v:
            del self._succ[v][u]
        return True

    def remove_node(self, node: NodeId) -> bool:
        """
        Remove a node and every incident edge.

        Returns:
            True if the node existed, False otherwise.
        """
        if node not in self._nodes:
            return False

        for v in list(self._succ[node]):
            self.remove_edge(node, v)
        if self._directed:
            for u in list(self._pred[node]):
                self.remove_edge(u, node)
            del self._pred[node]

        del self._succ[node]
        del self._nodes[node]
        return True

    # ------------------------------------------------------------------
    # queries
    # ------------------------------------------------------------------

    def _require(self, node: NodeId) -> None:
        if node not in self._nodes:
            raise NodeNotFound(node)

    def has_node(self, node: NodeId) -> bool:
        return node in self._nodes

    def has_edge(self, u: NodeId, v: NodeId) -> bool:
        """True if an edge u -> v exists (either orientation if undirected)."""
        return v in self._succ.get(u, {})

    def get_edge(self, u: NodeId, v: NodeId) -> Optional[Edge]:
        """Return the edge u -> v, or None if absent."""
        return self._succ.get(u, {}).get(v)

    def get_node_data(self, node: NodeId) -> Any:
        """
        Return the payload attached to ``node``.

        Raises:
            NodeNotFound: If node is not in graph.
        """
        self._require(node)
        return self._nodes[node]

    def nodes(self) -> List[NodeId]:
        """Return all nodes in insertion order."""
        return list(self._nodes)

    def edges(self) -> List[Edge]:
        """
        Return all edges in insertion order.

        Each undirected edge appears once, oriented the way it was added.
        """
        return list(self._edges.values())

    def neighbors(self, node: NodeId) -> List[NodeId]:
        """
        Return the successors of ``node`` (all neighbors if undirected).

        Raises:
            NodeNotFound: If node is not in graph.
        """
        self._require(node)
        return list(self._succ[node])

    def in_neighbors(self, node: NodeId) -> List[NodeId]:
        """
        Return the predecessors of ``node`` (all neighbors if undirected).

        Raises:
            NodeNotFound: If node is not in graph.
        """
        self._require(node)
        if self._directed:
            return list(self._pred[node])
        return list(self._succ[node])

    def incident_edges(self, node: NodeId) -> List[Tuple[NodeId, Edge]]:
        """Return ``(neighbor, edge)`` pairs for the out-edges of ``node``."""
        self._require(node)
        return list(self._succ[node].items())

    def _undirected_degree(self, node: NodeId) -> int:
        # A self-loop touches its node twice.
        neighbors = self._succ[node]
        return len(neighbors) + (node in neighbors)

    def out_degree(self, node: NodeId) -> int:
        self._require(node)
        if self._directed:
            return len(self._succ[node])
        return self._undirected_degree(node)

    def in_degree(self, node: NodeId) -> int:
        self._require(node)
        if self._directed:
            return len(self._pred[node])
        return self._undirected_degree(node)

    def degree(self, node: NodeId, mode: Union[DegreeMode, str] = DegreeMode.TOTAL) -> int:
        """
        Number of edge endpoints at ``node``.

        On a directed graph ``mode`` selects in-, out- or total (in + out)
        degree. On an undirected graph every mode returns the same value:
        the number of distinct neighbors, with a self-loop counted twice, so
        degrees always sum to ``2 * edge_count``.

        Raises:
            NodeNotFound: If node is not in graph.
            InvalidParameter: If mode is not one of in/out/total.
        """
        self._require(node)
        mode = coerce_degree_mode(mode)
        if not self._directed:
            return self._undirected_degree(node)
        if mode is DegreeMode.IN:
            return len(self._pred[node])
        if mode is DegreeMode.OUT:
            return len(self._succ[node])
        return len(self._pred[node]) + len(self._succ[node])

    def total_weight(self) -> float:
        """Sum of all edge weights (an undirected edge counts once)."""
        return sum(edge.weight for edge in self._edges.values())

    def copy(self) -> "Graph":
        """Return an independent copy with the same nodes, edges and payloads."""
        clone = Graph(directed=self._directed)
        for node, data in self._nodes.items():
            clone.add_node(node, data)
        for edge in self._edges.values():
            clone.add_edge(edge.source, edge.target, edge.weight, edge.data)
        return clone


def coerce_degree_mode(mode: Union[DegreeMode, str]) -> DegreeMode:
    """Convert a string such as ``"in"`` to a :class:`DegreeMode`."""
    try:
        return DegreeMode(mode)
    except ValueError:
        raise InvalidParameter(
            f"Degree mode must be one of 'in', 'out', 'total', got {mode!r}"
        ) from None
