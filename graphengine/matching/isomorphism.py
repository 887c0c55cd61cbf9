"""
Graph isomorphism with the VF2 algorithm.

The search extends a partial bijection core_1 (G1 -> G2) / core_2 (G2 -> G1)
one pair at a time. Terminal sets in_1/out_1 (and in_2/out_2) hold the
unmapped nodes adjacent to the mapped part, keyed to the depth at which
they joined. Backtracking is iterative: a stack of candidate iterators
drives the search and every state change is recorded in an undo log, so
undoing a pair restores the previous state exactly without copying it.

References:
    - Cordella, L. P., Foggia, P., Sansone, C., Vento, M. "A (sub)graph
      isomorphism algorithm for matching large graphs", IEEE TPAMI 26(10), 2004.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from ..core.graph import Edge, Graph, NodeId
from ..diagnostics import assert_inverse_mappings, is_debug_enabled
from ..logging import get_logger

logger = get_logger(__name__)

NodeMatch = Callable[[NodeId, NodeId], bool]
EdgeMatch = Callable[[Edge, Edge], bool]

_ABSENT = object()


@dataclass
class IsomorphismResult:
    """
    Outcome of an isomorphism test.

    Attributes:
        is_isomorphic: True if a structure-preserving bijection exists.
        mapping: One such bijection (G1 node -> G2 node), or None.
    """

    is_isomorphic: bool
    mapping: Optional[Dict[NodeId, NodeId]] = None


class _VF2State:
    """Mutable VF2 search state with an undo log per added pair."""

    def __init__(self, g1: Graph, g2: Graph):
        self.g1 = g1
        self.g2 = g2
        self.core_1: Dict[NodeId, NodeId] = {}
        self.core_2: Dict[NodeId, NodeId] = {}
        self.in_1: Dict[NodeId, int] = {}
        self.out_1: Dict[NodeId, int] = {}
        self.in_2: Dict[NodeId, int] = {}
        self.out_2: Dict[NodeId, int] = {}
        self.depth = 0
        self._undo: List[List[Tuple[Dict[NodeId, Any], NodeId, Any]]] = []

    @staticmethod
    def _set(log: list, table: Dict[NodeId, Any], key: NodeId, value: Any) -> None:
        log.append((table, key, table.get(key, _ABSENT)))
        table[key] = value

    @staticmethod
    def _discard(log: list, table: Dict[NodeId, Any], key: NodeId) -> None:
        if key in table:
            log.append((table, key, table.pop(key)))

    def _extend_frontier(
        self,
        log: list,
        graph: Graph,
        node: NodeId,
        core: Dict[NodeId, NodeId],
        term_in: Dict[NodeId, int],
        term_out: Dict[NodeId, int],
    ) -> None:
        for nbr in graph.in_neighbors(node):
            if nbr not in core and nbr not in term_in:
                self._set(log, term_in, nbr, self.depth)
        for nbr in graph.neighbors(node):
            if nbr not in core and nbr not in term_out:
                self._set(log, term_out, nbr, self.depth)

    def push(self, node1: NodeId, node2: NodeId) -> None:
        """Add the pair (node1, node2) to the mapping."""
        log: list = []
        self.depth += 1

        self._set(log, self.core_1, node1, node2)
        self._set(log, self.core_2, node2, node1)
        for table in (self.in_1, self.out_1):
            self._discard(log, table, node1)
        for table in (self.in_2, self.out_2):
            self._discard(log, table, node2)

        self._extend_frontier(log, self.g1, node1, self.core_1, self.in_1, self.out_1)
        self._extend_frontier(log, self.g2, node2, self.core_2, self.in_2, self.out_2)
        self._undo.append(log)

    def pop(self) -> None:
        """Undo the most recent push."""
        for table, key, old in reversed(self._undo.pop()):
            if old is _ABSENT:
                del table[key]
            else:
                table[key] = old
        self.depth -= 1


class _VF2Matcher:
    def __init__(
        self,
        g1: Graph,
        g2: Graph,
        node_match: Optional[NodeMatch],
        edge_match: Optional[EdgeMatch],
    ):
        self.g1 = g1
        self.g2 = g2
        self.node_match = node_match
        self.edge_match = edge_match
        self.nodes1 = g1.nodes()
        self.nodes2 = g2.nodes()
        self.degree1 = {n: g1.degree(n) for n in self.nodes1}
        self.degree2 = {n: g2.degree(n) for n in self.nodes2}
        self.state = _VF2State(g1, g2)

    def _candidates(self) -> Iterator[Tuple[NodeId, NodeId]]:
        state = self.state
        node1 = next(iter(state.out_1), None)
        if node1 is None:
            node1 = next(iter(state.in_1), None)
        if node1 is None:
            node1 = next((n for n in self.nodes1 if n not in state.core_1), None)
        if node1 is None:
            return iter(())

        degree = self.degree1[node1]
        pairs = [
            (node1, node2)
            for node2 in self.nodes2
            if node2 not in state.core_2 and self.degree2[node2] == degree
        ]
        return iter(pairs)

    def _mapped_neighbors_agree(
        self,
        nbrs1: List[NodeId],
        nbrs2: List[NodeId],
        node1: NodeId,
        node2: NodeId,
        outgoing: bool,
    ) -> bool:
        core_1, core_2 = self.state.core_1, self.state.core_2
        targets2 = set(nbrs2)
        matched = 0
        for n1 in nbrs1:
            if n1 == node1 or n1 not in core_1:
                continue
            n2 = core_1[n1]
            if n2 not in targets2:
                return False
            if self.edge_match is not None:
                if outgoing:
                    e1, e2 = self.g1.get_edge(node1, n1), self.g2.get_edge(node2, n2)
                else:
                    e1, e2 = self.g1.get_edge(n1, node1), self.g2.get_edge(n2, node2)
                if not self.edge_match(e1, e2):
                    return False
            matched += 1
        mapped2 = sum(1 for n2 in nbrs2 if n2 != node2 and n2 in core_2)
        return matched == mapped2

    def _frontier_counts(
        self,
        graph: Graph,
        node: NodeId,
        core: Dict[NodeId, NodeId],
        term_in: Dict[NodeId, int],
        term_out: Dict[NodeId, int],
    ) -> Tuple[int, int, int, int]:
        succ = graph.neighbors(node)
        pred = graph.in_neighbors(node)
        succ_set = set(succ)
        pred_set = set(pred)

        t_in = t_out = new_in = new_out = 0
        for nbr in dict.fromkeys(succ + pred):
            if nbr in core or nbr == node:
                continue
            if nbr in term_in:
                t_in += 1
            elif nbr in term_out:
                t_out += 1
            else:
                if nbr in pred_set:
                    new_in += 1
                if nbr in succ_set:
                    new_out += 1
        return t_in, t_out, new_in, new_out

    def feasible(self, node1: NodeId, node2: NodeId) -> bool:
        if self.node_match is not None and not self.node_match(node1, node2):
            return False

        g1, g2 = self.g1, self.g2
        loop1, loop2 = g1.has_edge(node1, node1), g2.has_edge(node2, node2)
        if loop1 != loop2:
            return False
        if loop1 and self.edge_match is not None:
            if not self.edge_match(g1.get_edge(node1, node1), g2.get_edge(node2, node2)):
                return False

        if not self._mapped_neighbors_agree(
            g1.neighbors(node1), g2.neighbors(node2), node1, node2, outgoing=True
        ):
            return False
        if g1.directed and not self._mapped_neighbors_agree(
            g1.in_neighbors(node1), g2.in_neighbors(node2), node1, node2, outgoing=False
        ):
            return False

        state = self.state
        counts1 = self._frontier_counts(g1, node1, state.core_1, state.in_1, state.out_1)
        counts2 = self._frontier_counts(g2, node2, state.core_2, state.in_2, state.out_2)
        return counts1 == counts2

    def search(self, find_all: bool) -> List[Dict[NodeId, NodeId]]:
        """Run the backtracking search; stop at the first mapping unless find_all."""
        n = len(self.nodes1)
        state = self.state
        mappings: List[Dict[NodeId, NodeId]] = []
        if n == 0:
            return [{}]

        stack: List[Iterator[Tuple[NodeId, NodeId]]] = [self._candidates()]
        explored = 0

        while stack:
            pair = next(stack[-1], None)
            if pair is None:
                stack.pop()
                if stack:
                    state.pop()
                continue

            node1, node2 = pair
            if not self.feasible(node1, node2):
                continue

            explored += 1
            state.push(node1, node2)
            if len(state.core_1) == n:
                if is_debug_enabled():
                    assert_inverse_mappings(state.core_1, state.core_2)
                mappings.append(dict(state.core_1))
                if not find_all:
                    break
                state.pop()
                continue

            stack.append(self._candidates())

        logger.debug("VF2 explored %d states, found %d mapping(s)", explored, len(mappings))
        return mappings


def _quick_reject(g1: Graph, g2: Graph) -> bool:
    """Cheap invariants that rule out isomorphism."""
    if g1.node_count != g2.node_count or g1.edge_count != g2.edge_count:
        return True
    if g1.directed != g2.directed:
        return True
    degrees1 = sorted(g1.degree(n) for n in g1.nodes())
    degrees2 = sorted(g2.degree(n) for n in g2.nodes())
    return degrees1 != degrees2


def is_graph_isomorphic(
    g1: Graph,
    g2: Graph,
    node_match: Optional[NodeMatch] = None,
    edge_match: Optional[EdgeMatch] = None,
) -> IsomorphismResult:
    """
    Test whether two graphs are isomorphic.

    Args:
        g1: First graph.
        g2: Second graph.
        node_match: Optional ``node_match(node1, node2)`` predicate a mapped
            pair must satisfy.
        edge_match: Optional ``edge_match(edge1, edge2)`` predicate every pair
            of corresponding edges must satisfy.

    Returns:
        IsomorphismResult with the first mapping found.

    Complexity: O(V! * V) worst case; far less in practice thanks to
    pruning.

    Example:
        >>> G1 = Graph()
        >>> _ = G1.add_edge('a', 'b')
        >>> G2 = Graph()
        >>> _ = G2.add_edge(1, 2)
        >>> is_graph_isomorphic(G1, G2).mapping
        {'a': 1, 'b': 2}
    """
    if _quick_reject(g1, g2):
        return IsomorphismResult(is_isomorphic=False)

    mappings = _VF2Matcher(g1, g2, node_match, edge_match).search(find_all=False)
    if mappings:
        return IsomorphismResult(is_isomorphic=True, mapping=mappings[0])
    return IsomorphismResult(is_isomorphic=False)


def find_all_isomorphisms(
    g1: Graph,
    g2: Graph,
    node_match: Optional[NodeMatch] = None,
    edge_match: Optional[EdgeMatch] = None,
) -> List[Dict[NodeId, NodeId]]:
    """
    Every isomorphism from g1 to g2.

    Two empty graphs have exactly one (empty) isomorphism.

    Returns:
        List of mappings (G1 node -> G2 node), in search order.
    """
    if _quick_reject(g1, g2):
        return []
    return _VF2Matcher(g1, g2, node_match, edge_match).search(find_all=True)
