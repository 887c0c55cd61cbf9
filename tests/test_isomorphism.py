"""Tests for VF2 graph isomorphism."""

import pytest

from graphengine import (
    Graph,
    debug_context,
    find_all_isomorphisms,
    is_graph_isomorphic,
)


def _relabel(graph: Graph, mapping) -> Graph:
    """Copy of ``graph`` with nodes renamed by ``mapping``, added in mapped order."""
    H = Graph(directed=graph.directed)
    for node in sorted(graph.nodes(), key=lambda n: mapping[n]):
        H.add_node(mapping[node])
    for edge in graph.edges():
        H.add_edge(mapping[edge.source], mapping[edge.target], edge.weight)
    return H


def _is_valid_isomorphism(g1: Graph, g2: Graph, mapping) -> bool:
    if sorted(mapping) != sorted(g1.nodes()) or len(set(mapping.values())) != g2.node_count:
        return False
    return all(g2.has_edge(mapping[e.source], mapping[e.target]) for e in g1.edges())


def _path(n: int) -> Graph:
    G = Graph()
    for i in range(n - 1):
        G.add_edge(i, i + 1)
    return G


class TestIsGraphIsomorphic:
    """Tests for the yes/no isomorphism query."""

    def test_graph_is_isomorphic_to_itself(self, barbell):
        """Every graph is isomorphic to itself."""
        result = is_graph_isomorphic(barbell, barbell)
        assert result.is_isomorphic
        assert _is_valid_isomorphism(barbell, barbell, result.mapping)

    def test_k4_relabeled(self, k4, rng):
        """K4 matches a randomly relabeled K4."""
        perm = rng.permutation(4)
        mapping = {node: f"v{int(perm[node])}" for node in k4.nodes()}
        H = _relabel(k4, mapping)

        result = is_graph_isomorphic(k4, H)
        assert result.is_isomorphic
        assert _is_valid_isomorphism(k4, H, result.mapping)

    def test_k4_vs_path(self, k4):
        """K4 and a 4-node path differ in degree sequence."""
        result = is_graph_isomorphic(k4, _path(4))
        assert not result.is_isomorphic
        assert result.mapping is None

    def test_random_relabeling(self, make_random_graph, rng):
        """Random graphs match random relabelings of themselves."""
        for directed in (False, True):
            for _ in range(5):
                G = make_random_graph(8, 0.35, directed=directed)
                perm = rng.permutation(8)
                mapping = {node: int(perm[node]) + 100 for node in G.nodes()}
                H = _relabel(G, mapping)
                with debug_context(True):
                    result = is_graph_isomorphic(G, H)
                assert result.is_isomorphic
                assert _is_valid_isomorphism(G, H, result.mapping)

    def test_same_degrees_different_structure(self):
        """A 6-cycle and two triangles share a degree sequence but differ."""
        cycle = Graph()
        for i in range(6):
            cycle.add_edge(i, (i + 1) % 6)
        triangles = Graph()
        for u, v in [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)]:
            triangles.add_edge(u, v)
        assert not is_graph_isomorphic(cycle, triangles).is_isomorphic

    def test_directed_orientation_matters(self):
        """A directed path is not an out-star even with equal total degrees."""
        chain = Graph(directed=True)
        chain.add_edge(1, 2)
        chain.add_edge(2, 3)
        star = Graph(directed=True)
        star.add_edge("b", "a")
        star.add_edge("b", "c")
        assert not is_graph_isomorphic(chain, star).is_isomorphic

    def test_directed_vs_undirected(self):
        """Graphs of different kinds are never isomorphic."""
        G = Graph()
        G.add_edge(1, 2)
        D = Graph(directed=True)
        D.add_edge(1, 2)
        assert not is_graph_isomorphic(G, D).is_isomorphic

    def test_self_loops(self):
        """Self-loops must map onto self-loops."""
        G1 = Graph()
        G1.add_edge("a", "a")
        G1.add_edge("a", "b")
        G2 = Graph()
        G2.add_edge(1, 2)
        G2.add_edge(2, 2)
        result = is_graph_isomorphic(G1, G2)
        assert result.is_isomorphic
        assert result.mapping == {"a": 2, "b": 1}

    def test_empty_graphs(self):
        """Two empty graphs are trivially isomorphic."""
        result = is_graph_isomorphic(Graph(), Graph())
        assert result.is_isomorphic
        assert result.mapping == {}

    def test_node_match(self):
        """Node labels restrict which pairs may be mapped."""
        G1 = Graph()
        G1.add_node("x", data="red")
        G1.add_node("y", data="blue")
        G1.add_edge("x", "y")
        G2 = Graph()
        G2.add_node(1, data="blue")
        G2.add_node(2, data="red")
        G2.add_edge(1, 2)

        def same_color(n1, n2):
            return G1.get_node_data(n1) == G2.get_node_data(n2)

        result = is_graph_isomorphic(G1, G2, node_match=same_color)
        assert result.mapping == {"x": 2, "y": 1}

    def test_edge_match(self):
        """Edge weights must agree under an edge predicate."""
        G1 = Graph()
        G1.add_edge(0, 1, 1.0)
        G1.add_edge(1, 2, 2.0)
        G2 = Graph()
        G2.add_edge("a", "b", 1.0)
        G2.add_edge("b", "c", 3.0)

        def same_weight(e1, e2):
            return e1.weight == e2.weight

        assert is_graph_isomorphic(G1, G2).is_isomorphic
        assert not is_graph_isomorphic(G1, G2, edge_match=same_weight).is_isomorphic


class TestFindAllIsomorphisms:
    """Tests for enumerating every isomorphism."""

    def test_triangle_automorphisms(self, triangle):
        """A triangle has 3! automorphisms."""
        mappings = find_all_isomorphisms(triangle, triangle)
        assert len(mappings) == 6
        assert len({tuple(sorted(m.items())) for m in mappings}) == 6

    def test_path_automorphisms(self):
        """A path maps onto itself forwards and backwards."""
        mappings = find_all_isomorphisms(_path(4), _path(4))
        assert mappings == [{0: 0, 1: 1, 2: 2, 3: 3}, {0: 3, 1: 2, 2: 1, 3: 0}]

    def test_k4_automorphisms(self, k4):
        """K4 has 4! automorphisms."""
        assert len(find_all_isomorphisms(k4, k4)) == 24

    def test_directed_cycle(self):
        """A directed 3-cycle has only its 3 rotations."""
        G = Graph(directed=True)
        for u, v in [(0, 1), (1, 2), (2, 0)]:
            G.add_edge(u, v)
        assert len(find_all_isomorphisms(G, G)) == 3

    def test_no_isomorphism(self, k4):
        """Non-isomorphic graphs have no mappings."""
        assert find_all_isomorphisms(k4, _path(4)) == []

    def test_empty_graphs(self):
        """Two empty graphs have one empty isomorphism."""
        assert find_all_isomorphisms(Graph(), Graph()) == [{}]

    @pytest.mark.parametrize("n", [3, 5])
    def test_every_mapping_is_valid(self, n):
        """Every enumerated mapping preserves edges."""
        cycle = Graph()
        for i in range(n):
            cycle.add_edge(i, (i + 1) % n)
        mappings = find_all_isomorphisms(cycle, cycle)
        assert len(mappings) == 2 * n
        assert all(_is_valid_isomorphism(cycle, cycle, m) for m in mappings)
