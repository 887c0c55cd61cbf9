"""Tests for the Graph data model."""

import pytest

from graphengine import DegreeMode, Graph, InvalidParameter, NodeNotFound


class TestGraphConstruction:
    """Tests for building and mutating graphs."""

    def test_empty_graph(self):
        """A new graph has no nodes or edges."""
        G = Graph()
        assert G.node_count == 0
        assert G.edge_count == 0
        assert G.nodes() == []
        assert not G.directed
        assert not G.is_weighted

    def test_add_edge_creates_endpoints(self):
        """add_edge adds missing endpoints in insertion order."""
        G = Graph()
        G.add_edge("b", "a")
        assert G.nodes() == ["b", "a"]
        assert G.has_edge("a", "b")
        assert G.has_edge("b", "a")

    def test_directed_edge_is_one_way(self):
        """Directed edges are only visible from the source."""
        G = Graph(directed=True)
        G.add_edge(1, 2)
        assert G.has_edge(1, 2)
        assert not G.has_edge(2, 1)
        assert G.neighbors(1) == [2]
        assert G.neighbors(2) == []
        assert G.in_neighbors(2) == [1]

    def test_readding_edge_updates_weight(self):
        """Re-adding an edge updates it instead of creating a parallel one."""
        G = Graph()
        G.add_edge("A", "B", 1.0)
        edge = G.add_edge("B", "A", 4.0, data="x")
        assert G.edge_count == 1
        assert edge.weight == 4.0
        assert G.get_edge("A", "B").data == "x"
        assert G.is_weighted

    def test_node_payload(self):
        """Node payloads are stored and only replaced when data is given."""
        G = Graph()
        G.add_node("n", data={"color": "red"})
        G.add_node("n")
        assert G.get_node_data("n") == {"color": "red"}

    def test_get_node_data_missing(self):
        """Querying an unknown node raises NodeNotFound."""
        G = Graph()
        with pytest.raises(NodeNotFound, match="Node z not found in graph"):
            G.get_node_data("z")

    def test_remove_edge(self):
        """remove_edge reports whether something was removed."""
        G = Graph()
        G.add_edge(1, 2)
        assert G.remove_edge(2, 1)
        assert not G.has_edge(1, 2)
        assert not G.remove_edge(1, 2)
        assert G.nodes() == [1, 2]

    def test_remove_node_drops_incident_edges(self):
        """remove_node deletes the node and every incident edge."""
        G = Graph(directed=True)
        G.add_edge(1, 2)
        G.add_edge(3, 1)
        G.add_edge(2, 3)
        assert G.remove_node(1)
        assert G.nodes() == [2, 3]
        assert G.edge_count == 1
        assert G.in_neighbors(2) == []
        assert not G.remove_node(1)

    def test_self_loop(self):
        """A self-loop is a single edge and neighbor but adds two to the degree."""
        G = Graph()
        G.add_edge("x", "x")
        assert G.edge_count == 1
        assert G.neighbors("x") == ["x"]
        assert G.degree("x") == 2
        assert G.in_degree("x") == G.out_degree("x") == 2
        assert G.remove_edge("x", "x")
        assert G.edge_count == 0

    def test_copy_is_independent(self):
        """Mutating a copy leaves the original untouched."""
        G = Graph()
        G.add_edge(1, 2, 3.0)
        H = G.copy()
        H.add_edge(2, 3)
        H.get_edge(1, 2).weight = 9.0
        assert G.edge_count == 1
        assert G.get_edge(1, 2).weight == 3.0

    def test_edges_keep_orientation(self):
        """Undirected edges are listed once, oriented as added."""
        G = Graph()
        G.add_edge("a", "b")
        G.add_edge("c", "b")
        assert [e.endpoints() for e in G.edges()] == [("a", "b"), ("c", "b")]

    def test_total_weight(self):
        """total_weight sums every edge once."""
        G = Graph()
        G.add_edge(0, 1, 1.5)
        G.add_edge(1, 2, 2.5)
        assert G.total_weight() == 4.0


class TestDegree:
    """Tests for degree queries."""

    def test_undirected_degree(self, triangle):
        """Every triangle node has degree 2 in any mode."""
        for node in triangle.nodes():
            assert triangle.degree(node) == 2
            assert triangle.degree(node, "in") == 2

    def test_directed_degree_modes(self):
        """Directed degree distinguishes in, out and total."""
        G = Graph(directed=True)
        G.add_edge("a", "b")
        G.add_edge("c", "b")
        G.add_edge("b", "d")
        assert G.degree("b", DegreeMode.IN) == 2
        assert G.degree("b", "out") == 1
        assert G.degree("b") == 3

    def test_invalid_degree_mode(self, triangle):
        """Unknown degree modes are rejected."""
        with pytest.raises(InvalidParameter):
            triangle.degree("A", "sideways")

    def test_degree_unknown_node(self, triangle):
        """Degree of a missing node raises NodeNotFound."""
        with pytest.raises(NodeNotFound):
            triangle.degree("Z")

    def test_node_not_found_is_key_error(self):
        """NodeNotFound can be caught as KeyError."""
        G = Graph()
        with pytest.raises(KeyError):
            G.neighbors(0)
