"""Tests for connected, weakly and strongly connected components."""

import pytest

from graphengine import (
    Graph,
    NodeNotFound,
    WrongGraphKind,
    condensation_graph,
    connected_components,
    connected_components_dfs,
    debug_context,
    get_connected_component,
    is_connected,
    is_partition,
    is_strongly_connected,
    is_weakly_connected,
    largest_connected_component,
    number_of_connected_components,
    strongly_connected_components,
    topological_sort,
    weakly_connected_components,
)


@pytest.fixture
def two_islands() -> Graph:
    G = Graph()
    G.add_edge(1, 2)
    G.add_edge(2, 3)
    G.add_edge(4, 5)
    G.add_node(6)
    return G


class TestConnectedComponents:
    """Tests for undirected connectivity."""

    def test_components(self, two_islands):
        """Components are ordered by first node and keep insertion order."""
        assert connected_components(two_islands) == [[1, 2, 3], [4, 5], [6]]
        assert number_of_connected_components(two_islands) == 3
        assert not is_connected(two_islands)

    def test_dfs_variant_same_partition(self, two_islands):
        """The DFS variant finds the same sets."""
        components = connected_components_dfs(two_islands)
        assert [sorted(c) for c in components] == [[1, 2, 3], [4, 5], [6]]

    def test_connected_graph(self, barbell):
        """A connected graph has one component."""
        assert is_connected(barbell)
        assert connected_components(barbell) == [barbell.nodes()]

    def test_empty_graph_is_connected(self):
        """The empty graph has zero components and counts as connected."""
        G = Graph()
        assert connected_components(G) == []
        assert is_connected(G)
        assert largest_connected_component(G) == []

    def test_largest_component(self, two_islands):
        """The largest component wins; ties go to the first."""
        assert largest_connected_component(two_islands) == [1, 2, 3]
        G = Graph()
        G.add_edge("a", "b")
        G.add_edge("c", "d")
        assert largest_connected_component(G) == ["a", "b"]

    def test_get_connected_component(self, two_islands):
        """The component containing a node is returned."""
        assert sorted(get_connected_component(two_islands, 5)) == [4, 5]
        assert get_connected_component(two_islands, 6) == [6]
        with pytest.raises(NodeNotFound):
            get_connected_component(two_islands, 99)

    def test_directed_rejected(self):
        """Undirected connectivity rejects directed graphs."""
        G = Graph(directed=True)
        G.add_edge(1, 2)
        with pytest.raises(WrongGraphKind):
            connected_components(G)
        with pytest.raises(WrongGraphKind):
            connected_components_dfs(G)

    def test_partition_invariant(self, make_random_graph):
        """Components always partition the node set."""
        for _ in range(10):
            G = make_random_graph(12, 0.12)
            with debug_context(True):
                components = connected_components(G)
            assert is_partition(G.nodes(), components)
            assert is_partition(G.nodes(), connected_components_dfs(G))


class TestWeakComponents:
    """Tests for weak connectivity."""

    def test_weak_components(self):
        """Direction is ignored."""
        G = Graph(directed=True)
        G.add_edge(1, 2)
        G.add_edge(3, 2)
        G.add_edge(4, 5)
        assert weakly_connected_components(G) == [[1, 2, 3], [4, 5]]
        assert not is_weakly_connected(G)

    def test_weakly_connected(self):
        """A directed path is weakly connected."""
        G = Graph(directed=True)
        G.add_edge("a", "b")
        G.add_edge("c", "b")
        assert is_weakly_connected(G)

    def test_undirected_rejected(self, path4):
        """Weak connectivity requires a directed graph."""
        with pytest.raises(WrongGraphKind):
            weakly_connected_components(path4)
        with pytest.raises(WrongGraphKind):
            is_weakly_connected(path4)


class TestStronglyConnectedComponents:
    """Tests for Tarjan's SCC algorithm."""

    def test_small_example(self):
        """SCCs come out in reverse topological order."""
        G = Graph(directed=True)
        G.add_edge(1, 2)
        G.add_edge(2, 1)
        G.add_edge(2, 3)
        assert strongly_connected_components(G) == [[3], [2, 1]]

    def test_classic_example(self):
        """Three SCCs in a textbook digraph."""
        G = Graph(directed=True)
        for u, v in [("a", "b"), ("b", "c"), ("c", "a"), ("b", "d"), ("d", "e"), ("e", "d"), ("e", "f")]:
            G.add_edge(u, v)
        components = [sorted(c) for c in strongly_connected_components(G)]
        assert components == [["f"], ["d", "e"], ["a", "b", "c"]]

    def test_is_strongly_connected(self):
        """A directed cycle is strongly connected; a path is not."""
        G = Graph(directed=True)
        for u, v in [(0, 1), (1, 2), (2, 0)]:
            G.add_edge(u, v)
        assert is_strongly_connected(G)
        G.remove_edge(2, 0)
        assert not is_strongly_connected(G)

    def test_deep_graph(self):
        """A long cycle does not exhaust the interpreter stack."""
        G = Graph(directed=True)
        n = 3000
        for i in range(n):
            G.add_edge(i, (i + 1) % n)
        assert len(strongly_connected_components(G)) == 1

    def test_partition_invariant(self, make_random_graph):
        """SCCs partition the node set."""
        for _ in range(10):
            G = make_random_graph(10, 0.15, directed=True)
            with debug_context(True):
                components = strongly_connected_components(G)
            assert is_partition(G.nodes(), components)

    def test_undirected_rejected(self, path4):
        """SCCs require a directed graph."""
        with pytest.raises(WrongGraphKind):
            strongly_connected_components(path4)
        with pytest.raises(WrongGraphKind):
            is_strongly_connected(path4)


class TestCondensation:
    """Tests for the SCC quotient graph."""

    def test_condensation_is_dag(self):
        """The condensation of any digraph is acyclic."""
        G = Graph(directed=True)
        for u, v in [(1, 2), (2, 1), (2, 3), (3, 4), (4, 3), (1, 4)]:
            G.add_edge(u, v)

        result = condensation_graph(G)
        assert result.graph.directed
        assert result.graph.node_count == 2
        assert result.graph.edge_count == 1
        assert topological_sort(result.graph) is not None
        assert result.component_map[1] == result.component_map[2]
        assert result.component_map[3] == result.component_map[4]
        assert result.component_map[1] != result.component_map[3]

    def test_payload_is_member_list(self):
        """Each condensed node carries its member list."""
        G = Graph(directed=True)
        G.add_edge("x", "y")
        result = condensation_graph(G)
        for idx, members in enumerate(result.components):
            assert result.graph.get_node_data(idx) == members
