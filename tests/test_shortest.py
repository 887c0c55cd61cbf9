"""Tests for Dijkstra, Bellman-Ford and Floyd-Warshall."""

import math

import pytest

from graphengine import (
    Graph,
    NegativeCycle,
    NodeNotFound,
    UnsupportedWeight,
    bellman_ford,
    bellman_ford_path,
    dijkstra,
    dijkstra_path,
    floyd_warshall,
    has_negative_cycle,
    single_source_shortest_path_length,
)


@pytest.fixture
def weighted_digraph() -> Graph:
    G = Graph(directed=True)
    G.add_edge("A", "B", 1.0)
    G.add_edge("B", "C", 2.0)
    G.add_edge("A", "C", 5.0)
    G.add_edge("C", "D", 1.0)
    return G


class TestDijkstra:
    """Tests for Dijkstra's algorithm."""

    def test_distances_and_predecessors(self, weighted_digraph):
        """A->B->C beats the direct A->C edge."""
        dist, parent = dijkstra(weighted_digraph, "A")
        assert dist == {"A": 0.0, "B": 1.0, "C": 3.0, "D": 4.0}
        assert parent["A"] is None
        assert parent["C"] == "B"

    def test_unreached_nodes_absent(self):
        """Unreachable nodes are left out rather than reported as inf."""
        G = Graph(directed=True)
        G.add_edge("A", "B", 1.0)
        G.add_node("C")
        dist, parent = dijkstra(G, "A")
        assert "C" not in dist
        assert "C" not in parent

    def test_negative_weight_raises(self):
        """A negative edge met during relaxation is unsupported."""
        G = Graph(directed=True)
        G.add_edge("A", "B", -1.0)
        with pytest.raises(UnsupportedWeight, match="non-negative"):
            dijkstra(G, "A")

    def test_unreachable_negative_weight_ignored(self):
        """Negative edges the search never touches are not an error."""
        G = Graph(directed=True)
        G.add_edge("A", "B", 1.0)
        G.add_edge("X", "Y", -3.0)
        dist, _ = dijkstra(G, "A")
        assert dist == {"A": 0.0, "B": 1.0}

    def test_missing_source(self):
        """Unknown sources raise NodeNotFound."""
        with pytest.raises(NodeNotFound):
            dijkstra(Graph(), "A")

    def test_cutoff(self, weighted_digraph):
        """Nodes beyond the cutoff are not finalized."""
        assert single_source_shortest_path_length(weighted_digraph, "A", cutoff=2.0) == {"A": 0.0, "B": 1.0}

    def test_undirected_edges_both_ways(self):
        """Undirected edges can be traversed from either end."""
        G = Graph()
        G.add_edge("A", "B", 2.0)
        G.add_edge("C", "B", 3.0)
        dist, _ = dijkstra(G, "C")
        assert dist["A"] == 5.0


class TestDijkstraPath:
    """Tests for single-pair shortest paths."""

    def test_path(self, weighted_digraph):
        """The full shortest path is reconstructed."""
        result = dijkstra_path(weighted_digraph, "A", "D")
        assert result.path == ["A", "B", "C", "D"]
        assert result.distance == 4.0

    def test_same_source_and_target(self, weighted_digraph):
        """A node is at distance 0 from itself."""
        result = dijkstra_path(weighted_digraph, "B", "B")
        assert result.distance == 0.0
        assert result.path == ["B"]

    def test_unreachable_target(self, weighted_digraph):
        """An unreachable target gives None."""
        assert dijkstra_path(weighted_digraph, "D", "A") is None

    def test_missing_target(self, weighted_digraph):
        """Unknown targets raise NodeNotFound."""
        with pytest.raises(NodeNotFound, match="Target node"):
            dijkstra_path(weighted_digraph, "A", "Z")


class TestBellmanFord:
    """Tests for Bellman-Ford."""

    def test_negative_edge(self):
        """Negative edges are handled."""
        G = Graph(directed=True)
        G.add_edge("A", "B", 4.0)
        G.add_edge("A", "C", 2.0)
        G.add_edge("C", "B", -1.0)
        result = bellman_ford(G, "A")
        assert not result.has_negative_cycle
        assert result.distances["B"] == 1.0
        assert result.predecessors["B"] == "C"

    def test_unreached_is_infinite(self):
        """Unreached nodes stay at infinity with no predecessor."""
        G = Graph(directed=True)
        G.add_edge(1, 2, 1.0)
        G.add_node(3)
        result = bellman_ford(G, 1)
        assert math.isinf(result.distances[3])
        assert result.predecessors[3] is None

    def test_negative_cycle_reported(self):
        """A reachable negative cycle is reported on the result."""
        G = Graph(directed=True)
        G.add_edge("S", "A", 1.0)
        G.add_edge("A", "B", -2.0)
        G.add_edge("B", "A", 1.0)
        result = bellman_ford(G, "S")
        assert result.has_negative_cycle
        assert {"A", "B"} & result.negative_cycle_nodes

    def test_path_under_negative_cycle_raises(self):
        """Path queries fail when a negative cycle is reachable."""
        G = Graph(directed=True)
        G.add_edge("A", "B", -1.0)
        G.add_edge("B", "A", -1.0)
        with pytest.raises(NegativeCycle):
            bellman_ford_path(G, "A", "B")

    def test_path(self):
        """bellman_ford_path reconstructs the path through a negative edge."""
        G = Graph(directed=True)
        G.add_edge("A", "B", 4.0)
        G.add_edge("A", "C", 2.0)
        G.add_edge("C", "B", -1.0)
        result = bellman_ford_path(G, "A", "B")
        assert result.path == ["A", "C", "B"]
        assert result.distance == 1.0
        assert bellman_ford_path(G, "B", "A") is None

    def test_missing_source(self):
        """Unknown sources raise NodeNotFound."""
        G = Graph(directed=True)
        G.add_node("A")
        with pytest.raises(NodeNotFound):
            bellman_ford(G, "Q")


class TestHasNegativeCycle:
    """Tests for whole-graph negative-cycle detection."""

    def test_two_cycle(self):
        """A directed 2-cycle of weight -1 edges is negative."""
        G = Graph(directed=True)
        G.add_edge("A", "B", -1.0)
        G.add_edge("B", "A", -1.0)
        assert has_negative_cycle(G)

    def test_cycle_unreachable_from_first_node(self):
        """Cycles not reachable from the first node are still found."""
        G = Graph(directed=True)
        G.add_edge("start", "x", 1.0)
        G.add_edge("p", "q", 1.0)
        G.add_edge("q", "p", -5.0)
        assert has_negative_cycle(G)

    def test_no_cycle(self, weighted_digraph):
        """Non-negative graphs have no negative cycle."""
        assert not has_negative_cycle(weighted_digraph)

    def test_undirected_negative_edge(self):
        """An undirected negative edge is a negative cycle of length two."""
        G = Graph()
        G.add_edge(0, 1, -1.0)
        assert has_negative_cycle(G)


class TestFloydWarshall:
    """Tests for all-pairs shortest paths."""

    def test_all_pairs(self, weighted_digraph):
        """Distances and paths for every pair."""
        dist, path = floyd_warshall(weighted_digraph)
        assert dist[("A", "D")] == 4.0
        assert path[("A", "D")] == ["A", "B", "C", "D"]
        assert dist[("B", "B")] == 0.0
        assert path[("C", "C")] == ["C"]
        assert math.isinf(dist[("D", "A")])
        assert path[("D", "A")] is None

    def test_negative_edge_allowed(self):
        """Negative edges without a cycle are fine."""
        G = Graph(directed=True)
        G.add_edge(0, 1, 3.0)
        G.add_edge(0, 2, 1.0)
        G.add_edge(2, 1, -1.0)
        dist, path = floyd_warshall(G)
        assert dist[(0, 1)] == 0.0
        assert path[(0, 1)] == [0, 2, 1]

    def test_negative_cycle_raises(self):
        """Negative cycles make all-pairs distances undefined."""
        G = Graph(directed=True)
        G.add_edge(0, 1, 1.0)
        G.add_edge(1, 0, -2.0)
        with pytest.raises(NegativeCycle):
            floyd_warshall(G)

    def test_empty_graph(self):
        """An empty graph gives empty tables."""
        assert floyd_warshall(Graph()) == ({}, {})


class TestCrossCheck:
    """Shortest-path algorithms agree on non-negative graphs."""

    @pytest.mark.parametrize("directed", [False, True])
    def test_dijkstra_matches_bellman_ford(self, make_random_graph, directed):
        """Every finite Dijkstra distance equals the Bellman-Ford distance."""
        for _ in range(5):
            G = make_random_graph(9, 0.3, directed=directed, weighted=True)
            for source in G.nodes():
                dist, _ = dijkstra(G, source)
                bf = bellman_ford(G, source)
                assert not bf.has_negative_cycle
                for node, d in bf.distances.items():
                    if math.isinf(d):
                        assert node not in dist
                    else:
                        assert dist[node] == pytest.approx(d)

    def test_floyd_warshall_matches_dijkstra(self, make_random_graph):
        """All-pairs distances match repeated Dijkstra."""
        G = make_random_graph(8, 0.35, directed=True, weighted=True)
        fw_dist, _ = floyd_warshall(G)
        for source in G.nodes():
            dist, _ = dijkstra(G, source)
            for target in G.nodes():
                if target in dist:
                    assert fw_dist[(source, target)] == pytest.approx(dist[target])
                else:
                    assert math.isinf(fw_dist[(source, target)])
