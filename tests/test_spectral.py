"""Tests for Laplacians, k-means and spectral clustering."""

import numpy as np
import pytest

from graphengine import (
    Graph,
    InvalidParameter,
    LaplacianType,
    SpectralConfig,
    adjacency_matrix,
    debug_context,
    graph_laplacian_matrix,
    is_partition,
    kmeans,
    spectral_clustering,
)


class TestLaplacian:
    """Tests for Laplacian construction."""

    def test_adjacency_is_symmetric(self):
        """Direction is dropped and weights are kept."""
        G = Graph(directed=True)
        G.add_edge("a", "b", 2.0)
        A, order = adjacency_matrix(G)
        assert order == ["a", "b"]
        np.testing.assert_array_equal(A, [[0.0, 2.0], [2.0, 0.0]])

    def test_reciprocal_arcs_sum(self):
        """Arcs in both directions add their weights in both cells."""
        G = Graph(directed=True)
        G.add_edge("a", "b", 1.0)
        G.add_edge("b", "a", 2.5)
        A, _ = adjacency_matrix(G)
        np.testing.assert_array_equal(A, [[0.0, 3.5], [3.5, 0.0]])
        L, _ = graph_laplacian_matrix(G, "unnormalized")
        np.testing.assert_array_equal(L, [[3.5, -3.5], [-3.5, 3.5]])

    def test_self_loop_on_diagonal(self):
        """A self-loop adds its weight once to the diagonal."""
        G = Graph()
        G.add_edge(0, 0, 2.0)
        G.add_edge(0, 1, 1.0)
        A, _ = adjacency_matrix(G)
        np.testing.assert_array_equal(A, [[2.0, 1.0], [1.0, 0.0]])

    def test_unnormalized(self, path4):
        """L = D - A; rows sum to zero."""
        L, order = graph_laplacian_matrix(path4, "unnormalized")
        assert order == [0, 1, 2, 3]
        np.testing.assert_array_equal(np.diag(L), [1.0, 2.0, 2.0, 1.0])
        np.testing.assert_allclose(L.sum(axis=1), 0.0)
        assert L[0, 1] == -1.0

    def test_normalized(self, path4):
        """The normalized Laplacian has a unit diagonal and is symmetric."""
        L, _ = graph_laplacian_matrix(path4, LaplacianType.NORMALIZED)
        np.testing.assert_allclose(np.diag(L), 1.0)
        np.testing.assert_allclose(L, L.T)
        assert L[0, 1] == pytest.approx(-1.0 / np.sqrt(2.0))

    def test_random_walk(self, path4):
        """Random-walk Laplacian rows sum to zero."""
        L, _ = graph_laplacian_matrix(path4, "random_walk")
        np.testing.assert_allclose(L.sum(axis=1), 0.0, atol=1e-12)
        assert L[1, 0] == pytest.approx(-0.5)

    def test_camel_case_alias(self, path4):
        """'randomWalk' is accepted as an alias."""
        L1, _ = graph_laplacian_matrix(path4, "randomWalk")
        L2, _ = graph_laplacian_matrix(path4, "random_walk")
        np.testing.assert_array_equal(L1, L2)

    def test_isolated_node_row_is_zero(self):
        """Isolated nodes get an all-zero row in the normalized Laplacian."""
        G = Graph()
        G.add_edge(0, 1)
        G.add_node(2)
        L, _ = graph_laplacian_matrix(G, "normalized")
        np.testing.assert_array_equal(L[2], [0.0, 0.0, 0.0])

    def test_unknown_type(self, path4):
        """Unknown Laplacian names are rejected."""
        with pytest.raises(InvalidParameter):
            graph_laplacian_matrix(path4, "signless")


class TestKMeans:
    """Tests for k-means."""

    def test_separated_blobs(self, rng):
        """Two well separated blobs are split apart."""
        left = rng.normal(loc=-5.0, scale=0.1, size=(10, 2))
        right = rng.normal(loc=5.0, scale=0.1, size=(10, 2))
        data = np.vstack([left, right])

        result = kmeans(data, 2, rng=np.random.default_rng(1))
        assert len(set(result.assignments[:10])) == 1
        assert len(set(result.assignments[10:])) == 1
        assert result.assignments[0] != result.assignments[10]
        assert result.centroids.shape == (2, 2)
        assert result.iterations >= 1

    def test_k_at_least_n(self):
        """Every row is its own cluster when k >= n."""
        data = np.array([[0.0], [1.0], [2.0]])
        result = kmeans(data, 5)
        np.testing.assert_array_equal(result.assignments, [0, 1, 2])
        assert result.iterations == 0

    def test_invalid_input(self):
        """Bad k or data shape is rejected."""
        with pytest.raises(InvalidParameter):
            kmeans(np.zeros((3, 2)), 0)
        with pytest.raises(InvalidParameter):
            kmeans(np.zeros(3), 2)


class TestSpectralConfig:
    """Tests for spectral clustering parameter validation."""

    @pytest.mark.parametrize("k", [0, -2, 2.5, True, "3", None])
    def test_invalid_k(self, k):
        """k must be a positive integer."""
        with pytest.raises(InvalidParameter, match="k must be a positive integer"):
            SpectralConfig(k=k)

    def test_integral_float_k(self):
        """An integral float is accepted."""
        assert SpectralConfig(k=3.0).k == 3

    def test_laplacian_coerced(self):
        """String Laplacian names become enum members."""
        assert SpectralConfig(k=2, laplacian="randomWalk").laplacian is LaplacianType.RANDOM_WALK


class TestSpectralClustering:
    """Tests for spectral clustering."""

    def test_k_at_least_n_gives_singletons(self, triangle):
        """With k >= n every node is alone and no eigen-data is computed."""
        result = spectral_clustering(triangle, k=3)
        assert result.communities == [["A"], ["B"], ["C"]]
        assert result.cluster_assignments == {"A": 0, "B": 1, "C": 2}
        assert result.eigenvalues is None
        assert result.eigenvectors is None

    def test_invalid_k(self, triangle):
        """Invalid k is rejected before any work."""
        with pytest.raises(InvalidParameter):
            spectral_clustering(triangle, k=0)

    def test_barbell_unnormalized(self, barbell):
        """The unnormalized Laplacian separates the barbell's triangles."""
        result = spectral_clustering(barbell, k=2, laplacian="unnormalized", seed=0)
        assert sorted(sorted(c) for c in result.communities) == [[1, 2, 3], [4, 5, 6]]
        assert result.eigenvalues == [0.0, 0.1]
        assert result.eigenvectors.shape == (2, 6)

    def test_assignments_index_communities(self, barbell):
        """cluster_assignments points into communities."""
        result = spectral_clustering(barbell, k=2, seed=3)
        for node, idx in result.cluster_assignments.items():
            assert node in result.communities[idx]

    @pytest.mark.parametrize("laplacian", ["unnormalized", "normalized", "random_walk"])
    @pytest.mark.parametrize("k", [2, 3, 4])
    def test_partition(self, make_random_graph, laplacian, k):
        """Every variant returns a partition with at most k clusters."""
        G = make_random_graph(10, 0.3, weighted=True)
        with debug_context(True):
            result = spectral_clustering(G, k=k, laplacian=laplacian, seed=0)
        assert is_partition(G.nodes(), result.communities)
        assert 1 <= len(result.communities) <= k
        assert all(result.communities)
        assert len(result.eigenvalues) == k
        assert result.eigenvectors.shape == (k, 10)

    def test_deflation_eigenvalues_are_rayleigh_quotients(self, make_random_graph):
        """For k > 3 reported eigenvalues lie within the Laplacian spectrum."""
        G = make_random_graph(10, 0.4)
        result = spectral_clustering(G, k=4, laplacian="normalized", seed=1)
        L, _ = graph_laplacian_matrix(G, "normalized")
        for value, vector in zip(result.eigenvalues, result.eigenvectors):
            assert value == pytest.approx(float(vector @ L @ vector))
            assert -1e-9 <= value <= 2.0 + 1e-9

    def test_seed_is_reproducible(self, barbell):
        """The same seed gives the same clustering."""
        first = spectral_clustering(barbell, k=2, seed=11)
        second = spectral_clustering(barbell, k=2, seed=11)
        assert first.communities == second.communities
        np.testing.assert_array_equal(first.eigenvectors, second.eigenvectors)

    def test_config_object(self, barbell):
        """A config object drives the run."""
        config = SpectralConfig(k=2, laplacian=LaplacianType.UNNORMALIZED, seed=0)
        result = spectral_clustering(barbell, k=5, config=config)
        assert len(result.communities) == 2
