"""
Spectral clustering.

Pipeline: weighted adjacency -> Laplacian -> approximate k smallest
eigenvectors by power iteration -> node embedding (row-normalized for the
normalized Laplacian) -> k-means.

For k <= 3 the first eigenvector is taken to be the constant vector and
the others come from power iteration on I - L / lambda_max, re-orthogonalized
against the vectors already found after every step. The eigenvalues
reported on this path are fixed approximations (0, 0.1, 0.2), not computed
values. For larger k, power iteration on lambda_max * I - L with deflation
is used and eigenvalues are Rayleigh quotients on L.

References:
    - Ng, A., Jordan, M., Weiss, Y. "On Spectral Clustering: Analysis and an
      algorithm", NIPS 2001.
    - von Luxburg, U. "A Tutorial on Spectral Clustering" (2007).
"""

import math
import numbers
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from .kmeans import kmeans
from .laplacian import (
    LaplacianType,
    adjacency_matrix,
    coerce_laplacian_type,
    laplacian_from_adjacency,
)
from ..core.graph import Graph, NodeId
from ..diagnostics import assert_partition, is_debug_enabled
from ..exceptions import InvalidParameter
from ..logging import get_logger

logger = get_logger(__name__)

# Vectors with a smaller norm are treated as zero
_NORM_EPSILON = 1e-10

# Iterations for the 2nd and 3rd eigenvectors on the k <= 3 path
_SMALL_K_ITERATIONS = (100, 50)
_PLACEHOLDER_EIGENVALUES = (0.0, 0.1, 0.2)

_DEFLATION_ITERATIONS = 100


@dataclass(frozen=True)
class SpectralConfig:
    """
    Parameters for :func:`spectral_clustering`.

    Attributes:
        k: Number of clusters (positive integer).
        laplacian: Laplacian normalization.
        max_iterations: k-means round cap.
        tolerance: k-means centroid-shift threshold.
        seed: Seed for the random start vectors and k-means initialization.
    """

    k: int
    laplacian: LaplacianType = LaplacianType.NORMALIZED
    max_iterations: int = 100
    tolerance: float = 1e-4
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate SpectralConfig invariants."""
        k = self.k
        if isinstance(k, float) and k.is_integer():
            k = int(k)
        if isinstance(k, bool) or not isinstance(k, numbers.Integral) or k < 1:
            raise InvalidParameter("k must be a positive integer")
        object.__setattr__(self, "k", int(k))
        object.__setattr__(self, "laplacian", coerce_laplacian_type(self.laplacian))

        if self.max_iterations < 1:
            raise InvalidParameter(f"max_iterations must be >= 1, got {self.max_iterations}.")
        if self.tolerance < 0:
            raise InvalidParameter(f"tolerance must be non-negative, got {self.tolerance}.")


@dataclass
class SpectralClusteringResult:
    """
    Attributes:
        communities: Non-empty clusters, ordered by k-means cluster index.
        cluster_assignments: node -> index into ``communities``.
        eigenvalues: Eigenvalues used for the embedding (None when k >= n).
        eigenvectors: k x n array, one eigenvector per row (None when k >= n).
    """

    communities: List[List[NodeId]]
    cluster_assignments: Dict[NodeId, int]
    eigenvalues: Optional[List[float]] = None
    eigenvectors: Optional[np.ndarray] = None


def _orthogonalize(vector: np.ndarray, basis: Sequence[np.ndarray]) -> np.ndarray:
    for b in basis:
        vector = vector - np.dot(vector, b) * b
    return vector


def _spectral_bound(laplacian: np.ndarray, kind: LaplacianType) -> float:
    """Upper bound on the Laplacian spectrum."""
    if kind is LaplacianType.UNNORMALIZED:
        # Gershgorin: every eigenvalue is at most 2 * max degree
        bound = 2.0 * float(np.max(np.diag(laplacian))) if laplacian.size else 0.0
        return bound if bound > 0 else 1.0
    return 2.0


def _smallest_eigenvectors_small_k(
    laplacian: np.ndarray, k: int, lambda_max: float, rng: np.random.Generator
) -> Tuple[List[float], np.ndarray]:
    n = laplacian.shape[0]
    vectors = [np.full(n, 1.0 / math.sqrt(n))]

    for iterations in _SMALL_K_ITERATIONS[: k - 1]:
        vector = _orthogonalize(rng.random(n) - 0.5, vectors)
        for _ in range(iterations):
            candidate = vector - (laplacian @ vector) / lambda_max
            candidate = _orthogonalize(candidate, vectors)
            norm = np.linalg.norm(candidate)
            if norm > _NORM_EPSILON:
                vector = candidate / norm
        vectors.append(vector)

    return list(_PLACEHOLDER_EIGENVALUES[:k]), np.array(vectors)


def _smallest_eigenvectors_deflation(
    laplacian: np.ndarray, k: int, lambda_max: float, rng: np.random.Generator
) -> Tuple[List[float], np.ndarray]:
    n = laplacian.shape[0]
    shifted = lambda_max * np.eye(n) - laplacian
    vectors: List[np.ndarray] = []
    eigenvalues: List[float] = []

    for _ in range(k):
        vector = rng.random(n) - 0.5
        vector = _orthogonalize(vector / np.linalg.norm(vector), vectors)
        for _ in range(_DEFLATION_ITERATIONS):
            candidate = _orthogonalize(shifted @ vector, vectors)
            norm = np.linalg.norm(candidate)
            if norm <= _NORM_EPSILON:
                break
            vector = candidate / norm
        vectors.append(vector)
        eigenvalues.append(float(vector @ laplacian @ vector))

    return eigenvalues, np.array(vectors)


def _normalize_rows(data: np.ndarray) -> np.ndarray:
    norms = np.linalg.norm(data, axis=1)
    safe = np.where(norms > 0, norms, 1.0)
    return data / safe[:, None]


def spectral_clustering(
    graph: Graph,
    k: int,
    laplacian: Union[LaplacianType, str] = LaplacianType.NORMALIZED,
    max_iterations: int = 100,
    tolerance: float = 1e-4,
    seed: Optional[int] = None,
    config: Optional[SpectralConfig] = None,
) -> SpectralClusteringResult:
    """
    Partition a graph into at most k clusters.

    Args:
        graph: Input graph; weights are used and direction is ignored.
        k: Number of clusters.
        laplacian: ``"unnormalized"``, ``"normalized"`` or ``"random_walk"``.
        max_iterations: k-means round cap.
        tolerance: k-means centroid-shift threshold.
        seed: Seed for reproducible results.
        config: Pre-built configuration; overrides the other parameters.

    Returns:
        SpectralClusteringResult. If k >= number of nodes, every node is its
        own cluster and no eigen-data is returned.

    Raises:
        InvalidParameter: If k is not a positive integer or another parameter
            is out of range.

    Complexity: O(n^2) per power-iteration step; O(n^2) memory.

    Example:
        >>> G = Graph()
        >>> _ = G.add_edge('a', 'b')
        >>> spectral_clustering(G, k=2).communities
        [['a'], ['b']]
    """
    if config is None:
        config = SpectralConfig(
            k=k,
            laplacian=laplacian,
            max_iterations=max_iterations,
            tolerance=tolerance,
            seed=seed,
        )

    nodes = graph.nodes()
    n = len(nodes)
    if config.k >= n:
        return SpectralClusteringResult(
            communities=[[node] for node in nodes],
            cluster_assignments={node: idx for idx, node in enumerate(nodes)},
        )

    rng = np.random.default_rng(config.seed)
    adjacency, _ = adjacency_matrix(graph)
    lap = laplacian_from_adjacency(adjacency, config.laplacian)
    lambda_max = _spectral_bound(lap, config.laplacian)

    if config.k <= 3:
        eigenvalues, eigenvectors = _smallest_eigenvectors_small_k(lap, config.k, lambda_max, rng)
    else:
        eigenvalues, eigenvectors = _smallest_eigenvectors_deflation(lap, config.k, lambda_max, rng)

    embedding = eigenvectors.T
    if config.laplacian is LaplacianType.NORMALIZED:
        embedding = _normalize_rows(embedding)

    clustering = kmeans(
        embedding,
        config.k,
        max_iterations=config.max_iterations,
        tolerance=config.tolerance,
        rng=rng,
    )

    groups: List[List[NodeId]] = [[] for _ in range(config.k)]
    for node, cluster in zip(nodes, clustering.assignments):
        groups[int(cluster)].append(node)
    communities = [group for group in groups if group]
    cluster_assignments = {node: idx for idx, group in enumerate(communities) for node in group}

    if is_debug_enabled():
        assert_partition(nodes, communities)
    logger.debug(
        "Spectral clustering: %d nodes -> %d clusters (%s Laplacian)",
        n,
        len(communities),
        config.laplacian.value,
    )

    return SpectralClusteringResult(
        communities=communities,
        cluster_assignments=cluster_assignments,
        eigenvalues=eigenvalues,
        eigenvectors=eigenvectors,
    )
