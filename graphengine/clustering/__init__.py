"""Clustering: spectral clustering, k-means, Laplacians and k-cores."""

from .kcore import KCoreResult, k_core, k_core_decomposition
from .kmeans import KMeansResult, kmeans
from .laplacian import (
    LaplacianType,
    adjacency_matrix,
    graph_laplacian_matrix,
)
from .spectral import (
    SpectralClusteringResult,
    SpectralConfig,
    spectral_clustering,
)

__all__ = [
    "LaplacianType",
    "SpectralConfig",
    "SpectralClusteringResult",
    "KMeansResult",
    "KCoreResult",
    "adjacency_matrix",
    "graph_laplacian_matrix",
    "kmeans",
    "spectral_clustering",
    "k_core_decomposition",
    "k_core",
]
