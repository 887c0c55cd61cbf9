"""
Lloyd's k-means on dense numpy data.

Initial centroids are k distinct data points chosen at random. Each round
assigns points to the nearest centroid (Euclidean, lowest index wins ties)
then moves every non-empty cluster's centroid to its mean; an empty
cluster keeps its previous centroid.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..exceptions import InvalidParameter
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass
class KMeansResult:
    """
    Attributes:
        assignments: Cluster index per data row.
        centroids: k x d centroid matrix.
        iterations: Assignment rounds performed.
    """

    assignments: np.ndarray
    centroids: np.ndarray
    iterations: int


def kmeans(
    data: np.ndarray,
    k: int,
    max_iterations: int = 100,
    tolerance: float = 1e-4,
    rng: Optional[np.random.Generator] = None,
) -> KMeansResult:
    """
    Cluster the rows of ``data`` into k groups.

    Stops when an assignment round changes nothing, when no centroid moves
    by ``tolerance`` or more, or after ``max_iterations`` rounds.

    Args:
        data: n x d array.
        k: Number of clusters (>= 1).
        max_iterations: Round cap.
        tolerance: Centroid-shift threshold (Euclidean).
        rng: Random generator for initialization.

    Returns:
        KMeansResult. With k >= n every row is its own cluster.

    Raises:
        InvalidParameter: If k < 1 or data is not 2-D.
    """
    data = np.asarray(data, dtype=float)
    if data.ndim != 2:
        raise InvalidParameter(f"data must be a 2-D array, got shape {data.shape}")
    if k < 1:
        raise InvalidParameter(f"k must be >= 1, got {k}")

    n = data.shape[0]
    if n == 0:
        return KMeansResult(np.zeros(0, dtype=int), np.zeros((0, data.shape[1])), 0)
    if k >= n:
        return KMeansResult(np.arange(n), data.copy(), 0)

    if rng is None:
        rng = np.random.default_rng()

    centroids = data[rng.choice(n, size=k, replace=False)].copy()
    assignments = np.full(n, -1, dtype=int)
    iterations = 0

    for iterations in range(1, max_iterations + 1):
        distances = np.linalg.norm(data[:, None, :] - centroids[None, :, :], axis=2)
        new_assignments = np.argmin(distances, axis=1)
        if np.array_equal(new_assignments, assignments):
            break
        assignments = new_assignments

        previous = centroids.copy()
        for cluster in range(k):
            members = data[assignments == cluster]
            if len(members) > 0:
                centroids[cluster] = members.mean(axis=0)

        shift = np.linalg.norm(centroids - previous, axis=1).max()
        if shift < tolerance:
            break

    logger.debug("k-means finished after %d rounds", iterations)
    return KMeansResult(assignments=assignments, centroids=centroids, iterations=iterations)
