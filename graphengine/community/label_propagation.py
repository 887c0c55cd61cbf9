"""
Label propagation community detection.

Each node starts with a unique label and repeatedly adopts the label with
the largest total edge weight among its neighbors. Nodes are visited in a
freshly shuffled order every sweep; ties are broken at random, except that
a node keeps its current label whenever that label is among the best.

References:
    - Raghavan, U. N., Albert, R., Kumara, S. "Near linear time algorithm to
      detect community structures in large-scale networks", Phys. Rev. E 76 (2007).
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np

from .louvain import CommunityResult, partition_from_labels
from .modularity import modularity_of_assignment, symmetric_weights
from ..core.graph import Graph, NodeId
from ..exceptions import InvalidParameter
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass
class LabelPropagationResult(CommunityResult):
    """CommunityResult plus whether a sweep finished without any label change."""

    converged: bool = field(default=False)


def label_propagation(
    graph: Graph,
    max_iterations: int = 100,
    seed: Optional[int] = None,
) -> LabelPropagationResult:
    """
    Detect communities by asynchronous label propagation.

    Args:
        graph: Input graph; directed graphs are symmetrized, weights are used.
        max_iterations: Maximum number of sweeps.
        seed: Seed for the visiting order and tie-breaking.

    Returns:
        LabelPropagationResult. ``iterations`` counts all sweeps run,
        including the final one that changed nothing.

    Raises:
        InvalidParameter: If max_iterations < 1.
    """
    if max_iterations < 1:
        raise InvalidParameter(f"max_iterations must be >= 1, got {max_iterations}")

    nodes = graph.nodes()
    if not nodes:
        return LabelPropagationResult(converged=True)

    rng = np.random.default_rng(seed)
    adjacency, strength, m = symmetric_weights(graph)
    labels: Dict[NodeId, int] = {node: idx for idx, node in enumerate(nodes)}

    iterations = 0
    converged = False
    while iterations < max_iterations and not converged:
        iterations += 1
        converged = True

        for idx in rng.permutation(len(nodes)):
            node = nodes[idx]
            weights: Dict[int, float] = {}
            for nbr, w in adjacency[node].items():
                if nbr != node:
                    weights[labels[nbr]] = weights.get(labels[nbr], 0.0) + w
            if not weights:
                continue

            best_weight = max(weights.values())
            candidates: List[int] = [label for label, w in weights.items() if w == best_weight]
            if labels[node] in candidates:
                continue

            labels[node] = candidates[int(rng.integers(len(candidates)))]
            converged = False

    logger.debug("Label propagation ran %d sweeps (converged=%s)", iterations, converged)

    grouped = partition_from_labels(nodes, labels)
    return LabelPropagationResult(
        communities=grouped.communities,
        modularity=modularity_of_assignment(adjacency, strength, m, grouped.assignments),
        iterations=iterations,
        assignments=grouped.assignments,
        converged=converged,
    )
