"""
Girvan-Newman divisive community detection.

Repeatedly removes the edges of highest edge betweenness from a working copy
of the graph. After every removal round the connected components form one
level of the dendrogram; the level with the highest modularity, measured on
the original graph, is returned. Edges tied for the maximum are removed
together. Betweenness counts hops, so edge weights only enter through the
modularity score.

References:
    - Girvan, M., Newman, M. E. J. "Community structure in social and
      biological networks", PNAS 99(12), 2002.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .louvain import CommunityResult
from .modularity import modularity_of_assignment, symmetric_weights
from ..centrality.betweenness import edge_betweenness_centrality
from ..components.connected import connected_components
from ..core.graph import Graph, NodeId
from ..diagnostics import assert_partition, is_debug_enabled
from ..exceptions import InvalidParameter
from ..logging import get_logger

logger = get_logger(__name__)

# Scores this close to the maximum count as tied
_TIE_EPSILON = 1e-10


@dataclass
class GirvanNewmanResult(CommunityResult):
    """
    Best level of a Girvan-Newman dendrogram.

    Attributes:
        levels: Component partitions, one per level; level 0 is the input
            graph before any edge is removed.
        level_modularity: Modularity of each level on the original graph.
        best_level: Index into ``levels`` of the returned partition.
    """

    levels: List[List[List[NodeId]]] = field(default_factory=list)
    level_modularity: List[float] = field(default_factory=list)
    best_level: int = 0


def girvan_newman(
    graph: Graph,
    max_communities: Optional[int] = None,
    max_iterations: int = 100,
    resolution: float = 1.0,
) -> GirvanNewmanResult:
    """
    Detect communities by removing high-betweenness edges.

    Args:
        graph: Input graph; directed graphs split into weakly connected
            components and are symmetrized for modularity.
        max_communities: Stop once a level has at least this many communities.
        max_iterations: Maximum number of edge-removal rounds.
        resolution: Resolution gamma used when scoring levels.

    Returns:
        GirvanNewmanResult holding the highest-modularity level (the earliest
        one on ties) plus the whole dendrogram. ``iterations`` counts the
        removal rounds performed.

    Raises:
        InvalidParameter: If a parameter is out of range.

    Complexity: O(r * V * E) for r removal rounds.

    Example:
        >>> G = Graph()
        >>> for u, v in [(1, 2), (2, 3), (1, 3), (4, 5), (5, 6), (4, 6), (3, 4)]:
        ...     _ = G.add_edge(u, v)
        >>> girvan_newman(G).communities
        [[1, 2, 3], [4, 5, 6]]
    """
    if max_communities is not None and max_communities < 1:
        raise InvalidParameter(f"max_communities must be >= 1, got {max_communities}.")
    if max_iterations < 0:
        raise InvalidParameter(f"max_iterations must be >= 0, got {max_iterations}.")
    if resolution <= 0:
        raise InvalidParameter(f"resolution must be positive, got {resolution}.")

    nodes = graph.nodes()
    if not nodes:
        return GirvanNewmanResult()

    adjacency, strength, m = symmetric_weights(graph)
    work = graph.copy()
    result = GirvanNewmanResult()

    def record(components: List[List[NodeId]]) -> None:
        assignment = {node: idx for idx, group in enumerate(components) for node in group}
        result.levels.append(components)
        result.level_modularity.append(
            modularity_of_assignment(adjacency, strength, m, assignment, resolution)
        )

    components = connected_components(work)
    record(components)

    rounds = 0
    while work.edge_count > 0 and rounds < max_iterations:
        if max_communities is not None and len(components) >= max_communities:
            break
        if len(components) == len(nodes):
            break

        rounds += 1
        scores = edge_betweenness_centrality(work)
        highest = max(scores.values())
        doomed = [key for key, score in scores.items() if highest - score < _TIE_EPSILON]
        for u, v in doomed:
            work.remove_edge(u, v)

        components = connected_components(work)
        record(components)
        logger.debug(
            "Girvan-Newman round %d removed %d edge(s) at betweenness %.4f; %d communities",
            rounds,
            len(doomed),
            highest,
            len(components),
        )

    best = max(range(len(result.levels)), key=lambda i: (result.level_modularity[i], -i))
    result.best_level = best
    result.communities = result.levels[best]
    result.modularity = result.level_modularity[best]
    result.iterations = rounds
    result.assignments = {
        node: idx for idx, group in enumerate(result.communities) for node in group
    }

    if is_debug_enabled():
        assert_partition(nodes, result.communities)
    return result
