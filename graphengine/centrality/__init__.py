"""Node and edge centrality measures."""

from .betweenness import (
    betweenness_centrality,
    edge_betweenness_centrality,
    node_betweenness_centrality,
)
from .closeness import closeness_centrality, node_closeness_centrality
from .degree import degree_centrality, node_degree_centrality
from .pagerank import pagerank

__all__ = [
    "degree_centrality",
    "node_degree_centrality",
    "betweenness_centrality",
    "node_betweenness_centrality",
    "edge_betweenness_centrality",
    "closeness_centrality",
    "node_closeness_centrality",
    "pagerank",
]
