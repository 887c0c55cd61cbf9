"""graphengine - graph algorithms over a shared Graph abstraction."""

__version__ = "0.1.0"

# Centrality
from .centrality import (
    betweenness_centrality,
    closeness_centrality,
    degree_centrality,
    edge_betweenness_centrality,
    node_betweenness_centrality,
    node_closeness_centrality,
    node_degree_centrality,
    pagerank,
)

# Clustering
from .clustering import (
    KCoreResult,
    KMeansResult,
    LaplacianType,
    SpectralClusteringResult,
    SpectralConfig,
    adjacency_matrix,
    graph_laplacian_matrix,
    k_core,
    k_core_decomposition,
    kmeans,
    spectral_clustering,
)

# Community detection
from .community import (
    CommunityResult,
    GirvanNewmanResult,
    LabelPropagationResult,
    LouvainConfig,
    girvan_newman,
    label_propagation,
    louvain,
    modularity,
)

# Connectivity
from .components import (
    CondensationResult,
    condensation_graph,
    connected_components,
    connected_components_dfs,
    get_connected_component,
    is_connected,
    is_strongly_connected,
    is_weakly_connected,
    largest_connected_component,
    number_of_connected_components,
    strongly_connected_components,
    weakly_connected_components,
)

# Graph data model
from .core import DegreeMode, Edge, Graph, NodeId

# Diagnostics
from .diagnostics import (
    assert_inverse_mappings,
    assert_partition,
    assert_spanning_tree,
    debug_context,
    is_debug_enabled,
    reload_debug_from_env,
    is_partition,
    set_debug_enabled,
)

# Errors
from .exceptions import (
    Disconnected,
    GraphEngineError,
    InvalidParameter,
    NegativeCycle,
    NodeNotFound,
    UnsupportedWeight,
    WrongGraphKind,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Isomorphism
from .matching import IsomorphismResult, find_all_isomorphisms, is_graph_isomorphic

# Spanning trees
from .mst import MSTResult, kruskal_mst, prim_mst

# Shortest paths
from .shortest import (
    BellmanFordResult,
    PathResult,
    bellman_ford,
    bellman_ford_path,
    dijkstra,
    dijkstra_path,
    floyd_warshall,
    has_negative_cycle,
    single_source_shortest_path_length,
)

# Data structures
from .structures import PriorityQueue, UnionFind

# Traversal
from .traversal import (
    PathCountingResult,
    TraversalResult,
    bfs,
    bfs_distances,
    bfs_with_path_counting,
    dfs,
    has_cycle,
    topological_sort,
)

__all__ = [
    "__version__",
    # Graph data model
    "Graph",
    "Edge",
    "NodeId",
    "DegreeMode",
    # Data structures
    "UnionFind",
    "PriorityQueue",
    # Traversal
    "TraversalResult",
    "PathCountingResult",
    "bfs",
    "bfs_distances",
    "bfs_with_path_counting",
    "dfs",
    "has_cycle",
    "topological_sort",
    # Shortest paths
    "PathResult",
    "BellmanFordResult",
    "dijkstra",
    "dijkstra_path",
    "single_source_shortest_path_length",
    "bellman_ford",
    "bellman_ford_path",
    "has_negative_cycle",
    "floyd_warshall",
    # Connectivity
    "CondensationResult",
    "connected_components",
    "connected_components_dfs",
    "number_of_connected_components",
    "is_connected",
    "largest_connected_component",
    "get_connected_component",
    "strongly_connected_components",
    "is_strongly_connected",
    "weakly_connected_components",
    "is_weakly_connected",
    "condensation_graph",
    # Spanning trees
    "MSTResult",
    "kruskal_mst",
    "prim_mst",
    # Centrality
    "degree_centrality",
    "node_degree_centrality",
    "betweenness_centrality",
    "node_betweenness_centrality",
    "edge_betweenness_centrality",
    "closeness_centrality",
    "node_closeness_centrality",
    "pagerank",
    # Community detection
    "CommunityResult",
    "LouvainConfig",
    "LabelPropagationResult",
    "GirvanNewmanResult",
    "louvain",
    "label_propagation",
    "girvan_newman",
    "modularity",
    # Isomorphism
    "IsomorphismResult",
    "is_graph_isomorphic",
    "find_all_isomorphisms",
    # Clustering
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
    # Errors
    "GraphEngineError",
    "NodeNotFound",
    "WrongGraphKind",
    "UnsupportedWeight",
    "NegativeCycle",
    "Disconnected",
    "InvalidParameter",
    # Diagnostics
    "is_partition",
    "assert_partition",
    "assert_inverse_mappings",
    "assert_spanning_tree",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "reload_debug_from_env",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
