"""Example: community structure and influence in a small social network.

Ranks members by centrality, finds communities four different ways and
checks two friendship graphs for isomorphism.
"""

import logging

from graphengine import (
    Graph,
    betweenness_centrality,
    closeness_centrality,
    configure_logging,
    girvan_newman,
    is_graph_isomorphic,
    k_core_decomposition,
    label_propagation,
    louvain,
    pagerank,
    spectral_clustering,
)


def build_club() -> Graph:
    """Two friend groups bridged by a single acquaintance."""
    club = Graph()
    friendships = [
        ("ana", "ben"), ("ana", "cai"), ("ben", "cai"), ("ben", "dee"), ("cai", "dee"),
        ("dee", "eli"),
        ("eli", "fay"), ("eli", "gus"), ("fay", "gus"), ("fay", "hal"), ("gus", "hal"),
    ]
    for u, v in friendships:
        club.add_edge(u, v)
    return club


def top(scores, count=3):
    ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
    return ", ".join(f"{node}={score:.3f}" for node, score in ranked[:count])


def example_centrality(club: Graph) -> None:
    print("=" * 60)
    print("Example 1: Who holds the club together?")
    print("=" * 60)

    print(f"Betweenness: {top(betweenness_centrality(club, normalized=True))}")
    print(f"Closeness:   {top(closeness_centrality(club))}")
    print(f"PageRank:    {top(pagerank(club))}")
    print(f"Coreness:    {k_core_decomposition(club).coreness}")
    print()


def example_communities(club: Graph) -> None:
    print("=" * 60)
    print("Example 2: Communities")
    print("=" * 60)

    result = louvain(club)
    print(f"Louvain: {result.communities} (modularity {result.modularity:.3f})")

    gn = girvan_newman(club)
    print(f"Girvan-Newman: {gn.communities} (level {gn.best_level} of {len(gn.levels) - 1})")

    lpa = label_propagation(club, seed=42)
    print(f"Label propagation: {lpa.communities} (converged={lpa.converged})")

    spectral = spectral_clustering(club, k=2, laplacian="unnormalized", seed=0)
    print(f"Spectral: {spectral.communities}")
    print()


def example_isomorphism(club: Graph) -> None:
    print("=" * 60)
    print("Example 3: Same shape, different names")
    print("=" * 60)

    renamed = Graph()
    for edge in club.edges():
        renamed.add_edge(edge.source.upper(), edge.target.upper())

    result = is_graph_isomorphic(club, renamed)
    print(f"Club matches renamed copy: {result.is_isomorphic}")
    print(f"ana maps to {result.mapping['ana']}")
    print()


if __name__ == "__main__":
    configure_logging(level=logging.WARNING)
    club = build_club()
    example_centrality(club)
    example_communities(club)
    example_isomorphism(club)
    print("Community analysis complete.")
