"""Example: a tour of graphengine on a small road network.

Covers shortest paths, spanning trees, connectivity and traversal.
"""

from graphengine import (
    Graph,
    bfs,
    bellman_ford,
    condensation_graph,
    connected_components,
    dijkstra_path,
    floyd_warshall,
    has_negative_cycle,
    kruskal_mst,
    strongly_connected_components,
    topological_sort,
)


def build_road_network() -> Graph:
    """Undirected towns connected by roads weighted in km."""
    roads = Graph()
    for u, v, km in [
        ("Ashford", "Bexley", 7),
        ("Ashford", "Carlow", 9),
        ("Ashford", "Fenwick", 14),
        ("Bexley", "Carlow", 10),
        ("Bexley", "Dunmore", 15),
        ("Carlow", "Dunmore", 11),
        ("Carlow", "Fenwick", 2),
        ("Dunmore", "Elston", 6),
        ("Elston", "Fenwick", 9),
    ]:
        roads.add_edge(u, v, km)
    roads.add_node("Glenrock")
    return roads


def example_shortest_paths(roads: Graph) -> None:
    print("=" * 60)
    print("Example 1: Shortest paths")
    print("=" * 60)

    route = dijkstra_path(roads, "Ashford", "Elston")
    print(f"Shortest route Ashford -> Elston: {' -> '.join(route.path)} ({route.distance:.0f} km)")

    dist, _ = floyd_warshall(roads)
    print(f"All-pairs distance Bexley -> Fenwick: {dist[('Bexley', 'Fenwick')]:.0f} km")
    print(f"Glenrock reachable from Ashford: {dijkstra_path(roads, 'Ashford', 'Glenrock') is not None}")
    print()


def example_spanning_tree(roads: Graph) -> None:
    print("=" * 60)
    print("Example 2: Minimum spanning tree")
    print("=" * 60)

    components = connected_components(roads)
    print(f"Connected components: {components}")

    mainland = roads.copy()
    mainland.remove_node("Glenrock")
    mst = kruskal_mst(mainland)
    for edge in mst.edges:
        print(f"  {edge.source} - {edge.target}: {edge.weight:.0f} km")
    print(f"Minimum road network length: {mst.total_weight:.0f} km")
    print()


def example_dependencies() -> None:
    print("=" * 60)
    print("Example 3: Build dependencies")
    print("=" * 60)

    deps = Graph(directed=True)
    for before, after in [
        ("fetch", "configure"),
        ("configure", "compile"),
        ("compile", "test"),
        ("compile", "package"),
        ("test", "release"),
        ("package", "release"),
    ]:
        deps.add_edge(before, after)

    print(f"Build order: {topological_sort(deps)}")
    print(f"BFS from fetch: {bfs(deps, 'fetch').order}")

    deps.add_edge("test", "compile")
    print(f"After adding test -> compile, build order: {topological_sort(deps)}")
    print(f"Strongly connected components: {strongly_connected_components(deps)}")
    condensed = condensation_graph(deps)
    print(f"Condensation has {condensed.graph.node_count} nodes and {condensed.graph.edge_count} edges")
    print()


def example_arbitrage() -> None:
    print("=" * 60)
    print("Example 4: Negative cycles")
    print("=" * 60)

    rates = Graph(directed=True)
    rates.add_edge("USD", "EUR", -0.08)
    rates.add_edge("EUR", "GBP", 0.15)
    rates.add_edge("GBP", "USD", -0.10)

    result = bellman_ford(rates, "USD")
    print(f"Negative cycle reachable from USD: {result.has_negative_cycle}")
    print(f"Graph has a negative cycle: {has_negative_cycle(rates)}")
    print()


if __name__ == "__main__":
    network = build_road_network()
    example_shortest_paths(network)
    example_spanning_tree(network)
    example_dependencies()
    example_arbitrage()
    print("All graph algorithm examples completed.")
