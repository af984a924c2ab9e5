"""
Graph construction and shortest-path demo.

Builds a few small graphs, prints them, and runs Dijkstra on the classic
nine-node example.
"""

from graphst import UndirectedGraph, dijkstra


def main() -> None:
    empty_g = UndirectedGraph()
    print(f"empty_g:\n{empty_g}")

    n_nodes = 5
    mat = [[0.0] * n_nodes for _ in range(n_nodes)]
    g = UndirectedGraph.from_adjacency_matrix(mat)
    g.add_connection(0, 0)
    g.add_connection(0, 3)
    g.add_connection(4, 2)

    print(f"g:\n{g}")
    print(f"The nodes of g are: {list(g.nodes())}")

    edges = [
        (0, 1, 4.0), (0, 7, 8.0), (1, 2, 8.0), (1, 7, 11.0), (2, 3, 7.0),
        (2, 5, 4.0), (2, 8, 2.0), (3, 4, 9.0), (3, 5, 14.0), (4, 5, 10.0),
        (5, 6, 2.0), (6, 7, 1.0), (6, 8, 6.0), (7, 8, 8.0),
    ]
    city = UndirectedGraph.from_weighted_edges(9, edges)
    dist = dijkstra(city, 0)
    print("Shortest distances from node 0:")
    for node, d in enumerate(dist):
        print(f"  {node}: {d:g}")


if __name__ == "__main__":
    main()
