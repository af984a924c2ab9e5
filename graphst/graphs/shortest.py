"""
Single-source shortest paths: Dijkstra's algorithm, array-scan variant.

The unvisited node with the smallest tentative distance is found by a
linear scan instead of a priority queue, which costs O(V^2) overall and
matches the O(1) edge lookup of a dense adjacency matrix.

References:
    - Dijkstra, E. W. "A note on two problems in connexion with graphs",
      Numerische Mathematik 1 (1959).
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3.
"""

import math
from typing import List

from ..logging import get_logger
from .base import GraphCapability
from .utils import check_node

logger = get_logger(__name__)


def _closest_unvisited(graph: GraphCapability, dist: List[float], visited: List[bool]) -> int:
    """
    Return the unvisited node with the smallest distance.

    Ties go to the lowest index. If every unvisited node is still at
    infinity, the first unvisited node is returned.
    """
    best = -1
    for node in graph.nodes():
        if visited[node]:
            continue
        if best < 0 or dist[node] < dist[best]:
            best = node
    return best


def dijkstra(graph: GraphCapability, source: int) -> List[float]:
    """
    Dijkstra's algorithm for single-source shortest distances.

    Works on any GraphCapability (directed or undirected) and reads edges
    only through graph.edge(). Only distances are returned; paths are not
    reconstructed.

    Args:
        graph: Graph to search. Must not be mutated during the call.
        source: Source node index.

    Returns:
        List of length graph.node_count() where entry i is the cost of the
        shortest path from source to i, or inf if i is unreachable. An empty
        graph yields an empty list.

    Raises:
        InvalidNodeError: If source is not a node of a non-empty graph.

    Notes:
        Negative weights are accepted but not checked for cycles; with a
        negative edge the result may not be the true shortest distance. A
        warning is logged the first time one is seen in a call.

    Complexity: O(V^2) where V is the number of nodes.

    Example:
        >>> g = DirectedGraph.from_edges(3, [(0, 1), (1, 2), (2, 2)])
        >>> dijkstra(g, 0)
        [0.0, 1.0, 2.0]
    """
    n = graph.node_count()
    if n == 0:
        return []

    source = check_node(source, n, "dijkstra", "source")
    logger.debug("dijkstra: %d nodes, source %d", n, source)

    dist = [math.inf] * n
    visited = [False] * n
    dist[source] = 0.0
    warned = False

    for _ in graph.nodes():
        current = _closest_unvisited(graph, dist, visited)
        visited[current] = True
        logger.debug("dijkstra: settled node %d at %s", current, dist[current])

        for node in graph.nodes():
            weight = graph.edge(current, node)
            if weight is None or visited[node]:
                continue
            if weight < 0 and not warned:
                logger.warning(
                    "dijkstra: negative weight %s on edge (%d, %d); "
                    "distances may be incorrect",
                    weight,
                    current,
                    node,
                )
                warned = True
            candidate = dist[current] + weight
            if candidate < dist[node]:
                dist[node] = candidate

    return dist
