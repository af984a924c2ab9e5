"""
Graph package for graphst.

Provides:
- GraphCapability, the abstract interface algorithms are written against
- DirectedGraph and UndirectedGraph, dense adjacency-matrix graphs
- dijkstra, O(V^2) single-source shortest distances

Nodes are the integers 0..n-1 and a weight of 0.0 means "no edge".
"""

from .base import GraphCapability
from .core import DenseGraph
from .directed import DirectedGraph
from .shortest import dijkstra
from .undirected import UndirectedGraph

__all__ = [
    "GraphCapability",
    "DenseGraph",
    "DirectedGraph",
    "UndirectedGraph",
    "dijkstra",
]

# Example usage:
# from graphst.graphs import UndirectedGraph, dijkstra
#
# g = UndirectedGraph.from_weighted_edges(3, [(0, 1, 4.0), (1, 2, 1.5)])
# dijkstra(g, 0)  # [0.0, 4.0, 5.5]
