"""
Directed graph on a dense adjacency matrix.

Each (src, dest) cell is independent: setting src -> dest never touches
dest -> src.
"""

from typing import List

import numpy as np

from .core import DenseGraph


class DirectedGraph(DenseGraph):
    """
    Directed weighted graph over nodes 0..n-1.

    Example:
        >>> g = DirectedGraph.from_edges(3, [(0, 1), (1, 2), (2, 1)])
        >>> g.successors_of(2)
        [1]
        >>> g.predecessors_of(1)
        [0, 2]
    """

    @staticmethod
    def _store(adj: np.ndarray, src: int, dest: int, weight: float) -> None:
        adj[src, dest] = weight

    def successors_of(self, node: int) -> List[int]:
        """
        Return the nodes reachable from node by one edge, in ascending order.

        Raises:
            InvalidNodeError: If node is out of range.
        """
        node = self._check_one(node, "successors_of")
        return [int(j) for j in np.flatnonzero(self._adj[node, :])]

    def predecessors_of(self, node: int) -> List[int]:
        """
        Return the nodes with an edge into node, in ascending order.

        Raises:
            InvalidNodeError: If node is out of range.
        """
        node = self._check_one(node, "predecessors_of")
        return [int(i) for i in np.flatnonzero(self._adj[:, node])]

    def _edge_lines(self) -> List[str]:
        return [
            f"{src} -({float(self._adj[src, dest])})-> {dest}"
            for src, dest in zip(*np.nonzero(self._adj))
        ]
