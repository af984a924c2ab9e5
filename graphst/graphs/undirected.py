"""
Undirected graph on a symmetric dense adjacency matrix.

The matrix always satisfies m[i][j] == m[j][i]. Matrices supplied by the
caller are checked once at construction; afterwards every mutator writes
both cells, so the invariant holds without further checks (enabling the
"symmetric" invariant check re-verifies it after each mutation anyway).

Duplicate detection in from_edges/from_weighted_edges inspects only the
m[src][dest] cell before writing. Since writing (a, b) also fills m[b][a],
a later (b, a) in the same list is reported as a repeat too. Reversed pairs
are therefore not a detection gap here, unlike what a purely per-cell
reading of "only [i][j] is checked" would suggest.
"""

from typing import List

import numpy as np

from ..diagnostics import assert_symmetric, is_check_enabled
from .core import DenseGraph


class UndirectedGraph(DenseGraph):
    """
    Undirected weighted graph over nodes 0..n-1.

    str() prints one "a -(w)- b" line per unordered pair (a <= b), not one
    line per non-zero cell as DirectedGraph does; the mirrored cell of each
    edge is left out.

    Example:
        >>> g = UndirectedGraph.from_weighted_edges(3, [(0, 1, 4.0), (1, 2, 2.0)])
        >>> g.neighbors_of(1)
        [0, 2]
        >>> g.edge(1, 0)
        4.0
    """

    @staticmethod
    def _store(adj: np.ndarray, src: int, dest: int, weight: float) -> None:
        adj[src, dest] = weight
        adj[dest, src] = weight

    @classmethod
    def _validate_matrix(cls, adj: np.ndarray) -> None:
        assert_symmetric(adj)

    def _check_invariants(self) -> None:
        super()._check_invariants()
        if is_check_enabled("symmetric"):
            assert_symmetric(self._adj)

    def neighbors_of(self, node: int) -> List[int]:
        """
        Return the nodes sharing an edge with node, in ascending order.

        Raises:
            InvalidNodeError: If node is out of range.
        """
        node = self._check_one(node, "neighbors_of")
        return [int(j) for j in np.flatnonzero(self._adj[node, :])]

    def add_connection(self, a: int, b: int) -> None:
        """
        Connect a and b with weight 1.0 (both directions).

        Raises:
            InvalidNodeError: If a or b is out of range.
        """
        a, b = self._check_pair(a, b, "add_connection")
        self._store(self._adj, a, b, 1.0)
        self._check_invariants()

    def add_weighted_connection(self, a: int, b: int, weight: float) -> None:
        """
        Connect a and b with the given weight (both directions).

        Raises:
            InvalidNodeError: If a or b is out of range.
        """
        a, b = self._check_pair(a, b, "add_weighted_connection")
        self._store(self._adj, a, b, float(weight))
        self._check_invariants()

    def _edge_lines(self) -> List[str]:
        upper = np.triu(self._adj)
        return [f"{a} -({float(self._adj[a, b])})- {b}" for a, b in zip(*np.nonzero(upper))]
