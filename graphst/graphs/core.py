"""
Dense adjacency-matrix storage.

DenseGraph holds the (n, n) float64 weight matrix and implements everything
DirectedGraph and UndirectedGraph have in common. Subclasses decide how a
single edge is written (one cell or both symmetric cells) and how the graph
is rendered.

A weight of exactly 0.0 means "no edge". A zero-weight edge therefore cannot
be stored, and a repeated zero-weight edge in an edge list is not reported
as a duplicate.

Complexity:
    - edge, add_edge, add_weighted_edge: O(1)
    - add_node: O(V^2) (the matrix is reallocated)
    - memory: O(V^2)
"""

from abc import abstractmethod
from typing import Iterable, List, Optional, Tuple, Type, TypeVar

import numpy as np

from ..diagnostics import assert_square, is_check_enabled
from ..exceptions import DuplicateEdgeError
from ..logging import get_logger
from .base import GraphCapability
from .utils import MatrixLike, check_node, check_node_count, to_adjacency_array

logger = get_logger(__name__)

G = TypeVar("G", bound="DenseGraph")


class DenseGraph(GraphCapability):
    """
    Graph over nodes 0..n-1 backed by a dense weight matrix.

    Not meant to be instantiated directly; use DirectedGraph or
    UndirectedGraph.
    """

    def __init__(self) -> None:
        """Create an empty graph (no nodes)."""
        self._adj = np.zeros((0, 0), dtype=np.float64)

    @classmethod
    def _wrap(cls: Type[G], adj: np.ndarray) -> G:
        graph = cls()
        graph._adj = adj
        graph._check_invariants()
        return graph

    @classmethod
    def from_edges(cls: Type[G], node_count: int, edges: Iterable[Tuple[int, int]]) -> G:
        """
        Build a graph from (src, dest) pairs, each with weight 1.0.

        Args:
            node_count: Number of nodes.
            edges: Iterable of (src, dest) pairs.

        Returns:
            New graph.

        Raises:
            ValueError: If node_count is negative.
            InvalidNodeError: If an edge references a node >= node_count.
            DuplicateEdgeError: If a (src, dest) pair is repeated.
        """
        where = f"{cls.__name__}.from_edges"
        return cls._from_edge_list(
            node_count, ((src, dest, 1.0) for src, dest in edges), where
        )

    @classmethod
    def from_weighted_edges(
        cls: Type[G], node_count: int, edges: Iterable[Tuple[int, int, float]]
    ) -> G:
        """
        Build a graph from (src, dest, weight) triples.

        Args:
            node_count: Number of nodes.
            edges: Iterable of (src, dest, weight) triples.

        Returns:
            New graph.

        Raises:
            ValueError: If node_count is negative.
            InvalidNodeError: If an edge references a node >= node_count.
            DuplicateEdgeError: If a (src, dest) pair is repeated.
        """
        where = f"{cls.__name__}.from_weighted_edges"
        return cls._from_edge_list(node_count, edges, where)

    @classmethod
    def from_adjacency_matrix(cls: Type[G], matrix: MatrixLike) -> G:
        """
        Build a graph from a square weight matrix.

        The matrix is copied; matrix[i][j] becomes the weight of i -> j and
        0.0 means no edge.

        Raises:
            MalformedMatrixError: If the matrix is not square.
        """
        adj = to_adjacency_array(matrix, f"{cls.__name__}.from_adjacency_matrix")
        cls._validate_matrix(adj)
        logger.debug("%s: built from %dx%d matrix", cls.__name__, *adj.shape)
        return cls._wrap(adj)

    @classmethod
    def _from_edge_list(
        cls: Type[G], node_count: int, edges: Iterable[Tuple[int, int, float]], where: str
    ) -> G:
        n = check_node_count(node_count, where)
        adj = np.zeros((n, n), dtype=np.float64)
        count = 0
        for src, dest, weight in edges:
            src = check_node(src, n, where, "source")
            dest = check_node(dest, n, where, "destination")
            if adj[src, dest] != 0.0:
                raise DuplicateEdgeError(
                    f"{where}: edge ({src}, {dest}) is repeated", src=src, dest=dest
                )
            cls._store(adj, src, dest, float(weight))
            count += 1
        logger.debug("%s: %d nodes, %d edges", where, n, count)
        return cls._wrap(adj)

    @classmethod
    def _validate_matrix(cls, adj: np.ndarray) -> None:
        """Hook for subclasses with extra matrix invariants."""

    @staticmethod
    @abstractmethod
    def _store(adj: np.ndarray, src: int, dest: int, weight: float) -> None:
        """Write one edge into adj."""

    @abstractmethod
    def _edge_lines(self) -> List[str]:
        """Return one rendered line per edge for __str__."""

    def _check_invariants(self) -> None:
        if is_check_enabled("square"):
            assert_square(self._adj)

    def _check_pair(self, src: int, dest: int, op: str) -> Tuple[int, int]:
        where = f"{type(self).__name__}.{op}"
        n = self.node_count()
        return check_node(src, n, where, "source"), check_node(dest, n, where, "destination")

    def _check_one(self, node: int, op: str) -> int:
        return check_node(node, self.node_count(), f"{type(self).__name__}.{op}")

    def node_count(self) -> int:
        return int(self._adj.shape[0])

    def nodes(self) -> range:
        return range(self.node_count())

    def adjacency_matrix(self) -> np.ndarray:
        """
        Return a read-only view of the weight matrix.

        The view tracks later mutations of the graph until the next
        add_node(), which reallocates storage. Writing to it raises
        ValueError; copy it first if a mutable matrix is needed.
        """
        view = self._adj.view()
        view.flags.writeable = False
        return view

    def edge(self, src: int, dest: int) -> Optional[float]:
        src, dest = self._check_pair(src, dest, "edge")
        weight = self._adj[src, dest]
        if weight != 0.0:
            return float(weight)
        return None

    def add_node(self) -> None:
        self._adj = np.pad(self._adj, ((0, 1), (0, 1)))
        self._check_invariants()

    def add_edge(self, src: int, dest: int) -> None:
        src, dest = self._check_pair(src, dest, "add_edge")
        self._store(self._adj, src, dest, 1.0)
        self._check_invariants()

    def add_weighted_edge(self, src: int, dest: int, weight: float) -> None:
        src, dest = self._check_pair(src, dest, "add_weighted_edge")
        self._store(self._adj, src, dest, float(weight))
        self._check_invariants()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n_nodes={self.node_count()})"

    def __str__(self) -> str:
        name = type(self).__name__
        lines = self._edge_lines()
        if not lines:
            return f"{name}(n_nodes={self.node_count()}, edges=[])"
        body = "\n".join(f"  {line}" for line in lines)
        return f"{name}(n_nodes={self.node_count()}, edges=[\n{body}\n])"
