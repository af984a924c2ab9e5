"""
Validation helpers shared by the graph classes.

Provides node-index checking and conversion of caller-supplied matrices into
the dense float64 arrays the graphs store.
"""

from collections.abc import Sequence
from typing import Union

import numpy as np

from ..exceptions import InvalidNodeError, MalformedMatrixError

MatrixLike = Union[np.ndarray, Sequence[Sequence[float]]]


def is_node_index(node: object) -> bool:
    """Return True if node is an integer usable as a node index."""
    return isinstance(node, (int, np.integer)) and not isinstance(node, (bool, np.bool_))


def check_node(node: object, n_nodes: int, where: str, role: str = "node") -> int:
    """
    Validate a node index against the current node count.

    Negative indices are rejected instead of wrapping around the way numpy
    indexing would.

    Args:
        node: Index supplied by the caller.
        n_nodes: Number of nodes in the graph.
        where: Qualified name of the calling operation, used in the message.
        role: What the index stands for ("node", "source", "destination").

    Returns:
        The index as a plain int.

    Raises:
        InvalidNodeError: If node is not an integer in [0, n_nodes).

    Example:
        >>> check_node(1, 3, "DirectedGraph.edge", "source")
        1
    """
    if not is_node_index(node) or not 0 <= node < n_nodes:
        raise InvalidNodeError(
            f"{where}: {role} {node!r} is not valid for a graph with {n_nodes} nodes",
            node=node,
            n_nodes=n_nodes,
        )
    return int(node)


def check_node_count(n_nodes: object, where: str) -> int:
    """
    Validate the node count passed to an edge-list constructor.

    Raises:
        ValueError: If n_nodes is not a non-negative integer.
    """
    if not is_node_index(n_nodes) or n_nodes < 0:
        raise ValueError(f"{where}: node count must be a non-negative integer, got {n_nodes!r}")
    return int(n_nodes)


def to_adjacency_array(matrix: MatrixLike, where: str) -> np.ndarray:
    """
    Copy a square matrix into a fresh float64 array.

    Accepts numpy arrays and nested sequences. Ragged nested sequences are
    reported as MalformedMatrixError rather than numpy's generic ValueError.

    Args:
        matrix: Square 2-D matrix of weights.
        where: Qualified name of the calling operation, used in messages.

    Returns:
        (n, n) float64 array owned by the caller.

    Raises:
        MalformedMatrixError: If the matrix is not 2-D and square.
    """
    if isinstance(matrix, np.ndarray):
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise MalformedMatrixError(
                f"{where}: adjacency matrix is not square (shape {matrix.shape})"
            )
        return np.array(matrix, dtype=np.float64)

    rows = []
    for i, row in enumerate(matrix):
        if isinstance(row, (str, bytes)) or not isinstance(row, (Sequence, np.ndarray)):
            raise MalformedMatrixError(f"{where}: adjacency matrix row {i} is not a sequence")
        rows.append(list(row))
    n = len(rows)
    for i, row in enumerate(rows):
        if len(row) != n:
            raise MalformedMatrixError(
                f"{where}: adjacency matrix is not square "
                f"(row {i} has {len(row)} entries, expected {n})"
            )
    if n == 0:
        return np.zeros((0, 0), dtype=np.float64)
    try:
        adj = np.array(rows, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise MalformedMatrixError(
            f"{where}: adjacency matrix entries must be plain numbers ({e})"
        ) from e
    if adj.ndim != 2:
        raise MalformedMatrixError(f"{where}: adjacency matrix must be 2-D, got shape {adj.shape}")
    return adj
