"""
Exception types raised by graphst.

Every error derives from GraphError, which is a ValueError: all failures in
this package come from invalid caller-supplied arguments, never from
transient conditions, so nothing here is meant to be retried.
"""

from typing import Optional


class GraphError(ValueError):
    """Base class for all graphst errors."""


class InvalidNodeError(GraphError, IndexError):
    """
    A node index is out of range (or not an integer).

    Attributes:
        node: The offending index as passed by the caller.
        n_nodes: Number of nodes in the graph at the time of the call.
    """

    def __init__(self, message: str, node: object = None, n_nodes: Optional[int] = None):
        super().__init__(message)
        self.node = node
        self.n_nodes = n_nodes


class MalformedMatrixError(GraphError):
    """An adjacency matrix is not square, or not symmetric where required."""


class DuplicateEdgeError(GraphError):
    """
    The same (src, dest) pair appears twice in an edge list.

    Attributes:
        src: Source node of the repeated edge.
        dest: Destination node of the repeated edge.
    """

    def __init__(self, message: str, src: int, dest: int):
        super().__init__(message)
        self.src = src
        self.dest = dest
