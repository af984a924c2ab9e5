"""Abstract capability set shared by every graph representation."""

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np


class GraphCapability(ABC):
    """
    Minimal read/write surface a graph must provide.

    Algorithms such as dijkstra() only talk to graphs through this interface,
    so they work unchanged on directed and undirected graphs. Nodes are the
    integers 0..node_count()-1.

    Every operation that takes node indices validates all of them before
    touching storage: a call that raises leaves the graph unchanged.
    """

    @abstractmethod
    def node_count(self) -> int:
        """Return the current number of nodes."""

    @abstractmethod
    def nodes(self) -> range:
        """Return the node indices 0..node_count()-1 in ascending order."""

    @abstractmethod
    def adjacency_matrix(self) -> np.ndarray:
        """Return a read-only (n, n) view of the edge weights."""

    @abstractmethod
    def edge(self, src: int, dest: int) -> Optional[float]:
        """
        Return the weight of the edge src -> dest, or None if absent.

        Raises:
            InvalidNodeError: If src or dest is out of range.
        """

    @abstractmethod
    def add_node(self) -> None:
        """Append one node with no incident edges."""

    @abstractmethod
    def add_edge(self, src: int, dest: int) -> None:
        """
        Set the edge src -> dest to weight 1.0.

        Raises:
            InvalidNodeError: If src or dest is out of range.
        """

    @abstractmethod
    def add_weighted_edge(self, src: int, dest: int, weight: float) -> None:
        """
        Set the edge src -> dest to the given weight.

        Raises:
            InvalidNodeError: If src or dest is out of range.
        """

    def __len__(self) -> int:
        return self.node_count()
