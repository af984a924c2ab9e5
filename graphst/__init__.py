"""graphst - dense adjacency-matrix graphs and shortest paths."""

__version__ = "0.1.0"

from .diagnostics import (
    INVARIANTS,
    assert_square,
    assert_symmetric,
    checking,
    enabled_checks,
    is_check_enabled,
    is_square,
    is_symmetric,
    set_checks,
)
from .exceptions import (
    DuplicateEdgeError,
    GraphError,
    InvalidNodeError,
    MalformedMatrixError,
)
from .graphs import (
    DenseGraph,
    DirectedGraph,
    GraphCapability,
    UndirectedGraph,
    dijkstra,
)
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graphs
    "GraphCapability",
    "DenseGraph",
    "DirectedGraph",
    "UndirectedGraph",
    "dijkstra",
    # Errors
    "GraphError",
    "InvalidNodeError",
    "MalformedMatrixError",
    "DuplicateEdgeError",
    # Diagnostics
    "is_square",
    "is_symmetric",
    "assert_square",
    "assert_symmetric",
    "INVARIANTS",
    "enabled_checks",
    "is_check_enabled",
    "set_checks",
    "checking",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
