"""Pytest configuration and shared fixtures for graphst tests.

This module provides:
- The two reference graphs used across the shortest-path tests
- An autouse fixture restoring invariant checks and log level after each test
"""

import logging
from typing import Iterator, List, Tuple

import pytest

from graphst import DirectedGraph, UndirectedGraph, configure_logging
from graphst.diagnostics import enabled_checks, set_checks

CLASSIC_EDGES: List[Tuple[int, int, float]] = [
    (0, 1, 4.0),
    (0, 7, 8.0),
    (1, 2, 8.0),
    (1, 7, 11.0),
    (2, 3, 7.0),
    (2, 5, 4.0),
    (2, 8, 2.0),
    (3, 4, 9.0),
    (3, 5, 14.0),
    (4, 5, 10.0),
    (5, 6, 2.0),
    (6, 7, 1.0),
    (6, 8, 6.0),
    (7, 8, 8.0),
]


@pytest.fixture
def chain_graph() -> DirectedGraph:
    """Directed 3-node chain 0 -> 1 -> 2 with a self-loop on 2."""
    return DirectedGraph.from_edges(3, [(0, 1), (1, 2), (2, 2)])


@pytest.fixture
def classic_graph() -> UndirectedGraph:
    """The nine-node weighted example from the CLRS Dijkstra chapter."""
    return UndirectedGraph.from_weighted_edges(9, CLASSIC_EDGES)


@pytest.fixture(scope="function", autouse=True)
def restore_global_state() -> Iterator[None]:
    """Put invariant checks and logging back the way each test found them."""
    original = enabled_checks()
    yield
    set_checks(original)
    configure_logging(level=logging.WARNING)
