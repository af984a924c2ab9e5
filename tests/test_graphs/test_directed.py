"""Tests for the directed adjacency-matrix graph."""

import numpy as np
import pytest

from graphst import (
    DirectedGraph,
    DuplicateEdgeError,
    GraphCapability,
    InvalidNodeError,
    MalformedMatrixError,
)


class TestConstruction:
    """Tests for DirectedGraph constructors."""

    def test_empty_graph(self):
        """Test empty graph creation."""
        g = DirectedGraph()
        assert g.node_count() == 0
        assert len(g) == 0
        assert list(g.nodes()) == []
        assert g.adjacency_matrix().shape == (0, 0)

    def test_is_graph_capability(self):
        assert isinstance(DirectedGraph(), GraphCapability)

    def test_from_edges(self):
        """Test that each edge sets exactly one cell to 1.0."""
        g = DirectedGraph.from_edges(3, [(0, 1), (1, 2), (2, 1)])
        expected = np.array(
            [
                [0.0, 1.0, 0.0],
                [0.0, 0.0, 1.0],
                [0.0, 1.0, 0.0],
            ]
        )
        np.testing.assert_array_equal(g.adjacency_matrix(), expected)
        assert g.node_count() == 3

    def test_from_edges_invalid_node(self):
        with pytest.raises(InvalidNodeError, match="source 2 is not valid"):
            DirectedGraph.from_edges(2, [(0, 1), (2, 0)])

    def test_from_edges_invalid_destination(self):
        with pytest.raises(InvalidNodeError, match="destination 5"):
            DirectedGraph.from_edges(2, [(0, 5)])

    def test_from_edges_negative_index(self):
        """Test that negative indices are rejected, not wrapped."""
        with pytest.raises(InvalidNodeError):
            DirectedGraph.from_edges(3, [(-1, 0)])

    def test_from_edges_repeated(self):
        with pytest.raises(DuplicateEdgeError, match=r"edge \(1, 2\) is repeated") as exc_info:
            DirectedGraph.from_edges(3, [(0, 1), (1, 2), (1, 2)])
        assert (exc_info.value.src, exc_info.value.dest) == (1, 2)

    def test_from_edges_reverse_is_not_repeat(self):
        """Test that (a, b) and (b, a) are distinct directed edges."""
        g = DirectedGraph.from_edges(2, [(0, 1), (1, 0)])
        assert g.edge(0, 1) == 1.0
        assert g.edge(1, 0) == 1.0

    def test_from_edges_negative_node_count(self):
        with pytest.raises(ValueError, match="non-negative"):
            DirectedGraph.from_edges(-1, [])

    def test_from_edges_zero_nodes(self):
        g = DirectedGraph.from_edges(0, [])
        assert g.node_count() == 0

    def test_from_weighted_edges(self):
        g = DirectedGraph.from_weighted_edges(3, [(0, 1, 2.3), (1, 2, 1.2)])
        m = g.adjacency_matrix()
        assert m[0, 1] == 2.3
        assert m[1, 2] == 1.2
        assert m[1, 0] == 0.0
        assert np.count_nonzero(m) == 2

    def test_from_weighted_edges_invalid_node(self):
        with pytest.raises(InvalidNodeError):
            DirectedGraph.from_weighted_edges(2, [(0, 1, 1.5), (2, 0, 1.1)])

    def test_from_weighted_edges_repeated(self):
        with pytest.raises(DuplicateEdgeError):
            DirectedGraph.from_weighted_edges(3, [(0, 1, 2.3), (1, 2, 1.2), (1, 2, -1.0)])

    def test_zero_weight_duplicate_not_detected(self):
        """Test the documented gap: a repeated 0.0 edge looks like no edge."""
        g = DirectedGraph.from_weighted_edges(2, [(0, 1, 0.0), (0, 1, 3.0)])
        assert g.edge(0, 1) == 3.0

    def test_from_adjacency_matrix_roundtrip(self):
        m = [
            [0.0, 1.0, 0.0],
            [0.0, 0.5, 2.0],
            [0.0, 0.0, -1.0],
        ]
        g = DirectedGraph.from_adjacency_matrix(m)
        np.testing.assert_array_equal(g.adjacency_matrix(), np.array(m))

    def test_from_adjacency_matrix_copies_input(self):
        m = np.zeros((2, 2))
        g = DirectedGraph.from_adjacency_matrix(m)
        m[0, 1] = 9.0
        assert g.edge(0, 1) is None

    def test_from_adjacency_matrix_ragged(self):
        with pytest.raises(MalformedMatrixError, match="not square"):
            DirectedGraph.from_adjacency_matrix([[0.0, 1.1], [1.0, 0.0, 0.0]])

    def test_from_adjacency_matrix_rectangular_array(self):
        with pytest.raises(MalformedMatrixError, match="not square"):
            DirectedGraph.from_adjacency_matrix(np.zeros((2, 3)))

    def test_from_adjacency_matrix_flat_list(self):
        with pytest.raises(MalformedMatrixError):
            DirectedGraph.from_adjacency_matrix([0.0, 1.0])

    @pytest.mark.parametrize(
        "matrix",
        [
            [[[1.0, 2.0]]],
            [[[1.0], [0.0]], [[0.0], [2.0]]],
        ],
    )
    def test_from_adjacency_matrix_three_dimensional(self, matrix):
        """Test that nested rows of equal length cannot sneak past the square check."""
        with pytest.raises(MalformedMatrixError, match="must be 2-D"):
            DirectedGraph.from_adjacency_matrix(matrix)

    def test_from_adjacency_matrix_nested_entry(self):
        with pytest.raises(MalformedMatrixError, match="plain numbers"):
            DirectedGraph.from_adjacency_matrix([[1.0, [2.0]], [3.0, 4.0]])

    def test_from_adjacency_matrix_empty(self):
        g = DirectedGraph.from_adjacency_matrix([])
        assert g.node_count() == 0


class TestQueries:
    """Tests for node, edge, successor and predecessor queries."""

    def test_nodes(self):
        g = DirectedGraph.from_adjacency_matrix(np.zeros((4, 4)))
        assert g.node_count() == 4
        assert list(g.nodes()) == [0, 1, 2, 3]
        # restartable
        assert list(g.nodes()) == list(g.nodes())

    def test_edge(self):
        g = DirectedGraph.from_adjacency_matrix(
            [
                [0.0, 1.0, 0.0],
                [0.0, 0.0, 0.5],
                [0.0, 0.0, 2.0],
            ]
        )
        assert g.edge(0, 1) == 1.0
        assert g.edge(1, 2) == 0.5
        assert g.edge(2, 2) == 2.0
        assert g.edge(0, 2) is None
        assert isinstance(g.edge(0, 1), float)

    def test_edge_invalid_source(self, chain_graph):
        with pytest.raises(InvalidNodeError, match="source 3") as exc_info:
            chain_graph.edge(3, 2)
        assert exc_info.value.node == 3
        assert exc_info.value.n_nodes == 3

    def test_edge_invalid_destination(self, chain_graph):
        with pytest.raises(InvalidNodeError, match="destination 3"):
            chain_graph.edge(0, 3)

    def test_invalid_node_is_index_and_value_error(self, chain_graph):
        with pytest.raises(IndexError):
            chain_graph.edge(0, 3)
        with pytest.raises(ValueError):
            chain_graph.edge(0, 3)

    def test_non_integer_index(self, chain_graph):
        with pytest.raises(InvalidNodeError):
            chain_graph.edge(0.0, 1)
        with pytest.raises(InvalidNodeError):
            chain_graph.edge(True, 1)

    def test_numpy_integer_index(self, chain_graph):
        assert chain_graph.edge(np.int64(0), np.int32(1)) == 1.0

    def test_successors_of(self, chain_graph):
        assert chain_graph.successors_of(0) == [1]
        assert chain_graph.successors_of(1) == [2]
        assert chain_graph.successors_of(2) == [2]

    def test_successors_of_invalid(self, chain_graph):
        with pytest.raises(InvalidNodeError, match="successors_of"):
            chain_graph.successors_of(3)

    def test_predecessors_of(self, chain_graph):
        assert chain_graph.predecessors_of(0) == []
        assert chain_graph.predecessors_of(1) == [0]
        assert chain_graph.predecessors_of(2) == [1, 2]

    def test_predecessors_of_invalid(self, chain_graph):
        with pytest.raises(InvalidNodeError, match="predecessors_of"):
            chain_graph.predecessors_of(3)

    def test_adjacency_matrix_is_read_only(self, chain_graph):
        m = chain_graph.adjacency_matrix()
        with pytest.raises(ValueError):
            m[0, 0] = 5.0
        assert chain_graph.edge(0, 0) is None


class TestMutation:
    """Tests for add_node / add_edge / add_weighted_edge."""

    def test_add_node_from_empty(self):
        g = DirectedGraph()
        g.add_node()
        g.add_node()
        assert list(g.nodes()) == [0, 1]
        np.testing.assert_array_equal(g.adjacency_matrix(), np.zeros((2, 2)))

    def test_add_node_preserves_edges(self, chain_graph):
        before = chain_graph.adjacency_matrix().copy()
        for _ in range(3):
            chain_graph.add_node()
        after = chain_graph.adjacency_matrix()
        assert chain_graph.node_count() == 6
        assert after.shape == (6, 6)
        np.testing.assert_array_equal(after[:3, :3], before)
        assert not after[3:, :].any()
        assert not after[:, 3:].any()

    def test_add_edge(self):
        g = DirectedGraph.from_adjacency_matrix(np.zeros((3, 3)))
        g.add_edge(0, 1)
        g.add_edge(2, 2)
        assert g.edge(0, 1) == 1.0
        assert g.edge(1, 0) is None
        assert g.edge(2, 2) == 1.0

    def test_add_edge_to_new_node(self, chain_graph):
        chain_graph.add_node()
        chain_graph.add_edge(3, 0)
        assert chain_graph.successors_of(3) == [0]

    def test_add_weighted_edge_overwrites(self):
        g = DirectedGraph.from_adjacency_matrix(np.zeros((3, 3)))
        g.add_weighted_edge(0, 1, 3.2)
        g.add_weighted_edge(0, 1, -1.0)
        assert g.edge(0, 1) == -1.0
        assert g.edge(1, 0) is None

    @pytest.mark.parametrize("src,dest", [(3, 1), (2, 3), (-1, 0)])
    def test_invalid_mutation_leaves_graph_unchanged(self, chain_graph, src, dest):
        before = chain_graph.adjacency_matrix().copy()
        with pytest.raises(InvalidNodeError):
            chain_graph.add_edge(src, dest)
        with pytest.raises(InvalidNodeError):
            chain_graph.add_weighted_edge(src, dest, 2.0)
        np.testing.assert_array_equal(chain_graph.adjacency_matrix(), before)


class TestRendering:
    """Tests for the diagnostic string rendering."""

    def test_str(self, chain_graph):
        assert str(chain_graph) == (
            "DirectedGraph(n_nodes=3, edges=[\n"
            "  0 -(1.0)-> 1\n"
            "  1 -(1.0)-> 2\n"
            "  2 -(1.0)-> 2\n"
            "])"
        )

    def test_str_weighted(self):
        g = DirectedGraph.from_weighted_edges(2, [(1, 0, -0.5)])
        assert "1 -(-0.5)-> 0" in str(g)

    def test_str_empty(self):
        assert str(DirectedGraph()) == "DirectedGraph(n_nodes=0, edges=[])"

    def test_repr(self, chain_graph):
        assert repr(chain_graph) == "DirectedGraph(n_nodes=3)"
