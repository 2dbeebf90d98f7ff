"""
Tests for the paths module.

Tests shortest path search and the path tree used to rebuild paths.
"""

import pytest
from flatgraph.graph import Graph, PathTree, find_shortest_path
from flatgraph.models import Edge, Node, NodeKindError
from tests.fixtures import assert_valid_path, build_integer_graph, build_sample_graph


class TestShortestPath:
    """Tests for Graph.shortest_path."""

    def test_sample_graph(self):
        """Test the paths of the six-node sample graph."""
        graph = build_sample_graph()

        assert graph.shortest_path(0, 5) in ([0, 3, 5], [0, 4, 5])
        assert graph.shortest_path(3, 5) == [3, 5]
        assert graph.shortest_path(2, 5) is None
        assert graph.shortest_path(1, 5) is None

    def test_tie_broken_by_insertion_order(self):
        """Test that the earliest inserted branch wins among equal paths."""
        graph = build_sample_graph()
        assert graph.shortest_path(0, 5) == [0, 3, 5]

        reordered = build_integer_graph(4, [(0, 2), (0, 1), (1, 3), (2, 3)])
        assert reordered.shortest_path(0, 3) == [0, 2, 3]

    def test_prefers_fewer_edges(self):
        """Test that a short cut beats a long chain inserted first."""
        graph = build_integer_graph(
            5, [(0, 1), (1, 2), (2, 3), (3, 4), (0, 4)]
        )
        assert graph.shortest_path(0, 4) == [0, 4]

    def test_long_chain(self):
        edges = [(i, i + 1) for i in range(9)]
        graph = build_integer_graph(10, edges)
        assert graph.shortest_path(0, 9) == list(range(10))

    def test_direction_matters(self):
        graph = build_integer_graph(2, [(0, 1)])
        assert graph.shortest_path(0, 1) == [0, 1]
        assert graph.shortest_path(1, 0) is None

    def test_same_node(self):
        """Test that a node trivially reaches itself."""
        graph = build_sample_graph()
        assert graph.shortest_path(2, 2) == [2]

    def test_out_of_range(self):
        graph = build_sample_graph()
        assert graph.shortest_path(0, 6) is None
        assert graph.shortest_path(9, 0) is None
        assert Graph().shortest_path(0, 0) is None

    def test_cycles(self):
        """Test that cycles neither loop forever nor shorten paths wrongly."""
        graph = build_integer_graph(
            5, [(0, 1), (1, 0), (1, 2), (2, 1), (2, 3), (3, 0)]
        )
        assert graph.shortest_path(0, 3) == [0, 1, 2, 3]
        assert graph.shortest_path(3, 2) == [3, 0, 1, 2]
        assert graph.shortest_path(0, 4) is None

    def test_unreachable_after_exhausting_graph(self):
        """Test that the search ends once no frontier remains."""
        graph = build_integer_graph(4, [(0, 1), (1, 2), (2, 0), (3, 0)])
        assert graph.shortest_path(0, 3) is None
        assert graph.shortest_path(3, 2) == [3, 0, 1, 2]

    def test_self_loops_are_ignored(self):
        graph = build_integer_graph(3, [(0, 0), (0, 1), (1, 1), (1, 2)])
        assert graph.shortest_path(0, 2) == [0, 1, 2]

    def test_works_on_any_node_kind(self):
        """Test that the graph payloads do not affect the search."""
        graph = Graph()
        a = graph.add_node(Node.blob(b"a"))
        b = graph.add_node(Node.text("b"))
        c = graph.add_node(Node.integer(-7))

        graph.add_edge(Edge(a, b))
        graph.add_edge(Edge(b, c))
        assert graph.shortest_path(a, c) == [a, b, c]

    @pytest.mark.parametrize(
        "start,end",
        [(0, 5), (0, 6), (1, 6), (2, 4), (3, 0), (5, 1)],
    )
    def test_result_follows_real_edges(self, start, end):
        """Test that returned paths start, end and step correctly."""
        graph = build_integer_graph(
            7,
            [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 6), (0, 4), (2, 0), (5, 1), (3, 0)],
        )
        path = graph.shortest_path(start, end)
        assert path is not None
        assert_valid_path(graph, path, start, end)

    def test_function_matches_method(self):
        graph = build_sample_graph()
        assert find_shortest_path(graph, 0, 5) == graph.shortest_path(0, 5)


class TestPathTree:
    """Tests for the PathTree helper."""

    def test_root_payload(self):
        tree = PathTree(4)
        assert tree.root == 0
        assert tree.payload(tree.root) == 4
        assert tree.parent_of(tree.root) is None
        assert len(tree) == 1

    def test_backtrack(self):
        """Test that backtracking yields root-to-node original indices."""
        tree = PathTree(10)
        a = tree.grow(tree.root, 20)
        b = tree.grow(tree.root, 30)
        c = tree.grow(b, 40)

        assert tree.parent_of(c) == b
        assert tree.backtrack(c) == [10, 30, 40]
        assert tree.backtrack(a) == [10, 20]
        assert tree.backtrack(tree.root) == [10]

    def test_non_integer_payload_is_fatal(self):
        """Test that reading an index from a non-integer node raises."""
        tree = PathTree(0)
        tree._tree.add_node(Node.text("corrupt"))

        with pytest.raises(NodeKindError):
            tree.payload(1)

    def test_payload_of_missing_node(self):
        tree = PathTree(0)
        with pytest.raises(IndexError):
            tree.payload(1)

    def test_node_kind_error_is_type_error(self):
        assert issubclass(NodeKindError, TypeError)
