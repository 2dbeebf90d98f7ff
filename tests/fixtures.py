"""
Test fixtures for flatgraph.

This module provides sample graphs and helper functions for
testing the graph store and path search.
"""

from flatgraph.graph import Graph
from flatgraph.models import Edge, Node

# Labels and edges of the six-node sample graph:
#
#        +--> 1
#        +--> 2
#   0 ---+--> 3 ---+
#        +--> 4 ---+--> 5
SAMPLE_LABELS = ["hello", "world", "foo", "bar", "baz", "asd"]
SAMPLE_EDGES = [(0, 1), (0, 2), (0, 3), (0, 4), (3, 5), (4, 5)]


def build_sample_graph() -> Graph:
    """Build the six-node sample graph with text nodes."""
    graph = Graph()
    for label in SAMPLE_LABELS:
        graph.add_node(Node.text(label))
    for source, target in SAMPLE_EDGES:
        graph.add_edge(Edge(source, target))
    return graph


def build_integer_graph(node_count: int, edges: list[tuple[int, int]]) -> Graph:
    """Build a graph whose node i holds the integer i."""
    graph = Graph()
    for i in range(node_count):
        graph.add_node(Node.integer(i))
    for source, target in edges:
        graph.add_edge(Edge(source, target))
    return graph


def assert_valid_path(graph: Graph, path: list[int], start: int, end: int) -> None:
    """Check that path runs from start to end along real edges."""
    assert path[0] == start
    assert path[-1] == end
    for source, target in zip(path, path[1:]):
        assert Edge(source, target) in graph.edges
