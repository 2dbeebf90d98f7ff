"""
NetworkX interop for flatgraph.

Converts a Graph to a NetworkX DiGraph and back, so the standard
NetworkX algorithms and drawing tools can be used on it.
"""

from typing import Hashable

import networkx as nx

from flatgraph.graph.store import Graph
from flatgraph.models import Edge, Node


def to_networkx(graph: Graph) -> nx.DiGraph:
    """
    Export a Graph as a NetworkX DiGraph.

    Node keys are the graph's node indices. Each node carries its Node
    under the "node" attribute and each edge its edge index under "index".

    Args:
        graph: The graph to export

    Returns:
        A new DiGraph; later changes to either graph are not shared
    """
    digraph = nx.DiGraph()
    for idx, node in enumerate(graph.nodes):
        digraph.add_node(idx, node=node)
    for idx, edge in enumerate(graph.edges):
        digraph.add_edge(edge.source, edge.target, index=idx)
    return digraph


def from_networkx(digraph: nx.DiGraph) -> tuple[Graph, dict[Hashable, int]]:
    """
    Build a Graph from a NetworkX DiGraph.

    A node's payload is taken from its "node" attribute when present,
    otherwise the node key itself is wrapped with Node.of(). Keys whose
    payloads are equal collapse into a single Graph node.

    Args:
        digraph: The NetworkX graph to import

    Returns:
        The new Graph and a mapping from NetworkX key to node index

    Raises:
        TypeError: If a key without a "node" attribute is not a str,
            bytes or int, or if a "node" attribute is not a Node
    """
    graph = Graph()
    index_of: dict[Hashable, int] = {}

    for key, attrs in digraph.nodes(data=True):
        node = attrs.get("node")
        if node is None:
            node = Node.of(key)
        elif not isinstance(node, Node):
            raise TypeError(
                f"Node {key!r} has a \"node\" attribute of type {type(node).__name__}, "
                "expected Node"
            )
        index_of[key] = graph.add_node(node)

    for source, target in digraph.edges():
        graph.add_edge(Edge(index_of[source], index_of[target]))

    return graph, index_of
