"""
flatgraph

An in-memory directed graph stored as two flat lists of nodes and
edges, with reachability, BFS distance, shortest path and boundary
queries.
"""

from flatgraph.models import DataKind, Edge, Node, NodeKindError
from flatgraph.graph import Graph

__all__ = ["DataKind", "Edge", "Graph", "Node", "NodeKindError"]
__version__ = "0.1.0"
