"""
Graph module for flatgraph.

This module provides the index-addressed Graph store, shortest path
reconstruction and NetworkX conversion.
"""

from flatgraph.graph.store import Graph
from flatgraph.graph.paths import PathTree, find_shortest_path
from flatgraph.graph.export import from_networkx, to_networkx

__all__ = [
    "Graph",
    "PathTree",
    "find_shortest_path",
    "from_networkx",
    "to_networkx",
]
