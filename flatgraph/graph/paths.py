"""
Shortest Path Search for flatgraph

Finds a shortest directed path by growing an exploration tree over the
graph and walking it backwards once the destination shows up.

Strategy:
    1. Build a PathTree rooted at `start`. The tree is itself a Graph;
       each tree node is an integer Node whose value is the index of the
       original node it stands for.
    2. Expand breadth-first: every leaf on the current frontier gets one
       child per unvisited neighbour of its original node.
    3. When `end` appears among the neighbours of a leaf, follow parent
       edges from that leaf to the root, collecting the original indices,
       then reverse them and append `end`.

Tie-breaking:
    Neighbours are explored in edge insertion order, so among equally
    short paths the one whose first differing hop was inserted earliest
    wins.
"""

import logging
from typing import Optional

from flatgraph.graph.store import Graph
from flatgraph.models import DataKind, Edge, Node, NodeKindError

logger = logging.getLogger(__name__)


def _payload_index(node: Node) -> int:
    """
    Read the original-graph index stored in a path tree node.

    Raises:
        NodeKindError: If the node does not hold an integer. Path trees
            only ever store integers, so this means the tree is corrupt.
    """
    if node.kind is not DataKind.INTEGER:
        raise NodeKindError(f"Path tree node {node} does not hold an integer index")
    return node.value


class PathTree:
    """
    Exploration tree used to reconstruct a shortest path.

    Tree indices and original-graph indices are different spaces: methods
    take and return tree indices, while payload() maps a tree index to the
    original index it represents.

    Attributes:
        root: Tree index of the root (always 0)
    """

    def __init__(self, origin: int) -> None:
        self._tree = Graph()
        self.root = self._tree.add_node(Node.integer(origin))

    def __len__(self) -> int:
        return len(self._tree)

    def payload(self, tree_idx: int) -> int:
        """Return the original-graph index stored at a tree node."""
        node = self._tree.get_node(tree_idx)
        if node is None:
            raise IndexError(f"Path tree has no node {tree_idx}")
        return _payload_index(node)

    def grow(self, parent: int, origin: int) -> int:
        """
        Attach a new leaf under parent.

        Args:
            parent: Tree index of the parent leaf
            origin: Original-graph index the new leaf stands for

        Returns:
            Tree index of the new leaf

        Note:
            The tree is a Graph, so nodes are deduplicated: each origin
            may be grown only once.
        """
        child = self._tree.add_node(Node.integer(origin))
        self._tree.add_edge(Edge(parent, child))
        return child

    def parent_of(self, tree_idx: int) -> Optional[int]:
        """Return the parent's tree index, or None for the root."""
        parents = self._tree.nodes_that_can_reach(tree_idx)
        return parents[0] if parents else None

    def backtrack(self, tree_idx: int) -> list[int]:
        """
        Collect original indices from the root down to a tree node.

        Returns:
            Original-graph indices in root-to-node order
        """
        path = [self.payload(tree_idx)]
        current = self.parent_of(tree_idx)
        while current is not None:
            path.append(self.payload(current))
            current = self.parent_of(current)
        path.reverse()
        return path


def find_shortest_path(graph: Graph, start: int, end: int) -> Optional[list[int]]:
    """
    Find a shortest directed path from start to end.

    Args:
        graph: The graph to search
        start: Original index to start from
        end: Original index to reach

    Returns:
        Indices [start, ..., end] where each consecutive pair is an edge of
        the graph, [start] when start == end, or None if end is not
        reachable (or either index is out of range)

    Example:
        >>> g = Graph()
        >>> for label in "abc":
        ...     _ = g.add_node(Node.of(label))
        >>> _ = g.add_edge(Edge(0, 1))
        >>> _ = g.add_edge(Edge(1, 2))
        >>> find_shortest_path(g, 0, 2)
        [0, 1, 2]
    """
    if not (0 <= start < graph.node_count and 0 <= end < graph.node_count):
        return None

    if start == end:
        return [start]

    tree = PathTree(start)
    visited = {start}
    frontier = [tree.root]

    while frontier:
        next_frontier = []

        for leaf in frontier:
            for neighbour in graph.reachable_nodes_from(tree.payload(leaf)):
                if neighbour in visited:
                    continue

                if neighbour == end:
                    path = tree.backtrack(leaf)
                    path.append(end)
                    logger.debug("Path %d -> %d found: %s", start, end, path)
                    return path

                visited.add(neighbour)
                next_frontier.append(tree.grow(leaf, neighbour))

        frontier = next_frontier

    logger.debug("No path %d -> %d, explored %d node(s)", start, end, len(visited))
    return None
