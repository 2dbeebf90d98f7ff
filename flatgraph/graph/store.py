"""
Graph Store for flatgraph

This module holds the Graph class: a directed graph kept as two flat,
ordered lists (nodes and edges) where a node's or edge's identity is its
position in the list.

Design Decisions:
    - No adjacency lists; every query scans the edge list
    - Insertion deduplicates by structural equality, so the same value
      always maps to the same index
    - Removal swaps the last node into the freed slot: exactly one node
      changes index and no tombstones are left behind

Graph Properties:
    - Directed: edges point from source to target
    - May have cycles and self-loops
    - Every edge endpoint is a valid node index at all times
    - Not thread-safe; callers sharing a Graph must hold their own lock
"""

import logging
from collections import deque
from typing import Optional

from flatgraph.models import Edge, Node

logger = logging.getLogger(__name__)


class Graph:
    """
    An index-addressed directed graph.

    Attributes:
        nodes: Read-only view of the stored nodes, by index
        edges: Read-only view of the stored edges, by index

    Usage:
        graph = Graph()
        a = graph.add_node(Node.of("a"))
        b = graph.add_node(Node.of("b"))
        graph.add_edge(Edge(a, b))
        graph.shortest_path(a, b)  # [a, b]
    """

    def __init__(self) -> None:
        """Initialize an empty graph."""
        self._nodes: list[Node] = []
        self._edges: list[Edge] = []

    @property
    def nodes(self) -> tuple[Node, ...]:
        return tuple(self._nodes)

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges)

    @property
    def node_count(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        """Return the number of edges in the graph."""
        return len(self._edges)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node: object) -> bool:
        return node in self._nodes

    def __repr__(self) -> str:
        return f"Graph(nodes={self._nodes!r}, edges={self._edges!r})"

    # -----------------
    # MUTATION
    # -----------------

    def add_node(self, node: Node) -> int:
        """
        Add a node, or find the equal one already stored.

        Args:
            node: The node to insert

        Returns:
            Index of the stored node (existing or newly appended)
        """
        existing = self.find_node_idx(node)
        if existing is not None:
            return existing

        self._nodes.append(node)
        logger.debug("Added node %s at index %d", node, len(self._nodes) - 1)
        return len(self._nodes) - 1

    def add_edge(self, edge: Edge) -> int:
        """
        Add an edge, or find the equal one already stored.

        Args:
            edge: The edge to insert

        Returns:
            Index of the stored edge (existing or newly appended)

        Raises:
            IndexError: If either endpoint is not a current node index
        """
        for idx, current in enumerate(self._edges):
            if current == edge:
                return idx

        for endpoint in (edge.source, edge.target):
            if endpoint >= len(self._nodes):
                raise IndexError(
                    f"Edge {edge} references node {endpoint}, "
                    f"graph has {len(self._nodes)} node(s)"
                )

        self._edges.append(edge)
        logger.debug("Added edge %s at index %d", edge, len(self._edges) - 1)
        return len(self._edges) - 1

    def find_node_idx(self, node: Node) -> Optional[int]:
        """
        Look up the index of a node without modifying the graph.

        Args:
            node: The node to search for (compared structurally)

        Returns:
            The node's index if present, None otherwise
        """
        for idx, current in enumerate(self._nodes):
            if current == node:
                return idx
        return None

    def get_node(self, index: int) -> Optional[Node]:
        """Return the node at index, or None if the index is out of range."""
        if 0 <= index < len(self._nodes):
            return self._nodes[index]
        return None

    def remove_node(self, index: int) -> Optional[Node]:
        """
        Remove a node and every edge touching it.

        The last node is moved into the freed slot, so after the call the
        node formerly at index len(nodes) - 1 lives at `index`, and all
        edges pointing to or from it are rewritten accordingly.

        Args:
            index: Index of the node to remove

        Returns:
            The removed node, or None if index is out of range
        """
        if not 0 <= index < len(self._nodes):
            return None

        last_idx = len(self._nodes) - 1

        removed = self._nodes[index]
        self._nodes[index] = self._nodes[last_idx]
        self._nodes.pop()

        self._edges = [edge for edge in self._edges if not edge.touches(index)]

        if index != last_idx:
            self._edges = [
                Edge(
                    source=index if edge.source == last_idx else edge.source,
                    target=index if edge.target == last_idx else edge.target,
                )
                for edge in self._edges
            ]
            logger.debug("Moved node %d to index %d", last_idx, index)

        logger.debug("Removed node %s from index %d", removed, index)
        return removed

    def clear(self) -> None:
        """Remove all nodes and edges from the graph."""
        self._nodes.clear()
        self._edges.clear()

    # -----------------
    # QUERIES
    # -----------------

    def reachable_nodes_from(self, index: int) -> list[int]:
        """
        Get the direct successors of a node.

        Returns:
            Targets of all edges leaving index, in edge insertion order.
            Duplicates are possible when several edges share a target.
        """
        return [edge.target for edge in self._edges if edge.source == index]

    def nodes_that_can_reach(self, index: int) -> list[int]:
        """
        Get the direct predecessors of a node.

        Returns:
            Sources of all edges entering index, in edge insertion order
        """
        return [edge.source for edge in self._edges if edge.target == index]

    def boundary(self) -> Optional[list[int]]:
        """
        Get all nodes without outgoing edges.

        Such nodes may be reached by others but reach nothing themselves.

        Returns:
            Their indices in ascending order, or None if there are none
            (an empty graph has no boundary either)
        """
        sources = {edge.source for edge in self._edges}
        found = [idx for idx in range(len(self._nodes)) if idx not in sources]
        return found or None

    def leaves(self) -> Optional[list[int]]:
        """Alias of boundary() for graphs that are trees."""
        return self.boundary()

    def bfs_distance(self, start: int, end: int) -> Optional[int]:
        """
        Breadth-first search from start until end is discovered.

        The returned counter grows by one for every node fully expanded
        before end is enqueued, plus one for the final hop. It counts
        expanded nodes, not levels: in a graph 0->1, 0->2, 0->3, 3->4 the
        distance from 0 to 4 is 4.

        Args:
            start: Index to search from
            end: Index to search for

        Returns:
            0 if start == end, the counter when end is found, or None if
            end cannot be reached from start
        """
        if start == end:
            return 0

        queue: deque[int] = deque([start])
        visited: set[int] = set()
        distance = 0

        while queue:
            working = queue[0]

            for neighbour in self.reachable_nodes_from(working):
                if neighbour in visited:
                    continue
                queue.append(neighbour)
                if neighbour == end:
                    return distance + 1

            visited.add(queue.popleft())
            distance += 1

        logger.debug("Node %d unreachable from %d after %d expansions", end, start, distance)
        return None

    def shortest_path(self, start: int, end: int) -> Optional[list[int]]:
        """
        Find a shortest directed path (by edge count) from start to end.

        See flatgraph.graph.paths.find_shortest_path for the algorithm.

        Returns:
            Node indices from start to end inclusive, or None if unreachable
        """
        from flatgraph.graph.paths import find_shortest_path

        return find_shortest_path(self, start, end)
