"""
Core Data Models for flatgraph

This module defines the value types stored in a Graph:
- DataKind: Tag of a node payload (text, blob or integer)
- Node: A tagged payload, compared structurally
- Edge: A directed pair of node indices

These models are designed to be:
- Immutable (frozen dataclasses), so they hash and compare by value
- Ordered by tag first, then by value
- Cheap to build from plain Python values via Node.of()
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Union

NodeValue = Union[str, bytes, int]


class NodeKindError(TypeError):
    """Raised when a node payload is read as a kind it does not hold."""


class DataKind(IntEnum):
    """
    Tag of a node payload.

    The numeric values fix the ordering used when comparing nodes of
    different kinds: TEXT < BLOB < INTEGER.
    """

    TEXT = 0
    BLOB = 1
    INTEGER = 2


_KIND_TYPES = {
    DataKind.TEXT: str,
    DataKind.BLOB: bytes,
    DataKind.INTEGER: int,
}


@dataclass(frozen=True, order=True)
class Node:
    """
    A single graph vertex wrapping one tagged value.

    Two nodes are equal when both their kind and value are equal, which
    is what Graph.add_node uses for deduplication.

    Attributes:
        kind: Payload tag
        value: The payload itself; its Python type must match kind

    Invariants:
        - type(value) matches kind (bool is not accepted as an integer)
    """

    kind: DataKind
    value: NodeValue

    def __post_init__(self) -> None:
        """Validate that the payload matches its tag."""
        object.__setattr__(self, "kind", DataKind(self.kind))
        expected = _KIND_TYPES[self.kind]
        if isinstance(self.value, bool) or not isinstance(self.value, expected):
            raise ValueError(
                f"{self.kind.name} node needs a {expected.__name__} value, "
                f"got {type(self.value).__name__}"
            )

    @classmethod
    def text(cls, value: str) -> "Node":
        return cls(DataKind.TEXT, value)

    @classmethod
    def blob(cls, value: bytes) -> "Node":
        if isinstance(value, (bytearray, memoryview)):
            value = bytes(value)
        return cls(DataKind.BLOB, value)

    @classmethod
    def integer(cls, value: int) -> "Node":
        return cls(DataKind.INTEGER, value)

    @classmethod
    def of(cls, value: object) -> "Node":
        """
        Build a node from a plain Python value, picking the kind from its type.

        Args:
            value: A str, bytes-like object or int

        Returns:
            The wrapping Node

        Raises:
            TypeError: If the value is of any other type (bool included)
        """
        if isinstance(value, str):
            return cls.text(value)
        if isinstance(value, (bytes, bytearray, memoryview)):
            return cls.blob(bytes(value))
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.integer(value)
        raise TypeError(f"Cannot build a Node from {type(value).__name__}")

    def __str__(self) -> str:
        return f"{self.kind.name.lower()}:{self.value!r}"


@dataclass(frozen=True, order=True)
class Edge:
    """
    A directed edge between two node indices.

    Attributes:
        source: Index of the node the edge leaves
        target: Index of the node the edge enters

    Note:
        Self-loops (source == target) are valid.
    """

    source: int
    target: int

    def __post_init__(self) -> None:
        """Validate that both endpoints are plausible indices."""
        if self.source < 0 or self.target < 0:
            raise ValueError(
                f"Edge endpoints must be non-negative, got ({self.source}, {self.target})"
            )

    def touches(self, index: int) -> bool:
        """Check if either endpoint is the given node index."""
        return self.source == index or self.target == index

    def __str__(self) -> str:
        return f"{self.source} -> {self.target}"
