"""Directed weighted graph indexed by a chained hash table.

`WeightedDiGraph` keeps every `Node` in a `KeyedMap` keyed by the node's data
value. Each node owns an ordered list of outgoing `Edge` records; an edge
refers to its successor by key, so the node index stays the single owner of
every node and cycles in the graph never become ownership cycles.

Rules enforced:
  - Inserting an existing node is a no-op (reported, not an error).
  - Edges are never created to or from a missing node.
  - At most one edge per ordered (source, successor) pair; re-inserting the
    pair overwrites its weight.
  - Weights are finite, non-negative real numbers.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Hashable, Iterator, List, Optional, Tuple

from pathgraph.errors import (
    InvalidWeightError,
    UnknownEdgeError,
    UnknownNodeError,
)
from pathgraph.keyed_map import KeyedMap
from pathgraph.logging import get_logger

NodeID = Hashable
Cost = float
EdgeTuple = Tuple[NodeID, NodeID, Cost]

logger = get_logger(__name__)


@dataclass
class Edge:
    """Outgoing edge owned by its source node.

    Attributes:
        successor: Key of the target node in the graph's node index.
        weight: Non-negative traversal cost.
    """

    successor: NodeID
    weight: Cost


@dataclass
class Node:
    """Graph vertex identified by ``data``, owning its outgoing edges."""

    data: NodeID
    edges: List[Edge] = field(default_factory=list)

    def find_edge(self, successor: NodeID) -> Optional[Edge]:
        for edge in self.edges:
            if edge.successor == successor:
                return edge
        return None


def validate_weight(weight: Any) -> Cost:
    """Return ``weight`` as a float, rejecting values Dijkstra cannot use.

    Raises:
        InvalidWeightError: If ``weight`` is not a real number, is a bool, is
            NaN or infinite, or is negative.
    """
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise InvalidWeightError(f"Edge weight must be a real number, got {weight!r}.")
    value = float(weight)
    if not math.isfinite(value):
        raise InvalidWeightError(f"Edge weight must be finite, got {weight!r}.")
    if value < 0:
        raise InvalidWeightError(f"Edge weight must be non-negative, got {weight!r}.")
    return value


class WeightedDiGraph:
    """A directed graph with unique, weighted edges between hashable nodes.

    Attributes:
        _nodes: Node index mapping node data to `Node`.
        _edge_count: Number of edges across all outgoing lists.
    """

    def __init__(self, capacity: Optional[int] = None) -> None:
        """Initialize an empty graph.

        Args:
            capacity: Initial bucket count of the node index. Defaults to the
                `KeyedMap` default.
        """
        self._nodes: KeyedMap[NodeID, Node] = KeyedMap(capacity)
        self._edge_count: int = 0

    #
    # Node management
    #
    def insert_node(self, value: NodeID) -> bool:
        """Add a node for ``value`` unless one already exists.

        Args:
            value: Hashable node data, not ``None``.

        Returns:
            bool: True if a node was created, False if it already existed.

        Raises:
            InvalidKeyError: If ``value`` is ``None`` or unhashable.
        """
        if self._nodes.contains_key(value):
            return False
        self._nodes.put(value, Node(value))
        return True

    def remove_node(self, value: NodeID) -> None:
        """Remove a node and every edge that enters or leaves it.

        Raises:
            UnknownNodeError: If the node does not exist.
        """
        node = self.get_node(value)
        removed = len(node.edges)
        for other in self._nodes.values():
            if other is node:
                continue
            kept = [edge for edge in other.edges if edge.successor != value]
            removed += len(other.edges) - len(kept)
            other.edges = kept
        self._nodes.remove(value)
        self._edge_count -= removed
        logger.debug("Removed node %r and %d incident edge(s)", value, removed)

    def get_node(self, value: NodeID) -> Node:
        """Return the `Node` stored for ``value``.

        Raises:
            UnknownNodeError: If the node does not exist.
        """
        if not self._nodes.contains_key(value):
            raise UnknownNodeError(f"Node {value!r} does not exist.")
        return self._nodes.get(value)

    def contains_node(self, value: Any) -> bool:
        return self._nodes.contains_key(value)

    def node_count(self) -> int:
        return self._nodes.size()

    def nodes(self) -> Iterator[NodeID]:
        """Iterate over node data in node-index order."""
        return self._nodes.keys()

    #
    # Edge management
    #
    def insert_edge(self, src: NodeID, dst: NodeID, weight: Cost) -> bool:
        """Add a directed edge from ``src`` to ``dst`` or update its weight.

        Neither endpoint is created implicitly.

        Args:
            src: Source node. Must exist in the graph.
            dst: Successor node. Must exist in the graph.
            weight: Finite, non-negative cost.

        Returns:
            bool: True if a new edge was added, False if an existing edge had
            its weight overwritten.

        Raises:
            UnknownNodeError: If either endpoint does not exist.
            InvalidWeightError: If ``weight`` is negative or non-finite.
        """
        source = self.get_node(src)
        if not self._nodes.contains_key(dst):
            raise UnknownNodeError(f"Target node {dst!r} does not exist.")
        value = validate_weight(weight)

        edge = source.find_edge(dst)
        if edge is not None:
            edge.weight = value
            return False
        source.edges.append(Edge(dst, value))
        self._edge_count += 1
        return True

    def remove_edge(self, src: NodeID, dst: NodeID) -> Cost:
        """Remove the directed edge from ``src`` to ``dst``.

        Returns:
            Cost: The weight of the removed edge.

        Raises:
            UnknownNodeError: If either endpoint does not exist.
            UnknownEdgeError: If there is no edge from ``src`` to ``dst``.
        """
        source = self.get_node(src)
        if not self._nodes.contains_key(dst):
            raise UnknownNodeError(f"Target node {dst!r} does not exist.")
        for pos, edge in enumerate(source.edges):
            if edge.successor == dst:
                del source.edges[pos]
                self._edge_count -= 1
                return edge.weight
        raise UnknownEdgeError(f"No edge from {src!r} to {dst!r}.")

    def get_edge_weight(self, src: NodeID, dst: NodeID) -> Cost:
        """Return the weight of the directed edge from ``src`` to ``dst``.

        Raises:
            UnknownEdgeError: If the edge (or either endpoint) does not exist.
        """
        edge = None
        if self._nodes.contains_key(src):
            edge = self._nodes.get(src).find_edge(dst)
        if edge is None:
            raise UnknownEdgeError(f"No edge from {src!r} to {dst!r}.")
        return edge.weight

    def contains_edge(self, src: Any, dst: Any) -> bool:
        if not self._nodes.contains_key(src):
            return False
        return self._nodes.get(src).find_edge(dst) is not None

    def edge_count(self) -> int:
        return self._edge_count

    def successors(self, value: NodeID) -> Iterator[Tuple[NodeID, Cost]]:
        """Yield ``(successor, weight)`` for each outgoing edge, in insertion order.

        Raises:
            UnknownNodeError: If the node does not exist.
        """
        for edge in self.get_node(value).edges:
            yield edge.successor, edge.weight

    def edges(self) -> Iterator[EdgeTuple]:
        """Iterate over all edges as ``(src, dst, weight)`` tuples."""
        for node in self._nodes.values():
            for edge in node.edges:
                yield node.data, edge.successor, edge.weight

    #
    # Container protocol
    #
    def __contains__(self, value: Any) -> bool:
        return self.contains_node(value)

    def __len__(self) -> int:
        return self.node_count()

    def __iter__(self) -> Iterator[NodeID]:
        return self.nodes()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(nodes={self.node_count()}, "
            f"edges={self._edge_count})"
        )
