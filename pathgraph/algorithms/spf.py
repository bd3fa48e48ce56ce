"""Shortest-path-first (SPF) search.

Implements Dijkstra's algorithm between a source and a destination node of a
`WeightedDiGraph` with non-negative weights.

Notes:
    The frontier is a binary heap of `SearchRecord` objects ordered by
    cumulative cost. There is no decrease-key: a node may be pushed several
    times through different predecessors, and only its first extraction is
    authoritative. Later extractions of an already settled node are stale and
    are discarded. Because weights are non-negative, extracted costs never
    decrease over a query, so the first extraction of a node carries its true
    shortest distance.

    The search stops as soon as the destination is settled; the destination's
    record links back to the source through its predecessors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from heapq import heappop, heappush
from typing import List, Optional, Set, Tuple

from pathgraph.errors import NoPathError, UnknownNodeError
from pathgraph.graph.weighted_digraph import Cost, NodeID, WeightedDiGraph
from pathgraph.logging import get_logger

logger = get_logger(__name__)


@dataclass(order=True)
class SearchRecord:
    """Node reached during one search, with its cost and predecessor record.

    Records compare by ``cost`` only, so the heap yields the cheapest one
    first. Ties are broken arbitrarily.
    """

    cost: Cost
    node: NodeID = field(compare=False)
    predecessor: Optional[SearchRecord] = field(
        default=None, compare=False, repr=False
    )

    def path(self) -> List[NodeID]:
        """Return node data from the search root to this record, inclusive."""
        nodes: List[NodeID] = []
        record: Optional[SearchRecord] = self
        while record is not None:
            nodes.append(record.node)
            record = record.predecessor
        nodes.reverse()
        return nodes


def shortest_path_search(
    graph: WeightedDiGraph, src_node: NodeID, dst_node: NodeID
) -> SearchRecord:
    """Run Dijkstra from ``src_node`` until ``dst_node`` is settled.

    Args:
        graph: The graph to search. It must not be mutated during the call.
        src_node: Start node.
        dst_node: Destination node.

    Returns:
        SearchRecord: The destination's record. ``record.cost`` is the
        shortest distance and ``record.path()`` a path achieving it.

    Raises:
        UnknownNodeError: If either endpoint is not in the graph.
        NoPathError: If no directed path leads from ``src_node`` to ``dst_node``.
    """
    if not graph.contains_node(src_node):
        raise UnknownNodeError(f"Source node {src_node!r} is not in the graph.")
    if not graph.contains_node(dst_node):
        raise UnknownNodeError(f"Destination node {dst_node!r} is not in the graph.")

    if src_node == dst_node:
        return SearchRecord(0.0, src_node)

    settled: Set[NodeID] = set()
    min_pq: List[SearchRecord] = [SearchRecord(0.0, src_node)]

    while min_pq:
        record = heappop(min_pq)
        if record.node in settled:
            continue
        settled.add(record.node)

        if record.node == dst_node:
            logger.debug(
                "SPF %r -> %r: cost %s after settling %d node(s)",
                src_node,
                dst_node,
                record.cost,
                len(settled),
            )
            return record

        for successor, weight in graph.successors(record.node):
            if successor not in settled:
                heappush(min_pq, SearchRecord(record.cost + weight, successor, record))

    logger.debug(
        "SPF %r -> %r: exhausted after settling %d node(s)",
        src_node,
        dst_node,
        len(settled),
    )
    raise NoPathError(f"No path from {src_node!r} to {dst_node!r}.")


def shortest_path(
    graph: WeightedDiGraph, src_node: NodeID, dst_node: NodeID
) -> Tuple[List[NodeID], Cost]:
    """Return ``(path, cost)`` of a shortest path, computed by a single search."""
    record = shortest_path_search(graph, src_node, dst_node)
    return record.path(), record.cost


def shortest_path_nodes(
    graph: WeightedDiGraph, src_node: NodeID, dst_node: NodeID
) -> List[NodeID]:
    """Return node data along a shortest path, both endpoints included.

    Raises:
        UnknownNodeError: If either endpoint is not in the graph.
        NoPathError: If ``dst_node`` is unreachable from ``src_node``.
    """
    return shortest_path_search(graph, src_node, dst_node).path()


def shortest_path_cost(
    graph: WeightedDiGraph, src_node: NodeID, dst_node: NodeID
) -> Cost:
    """Return the total weight of a shortest path (0.0 when endpoints match).

    Raises:
        UnknownNodeError: If either endpoint is not in the graph.
        NoPathError: If ``dst_node`` is unreachable from ``src_node``.
    """
    return shortest_path_search(graph, src_node, dst_node).cost


class ShortestPathEngine:
    """Shortest-path queries bound to one graph.

    The engine keeps no state between queries; every call runs a fresh search
    over the graph as it is at call time.
    """

    def __init__(self, graph: WeightedDiGraph) -> None:
        self.graph = graph

    def shortest_path_nodes(self, start: NodeID, end: NodeID) -> List[NodeID]:
        return shortest_path_nodes(self.graph, start, end)

    def shortest_path_cost(self, start: NodeID, end: NodeID) -> Cost:
        return shortest_path_cost(self.graph, start, end)

    def shortest_path(self, start: NodeID, end: NodeID) -> Tuple[List[NodeID], Cost]:
        return shortest_path(self.graph, start, end)
