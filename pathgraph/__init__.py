"""PathGraph: weighted location graphs and shortest-path queries.

PathGraph stores named locations and directed, weighted connections between
them, and answers shortest-path queries with Dijkstra's algorithm.

Primary API:
    WeightedDiGraph - Directed weighted graph indexed by a hash table
    KeyedMap - Chained hash table used as the node index
    ShortestPathEngine - Shortest path and cost between two nodes
    RouteFinder - Location, route and travel-time queries, including via routes
    load_edge_list_file() - Load a ``"a" -> "b" [seconds=n]`` edge list

Example:
    from pathgraph import WeightedDiGraph, ShortestPathEngine

    g = WeightedDiGraph()
    for name in ("A", "B", "C"):
        g.insert_node(name)
    g.insert_edge("A", "B", 2.0)
    g.insert_edge("B", "C", 3.0)

    engine = ShortestPathEngine(g)
    engine.shortest_path_nodes("A", "C")  # ["A", "B", "C"]
    engine.shortest_path_cost("A", "C")  # 5.0
"""

from __future__ import annotations

from pathgraph import logging
from pathgraph.algorithms.spf import (
    SearchRecord,
    ShortestPathEngine,
    shortest_path,
    shortest_path_cost,
    shortest_path_nodes,
)
from pathgraph.errors import (
    DuplicateKeyError,
    InvalidKeyError,
    InvalidWeightError,
    KeyNotFoundError,
    NoPathError,
    PathGraphError,
    UnknownEdgeError,
    UnknownNodeError,
)
from pathgraph.graph.weighted_digraph import WeightedDiGraph
from pathgraph.io import LoadResult, load_edge_list, load_edge_list_file
from pathgraph.keyed_map import KeyedMap
from pathgraph.routing import RouteFinder

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Data structures
    "KeyedMap",
    "WeightedDiGraph",
    # Algorithms
    "SearchRecord",
    "ShortestPathEngine",
    "shortest_path",
    "shortest_path_cost",
    "shortest_path_nodes",
    # Loading and queries
    "LoadResult",
    "load_edge_list",
    "load_edge_list_file",
    "RouteFinder",
    # Errors
    "PathGraphError",
    "InvalidKeyError",
    "DuplicateKeyError",
    "KeyNotFoundError",
    "UnknownNodeError",
    "UnknownEdgeError",
    "InvalidWeightError",
    "NoPathError",
    # Utilities
    "logging",
]
