"""Graph algorithms operating on `WeightedDiGraph`."""

from pathgraph.algorithms.spf import (
    SearchRecord,
    ShortestPathEngine,
    shortest_path,
    shortest_path_cost,
    shortest_path_nodes,
    shortest_path_search,
)

__all__ = [
    "SearchRecord",
    "ShortestPathEngine",
    "shortest_path",
    "shortest_path_cost",
    "shortest_path_nodes",
    "shortest_path_search",
]
