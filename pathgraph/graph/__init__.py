"""Graph primitives and helpers.

This package provides the directed weighted graph type `WeightedDiGraph` and
helpers for conversion to and from NetworkX (`convert`).
"""

from pathgraph.graph.weighted_digraph import (
    Cost,
    Edge,
    Node,
    NodeID,
    WeightedDiGraph,
)

__all__ = ["Cost", "Edge", "Node", "NodeID", "WeightedDiGraph"]
