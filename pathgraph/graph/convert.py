"""Graph conversion utilities between WeightedDiGraph and NetworkX graphs.

Each edge of a `WeightedDiGraph` maps to exactly one NetworkX edge with its
weight stored under a configurable attribute name, so conversions in both
directions are lossless for node data and weights.
"""

from typing import Optional

import networkx as nx

from pathgraph.graph.weighted_digraph import Cost, WeightedDiGraph


def to_digraph(graph: WeightedDiGraph, weight: str = "weight") -> nx.DiGraph:
    """Convert a WeightedDiGraph to a NetworkX DiGraph.

    Args:
        graph: The WeightedDiGraph to convert.
        weight: Edge attribute name that receives each edge weight.

    Returns:
        A NetworkX DiGraph with the same nodes and weighted edges.
    """
    nx_graph = nx.DiGraph()
    nx_graph.add_nodes_from(graph.nodes())
    for src, dst, cost in graph.edges():
        nx_graph.add_edge(src, dst, **{weight: cost})
    return nx_graph


def from_digraph(
    nx_graph: nx.DiGraph,
    weight: str = "weight",
    default: Cost = 1.0,
    capacity: Optional[int] = None,
) -> WeightedDiGraph:
    """Convert a NetworkX DiGraph to a WeightedDiGraph.

    Args:
        nx_graph: Source graph. Each edge of an undirected graph becomes a
            pair of opposite directed edges with the same weight.
        weight: Edge attribute holding the weight.
        default: Weight used when an edge lacks the ``weight`` attribute.
        capacity: Optional initial node-index capacity.

    Returns:
        A WeightedDiGraph with the same nodes and weighted edges.

    Raises:
        InvalidWeightError: If any edge weight is negative or non-finite.
    """
    graph = WeightedDiGraph(capacity)
    for node in nx_graph.nodes:
        graph.insert_node(node)

    edges = nx_graph.edges(data=weight, default=default)
    if not nx_graph.is_directed():
        edges = [
            pair
            for u, v, cost in edges
            for pair in ((u, v, cost), (v, u, cost))
        ]
    for src, dst, cost in edges:
        graph.insert_edge(src, dst, cost)
    return graph
