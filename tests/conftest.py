"""Global pytest configuration and shared sample graphs."""

from __future__ import annotations

import pytest

from pathgraph.graph.weighted_digraph import WeightedDiGraph

CAMPUS_EDGES = [
    ("A", "B", 15),
    ("A", "C", 1),
    ("A", "D", 4),
    ("B", "A", 15),
    ("B", "D", 2),
    ("B", "E", 1),
    ("C", "A", 1),
    ("C", "E", 10),
    ("D", "A", 4),
    ("D", "B", 2),
    ("D", "E", 10),
    ("E", "D", 10),
    ("E", "C", 1),
]


def build_graph(edges, nodes=()) -> WeightedDiGraph:
    """Build a graph from ``(src, dst, weight)`` tuples plus optional extra nodes."""
    g = WeightedDiGraph()
    for node in nodes:
        g.insert_node(node)
    for src, dst, weight in edges:
        g.insert_node(src)
        g.insert_node(dst)
        g.insert_edge(src, dst, weight)
    return g


@pytest.fixture
def campus_edges():
    return list(CAMPUS_EDGES)


@pytest.fixture
def campus():
    # Bidirectional: A-B:15, A-C:1, A-D:4, B-D:2, D-E:10
    # One-way: B->E:1, C->E:10, E->C:1
    #
    # A->E = 7 via A,D,B,E; C->E = 8 via C,A,D,B,E
    return build_graph(CAMPUS_EDGES)


@pytest.fixture
def campus_c_unreachable():
    # Same as campus without A->C and E->C, so nothing leads into C.
    edges = [e for e in CAMPUS_EDGES if e[1] != "C"]
    return build_graph(edges, nodes=["C"])


@pytest.fixture
def line1():
    #     [1]       [2]
    #  A───────►B───────►C
    return build_graph([("A", "B", 1), ("B", "C", 2)])


@pytest.fixture
def square1():
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   │
    #   │                   ▼
    #   A                   C
    #   │                   ▲
    #   │   [2]        [2]  │
    #   └────────►D─────────┘
    return build_graph(
        [("A", "B", 1), ("B", "C", 1), ("A", "D", 2), ("D", "C", 2)]
    )


@pytest.fixture
def two_islands():
    #  A◄──►B      C◄──►D
    return build_graph(
        [("A", "B", 1), ("B", "A", 1), ("C", "D", 1), ("D", "C", 1)]
    )
