"""Route queries over a location graph.

`RouteFinder` is the query facade used by the CLI. It keeps the list of known
locations in the order they were first seen and answers path, travel-time and
"via" queries. A via route is the shortest path to the via location joined to
the shortest path from it, with the shared via location listed once.

Engine errors (`UnknownNodeError`, `NoPathError`) propagate to the caller.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from pathgraph.algorithms.spf import ShortestPathEngine
from pathgraph.graph.weighted_digraph import Cost, NodeID, WeightedDiGraph
from pathgraph.io import load_edge_list_file
from pathgraph.logging import get_logger

logger = get_logger(__name__)


class RouteFinder:
    """Shortest routes and travel times between named locations."""

    def __init__(self, graph: Optional[WeightedDiGraph] = None) -> None:
        """Wrap ``graph``, or a new empty graph when None.

        Nodes already present in ``graph`` become the initial locations, in
        node-index order since their insertion order is not recorded.
        """
        self.graph = WeightedDiGraph() if graph is None else graph
        self.engine = ShortestPathEngine(self.graph)
        self._locations: List[NodeID] = list(self.graph.nodes())

    def load_graph_data(self, path: Union[str, Path]) -> None:
        """Load an edge-list file and register its new locations.

        Raises:
            OSError: If the file cannot be read.
        """
        self._reconcile()
        result = load_edge_list_file(path, self.graph)
        tracked = set(self._locations)
        self._locations.extend(
            location for location in result.locations if location not in tracked
        )
        logger.debug(
            "%d location(s) known after loading %s", len(self._locations), path
        )

    def locations(self) -> List[NodeID]:
        """Return every node of the graph, in first-seen order.

        The list is reconciled with the graph on each call: nodes removed from
        the graph are dropped and nodes added to it directly (not through
        `load_graph_data`) are appended in node-index order.
        """
        self._reconcile()
        return list(self._locations)

    def _reconcile(self) -> None:
        graph = self.graph
        self._locations = [loc for loc in self._locations if graph.contains_node(loc)]
        tracked = set(self._locations)
        self._locations.extend(node for node in graph.nodes() if node not in tracked)

    def shortest_path(self, start: NodeID, end: NodeID) -> List[NodeID]:
        return self.engine.shortest_path_nodes(start, end)

    def travel_times(self, start: NodeID, end: NodeID) -> List[Cost]:
        """Return the weight of each hop along the shortest path.

        The result has one entry fewer than the path, so it is empty when
        ``start == end``.
        """
        return self.path_weights(self.shortest_path(start, end))

    def shortest_path_via(
        self, start: NodeID, via: NodeID, end: NodeID
    ) -> List[NodeID]:
        """Return the shortest path from ``start`` to ``end`` through ``via``."""
        first_leg = self.shortest_path(start, via)
        second_leg = self.shortest_path(via, end)
        return first_leg[:-1] + second_leg

    def travel_times_via(self, start: NodeID, via: NodeID, end: NodeID) -> List[Cost]:
        return self.path_weights(self.shortest_path_via(start, via, end))

    def route_cost(
        self, start: NodeID, end: NodeID, via: Optional[NodeID] = None
    ) -> Cost:
        """Return the total cost of the route, optionally through ``via``."""
        if via is None:
            return self.engine.shortest_path_cost(start, end)
        return self.engine.shortest_path_cost(
            start, via
        ) + self.engine.shortest_path_cost(via, end)

    def path_weights(self, path: List[NodeID]) -> List[Cost]:
        """Return edge weights between consecutive nodes of ``path``.

        Raises:
            UnknownEdgeError: If two consecutive nodes are not joined by an edge.
        """
        return [
            self.graph.get_edge_weight(src, dst) for src, dst in zip(path, path[1:])
        ]
