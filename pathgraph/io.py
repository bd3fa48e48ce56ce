"""Edge-list loading for location graphs.

The text format has one directed edge per line::

    "Memorial Union" -> "Computer Sciences" [seconds=176.1]

Lines that do not contain an edge in this form (headers, braces, comments,
blank lines) are skipped, so DOT-style files load as they are.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from pathgraph.graph.weighted_digraph import Cost, WeightedDiGraph
from pathgraph.logging import get_logger

logger = get_logger(__name__)

EDGE_LINE_RE = re.compile(r'"([^"]+)"\s*->\s*"([^"]+)"\s*\[seconds=([0-9.]+)\]')


@dataclass
class LoadResult:
    """Outcome of loading an edge list into a graph.

    Attributes:
        graph: The graph the edges were loaded into.
        locations: Locations not present before the load, in first-seen order.
        edges_loaded: Number of edge lines applied (including weight updates).
        lines_skipped: Number of lines that did not describe an edge.
    """

    graph: WeightedDiGraph
    locations: List[str] = field(default_factory=list)
    edges_loaded: int = 0
    lines_skipped: int = 0


def parse_edge_line(line: str) -> Optional[Tuple[str, str, Cost]]:
    """Return ``(source, target, seconds)`` for an edge line, or None.

    The first edge found anywhere in the line is used.
    """
    match = EDGE_LINE_RE.search(line)
    if match is None:
        return None
    try:
        seconds = float(match.group(3))
    except ValueError:
        # e.g. "1.2.3" satisfies the character class but is not a number
        return None
    if not math.isfinite(seconds):
        # a long enough digit run overflows to inf
        return None
    return match.group(1), match.group(2), seconds


def load_edge_list(
    lines: Iterable[str], graph: Optional[WeightedDiGraph] = None
) -> LoadResult:
    """Load edge lines into ``graph`` (a new graph when None).

    Both endpoints of each edge are inserted idempotently before the edge.
    An edge that appears twice keeps the last weight.

    Args:
        lines: Text lines, e.g. an open file.
        graph: Graph to extend. A new `WeightedDiGraph` is created when None.

    Returns:
        LoadResult: The graph plus new locations and line counters.
    """
    graph = WeightedDiGraph() if graph is None else graph
    result = LoadResult(graph=graph)

    for lineno, line in enumerate(lines, start=1):
        parsed = parse_edge_line(line)
        if parsed is None:
            result.lines_skipped += 1
            if line.strip():
                logger.debug("Skipping line %d: %r", lineno, line.rstrip("\n"))
            continue

        src, dst, seconds = parsed
        for location in (src, dst):
            if graph.insert_node(location):
                result.locations.append(location)
        graph.insert_edge(src, dst, seconds)
        result.edges_loaded += 1

    logger.info(
        "Loaded %d edge(s), %d new location(s); skipped %d line(s)",
        result.edges_loaded,
        len(result.locations),
        result.lines_skipped,
    )
    return result


def load_edge_list_file(
    path: Union[str, Path], graph: Optional[WeightedDiGraph] = None
) -> LoadResult:
    """Load an edge-list file into ``graph``.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    path = Path(path)
    logger.debug("Reading edge list from %s", path)
    with path.open("r", encoding="utf-8") as fh:
        return load_edge_list(fh, graph)
