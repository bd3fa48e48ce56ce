"""Command-line interface for PathGraph."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, NoReturn, Optional

from pathgraph.errors import PathGraphError
from pathgraph.logging import get_logger, set_global_log_level
from pathgraph.routing import RouteFinder

logger = get_logger(__name__)


def _format_table(headers: List[str], rows: List[List[str]], min_width: int = 4) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in rows:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_cost(value: Any) -> str:
    """Return cost formatted with up to three decimals.

    Uses thousands separators, trims trailing zeros and the decimal point when
    not needed.

    Examples:
        0.1 -> "0.1"; 10.0 -> "10"; 1234.567 -> "1,234.567".
    """
    s = f"{float(value):,.3f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _load(path: Path) -> RouteFinder:
    finder = RouteFinder()
    finder.load_graph_data(path)
    return finder


def _fail(message: str) -> NoReturn:
    logger.error(message)
    print(f"❌ ERROR: {message}")
    sys.exit(1)


def _list_locations(path: Path) -> None:
    """Print every location found in the edge-list file."""
    try:
        finder = _load(path)
    except FileNotFoundError:
        _fail(f"Graph file not found: {path}")
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read graph file {path}: {e}")
    except PathGraphError as e:
        _fail(f"{type(e).__name__}: {e}")

    for location in finder.locations():
        print(location)


def _show_route(
    path: Path,
    start: str,
    end: str,
    via: Optional[str] = None,
    times: bool = False,
) -> None:
    """Print the shortest route between two locations and its total cost."""
    _start_time = perf_counter()
    try:
        finder = _load(path)
        if via is None:
            route = finder.shortest_path(start, end)
            hops = finder.travel_times(start, end) if times else []
        else:
            route = finder.shortest_path_via(start, via, end)
            hops = finder.travel_times_via(start, via, end) if times else []
        total = finder.route_cost(start, end, via=via)
    except FileNotFoundError:
        _fail(f"Graph file not found: {path}")
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read graph file {path}: {e}")
    except PathGraphError as e:
        _fail(f"{type(e).__name__}: {e}")

    title = f"{start} -> {via} -> {end}" if via is not None else f"{start} -> {end}"
    print(f"Route: {title}")

    headers = ["#", "Location"]
    rows = [[str(i), str(location)] for i, location in enumerate(route, start=1)]
    if times:
        headers.append("Seconds")
        rows[0].append("-")
        for row, hop in zip(rows[1:], hops):
            row.append(_format_cost(hop))
    print(_format_table(headers, rows))
    print(f"Total: {_format_cost(total)}")

    logger.debug(f"Route query completed in {perf_counter() - _start_time:.4f} s")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``pathgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="pathgraph",
        description="Find shortest routes between locations in an edge-list file.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{locations,route}",
        help="Available commands",
    )

    locations_parser = subparsers.add_parser(
        "locations", help="List every location in a graph file"
    )
    locations_parser.add_argument("graph", type=Path, help="Path to edge-list file")

    route_parser = subparsers.add_parser(
        "route", help="Show the shortest route between two locations"
    )
    route_parser.add_argument("graph", type=Path, help="Path to edge-list file")
    route_parser.add_argument("start", help="Start location")
    route_parser.add_argument("end", help="Destination location")
    route_parser.add_argument(
        "--via", default=None, help="Intermediate location the route must visit"
    )
    route_parser.add_argument(
        "--times",
        "-t",
        action="store_true",
        help="Show the travel time of each hop",
    )

    effective_args = sys.argv[1:] if argv is None else argv

    # No arguments: show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "locations":
        _list_locations(args.graph)
    elif args.command == "route":
        _show_route(args.graph, args.start, args.end, via=args.via, times=args.times)


if __name__ == "__main__":
    main()
