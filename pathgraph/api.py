from __future__ import annotations

from typing import Any, Hashable, List, Optional, Union

import networkx as nx

from .core.graph import Graph, GraphView
from .core.path import Path, PathCursor
from .core.result import SearchResult
from . import get_path_finder

GraphLike = Union[Graph, GraphView, nx.DiGraph, nx.MultiDiGraph]


def _normalize_graph(graph: GraphLike, weight: str) -> Union[Graph, GraphView]:
    # 1. Already an internal graph → search it directly
    if isinstance(graph, (Graph, GraphView)):
        return graph

    # 2. networkx directed graph → copy into a Graph
    if isinstance(graph, nx.DiGraph):
        from .io.convert import from_networkx

        return from_networkx(graph, weight=weight)

    raise TypeError(f"Cannot interpret {type(graph)} as a directed graph")


def search(
    graph: GraphLike,
    start: Hashable,
    destination: Hashable,
    algorithm: str = "dijkstra",
    weight: str = "weight",
    **finder_params: Any,
) -> SearchResult:
    """High-level convenience function for users.

    `graph` can be:
      - a Graph or its read-only view
      - a networkx DiGraph / MultiDiGraph (edge weights read from `weight`)

    The result reports an unreachable destination with ``found == False``.
    """
    FinderCls = get_path_finder(algorithm)
    finder = FinderCls(**finder_params)
    return finder.search(_normalize_graph(graph, weight), start, destination)


def find_shortest_path(
    graph: GraphLike,
    start: Hashable,
    destination: Hashable,
    algorithm: str = "dijkstra",
    **finder_params: Any,
) -> Optional[Path]:
    """Return the cheapest path from `start` to `destination`, or None if there is none."""
    return search(graph, start, destination, algorithm=algorithm, **finder_params).path


def describe_path(path: Optional[Path], weight_format: str = "{:g}") -> str:
    """Render a path as a plain-text itinerary, one segment per line."""
    if path is None:
        return "No path found."

    lines: List[str] = []
    cursor = PathCursor(path)
    while cursor.has_more():
        cursor.advance()
        weight = weight_format.format(cursor.current_weight())
        lines.append(f"{cursor.current_start()} -> {cursor.current_end()}: {weight}")
    lines.append(f"Total cost: {weight_format.format(path.cost)}")
    return "\n".join(lines)
