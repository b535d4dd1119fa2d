"""Graph, edge, path and landmark types."""

from .edge import DirectedEdge, edges_match
from .graph import Graph, GraphReader, GraphView
from .landmark import Coordinate, Landmark
from .path import Path, PathCursor
from .result import SearchResult

__all__ = [
    "DirectedEdge",
    "edges_match",
    "Graph",
    "GraphReader",
    "GraphView",
    "Coordinate",
    "Landmark",
    "Path",
    "PathCursor",
    "SearchResult",
]
