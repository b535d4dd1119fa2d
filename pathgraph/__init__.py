from __future__ import annotations

__version__ = "0.1.0"

from .registry import available_algorithms
from .errors import (
    PathGraphError,
    GraphInputError,
    NodeNotFoundError,
    ParameterValidationError,
    UnknownAlgorithmError,
)
from .core import (
    Coordinate,
    DirectedEdge,
    Graph,
    GraphView,
    Landmark,
    Path,
    PathCursor,
    SearchResult,
    edges_match,
)
from .utils.checks import invariant_checks, invariant_checks_enabled, set_invariant_checks


# Import algorithms so they register themselves via @register
from .algorithms import dijkstra, dijkstra_map  # noqa: E402,F401


def get_path_finder(name: str):
    key = name.lower()
    try:
        return available_algorithms[key]
    except KeyError:
        raise UnknownAlgorithmError(
            f"Unknown algorithm '{name}'. "
            f"Available: {sorted(available_algorithms.keys())}"
        ) from None

def list_algorithms():
    return sorted(available_algorithms.keys())


from .api import describe_path, find_shortest_path, search  # noqa: E402
from .campus import LandmarkDirectory  # noqa: E402
