"""Look up buildings by name and route between them.

A :class:`LandmarkDirectory` pairs a graph of :class:`Landmark` nodes (built
by some loader) with the set of named buildings on it, so callers such as a
UI can ask for a route between two building abbreviations.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, List, Optional

from . import get_path_finder
from .core.graph import Graph
from .core.landmark import Landmark
from .core.path import Path
from .errors import GraphInputError
from .utils.checks import invariant_checks_enabled
from .utils.logging import get_logger

logger = get_logger(__name__)


class LandmarkDirectory:
    """Buildings on a landmark graph, indexed by short name.

    Every building is added to ``graph`` as a node, so a building with no
    paths yet is still a valid (if unreachable) endpoint.

    Raises
    ------
    GraphInputError
        If one of ``buildings`` lacks a short or long name.
    """

    def __init__(self, graph: Graph, buildings: Iterable[Landmark], algorithm: str = "dijkstra") -> None:
        self._graph = graph
        self._algorithm = algorithm
        self._buildings: Dict[str, Landmark] = {}
        for building in buildings:
            if not building.is_building:
                raise GraphInputError(f"Landmark {building} has no name")
            if building.short_name in self._buildings:
                logger.warning("Duplicate building %r; keeping the last one", building.short_name)
            self._buildings[building.short_name] = building
            graph.add_node(building)
        self.check_rep()

    @property
    def graph(self) -> Graph:
        return self._graph

    def list_buildings(self) -> FrozenSet[Landmark]:
        return frozenset(self._buildings.values())

    def building_names(self) -> List[str]:
        """Short names of all buildings, sorted."""
        return sorted(self._buildings)

    def get_building(self, short_name: str) -> Optional[Landmark]:
        return self._buildings.get(short_name)

    def find_shortest_path(self, start_name: str, destination_name: str) -> Optional[Path]:
        """Route between two buildings given by short name.

        Returns ``None`` if either name is unknown or there is no route.
        """
        start = self.get_building(start_name)
        destination = self.get_building(destination_name)
        if start is None or destination is None:
            logger.debug("Unknown building in %r -> %r", start_name, destination_name)
            return None

        finder = get_path_finder(self._algorithm)()
        return finder.find(self._graph.view(), start, destination)

    def check_rep(self) -> None:
        if not invariant_checks_enabled():
            return
        for name, building in self._buildings.items():
            assert building.is_building, "Buildings must have a short and a long name"
            assert building.short_name == name, "Building indexed under the wrong name"
            assert self._graph.contains_node(building), "Buildings must be nodes of the graph"
