# pathgraph/algorithms/base.py
from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Hashable, Optional, Tuple

from ..registry import available_algorithms
from ..core.edge import DirectedEdge
from ..core.graph import GraphReader
from ..core.path import Path
from ..core.result import SearchResult
from ..errors import GraphInputError, NodeNotFoundError, ParameterValidationError
from ..utils.logging import get_logger

__all__ = ["ShortestPathFinder", "register"]

SearchStats = Dict[str, Any]


class ShortestPathFinder(ABC):
    """Single-source, single-destination shortest-path search.

    Subclasses implement :meth:`_search`. The public entry points validate
    the endpoints first, so a finder never starts on a node the graph does
    not contain. The graph must not change while a search is running.
    """

    name: str = "base"

    def __init__(self, validate_weights: bool = True, verbose: bool = False) -> None:
        for option, value in (("validate_weights", validate_weights), ("verbose", verbose)):
            if not isinstance(value, bool):
                raise ParameterValidationError(f"{option} must be a bool, got {value!r}")
        self.validate_weights = validate_weights
        self.verbose = verbose
        self.logger = get_logger(self.__class__.__name__)
        if self.verbose:
            self.logger.setLevel("DEBUG")

    @property
    def params(self) -> Dict[str, Any]:
        return dict(validate_weights=self.validate_weights, verbose=self.verbose)

    @abstractmethod
    def _search(
        self, graph: GraphReader, start: Hashable, destination: Hashable
    ) -> Tuple[Optional[Path], SearchStats]:
        raise NotImplementedError

    def find(self, graph: GraphReader, start: Hashable, destination: Hashable) -> Optional[Path]:
        """Return the cheapest path from ``start`` to ``destination``.

        Returns ``None`` when the destination is unreachable.

        Raises
        ------
        NodeNotFoundError
            If either endpoint is not a node of ``graph``.
        GraphInputError
            If an endpoint is ``None``, or a negative weight is met while
            ``validate_weights`` is on.
        """
        return self.search(graph, start, destination).path

    def search(self, graph: GraphReader, start: Hashable, destination: Hashable) -> SearchResult:
        """Like :meth:`find`, but wrap the outcome in a :class:`SearchResult`."""
        self._check_endpoints(graph, start, destination)

        self.logger.debug("Searching %r -> %r with %s", start, destination, self.name)
        t0 = time.time()
        path, stats = self._search(graph, start, destination)
        runtime = time.time() - t0

        if path is None:
            self.logger.debug(
                "No path from %r to %r (%d nodes settled)",
                start,
                destination,
                stats.get("settled", 0),
            )
        else:
            self.logger.debug(
                "Found path %r -> %r: %d edges, cost %s",
                start,
                destination,
                len(path),
                path.cost,
            )

        return SearchResult(
            path=path,
            start=start,
            destination=destination,
            algorithm=self.name,
            params=self.params,
            runtime=runtime,
            metadata=stats,
        )

    def _check_endpoints(self, graph: GraphReader, start: Hashable, destination: Hashable) -> None:
        if graph is None:
            raise GraphInputError("Cannot search a missing graph")
        if start is None or destination is None:
            raise GraphInputError("Start and destination cannot be missing")
        if not graph.contains_node(start):
            raise NodeNotFoundError(start, "start")
        if not graph.contains_node(destination):
            raise NodeNotFoundError(destination, "destination")

    def _check_weight(self, edge: DirectedEdge) -> None:
        if self.validate_weights and edge.label < 0:
            raise GraphInputError(f"Negative edge weight is not supported: {edge}")


def register(cls: type[ShortestPathFinder]) -> type[ShortestPathFinder]:
    if not issubclass(cls, ShortestPathFinder):
        raise TypeError("Only subclasses of ShortestPathFinder can be registered")

    name = getattr(cls, "name", None)
    if not isinstance(name, str):
        raise TypeError("Shortest-path finder must define a string 'name' attribute")

    key = name.lower()
    if key in available_algorithms:
        raise ValueError(f"Algorithm '{name}' is already registered")

    available_algorithms[key] = cls
    return cls
