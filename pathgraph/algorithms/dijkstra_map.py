"""Dijkstra's algorithm with a distance table and predecessor edges.

Same answers as :mod:`pathgraph.algorithms.dijkstra`, with ``O(V)`` extra
memory instead of one path object per queued candidate. The path is rebuilt
from the predecessor edges once the destination is settled.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Dict, Hashable, List, Optional, Set, Tuple

from .base import SearchStats, ShortestPathFinder, register
from ..core.edge import DirectedEdge
from ..core.graph import GraphReader
from ..core.path import Path


@register
class DistanceMapPathFinder(ShortestPathFinder):
    name = "dijkstra-map"

    def _search(
        self, graph: GraphReader, start: Hashable, destination: Hashable
    ) -> Tuple[Optional[Path], SearchStats]:
        # distances[v] is the best cost found so far; via[v] the last edge on that path.
        distances: Dict[Hashable, float] = {start: 0.0}
        via: Dict[Hashable, DirectedEdge] = {}
        settled: Set[Hashable] = set()

        counter = itertools.count()
        queue: List[Tuple[float, int, Hashable]] = [(0.0, next(counter), start)]
        pushed = 1

        while queue:
            distance_u, _, u = heapq.heappop(queue)

            if u == destination:
                return self._rebuild(via, start, destination), {
                    "settled": len(settled),
                    "pushed": pushed,
                }

            if u in settled:
                continue

            for edge in graph.edges_from(u) or ():
                v = edge.child
                self._check_weight(edge)
                if v in settled:
                    continue
                candidate = distance_u + edge.label
                if v not in distances or candidate < distances[v]:
                    distances[v] = candidate
                    via[v] = edge
                    heapq.heappush(queue, (candidate, next(counter), v))
                    pushed += 1

            settled.add(u)

        return None, {"settled": len(settled), "pushed": pushed}

    @staticmethod
    def _rebuild(via: Dict[Hashable, DirectedEdge], start: Hashable, destination: Hashable) -> Path:
        edges: List[DirectedEdge] = []
        node = destination
        while node != start:
            edge = via[node]
            edges.append(edge)
            node = edge.parent
        edges.reverse()
        return Path.from_edges(edges)
