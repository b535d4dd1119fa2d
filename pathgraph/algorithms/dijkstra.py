"""Dijkstra's algorithm over a priority queue of whole paths.

Instead of a distance table and predecessor map, the queue holds complete
candidate paths from the start, ordered by cost. Popping the cheapest one
either reaches the destination (done) or settles its last node and extends
it along every edge to an unsettled node. Candidates ending at an already
settled node are dropped when popped.

The queue is seeded with the zero-weight self-path ``start -> start``, so
the loop needs no special case for the first step; the seed edge is shed
when paths are copied.

Weights must be non-negative. Ties between equal-cost candidates are broken
in insertion order.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Hashable, List, Optional, Set, Tuple

from .base import SearchStats, ShortestPathFinder, register
from ..core.edge import DirectedEdge
from ..core.graph import GraphReader
from ..core.path import Path


@register
class DijkstraPathFinder(ShortestPathFinder):
    name = "dijkstra"

    def _search(
        self, graph: GraphReader, start: Hashable, destination: Hashable
    ) -> Tuple[Optional[Path], SearchStats]:
        counter = itertools.count()
        seed: Path = Path(DirectedEdge(start, start, 0.0))
        active: List[Tuple[float, int, Path]] = [(seed.cost, next(counter), seed)]
        settled: Set[Hashable] = set()
        pushed = 1

        while active:
            _, _, min_path = heapq.heappop(active)
            node = min_path.destination

            if node == destination:
                return min_path.copy(), {"settled": len(settled), "pushed": pushed}

            if node in settled:
                continue

            for edge in graph.edges_from(node) or ():
                self._check_weight(edge)
                if edge.child in settled:
                    continue
                new_path = min_path.copy()
                new_path.add_edge(edge)
                heapq.heappush(active, (new_path.cost, next(counter), new_path))
                pushed += 1

            settled.add(node)

        return None, {"settled": len(settled), "pushed": pushed}
