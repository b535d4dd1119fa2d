"""Weighted paths and a forward-only cursor over them.

A :class:`Path` is an append-only sequence of labelled edges where each edge
starts where the previous one ended. The total cost is kept up to date on
every append, and paths order by cost alone so they can sit in a priority
queue.

Copying a path (:meth:`Path.copy`) drops zero-weight self-loops. Searches
seed their queue with a ``start -> start`` edge of weight 0; the first copy
sheds it, so the trivial ``start == destination`` search yields an empty,
cost-0 path.
"""

from __future__ import annotations

from typing import Any, Generic, Hashable, Iterable, Iterator, List, Optional, Tuple, TypeVar

from ..errors import GraphInputError
from ..utils.checks import invariant_checks_enabled
from .edge import DirectedEdge

N = TypeVar("N", bound=Hashable)

WeightedEdge = DirectedEdge[Any, float]


def _is_seed_edge(edge: WeightedEdge) -> bool:
    return edge.parent == edge.child and edge.label == 0


class Path(Generic[N]):
    """Ordered, cost-summed sequence of edges.

    Parameters
    ----------
    edge: DirectedEdge, optional
        First edge of the path. Its label becomes the initial cost. Use
        :meth:`empty` for a path with no edges.
    """

    __slots__ = ("_edges", "_cost")

    def __init__(self, edge: Optional[WeightedEdge] = None) -> None:
        self._edges: List[WeightedEdge] = []
        self._cost: float = 0.0
        if edge is not None:
            self.add_edge(edge)
        self.check_rep()

    @classmethod
    def empty(cls) -> "Path[N]":
        return cls()

    @classmethod
    def from_edges(cls, edges: Iterable[WeightedEdge]) -> "Path[N]":
        """Build a path by appending ``edges`` in order."""
        path: Path[N] = cls()
        for edge in edges:
            path.add_edge(edge)
        return path

    def copy(self) -> "Path[N]":
        """Return an independent copy without zero-weight self-loops."""
        clone: Path[N] = type(self)()
        for edge in self._edges:
            if not _is_seed_edge(edge):
                clone.add_edge(edge)
        clone.check_rep()
        return clone

    # --------------------------
    # Mutation
    # --------------------------

    def add_edge(self, edge: WeightedEdge) -> None:
        """Append ``edge`` and add its label to the cost.

        Raises
        ------
        GraphInputError
            If the edge has no label, or does not start at the current
            destination of a non-empty path.
        """
        if edge is None:
            raise GraphInputError("Cannot append a missing edge to a path")
        if not edge.is_labelled:
            raise GraphInputError(f"Edge {edge} has no weight")
        if self._edges and edge.parent != self._edges[-1].child:
            raise GraphInputError(
                f"Edge {edge} does not continue a path ending at {self._edges[-1].child!r}"
            )
        self._edges.append(edge)
        self._cost += edge.label
        self.check_rep()

    # --------------------------
    # Queries
    # --------------------------

    @property
    def edges(self) -> Tuple[WeightedEdge, ...]:
        return tuple(self._edges)

    @property
    def cost(self) -> float:
        return self._cost

    @property
    def start(self) -> Optional[N]:
        """First node of the path, or ``None`` for an empty path."""
        return self._edges[0].parent if self._edges else None

    @property
    def destination(self) -> Optional[N]:
        """Last node of the path, or ``None`` for an empty path."""
        return self._edges[-1].child if self._edges else None

    def nodes(self) -> List[N]:
        """Nodes visited in order, including the start."""
        if not self._edges:
            return []
        return [self._edges[0].parent] + [e.child for e in self._edges]

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[WeightedEdge]:
        return iter(tuple(self._edges))

    # Paths are ordered by cost only. Equal cost does not make two paths equal.
    def __lt__(self, other: "Path[Any]") -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._cost < other._cost

    def __le__(self, other: "Path[Any]") -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._cost <= other._cost

    def __gt__(self, other: "Path[Any]") -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._cost > other._cost

    def __ge__(self, other: "Path[Any]") -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._cost >= other._cost

    def __repr__(self) -> str:
        hops = ", ".join(str(e) for e in self._edges)
        return f"Path(cost={self._cost!r}, edges=[{hops}])"

    def check_rep(self) -> None:
        if not invariant_checks_enabled():
            return
        assert self._cost >= 0, "Total cost of a path cannot be negative"
        previous = None
        total = 0.0
        for edge in self._edges:
            assert edge is not None, "Path edges cannot be missing"
            assert edge.label is not None, "Path edges must carry a weight"
            if previous is not None:
                assert edge.parent == previous, "Edges must connect end to end"
            total += edge.label
            previous = edge.child
        assert total == self._cost, "Path cost must equal the sum of its edge weights"


class PathCursor(Generic[N]):
    """Single-pass cursor over the segments of a finished path.

    The cursor starts *before* the first segment; call :meth:`advance` to
    move onto it. Accessors return ``None`` before the first advance and
    once the cursor has run off the end. A cursor cannot be rewound.

    Example usage::

        cursor = PathCursor(path)
        while cursor.has_more():
            cursor.advance()
            print(cursor.current_start(), cursor.current_end(), cursor.current_weight())
    """

    def __init__(self, path: Path[N]) -> None:
        if path is None:
            raise GraphInputError("Cannot traverse a missing path")
        self._segments: Tuple[WeightedEdge, ...] = path.copy().edges
        self._position = -1
        self._current: Optional[WeightedEdge] = None

    def advance(self) -> None:
        """Move onto the next segment, or into the exhausted state."""
        if self.has_more():
            self._position += 1
            self._current = self._segments[self._position]
        else:
            self._position = len(self._segments)
            self._current = None

    def has_more(self) -> bool:
        return self._position + 1 < len(self._segments)

    def current_start(self) -> Optional[N]:
        return self._current.parent if self._current is not None else None

    def current_end(self) -> Optional[N]:
        return self._current.child if self._current is not None else None

    def current_weight(self) -> Optional[float]:
        return self._current.label if self._current is not None else None

    @property
    def exhausted(self) -> bool:
        return self._position >= len(self._segments)
