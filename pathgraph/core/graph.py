"""Core graph container used throughout *pathgraph*.

Design goals
------------
1) Keep a lightweight, dependency-free representation: a dict mapping every
   node to the set of its outgoing :class:`~pathgraph.core.edge.DirectedEdge`
   objects.
2) Grow only. Nodes and edges are added, never removed, so a fully built
   graph can be handed to a search and read without locking.
3) Allow parallel edges. ``A -> B`` with label 1.0 and ``A -> B`` with label
   2.0 are distinct; adding the same ``(parent, child, label)`` twice is a
   no-op.

Every stored edge carries a label. Membership queries may omit the label, in
which case any label matches.

Example usage::

    >>> from pathgraph.core.graph import Graph
    >>> g = Graph()
    >>> g.add_edge("A", "B", 1.0)
    >>> g.add_edge("B", "C", 1.0)
    >>> g.contains_edge("A", "B")
    True
    >>> sorted(e.child for e in g.edges_from("A"))
    ['B']

"""

from __future__ import annotations

from typing import (
    AbstractSet,
    Any,
    Dict,
    FrozenSet,
    Hashable,
    Iterable,
    Iterator,
    Optional,
    Protocol,
    Set,
    Tuple,
    Union,
    runtime_checkable,
)

from ..errors import GraphInputError
from ..utils.checks import invariant_checks_enabled
from .edge import DirectedEdge

Edge3 = Tuple[Hashable, Hashable, Any]
EdgeSpec = Union[Edge3, DirectedEdge]


@runtime_checkable
class GraphReader(Protocol):
    """The read side of a graph; everything a search needs."""

    def contains_node(self, node: Hashable) -> bool:  # pragma: no cover
        ...

    def edges_from(self, node: Hashable) -> Optional[FrozenSet[DirectedEdge]]:  # pragma: no cover
        ...

    def nodes(self) -> AbstractSet[Hashable]:  # pragma: no cover
        ...


class Graph:
    """Mutable, append-only directed multigraph with labelled edges.

    Parameters
    ----------
    nodes: Iterable[Hashable], optional
        Nodes to add up front (isolated nodes are allowed).
    edges: Iterable, optional
        Edges to add up front, either ``(parent, child, label)`` tuples or
        :class:`DirectedEdge` instances.
    """

    def __init__(
        self,
        nodes: Optional[Iterable[Hashable]] = None,
        edges: Optional[Iterable[EdgeSpec]] = None,
    ) -> None:
        self._adj: Dict[Hashable, Set[DirectedEdge]] = {}

        if nodes is not None:
            for node in nodes:
                self.add_node(node)

        if edges is not None:
            for espec in edges:
                if isinstance(espec, DirectedEdge):
                    self.add_directed_edge(espec)
                else:
                    self.add_edge(*self._parse_edge_spec(espec))

        self.check_rep()

    def _parse_edge_spec(self, espec: Edge3) -> Edge3:
        if len(espec) == 3:
            return espec
        raise GraphInputError(f"Unsupported edge spec: {espec!r}")

    # --------------------------
    # Mutation
    # --------------------------

    def add_node(self, node: Hashable) -> None:
        """Add ``node`` if it is not already present.

        Raises
        ------
        GraphInputError
            If ``node`` is ``None``.
        """
        if node is None:
            raise GraphInputError("Node cannot be missing")
        if node not in self._adj:
            self._adj[node] = set()
        self.check_rep()

    def add_edge(self, parent: Hashable, child: Hashable, label: Any) -> None:
        """Add the edge ``parent -> child`` with ``label``.

        Missing endpoints are added as nodes first. Adding an edge that is
        already present (same endpoints and label) leaves the graph
        unchanged.

        Raises
        ------
        GraphInputError
            If ``label`` is ``None`` or either endpoint is ``None``.
        """
        if label is None:
            raise GraphInputError("Edge label cannot be missing")
        edge = DirectedEdge(parent, child, label)
        self.add_node(parent)
        self.add_node(child)
        self._adj[parent].add(edge)
        self.check_rep()

    def add_directed_edge(self, edge: DirectedEdge) -> None:
        """Add an existing :class:`DirectedEdge` (it must carry a label)."""
        if edge is None:
            raise GraphInputError("Edge cannot be missing")
        if not edge.is_labelled:
            raise GraphInputError(f"Edge {edge} has no label")
        self.add_edge(edge.parent, edge.child, edge.label)

    # --------------------------
    # Queries
    # --------------------------

    def contains_node(self, node: Hashable) -> bool:
        return node in self._adj

    def __contains__(self, node: object) -> bool:
        return node in self._adj

    def contains_edge(self, parent: Hashable, child: Hashable, label: Any = None) -> bool:
        """Return True if an edge ``parent -> child`` is present.

        When ``label`` is omitted any label matches.

        Raises
        ------
        GraphInputError
            If either endpoint is ``None``.
        """
        if parent is None or child is None:
            raise GraphInputError("Nodes cannot be missing")
        edges = self._adj.get(parent)
        if edges is None:
            return False
        return DirectedEdge(parent, child, label) in edges

    def edges_from(self, node: Hashable) -> Optional[FrozenSet[DirectedEdge]]:
        """Return the outgoing edges of ``node``, or ``None`` if it is not a node."""
        edges = self._adj.get(node)
        if edges is None:
            return None
        return frozenset(edges)

    def children(self, node: Hashable) -> Set[Hashable]:
        """Return the nodes reachable from ``node`` over a single edge."""
        return {e.child for e in self._adj.get(node, ())}

    def nodes(self) -> AbstractSet[Hashable]:
        """Read-only, live view of the nodes."""
        return self._adj.keys()

    def iter_edges(self) -> Iterator[DirectedEdge]:
        """Iterate over every stored edge once."""
        for edges in self._adj.values():
            yield from edges

    def number_of_nodes(self) -> int:
        return len(self._adj)

    def number_of_edges(self) -> int:
        return sum(len(edges) for edges in self._adj.values())

    def __len__(self) -> int:
        return len(self._adj)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._adj)

    def view(self) -> "GraphView":
        """Return a read-only view to hand to consumers such as a search."""
        return GraphView(self)

    def check_rep(self) -> None:
        if not invariant_checks_enabled():
            return
        for node, edges in self._adj.items():
            assert node is not None, "Nodes in graph cannot be missing"
            assert edges is not None, "Every node needs an edge set"
            for edge in edges:
                assert edge.label is not None, "Edges in graph must carry a label"
                assert edge.parent == node, "Edge stored under a node other than its parent"
                assert edge.child in self._adj, "Edge child is not a node of the graph"

    def __repr__(self) -> str:
        return (
            f"Graph(num_nodes={self.number_of_nodes()}, "
            f"num_edges={self.number_of_edges()})"
        )


class GraphView:
    """Read-only facade over a :class:`Graph`.

    The view reflects later changes to the underlying graph but offers no
    way to make them.
    """

    __slots__ = ("_graph",)

    def __init__(self, graph: Graph) -> None:
        self._graph = graph

    def contains_node(self, node: Hashable) -> bool:
        return self._graph.contains_node(node)

    def __contains__(self, node: object) -> bool:
        return node in self._graph

    def contains_edge(self, parent: Hashable, child: Hashable, label: Any = None) -> bool:
        return self._graph.contains_edge(parent, child, label)

    def edges_from(self, node: Hashable) -> Optional[FrozenSet[DirectedEdge]]:
        return self._graph.edges_from(node)

    def nodes(self) -> AbstractSet[Hashable]:
        return self._graph.nodes()

    def iter_edges(self) -> Iterator[DirectedEdge]:
        return self._graph.iter_edges()

    def number_of_nodes(self) -> int:
        return self._graph.number_of_nodes()

    def number_of_edges(self) -> int:
        return self._graph.number_of_edges()

    def __len__(self) -> int:
        return len(self._graph)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._graph)

    def __repr__(self) -> str:
        return f"GraphView({self._graph!r})"
