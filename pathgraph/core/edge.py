"""Directed, optionally labelled edge.

An edge ``parent -> child`` may carry a label (its weight). Equality follows
a *wildcard* rule: the labels are compared only when both edges have one, so
an unlabelled edge matches every edge with the same endpoints. This is what
lets ``Graph.contains_edge(a, b)`` ask "is there any edge a -> b".

Because the wildcard relation is not transitive, the hash only depends on the
endpoints. Code that needs strict comparison should use
:func:`edges_match` with ``exact=True`` instead of ``==``.

Example usage::

    >>> from pathgraph.core.edge import DirectedEdge
    >>> DirectedEdge("A", "B", 2.0) == DirectedEdge("A", "B")
    True
    >>> DirectedEdge("A", "B", 2.0) == DirectedEdge("A", "B", 3.0)
    False
    >>> str(DirectedEdge("A", "B", 2.0))
    '2.0: <A, B>'

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Hashable, Optional, TypeVar

from ..errors import GraphInputError
from ..utils.checks import invariant_checks_enabled

N = TypeVar("N", bound=Hashable)
W = TypeVar("W")


@dataclass(frozen=True, eq=False)
class DirectedEdge(Generic[N, W]):
    """Immutable directed edge between two nodes.

    Parameters
    ----------
    parent: Hashable
        Node the edge leaves from. Must not be ``None``.
    child: Hashable
        Node the edge points to. Must not be ``None``.
    label: Optional[Any], default None
        Label (weight) of the edge. ``None`` acts as a wildcard in
        comparisons.
    """

    parent: N
    child: N
    label: Optional[W] = None

    def __post_init__(self) -> None:
        if self.parent is None or self.child is None:
            raise GraphInputError("Edges cannot have a missing parent or child")
        self.check_rep()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DirectedEdge):
            return NotImplemented
        return edges_match(self, other)

    def __hash__(self) -> int:
        return hash((self.parent, self.child))

    def __str__(self) -> str:
        prefix = "" if self.label is None else f"{self.label}: "
        return f"{prefix}<{self.parent}, {self.child}>"

    @property
    def is_labelled(self) -> bool:
        return self.label is not None

    def check_rep(self) -> None:
        if not invariant_checks_enabled():
            return
        assert self.parent is not None, "Parent node cannot be missing"
        assert self.child is not None, "Child node cannot be missing"


def edges_match(a: DirectedEdge[Any, Any], b: DirectedEdge[Any, Any], exact: bool = False) -> bool:
    """Compare two edges.

    Parameters
    ----------
    a, b: DirectedEdge
        Edges to compare.
    exact: bool, default False
        In wildcard mode (the default, and the behaviour of ``==``) a
        missing label on either side matches any label. In exact mode the
        labels must be equal, and a missing label only equals another
        missing label.
    """
    if a.parent != b.parent or a.child != b.child:
        return False
    if exact:
        return a.label == b.label
    if a.label is None or b.label is None:
        return True
    return a.label == b.label
