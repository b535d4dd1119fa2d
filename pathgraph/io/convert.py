"""networkx interoperability.

:class:`~pathgraph.core.graph.Graph` keeps parallel edges, so it maps onto a
``networkx.MultiDiGraph``; each edge's label is stored under the ``weight``
attribute.
"""

from __future__ import annotations

from typing import Any, Optional, Union

import networkx as nx

from ..core.graph import Graph, GraphView
from ..errors import GraphInputError


def to_networkx(graph: Union[Graph, GraphView], weight: str = "weight") -> nx.MultiDiGraph:
    """Convert a graph into a ``networkx.MultiDiGraph``.

    Parameters
    ----------
    graph: Graph or GraphView
        Graph to convert.
    weight: str, default "weight"
        Edge attribute that receives each edge's label.
    """
    G = nx.MultiDiGraph()
    G.add_nodes_from(graph.nodes())
    for edge in graph.iter_edges():
        G.add_edge(edge.parent, edge.child, **{weight: edge.label})
    return G


def from_networkx(G: nx.Graph, weight: str = "weight", default: Optional[Any] = None) -> Graph:
    """Create a :class:`Graph` from a networkx graph.

    Directed graphs keep their edge directions; undirected graphs get one
    edge in each direction.

    Parameters
    ----------
    G: networkx.Graph
        Any networkx graph (multi-edges are kept).
    weight: str, default "weight"
        Edge attribute holding the weight.
    default: optional
        Weight to use for edges without the attribute. If ``None`` such
        edges are rejected.

    Raises
    ------
    GraphInputError
        If an edge has no weight and no ``default`` is given.
    """
    graph = Graph(nodes=G.nodes())
    for u, v, attrs in G.edges(data=True):
        label = attrs.get(weight, default)
        if label is None:
            raise GraphInputError(f"Edge ({u!r}, {v!r}) has no '{weight}' attribute")
        graph.add_edge(u, v, label)
        if not G.is_directed():
            graph.add_edge(v, u, label)
    return graph
