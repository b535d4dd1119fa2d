"""Conversion utilities between :class:`~pathgraph.core.graph.Graph` and other graph libraries."""

from .convert import from_networkx, to_networkx  # noqa: F401

__all__ = ["from_networkx", "to_networkx"]
