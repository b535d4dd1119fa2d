"""Exception hierarchy for pathgraph.

Unreachable destinations are *not* errors; finders return ``None`` for them.
"""

from __future__ import annotations


class PathGraphError(Exception):
    """Base exception for pathgraph."""


class GraphInputError(PathGraphError, ValueError):
    """Raised when a node, edge or label passed in is invalid."""


class NodeNotFoundError(GraphInputError, KeyError):
    """Raised when a search endpoint is not a member of the graph."""

    def __init__(self, node: object, role: str = "node") -> None:
        self.node = node
        self.role = role
        super().__init__(f"{role.capitalize()} {node!r} is not a node in the graph")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return self.args[0]


class ParameterValidationError(PathGraphError, ValueError):
    """Raised when a finder is configured with invalid options."""


class UnknownAlgorithmError(PathGraphError, ValueError):
    """Raised when no finder is registered under the requested name."""
