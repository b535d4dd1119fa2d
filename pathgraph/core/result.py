"""Result container returned by :meth:`ShortestPathFinder.search`."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Optional

from .path import Path


@dataclass
class SearchResult:
    """Outcome of one shortest-path search.

    ``path`` is ``None`` when the destination cannot be reached from the
    start; that is a normal outcome, not an error.
    """

    path: Optional[Path]
    start: Hashable
    destination: Hashable
    algorithm: str
    params: Dict[str, Any] = field(default_factory=dict)
    runtime: float = 0.0
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        return self.path is not None

    @property
    def cost(self) -> Optional[float]:
        return self.path.cost if self.path is not None else None

    def __repr__(self) -> str:
        outcome = f"cost={self.cost!r}" if self.found else "unreachable"
        return (
            f"SearchResult({self.start!r} -> {self.destination!r}, {outcome}, "
            f"algorithm={self.algorithm!r}, runtime={self.runtime:.6f}s)"
        )
