"""Registry of shortest-path finders, filled in by :func:`~pathgraph.algorithms.base.register`."""

from __future__ import annotations

from typing import Dict, Type

available_algorithms: Dict[str, Type] = {}
