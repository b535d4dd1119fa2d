"""Shortest-path finders. Importing a module registers its finder."""

from .base import ShortestPathFinder, register
from . import dijkstra, dijkstra_map  # noqa: F401

__all__ = ["ShortestPathFinder", "register"]
