"""Named, located nodes for map-like graphs.

A :class:`Landmark` is a point on a 2-D plane that may also carry a short and
a long name (a *building*). Landmarks are identified by their coordinate
alone: two landmarks at the same spot are the same graph node even if their
names differ. Data loaders must not place two distinct buildings on one
coordinate.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..utils.checks import invariant_checks_enabled


@dataclass(frozen=True)
class Coordinate:
    """Immutable point with non-negative ``x`` and ``y``."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        self.check_rep()

    def __str__(self) -> str:
        return f"({self.x},{self.y})"

    def check_rep(self) -> None:
        if not invariant_checks_enabled():
            return
        assert self.x >= 0, "X coordinate cannot be negative"
        assert self.y >= 0, "Y coordinate cannot be negative"


@dataclass(frozen=True, eq=False)
class Landmark:
    """A location on the map, optionally named.

    Parameters
    ----------
    short_name: Optional[str]
        Abbreviated name, e.g. ``"CSE"``.
    long_name: Optional[str]
        Full name, e.g. ``"Paul G. Allen Center for Computer Science"``.
    x, y: float
        Position of the landmark.

    Equality and hashing use the coordinate only. Ordering puts buildings
    in name order (short name, then long name); as soon as either side is
    unnamed, landmarks order by ``x`` and then ``y``.
    """

    short_name: Optional[str]
    long_name: Optional[str]
    x: float
    y: float
    coordinate: Coordinate = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "coordinate", Coordinate(self.x, self.y))
        object.__setattr__(self, "x", self.coordinate.x)
        object.__setattr__(self, "y", self.coordinate.y)

    @classmethod
    def at(cls, x: float, y: float) -> "Landmark":
        """Create an unnamed landmark (a path intersection)."""
        return cls(None, None, x, y)

    @property
    def is_building(self) -> bool:
        return self.short_name is not None and self.long_name is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Landmark):
            return NotImplemented
        return self.coordinate == other.coordinate

    def __hash__(self) -> int:
        return hash(self.coordinate)

    def __lt__(self, other: "Landmark") -> bool:
        if not isinstance(other, Landmark):
            return NotImplemented
        return self._sort_key(other) < other._sort_key(self)

    def __le__(self, other: "Landmark") -> bool:
        if not isinstance(other, Landmark):
            return NotImplemented
        return self._sort_key(other) <= other._sort_key(self)

    def __gt__(self, other: "Landmark") -> bool:
        if not isinstance(other, Landmark):
            return NotImplemented
        return self._sort_key(other) > other._sort_key(self)

    def __ge__(self, other: "Landmark") -> bool:
        if not isinstance(other, Landmark):
            return NotImplemented
        return self._sort_key(other) >= other._sort_key(self)

    def _sort_key(self, other: "Landmark") -> tuple:
        if self.is_building and other.is_building:
            return (self.short_name, self.long_name)
        return (self.x, self.y)

    def __str__(self) -> str:
        return str(self.coordinate)
