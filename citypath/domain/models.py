"""Domain models for the city path finder.

Vertex is the only mutable model: its adjacency grows while the map is
loaded. Everything produced by a query is a frozen dataclass.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .errors import MalformedEdgeReferenceError


@dataclass(eq=False, slots=True)
class Vertex:
    """A city on the map.

    Vertices compare by identity: two cities loaded with the same name
    are still distinct vertices.

    Attributes:
        id: Dense index of the vertex in its GraphStore
        name: Display name (looked up case-insensitively)
        x: Planar x coordinate
        y: Planar y coordinate
        neighbors: Ids of adjacent vertices, in connection order
    """

    id: int
    name: str
    x: int
    y: int
    neighbors: list[int] = field(default_factory=list, repr=False)

    @property
    def position(self) -> tuple[int, int]:
        """Return the (x, y) coordinates."""
        return (self.x, self.y)

    def is_adjacent(self, other: Vertex) -> bool:
        return other.id in self.neighbors


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a shortest-path query.

    Attributes:
        path: Ordered vertices from start to target, both inclusive
        total_cost: Sum of the Euclidean edge lengths along ``path``
    """

    path: tuple[Vertex, ...]
    total_cost: float

    @classmethod
    def unreachable(cls) -> PathResult:
        """Build the "no path" outcome."""
        return cls(path=(), total_cost=math.inf)

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of cities on the route."""
        return len(self.path)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(vertex.name for vertex in self.path)


@dataclass(frozen=True, slots=True)
class LoadReport:
    """Summary of one map load.

    Attributes:
        vertices: Number of cities loaded
        edges: Number of connection lines that were applied
        skipped: Connection lines that were reported and skipped
    """

    vertices: int = 0
    edges: int = 0
    skipped: tuple[MalformedEdgeReferenceError, ...] = field(default_factory=tuple)

    @property
    def has_skipped(self) -> bool:
        return len(self.skipped) > 0
