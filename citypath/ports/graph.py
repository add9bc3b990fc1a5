"""Graph ports - Abstractions for map loading and routing.

These protocols define the contracts for graph operations: loading the
city map and computing shortest paths on it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import LoadReport, PathResult, Vertex
    from ..graph.store import GraphStore


class MapRepositoryPort(Protocol):
    """Port for loading map data.

    Implementation: adapters/graph/text_repository.py

    The repository is responsible for loading and caching the city
    graph from persistent storage.
    """

    last_report: Optional[LoadReport]

    def load(self) -> GraphStore:
        """Load the city graph.

        Returns:
            The populated graph store.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(
        self,
        store: GraphStore,
        start: Vertex,
        target: Vertex,
    ) -> PathResult:
        """Find the shortest path between two cities.

        Args:
            store: The graph both cities belong to.
            start: Departure city.
            target: Destination city.

        Returns:
            PathResult with the route, empty if the target is unreachable.
        """
        ...
