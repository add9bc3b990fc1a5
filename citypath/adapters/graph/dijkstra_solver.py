"""Dijkstra route solver adapter.

This adapter wraps the engines in graph/dijkstra.py and adds:
- Strategy selection by name
- Ownership validation of the two cities
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import ConfigurationError, VertexNotFoundError
from ...domain.models import PathResult, Vertex
from ...graph.dijkstra import PATH_FINDER_STRATEGIES, PathFinder
from ...graph.store import GraphStore


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.

    Attributes:
        strategy: Key into PATH_FINDER_STRATEGIES
    """

    strategy: str = "dijkstra"
    _finder: PathFinder = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        finder = PATH_FINDER_STRATEGIES.get(self.strategy)
        if finder is None:
            raise ConfigurationError(
                f"Unknown path-finding strategy: {self.strategy!r}",
                setting_name="routing.strategy",
            )
        self._finder = finder

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
            PathResult with the route, or an empty result if the target
            cannot be reached.

        Raises:
            VertexNotFoundError: If either city is not part of ``store``.
        """
        for vertex in (start, target):
            if vertex not in store:
                raise VertexNotFoundError(
                    f"City is not part of this map: {vertex.name}",
                    name=vertex.name,
                )

        self._logger.debug(
            "Solving route",
            extra={"start": start.name, "target": target.name, "strategy": self.strategy},
        )

        result = self._finder(store, start, target)

        if result.is_empty:
            self._logger.warning(
                "No route found",
                extra={"start": start.name, "target": target.name},
            )
        else:
            self._logger.info(
                "Route found",
                extra={
                    "start": start.name,
                    "target": target.name,
                    "stops": result.num_stops,
                    "distance": result.total_cost,
                },
            )

        return result
