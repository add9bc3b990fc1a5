"""Route finder service - Main orchestrator.

This service ties the map repository, the route solver and the optional
map renderer together behind city names.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..domain.errors import RenderingError, VertexNotFoundError
from ..domain.models import PathResult, Vertex
from ..graph.store import GraphStore
from ..ports.graph import MapRepositoryPort, RouteSolverPort
from ..ports.rendering import MapRendererPort


@dataclass
class RouteFinderService:
    """Main service for finding routes between cities.

    The service orchestrates:
    1. Map loading
    2. City name resolution
    3. Route computation
    4. Optional map rendering

    Attributes:
        map_repository: Loads the city graph
        route_solver: Computes shortest paths
        map_renderer: Optional map rendering
    """

    map_repository: MapRepositoryPort
    route_solver: RouteSolverPort
    map_renderer: Optional[MapRendererPort] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def store(self) -> GraphStore:
        """Return the loaded city graph."""
        return self.map_repository.load()

    def resolve_city(self, name: str) -> Vertex:
        """Look a city up by name, ignoring case.

        Raises:
            VertexNotFoundError: If the name is empty or unknown.
        """
        name = name.strip()
        if not name:
            raise VertexNotFoundError("City name cannot be empty", name=name)
        return self.store().get_by_name(name)

    def find_route(
        self,
        start_name: str,
        target_name: str,
        render: bool = False,
        output_path: Optional[Path] = None,
    ) -> PathResult:
        """Find the shortest route between two cities given by name.

        Args:
            start_name: Name of the departure city.
            target_name: Name of the destination city.
            render: Whether to draw the map with the route.
            output_path: Path for the map file (required if render=True).

        Returns:
            PathResult with the route, empty if the target is unreachable.

        Raises:
            MapLoadError: If the map cannot be loaded.
            VertexNotFoundError: If either city name is unknown.
            RenderingError: If map rendering fails.
        """
        self._logger.info(
            "Starting route search",
            extra={"start": start_name, "target": target_name},
        )

        store = self.store()
        start = self.resolve_city(start_name)
        target = self.resolve_city(target_name)

        result = self.route_solver.solve(store, start, target)

        if render:
            self.render(result, output_path)

        return result

    def render(self, result: Optional[PathResult], output_path: Optional[Path]) -> Path:
        """Draw the map, highlighting ``result`` when it is a route.

        Raises:
            RenderingError: If no renderer or output path is configured,
                or the renderer fails.
        """
        if self.map_renderer is None:
            raise RenderingError("No map renderer configured", renderer_type="none")
        if output_path is None:
            raise RenderingError(
                "output_path is required when rendering",
                renderer_type=type(self.map_renderer).__name__,
            )
        return self.map_renderer.render(self.store(), result, output_path)

    @staticmethod
    def format_route(result: PathResult) -> str:
        """Format a route the way the prompt prints it."""
        if result.is_empty:
            return "No path could be found."
        path = " -> ".join(result.names)
        return f"Total Distance: {result.total_cost:.2f}. Path: {path}"
