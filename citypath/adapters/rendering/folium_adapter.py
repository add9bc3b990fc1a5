"""Folium map renderer adapter.

Cities live on a flat canvas, not on the globe, so the map is drawn
with Leaflet's ``Simple`` CRS and no tile layer: latitude is the city's
y coordinate and longitude its x coordinate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from ...config import RenderingConfig, get_config
from ...domain.errors import RenderingError
from ...domain.models import PathResult, Vertex
from ...graph.store import GraphStore


def _to_location(vertex: Vertex) -> List[float]:
    return [float(vertex.y), float(vertex.x)]


@dataclass
class FoliumMapRenderer:
    """Folium-based map renderer.

    This adapter implements MapRendererPort using Folium for
    generating interactive HTML maps.
    """

    config: RenderingConfig = field(default_factory=lambda: get_config().rendering)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(
        self,
        store: GraphStore,
        route: Optional[PathResult],
        output_path: Path,
    ) -> Path:
        """Draw cities, roads and an optional route and save to file.

        Args:
            store: The city graph to draw.
            route: Route to highlight, or None to draw the map only.
            output_path: Where to save the rendered map.

        Returns:
            Path to the generated map file.

        Raises:
            RenderingError: If rendering fails.
        """
        if len(store) == 0:
            raise RenderingError(
                "Cannot render an empty map",
                output_path=str(output_path),
                renderer_type="folium",
            )

        self._logger.info(
            "Rendering city map",
            extra={
                "cities": len(store),
                "route_stops": route.num_stops if route else 0,
                "output_path": str(output_path),
            },
        )

        try:
            import folium

            vertices = store.all_vertices()
            m = folium.Map(
                location=self._center(vertices),
                crs="Simple",
                tiles=None,
                zoom_start=0,
                control_scale=False,
            )

            for a, b in store.edges():
                folium.PolyLine(
                    [_to_location(a), _to_location(b)],
                    color=self.config.road_color,
                    weight=1,
                    opacity=0.8,
                ).add_to(m)

            for vertex in vertices:
                self._add_city(m, vertex, self.config.city_color)

            if route is not None and not route.is_empty:
                if route.num_stops >= 2:
                    folium.PolyLine(
                        [_to_location(v) for v in route.path],
                        color=self.config.route_color,
                        weight=self.config.route_weight,
                        opacity=0.9,
                    ).add_to(m)
                for vertex in route.path:
                    self._add_city(m, vertex, self.config.route_color)

            m.fit_bounds(self._bounds(vertices))

            output_path.parent.mkdir(parents=True, exist_ok=True)
            m.save(str(output_path))

            self._logger.info(
                "Map rendered successfully",
                extra={"output_path": str(output_path)},
            )

            return output_path

        except ImportError as e:
            raise RenderingError(
                "Folium not installed",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )
        except Exception as e:
            self._logger.error(
                "Map rendering failed",
                extra={"error": str(e), "output_path": str(output_path)},
            )
            raise RenderingError(
                f"Map rendering failed: {e}",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )

    @staticmethod
    def _add_city(m, vertex: Vertex, color: str) -> None:
        import folium

        folium.CircleMarker(
            location=_to_location(vertex),
            radius=5,
            color=color,
            fill=True,
            fill_color=color,
            fill_opacity=1.0,
            tooltip=folium.Tooltip(vertex.name, permanent=True, direction="top"),
        ).add_to(m)

    @staticmethod
    def _center(vertices: Sequence[Vertex]) -> List[float]:
        return [
            sum(v.y for v in vertices) / len(vertices),
            sum(v.x for v in vertices) / len(vertices),
        ]

    @staticmethod
    def _bounds(vertices: Sequence[Vertex]) -> List[List[float]]:
        return [
            [float(min(v.y for v in vertices)), float(min(v.x for v in vertices))],
            [float(max(v.y for v in vertices)), float(max(v.x for v in vertices))],
        ]
