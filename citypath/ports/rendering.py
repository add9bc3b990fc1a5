"""Rendering port - Abstraction for map drawing.

This protocol defines the contract for drawing the city map and a
computed route, allowing different renderers to be plugged in.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import PathResult
    from ..graph.store import GraphStore


class MapRendererPort(Protocol):
    """Port for map rendering.

    Implementation: adapters/rendering/folium_adapter.py
    """

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
        """
        ...
