"""Rendering adapters - Implementations of MapRendererPort.

Available implementations:
- FoliumMapRenderer: Folium-based HTML map rendering
"""

from .folium_adapter import FoliumMapRenderer

__all__ = ["FoliumMapRenderer"]
