"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- Map storage (plain text files)
- Path-finding engines (Dijkstra)
- Rendering engines (Folium)
"""
