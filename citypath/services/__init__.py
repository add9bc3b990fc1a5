"""Services layer - Application orchestration.

Available services:
- RouteFinderService: Finds and optionally draws routes between cities
"""

from .route_finder import RouteFinderService

__all__ = ["RouteFinderService"]
