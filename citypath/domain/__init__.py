"""Domain layer - Core models and errors.

This module contains the domain models and typed errors used
throughout the application. No external dependencies.
"""

from .errors import (
    CityPathError,
    ConfigurationError,
    MalformedEdgeReferenceError,
    MapLoadError,
    RenderingError,
    VertexNotFoundError,
)
from .models import LoadReport, PathResult, Vertex

__all__ = [
    # Models
    "Vertex",
    "PathResult",
    "LoadReport",
    # Errors
    "CityPathError",
    "VertexNotFoundError",
    "MalformedEdgeReferenceError",
    "MapLoadError",
    "RenderingError",
    "ConfigurationError",
]
