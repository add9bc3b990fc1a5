"""Graph-related utilities for representing the city map.

This subpackage contains the in-memory graph store and the path-finding
algorithms that run on top of it.
"""

from .dijkstra import (
    PATH_FINDER_STRATEGIES,
    euclidean_distance,
    find_shortest_path,
    find_shortest_path_heap,
    path_cost,
)
from .store import GraphStore

__all__ = [
    "GraphStore",
    "PATH_FINDER_STRATEGIES",
    "euclidean_distance",
    "find_shortest_path",
    "find_shortest_path_heap",
    "path_cost",
]
