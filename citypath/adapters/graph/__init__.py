"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- TextFileMapRepository: Loads the city map from text files
- DijkstraRouteSolver: Finds shortest paths using Dijkstra's algorithm
"""

from .dijkstra_solver import DijkstraRouteSolver
from .text_repository import TextFileMapRepository

__all__ = ["TextFileMapRepository", "DijkstraRouteSolver"]
