"""In-memory graph of cities.

The store owns every Vertex. Adjacency is kept as lists of vertex ids,
so a vertex never holds a reference to another vertex object.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from ..domain.errors import VertexNotFoundError
from ..domain.models import Vertex


class GraphStore:
    """Ordered collection of vertices indexed by their id.

    Ids form a dense ``0..N-1`` range assigned in insertion order.
    """

    def __init__(self) -> None:
        self._vertices: List[Vertex] = []

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    def __getitem__(self, vertex_id: int) -> Vertex:
        return self._vertices[vertex_id]

    def __contains__(self, vertex: object) -> bool:
        if not isinstance(vertex, Vertex):
            return False
        return 0 <= vertex.id < len(self._vertices) and self._vertices[vertex.id] is vertex

    def add_vertex(self, name: str, x: int, y: int) -> Vertex:
        """Create and register a vertex with the next sequential id.

        Duplicate names are accepted and produce distinct vertices.
        """
        vertex = Vertex(id=len(self._vertices), name=name, x=x, y=y)
        self._vertices.append(vertex)
        return vertex

    def find_by_name(self, name: str) -> Optional[Vertex]:
        """Case-insensitive exact-match lookup.

        Vertices are scanned in id order, so the first loaded vertex
        wins when names are duplicated.
        """
        wanted = name.casefold()
        for vertex in self._vertices:
            if vertex.name.casefold() == wanted:
                return vertex
        return None

    def get_by_name(self, name: str) -> Vertex:
        """Like find_by_name(), but raises VertexNotFoundError on a miss."""
        vertex = self.find_by_name(name)
        if vertex is None:
            raise VertexNotFoundError(f"City not found: {name}", name=name)
        return vertex

    def connect(self, a: Optional[Vertex], b: Optional[Vertex]) -> None:
        """Add a symmetric edge between two vertices of this store.

        No-op if either side is None, if both sides are the same vertex,
        or if the edge already exists.
        """
        if a is None or b is None or a is b:
            return
        if b.id in a.neighbors:
            return
        a.neighbors.append(b.id)
        b.neighbors.append(a.id)

    def neighbors(self, vertex: Vertex) -> Tuple[Vertex, ...]:
        return tuple(self._vertices[i] for i in vertex.neighbors)

    def all_vertices(self) -> Tuple[Vertex, ...]:
        """Return a snapshot of all vertices in id order."""
        return tuple(self._vertices)

    def edges(self) -> Tuple[Tuple[Vertex, Vertex], ...]:
        """Return every undirected edge once, lower id first."""
        return tuple(
            (vertex, self._vertices[other])
            for vertex in self._vertices
            for other in vertex.neighbors
            if vertex.id < other
        )
