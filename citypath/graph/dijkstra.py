"""Shortest-path computation using Dijkstra's algorithm.

Edge weights are the Euclidean distances between the planar coordinates
of two adjacent cities, computed every time an edge is relaxed.

Two engines are provided. ``find_shortest_path`` selects the next
vertex with a linear scan in id order (O(V^2)), which is plenty for a
map of a few dozen cities. ``find_shortest_path_heap`` uses ``heapq``
and reports the same costs; when several routes tie, it may pick a
different one.
"""

from __future__ import annotations

import heapq
import math
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..domain.models import PathResult, Vertex
from .store import GraphStore

PathFinder = Callable[[GraphStore, Vertex, Vertex], PathResult]


def euclidean_distance(a: Vertex, b: Vertex) -> float:
    """Straight-line distance between two cities."""
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2)


def path_cost(path: Sequence[Vertex]) -> float:
    """Sum of the edge lengths along ``path``."""
    return sum(euclidean_distance(a, b) for a, b in zip(path, path[1:]))


def find_shortest_path(store: GraphStore, start: Vertex, target: Vertex) -> PathResult:
    """Compute the shortest path between two cities of ``store``.

    Parameters
    ----------
    store:
        Graph the two cities belong to. It is never modified.
    start:
        Departure city.
    target:
        Destination city.

    Returns
    -------
    PathResult
        The cities from ``start`` to ``target`` (inclusive) and the total
        distance. If no path exists, returns ``PathResult.unreachable()``.
    """
    size = len(store)
    distance: List[float] = [math.inf] * size
    previous: List[Optional[int]] = [None] * size
    visited: List[bool] = [False] * size
    distance[start.id] = 0.0

    for _ in range(size):
        nearest = _nearest_unvisited(distance, visited)
        if nearest is None or nearest == target.id:
            break

        visited[nearest] = True
        current = store[nearest]
        for neighbor in store.neighbors(current):
            alt = distance[nearest] + euclidean_distance(current, neighbor)
            if alt < distance[neighbor.id]:
                distance[neighbor.id] = alt
                previous[neighbor.id] = nearest

    return _build_result(store, distance, previous, target)


def _nearest_unvisited(distance: List[float], visited: List[bool]) -> Optional[int]:
    """Return the unvisited id with the smallest finite distance."""
    best: Optional[int] = None
    best_distance = math.inf
    for vertex_id, d in enumerate(distance):
        if not visited[vertex_id] and d < best_distance:
            best_distance = d
            best = vertex_id
    return best


def find_shortest_path_heap(
    store: GraphStore, start: Vertex, target: Vertex
) -> PathResult:
    """Priority-queue variant of find_shortest_path()."""
    distance: List[float] = [math.inf] * len(store)
    previous: List[Optional[int]] = [None] * len(store)
    distance[start.id] = 0.0

    heap: List[Tuple[float, int]] = [(0.0, start.id)]
    visited = set()

    while heap:
        current_distance, u = heapq.heappop(heap)

        if u in visited:
            continue

        visited.add(u)

        if u == target.id:
            break

        current = store[u]
        for neighbor in store.neighbors(current):
            new_distance = current_distance + euclidean_distance(current, neighbor)
            if new_distance < distance[neighbor.id]:
                distance[neighbor.id] = new_distance
                previous[neighbor.id] = u
                heapq.heappush(heap, (new_distance, neighbor.id))

    return _build_result(store, distance, previous, target)


def _build_result(
    store: GraphStore,
    distance: List[float],
    previous: List[Optional[int]],
    target: Vertex,
) -> PathResult:
    if math.isinf(distance[target.id]):
        return PathResult.unreachable()

    path: List[Vertex] = []
    at: Optional[int] = target.id
    while at is not None:
        path.append(store[at])
        at = previous[at]

    path.reverse()
    return PathResult(path=tuple(path), total_cost=distance[target.id])


PATH_FINDER_STRATEGIES: Dict[str, PathFinder] = {
    "dijkstra": find_shortest_path,
    "dijkstra_heap": find_shortest_path_heap,
}
