from __future__ import annotations

import math
import random

import pytest

from citypath.domain.errors import VertexNotFoundError
from citypath.graph import (
    PATH_FINDER_STRATEGIES,
    GraphStore,
    euclidean_distance,
    find_shortest_path,
    find_shortest_path_heap,
    path_cost,
)


def make_triangle(with_edges: bool = True):
    store = GraphStore()
    a = store.add_vertex("A", 0, 0)
    b = store.add_vertex("B", 3, 0)
    c = store.add_vertex("C", 3, 4)
    if with_edges:
        store.connect(a, b)
        store.connect(b, c)
    return store, a, b, c


def random_store(seed: int, size: int = 7, edge_probability: float = 0.4) -> GraphStore:
    rng = random.Random(seed)
    store = GraphStore()
    vertices = [
        store.add_vertex(f"V{i}", rng.randint(0, 50), rng.randint(0, 50))
        for i in range(size)
    ]
    for i, a in enumerate(vertices):
        for b in vertices[i + 1 :]:
            if rng.random() < edge_probability:
                store.connect(a, b)
    return store


def brute_force_cost(store: GraphStore, start, target) -> float:
    """Cheapest simple path found by trying every one of them."""
    best = math.inf

    def walk(vertex, visited, cost):
        nonlocal best
        if vertex is target:
            best = min(best, cost)
            return
        for neighbor in store.neighbors(vertex):
            if neighbor.id not in visited:
                walk(
                    neighbor,
                    visited | {neighbor.id},
                    cost + euclidean_distance(vertex, neighbor),
                )

    walk(start, {start.id}, 0.0)
    return best


# --- Graph store -----------------------------------------------------------


def test_ids_are_dense_and_follow_insertion_order():
    store, a, b, c = make_triangle()

    assert [v.id for v in store.all_vertices()] == [0, 1, 2]
    assert store[1] is b
    assert len(store) == 3
    assert list(store) == [a, b, c]


def test_find_by_name_is_case_insensitive():
    store, a, _, c = make_triangle()

    assert store.find_by_name("a") is a
    assert store.find_by_name("C") is c
    assert store.find_by_name("D") is None


def test_find_by_name_returns_first_loaded_duplicate():
    store = GraphStore()
    first = store.add_vertex("Ankara", 1, 1)
    second = store.add_vertex("ANKARA", 2, 2)

    assert first is not second
    assert second.id == 1
    assert store.find_by_name("ankara") is first


def test_get_by_name_raises_on_miss():
    store, *_ = make_triangle()

    with pytest.raises(VertexNotFoundError) as exc_info:
        store.get_by_name("Nowhere")

    assert exc_info.value.name == "Nowhere"


def test_connect_is_symmetric():
    store, a, b, _ = make_triangle(with_edges=False)

    store.connect(a, b)

    assert b in store.neighbors(a)
    assert a in store.neighbors(b)


def test_connect_is_idempotent():
    store, a, b, _ = make_triangle(with_edges=False)

    store.connect(a, b)
    store.connect(a, b)
    store.connect(b, a)

    assert len(a.neighbors) == 1
    assert len(b.neighbors) == 1


def test_connect_ignores_missing_and_self_edges():
    store, a, _, _ = make_triangle(with_edges=False)

    store.connect(a, None)
    store.connect(None, a)
    store.connect(a, a)

    assert a.neighbors == []


def test_edges_lists_each_edge_once():
    store, a, b, c = make_triangle()

    assert store.edges() == ((a, b), (b, c))


def test_contains_only_own_vertices():
    store, a, _, _ = make_triangle()
    other, *_ = make_triangle()

    assert a in store
    assert other[0] not in store
    assert "A" not in store


# --- Shortest path ---------------------------------------------------------


@pytest.mark.parametrize("finder", list(PATH_FINDER_STRATEGIES.values()))
def test_path_through_intermediate_city(finder):
    store, a, b, c = make_triangle()

    result = finder(store, a, c)

    assert result.path == (a, b, c)
    assert result.total_cost == pytest.approx(7.0)


@pytest.mark.parametrize("finder", list(PATH_FINDER_STRATEGIES.values()))
def test_no_edges_means_no_path(finder):
    store, a, _, c = make_triangle(with_edges=False)

    result = finder(store, a, c)

    assert result.is_empty
    assert math.isinf(result.total_cost)


@pytest.mark.parametrize("finder", list(PATH_FINDER_STRATEGIES.values()))
def test_direct_road_beats_detour(finder):
    store, a, b, c = make_triangle()
    store.connect(a, c)

    result = finder(store, a, c)

    assert result.path == (a, c)
    assert result.total_cost == pytest.approx(5.0)


@pytest.mark.parametrize("finder", list(PATH_FINDER_STRATEGIES.values()))
def test_path_to_self_is_single_city(finder):
    store, a, _, _ = make_triangle()

    result = finder(store, a, a)

    assert result.path == (a,)
    assert result.total_cost == 0.0


def test_unreachable_island_never_returns_partial_path():
    store, a, b, c = make_triangle()
    island = store.add_vertex("D", 10, 10)
    other = store.add_vertex("E", 12, 10)
    store.connect(island, other)

    result = find_shortest_path(store, a, other)

    assert result.path == ()
    assert result.num_stops == 0


def test_search_does_not_modify_store():
    store, a, b, c = make_triangle()
    before = [list(v.neighbors) for v in store]

    find_shortest_path(store, a, c)
    find_shortest_path_heap(store, c, a)

    assert [list(v.neighbors) for v in store] == before
    assert len(store) == 3


def test_equal_length_routes_pick_first_settled():
    store = GraphStore()
    start = store.add_vertex("S", 0, 0)
    up = store.add_vertex("U", 1, 1)
    down = store.add_vertex("D", 1, -1)
    end = store.add_vertex("T", 2, 0)
    store.connect(start, up)
    store.connect(start, down)
    store.connect(up, end)
    store.connect(down, end)

    result = find_shortest_path(store, start, end)

    # U has the lower id, so it is settled first and T's predecessor
    # is never replaced by the equal-length route through D.
    assert result.path == (start, up, end)
    assert result.total_cost == pytest.approx(2 * math.sqrt(2))


def test_euclidean_distance():
    _, a, _, c = make_triangle()

    assert euclidean_distance(a, c) == 5.0
    assert euclidean_distance(c, a) == 5.0


def test_path_cost_matches_reported_cost():
    store, a, _, c = make_triangle()

    result = find_shortest_path(store, a, c)

    assert path_cost(result.path) == pytest.approx(result.total_cost)
    assert path_cost([a]) == 0


@pytest.mark.parametrize("seed", range(12))
def test_matches_brute_force_on_small_graphs(seed):
    store = random_store(seed)

    for start in store:
        for target in store:
            expected = brute_force_cost(store, start, target)
            result = find_shortest_path(store, start, target)

            if math.isinf(expected):
                assert result.is_empty
                continue

            assert result.path[0] is start
            assert result.path[-1] is target
            assert result.total_cost == pytest.approx(expected)
            assert path_cost(result.path) == pytest.approx(result.total_cost)
            for a, b in zip(result.path, result.path[1:]):
                assert a.is_adjacent(b)


@pytest.mark.parametrize("seed", range(6))
def test_heap_variant_reports_same_costs(seed):
    store = random_store(seed, size=9)

    for start in store:
        for target in store:
            linear = find_shortest_path(store, start, target)
            heap = find_shortest_path_heap(store, start, target)

            assert linear.is_empty == heap.is_empty
            if not linear.is_empty:
                assert heap.total_cost == pytest.approx(linear.total_cost)
