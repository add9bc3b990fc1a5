from __future__ import annotations

import pytest

from citypath.adapters.graph import DijkstraRouteSolver, TextFileMapRepository
from citypath.adapters.rendering import FoliumMapRenderer
from citypath.config import AppConfig, MapConfig, RenderingConfig, RoutingConfig
from citypath.container import Container, get_container, reset_container
from citypath.ports import MapRendererPort, MapRepositoryPort, RouteSolverPort
from citypath.services import RouteFinderService


def test_default_bindings(app_config):
    container = Container.create_default(app_config)

    assert isinstance(container.resolve(MapRepositoryPort), TextFileMapRepository)
    assert isinstance(container.resolve(RouteSolverPort), DijkstraRouteSolver)
    assert isinstance(container.resolve(MapRendererPort), FoliumMapRenderer)


def test_route_finder_without_rendering(app_config):
    finder = Container.create_default(app_config).resolve(RouteFinderService)

    assert finder.map_renderer is None
    assert finder.find_route("A", "C").total_cost == pytest.approx(7.0)


def test_route_finder_with_rendering(map_dir):
    config = AppConfig(
        map=MapConfig(data_dir=map_dir),
        rendering=RenderingConfig(enabled=True),
    )

    finder = Container.create_default(config).resolve(RouteFinderService)

    assert isinstance(finder.map_renderer, FoliumMapRenderer)


def test_routing_strategy_from_config(map_dir):
    config = AppConfig(
        map=MapConfig(data_dir=map_dir),
        routing=RoutingConfig(strategy="dijkstra_heap"),
    )

    solver = Container.create_default(config).resolve(RouteSolverPort)

    assert solver.strategy == "dijkstra_heap"


def test_singletons_and_factories(app_config):
    container = Container(config=app_config)
    container.register(MapRepositoryPort, object)
    container.register(RouteSolverPort, object, singleton=False)

    assert container.resolve(MapRepositoryPort) is container.resolve(MapRepositoryPort)
    assert container.resolve(RouteSolverPort) is not container.resolve(RouteSolverPort)

    container.clear_singletons()
    assert container.is_registered(MapRepositoryPort)

    container.clear_all()
    assert not container.is_registered(MapRepositoryPort)


def test_unregistered_type_raises(app_config):
    with pytest.raises(KeyError):
        Container(config=app_config).resolve(RouteFinderService)


def test_default_container_is_shared_until_reset():
    first = get_container()
    assert get_container() is first

    reset_container()
    assert get_container() is not first
