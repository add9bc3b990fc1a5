"""Interactive prompt for finding a route between two cities.

The map is loaded from the configured text files, the user is asked for
a starting and a destination city, and the shortest route is printed.
When rendering is enabled the map is also saved as an HTML page.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Optional

from .config import AppConfig, get_config
from .container import Container
from .domain.errors import CityPathError, MapLoadError, VertexNotFoundError
from .domain.models import Vertex
from .services import RouteFinderService

InputFn = Callable[[str], str]


def configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=config.observability.level,
        format=config.observability.format,
    )


def prompt_city(finder: RouteFinderService, prompt: str, read: InputFn = input) -> Vertex:
    """Ask for a city name until it matches a city on the map."""
    while True:
        city_name = read(prompt).strip()
        if not city_name:
            print("City name cannot be empty. Please enter a valid city name.")
            continue
        try:
            return finder.resolve_city(city_name)
        except VertexNotFoundError:
            print(f"City named '{city_name}' not found. Please enter a valid city name.")


def main(
    config: Optional[AppConfig] = None,
    read: InputFn = input,
) -> int:
    config = config or get_config()
    configure_logging(config)

    container = Container.create_default(config)
    finder: RouteFinderService = container.resolve(RouteFinderService)

    try:
        store = finder.store()
    except MapLoadError as e:
        print(f"Error: could not load the map - {e}")
        return 1

    report = finder.map_repository.last_report
    if report is not None:
        for skipped in report.skipped:
            print(skipped.message)

    try:
        start = prompt_city(finder, "Enter starting city: ", read)
        target = prompt_city(finder, "Enter destination city: ", read)
    except (EOFError, KeyboardInterrupt):
        print()
        return 0

    result = finder.route_solver.solve(store, start, target)
    print(finder.format_route(result))

    if finder.map_renderer is not None:
        try:
            output_path = finder.render(result, config.map_output_path)
            print(f"Map saved to: {output_path}")
        except CityPathError as e:
            print(f"Map generation failed: {e}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
