"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- CITYPATH_MAP_DATA_DIR=/path/to/data
- CITYPATH_ROUTING_STRATEGY=dijkstra_heap
- CITYPATH_RENDER_ENABLED=false
- CITYPATH_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MapConfig(BaseSettings):
    """Map data configuration.

    Environment variables prefixed with CITYPATH_MAP_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYPATH_MAP_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent / "data"
    )
    cities_file: str = "city_coordinates.txt"
    connections_file: str = "city_connections.txt"

    @property
    def cities_path(self) -> Path:
        """Full path to the city coordinates file."""
        return self.data_dir / self.cities_file

    @property
    def connections_path(self) -> Path:
        """Full path to the city connections file."""
        return self.data_dir / self.connections_file


class RoutingConfig(BaseSettings):
    """Path-finding configuration.

    Environment variables prefixed with CITYPATH_ROUTING_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYPATH_ROUTING_")

    strategy: Literal["dijkstra", "dijkstra_heap"] = "dijkstra"


class RenderingConfig(BaseSettings):
    """Map rendering configuration.

    Environment variables prefixed with CITYPATH_RENDER_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYPATH_RENDER_")

    enabled: bool = True
    output_file: str = "city_map.html"
    city_color: str = "gray"
    road_color: str = "black"
    route_color: str = "cyan"
    route_weight: int = 5


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with CITYPATH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYPATH_LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.map.cities_path)
        print(config.routing.strategy)

    Environment variables prefixed with CITYPATH_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYPATH_")

    map: MapConfig = Field(default_factory=MapConfig)
    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    rendering: RenderingConfig = Field(default_factory=RenderingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    output_dir: Path = Field(default_factory=Path.cwd)

    @property
    def map_output_path(self) -> Path:
        """Where the rendered map is written."""
        return self.output_dir / self.rendering.output_file


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
