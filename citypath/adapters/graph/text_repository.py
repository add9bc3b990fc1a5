"""Text-file map repository adapter.

Reads the two plain-text map files:

- city coordinates, one ``name, x, y`` line per city;
- city connections, one ``nameA,nameB`` line per road.

A bad coordinates line aborts the load. A connection that names an
unknown city is reported and skipped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ...config import MapConfig, get_config
from ...domain.errors import MalformedEdgeReferenceError, MapLoadError
from ...domain.models import LoadReport
from ...graph.store import GraphStore


@dataclass
class TextFileMapRepository:
    """Map repository that loads from the city text files.

    This adapter implements MapRepositoryPort.

    Attributes:
        config: Map configuration (paths, file names)
        last_report: Summary of the most recent load, if any
    """

    config: MapConfig = field(default_factory=lambda: get_config().map)
    last_report: Optional[LoadReport] = field(default=None, init=False)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _store: Optional[GraphStore] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> GraphStore:
        """Load the city graph from the text files.

        Returns:
            The populated graph store.

        Raises:
            MapLoadError: If a file cannot be read or a city line is invalid.
        """
        if self._store is not None:
            return self._store

        self._logger.debug(
            "Loading map",
            extra={
                "cities_path": str(self.config.cities_path),
                "connections_path": str(self.config.connections_path),
            },
        )

        store = GraphStore()
        self._read_cities(store, self.config.cities_path)
        edges, skipped = self._read_connections(store, self.config.connections_path)

        self._store = store
        self.last_report = LoadReport(
            vertices=len(store),
            edges=edges,
            skipped=tuple(skipped),
        )
        self._logger.info(
            "Map loaded",
            extra={"cities": len(store), "connections": edges, "skipped": len(skipped)},
        )
        return store

    def _read_cities(self, store: GraphStore, path: Path) -> None:
        for line_number, line in enumerate(self._read_lines(path), start=1):
            if not line.strip():
                continue

            parts = [part.strip() for part in line.split(",")]
            if len(parts) != 3 or not parts[0]:
                raise MapLoadError(
                    f"Expected 'name, x, y' but got {line!r}",
                    file_path=str(path),
                    line_number=line_number,
                )

            name, x_str, y_str = parts
            try:
                x = int(x_str)
                y = int(y_str)
            except ValueError as e:
                raise MapLoadError(
                    f"Invalid coordinates for city {name!r}",
                    file_path=str(path),
                    line_number=line_number,
                    cause=e,
                )

            store.add_vertex(name, x, y)

    def _read_connections(
        self, store: GraphStore, path: Path
    ) -> tuple[int, List[MalformedEdgeReferenceError]]:
        edges = 0
        skipped: List[MalformedEdgeReferenceError] = []

        for line_number, line in enumerate(self._read_lines(path), start=1):
            if not line.strip():
                continue

            parts = [part.strip() for part in line.split(",")]
            if len(parts) != 2:
                error = MalformedEdgeReferenceError(
                    f"Expected 'city1,city2' but got {line!r}",
                    line_number=line_number,
                    reference=line,
                )
                self._report(error)
                skipped.append(error)
                continue

            a = store.find_by_name(parts[0])
            b = store.find_by_name(parts[1])
            missing = parts[0] if a is None else parts[1] if b is None else None
            if missing is not None:
                error = MalformedEdgeReferenceError(
                    f"Connection Error: City not found - {missing}",
                    line_number=line_number,
                    reference=line,
                    missing_name=missing,
                )
                self._report(error)
                skipped.append(error)
                continue

            store.connect(a, b)
            edges += 1

        return edges, skipped

    def _report(self, error: MalformedEdgeReferenceError) -> None:
        self._logger.warning(
            "Skipping connection",
            extra={"line_number": error.line_number, "error": error.message},
        )

    @staticmethod
    def _read_lines(path: Path) -> List[str]:
        try:
            with path.open(encoding="utf-8") as f:
                return f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise MapLoadError(
                f"Failed to read map file {path}",
                file_path=str(path),
                cause=e,
            )

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._store = None
        self.last_report = None
        self._logger.debug("Map cache cleared")
