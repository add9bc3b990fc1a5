"""Typed domain errors for the city path finder.

Every failure that can reach a caller is represented by one of these
types, so load problems and lookup misses are reported rather than
printed and forgotten.

All errors inherit from CityPathError and can optionally wrap a root
cause exception for debugging. An unreachable destination is not an
error: it is an empty PathResult.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class CityPathError(Exception):
    """Base error for the city path finder.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class VertexNotFoundError(CityPathError):
    """No city matches the requested name.

    Non-fatal: interactive callers re-prompt.

    Attributes:
        name: The city name that was looked up
    """

    name: str = ""


@dataclass
class MalformedEdgeReferenceError(CityPathError):
    """A connection line names a city that was never loaded.

    The loader records this error and skips the single connection; the
    rest of the map still loads.

    Attributes:
        line_number: 1-based line number in the connections file
        reference: The raw connection line
        missing_name: The city name that could not be resolved
    """

    line_number: int = 0
    reference: str = ""
    missing_name: str = ""


@dataclass
class MapLoadError(CityPathError):
    """The map files could not be read or parsed.

    Attributes:
        file_path: Path to the offending file if relevant
        line_number: 1-based line number of the offending line, if any
    """

    file_path: Optional[str] = None
    line_number: Optional[int] = None


@dataclass
class RenderingError(CityPathError):
    """Map rendering failed.

    Attributes:
        output_path: Path where rendering was attempted
        renderer_type: Type of renderer that failed
    """

    output_path: Optional[str] = None
    renderer_type: str = ""


@dataclass
class ConfigurationError(CityPathError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
