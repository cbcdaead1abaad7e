"""Application configuration loaded from environment variables.

All values have defaults matching the public demo endpoints and the
initial map viewport, so the package works with no configuration.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out
    of its valid range, catching bad configuration at startup instead of
    on the first map click.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from spatial_click.core.constants import (
    DEFAULT_FETCH_TIMEOUT_S,
    DEFAULT_MAP_CENTER,
    DEFAULT_MAP_ZOOM,
    DEFAULT_POINT_API_URL,
    DEFAULT_POLYGON_API_URL,
    MAX_MAP_ZOOM,
)
from spatial_click.core.exceptions import ValidationError


class ConfigValidationError(ValidationError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class SpatialClickConfig:
    """Immutable application configuration.

    Attributes:
        point_api_url: Endpoint serving the named point records.
        polygon_api_url: Endpoint serving the region rings.
        fetch_timeout_s: Per-request HTTP timeout in seconds.
        map_center_lat: Initial map center latitude (degrees).
        map_center_lng: Initial map center longitude (degrees).
        map_zoom: Initial map zoom level.
    """

    point_api_url: str = DEFAULT_POINT_API_URL
    polygon_api_url: str = DEFAULT_POLYGON_API_URL
    fetch_timeout_s: float = DEFAULT_FETCH_TIMEOUT_S
    map_center_lat: float = DEFAULT_MAP_CENTER[0]
    map_center_lng: float = DEFAULT_MAP_CENTER[1]
    map_zoom: int = DEFAULT_MAP_ZOOM

    @property
    def map_center(self) -> tuple[float, float]:
        """Initial map center as ``(lat, lng)``."""
        return (self.map_center_lat, self.map_center_lng)

    @classmethod
    def from_env(cls) -> SpatialClickConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range or a
                required URL is empty.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``FETCH_TIMEOUT_S=abc``).
        """
        config = cls(
            point_api_url=os.getenv("POINT_API_URL", DEFAULT_POINT_API_URL),
            polygon_api_url=os.getenv("POLYGON_API_URL", DEFAULT_POLYGON_API_URL),
            fetch_timeout_s=float(os.getenv("FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S))),
            map_center_lat=float(os.getenv("MAP_CENTER_LAT", str(DEFAULT_MAP_CENTER[0]))),
            map_center_lng=float(os.getenv("MAP_CENTER_LNG", str(DEFAULT_MAP_CENTER[1]))),
            map_zoom=int(os.getenv("MAP_ZOOM", str(DEFAULT_MAP_ZOOM))),
        )
        _validate(config)
        return config


def _validate(config: SpatialClickConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if not config.point_api_url:
        raise ConfigValidationError("POINT_API_URL", config.point_api_url, "must not be empty")

    if not config.polygon_api_url:
        raise ConfigValidationError(
            "POLYGON_API_URL", config.polygon_api_url, "must not be empty"
        )

    if config.fetch_timeout_s <= 0:
        raise ConfigValidationError(
            "FETCH_TIMEOUT_S",
            config.fetch_timeout_s,
            "must be > 0 (seconds)",
        )

    if not -90.0 <= config.map_center_lat <= 90.0:
        raise ConfigValidationError(
            "MAP_CENTER_LAT",
            config.map_center_lat,
            "must be between -90 and 90 (degrees)",
        )

    if not -180.0 <= config.map_center_lng <= 180.0:
        raise ConfigValidationError(
            "MAP_CENTER_LNG",
            config.map_center_lng,
            "must be between -180 and 180 (degrees)",
        )

    if not 0 <= config.map_zoom <= MAX_MAP_ZOOM:
        raise ConfigValidationError(
            "MAP_ZOOM",
            config.map_zoom,
            f"must be between 0 and {MAX_MAP_ZOOM}",
        )
