"""Shared constants used across the package.

Centralises the hit tolerance, provider endpoints, and map viewport
defaults that would otherwise be duplicated across the resolver, the
loader, and configuration.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Hit resolution
# ---------------------------------------------------------------------------

POINT_HIT_TOLERANCE_DEG: float = 0.01
"""Half-width (degrees) of the axis-aligned window around each point.

A click matches a point when both ``|dlat|`` and ``|dlng|`` are strictly
below this value, so diagonal offsets up to ``sqrt(2) * 0.01`` still hit.
"""

MIN_RING_VERTICES: int = 3
"""Minimum ring length for a region to take part in containment tests."""

REGION_NAME_PREFIX: str = "Polygon"
"""Prefix of derived region names (``"Polygon 1"``, ``"Polygon 2"``, ...)."""

# ---------------------------------------------------------------------------
# Resolved feature kinds (labels shown in the feature-detail panel)
# ---------------------------------------------------------------------------

KIND_POINT: str = "Point"
KIND_REGION: str = "Polygon"
KIND_RAW: str = "Map Click"

# ---------------------------------------------------------------------------
# Providers
# ---------------------------------------------------------------------------

DEFAULT_POINT_API_URL: str = "https://jsonplaceholder.typicode.com/users"
DEFAULT_POLYGON_API_URL: str = "https://api.mocki.io/v2/79b8c51c/polygons"
DEFAULT_FETCH_TIMEOUT_S: float = 10.0

POINT_PROVIDER: str = "points"
REGION_PROVIDER: str = "regions"

# ---------------------------------------------------------------------------
# Map viewport
# ---------------------------------------------------------------------------

DEFAULT_MAP_CENTER: tuple[float, float] = (38.8951, -77.0364)
"""Initial map center as ``(lat, lng)``."""

DEFAULT_MAP_ZOOM: int = 5

MAX_MAP_ZOOM: int = 22

TILE_URL_TEMPLATE: str = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
TILE_ATTRIBUTION: str = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
)
