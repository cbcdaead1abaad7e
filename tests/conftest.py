"""Shared pytest fixtures for the spatial-click test suite."""

from __future__ import annotations

import pytest

from spatial_click.activities.normalize import normalize_points, normalize_polygons
from spatial_click.models.store import FeatureStore

# ---------------------------------------------------------------------------
# Raw provider payloads
# ---------------------------------------------------------------------------

# Square around Washington, DC, as served by the region provider.
DC_SQUARE = [[38.0, -77.5], [39.0, -77.5], [39.0, -76.5], [38.0, -76.5]]


def user_record(name: str, lat: object, lng: object) -> dict[str, object]:
    """Build a point record shaped like the point provider's users."""
    return {
        "id": 99,
        "name": name,
        "username": name.lower(),
        "address": {"city": "Anytown", "geo": {"lat": lat, "lng": lng}},
    }


@pytest.fixture()
def point_records() -> list[dict[str, object]]:
    """Raw point records with decimal-string coordinates."""
    return [
        user_record("Leanne Graham", "-37.3159", "81.1496"),
        user_record("Ervin Howell", "-43.9509", "-34.4618"),
        user_record("Clementine Bauch", "-68.6102", "-47.0653"),
    ]


@pytest.fixture()
def region_records() -> list[object]:
    """Raw region entries including one malformed value."""
    return [
        [[38, -77], [39, -77], [39, -76], [38, -76]],
        "not-a-ring",
        [[0, 0], [1, 0], [1, 1]],
    ]


# ---------------------------------------------------------------------------
# Stores
# ---------------------------------------------------------------------------


@pytest.fixture()
def alice_store() -> FeatureStore:
    """One point (Alice) inside one square region."""
    points = normalize_points([{"name": "Alice", "lat": "38.9", "lng": "-77.0"}])
    regions = normalize_polygons([DC_SQUARE])
    return FeatureStore.from_features(points, regions)
