"""Data models for normalized map features and click queries.

A ``PointFeature`` is a named marker; a ``RegionFeature`` is a single
polygon ring. Both are produced by the normalizer, frozen into a
``FeatureStore``, and read by the hit resolver.

All coordinates are ``(lat, lng)`` in degrees and are treated as planar
Cartesian values; no geodesic correction is applied anywhere.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from spatial_click.core.constants import MIN_RING_VERTICES, REGION_NAME_PREFIX


@dataclass(frozen=True, slots=True)
class PointFeature:
    """A named point loaded from the point provider.

    Attributes:
        id: 1-based position of the record in the provider response.
        name: Display name (e.g. ``"Leanne Graham"``).
        lat: Latitude in degrees. ``NaN`` if the source value did not parse.
        lng: Longitude in degrees. ``NaN`` if the source value did not parse.
    """

    id: int
    name: str
    lat: float
    lng: float

    @property
    def has_position(self) -> bool:
        """Whether both coordinates are real numbers (not ``NaN``)."""
        return not (math.isnan(self.lat) or math.isnan(self.lng))

    def to_dict(self) -> dict[str, object]:
        """Serialise to a plain dict."""
        return {"id": self.id, "name": self.name, "lat": self.lat, "lng": self.lng}


@dataclass(frozen=True, slots=True)
class RegionFeature:
    """A polygon region loaded from the region provider.

    The region's name is derived from its position, never stored.

    Attributes:
        index: 1-based position among the *retained* provider entries.
        ring: Ordered ``(lat, lng)`` vertices. The ring is implicitly
            closed; a repeated closing vertex is allowed but not required.
    """

    index: int
    ring: tuple[tuple[float, float], ...]

    @property
    def name(self) -> str:
        """Derived display name, e.g. ``"Polygon 1"``."""
        return f"{REGION_NAME_PREFIX} {self.index}"

    @property
    def is_containment_eligible(self) -> bool:
        """Whether the ring has enough vertices to enclose anything."""
        return len(self.ring) >= MIN_RING_VERTICES

    @property
    def centroid(self) -> tuple[float, float] | None:
        """Planar centroid as ``(lat, lng)``, or ``None`` for degenerate rings."""
        if len(set(self.ring)) < 3:
            return None

        from shapely.geometry import Polygon

        point = Polygon(self.ring).centroid
        if point.is_empty:
            return None
        return (point.x, point.y)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a plain dict."""
        return {
            "index": self.index,
            "name": self.name,
            "ring": [list(vertex) for vertex in self.ring],
        }


@dataclass(frozen=True, slots=True)
class QueryCoordinate:
    """A clicked map location.

    Attributes:
        lat: Latitude in degrees.
        lng: Longitude in degrees.
    """

    lat: float
    lng: float
