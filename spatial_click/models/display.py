"""Pydantic model for the feature-detail panel.

The map UI shows a small panel after each click: the feature type plus
whichever of name / latitude / longitude the result carries. This module
turns a ``ResolvedFeature`` into that document so the renderer receives a
validated, JSON-serialisable payload instead of an ad hoc dict.

Panel contents per result kind:
- **Point**: type, name, latitude, longitude
- **Polygon**: type, name
- **Map Click**: type, latitude, longitude
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from spatial_click.models.resolved import (
    PointMatch,
    RawCoordinate,
    RegionMatch,
    ResolvedFeature,
)

PANEL_TITLE = "Feature Data"


class FeatureDetail(BaseModel):
    """Feature-detail panel document.

    Attributes:
        title: Panel heading.
        type: Result kind (``"Point"``, ``"Polygon"`` or ``"Map Click"``).
        name: Feature name; ``None`` for unmatched clicks.
        latitude: Latitude in degrees; ``None`` for region matches.
        longitude: Longitude in degrees; ``None`` for region matches.
    """

    title: str = PANEL_TITLE
    type: str
    name: str | None = None
    latitude: float | None = None
    longitude: float | None = None

    @classmethod
    def from_resolved(cls, resolved: ResolvedFeature) -> FeatureDetail:
        """Build the panel document for a resolver result."""
        if isinstance(resolved, PointMatch):
            return cls(
                type=resolved.kind,
                name=resolved.name,
                latitude=resolved.lat,
                longitude=resolved.lng,
            )
        if isinstance(resolved, RegionMatch):
            return cls(type=resolved.kind, name=resolved.name)
        if isinstance(resolved, RawCoordinate):
            return cls(type=resolved.kind, latitude=resolved.lat, longitude=resolved.lng)
        msg = f"Unsupported resolved feature: {type(resolved).__name__}"
        raise TypeError(msg)

    def rows(self) -> list[tuple[str, str]]:
        """Return ``(label, value)`` rows in display order, skipping empty fields."""
        rows: list[tuple[str, str]] = []
        if self.type != RawCoordinate.kind:
            rows.append(("Type", self.type))
        if self.name is not None:
            rows.append(("Name", self.name))
        if self.latitude is not None:
            rows.append(("Latitude", str(self.latitude)))
        if self.longitude is not None:
            rows.append(("Longitude", str(self.longitude)))
        return rows


class MapViewport(BaseModel):
    """Initial view handed to the map renderer.

    Attributes:
        center: Map center as ``[lat, lng]``.
        zoom: Initial zoom level.
        tile_url: Slippy-map tile URL template.
        attribution: Tile attribution HTML.
    """

    center: list[float] = Field(default_factory=list)
    zoom: int = 5
    tile_url: str = ""
    attribution: str = ""
