"""GeoJSON layers and viewport for the map renderer.

The renderer draws one marker per point (popup and tooltip show the
name) and one shaded polygon per region (tooltip shows the derived
name). GeoJSON uses ``[lng, lat]`` axis order, so coordinates are swapped
from the ``(lat, lng)`` order used everywhere else in the package.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from shapely.geometry import LineString, Point, Polygon, mapping

from spatial_click.core.constants import TILE_ATTRIBUTION, TILE_URL_TEMPLATE
from spatial_click.models.display import MapViewport

if TYPE_CHECKING:
    from spatial_click.core.config import SpatialClickConfig
    from spatial_click.models.features import RegionFeature
    from spatial_click.models.store import FeatureStore

logger = logging.getLogger(__name__)


def build_point_layer(store: FeatureStore) -> dict[str, Any]:
    """Return a GeoJSON FeatureCollection of point markers.

    Points with a ``NaN`` coordinate have no position and are left out.
    """
    features: list[dict[str, Any]] = []
    skipped = 0
    for point in store.points():
        if not point.has_position:
            skipped += 1
            continue
        features.append(
            {
                "type": "Feature",
                "geometry": mapping(Point(point.lng, point.lat)),
                "properties": {"id": point.id, "name": point.name},
            }
        )
    if skipped:
        logger.warning("Point layer skipped markers without position | count=%d", skipped)
    return {"type": "FeatureCollection", "features": features}


def build_region_layer(store: FeatureStore) -> dict[str, Any]:
    """Return a GeoJSON FeatureCollection of region shapes.

    Rings with fewer than three distinct vertices cannot form a polygon
    and are drawn as a line (two distinct vertices) or left out (fewer).
    Polygons carry a ``label`` property, the ``[lng, lat]`` centroid where
    the renderer anchors the region name.
    """
    features: list[dict[str, Any]] = []
    for region in store.regions():
        geometry = _region_geometry(region)
        if geometry is None:
            continue
        properties: dict[str, Any] = {"index": region.index, "name": region.name}
        centroid = region.centroid
        if centroid is not None:
            lat, lng = centroid
            properties["label"] = [lng, lat]
        features.append({"type": "Feature", "geometry": geometry, "properties": properties})
    return {"type": "FeatureCollection", "features": features}


def build_viewport(config: SpatialClickConfig) -> MapViewport:
    """Return the initial map view for *config*."""
    return MapViewport(
        center=list(config.map_center),
        zoom=config.map_zoom,
        tile_url=TILE_URL_TEMPLATE,
        attribution=TILE_ATTRIBUTION,
    )


def _region_geometry(region: RegionFeature) -> dict[str, Any] | None:
    swapped = [(lng, lat) for lat, lng in region.ring]
    distinct = len(set(swapped))
    if distinct >= 3:
        return dict(mapping(Polygon(swapped)))
    if distinct == 2:
        return dict(mapping(LineString(swapped)))
    return None
