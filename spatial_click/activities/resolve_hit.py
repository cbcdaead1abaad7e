"""Hit resolution: which loaded feature, if any, sits under a click.

``resolve`` is a pure function of the query and a ``FeatureStore``
snapshot. It performs no I/O and never raises; a click that hits nothing
is reported as a ``RawCoordinate`` echoing the query.

Resolution order:
1. Points, in store order. A point is hit when the click is strictly
   within ``POINT_HIT_TOLERANCE_DEG`` of it on *both* axes (a square
   window, not a circle). The first hit wins.
2. Regions, in store order, only if no point was hit. A region is hit
   when the click is inside its ring under the even-odd rule on planar
   ``(lat, lng)``. The first containing region wins, even when regions
   overlap or nest.
3. Otherwise the raw coordinate.

Points always outrank regions, wherever they are on the map.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from spatial_click.core.constants import POINT_HIT_TOLERANCE_DEG
from spatial_click.models.features import QueryCoordinate
from spatial_click.models.resolved import PointMatch, RawCoordinate, RegionMatch
from spatial_click.utils.geometry import ring_contains, within_tolerance_window

if TYPE_CHECKING:
    from spatial_click.models.features import PointFeature, RegionFeature
    from spatial_click.models.resolved import ResolvedFeature
    from spatial_click.models.store import FeatureStore

logger = logging.getLogger(__name__)


def resolve(query: QueryCoordinate, store: FeatureStore) -> ResolvedFeature:
    """Classify a clicked coordinate against the loaded features.

    Args:
        query: The clicked map location.
        store: The loaded feature snapshot (may be empty).

    Returns:
        ``PointMatch``, ``RegionMatch``, or ``RawCoordinate``.
    """
    point = find_point(query, store)
    if point is not None:
        logger.debug("Click resolved to point | id=%d | name=%s", point.id, point.name)
        return PointMatch(name=point.name, lat=point.lat, lng=point.lng)

    region = find_region(query, store)
    if region is not None:
        logger.debug("Click resolved to region | index=%d", region.index)
        return RegionMatch(name=region.name)

    logger.debug("Click matched no feature | lat=%s | lng=%s", query.lat, query.lng)
    return RawCoordinate(lat=query.lat, lng=query.lng)


def resolve_click(lat: float, lng: float, store: FeatureStore) -> ResolvedFeature:
    """Resolve a click given as bare coordinates (map event handler shape)."""
    return resolve(QueryCoordinate(lat=lat, lng=lng), store)


def find_point(query: QueryCoordinate, store: FeatureStore) -> PointFeature | None:
    """Return the first point whose tolerance window contains *query*."""
    for point in store.points():
        if within_tolerance_window(
            query.lat, query.lng, point.lat, point.lng, POINT_HIT_TOLERANCE_DEG
        ):
            return point
    return None


def find_region(query: QueryCoordinate, store: FeatureStore) -> RegionFeature | None:
    """Return the first region whose ring contains *query*."""
    for region in store.regions():
        if region.is_containment_eligible and ring_contains(region.ring, query.lat, query.lng):
            return region
    return None
