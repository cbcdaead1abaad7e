"""Normalization of raw provider records into typed features.

Responsibilities:
- Parse point records (nested decimal-string coordinates) into ``PointFeature``
- Filter region entries down to well-formed rings and wrap them in ``RegionFeature``

Individual malformed records never abort a batch. A point whose
coordinate does not parse keeps its slot with a ``NaN`` coordinate, so it
still counts towards ``id`` numbering but can never be hit. A region entry
that is not a sequence of coordinate pairs is dropped and does not count
towards ``index`` numbering.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping
from typing import TYPE_CHECKING

from spatial_click.core.exceptions import IngestionError
from spatial_click.models.features import PointFeature, RegionFeature

if TYPE_CHECKING:
    from spatial_click.utils.geometry import LatLng

logger = logging.getLogger(__name__)

# Keys of the nested coordinate object served by the point provider:
# ``{"name": ..., "address": {"geo": {"lat": "-37.3159", "lng": "81.1496"}}}``
_ADDRESS_KEY = "address"
_GEO_KEY = "geo"
_LAT_KEY = "lat"
_LNG_KEY = "lng"
_NAME_KEY = "name"

# Longest leading decimal literal, as accepted by a JavaScript-style
# ``parseFloat``: optional sign, digits with an optional fraction, optional
# exponent, or the literal ``Infinity``. Trailing text is ignored.
_DECIMAL_PREFIX = re.compile(
    r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


# ---------------------------------------------------------------------------
# Points
# ---------------------------------------------------------------------------


def normalize_points(records: object) -> list[PointFeature]:
    """Convert raw point records into ``PointFeature`` values.

    ``id`` is the 1-based position of each record in *records*.

    Args:
        records: The decoded JSON payload from the point provider.

    Returns:
        One ``PointFeature`` per input record, in input order.

    Raises:
        IngestionError: If *records* is not a list of records.
    """
    _require_list(records, "point")

    points: list[PointFeature] = []
    for position, record in enumerate(records, start=1):  # type: ignore[arg-type]
        name, raw_lat, raw_lng = _extract_point_fields(record)
        lat = parse_coordinate(raw_lat)
        lng = parse_coordinate(raw_lng)
        if math.isnan(lat) or math.isnan(lng):
            logger.warning(
                "Unparsable point coordinate kept as NaN | id=%d | name=%s | lat=%r | lng=%r",
                position,
                name,
                raw_lat,
                raw_lng,
            )
        points.append(PointFeature(id=position, name=name, lat=lat, lng=lng))

    logger.info("Points normalized | count=%d", len(points))
    return points


def parse_coordinate(value: object) -> float:
    """Parse a decimal coordinate, returning ``NaN`` when it does not parse.

    Strings are read up to the end of their leading decimal literal, so
    ``"38.9abc"`` is ``38.9`` and ``"1_000"`` is ``1.0``. ``"inf"`` and
    ``"nan"`` are not decimal literals. Integers too large for a float,
    ``None``, booleans, and anything else unparsable yield ``NaN``.
    """
    if value is None or isinstance(value, bool):
        return math.nan
    if isinstance(value, int | float):
        try:
            return float(value)
        except OverflowError:
            return math.nan
    if isinstance(value, str):
        match = _DECIMAL_PREFIX.match(value)
        if match is None:
            return math.nan
        return float(match.group(1).replace("Infinity", "inf"))
    return math.nan


def _extract_point_fields(record: object) -> tuple[str, object, object]:
    """Pull ``(name, raw_lat, raw_lng)`` out of a point record.

    Coordinates are read from ``address.geo``; top-level ``lat``/``lng``
    keys are used when the nested object is absent.
    """
    if not isinstance(record, Mapping):
        return "", None, None

    raw_name = record.get(_NAME_KEY)
    name = "" if raw_name is None else str(raw_name)

    geo: object = None
    address = record.get(_ADDRESS_KEY)
    if isinstance(address, Mapping):
        geo = address.get(_GEO_KEY)
    if not isinstance(geo, Mapping):
        geo = record

    return name, geo.get(_LAT_KEY), geo.get(_LNG_KEY)  # type: ignore[union-attr]


# ---------------------------------------------------------------------------
# Regions
# ---------------------------------------------------------------------------


def normalize_polygons(records: object) -> list[RegionFeature]:
    """Keep only well-formed rings and wrap them as ``RegionFeature`` values.

    ``index`` is the 1-based position among *retained* entries, so a
    dropped entry does not leave a gap in the numbering.

    Args:
        records: The decoded JSON payload from the region provider.

    Returns:
        One ``RegionFeature`` per well-formed entry, in input order.

    Raises:
        IngestionError: If *records* is not a list of entries.
    """
    _require_list(records, "region")

    regions: list[RegionFeature] = []
    dropped = 0
    for position, entry in enumerate(records, start=1):  # type: ignore[arg-type]
        ring = coerce_ring(entry)
        if ring is None:
            dropped += 1
            logger.warning(
                "Dropping malformed region entry | position=%d | type=%s",
                position,
                type(entry).__name__,
            )
            continue
        regions.append(RegionFeature(index=len(regions) + 1, ring=ring))

    logger.info("Regions normalized | retained=%d | dropped=%d", len(regions), dropped)
    return regions


def coerce_ring(value: object) -> tuple[LatLng, ...] | None:
    """Convert a raw ring to a tuple of ``(lat, lng)`` pairs.

    Each vertex must be a list/tuple with at least two numeric values;
    extra elements (e.g. altitude) are dropped.

    Returns:
        The ring, or ``None`` if *value* is not a sequence of coordinate pairs.
    """
    if not isinstance(value, list | tuple):
        return None

    ring: list[LatLng] = []
    for vertex in value:
        if not isinstance(vertex, list | tuple) or len(vertex) < 2:
            return None
        lat = parse_coordinate(vertex[0])
        lng = parse_coordinate(vertex[1])
        if math.isnan(lat) or math.isnan(lng):
            return None
        ring.append((lat, lng))
    return tuple(ring)


def _require_list(records: object, kind: str) -> None:
    """Reject provider payloads that are not JSON arrays."""
    if not isinstance(records, list | tuple):
        msg = f"Expected a list of {kind} records, got {type(records).__name__}"
        raise IngestionError(msg)
