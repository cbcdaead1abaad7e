"""Planar geometry predicates used by the hit resolver.

Both tests work directly on ``(lat, lng)`` degrees as Cartesian
coordinates. Any comparison involving ``NaN`` is false, so a feature
with an unparsable coordinate can never match.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

LatLng = tuple[float, float]


def within_tolerance_window(
    lat: float,
    lng: float,
    target_lat: float,
    target_lng: float,
    tolerance: float,
) -> bool:
    """Return whether ``(lat, lng)`` lies in the open box around the target.

    The box is axis-aligned with half-width *tolerance* on each axis; it is
    not a circle, so a diagonal offset up to ``sqrt(2) * tolerance`` still
    matches. Both bounds are strict.
    """
    return abs(target_lat - lat) < tolerance and abs(target_lng - lng) < tolerance


def ring_contains(ring: Sequence[LatLng], lat: float, lng: float) -> bool:
    """Even-odd (ray casting) containment test.

    Casts a ray from the query towards increasing longitude and counts
    edge crossings; an odd count means inside. The ring is implicitly
    closed, and a repeated closing vertex contributes a zero-length edge
    that never crosses. Edges use the half-open rule on latitude so that
    a ray passing exactly through a vertex is counted once.

    Rings with fewer than three vertices enclose nothing.
    """
    count = len(ring)
    if count < 3:
        return False

    inside = False
    prev_lat, prev_lng = ring[-1]
    for cur_lat, cur_lng in ring:
        if (cur_lat > lat) != (prev_lat > lat):
            crossing_lng = (prev_lng - cur_lng) * (lat - cur_lat) / (prev_lat - cur_lat) + cur_lng
            if lng < crossing_lng:
                inside = not inside
        prev_lat, prev_lng = cur_lat, cur_lng
    return inside
