"""Tests for feature, result, and store models.

Covers:
- Derived region names, containment eligibility, centroids
- Frozen dataclass immutability
- Tagged result variants and their dict form
- FeatureStore lifecycle: empty default, frozen after load
"""

from __future__ import annotations

import dataclasses
import math

import pytest

from spatial_click.models import (
    FeatureStore,
    PointFeature,
    PointMatch,
    QueryCoordinate,
    RawCoordinate,
    RegionFeature,
    RegionMatch,
)


class TestPointFeature:
    """PointFeature model."""

    def test_to_dict(self) -> None:
        point = PointFeature(id=3, name="Clementine", lat=-68.6, lng=-47.0)
        assert point.to_dict() == {"id": 3, "name": "Clementine", "lat": -68.6, "lng": -47.0}

    def test_has_position(self) -> None:
        assert PointFeature(id=1, name="a", lat=0.0, lng=0.0).has_position
        assert not PointFeature(id=1, name="a", lat=math.nan, lng=0.0).has_position
        assert not PointFeature(id=1, name="a", lat=0.0, lng=math.nan).has_position

    def test_frozen(self) -> None:
        point = PointFeature(id=1, name="a", lat=0.0, lng=0.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            point.lat = 1.0  # type: ignore[misc]


class TestRegionFeature:
    """RegionFeature model."""

    def test_name_is_derived_from_index(self) -> None:
        assert RegionFeature(index=7, ring=()).name == "Polygon 7"

    def test_containment_eligibility(self) -> None:
        assert not RegionFeature(index=1, ring=((0.0, 0.0), (1.0, 1.0))).is_containment_eligible
        assert RegionFeature(
            index=1, ring=((0.0, 0.0), (1.0, 0.0), (1.0, 1.0))
        ).is_containment_eligible

    def test_square_centroid(self) -> None:
        square = RegionFeature(
            index=1, ring=((38.0, -77.0), (39.0, -77.0), (39.0, -76.0), (38.0, -76.0))
        )
        assert square.centroid == pytest.approx((38.5, -76.5))

    def test_degenerate_centroid_is_none(self) -> None:
        assert RegionFeature(index=1, ring=((0.0, 0.0), (1.0, 1.0))).centroid is None
        assert RegionFeature(index=1, ring=((0.0, 0.0), (1.0, 0.0), (0.0, 0.0))).centroid is None

    def test_to_dict(self) -> None:
        region = RegionFeature(index=2, ring=((0.0, 0.0), (1.0, 0.0), (1.0, 1.0)))
        assert region.to_dict() == {
            "index": 2,
            "name": "Polygon 2",
            "ring": [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0]],
        }


class TestResolvedVariants:
    """Tagged result variants."""

    def test_kinds(self) -> None:
        assert PointMatch.kind == "Point"
        assert RegionMatch.kind == "Polygon"
        assert RawCoordinate.kind == "Map Click"

    def test_point_match_dict(self) -> None:
        assert PointMatch("Alice", 38.9, -77.0).to_dict() == {
            "type": "Point",
            "name": "Alice",
            "lat": 38.9,
            "lng": -77.0,
        }

    def test_region_match_dict(self) -> None:
        assert RegionMatch("Polygon 1").to_dict() == {"type": "Polygon", "name": "Polygon 1"}

    def test_raw_coordinate_dict(self) -> None:
        assert RawCoordinate(10.0, 10.0).to_dict() == {"type": "Map Click", "lat": 10.0, "lng": 10.0}

    def test_kind_is_not_a_field(self) -> None:
        assert [f.name for f in dataclasses.fields(RegionMatch)] == ["name"]

    def test_variants_are_distinct(self) -> None:
        assert RawCoordinate(1.0, 2.0) != PointMatch("", 1.0, 2.0)


class TestFeatureStore:
    """Write-once feature snapshot."""

    def test_empty_default(self) -> None:
        store = FeatureStore.empty()
        assert store.points() == ()
        assert store.regions() == ()
        assert not store.is_loaded
        assert len(store) == 0

    def test_from_features_freezes_sequences(self) -> None:
        points = [PointFeature(id=1, name="a", lat=0.0, lng=0.0)]
        regions = [RegionFeature(index=1, ring=((0.0, 0.0), (1.0, 0.0), (1.0, 1.0)))]
        store = FeatureStore.from_features(points, regions)

        points.append(PointFeature(id=2, name="b", lat=1.0, lng=1.0))
        regions.clear()

        assert isinstance(store.points(), tuple)
        assert len(store.points()) == 1
        assert len(store.regions()) == 1
        assert store.is_loaded
        assert len(store) == 2

    def test_store_is_frozen(self) -> None:
        store = FeatureStore.empty()
        with pytest.raises(dataclasses.FrozenInstanceError):
            store._points = ()  # type: ignore[misc]

    def test_accepts_generators(self) -> None:
        store = FeatureStore.from_features(
            (PointFeature(id=i, name=str(i), lat=0.0, lng=0.0) for i in (1, 2)),
            iter(()),
        )
        assert [p.id for p in store.points()] == [1, 2]


class TestQueryCoordinate:
    """QueryCoordinate model."""

    def test_fields(self) -> None:
        query = QueryCoordinate(lat=1.5, lng=-2.5)
        assert (query.lat, query.lng) == (1.5, -2.5)
