"""Data models and schemas.

Defines the data structures used throughout the package:
- PointFeature / RegionFeature: Normalized provider features
- QueryCoordinate: A clicked map location
- PointMatch / RegionMatch / RawCoordinate: Resolver results
- FeatureStore: Write-once snapshot of loaded features
"""

from spatial_click.models.features import PointFeature, QueryCoordinate, RegionFeature
from spatial_click.models.resolved import (
    PointMatch,
    RawCoordinate,
    RegionMatch,
    ResolvedFeature,
)
from spatial_click.models.store import FeatureStore

__all__ = [
    "FeatureStore",
    "PointFeature",
    "PointMatch",
    "QueryCoordinate",
    "RawCoordinate",
    "RegionFeature",
    "RegionMatch",
    "ResolvedFeature",
]
