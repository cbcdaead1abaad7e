"""Write-once snapshot of the loaded map features.

A ``FeatureStore`` starts empty, is built exactly once from the
normalized provider data, and is read-only afterwards. It is passed
explicitly to the resolver and to the layer builders; nothing reads it
through module-level state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from spatial_click.models.features import PointFeature, RegionFeature


@dataclass(frozen=True, slots=True)
class FeatureStore:
    """Immutable container of normalized point and region features.

    Attributes:
        _points: Points in ingestion order.
        _regions: Retained regions in ingestion order.
    """

    _points: tuple[PointFeature, ...] = ()
    _regions: tuple[RegionFeature, ...] = ()

    @classmethod
    def empty(cls) -> FeatureStore:
        """Return the default store used before (or instead of) a load."""
        return cls()

    @classmethod
    def from_features(
        cls,
        points: Iterable[PointFeature],
        regions: Iterable[RegionFeature],
    ) -> FeatureStore:
        """Freeze normalized features into a new store."""
        return cls(_points=tuple(points), _regions=tuple(regions))

    def points(self) -> tuple[PointFeature, ...]:
        """Return the points in store order."""
        return self._points

    def regions(self) -> tuple[RegionFeature, ...]:
        """Return the regions in store order."""
        return self._regions

    @property
    def is_loaded(self) -> bool:
        """Whether any feature was loaded."""
        return bool(self._points or self._regions)

    def __len__(self) -> int:
        return len(self._points) + len(self._regions)
