"""Result variants returned by the hit resolver.

``ResolvedFeature`` is a closed union of three frozen dataclasses:

- ``PointMatch``: the click fell inside a point's tolerance window.
- ``RegionMatch``: the click fell inside a region's ring.
- ``RawCoordinate``: nothing matched; the clicked coordinate is echoed.

Each variant carries a ``kind`` label matching what the detail panel
shows as the feature type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from spatial_click.core.constants import KIND_POINT, KIND_RAW, KIND_REGION


@dataclass(frozen=True, slots=True)
class PointMatch:
    """A click that hit a named point."""

    kind: ClassVar[str] = KIND_POINT

    name: str
    lat: float
    lng: float

    def to_dict(self) -> dict[str, object]:
        """Serialise to a tagged dict."""
        return {"type": self.kind, "name": self.name, "lat": self.lat, "lng": self.lng}


@dataclass(frozen=True, slots=True)
class RegionMatch:
    """A click that landed inside a region."""

    kind: ClassVar[str] = KIND_REGION

    name: str

    def to_dict(self) -> dict[str, object]:
        """Serialise to a tagged dict."""
        return {"type": self.kind, "name": self.name}


@dataclass(frozen=True, slots=True)
class RawCoordinate:
    """A click that matched no feature."""

    kind: ClassVar[str] = KIND_RAW

    lat: float
    lng: float

    def to_dict(self) -> dict[str, object]:
        """Serialise to a tagged dict."""
        return {"type": self.kind, "lat": self.lat, "lng": self.lng}


ResolvedFeature = PointMatch | RegionMatch | RawCoordinate
