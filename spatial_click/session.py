"""Map session: the wiring layer between a map renderer and the package.

All behaviour lives in the activities and orchestrators; this module only
holds the loaded snapshot and hands the renderer what it asks for:

- ``layers()`` once, to draw markers and shaded regions,
- ``on_click(lat, lng)`` per click, to fill the feature-detail panel.

Usage::

    session = MapSession.start()
    detail = session.on_click(38.9, -77.0)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from spatial_click.activities.resolve_hit import resolve_click
from spatial_click.core.config import SpatialClickConfig
from spatial_click.models.display import FeatureDetail, MapViewport
from spatial_click.models.store import FeatureStore
from spatial_click.orchestrators.load_features import load_from_config
from spatial_click.utils.layers import build_point_layer, build_region_layer, build_viewport

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MapSession:
    """A loaded map: configuration plus the frozen feature snapshot.

    Attributes:
        config: Application configuration.
        store: Features loaded at startup (empty if loading failed).
    """

    config: SpatialClickConfig = field(default_factory=SpatialClickConfig)
    store: FeatureStore = field(default_factory=FeatureStore.empty)

    @classmethod
    def start(
        cls,
        config: SpatialClickConfig | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> MapSession:
        """Load configuration (from env if not given) and the feature store."""
        config = config or SpatialClickConfig.from_env()
        store = load_from_config(config, transport=transport)
        logger.info("Map session started | features=%d", len(store))
        return cls(config=config, store=store)

    def viewport(self) -> MapViewport:
        """Initial map view."""
        return build_viewport(self.config)

    def layers(self) -> dict[str, dict[str, Any]]:
        """GeoJSON layers keyed by ``"points"`` and ``"regions"``."""
        return {
            "points": build_point_layer(self.store),
            "regions": build_region_layer(self.store),
        }

    def on_click(self, lat: float, lng: float) -> FeatureDetail:
        """Resolve a click and return the detail panel document."""
        return FeatureDetail.from_resolved(resolve_click(lat, lng, self.store))
