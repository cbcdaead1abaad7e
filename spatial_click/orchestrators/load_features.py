"""Feature loading: fetch both providers, normalize, freeze.

The two provider fetches run concurrently and the store is only built
once both have completed. Loading is all-or-nothing: if either fetch or
either payload fails for any reason, the failure is logged and
``FeatureStore.empty()`` is returned, so the resolver never sees
partially loaded data.

Malformed *individual* records do not count as failures here; the
normalizer keeps or drops them one by one.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from spatial_click.activities.normalize import normalize_points, normalize_polygons
from spatial_click.core.exceptions import SpatialClickError
from spatial_click.models.store import FeatureStore
from spatial_click.providers.factory import build_providers

if TYPE_CHECKING:
    import httpx

    from spatial_click.core.config import SpatialClickConfig
    from spatial_click.providers.base import FeatureProvider

logger = logging.getLogger(__name__)


def load_feature_store(
    point_provider: FeatureProvider,
    region_provider: FeatureProvider,
) -> FeatureStore:
    """Fetch, normalize, and freeze both feature collections.

    Args:
        point_provider: Source of raw point records.
        region_provider: Source of raw region rings.

    Returns:
        A populated ``FeatureStore``, or an empty one if anything failed.
    """
    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="feature-fetch") as executor:
        pending = [
            (point_provider, executor.submit(point_provider.fetch)),
            (region_provider, executor.submit(region_provider.fetch)),
        ]

        payloads: list[object] = []
        failures: list[Exception] = []
        for provider, future in pending:
            try:
                payloads.append(future.result())
            except SpatialClickError as exc:
                failures.append(exc)
                logger.error(
                    "Provider fetch failed | provider=%s | error=%s",
                    provider.name,
                    exc.to_error_dict(),
                )
            except Exception as exc:
                failures.append(exc)
                logger.error(
                    "Provider fetch failed | provider=%s | error=%s",
                    provider.name,
                    type(exc).__name__,
                    exc_info=True,
                )

    if failures:
        logger.error(
            "Feature store left empty | failed_providers=%d",
            len(failures),
        )
        return FeatureStore.empty()

    try:
        points = normalize_points(payloads[0])
        regions = normalize_polygons(payloads[1])
    except Exception:
        logger.error("Feature store left empty | payload could not be normalized", exc_info=True)
        return FeatureStore.empty()

    store = FeatureStore.from_features(points, regions)
    logger.info(
        "Feature store loaded | points=%d | regions=%d",
        len(store.points()),
        len(store.regions()),
    )
    return store


def load_from_config(
    config: SpatialClickConfig,
    *,
    transport: httpx.BaseTransport | None = None,
) -> FeatureStore:
    """Build the HTTP providers from *config* and load the store."""
    point_provider, region_provider = build_providers(config, transport=transport)
    return load_feature_store(point_provider, region_provider)
