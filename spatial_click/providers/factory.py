"""Provider factory: builds the point and region providers from config.

Usage::

    from spatial_click.providers.factory import build_providers

    point_provider, region_provider = build_providers(SpatialClickConfig.from_env())
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from spatial_click.core.constants import POINT_PROVIDER, REGION_PROVIDER
from spatial_click.providers.http import HttpJsonProvider

if TYPE_CHECKING:
    import httpx

    from spatial_click.core.config import SpatialClickConfig

logger = logging.getLogger(__name__)


def build_providers(
    config: SpatialClickConfig,
    *,
    transport: httpx.BaseTransport | None = None,
) -> tuple[HttpJsonProvider, HttpJsonProvider]:
    """Create the ``(point_provider, region_provider)`` pair.

    Args:
        config: Application configuration (URLs and timeout).
        transport: Optional shared ``httpx`` transport for both providers.
    """
    point_provider = HttpJsonProvider(
        POINT_PROVIDER,
        config.point_api_url,
        timeout_s=config.fetch_timeout_s,
        transport=transport,
    )
    region_provider = HttpJsonProvider(
        REGION_PROVIDER,
        config.polygon_api_url,
        timeout_s=config.fetch_timeout_s,
        transport=transport,
    )
    logger.info(
        "Providers configured | points=%s | regions=%s | timeout=%.1fs",
        config.point_api_url,
        config.polygon_api_url,
        config.fetch_timeout_s,
    )
    return point_provider, region_provider
