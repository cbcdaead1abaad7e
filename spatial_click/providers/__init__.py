"""Raw feature providers.

- FeatureProvider: Abstract base class defining the interface
- HttpJsonProvider: JSON endpoint fetched with httpx
- StaticProvider: In-memory payload
"""

from spatial_click.providers.base import (
    FeatureProvider,
    ProviderError,
    ProviderFetchError,
    ProviderResponseError,
    ProviderUnavailableError,
    StaticProvider,
)
from spatial_click.providers.factory import build_providers
from spatial_click.providers.http import HttpJsonProvider

__all__ = [
    "FeatureProvider",
    "HttpJsonProvider",
    "ProviderError",
    "ProviderFetchError",
    "ProviderResponseError",
    "ProviderUnavailableError",
    "StaticProvider",
    "build_providers",
]
