"""FeatureProvider abstract base class.

A provider returns the raw, decoded JSON payload for one feature kind:
the point records or the region rings. Providers do no normalization;
they only move bytes and decode them. The loader interacts exclusively
with this interface and never knows which transport is behind it.
"""

from __future__ import annotations

import abc

from spatial_click.core.exceptions import SpatialClickError, TransientError


class FeatureProvider(abc.ABC):
    """Abstract base class for raw feature sources.

    Attributes:
        name: Provider name used in logs and errors (e.g. ``"points"``).
    """

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        """Return the provider name."""
        return self._name

    @abc.abstractmethod
    def fetch(self) -> object:
        """Retrieve and decode the provider payload.

        Returns:
            The decoded JSON document (normally a list).

        Raises:
            ProviderError: If the payload cannot be retrieved or decoded.
        """


class StaticProvider(FeatureProvider):
    """Provider serving an in-memory payload (offline demos, fixtures)."""

    def __init__(self, name: str, payload: object) -> None:
        super().__init__(name)
        self._payload = payload

    def fetch(self) -> object:
        return self._payload


# ---------------------------------------------------------------------------
# Provider exceptions
# ---------------------------------------------------------------------------


class ProviderError(SpatialClickError):
    """Base exception for provider errors.

    Attributes:
        provider: Name of the provider that raised the error.
        message: Human-readable error description.
        retryable: Whether the caller could retry the fetch.
    """

    default_stage = "fetch"
    default_code = "PROVIDER_ERROR"

    def __init__(
        self,
        provider: str,
        message: str,
        *,
        retryable: bool = False,
    ) -> None:
        self.provider = provider
        super().__init__(
            message,
            retryable=retryable,
            code=self.default_code,
            stage=self.default_stage,
        )

    def __str__(self) -> str:
        return f"[{self.provider}] {self.message}"


class ProviderFetchError(ProviderError):
    """The provider was unreachable or answered with an error status."""

    default_code = "PROVIDER_FETCH_FAILED"


class ProviderUnavailableError(ProviderFetchError, TransientError):
    """The provider could not be reached or answered 5xx. Always retryable."""

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(provider, message, retryable=True)


class ProviderResponseError(ProviderError):
    """The provider answered, but the body is not valid JSON."""

    default_code = "PROVIDER_RESPONSE_INVALID"

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(provider, message, retryable=False)
