"""HTTP JSON provider.

Fetches a provider endpoint with ``httpx`` and decodes the JSON body.
One GET per ``fetch()``; no retries or backoff. The request timeout comes
from ``SpatialClickConfig.fetch_timeout_s``.
"""

from __future__ import annotations

import logging

import httpx

from spatial_click.core.constants import DEFAULT_FETCH_TIMEOUT_S
from spatial_click.providers.base import (
    FeatureProvider,
    ProviderFetchError,
    ProviderResponseError,
    ProviderUnavailableError,
)

logger = logging.getLogger(__name__)


class HttpJsonProvider(FeatureProvider):
    """Provider backed by a JSON HTTP endpoint.

    Args:
        name: Provider name used in logs and errors.
        url: Endpoint returning a JSON array.
        timeout_s: Request timeout in seconds.
        transport: Optional ``httpx`` transport (e.g. ``httpx.MockTransport``).
    """

    def __init__(
        self,
        name: str,
        url: str,
        *,
        timeout_s: float = DEFAULT_FETCH_TIMEOUT_S,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(name)
        self._url = url
        self._timeout_s = timeout_s
        self._transport = transport

    @property
    def url(self) -> str:
        """Return the endpoint URL."""
        return self._url

    def fetch(self) -> object:
        """GET the endpoint and decode its JSON body.

        Raises:
            ProviderUnavailableError: On connection errors, timeouts, or a
                5xx status.
            ProviderFetchError: On a 4xx status or a malformed URL.
            ProviderResponseError: If the body is not valid JSON.
        """
        try:
            with httpx.Client(
                timeout=self._timeout_s,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = client.get(self._url)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            msg = f"GET {self._url} returned HTTP {status}"
            if status >= 500:
                raise ProviderUnavailableError(self.name, msg) from exc
            raise ProviderFetchError(self.name, msg) from exc
        except httpx.InvalidURL as exc:
            msg = f"GET {self._url!r} rejected: {exc}"
            raise ProviderFetchError(self.name, msg) from exc
        except httpx.HTTPError as exc:
            msg = f"GET {self._url} failed: {exc}"
            raise ProviderUnavailableError(self.name, msg) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            msg = f"Response from {self._url} is not valid JSON: {exc}"
            raise ProviderResponseError(self.name, msg) from exc

        logger.info(
            "Provider fetched | provider=%s | url=%s | bytes=%d",
            self.name,
            self._url,
            len(response.content),
        )
        return payload
