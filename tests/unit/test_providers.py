"""Tests for feature providers.

Covers: ABC enforcement, HTTP JSON fetching via ``httpx.MockTransport``,
error mapping (status, transport, invalid JSON), the static provider,
and the config-driven factory.
"""

from __future__ import annotations

import unittest

import httpx

from spatial_click.core.config import SpatialClickConfig
from spatial_click.core.constants import POINT_PROVIDER, REGION_PROVIDER
from spatial_click.providers import (
    FeatureProvider,
    HttpJsonProvider,
    ProviderError,
    ProviderFetchError,
    ProviderResponseError,
    ProviderUnavailableError,
    StaticProvider,
    build_providers,
)

URL = "https://example.test/users"


def _provider(handler) -> HttpJsonProvider:  # type: ignore[no-untyped-def]
    return HttpJsonProvider("points", URL, transport=httpx.MockTransport(handler))


# ---------------------------------------------------------------------------
# ABC enforcement
# ---------------------------------------------------------------------------


class TestABCEnforcement(unittest.TestCase):
    """FeatureProvider cannot be instantiated directly."""

    def test_cannot_instantiate_abc(self) -> None:
        with self.assertRaises(TypeError):
            FeatureProvider("x")  # type: ignore[abstract]

    def test_static_provider(self) -> None:
        provider = StaticProvider("regions", [[[0, 0], [1, 0], [1, 1]]])
        assert provider.name == "regions"
        assert provider.fetch() == [[[0, 0], [1, 0], [1, 1]]]


# ---------------------------------------------------------------------------
# HttpJsonProvider
# ---------------------------------------------------------------------------


class TestHttpJsonProvider(unittest.TestCase):
    """JSON fetching over httpx."""

    def test_returns_decoded_json(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[{"name": "Leanne Graham"}])

        payload = _provider(handler).fetch()

        assert payload == [{"name": "Leanne Graham"}]
        assert len(seen) == 1
        assert seen[0].method == "GET"
        assert str(seen[0].url) == URL

    def test_server_error_is_retryable(self) -> None:
        provider = _provider(lambda request: httpx.Response(503))
        with self.assertRaises(ProviderFetchError) as ctx:
            provider.fetch()
        assert ctx.exception.retryable is True
        assert "503" in str(ctx.exception)
        assert isinstance(ctx.exception, ProviderUnavailableError)
        assert ctx.exception.provider == "points"

    def test_client_error_not_retryable(self) -> None:
        provider = _provider(lambda request: httpx.Response(404))
        with self.assertRaises(ProviderFetchError) as ctx:
            provider.fetch()
        assert ctx.exception.retryable is False
        assert ctx.exception.code == "PROVIDER_FETCH_FAILED"
        assert ctx.exception.category == "permanent"

    def test_connection_error_wrapped(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with self.assertRaises(ProviderFetchError) as ctx:
            _provider(handler).fetch()
        assert ctx.exception.retryable is True
        assert isinstance(ctx.exception.__cause__, httpx.ConnectError)
        assert isinstance(ctx.exception, ProviderUnavailableError)
        assert ctx.exception.category == "transient"

    def test_malformed_url_not_retryable(self) -> None:
        provider = HttpJsonProvider("points", "https://exa mple.com/\x00")
        with self.assertRaises(ProviderFetchError) as ctx:
            provider.fetch()
        assert ctx.exception.retryable is False
        assert not isinstance(ctx.exception, ProviderUnavailableError)
        assert isinstance(ctx.exception.__cause__, httpx.InvalidURL)

    def test_invalid_json(self) -> None:
        provider = _provider(lambda request: httpx.Response(200, content=b"<html>oops</html>"))
        with self.assertRaises(ProviderResponseError) as ctx:
            provider.fetch()
        assert ctx.exception.retryable is False
        assert ctx.exception.code == "PROVIDER_RESPONSE_INVALID"

    def test_non_list_json_passed_through(self) -> None:
        """Shape checking belongs to the normalizer, not the provider."""
        provider = _provider(lambda request: httpx.Response(200, json={"error": "quota"}))
        assert provider.fetch() == {"error": "quota"}

    def test_str_includes_provider(self) -> None:
        err = ProviderFetchError("regions", "boom")
        assert str(err) == "[regions] boom"
        assert isinstance(err, ProviderError)


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


class TestBuildProviders(unittest.TestCase):
    """build_providers wires URLs and timeout from config."""

    def test_urls_and_names(self) -> None:
        config = SpatialClickConfig(
            point_api_url="https://p.test/", polygon_api_url="https://r.test/"
        )
        points, regions = build_providers(config)
        assert (points.name, points.url) == (POINT_PROVIDER, "https://p.test/")
        assert (regions.name, regions.url) == (REGION_PROVIDER, "https://r.test/")

    def test_shared_transport(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=[str(request.url)])

        config = SpatialClickConfig(
            point_api_url="https://p.test/", polygon_api_url="https://r.test/"
        )
        points, regions = build_providers(config, transport=httpx.MockTransport(handler))
        assert points.fetch() == ["https://p.test/"]
        assert regions.fetch() == ["https://r.test/"]
