"""Tests for provider wiring (infra/factory.py)."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from dcl_cli.config import Settings
from dcl_cli.exceptions import ConfigError
from dcl_cli.infra.api_provider import ApiLandProvider
from dcl_cli.infra.blockchain_provider import BlockchainLandProvider
from dcl_cli.infra.factory import Services, build_http_client, open_services


def _open(**kwargs: Any) -> Services:
    async def go() -> Services:
        async with open_services(Settings(), **kwargs) as services:
            return services

    return asyncio.run(go())


class TestOpenServices:
    def test_api_provider_by_default(self) -> None:
        services = _open()
        assert isinstance(services.land._land, ApiLandProvider)
        assert services.network.name == "mainnet"

    def test_blockchain_provider_on_request(self) -> None:
        services = _open(blockchain=True, network="sepolia")
        assert isinstance(services.land._land, BlockchainLandProvider)
        assert services.network.name == "sepolia"

    def test_analytics_url_passed_as_string(self) -> None:
        async def go() -> Services:
            settings = Settings(analytics_url="https://collector.example.org/track")
            async with open_services(settings) as services:
                return services

        services = asyncio.run(go())
        assert services.analytics._url == "https://collector.example.org/track"

    def test_unknown_network(self) -> None:
        with pytest.raises(ConfigError):
            _open(network="ropsten")


class TestHttpClient:
    def test_defaults(self) -> None:
        client = build_http_client(Settings(http_timeout_seconds=5))
        try:
            assert client.timeout.read == 5
            assert client.headers["User-Agent"].startswith("dcl-cli/")
        finally:
            asyncio.run(client.aclose())
