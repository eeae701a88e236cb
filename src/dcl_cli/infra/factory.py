"""Wiring of concrete providers into a :class:`LandService`.

The HTTP client is shared by every provider of one command run and is
closed when the context exits.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import httpx

from dcl_cli.config import NetworkConfig, Settings
from dcl_cli.core.land_service import LandService
from dcl_cli.core.protocols import LandProvider
from dcl_cli.infra.analytics import AnalyticsClient
from dcl_cli.infra.api_provider import ApiLandProvider
from dcl_cli.infra.content_client import ContentSceneProvider
from dcl_cli.version import __version__


@dataclass(frozen=True, slots=True)
class Services:
    """Everything a command needs for one run."""

    land: LandService
    analytics: AnalyticsClient
    network: NetworkConfig


def build_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` with the CLI's defaults."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers={
            "User-Agent": f"dcl-cli/{__version__}",
            "Accept": "application/json",
        },
    )


def build_land_provider(
    network: NetworkConfig,
    client: httpx.AsyncClient,
    *,
    blockchain: bool,
    timeout: float,
) -> LandProvider:
    """Pick the remote-API or blockchain provider."""
    if blockchain:
        from dcl_cli.infra.blockchain_provider import BlockchainLandProvider

        return BlockchainLandProvider(
            network.rpc_url,
            network.land_registry,
            network.estate_registry,
            timeout=timeout,
        )
    return ApiLandProvider(network.api_url, client)


@asynccontextmanager
async def open_services(
    settings: Settings,
    *,
    network: str | None = None,
    blockchain: bool = False,
) -> AsyncIterator[Services]:
    """Yield wired services for *network*, closing the HTTP client afterwards.

    Raises
    ------
    ConfigError
        If *network* is unknown.
    """
    network_config = settings.for_network(network)
    async with build_http_client(settings) as client:
        land_provider = build_land_provider(
            network_config,
            client,
            blockchain=blockchain,
            timeout=settings.http_timeout_seconds,
        )
        yield Services(
            land=LandService(
                land_provider,
                ContentSceneProvider(network_config.content_url, client),
            ),
            analytics=AnalyticsClient(
                client,
                url=str(settings.analytics_url) if settings.analytics_url else None,
                enabled=settings.analytics_enabled,
            ),
            network=network_config,
        )
