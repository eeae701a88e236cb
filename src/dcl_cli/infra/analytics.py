"""Usage analytics for CLI commands.

Events are always logged at DEBUG.  When analytics is enabled and an
endpoint is configured they are also POSTed as JSON.  Delivery is best
effort: a failed send is logged and never fails the command.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from dcl_cli.core.coordinates import Coords
from dcl_cli.version import __version__

logger = logging.getLogger(__name__)


class AnalyticsClient:
    """Sends command events to an HTTP collector."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        url: str | None = None,
        enabled: bool = True,
    ) -> None:
        self._client: httpx.AsyncClient = client
        self._url: str | None = url
        self._enabled: bool = enabled and bool(url)

    @staticmethod
    def build_info_event(kind: str, target: Coords | int | str) -> dict[str, Any]:
        """Build the payload for an ``info`` query.

        Coordinates are sent as ``{"x": .., "y": ..}``; estate IDs and
        addresses are sent as-is.
        """
        if isinstance(target, Coords):
            target_value: Any = {"x": target.x, "y": target.y}
        else:
            target_value = target
        return {
            "event": "info",
            "properties": {"type": kind, "target": target_value},
            "context": {"version": __version__},
        }

    async def info_cmd(self, kind: str, target: Coords | int | str) -> None:
        """Record an ``info`` command query."""
        await self.track(self.build_info_event(kind, target))

    async def track(self, event: dict[str, Any]) -> None:
        logger.debug("Analytics event: %s", event)
        if not self._enabled or self._url is None:
            return
        try:
            response = await self._client.post(self._url, json=event)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Could not send analytics event: %s", exc)
