"""Catalyst content-server client implementing ``SceneProvider``."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from dcl_cli.core.coordinates import Coords, get_string
from dcl_cli.exceptions import ApiError

logger = logging.getLogger(__name__)


class ContentSceneProvider:
    """Looks up the scene entity currently deployed on a parcel."""

    def __init__(self, content_url: str, client: httpx.AsyncClient) -> None:
        self._content_url: str = content_url.rstrip("/")
        self._client: httpx.AsyncClient = client

    async def get_scene(self, coords: Coords) -> dict[str, Any] | None:
        """Return the ``metadata`` of the active scene entity, or ``None``.

        Raises
        ------
        ApiError
            When the content server cannot be reached or errors out.
        """
        url = f"{self._content_url}/entities/active"
        pointer = get_string(coords)
        logger.debug("POST %s pointers=%s", url, pointer)
        try:
            response = await self._client.post(url, json={"pointers": [pointer]})
            response.raise_for_status()
            entities: Any = response.json()
        except httpx.HTTPStatusError as exc:
            raise ApiError(
                f"Content server returned {exc.response.status_code} for {pointer}",
            ) from exc
        except httpx.HTTPError as exc:
            raise ApiError(
                f"Could not reach the content server: {exc}",
                hint="Check your network connection.",
            ) from exc
        except ValueError as exc:
            raise ApiError("Content server returned invalid JSON") from exc

        if not isinstance(entities, list):
            return None
        for entity in entities:
            if isinstance(entity, dict) and isinstance(entity.get("metadata"), dict):
                return dict(entity["metadata"])
        return None
