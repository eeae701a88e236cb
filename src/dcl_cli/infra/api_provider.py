"""Remote-API implementation of :class:`~dcl_cli.core.protocols.LandProvider`.

Talks to the Decentraland REST API through an injected
``httpx.AsyncClient``.  Every httpx exception is caught here and
re-raised as :class:`~dcl_cli.exceptions.ApiError` — nothing raw
escapes the infrastructure boundary.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from dcl_cli.core.coordinates import Coords
from dcl_cli.core.models import (
    AddressEstate,
    AddressInfo,
    AddressParcel,
    Estate,
    LandMetadata,
)
from dcl_cli.exceptions import ApiError, append_blockchain_suggestion

logger = logging.getLogger(__name__)


class ApiLandProvider:
    """Concrete :class:`LandProvider` backed by the Decentraland API.

    Usage::

        async with httpx.AsyncClient() as client:
            provider = ApiLandProvider("https://api.decentraland.org/v1", client)
            land = await provider.get_land(Coords(-12, 40))
    """

    def __init__(self, base_url: str, client: httpx.AsyncClient) -> None:
        self._base_url: str = base_url.rstrip("/")
        self._client: httpx.AsyncClient = client

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    async def get_land(self, coords: Coords) -> LandMetadata | None:
        data = await self._get(f"/parcels/{coords.x}/{coords.y}")
        if not isinstance(data, dict):
            return None
        meta = _as_dict(data.get("data"))
        return LandMetadata(
            name=_str_or_none(meta.get("name")),
            description=_str_or_none(meta.get("description")),
            owner=_str_or_none(data.get("owner")),
            ipns=_str_or_none(meta.get("ipns")),
            update_operator=_str_or_none(data.get("update_operator")),
        )

    async def get_estate_id_of_parcel(self, coords: Coords) -> int | None:
        data = await self._get(f"/parcels/{coords.x}/{coords.y}")
        if not isinstance(data, dict):
            return None
        return _int_or_none(data.get("estate_id"))

    async def get_estate(self, estate_id: int) -> Estate | None:
        data = await self._get(f"/estates/{estate_id}")
        if not isinstance(data, dict):
            return None
        meta = _as_dict(data.get("data"))
        parcels = tuple(
            Coords(x=int(p["x"]), y=int(p["y"]))
            for p in meta.get("parcels") or []
            if isinstance(p, dict) and "x" in p and "y" in p
        )
        return Estate(
            id=_int_or_none(data.get("id")) or estate_id,
            owner=_str_or_none(data.get("owner")),
            name=_str_or_none(meta.get("name")),
            description=_str_or_none(meta.get("description")),
            parcels=parcels,
        )

    async def get_address_info(self, address: str) -> AddressInfo:
        raw_parcels = await self._get(f"/addresses/{address}/parcels")
        raw_estates = await self._get(f"/addresses/{address}/estates")

        parcels = tuple(
            AddressParcel(
                x=int(p["x"]),
                y=int(p["y"]),
                name=_str_or_none(_as_dict(p.get("data")).get("name")),
                description=_str_or_none(_as_dict(p.get("data")).get("description")),
            )
            for p in raw_parcels or []
            if isinstance(p, dict) and "x" in p and "y" in p
        )
        estates = tuple(
            AddressEstate(
                id=int(e["id"]),
                name=_str_or_none(_as_dict(e.get("data")).get("name")),
                description=_str_or_none(_as_dict(e.get("data")).get("description")),
            )
            for e in raw_estates or []
            if isinstance(e, dict) and _int_or_none(e.get("id")) is not None
        )
        return AddressInfo(parcels=parcels, estates=estates)

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def _get(self, path: str) -> Any:
        """GET *path* and unwrap the ``{"ok": ..., "data": ...}`` envelope.

        Returns ``None`` for 404 responses and ``ok: false`` envelopes.
        """
        url = f"{self._base_url}{path}"
        logger.debug("GET %s", url)
        try:
            response = await self._client.get(url)
            if response.status_code == httpx.codes.NOT_FOUND:
                return None
            response.raise_for_status()
            payload: Any = response.json()
        except httpx.HTTPStatusError as exc:
            raise ApiError(
                f"Decentraland API returned {exc.response.status_code} for {path}",
                hint=append_blockchain_suggestion("Retry in a few minutes."),
            ) from exc
        except httpx.HTTPError as exc:
            raise ApiError(
                f"Could not reach the Decentraland API: {exc}",
                hint=append_blockchain_suggestion("Check your network connection."),
            ) from exc
        except ValueError as exc:
            raise ApiError(
                f"Decentraland API returned invalid JSON for {path}",
            ) from exc

        if not isinstance(payload, dict):
            raise ApiError(f"Unexpected API response shape for {path}")
        if not payload.get("ok", True):
            logger.debug("API error for %s: %s", path, payload.get("error"))
            return None
        return payload.get("data")


# ---------------------------------------------------------------------------
# Utility
# ---------------------------------------------------------------------------

def _as_dict(value: object) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _str_or_none(value: object) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _int_or_none(value: object) -> int | None:
    """Convert *value* to ``int`` or return ``None``."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        return None
