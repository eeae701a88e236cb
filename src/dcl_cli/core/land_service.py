"""Core land service — the client the ``info`` command talks to.

The service combines a :class:`~dcl_cli.core.protocols.LandProvider`
(remote API or blockchain) with a
:class:`~dcl_cli.core.protocols.SceneProvider` injected at construction
time, keeping the core free of any external-system imports.

Guarantees
----------
* Pure orchestration — no ``print()``, no filesystem access.
* Only :class:`~dcl_cli.exceptions.DclError` subclasses escape.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from typing import TypeVar

from dcl_cli.core.coordinates import Coords
from dcl_cli.core.models import AddressInfo, Estate, ParcelMetadata
from dcl_cli.core.protocols import LandProvider, SceneProvider
from dcl_cli.exceptions import DclError, LandQueryError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LandService:
    """Stateless facade over the land and scene providers.

    Parameters
    ----------
    land_provider:
        Any object satisfying the :class:`LandProvider` protocol.
    scene_provider:
        Any object satisfying the :class:`SceneProvider` protocol.
    """

    def __init__(
        self,
        land_provider: LandProvider,
        scene_provider: SceneProvider,
    ) -> None:
        self._land: LandProvider = land_provider
        self._scenes: SceneProvider = scene_provider

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def get_parcel_info(self, coords: Coords) -> ParcelMetadata:
        """Fetch the deployed scene and the registry data of a parcel."""
        scene, land = await asyncio.gather(
            self._call(self._scenes.get_scene(coords)),
            self._call(self._land.get_land(coords)),
        )
        return ParcelMetadata(scene=scene, land=land)

    async def get_estate_of_parcel(self, coords: Coords) -> Estate | None:
        """Return the estate the parcel belongs to, or ``None``."""
        estate_id = await self._call(self._land.get_estate_id_of_parcel(coords))
        if not estate_id:
            return None
        logger.debug("Parcel %s belongs to estate %s", coords, estate_id)
        return await self.get_estate_info(estate_id)

    async def get_estate_info(self, estate_id: int) -> Estate | None:
        """Return the estate with *estate_id*, or ``None`` if missing."""
        return await self._call(self._land.get_estate(estate_id))

    async def get_address_info(self, address: str) -> AddressInfo:
        """Return the holdings of *address*."""
        return await self._call(self._land.get_address_info(address))

    # ------------------------------------------------------------------
    # Provider delegation (safe boundary)
    # ------------------------------------------------------------------

    @staticmethod
    async def _call(awaitable: Awaitable[T]) -> T:
        """Await a provider call and ensure only our exceptions escape."""
        try:
            return await awaitable
        except DclError:
            # Already one of ours — let it propagate unchanged.
            raise
        except Exception as exc:
            raise LandQueryError(
                f"Unexpected provider error: {exc}",
            ) from exc
