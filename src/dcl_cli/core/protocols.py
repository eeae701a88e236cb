"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Any, Protocol

from dcl_cli.core.coordinates import Coords
from dcl_cli.core.models import AddressInfo, Estate, LandMetadata


class LandProvider(Protocol):
    """Contract for LAND data backends (remote API or blockchain).

    Implementations must map all backend-specific exceptions to
    :class:`~dcl_cli.exceptions.DclError` subclasses.
    """

    async def get_land(self, coords: Coords) -> LandMetadata | None:
        """Return registry metadata for the parcel, or ``None`` if unknown."""
        ...  # pragma: no cover

    async def get_estate_id_of_parcel(self, coords: Coords) -> int | None:
        """Return the ID of the estate holding the parcel, if any."""
        ...  # pragma: no cover

    async def get_estate(self, estate_id: int) -> Estate | None:
        """Return the estate, or ``None`` if it does not exist.

        A dissolved estate is returned with an empty ``parcels`` tuple.
        """
        ...  # pragma: no cover

    async def get_address_info(self, address: str) -> AddressInfo:
        """Return the parcels and estates owned by *address*."""
        ...  # pragma: no cover


class SceneProvider(Protocol):
    """Contract for scene lookups against a content server."""

    async def get_scene(self, coords: Coords) -> dict[str, Any] | None:
        """Return the ``scene.json`` deployed on the parcel, or ``None``."""
        ...  # pragma: no cover
