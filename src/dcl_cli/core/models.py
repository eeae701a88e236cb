"""Domain models for dcl-cli.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and a ``to_dict`` view used for display.
They carry zero I/O and zero dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from dcl_cli.core.coordinates import Coords


# ---------------------------------------------------------------------------
# Parcel
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class LandMetadata:
    """Registry metadata for a single LAND parcel."""

    name: str | None
    description: str | None
    owner: str | None
    ipns: str | None = None
    update_operator: str | None = None
    """Address allowed to deploy on the parcel on behalf of the owner."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "owner": self.owner,
            "ipns": self.ipns,
            "update_operator": self.update_operator,
        }


@dataclass(frozen=True, slots=True)
class ParcelMetadata:
    """Everything known about a parcel: deployed scene plus registry data."""

    scene: dict[str, Any] | None
    """Raw ``scene.json`` of the entity deployed on the parcel."""

    land: LandMetadata | None


# ---------------------------------------------------------------------------
# Estate
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Estate:
    """A named group of parcels."""

    id: int
    owner: str | None
    name: str | None
    description: str | None
    parcels: tuple[Coords, ...] = field(default_factory=tuple)

    @property
    def is_dissolved(self) -> bool:
        """An estate with no parcels left has been dissolved."""
        return len(self.parcels) == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "owner": self.owner,
            "name": self.name,
            "description": self.description,
            "parcels": list(self.parcels),
        }


# ---------------------------------------------------------------------------
# Address holdings
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class AddressParcel:
    x: int
    y: int
    name: str | None = None
    description: str | None = None


@dataclass(frozen=True, slots=True)
class AddressEstate:
    id: int
    name: str | None = None
    description: str | None = None


@dataclass(frozen=True, slots=True)
class AddressInfo:
    """Parcels and estates held by one wallet address."""

    parcels: tuple[AddressParcel, ...] = ()
    estates: tuple[AddressEstate, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.parcels) or bool(self.estates)
