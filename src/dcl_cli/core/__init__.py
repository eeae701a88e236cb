"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No direct network I/O — providers are injected.
* No imports from ``cli`` or ``infra``.
"""

from dcl_cli.core.coordinates import Coords
from dcl_cli.core.land_service import LandService
from dcl_cli.core.models import (
    AddressEstate,
    AddressInfo,
    AddressParcel,
    Estate,
    LandMetadata,
    ParcelMetadata,
)
from dcl_cli.core.protocols import LandProvider, SceneProvider
from dcl_cli.core.targets import TargetType

__all__: list[str] = [
    "AddressEstate",
    "AddressInfo",
    "AddressParcel",
    "Coords",
    "Estate",
    "LandMetadata",
    "LandProvider",
    "LandService",
    "ParcelMetadata",
    "SceneProvider",
    "TargetType",
]
