"""Tests for LandService (core/land_service.py).

Both provider dependencies are **mocked** — no internet access.  These
tests verify:

* Delegation to the land and scene providers
* Estate lookup for a parcel (including "no estate")
* Exception mapping (provider errors → our hierarchy)
"""

from __future__ import annotations

import asyncio
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from dcl_cli.core.coordinates import Coords
from dcl_cli.core.land_service import LandService
from dcl_cli.core.models import AddressInfo, AddressParcel, Estate, LandMetadata
from dcl_cli.exceptions import ApiError, LandQueryError


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _land() -> LandMetadata:
    return LandMetadata(name="Plaza", description="Center", owner="0xabc")


def _estate(**overrides: Any) -> Estate:
    defaults: dict[str, Any] = {
        "id": 5,
        "owner": "0xabc",
        "name": "Castle",
        "description": None,
        "parcels": (Coords(1, 2),),
    }
    defaults.update(overrides)
    return Estate(**defaults)


def _fake_land_provider(**methods: Any) -> MagicMock:
    """Return a mock LandProvider.

    Each keyword is a method name mapped to its return value, or to an
    exception to raise.
    """
    provider = MagicMock()
    for name, result in methods.items():
        if isinstance(result, Exception):
            setattr(provider, name, AsyncMock(side_effect=result))
        else:
            setattr(provider, name, AsyncMock(return_value=result))
    return provider


def _fake_scene_provider(scene: dict[str, Any] | None | Exception = None) -> MagicMock:
    provider = MagicMock()
    if isinstance(scene, Exception):
        provider.get_scene = AsyncMock(side_effect=scene)
    else:
        provider.get_scene = AsyncMock(return_value=scene)
    return provider


# ---------------------------------------------------------------------------
# get_parcel_info
# ---------------------------------------------------------------------------

class TestGetParcelInfo:
    def test_combines_scene_and_land(self) -> None:
        scene = {"display": {"title": "My scene"}}
        svc = LandService(
            _fake_land_provider(get_land=_land()),
            _fake_scene_provider(scene),
        )
        info = asyncio.run(svc.get_parcel_info(Coords(-12, 40)))
        assert info.scene == scene
        assert info.land == _land()

    def test_missing_scene_and_land(self) -> None:
        svc = LandService(
            _fake_land_provider(get_land=None),
            _fake_scene_provider(None),
        )
        info = asyncio.run(svc.get_parcel_info(Coords(0, 0)))
        assert info.scene is None
        assert info.land is None

    def test_providers_receive_coords(self) -> None:
        land_provider = _fake_land_provider(get_land=None)
        scene_provider = _fake_scene_provider(None)
        svc = LandService(land_provider, scene_provider)
        asyncio.run(svc.get_parcel_info(Coords(3, 4)))
        land_provider.get_land.assert_awaited_once_with(Coords(3, 4))
        scene_provider.get_scene.assert_awaited_once_with(Coords(3, 4))


# ---------------------------------------------------------------------------
# get_estate_of_parcel / get_estate_info
# ---------------------------------------------------------------------------

class TestEstates:
    def test_parcel_in_estate(self) -> None:
        provider = _fake_land_provider(
            get_estate_id_of_parcel=5,
            get_estate=_estate(),
        )
        svc = LandService(provider, _fake_scene_provider())
        estate = asyncio.run(svc.get_estate_of_parcel(Coords(1, 2)))
        assert estate == _estate()
        provider.get_estate.assert_awaited_once_with(5)

    @pytest.mark.parametrize("estate_id", [None, 0])
    def test_parcel_without_estate(self, estate_id: int | None) -> None:
        provider = _fake_land_provider(
            get_estate_id_of_parcel=estate_id,
            get_estate=_estate(),
        )
        svc = LandService(provider, _fake_scene_provider())
        assert asyncio.run(svc.get_estate_of_parcel(Coords(1, 2))) is None
        provider.get_estate.assert_not_awaited()

    def test_missing_estate(self) -> None:
        svc = LandService(_fake_land_provider(get_estate=None), _fake_scene_provider())
        assert asyncio.run(svc.get_estate_info(99)) is None


# ---------------------------------------------------------------------------
# get_address_info
# ---------------------------------------------------------------------------

class TestAddressInfo:
    def test_delegates(self) -> None:
        info = AddressInfo(parcels=(AddressParcel(x=1, y=2),))
        provider = _fake_land_provider(get_address_info=info)
        svc = LandService(provider, _fake_scene_provider())
        assert asyncio.run(svc.get_address_info("0xabc")) == info
        provider.get_address_info.assert_awaited_once_with("0xabc")


# ---------------------------------------------------------------------------
# Exception mapping
# ---------------------------------------------------------------------------

class TestExceptions:
    def test_dcl_error_propagates(self) -> None:
        svc = LandService(
            _fake_land_provider(get_estate=ApiError("down")),
            _fake_scene_provider(),
        )
        with pytest.raises(ApiError, match="down"):
            asyncio.run(svc.get_estate_info(1))

    def test_unexpected_error_wrapped(self) -> None:
        svc = LandService(
            _fake_land_provider(get_address_info=RuntimeError("boom")),
            _fake_scene_provider(),
        )
        with pytest.raises(LandQueryError, match="Unexpected provider error"):
            asyncio.run(svc.get_address_info("0xabc"))

    def test_scene_failure_wrapped(self) -> None:
        svc = LandService(
            _fake_land_provider(get_land=_land()),
            _fake_scene_provider(ValueError("bad json")),
        )
        with pytest.raises(LandQueryError):
            asyncio.run(svc.get_parcel_info(Coords(0, 0)))
