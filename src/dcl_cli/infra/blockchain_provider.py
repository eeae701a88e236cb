"""Blockchain implementation of :class:`~dcl_cli.core.protocols.LandProvider`.

Reads the ``LANDRegistry`` and ``EstateRegistry`` contracts through
``web3``'s :class:`~web3.AsyncWeb3` over an HTTP JSON-RPC provider.
This module is the **only** place in the codebase that imports
``web3``.  All web3 exceptions are caught here and re-raised as
:class:`~dcl_cli.exceptions.BlockchainError`.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from dcl_cli.core.coordinates import Coords
from dcl_cli.core.land_data import decode_land_data
from dcl_cli.core.models import (
    AddressEstate,
    AddressInfo,
    AddressParcel,
    Estate,
    LandMetadata,
)
from dcl_cli.exceptions import BlockchainError, DclError, EnvironmentError

logger = logging.getLogger(__name__)

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


def _fn(name: str, inputs: list[tuple[str, str]], outputs: list[str]) -> dict[str, Any]:
    """Build a ``view`` function ABI entry."""
    return {
        "type": "function",
        "name": name,
        "stateMutability": "view",
        "inputs": [{"name": n, "type": t} for n, t in inputs],
        "outputs": [{"name": "", "type": t} for t in outputs],
    }


LAND_REGISTRY_ABI: list[dict[str, Any]] = [
    _fn("encodeTokenId", [("x", "int256"), ("y", "int256")], ["uint256"]),
    _fn("decodeTokenId", [("value", "uint256")], ["int256", "int256"]),
    _fn("ownerOf", [("assetId", "uint256")], ["address"]),
    _fn("landData", [("x", "int256"), ("y", "int256")], ["string"]),
    _fn("updateOperator", [("assetId", "uint256")], ["address"]),
    _fn("landOf", [("owner", "address")], ["int256[]", "int256[]"]),
]

ESTATE_REGISTRY_ABI: list[dict[str, Any]] = [
    _fn("getLandEstateId", [("landId", "uint256")], ["uint256"]),
    _fn("ownerOf", [("tokenId", "uint256")], ["address"]),
    _fn("getMetadata", [("estateId", "uint256")], ["string"]),
    _fn("getEstateSize", [("estateId", "uint256")], ["uint256"]),
    _fn("estateLandIds", [("estateId", "uint256"), ("index", "uint256")], ["uint256"]),
    _fn("balanceOf", [("owner", "address")], ["uint256"]),
    _fn("tokenOfOwnerByIndex", [("owner", "address"), ("index", "uint256")], ["uint256"]),
]


def _import_web3() -> Any:
    """Import web3 lazily so API-only invocations never pay for it."""
    try:
        import web3
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "web3 is not installed. Install with: pip install web3",
        ) from exc
    return web3


class BlockchainLandProvider:
    """Concrete :class:`LandProvider` reading the registries on-chain.

    Parameters
    ----------
    rpc_url:
        HTTP JSON-RPC endpoint of an Ethereum node.
    land_registry, estate_registry:
        Contract addresses for the selected network.
    timeout:
        Per-request timeout in seconds.
    w3:
        Pre-built ``AsyncWeb3`` instance (tests inject a fake).
    """

    def __init__(
        self,
        rpc_url: str,
        land_registry: str,
        estate_registry: str,
        *,
        timeout: float = 20.0,
        w3: Any | None = None,
    ) -> None:
        web3 = _import_web3()
        if w3 is None:
            w3 = web3.AsyncWeb3(
                web3.AsyncWeb3.AsyncHTTPProvider(
                    rpc_url,
                    request_kwargs={"timeout": timeout},
                )
            )
        self._w3: Any = w3
        self._land: Any = w3.eth.contract(
            address=web3.Web3.to_checksum_address(land_registry),
            abi=LAND_REGISTRY_ABI,
        )
        self._estate: Any = w3.eth.contract(
            address=web3.Web3.to_checksum_address(estate_registry),
            abi=ESTATE_REGISTRY_ABI,
        )
        self._to_checksum = web3.Web3.to_checksum_address

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    async def get_land(self, coords: Coords) -> LandMetadata | None:
        token_id = await self._call(self._land.functions.encodeTokenId(coords.x, coords.y))
        owner, raw_data, operator = await asyncio.gather(
            self._owner_of(self._land, token_id),
            self._call(self._land.functions.landData(coords.x, coords.y)),
            self._call(self._land.functions.updateOperator(token_id)),
        )
        if owner is None:
            return None
        land_data = decode_land_data(raw_data)
        return LandMetadata(
            name=land_data.name,
            description=land_data.description,
            owner=owner,
            ipns=land_data.ipns,
            update_operator=None if _is_zero(operator) else str(operator),
        )

    async def get_estate_id_of_parcel(self, coords: Coords) -> int | None:
        token_id = await self._call(self._land.functions.encodeTokenId(coords.x, coords.y))
        estate_id = await self._call(self._estate.functions.getLandEstateId(token_id))
        return int(estate_id) or None

    async def get_estate(self, estate_id: int) -> Estate | None:
        owner = await self._owner_of(self._estate, estate_id)
        if owner is None:
            return None

        raw_data, size = await asyncio.gather(
            self._call(self._estate.functions.getMetadata(estate_id)),
            self._call(self._estate.functions.getEstateSize(estate_id)),
        )
        land_ids = await asyncio.gather(
            *(
                self._call(self._estate.functions.estateLandIds(estate_id, index))
                for index in range(int(size))
            )
        )
        parcels = await asyncio.gather(*(self._decode_token_id(land_id) for land_id in land_ids))

        land_data = decode_land_data(raw_data)
        return Estate(
            id=estate_id,
            owner=owner,
            name=land_data.name,
            description=land_data.description,
            parcels=tuple(parcels),
        )

    async def get_address_info(self, address: str) -> AddressInfo:
        owner = self._checksum(address)
        (xs, ys), balance = await asyncio.gather(
            self._call(self._land.functions.landOf(owner)),
            self._call(self._estate.functions.balanceOf(owner)),
        )

        raw_land_data = await asyncio.gather(
            *(self._call(self._land.functions.landData(x, y)) for x, y in zip(xs, ys))
        )
        parcels = []
        for x, y, raw in zip(xs, ys, raw_land_data):
            land_data = decode_land_data(raw)
            parcels.append(
                AddressParcel(
                    x=int(x),
                    y=int(y),
                    name=land_data.name,
                    description=land_data.description,
                )
            )

        estate_ids = await asyncio.gather(
            *(
                self._call(self._estate.functions.tokenOfOwnerByIndex(owner, index))
                for index in range(int(balance))
            )
        )
        raw_estate_data = await asyncio.gather(
            *(self._call(self._estate.functions.getMetadata(estate_id)) for estate_id in estate_ids)
        )
        estates = []
        for estate_id, raw in zip(estate_ids, raw_estate_data):
            land_data = decode_land_data(raw)
            estates.append(
                AddressEstate(
                    id=int(estate_id),
                    name=land_data.name,
                    description=land_data.description,
                )
            )

        return AddressInfo(parcels=tuple(parcels), estates=tuple(estates))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _decode_token_id(self, land_id: int) -> Coords:
        x, y = await self._call(self._land.functions.decodeTokenId(land_id))
        return Coords(x=int(x), y=int(y))

    async def _owner_of(self, contract: Any, token_id: int) -> str | None:
        """Return the token owner, or ``None`` for unminted tokens.

        ERC-721 ``ownerOf`` reverts for unknown tokens on some registries
        and returns the zero address on others; both mean "no owner".
        """
        from web3.exceptions import ContractLogicError

        try:
            owner = await contract.functions.ownerOf(token_id).call()
        except ContractLogicError:
            return None
        except Exception as exc:
            raise _blockchain_error(exc) from exc
        return None if _is_zero(owner) else str(owner)

    def _checksum(self, address: str) -> str:
        try:
            return str(self._to_checksum(address))
        except (TypeError, ValueError) as exc:
            raise BlockchainError(
                f"Invalid address \"{address}\"",
                hint="Addresses are 0x followed by 40 hexadecimal characters.",
            ) from exc

    @staticmethod
    async def _call(fn: Any) -> Any:
        """Run a contract ``view`` call and map failures to our hierarchy."""
        try:
            return await fn.call()
        except DclError:
            raise
        except Exception as exc:
            raise _blockchain_error(exc) from exc


def _blockchain_error(exc: Exception) -> BlockchainError:
    """Translate a web3/transport exception into a domain exception."""
    return BlockchainError(
        f"Blockchain query failed: {exc}",
        hint="Check the RPC endpoint (DCL_MAINNET_RPC_URL / DCL_SEPOLIA_RPC_URL).",
    )


def _is_zero(address: object) -> bool:
    return address is None or str(address).lower() == ZERO_ADDRESS
