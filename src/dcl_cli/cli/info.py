"""``dcl info`` — show what is known about a parcel, estate, or address.

Flow: parse → classify → fetch → format → print.  Fetching is delegated
to :class:`~dcl_cli.core.land_service.LandService`; this module only
reads arguments and renders the result.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections import Counter
from collections.abc import Sequence
from typing import Any

from dcl_cli.cli import exit_codes
from dcl_cli.cli.console import escape, out
from dcl_cli.cli.formatting import format_dictionary
from dcl_cli.cli.spinner import Spinner
from dcl_cli.config import NETWORKS, Settings
from dcl_cli.core.coordinates import Coords, get_object, get_string
from dcl_cli.core.models import AddressInfo, Estate, ParcelMetadata
from dcl_cli.core.targets import TargetType, get_target_type, parse_target
from dcl_cli.exceptions import InfoError
from dcl_cli.infra.factory import Services, open_services

logger = logging.getLogger(__name__)

NO_INFORMATION = "No information available"

HELP_EPILOG = """\
examples:

  Get information from the LAND located at "-12, 40"

    $ dcl info -12,40

  Get information from the estate with ID "5" directly from blockchain provider

    $ dcl info 5 --blockchain

  Get information from the address 0x8bed95d830475691c10281f1fea2c0a0fe51304b

    $ dcl info 0x8bed95d830475691c10281f1fea2c0a0fe51304b
"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def add_parser(subparsers: Any) -> argparse.ArgumentParser:
    """Register the ``info`` sub-command on *subparsers*."""
    parser: argparse.ArgumentParser = subparsers.add_parser(
        "info",
        help="Show information about a LAND, an estate, or an address.",
        description="Show information about a LAND, an estate, or an address.",
        epilog=HELP_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "target",
        nargs="*",
        help="Parcel coordinates (x,y), estate ID, or 0x address.",
    )
    parser.add_argument(
        "-b",
        "--blockchain",
        action="store_true",
        help="Retrieve information directly from the blockchain instead of "
        "the Decentraland remote API.",
    )
    parser.add_argument(
        "-n",
        "--network",
        default=None,
        help=f"Choose between {' and '.join(NETWORKS)} (default 'mainnet').",
    )
    return parser


def target_tokens(
    argv: Sequence[str],
    positional: Sequence[str],
    unknown: Sequence[str],
) -> list[str]:
    """Recover the target pieces in the order they were typed.

    argparse reports a leading negative coordinate such as ``-12,40`` as
    an unknown option, separately from the positional pieces; both are
    put back into command-line order here.  Unknown ``--long`` flags
    are ignored.
    """
    remaining = Counter(positional)
    for token in unknown:
        if token.startswith("--"):
            logger.debug("Ignoring unknown option %s", token)
            continue
        remaining[token] += 1

    ordered: list[str] = []
    for token in argv:
        if remaining[token] > 0:
            ordered.append(token)
            remaining[token] -= 1
    return ordered


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def single_line_parcels(parcels: Sequence[Coords]) -> str:
    """Flatten parcel coordinates into ``"x,y; x,y"``."""
    return "; ".join(get_string(coords) for coords in parcels)


def log_parcel(data: ParcelMetadata, estate: Estate | None = None) -> None:
    out.print("\n  Scene Metadata:\n")

    if data.scene:
        out.print(format_dictionary(data.scene, spacing=2, padding=2))
    else:
        out.print(f"[italic]    {NO_INFORMATION}\n[/italic]")

    out.print("  LAND Metadata:\n")

    if data.land:
        out.print(format_dictionary(data.land.to_dict(), spacing=2, padding=2))
    else:
        out.print(f"[italic]    {NO_INFORMATION}\n[/italic]")

    if estate is not None:
        log_estate(estate, estate.id)


def log_estate(estate: Estate | None, estate_id: int) -> None:
    if estate is None:
        out.print(f"[italic]\n  Estate with ID {estate_id} doesn't exist\n[/italic]")
        return

    estate_info = estate.to_dict()
    if estate.is_dissolved:
        out.print(f"[bold]\n  Estate with ID {estate_id} has been dissolved\n[/bold]")
        del estate_info["parcels"]
    else:
        estate_info["parcels"] = single_line_parcels(estate.parcels)

    out.print("  Estate Metadata:\n")
    out.print(format_dictionary(estate_info, spacing=2, padding=2))


def log_address(address: str, info: AddressInfo) -> None:
    address = escape(address)
    if not info:
        out.print(f"[italic]\n  {NO_INFORMATION}\n[/italic]")
        return

    if info.parcels:
        formatted_parcels = {
            f"{parcel.x},{parcel.y}": {
                "name": parcel.name,
                "description": parcel.description,
            }
            for parcel in info.parcels
        }
        out.print(f"\n  LAND owned by {address}:\n")
        out.print(format_dictionary(formatted_parcels, spacing=2, padding=2))

    if info.estates:
        formatted_estates = {
            f"ID {estate.id}": {
                "name": estate.name,
                "description": estate.description,
            }
            for estate in info.estates
        }
        out.print(f"\n  Estates owned by {address}:\n")
        out.print(format_dictionary(formatted_estates, spacing=2, padding=2))


# ---------------------------------------------------------------------------
# Fetch
# ---------------------------------------------------------------------------

async def _info_parcel(services: Services, target: str) -> None:
    coords = get_object(target)
    with Spinner(f"Fetching information for LAND {target}") as spinner:
        _, estate, data = await asyncio.gather(
            services.analytics.info_cmd("coordinates", coords),
            services.land.get_estate_of_parcel(coords),
            services.land.get_parcel_info(coords),
        )
        spinner.succeed(f"Fetched data for LAND [bold]{target}[/bold]")
    log_parcel(data, estate)


async def _info_estate(services: Services, target: str) -> None:
    # Classification already accepted *target* as an ASCII digit string.
    estate_id = int(target, 10)
    with Spinner(f"Fetching information for Estate {target}") as spinner:
        _, estate = await asyncio.gather(
            services.analytics.info_cmd("estate", estate_id),
            services.land.get_estate_info(estate_id),
        )
        spinner.succeed(f"Fetched data for Estate [bold]{target}[/bold]")
    log_estate(estate, estate_id)


async def _info_address(services: Services, target: str) -> None:
    shown = escape(target)
    with Spinner(f"Fetching information for address {shown}") as spinner:
        _, info = await asyncio.gather(
            services.analytics.info_cmd("address", target),
            services.land.get_address_info(target),
        )
        spinner.succeed(f"Fetched data for address [bold]{shown}[/bold]")
    log_address(target, info)


_HANDLERS = {
    TargetType.PARCEL: _info_parcel,
    TargetType.ESTATE: _info_estate,
    TargetType.ADDRESS: _info_address,
}


async def _run(
    settings: Settings,
    target: str,
    target_type: TargetType,
    *,
    network: str | None,
    blockchain: bool,
) -> None:
    async with open_services(settings, network=network, blockchain=blockchain) as services:
        logger.debug(
            "Querying %s %s on %s via %s",
            target_type.value,
            target,
            services.network.name,
            "blockchain" if blockchain else "API",
        )
        await _HANDLERS[target_type](services, target)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def run_info(
    args: argparse.Namespace,
    unknown: Sequence[str],
    argv: Sequence[str],
    settings: Settings,
) -> int:
    """Execute ``dcl info``.

    Raises
    ------
    InfoError
        If the target is missing or cannot be classified.
    """
    tokens = target_tokens(argv, args.target, unknown)
    if not tokens:
        raise InfoError("Please provide a target to retrieve data")

    target = parse_target(tokens)
    logger.debug("Parsed target: %s", target)
    target_type = get_target_type(target)

    if target_type is None:
        raise InfoError(
            f"Invalid target \"{target}\"",
            hint="Use parcel coordinates (x,y), an estate ID, or a 0x address.",
        )

    asyncio.run(
        _run(
            settings,
            target,
            target_type,
            network=args.network,
            blockchain=args.blockchain,
        )
    )
    return exit_codes.SUCCESS
