"""Codec for the metadata strings stored in the LAND and Estate registries.

Version ``0`` is the only format in use::

    0,"Name","Description","ipns:..."

Fields are CSV-quoted; a literal double quote is written as ``""``.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass

from dcl_cli.exceptions import LandDataError

CURRENT_VERSION: int = 0


@dataclass(frozen=True, slots=True)
class LandData:
    """Decoded registry metadata.  Empty fields become ``None``."""

    version: int
    name: str | None = None
    description: str | None = None
    ipns: str | None = None


def decode_land_data(data: str | None) -> LandData:
    """Decode a registry metadata string.

    Raises
    ------
    LandDataError
        If the version prefix is not understood.
    """
    if not data:
        return LandData(version=CURRENT_VERSION)

    version = data[0]
    if version != "0":
        raise LandDataError(
            f"Unknown version when trying to decode land data: {data}",
        )

    rows = list(csv.reader([data], skipinitialspace=True))
    fields = rows[0] if rows else []
    # Pad so short strings like "0,name" still unpack.
    _, name, description, ipns = (fields + ["", "", "", ""])[:4]
    return LandData(
        version=CURRENT_VERSION,
        name=name or None,
        description=description or None,
        ipns=ipns or None,
    )


def _quote(value: str | None) -> str:
    return '"' + (value or "").replace('"', '""') + '"'


def encode_land_data(land_data: LandData) -> str:
    """Encode *land_data* back into the registry string format."""
    if land_data.version != CURRENT_VERSION:
        raise LandDataError(
            f"Unknown version when trying to encode land data: {land_data.version}",
        )
    return ",".join(
        (
            str(CURRENT_VERSION),
            _quote(land_data.name),
            _quote(land_data.description),
            _quote(land_data.ipns),
        )
    )
