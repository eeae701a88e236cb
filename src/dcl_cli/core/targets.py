"""Target parsing and classification for the ``info`` command.

A target is one of:

* a parcel — ``"x,y"`` inside Genesis City,
* an estate — a positive base-10 integer,
* an address — any string starting with ``0x``.

The checks run in that order, so classification is total and mutually
exclusive: every string gets at most one :class:`TargetType`.
"""

from __future__ import annotations

import enum
import re
from collections.abc import Sequence

from dcl_cli.core.coordinates import is_valid

_AROUND_COMMA_RE = re.compile(r"\s*,\s*")


class TargetType(str, enum.Enum):
    PARCEL = "parcel"
    ESTATE = "estate"
    ADDRESS = "address"


def parse_target(tokens: Sequence[str]) -> str:
    """Join leftover positional tokens into a single target string.

    Shells split ``-12, 40`` into two words and argparse hands back
    ``-12,40`` as an unknown option, so the pieces are re-joined here
    and whitespace around the comma is dropped.
    """
    joined = " ".join(token.strip() for token in tokens if token.strip())
    return _AROUND_COMMA_RE.sub(",", joined)


def parse_estate_id(value: str) -> int | None:
    """Return the estate ID for *value*, or ``None`` if it is not one.

    The whole string must be a positive base-10 integer; trailing text
    such as ``"5abc"`` is rejected rather than truncated to ``5``.
    """
    stripped = value.strip()
    if not stripped.isdigit() or not stripped.isascii():
        return None
    estate_id = int(stripped, 10)
    return estate_id if estate_id > 0 else None


def get_target_type(value: str) -> TargetType | None:
    """Classify *value*; ``None`` means the target is invalid.

    Coordinates are tried first, then a strict estate ID (see
    :func:`parse_estate_id`), then the ``0x`` address prefix.  Input like
    ``"12,400"`` is therefore invalid, not estate 12.
    """
    if is_valid(value):
        return TargetType.PARCEL

    if parse_estate_id(value) is not None:
        return TargetType.ESTATE

    if value.startswith("0x"):
        return TargetType.ADDRESS

    return None
