"""Parcel coordinate helpers.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from dcl_cli.exceptions import InvalidCoordinatesError

# Genesis City bounds, inclusive on both axes.
MIN_COORD: int = -150
MAX_COORD: int = 150

_COORDS_RE = re.compile(r"^(-?\d+)\s*,\s*(-?\d+)$")


@dataclass(frozen=True, slots=True)
class Coords:
    """A parcel position in Genesis City."""

    x: int
    y: int

    def __str__(self) -> str:
        return get_string(self)


def is_within_limits(x: int, y: int) -> bool:
    """Return ``True`` when ``(x, y)`` lies inside the Genesis City map."""
    return MIN_COORD <= x <= MAX_COORD and MIN_COORD <= y <= MAX_COORD


def _match_coords(value: str) -> Coords | None:
    match = _COORDS_RE.match(value.strip())
    if match is None:
        return None
    coords = Coords(x=int(match.group(1)), y=int(match.group(2)))
    return coords if is_within_limits(coords.x, coords.y) else None


def is_valid(value: str) -> bool:
    """Return ``True`` if *value* is an in-bounds ``"x,y"`` pair."""
    return _match_coords(value) is not None


def get_object(value: str) -> Coords:
    """Parse ``"x,y"`` into :class:`Coords`.

    Raises
    ------
    InvalidCoordinatesError
        If *value* is malformed or out of bounds.
    """
    coords = _match_coords(value)
    if coords is None:
        raise InvalidCoordinatesError(
            f"Invalid coordinates \"{value}\"",
            hint=f"Use the form x,y with values between {MIN_COORD} and {MAX_COORD}.",
        )
    return coords


def get_string(coords: Coords) -> str:
    """Render :class:`Coords` as ``"x,y"``."""
    return f"{coords.x},{coords.y}"
