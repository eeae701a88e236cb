"""Tests for the pure coordinate helpers (core/coordinates.py)."""

from __future__ import annotations

import pytest

from dcl_cli.core.coordinates import (
    MAX_COORD,
    MIN_COORD,
    Coords,
    get_object,
    get_string,
    is_valid,
    is_within_limits,
)
from dcl_cli.exceptions import InvalidCoordinatesError


class TestIsValid:
    @pytest.mark.parametrize(
        "value",
        ["12,40", "-12,40", "0,0", "-150,150", "12, 40", " 3 , -7 "],
    )
    def test_accepts_pairs(self, value: str) -> None:
        assert is_valid(value)

    @pytest.mark.parametrize(
        "value",
        ["", "12", "12,", ",40", "12,40,1", "a,b", "1.5,2", "0x12,40", "151,0", "0,-151"],
    )
    def test_rejects_everything_else(self, value: str) -> None:
        assert not is_valid(value)


class TestLimits:
    def test_bounds_are_inclusive(self) -> None:
        assert is_within_limits(MIN_COORD, MAX_COORD)
        assert not is_within_limits(MIN_COORD - 1, 0)
        assert not is_within_limits(0, MAX_COORD + 1)


class TestConversion:
    def test_get_object(self) -> None:
        assert get_object("-12, 40") == Coords(x=-12, y=40)

    def test_get_object_invalid_raises_with_hint(self) -> None:
        with pytest.raises(InvalidCoordinatesError) as exc_info:
            get_object("nope")
        assert exc_info.value.hint is not None

    @pytest.mark.parametrize("value", ["151,0", "0,-151", "12,400"])
    def test_get_object_out_of_bounds_raises(self, value: str) -> None:
        with pytest.raises(InvalidCoordinatesError, match="Invalid coordinates"):
            get_object(value)

    def test_get_object_accepts_bounds(self) -> None:
        assert get_object("150,-150") == Coords(x=150, y=-150)

    def test_get_string(self) -> None:
        assert get_string(Coords(x=-12, y=40)) == "-12,40"

    def test_str_matches_get_string(self) -> None:
        assert str(Coords(x=3, y=-7)) == "3,-7"
