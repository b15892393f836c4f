from __future__ import annotations

import math

import pytest

from twpalette.engine import (
    fraction_to_hex_byte,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hue_to_rgb,
    normalize_fraction,
    normalize_fraction_triple,
    normalize_hex,
    rgb_to_hex,
    validate_hsl,
    validate_rgb_channel,
)
from twpalette.errors import InvalidColorComponent, InvalidHexFormat


def test_normalize_hex_strips_prefix_and_lowercases() -> None:
    assert normalize_hex("#3B82F6") == "3b82f6"
    assert normalize_hex("3b82f6") == "3b82f6"
    assert normalize_hex("  #AbCdEf ") == "abcdef"


@pytest.mark.parametrize("bad", ["#123", "12345", "1234567", "zzzzzz", "+12345", "ff_fff", ""])
def test_normalize_hex_invalid(bad: str) -> None:
    with pytest.raises(InvalidHexFormat):
        normalize_hex(bad)


def test_invalid_hex_is_value_error() -> None:
    with pytest.raises(ValueError):
        normalize_hex("not-a-color")


def test_rgb_hex_helpers() -> None:
    assert rgb_to_hex(59, 130, 246) == "3b82f6"
    assert rgb_to_hex(0, 1, 255) == "0001ff"
    assert hex_to_rgb("3b82f6") == (59, 130, 246)


def test_hex_to_hsl_primaries() -> None:
    assert hex_to_hsl("ff0000") == (0.0, 1.0, 0.5)
    h, s, l = hex_to_hsl("00ff00")
    assert (h, s, l) == (pytest.approx(1 / 3), 1.0, 0.5)
    h, s, l = hex_to_hsl("0000ff")
    assert (h, s, l) == (pytest.approx(2 / 3), 1.0, 0.5)


def test_hex_to_hsl_red_max_with_green_below_blue_wraps() -> None:
    # Red and blue tie for the maximum; red wins and the hue wraps by +6.
    h, s, l = hex_to_hsl("ff00ff")
    assert h == pytest.approx(5 / 6)
    assert s == 1.0
    assert l == 0.5


def test_hex_to_hsl_achromatic() -> None:
    h, s, l = hex_to_hsl("808080")
    assert h == 0
    assert s == 0
    assert l == pytest.approx(128 / 255)
    assert l == pytest.approx(0.502, abs=1e-3)


def test_hex_to_hsl_blue500() -> None:
    h, s, l = hex_to_hsl("3b82f6")
    assert h == pytest.approx((4 - 71 / 187) / 6)
    assert s == pytest.approx(187 / 205)
    assert l == pytest.approx(305 / 510)


def test_hue_to_rgb_pieces() -> None:
    assert hue_to_rgb(0.2, 0.8, 0.0) == pytest.approx(0.2)
    assert hue_to_rgb(0.2, 0.8, 0.1) == pytest.approx(0.56)
    assert hue_to_rgb(0.2, 0.8, 0.3) == 0.8
    assert hue_to_rgb(0.2, 0.8, 0.6) == pytest.approx(0.2 + 0.6 * (2 / 3 - 0.6) * 6)
    assert hue_to_rgb(0.2, 0.8, 0.9) == 0.2


def test_hue_to_rgb_wraps_once() -> None:
    assert hue_to_rgb(0.2, 0.8, -0.1) == 0.2
    assert hue_to_rgb(0.2, 0.8, 1.1) == pytest.approx(0.56)


def test_fraction_to_hex_byte_truncates() -> None:
    assert fraction_to_hex_byte(0.0) == "00"
    assert fraction_to_hex_byte(1.0) == "ff"
    # 127.5 truncates to 127, it is not rounded to 128
    assert fraction_to_hex_byte(0.5) == "7f"
    assert fraction_to_hex_byte(0.999) == "fe"


def test_hsl_to_hex_primaries() -> None:
    assert hsl_to_hex((0.0, 1.0, 0.5)) == "ff0000"
    assert hsl_to_hex((0.0, 0.0, 0.0)) == "000000"


def test_hsl_to_hex_zero_saturation_takes_chromatic_path() -> None:
    # s == 0 is nudged to 1e-6, so the channels straddle 0.5 * 255 and
    # all truncate to 127 whatever the hue.
    assert hsl_to_hex((0.0, 0.0, 0.5)) == "7f7f7f"
    assert hsl_to_hex((0.3, 0.0, 0.5)) == "7f7f7f"


def test_normalize_fraction_triple() -> None:
    assert normalize_fraction_triple(0.5, 0.25, 1.0) == (0.5, 0.25, 1.0)
    assert normalize_fraction_triple(50, 100, 25) == (0.5, 1.0, 0.25)
    # One value above 1 switches all three to percentages
    assert normalize_fraction_triple(0.5, 0.5, 2) == (0.005, 0.005, 0.02)


@pytest.mark.parametrize("triple", [(-0.1, 0.5, 0.5), (0.5, -1, 0.5), (101, 50, 50)])
def test_normalize_fraction_triple_invalid(triple) -> None:
    with pytest.raises(InvalidColorComponent):
        normalize_fraction_triple(*triple)


def test_normalize_fraction() -> None:
    assert normalize_fraction(0.9) == 0.9
    assert normalize_fraction(1) == 1.0
    assert normalize_fraction(95) == pytest.approx(0.95)
    with pytest.raises(InvalidColorComponent):
        normalize_fraction(-0.1)
    with pytest.raises(InvalidColorComponent):
        normalize_fraction(150)


def test_validate_rgb_channel() -> None:
    assert validate_rgb_channel("red", 0) == 0
    assert validate_rgb_channel("red", 255) == 255
    assert validate_rgb_channel("red", 12.0) == 12
    for bad in (-1, 256, 12.5, True):
        with pytest.raises(InvalidColorComponent):
            validate_rgb_channel("red", bad)


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_components_are_rejected(bad: float) -> None:
    with pytest.raises(InvalidColorComponent):
        normalize_fraction_triple(bad, 0.5, 0.5)
    with pytest.raises(InvalidColorComponent):
        normalize_fraction_triple(0.5, 0.5, bad)
    with pytest.raises(InvalidColorComponent):
        normalize_fraction(bad)


def test_non_numeric_fraction_is_rejected() -> None:
    with pytest.raises(InvalidColorComponent):
        normalize_fraction("high")  # type: ignore[arg-type]
    with pytest.raises(InvalidColorComponent):
        normalize_fraction(None)  # type: ignore[arg-type]


def test_validate_hsl() -> None:
    assert validate_hsl((0.25, 1, 0)) == (0.25, 1.0, 0.0)
    for bad in ((0.0, 0.0, 2.0), (-0.1, 0.5, 0.5), (math.nan, 0.5, 0.5), (0.5, 0.5), None):
        with pytest.raises(InvalidColorComponent):
            validate_hsl(bad)  # type: ignore[arg-type]


@pytest.mark.parametrize("bad", [None, "12", math.nan, math.inf, 1 + 2j])
def test_validate_rgb_channel_rejects_non_numbers(bad) -> None:
    with pytest.raises(InvalidColorComponent):
        validate_rgb_channel("green", bad)
