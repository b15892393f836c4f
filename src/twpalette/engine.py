from __future__ import annotations

"""Color conversion engine for hex, RGB and HSL.

All functions here are pure. Hex strings are 6 lowercase digits without a
``#`` prefix, RGB channels are integers in [0, 255] and HSL components are
fractions in [0, 1].
"""

import math
import re
from typing import Tuple

from .errors import InvalidColorComponent, InvalidHexFormat


HSL = Tuple[float, float, float]
RGB = Tuple[int, int, int]

# hsl_to_hex never takes an achromatic shortcut; zero saturation is nudged
# onto the chromatic path instead.
SATURATION_EPSILON = 1e-6

_HEX_RE = re.compile(r"[0-9a-fA-F]{6}")


def normalize_hex(hex_str: str) -> str:
    """Return ``hex_str`` as 6 lowercase digits, stripping a leading ``#``."""
    if not isinstance(hex_str, str):
        raise InvalidHexFormat(f"hex color must be a string, got {type(hex_str).__name__}")
    s = hex_str.strip()
    if s.startswith("#"):
        s = s[1:]
    if _HEX_RE.fullmatch(s) is None:
        raise InvalidHexFormat(f"invalid hex color: '{hex_str}' (expected RRGGBB)")
    return s.lower()


def normalize_fraction_triple(a: float, b: float, c: float) -> Tuple[float, float, float]:
    """Scale a triple to fractions, treating it as percentages if any value exceeds 1.

    A value of exactly 1.0 is read as a fraction.
    """
    values = (_finite(a), _finite(b), _finite(c))
    for v in values:
        if v < 0.0:
            raise InvalidColorComponent(f"HSL components must be non-negative, got {values}")
        if v > 100.0:
            raise InvalidColorComponent(f"HSL components must not exceed 100, got {values}")
    if any(v > 1.0 for v in values):
        return (values[0] / 100.0, values[1] / 100.0, values[2] / 100.0)
    return values


def normalize_fraction(value: float) -> float:
    """Single-value form of :func:`normalize_fraction_triple`."""
    v = _finite(value)
    if v < 0.0:
        raise InvalidColorComponent(f"value must be non-negative, got {v}")
    if v > 100.0:
        raise InvalidColorComponent(f"value must not exceed 100, got {v}")
    return v / 100.0 if v > 1.0 else v


def validate_hsl(hsl: HSL) -> HSL:
    """Check an already fractional HSL triple: three finite values in [0, 1]."""
    try:
        h, s, l = hsl
    except (TypeError, ValueError) as exc:
        raise InvalidColorComponent(f"HSL must be a triple, got {hsl!r}") from exc
    values = (_finite(h), _finite(s), _finite(l))
    if not all(0.0 <= v <= 1.0 for v in values):
        raise InvalidColorComponent(f"HSL fractions must be in [0, 1], got {values}")
    return values


def _finite(value: float) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidColorComponent(f"expected a number, got {value!r}") from exc
    if not math.isfinite(v):
        raise InvalidColorComponent(f"expected a finite number, got {v}")
    return v


def validate_rgb_channel(name: str, value: int) -> int:
    try:
        is_integral = not isinstance(value, bool) and int(value) == value
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidColorComponent(f"{name} must be an integer, got {value!r}") from exc
    if not is_integral:
        raise InvalidColorComponent(f"{name} must be an integer, got {value!r}")
    v = int(value)
    if not (0 <= v <= 255):
        raise InvalidColorComponent(f"{name} must be in [0, 255], got {v}")
    return v


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Concatenate three 8-bit channels as zero-padded lowercase hex."""
    return f"{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_str: str) -> RGB:
    """Split a normalized hex string into three 8-bit channels."""
    return (int(hex_str[0:2], 16), int(hex_str[2:4], 16), int(hex_str[4:6], 16))


def fraction_to_hex_byte(c: float) -> str:
    """Convert a [0, 1] channel to a hex byte, truncating ``c * 255``."""
    return f"{int(c * 255):02x}"


def hex_to_hsl(hex_str: str) -> HSL:
    """Convert a normalized hex string to fractional HSL."""
    r, g, b = (c / 255 for c in hex_to_rgb(hex_str))

    c_max = max(r, g, b)
    c_min = min(r, g, b)
    l = (c_max + c_min) / 2

    if c_max == c_min:
        return (0.0, 0.0, l)

    diff = c_max - c_min
    s = diff / (2 - c_max - c_min) if l > 0.5 else diff / (c_max + c_min)

    # Ties on the maximum resolve in R, G, B order.
    if c_max == r:
        h = (g - b) / diff + (6 if g < b else 0)
    elif c_max == g:
        h = (b - r) / diff + 2
    else:
        h = (r - g) / diff + 4
    h /= 6

    return (h, s, l)


def hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_hex(hsl: HSL) -> str:
    """Convert fractional HSL to a hex string."""
    h, s, l = hsl

    if s == 0:
        s = SATURATION_EPSILON

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q

    r = hue_to_rgb(p, q, h + 1 / 3)
    g = hue_to_rgb(p, q, h)
    b = hue_to_rgb(p, q, h - 1 / 3)

    return fraction_to_hex_byte(r) + fraction_to_hex_byte(g) + fraction_to_hex_byte(b)


__all__ = [
    "HSL",
    "RGB",
    "SATURATION_EPSILON",
    "normalize_hex",
    "normalize_fraction",
    "normalize_fraction_triple",
    "validate_hsl",
    "validate_rgb_channel",
    "rgb_to_hex",
    "hex_to_rgb",
    "fraction_to_hex_byte",
    "hex_to_hsl",
    "hue_to_rgb",
    "hsl_to_hex",
]
