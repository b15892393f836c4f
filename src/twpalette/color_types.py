from __future__ import annotations

"""Core color type used by the twpalette library.

A :class:`Color` is backed by either a hex string or an HSL triple. The
other representation is derived on first access and cached on the
instance, so every color can be read back as hex, HSL or RGB.
"""

from typing import Optional

from .engine import (
    HSL,
    RGB,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    normalize_fraction_triple,
    normalize_hex,
    rgb_to_hex,
    validate_hsl,
    validate_rgb_channel,
)


class Color:
    """Single color with a lazily derived hex/HSL pair.

    Use one of the ``from_*`` class methods to create instances. The
    instance does not change after construction apart from filling its
    cache; filling is idempotent, so sharing instances across threads only
    risks computing the same value twice.

    Attributes
    ----------
    hex:
        6 lowercase hex digits without ``#``.
    hsl:
        Tuple of (h, s, l), each a fraction in [0, 1].
    rgb:
        Tuple of (r, g, b) integers in [0, 255], always derived from ``hex``.
    """

    HUE = 0
    SATURATION = 1
    LIGHTNESS = 2

    __slots__ = ("_hex", "_hsl")

    def __init__(self, *, hex: Optional[str] = None, hsl: Optional[HSL] = None) -> None:
        if (hex is None) == (hsl is None):
            raise TypeError("Color requires exactly one of 'hex' or 'hsl'.")
        # hsl is taken as fractions as-is; from_hsl applies percentage inference
        self._hex = normalize_hex(hex) if hex is not None else None
        self._hsl = validate_hsl(hsl) if hsl is not None else None

    @classmethod
    def from_hex(cls, hex_str: str) -> "Color":
        """Create a Color from a hex string (#rrggbb or rrggbb)."""
        return cls(hex=hex_str)

    @classmethod
    def from_hsl(cls, hue: float, saturation: float, lightness: float) -> "Color":
        """Create a Color from HSL values.

        Values may be fractions (0.5) or percentages (50). If any of the
        three is greater than 1, all three are divided by 100; 1.0 itself
        counts as a fraction.
        """
        return cls(hsl=normalize_fraction_triple(hue, saturation, lightness))

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> "Color":
        """Create a Color from 8-bit RGB channels."""
        r = validate_rgb_channel("red", red)
        g = validate_rgb_channel("green", green)
        b = validate_rgb_channel("blue", blue)
        return cls(hex=rgb_to_hex(r, g, b))

    @property
    def hex(self) -> str:
        if self._hex is None:
            self._hex = hsl_to_hex(self._hsl)
        return self._hex

    @property
    def hsl(self) -> HSL:
        if self._hsl is None:
            self._hsl = hex_to_hsl(self._hex)
        return self._hsl

    @property
    def rgb(self) -> RGB:
        return hex_to_rgb(self.hex)

    def to_hex(self) -> str:
        """Return hex representation of the color (no ``#``)."""
        return self.hex

    def to_hsl(self) -> HSL:
        """Return HSL representation as (h, s, l) fractions."""
        return self.hsl

    def to_rgb(self) -> RGB:
        """Return RGB representation as (r, g, b) in [0, 255]."""
        return self.rgb

    def __str__(self) -> str:
        return self.hex

    def __repr__(self) -> str:
        return f"Color('{self.hex}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.hex == other.hex

    def __hash__(self) -> int:
        return hash(self.hex)


__all__ = ["Color"]
