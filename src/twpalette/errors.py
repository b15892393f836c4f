from __future__ import annotations

"""Exception types raised by the twpalette library.

Input errors derive from :class:`ValueError` so callers that already guard
color parsing with ``except ValueError`` keep working.
"""


class PaletteError(Exception):
    """Base class for all twpalette errors."""


class InvalidHexFormat(PaletteError, ValueError):
    """Hex string is not exactly 6 hex digits after stripping ``#``."""


class InvalidColorComponent(PaletteError, ValueError):
    """RGB channel, HSL component or lightness threshold is out of range."""


class BaseColorUnset(PaletteError, RuntimeError):
    """Palette generation was requested before a base color was set."""


__all__ = [
    "PaletteError",
    "InvalidHexFormat",
    "InvalidColorComponent",
    "BaseColorUnset",
]
