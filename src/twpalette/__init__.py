"""Public entrypoint for the twpalette library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``twpalette`` instead of individual
submodules.
"""

from .color_types import Color
from .errors import (
    BaseColorUnset,
    InvalidColorComponent,
    InvalidHexFormat,
    PaletteError,
)
from .export import ExportFormat, export_palette
from .generator import PaletteGenerator, generate_palette

__all__ = [
    "Color",
    "PaletteGenerator",
    "generate_palette",
    "ExportFormat",
    "export_palette",
    "PaletteError",
    "InvalidHexFormat",
    "InvalidColorComponent",
    "BaseColorUnset",
]
