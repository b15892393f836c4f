from __future__ import annotations

"""Helpers for turning generated palettes into plain data.

This module exposes :class:`ExportFormat` and :func:`export_palette`, which
converts a step -> Color mapping into hex/RGB/HSL mappings, CSS custom
properties or a Tailwind ``theme.colors`` entry.
"""

from enum import Enum
from typing import Dict, List, Mapping, Union

from .color_types import Color


class ExportFormat(Enum):
    """Supported output formats for exported palettes."""

    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    CSS = "css"
    TAILWIND = "tailwind"

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown export format: {value}")


def css_variables(palette: Mapping[int, Color], name: str = "primary") -> List[str]:
    """Return one ``--color-<name>-<step>: #rrggbb;`` line per step."""
    return [f"--color-{name}-{step}: #{color.hex};" for step, color in palette.items()]


def export_palette(
    palette: Mapping[int, Color],
    fmt: Union[ExportFormat, str],
    name: str = "primary",
) -> Union[Dict[int, object], Dict[str, str], List[str]]:
    """Convert a palette to the desired format.

    ``name`` is only used by :attr:`ExportFormat.CSS`.
    """
    export_fmt = fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)
    if export_fmt == ExportFormat.HEX:
        return {step: f"#{c.hex}" for step, c in palette.items()}
    if export_fmt == ExportFormat.RGB:
        return {step: c.rgb for step, c in palette.items()}
    if export_fmt == ExportFormat.HSL:
        return {step: c.hsl for step, c in palette.items()}
    if export_fmt == ExportFormat.CSS:
        return css_variables(palette, name)
    if export_fmt == ExportFormat.TAILWIND:
        return {str(step): f"#{c.hex}" for step, c in palette.items()}
    raise ValueError(f"Unsupported export format: {fmt}")


__all__ = [
    "ExportFormat",
    "css_variables",
    "export_palette",
]
