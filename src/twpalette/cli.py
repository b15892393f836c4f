"""Command-line entry point: print a palette generated from a base hex color.

Usage:
    twpalette 3b82f6
    twpalette "#3b82f6" --format css --name brand
    twpalette 3b82f6 --steps 100,300,500,700,900 --lightest 95 --darkest 5
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, List, Optional, Sequence

from .color_types import Color
from .common import settings as _settings
from .common.logging import setup_default_logging
from .config import load_config, palette_options
from .errors import PaletteError
from .export import ExportFormat, export_palette
from .generator import PaletteGenerator

logger = logging.getLogger(__name__)


def _parse_steps(value: str) -> List[int]:
    try:
        return [int(part) for part in value.split(",") if part.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid step list: '{value}'") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="twpalette",
        description="Generate a Tailwind-style lightness palette from a base color.",
    )
    parser.add_argument("base", help="base color as hex (#rrggbb or rrggbb)")
    parser.add_argument("--base-value", type=int, help="step label of the base color")
    parser.add_argument("--lightest", type=float, help="lightness of the lightest step (0-1 or %%)")
    parser.add_argument("--darkest", type=float, help="lightness of the darkest step (0-1 or %%)")
    parser.add_argument("--steps", type=_parse_steps, help="comma separated step labels")
    parser.add_argument(
        "--format",
        choices=[fmt.value for fmt in ExportFormat],
        help="output format (default from config, else hex)",
    )
    parser.add_argument("--name", help="color name used for CSS variables")
    parser.add_argument("--config", help="YAML file merged over configs/default.yaml")
    parser.add_argument("--log-level", help="logging level (default TWP_LOG_LEVEL or INFO)")
    return parser


def _render(exported: Any, fmt: ExportFormat) -> str:
    if fmt == ExportFormat.CSS:
        return "\n".join(exported)
    return json.dumps(exported, indent=2)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_default_logging(args.log_level or _settings.get().LOG_LEVEL)

    cfg = load_config(args.config)
    export_cfg = cfg.get("export", {}) if isinstance(cfg.get("export"), dict) else {}
    name = args.name or export_cfg.get("name", "primary")

    try:
        fmt = ExportFormat.from_value(args.format or export_cfg.get("format", "hex"))
        generator = PaletteGenerator.from_config(palette_options(cfg), Color.from_hex(args.base))
        if args.base_value is not None:
            generator.set_base_value(args.base_value)
        if args.lightest is not None:
            generator.set_threshold_lightest(args.lightest)
        if args.darkest is not None:
            generator.set_threshold_darkest(args.darkest)
        if args.steps is not None:
            generator.set_color_steps(args.steps)
        palette = generator.get_palette()
    except (PaletteError, ValueError, TypeError) as exc:
        logger.debug("palette generation failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(_render(export_palette(palette, fmt, name=name), fmt))
    return 0


if __name__ == "__main__":
    sys.exit(main())
