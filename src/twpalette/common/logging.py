"""
Minimal logging setup for twpalette entry points.

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed by the CLI (or the host application), never on import.
"""

from __future__ import annotations

import logging


def setup_default_logging(level: int | str = "INFO") -> None:
    """Apply a basic logging configuration once.

    - No-op when the root logger already has handlers.
    - Unknown level names fall back to INFO.
    """
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
        if not isinstance(lvl, int):
            lvl = logging.INFO
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["setup_default_logging"]
