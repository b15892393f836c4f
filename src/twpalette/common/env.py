"""
Lightweight parsing helpers for environment variables.

Missing or malformed values fall back to the caller's default instead of
raising, so a bad variable never breaks import of the library.
"""

from __future__ import annotations

import os
from typing import Optional


def env_bool(name: str, default: bool = False) -> bool:
    """Read a boolean environment variable (0/1, true/false, yes/no, on/off)."""
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    try:
        return int(raw) != 0
    except ValueError:
        s = raw.strip().lower()
        if s in {"true", "t", "yes", "y", "on"}:
            return True
        if s in {"false", "f", "no", "n", "off"}:
            return False
        return bool(default)


def env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    """Read a string environment variable; blank values count as unset."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


__all__ = ["env_bool", "env_str"]
