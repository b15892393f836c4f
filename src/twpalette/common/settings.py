"""
Process-wide settings read from ``TWP_*`` environment variables.

Call :func:`reload_from_env` after changing the environment (tests do this
through ``monkeypatch``).
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_str


@dataclass
class _Settings:
    LOG_LEVEL: str = "INFO"
    # Extra YAML file merged over configs/default.yaml
    CONFIG_PATH: str | None = None
    # Raise instead of warning when the base lightness lies outside the thresholds
    STRICT_THRESHOLDS: bool = False


_settings = _Settings()


def reload_from_env() -> None:
    """Reload settings from the environment."""
    _settings.LOG_LEVEL = (env_str("TWP_LOG_LEVEL", "INFO") or "INFO").upper()
    _settings.CONFIG_PATH = env_str("TWP_CONFIG")
    _settings.STRICT_THRESHOLDS = env_bool("TWP_STRICT_THRESHOLDS", False)


def get() -> _Settings:
    """Return the current settings snapshot."""
    return _settings


reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
