"""
YAML configuration loading for palette defaults.

Files are read fail-soft: a missing or malformed file contributes nothing
instead of raising.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .common import settings as _settings

logger = logging.getLogger(__name__)

PALETTE_KEYS = ("base_value", "threshold_lightest", "threshold_darkest", "color_steps")


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("ignoring unreadable config %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _find_project_root(start: Path) -> Path:
    """Return the nearest ancestor holding ``.git``, ``pyproject.toml`` or ``configs/``.

    Falls back to ``start.parent.parent`` when none is found.
    """
    cur = start.resolve()
    for parent in [cur] + list(cur.parents):
        if (
            (parent / ".git").exists()
            or (parent / "pyproject.toml").exists()
            or (parent / "configs").exists()
        ):
            return parent
    return cur.parent.parent


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Load configuration as a dict.

    Order:
    1) ``configs/default.yaml`` under the project root (base)
    2) ``path``, or ``TWP_CONFIG`` when ``path`` is None (overrides the base)

    Only top-level keys are overridden; nested mappings are not merged.
    """
    project_root = _find_project_root(Path(__file__).parent)
    base: Dict[str, Any] = {}

    default_path = project_root / "configs" / "default.yaml"
    if default_path.exists():
        base.update(_safe_load_yaml(default_path))

    override = path if path is not None else _settings.get().CONFIG_PATH
    if override is not None:
        override_path = Path(override)
        if override_path.exists():
            base.update(_safe_load_yaml(override_path))
        else:
            logger.warning("config file not found: %s", override_path)

    return base


def palette_options(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Extract generator options from the ``palette`` section of ``cfg``.

    Keys left empty in YAML (null) are skipped so their defaults apply.
    """
    section = cfg.get("palette", {}) if isinstance(cfg, dict) else {}
    if not isinstance(section, dict):
        return {}
    return {k: section[k] for k in PALETTE_KEYS if section.get(k) is not None}


__all__ = ["load_config", "palette_options", "PALETTE_KEYS"]
