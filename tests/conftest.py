"""Shared fixtures.

- Settings are reloaded after every test so environment overrides do not leak
- A sample base color (Tailwind blue-500)
"""

from __future__ import annotations

from typing import Iterator

import pytest

from twpalette import Color
from twpalette.common import settings


@pytest.fixture(autouse=True)
def _reset_settings() -> Iterator[None]:
    yield
    settings.reload_from_env()


@pytest.fixture()
def blue500() -> Color:
    return Color.from_hex("3b82f6")
