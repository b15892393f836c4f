from __future__ import annotations

"""Lightness-graduated palette generation.

:class:`PaletteGenerator` takes a base color and spreads a set of step
labels (Tailwind's 50-900 by default) around it. Hue and saturation are
kept from the base color; only lightness moves, linearly towards the
lightest threshold for steps below the base value and towards the darkest
threshold for steps above it.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from .color_types import Color
from .common import settings as _settings
from .engine import normalize_fraction
from .errors import BaseColorUnset, InvalidColorComponent


logger = logging.getLogger(__name__)

DEFAULT_BASE_VALUE = 500
DEFAULT_THRESHOLD_LIGHTEST = 0.9
DEFAULT_THRESHOLD_DARKEST = 0.1
DEFAULT_COLOR_STEPS: Tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900)


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


class PaletteGenerator:
    """Builder that turns a base :class:`Color` into a step -> Color mapping.

    Setters return the generator so configuration can be chained::

        palette = (
            PaletteGenerator()
            .set_base_color(Color.from_hex("3b82f6"))
            .set_threshold_lightest(95)
            .get_palette()
        )

    The generator keeps no derived state; every :meth:`get_palette` call
    recomputes the palette from the current configuration.
    """

    def __init__(
        self,
        base_color: Optional[Color] = None,
        *,
        base_value: int = DEFAULT_BASE_VALUE,
        threshold_lightest: float = DEFAULT_THRESHOLD_LIGHTEST,
        threshold_darkest: float = DEFAULT_THRESHOLD_DARKEST,
        color_steps: Iterable[int] = DEFAULT_COLOR_STEPS,
    ) -> None:
        self._base_color: Optional[Color] = None
        if base_color is not None:
            self.set_base_color(base_color)
        self.set_base_value(base_value)
        self.set_threshold_lightest(threshold_lightest)
        self.set_threshold_darkest(threshold_darkest)
        self.set_color_steps(color_steps)

    @classmethod
    def from_config(
        cls, options: Mapping[str, Any], base_color: Optional[Color] = None
    ) -> "PaletteGenerator":
        """Build a generator from a ``palette`` config section.

        Unknown keys are ignored; missing keys keep their defaults.
        """
        gen = cls(base_color)
        if "base_value" in options:
            gen.set_base_value(options["base_value"])
        if "threshold_lightest" in options:
            gen.set_threshold_lightest(options["threshold_lightest"])
        if "threshold_darkest" in options:
            gen.set_threshold_darkest(options["threshold_darkest"])
        if "color_steps" in options:
            gen.set_color_steps(options["color_steps"])
        return gen

    # --- configuration ---
    @property
    def base_color(self) -> Optional[Color]:
        return self._base_color

    @property
    def base_value(self) -> int:
        return self._base_value

    @property
    def threshold_lightest(self) -> float:
        return self._threshold_lightest

    @property
    def threshold_darkest(self) -> float:
        return self._threshold_darkest

    @property
    def color_steps(self) -> Tuple[int, ...]:
        return self._color_steps

    def set_base_color(self, color: Color) -> "PaletteGenerator":
        """Set the palette base color; hue and saturation are read from it."""
        if not isinstance(color, Color):
            raise TypeError(f"base color must be a Color, got {type(color).__name__}")
        self._base_color = color
        return self

    def set_base_value(self, value: int) -> "PaletteGenerator":
        """Set the step label that maps to the unmodified base color."""
        self._base_value = int(value)
        return self

    def set_threshold_lightest(self, threshold: float) -> "PaletteGenerator":
        """Set the lightness upper bound reached by the lightest step.

        Accepts a fraction (0.9) or a percentage (90).
        """
        self._threshold_lightest = normalize_fraction(threshold)
        return self

    def set_threshold_darkest(self, threshold: float) -> "PaletteGenerator":
        """Set the lightness lower bound reached by the darkest step.

        Accepts a fraction (0.1) or a percentage (10).
        """
        self._threshold_darkest = normalize_fraction(threshold)
        return self

    def set_color_steps(self, steps: Iterable[int]) -> "PaletteGenerator":
        """Set the step labels; duplicates are dropped, first occurrence wins."""
        self._color_steps = tuple(dict.fromkeys(int(s) for s in steps))
        return self

    # --- generation ---
    def lighter_steps(self) -> List[int]:
        """Return the steps below the base value, ascending."""
        return self._partition_steps()[0]

    def darker_steps(self) -> List[int]:
        """Return the steps above the base value, ascending."""
        return self._partition_steps()[1]

    def _partition_steps(self) -> Tuple[List[int], List[int]]:
        lighter: List[int] = []
        darker: List[int] = []
        for step in sorted(self._color_steps):
            if step < self._base_value:
                lighter.append(step)
            elif step > self._base_value:
                darker.append(step)
        return lighter, darker

    def get_palette(self) -> Dict[int, Color]:
        """Generate the palette.

        Returns
        -------
        dict[int, Color]
            Lighter steps, then the base value mapped to the base color
            instance itself, then darker steps; each group ascending by label.

        Raises
        ------
        BaseColorUnset
            If no base color has been set.
        """
        if self._base_color is None:
            raise BaseColorUnset("set_base_color() must be called before get_palette().")

        hue, saturation, lightness = self._base_color.hsl
        self._check_thresholds(lightness)

        lighter, darker = self._partition_steps()
        logger.debug(
            "generating palette from %s (L=%.4f): %d lighter, %d darker steps",
            self._base_color,
            lightness,
            len(lighter),
            len(darker),
        )

        palette: Dict[int, Color] = {}

        if lighter:
            delta = (self._threshold_lightest - lightness) / len(lighter)
            # Nearest step to the base gets one delta, the lightest gets all of them.
            for k, step in enumerate(reversed(lighter), start=1):
                palette[step] = Color(hsl=(hue, saturation, _clamp01(lightness + delta * k)))
            palette = {step: palette[step] for step in lighter}

        palette[self._base_value] = self._base_color

        if darker:
            delta = (lightness - self._threshold_darkest) / len(darker)
            for k, step in enumerate(darker, start=1):
                palette[step] = Color(hsl=(hue, saturation, _clamp01(lightness - delta * k)))

        return palette

    def _check_thresholds(self, lightness: float) -> None:
        if self._threshold_darkest < lightness < self._threshold_lightest:
            return
        message = (
            f"base lightness {lightness:.4f} is outside "
            f"({self._threshold_darkest:.4f}, {self._threshold_lightest:.4f}); "
            "palette lightness will not be monotonic"
        )
        if _settings.get().STRICT_THRESHOLDS:
            raise InvalidColorComponent(message)
        logger.warning(message)


def generate_palette(
    base_color: Union[Color, str],
    *,
    base_value: int = DEFAULT_BASE_VALUE,
    threshold_lightest: float = DEFAULT_THRESHOLD_LIGHTEST,
    threshold_darkest: float = DEFAULT_THRESHOLD_DARKEST,
    color_steps: Iterable[int] = DEFAULT_COLOR_STEPS,
) -> Dict[int, Color]:
    """Generate a palette in one call.

    Parameters
    ----------
    base_color:
        Base :class:`Color`, or a hex string parsed with :meth:`Color.from_hex`.
    base_value, threshold_lightest, threshold_darkest, color_steps:
        See the corresponding :class:`PaletteGenerator` setters.
    """
    if isinstance(base_color, str):
        base_color = Color.from_hex(base_color)
    return PaletteGenerator(
        base_color,
        base_value=base_value,
        threshold_lightest=threshold_lightest,
        threshold_darkest=threshold_darkest,
        color_steps=color_steps,
    ).get_palette()


__all__ = [
    "DEFAULT_BASE_VALUE",
    "DEFAULT_THRESHOLD_LIGHTEST",
    "DEFAULT_THRESHOLD_DARKEST",
    "DEFAULT_COLOR_STEPS",
    "PaletteGenerator",
    "generate_palette",
]
