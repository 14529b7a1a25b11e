from __future__ import annotations

"""Scheme orchestrator: builds a full palette from one seed hue.

:class:`ColorScheme` owns the palette slots and the scheme settings. Its
setters validate eagerly and return the instance so calls can be
chained::

    colors = ColorScheme().from_hue(210).set_scheme("tetrade").set_distance(0.3).render()
"""

import logging
import math
import time
from typing import List, Sequence, Tuple

import numpy as np

from common import settings

from .convert import adjust_saturation as _adjust_saturation_hex
from .convert import hex_to_rgb01, rgb_to_hsv, round_half_up
from .errors import InvalidArgument, InvalidState
from .harmony import SchemeParams, SchemeType, assign_hues, fill_remaining
from .hue import VARIATION_COUNT, HueTone
from .tables import (
    CALIBRATION_KEYS,
    CALIBRATION_WHEEL,
    DEFAULT_PRESET,
    PRESETS,
    Preset,
    preset_from_sv,
)


logger = logging.getLogger(__name__)

MIN_COLORS = 2
MAX_COLORS = 16
INITIAL_HUE = 60

# (calibration key, HSV hue of the key's reference color)
_WHEEL_HUES: Tuple[Tuple[int, float], ...] = tuple(
    (key, rgb_to_hsv(*(c / 255.0 for c in CALIBRATION_WHEEL[key][:3]))[0])
    for key in CALIBRATION_KEYS
)


def _time_seed() -> int:
    return int(time.time() * 1000)


def _require(name: str, value: object) -> None:
    if value is None:
        raise InvalidArgument(f"{name} needs an argument")


def _require_number(name: str, value: object) -> float:
    _require(name, value)
    if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise InvalidArgument(f"{name}({value!r}) - argument must be a number")
    if not math.isfinite(value):
        raise InvalidArgument(f"{name}({value!r}) - argument must be finite")
    return float(value)


def _require_bool(name: str, value: object) -> bool:
    _require(name, value)
    if not isinstance(value, (bool, np.bool_)):
        raise InvalidArgument(f"{name}({value!r}) - argument must be a bool")
    return bool(value)


def _clamp_count(name: str, count: object) -> int:
    n = _require_number(name, count)
    return int(min(MAX_COLORS, max(MIN_COLORS, round_half_up(n))))


def _hue_from_hsv(h0: float) -> int:
    """Map an HSV hue onto the calibration wheel's hue scale."""
    h1, h2 = 0.0, 1000.0
    i1, i2 = 0, 0
    for key, h in _WHEEL_HUES:
        if h1 <= h <= h0:
            h1, i1 = h, key
        if h0 <= h <= h2:
            h2, i2 = h, key
    if h2 == 0 or h2 > 360:
        h2, i2 = 360.0, 360
    k = (h0 - h1) / (h2 - h1) if h2 != h1 else 0.0
    return round_half_up(i1 + k * (i2 - i1)) % 360


class ColorScheme:
    """Palette generator driven by a seed hue and a named scheme.

    Parameters
    ----------
    color_count:
        Number of palette slots, clamped to [2, 16]. ``None`` uses the
        ``COLORSCHEME_COLOR_COUNT`` setting (default 4).
    seed:
        Seed for the ``chaos`` and ``perlin`` schemes. ``None`` uses the
        ``COLORSCHEME_SEED`` setting, or the current time in milliseconds
        when that is unset.

    New instances start with web-safe output set from the
    ``COLORSCHEME_WEB_SAFE`` setting.
    """

    def __init__(self, color_count: int | None = None, *, seed: float | None = None) -> None:
        cfg = settings.get()
        count = _clamp_count(
            "color_count", cfg.DEFAULT_COLOR_COUNT if color_count is None else color_count
        )
        if seed is None:
            seed = cfg.DEFAULT_SEED if cfg.DEFAULT_SEED is not None else _time_seed()

        self._preset: Preset = PRESETS[DEFAULT_PRESET]
        self._colors: List[HueTone] = [HueTone(INITIAL_HUE, self._preset) for _ in range(count)]
        self._scheme = SchemeType.MONO
        self._distance = cfg.DEFAULT_DISTANCE
        self._web_safe = cfg.DEFAULT_WEB_SAFE
        self._add_complement = False
        self._saturation_adjustment = 0.0
        _require_number("seed", seed)
        self._seed = seed

    def __repr__(self) -> str:
        return (
            f"ColorScheme(scheme={self._scheme.value!r}, hue={self.base_hue}, "
            f"color_count={self.color_count})"
        )

    # --- read-only state ---
    @property
    def color_count(self) -> int:
        return len(self._colors)

    @property
    def colors(self) -> Tuple[HueTone, ...]:
        """Palette slots in order. Slot 0 holds the seed hue."""
        return tuple(self._colors)

    @property
    def base_hue(self) -> int:
        return self._colors[0].hue

    @property
    def scheme(self) -> str:
        return self._scheme.value

    @property
    def distance(self) -> float:
        return self._distance

    @property
    def web_safe(self) -> bool:
        return self._web_safe

    @property
    def complement(self) -> bool:
        return self._add_complement

    @property
    def saturation_adjustment(self) -> float:
        return self._saturation_adjustment

    @property
    def seed(self) -> float:
        return self._seed

    @property
    def preset(self) -> Preset:
        return self._preset

    # --- configuration ---
    def set_color_count(self, count: int) -> "ColorScheme":
        """Grow or shrink the palette; trailing slots are dropped first."""
        new_count = _clamp_count("set_color_count", count)
        old_count = len(self._colors)
        if new_count > old_count:
            self._colors.extend(HueTone() for _ in range(new_count - old_count))
        elif new_count < old_count:
            del self._colors[new_count:]
        if new_count != old_count:
            logger.debug("color count %d -> %d", old_count, new_count)
        return self

    def set_scheme(self, name: str | SchemeType) -> "ColorScheme":
        self._scheme = SchemeType.from_name(name)
        logger.debug("scheme set to %s", self._scheme.value)
        return self

    def set_variation(self, name: str) -> "ColorScheme":
        """Install a named variation preset on every slot."""
        _require("set_variation", name)
        if name not in PRESETS:
            raise InvalidArgument(f"'{name}' isn't a valid variation name")
        self._set_variant_preset(PRESETS[name])
        return self

    def set_distance(self, d: float) -> "ColorScheme":
        value = _require_number("set_distance", d)
        if not value >= 0:
            raise InvalidArgument(f"set_distance({d}) - argument must be >= 0")
        if not value <= 1:
            raise InvalidArgument(f"set_distance({d}) - argument must be <= 1")
        self._distance = value
        return self

    def use_web_safe(self, b: bool) -> "ColorScheme":
        self._web_safe = _require_bool("use_web_safe", b)
        return self

    def add_complement(self, b: bool) -> "ColorScheme":
        self._add_complement = _require_bool("add_complement", b)
        return self

    def set_seed(self, seed: float) -> "ColorScheme":
        _require_number("set_seed", seed)
        self._seed = seed
        return self

    def from_hue(self, h: float | None = None) -> "ColorScheme":
        """Set the seed hue; a random hue is drawn when ``h`` is omitted."""
        if h is None:
            h = int(np.random.randint(0, 360))
        self._colors[0].set_hue(_require_number("from_hue", h))
        return self

    def from_hex(self, hex_str: str) -> "ColorScheme":
        """Seed the palette from an ``RRGGBB`` color.

        The color's HSV hue is mapped back onto the calibration wheel to
        pick the seed hue, and its own saturation/value become the
        variation preset of every slot.
        """
        _require("from_hex", hex_str)
        h0, s, v = rgb_to_hsv(*hex_to_rgb01(hex_str))
        hue = _hue_from_hsv(h0)
        logger.debug("from_hex %s -> hue %d (s=%.3f, v=%.3f)", hex_str, hue, s, v)
        self._colors[0].set_hue(hue)
        self._set_variant_preset(preset_from_sv(s, v))
        return self

    def adjust_saturation(self, amount: float) -> "ColorScheme":
        """Set the global saturation shift applied after rendering, clamped to [-1, 1]."""
        value = _require_number("adjust_saturation", amount)
        self._saturation_adjustment = max(-1.0, min(1.0, value))
        return self

    def desaturate(self, amount: float) -> "ColorScheme":
        return self.adjust_saturation(-abs(_require_number("desaturate", amount)))

    def saturate(self, amount: float) -> "ColorScheme":
        return self.adjust_saturation(abs(_require_number("saturate", amount)))

    def _set_variant_preset(self, p: Sequence[float]) -> None:
        preset = tuple(float(x) for x in p)
        for color in self._colors:
            color.set_variant_preset(preset)
        self._preset = preset  # type: ignore[assignment]

    # --- output ---
    def render(self) -> List[str]:
        """Render the palette as ``4 * color_count`` lowercase ``rrggbb`` strings.

        Slots are emitted in order, each as variations 0..3. Every call
        recomputes all slots from slot 0's hue and the current settings,
        so repeated calls with the same configuration give the same list.
        """
        if not isinstance(self._scheme, SchemeType):
            raise InvalidState(f"Unknown color scheme: {self._scheme!r}")

        h = self._colors[0].hue
        params = SchemeParams(
            distance=self._distance,
            add_complement=self._add_complement,
            seed=self._seed,
        )
        for color in self._colors:
            color.set_variant_preset(self._preset)
        try:
            used = assign_hues(self._scheme, self._colors, h, params)
            fill_remaining(self._colors, h, used)
            output = [
                color.get_hex(self._web_safe, j)
                for color in self._colors
                for j in range(VARIATION_COUNT)
            ]
        finally:
            self._colors[0].set_hue(h)

        logger.debug(
            "rendered scheme=%s hue=%d colors=%d seed=%s",
            self._scheme.value,
            h,
            len(self._colors),
            self._seed,
        )
        if self._saturation_adjustment != 0:
            return _adjust_saturation_hex(output, self._saturation_adjustment)
        return output

    def render_grouped(self) -> List[List[str]]:
        """Same as :meth:`render`, chunked into one list of 4 per slot."""
        flat = self.render()
        return [flat[i : i + VARIATION_COUNT] for i in range(0, len(flat), VARIATION_COUNT)]


__all__ = ["ColorScheme", "MIN_COLORS", "MAX_COLORS"]
