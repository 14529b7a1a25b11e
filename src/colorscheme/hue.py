from __future__ import annotations

"""Single palette color: a hue and its four tonal variations.

A :class:`HueTone` resolves its hue against the calibration wheel to a
base RGB color and brightness, then renders each of its four variation
slots (saturation/value pairs) as a hex string.
"""

import math
from typing import List, Sequence, Tuple

import numpy as np

from .convert import clamp, rgb_to_hex, round_half_up, web_safe
from .errors import InvalidArgument
from .tables import (
    CALIBRATION_KEYS,
    CALIBRATION_SATURATION,
    CALIBRATION_STEP,
    CALIBRATION_WHEEL,
    DEFAULT_PRESET,
    PRESETS,
)


VARIATION_COUNT = 4


def _avrg(a: float, b: float, k: float) -> int:
    return int(a + round_half_up((b - a) * k))


def _nearest_key(angle: float) -> int:
    """Calibration key with the smallest angular distance to ``angle``."""
    def dist(key: int) -> float:
        d = abs(key - angle) % 360
        return min(d, 360 - d)

    return min(CALIBRATION_KEYS, key=dist)


def _check_number(name: str, value: object) -> float:
    if value is None:
        raise InvalidArgument(f"{name} needs an argument")
    if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise InvalidArgument(f"{name} must be a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise InvalidArgument(f"{name} must be finite, got {value!r}")
    return float(value)


class HueTone:
    """One palette slot: hue, calibrated base color and four variations.

    Attributes
    ----------
    hue:
        Integer degrees in [0, 360).
    base_red, base_green, base_blue:
        Calibrated base color channels in [0, 255].
    base_saturation:
        Interpolated calibration saturation in [0, 1].
    base_value:
        Interpolated calibration brightness in [0, 1].

    Variation parameters are signed: a negative value is a factor of the
    base saturation/value, a non-negative value is used as-is. Both are
    clamped to [0, 1] when read, never when written.
    """

    __slots__ = (
        "hue",
        "base_red",
        "base_green",
        "base_blue",
        "base_saturation",
        "base_value",
        "_saturation",
        "_value",
    )

    def __init__(self, hue: float | None = None, preset: Sequence[float] | None = None) -> None:
        self.hue = 0
        self.base_red = 0
        self.base_green = 0
        self.base_blue = 0
        self.base_saturation = 0.0
        self.base_value = 0.0
        self._saturation: List[float] = [0.0] * VARIATION_COUNT
        self._value: List[float] = [0.0] * VARIATION_COUNT

        if hue is None:
            hue = int(np.random.randint(0, 360))
        self.set_hue(hue)
        self.set_variant_preset(PRESETS[DEFAULT_PRESET] if preset is None else preset)

    def __repr__(self) -> str:
        return f"HueTone(hue={self.hue}, base=#{rgb_to_hex(*self.base_rgb)})"

    @property
    def base_rgb(self) -> Tuple[int, int, int]:
        return self.base_red, self.base_green, self.base_blue

    def set_hue(self, h: float) -> None:
        """Set the hue and re-derive the calibrated base color.

        The hue is rounded to whole degrees and wrapped into [0, 360). The
        base channels and brightness are linearly interpolated between the
        two calibration entries bracketing the hue.
        """
        hf = _check_number("set_hue", h)
        self.hue = round_half_up(hf) % 360
        d = self.hue % CALIBRATION_STEP
        k = d / CALIBRATION_STEP

        angle_a = (self.hue - int(d)) % 360
        angle_b = (angle_a + CALIBRATION_STEP) % 360
        if angle_a not in CALIBRATION_WHEEL:
            angle_a = _nearest_key(angle_a)
        if angle_b not in CALIBRATION_WHEEL:
            angle_b = _nearest_key(angle_b)

        a = CALIBRATION_WHEEL[angle_a]
        b = CALIBRATION_WHEEL[angle_b]
        self.base_red = _avrg(a[0], b[0], k)
        self.base_green = _avrg(a[1], b[1], k)
        self.base_blue = _avrg(a[2], b[2], k)
        self.base_value = _avrg(a[3], b[3], k) / 100.0
        self.base_saturation = (
            _avrg(CALIBRATION_SATURATION[angle_a], CALIBRATION_SATURATION[angle_b], k) / 100.0
        )

    def rotate(self, angle: float) -> None:
        """Rotate the hue by ``angle`` degrees."""
        self.set_hue((self.hue + _check_number("rotate", angle)) % 360)

    def _check_variation(self, variation: int) -> int:
        if isinstance(variation, bool) or not isinstance(variation, (int, np.integer)):
            raise InvalidArgument(f"variation index must be an int, got {variation!r}")
        if not 0 <= variation < VARIATION_COUNT:
            raise InvalidArgument(f"variation index must be in 0..3, got {variation}")
        return int(variation)

    def get_saturation(self, variation: int) -> float:
        x = self._saturation[self._check_variation(variation)]
        s = -x * self.base_saturation if x < 0 else x
        return clamp(s, 0.0, 1.0)

    def get_value(self, variation: int) -> float:
        x = self._value[self._check_variation(variation)]
        v = -x * self.base_value if x < 0 else x
        return clamp(v, 0.0, 1.0)

    def get_variant(self, variation: int) -> Tuple[float, float]:
        """Raw (saturation, value) parameters of a variation slot."""
        i = self._check_variation(variation)
        return self._saturation[i], self._value[i]

    def set_variant(self, variation: int, s: float, v: float) -> None:
        i = self._check_variation(variation)
        self._saturation[i] = _check_number("set_variant", s)
        self._value[i] = _check_number("set_variant", v)

    def set_variant_preset(self, p: Sequence[float]) -> None:
        """Assign pairs ``(p[0], p[1]) .. (p[6], p[7])`` to variations 0..3."""
        if p is None or len(p) != 2 * VARIATION_COUNT:
            raise InvalidArgument("variant preset must contain exactly 8 numbers")
        for i in range(VARIATION_COUNT):
            self.set_variant(i, p[2 * i], p[2 * i + 1])

    def get_hex(self, web_safe_colors: bool = False, variation: int = 0) -> str:
        """Render a variation as ``rrggbb``.

        Parameters
        ----------
        web_safe_colors:
            Snap each channel to a multiple of 51.
        variation:
            Variation slot 0..3, or a negative value for the unvaried base
            rendering (base value and base saturation).
        """
        if variation < 0:
            value = self.base_value
            saturation = self.base_saturation
        else:
            value = self.get_value(variation)
            saturation = self.get_saturation(variation)

        mx = max(self.base_red, self.base_green, self.base_blue)
        v = value * 255.0
        k = v / mx if mx > 0 else 0.0

        rgb = []
        for base in self.base_rgb:
            c = round_half_up(v - (v - base * k) * saturation)
            rgb.append(max(0, min(255, c)))
        if web_safe_colors:
            rgb = [web_safe(c) for c in rgb]
        return rgb_to_hex(*rgb)


__all__ = ["HueTone", "VARIATION_COUNT"]
