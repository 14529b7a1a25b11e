from __future__ import annotations

"""Hue relationships used to lay out palette slots.

This module defines :class:`SchemeType` and the per-scheme functions
that assign hues (and, for the tonal and procedural schemes, variation
parameters) to the slots of a palette. Every function returns how many
leading slots it claimed; :func:`fill_remaining` spreads the rest evenly
around the wheel.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence

import numpy as np

from .errors import InvalidArgument, InvalidState
from .hue import VARIATION_COUNT, HueTone
from .noise import string_hash, value_noise_2d
from .tables import (
    GOLDEN_ANGLE,
    SEASON_HUES,
    SEASON_SATURATION,
    SEASON_SHIFT_SECTOR,
    SEASON_SHIFT_STEP,
    SEASON_VALUE,
    SHADE_PRESET,
    SHADE_SATURATION,
    SHADE_STEP,
    TINT_PRESET,
    TINT_SATURATION_BASE,
    TINT_STEP,
    preset_from_sv,
)


class SchemeType(Enum):
    """Recognized scheme identifiers."""

    MONO = "mono"
    MONOCHROMATIC = "monochromatic"
    CONTRAST = "contrast"
    TRIADE = "triade"
    TETRADE = "tetrade"
    ANALOGIC = "analogic"
    SPLIT_COMPLEMENT = "splitComplement"
    SQUARE = "square"
    PHI = "phi"
    SHADES = "shades"
    TINTS = "tints"
    CHAOS = "chaos"
    SEASONS = "seasons"
    GRADIENT = "gradient"
    PERLIN = "perlin"

    @classmethod
    def from_name(cls, name: "str | SchemeType") -> "SchemeType":
        if isinstance(name, SchemeType):
            return name
        if name is None:
            raise InvalidArgument("set_scheme needs an argument")
        for scheme in cls:
            if scheme.value == name:
                return scheme
        raise InvalidArgument(f"'{name}' isn't a valid scheme name")


SCHEME_NAMES: tuple[str, ...] = tuple(s.value for s in SchemeType)


@dataclass(frozen=True)
class SchemeParams:
    """Scheme inputs besides the base hue."""

    distance: float = 0.5
    add_complement: bool = False
    seed: object = 0


def _place(color: HueTone, h: int, angle: float) -> None:
    color.set_hue(h)
    color.rotate(angle)


def _mono(colors: List[HueTone], h: int, params: SchemeParams) -> int:
    # all rendered hues equal slot 0, so mono claims every slot and the
    # even spread of leftover slots never runs
    for color in colors[1:]:
        color.set_hue(h)
    return len(colors)


def _contrast(colors: List[HueTone], h: int, params: SchemeParams) -> int:
    used = min(2, len(colors))
    if used >= 2:
        _place(colors[1], h, 180)
    return used


def _triade(colors: List[HueTone], h: int, params: SchemeParams) -> int:
    used = min(3, len(colors))
    dif = 60 * params.distance
    if used >= 2:
        _place(colors[1], h, 180 - dif)
    if used >= 3:
        _place(colors[2], h, 180 + dif)
    return used


def _tetrade(colors: List[HueTone], h: int, params: SchemeParams) -> int:
    used = min(4, len(colors))
    dif = 90 * params.distance
    if used >= 2:
        _place(colors[1], h, 180)
    if used >= 3:
        _place(colors[2], h, 180 + dif)
    if used >= 4:
        _place(colors[3], h, dif)
    return used


def _analogic(colors: List[HueTone], h: int, params: SchemeParams) -> int:
    used = min(4 if params.add_complement else 3, len(colors))
    dif = 60 * params.distance
    if used >= 2:
        _place(colors[1], h, dif)
    if used >= 3:
        _place(colors[2], h, 360 - dif)
    if used >= 4:
        _place(colors[3], h, 180)
    return used


def _split_complement(colors: List[HueTone], h: int, params: SchemeParams) -> int:
    used = min(3, len(colors))
    dif = 30 * params.distance
    if used >= 2:
        _place(colors[1], h, 180 - dif)
    if used >= 3:
        _place(colors[2], h, 180 + dif)
    return used


def _square(colors: List[HueTone], h: int, params: SchemeParams) -> int:
    used = min(4, len(colors))
    for i in range(1, used):
        _place(colors[i], h, 90 * i)
    return used


def _phi(colors: List[HueTone], h: int, params: SchemeParams) -> int:
    used = min(5, len(colors))
    for i in range(1, used):
        _place(colors[i], h, GOLDEN_ANGLE * i)
    return used


def _shades(colors: List[HueTone], h: int, params: SchemeParams) -> int:
    used = min(5, len(colors))
    for i in range(used):
        colors[i].set_hue(h)
        darken = 1.0 - SHADE_STEP * i
        for j in range(VARIATION_COUNT):
            colors[i].set_variant(j, SHADE_SATURATION, SHADE_PRESET[j] * darken)
    return used


def _tints(colors: List[HueTone], h: int, params: SchemeParams) -> int:
    used = min(5, len(colors))
    for i in range(used):
        colors[i].set_hue(h)
        lighten = TINT_SATURATION_BASE - TINT_STEP * i
        for j in range(VARIATION_COUNT):
            colors[i].set_variant(j, TINT_PRESET[j] * lighten, TINT_PRESET[j + 1])
    return used


def _chaos(colors: List[HueTone], h: int, params: SchemeParams) -> int:
    for i, color in enumerate(colors):
        hashed = string_hash(params.seed, i, h)
        _place(color, h, hashed % 240 - 120)
        s_factor = 0.5 + (hashed % 100) / 200
        v_factor = 0.5 + (hashed % 150) / 300
        for j in range(VARIATION_COUNT):
            s, v = color.get_variant(j)
            color.set_variant(j, s * s_factor, v * v_factor)
    return len(colors)


def _seasons(colors: List[HueTone], h: int, params: SchemeParams) -> int:
    used = min(len(SEASON_HUES), len(colors))
    shift = (h // SEASON_SHIFT_SECTOR) * SEASON_SHIFT_STEP
    for i in range(used):
        colors[i].set_hue(SEASON_HUES[i] + shift)
        colors[i].set_variant_preset(preset_from_sv(SEASON_SATURATION[i], SEASON_VALUE[i]))
    return used


def _gradient(colors: List[HueTone], h: int, params: SchemeParams) -> int:
    n = len(colors)
    end_hue = (h + 90 + h % 90) % 360
    # signed shortest arc from h to end_hue
    arc = (end_hue - h + 540) % 360 - 180
    for i, color in enumerate(colors):
        t = i / (n - 1) if n > 1 else 0.0
        color.set_hue(h + arc * t)
        color.set_variant_preset(preset_from_sv(0.7 + 0.2 * t, 0.8 - 0.2 * t))
    return n


def _perlin(colors: List[HueTone], h: int, params: SchemeParams) -> int:
    n = len(colors)
    angles = 2.0 * math.pi * np.arange(n) / n
    cx = np.cos(angles)
    cy = np.sin(angles)
    hue_noise = value_noise_2d(cx, cy, params.seed)
    sat_noise = value_noise_2d(cx + 5.2, cy + 1.3, params.seed)
    val_noise = value_noise_2d(cx + 1.7, cy + 9.2, params.seed)
    for i, color in enumerate(colors):
        color.set_hue(h + float(hue_noise[i]) * 120 - 60)
        s = 0.5 + float(sat_noise[i]) * 0.5
        v = 0.6 + float(val_noise[i]) * 0.4
        color.set_variant_preset(preset_from_sv(s, v))
    return n


def assign_hues(
    scheme: SchemeType,
    colors: List[HueTone],
    h: int,
    params: SchemeParams,
) -> int:
    """Run the scheme's hue assignment and return the number of claimed slots."""
    if scheme in (SchemeType.MONO, SchemeType.MONOCHROMATIC):
        return _mono(colors, h, params)
    if scheme == SchemeType.CONTRAST:
        return _contrast(colors, h, params)
    if scheme == SchemeType.TRIADE:
        return _triade(colors, h, params)
    if scheme == SchemeType.TETRADE:
        return _tetrade(colors, h, params)
    if scheme == SchemeType.ANALOGIC:
        return _analogic(colors, h, params)
    if scheme == SchemeType.SPLIT_COMPLEMENT:
        return _split_complement(colors, h, params)
    if scheme == SchemeType.SQUARE:
        return _square(colors, h, params)
    if scheme == SchemeType.PHI:
        return _phi(colors, h, params)
    if scheme == SchemeType.SHADES:
        return _shades(colors, h, params)
    if scheme == SchemeType.TINTS:
        return _tints(colors, h, params)
    if scheme == SchemeType.CHAOS:
        return _chaos(colors, h, params)
    if scheme == SchemeType.SEASONS:
        return _seasons(colors, h, params)
    if scheme == SchemeType.GRADIENT:
        return _gradient(colors, h, params)
    if scheme == SchemeType.PERLIN:
        return _perlin(colors, h, params)

    raise InvalidState(f"Unknown color scheme: {scheme!r}")


def fill_remaining(colors: Sequence[HueTone], h: int, used: int) -> None:
    """Spread slots ``used..n-1`` evenly around the wheel starting from ``h``."""
    n = len(colors)
    if used >= n:
        return
    step = 360 / (n - used)
    for i in range(used, n):
        _place(colors[i], h, step * (i - used + 1))


__all__ = [
    "SchemeType",
    "SCHEME_NAMES",
    "SchemeParams",
    "assign_hues",
    "fill_remaining",
]
