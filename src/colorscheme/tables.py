from __future__ import annotations

"""Read-only constant tables shared by every palette.

The calibration wheel maps hue keys (every 15 degrees) to a reference
RGB color and a brightness scale. Named presets describe the four tonal
variations of a hue as eight signed floats, see
:meth:`colorscheme.hue.HueTone.set_variant_preset`.
"""

from types import MappingProxyType
from typing import Mapping, Tuple


# hue -> (red, green, blue, value scale in percent)
CALIBRATION_WHEEL: Mapping[int, Tuple[int, int, int, int]] = MappingProxyType(
    {
        0: (255, 0, 0, 100),
        15: (255, 51, 0, 100),
        30: (255, 102, 0, 100),
        45: (255, 128, 0, 100),
        60: (255, 153, 0, 100),
        75: (255, 178, 0, 100),
        90: (255, 204, 0, 100),
        105: (255, 229, 0, 100),
        120: (255, 255, 0, 100),
        135: (204, 255, 0, 100),
        150: (153, 255, 0, 100),
        165: (51, 255, 0, 100),
        180: (0, 204, 0, 80),
        195: (0, 178, 102, 70),
        210: (0, 153, 153, 60),
        225: (0, 102, 178, 70),
        240: (0, 51, 204, 80),
        255: (25, 25, 178, 70),
        270: (51, 0, 153, 60),
        285: (64, 0, 153, 60),
        300: (102, 0, 153, 60),
        315: (153, 0, 153, 60),
        330: (204, 0, 153, 80),
        345: (229, 0, 102, 90),
    }
)
CALIBRATION_KEYS: Tuple[int, ...] = tuple(sorted(CALIBRATION_WHEEL))
CALIBRATION_STEP = 15

# Every wheel entry is fully saturated; kept as a table so a richer
# calibration can vary it per sector.
CALIBRATION_SATURATION: Mapping[int, int] = MappingProxyType({k: 100 for k in CALIBRATION_KEYS})

Preset = Tuple[float, float, float, float, float, float, float, float]

PRESETS: Mapping[str, Preset] = MappingProxyType(
    {
        "default": (-1, -1, 1, -0.7, 0.25, 1, 0.5, 1),
        "pastel": (0.5, -0.9, 0.5, 0.5, 0.1, 0.9, 0.75, 0.75),
        "soft": (0.3, -0.8, 0.3, 0.5, 0.1, 0.9, 0.5, 0.75),
        "light": (0.25, 1, 0.5, 0.75, 0.1, 1, 0.5, 1),
        "hard": (1, -1, 1, -0.6, 0.1, 1, 0.6, 1),
        "pale": (0.1, -0.85, 0.1, 0.5, 0.1, 1, 0.1, 0.75),
        "vibrant": (1, 1, 1, 0.8, 0.3, 1, 0.7, 1),
        "muted": (0.2, -0.8, 0.2, 0.4, 0.1, 0.8, 0.3, 0.7),
    }
)
DEFAULT_PRESET = "default"

SHADE_PRESET: Tuple[float, ...] = (0.9, 0.8, 0.7, 0.6, 0.5, 0.4, 0.3, 0.2)
SHADE_SATURATION = 0.9
SHADE_STEP = 0.15

TINT_PRESET: Tuple[float, ...] = (0.3, 0.95, 0.5, 0.9, 0.7, 0.85, 0.9, 0.8)
TINT_SATURATION_BASE = 0.9
TINT_STEP = 0.15

GOLDEN_ANGLE = 137.5

# spring, summer, fall, winter
SEASON_HUES: Tuple[int, ...] = (90, 60, 30, 210)
SEASON_SATURATION: Tuple[float, ...] = (0.55, 0.75, 0.85, 0.45)
SEASON_VALUE: Tuple[float, ...] = (0.95, 1.0, 0.75, 0.65)
SEASON_SHIFT_SECTOR = 30
SEASON_SHIFT_STEP = 10


def preset_from_sv(s: float, v: float) -> Preset:
    """Build the four variation pairs for a color with saturation ``s`` and value ``v``."""
    return (s, v, s, v * 0.7, s * 0.25, 1.0, s * 0.5, 1.0)


__all__ = [
    "CALIBRATION_WHEEL",
    "CALIBRATION_KEYS",
    "CALIBRATION_STEP",
    "CALIBRATION_SATURATION",
    "Preset",
    "PRESETS",
    "DEFAULT_PRESET",
    "SHADE_PRESET",
    "SHADE_SATURATION",
    "SHADE_STEP",
    "TINT_PRESET",
    "TINT_SATURATION_BASE",
    "TINT_STEP",
    "GOLDEN_ANGLE",
    "SEASON_HUES",
    "SEASON_SATURATION",
    "SEASON_VALUE",
    "SEASON_SHIFT_SECTOR",
    "SEASON_SHIFT_STEP",
    "preset_from_sv",
]
