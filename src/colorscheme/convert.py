from __future__ import annotations

"""Color conversion helpers for RGB, HSV and hex strings.

Scalar helpers serve the per-color code paths (hex seeding, rendering a
single tonal variation). The global saturation post-pass works on the
whole rendered palette at once and is vectorised with numpy.
"""

import math
import re
from typing import Sequence, Tuple

import numpy as np

from .errors import InvalidArgument


RGB = Tuple[float, float, float]
HSV = Tuple[float, float, float]

WEB_SAFE_STEP = 51

_HEX_RE = re.compile(r"[0-9a-fA-F]{6}")


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves away from -inf (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(x + 0.5))


def clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else hi if x > hi else x


def web_safe(channel: int) -> int:
    """Snap an 8-bit channel to the nearest multiple of 51."""
    return round_half_up(channel / WEB_SAFE_STEP) * WEB_SAFE_STEP


def parse_hex(hex_str: str) -> Tuple[int, int, int]:
    """Parse ``RRGGBB`` (case-insensitive, no prefix) into 8-bit channels.

    Raises
    ------
    InvalidArgument
        If ``hex_str`` is not a string of exactly six hex digits.
    """
    if not isinstance(hex_str, str) or _HEX_RE.fullmatch(hex_str) is None:
        raise InvalidArgument(f"hex color must be in the form RRGGBB, got {hex_str!r}")
    return int(hex_str[0:2], 16), int(hex_str[2:4], 16), int(hex_str[4:6], 16)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format 8-bit channels as a lowercase ``rrggbb`` string."""
    return f"{r:02x}{g:02x}{b:02x}"


def rgb_to_hsv(r: float, g: float, b: float) -> HSV:
    """Convert RGB in [0, 1] to (h, s, v) with h in [0, 360)."""
    mx = max(r, g, b)
    mn = min(r, g, b)
    d = mx - mn
    v = mx
    if d <= 0:
        return 0.0, 0.0, v
    s = d / mx
    if r == mx:
        h = (g - b) / d
    elif g == mx:
        h = 2.0 + (b - r) / d
    else:
        h = 4.0 + (r - g) / d
    return (h * 60.0) % 360.0, s, v


def hex_to_rgb01(hex_str: str) -> RGB:
    r, g, b = parse_hex(hex_str)
    return r / 255.0, g / 255.0, b / 255.0


def rgb_to_hsv_array(rgb: np.ndarray) -> np.ndarray:
    """Vectorised :func:`rgb_to_hsv` over an ``(N, 3)`` array in [0, 1]."""
    rgb = np.asarray(rgb, dtype=np.float64)
    r, g, b = rgb[:, 0], rgb[:, 1], rgb[:, 2]
    mx = rgb.max(axis=1)
    mn = rgb.min(axis=1)
    d = mx - mn
    chromatic = d > 0
    safe_d = np.where(chromatic, d, 1.0)
    safe_mx = np.where(mx > 0, mx, 1.0)

    h = np.where(
        r == mx,
        (g - b) / safe_d,
        np.where(g == mx, 2.0 + (b - r) / safe_d, 4.0 + (r - g) / safe_d),
    )
    h = np.where(chromatic, np.mod(h * 60.0, 360.0), 0.0)
    s = np.where(chromatic, d / safe_mx, 0.0)
    return np.stack([h, s, mx], axis=1)


def hsv_to_rgb_array(hsv: np.ndarray) -> np.ndarray:
    """Vectorised HSV -> RGB (sector interpolation) over an ``(N, 3)`` array."""
    hsv = np.asarray(hsv, dtype=np.float64)
    h, s, v = hsv[:, 0], hsv[:, 1], hsv[:, 2]
    c = v * s
    x = c * (1.0 - np.abs(np.mod(h / 60.0, 2.0) - 1.0))
    m = v - c
    zero = np.zeros_like(c)
    sector = np.clip(np.floor(h / 60.0), 0, 5).astype(np.int64)

    r1 = np.choose(sector, [c, x, zero, zero, x, c])
    g1 = np.choose(sector, [x, c, c, x, zero, zero])
    b1 = np.choose(sector, [zero, zero, x, c, c, x])
    return np.stack([r1 + m, g1 + m, b1 + m], axis=1)


def adjust_saturation(hex_colors: Sequence[str], amount: float) -> list[str]:
    """Shift the HSV saturation of every color by ``amount`` (clamped to [0, 1]).

    Hue and value are preserved; the result is re-encoded as lowercase hex.
    """
    if not hex_colors:
        return []
    rgb = np.array([hex_to_rgb01(h) for h in hex_colors], dtype=np.float64)
    hsv = rgb_to_hsv_array(rgb)
    hsv[:, 1] = np.clip(hsv[:, 1] + amount, 0.0, 1.0)
    out = hsv_to_rgb_array(hsv)
    channels = np.clip(np.floor(out * 255.0 + 0.5), 0, 255).astype(np.int64)
    return [rgb_to_hex(int(r), int(g), int(b)) for r, g, b in channels]


__all__ = [
    "RGB",
    "HSV",
    "WEB_SAFE_STEP",
    "round_half_up",
    "clamp",
    "web_safe",
    "parse_hex",
    "rgb_to_hex",
    "rgb_to_hsv",
    "hex_to_rgb01",
    "rgb_to_hsv_array",
    "hsv_to_rgb_array",
    "adjust_saturation",
]
