from __future__ import annotations

"""Helper utilities for integrating colorscheme into external UIs.

This module exposes label/value pairs for schemes, variation presets and
export formats, and provides :func:`export_colors` to convert rendered
hex strings into the simple color lists UI code usually consumes.
"""

from enum import Enum
from typing import Dict, List, Sequence

from .convert import hex_to_rgb01, parse_hex, rgb_to_hex
from .errors import InvalidArgument
from .harmony import SchemeType


class ExportFormat(Enum):
    """Supported output formats for exported color lists."""

    HEX = "hex"
    HASH_HEX = "hash_hex"
    RGB_255 = "rgb_255"
    RGB_01 = "rgb_01"

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise InvalidArgument(f"Unknown export format: {value}")


# Label/value pairs for UI choices
SCHEME_OPTIONS: List[tuple[str, SchemeType]] = [
    ("Monochromatic", SchemeType.MONOCHROMATIC),
    ("Contrast", SchemeType.CONTRAST),
    ("Triade", SchemeType.TRIADE),
    ("Tetrade", SchemeType.TETRADE),
    ("Analogic", SchemeType.ANALOGIC),
    ("Split Complement", SchemeType.SPLIT_COMPLEMENT),
    ("Square", SchemeType.SQUARE),
    ("Golden Angle", SchemeType.PHI),
    ("Shades", SchemeType.SHADES),
    ("Tints", SchemeType.TINTS),
    ("Chaos", SchemeType.CHAOS),
    ("Seasons", SchemeType.SEASONS),
    ("Gradient", SchemeType.GRADIENT),
    ("Perlin", SchemeType.PERLIN),
]
VARIATION_OPTIONS: List[tuple[str, str]] = [
    ("Default", "default"),
    ("Pastel", "pastel"),
    ("Soft", "soft"),
    ("Light", "light"),
    ("Hard", "hard"),
    ("Pale", "pale"),
    ("Vibrant", "vibrant"),
    ("Muted", "muted"),
]
EXPORT_FORMAT_OPTIONS: List[tuple[str, ExportFormat]] = [
    ("HEX", ExportFormat.HEX),
    ("#HEX", ExportFormat.HASH_HEX),
    ("RGB (0-255)", ExportFormat.RGB_255),
    ("RGB (0-1)", ExportFormat.RGB_01),
]

SCHEME_LABEL_MAP: Dict[str, SchemeType] = {label: value for label, value in SCHEME_OPTIONS}
VARIATION_LABEL_MAP: Dict[str, str] = {label: value for label, value in VARIATION_OPTIONS}


def export_colors(colors: Sequence[str], fmt: ExportFormat | str) -> List[object]:
    """Convert rendered ``rrggbb`` strings to the desired format."""
    export_fmt = fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)
    if export_fmt == ExportFormat.HEX:
        return [rgb_to_hex(*parse_hex(c)) for c in colors]
    if export_fmt == ExportFormat.HASH_HEX:
        return [f"#{rgb_to_hex(*parse_hex(c))}" for c in colors]
    if export_fmt == ExportFormat.RGB_255:
        return [parse_hex(c) for c in colors]
    if export_fmt == ExportFormat.RGB_01:
        return [hex_to_rgb01(c) for c in colors]
    raise InvalidArgument(f"Unsupported export format: {fmt}")


__all__ = [
    "ExportFormat",
    "SCHEME_OPTIONS",
    "VARIATION_OPTIONS",
    "EXPORT_FORMAT_OPTIONS",
    "SCHEME_LABEL_MAP",
    "VARIATION_LABEL_MAP",
    "export_colors",
]
