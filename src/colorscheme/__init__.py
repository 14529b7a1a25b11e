"""Public entrypoint for the colorscheme palette library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``colorscheme`` instead of
individual submodules.
"""

from .errors import InvalidArgument, InvalidState
from .harmony import SCHEME_NAMES, SchemeType
from .hue import HueTone
from .noise import string_hash, value_noise_2d
from .scheme import ColorScheme
from .tables import PRESETS
from .ui_helpers import (
    EXPORT_FORMAT_OPTIONS,
    SCHEME_OPTIONS,
    VARIATION_OPTIONS,
    ExportFormat,
    export_colors,
)

__all__ = [
    "ColorScheme",
    "HueTone",
    "SchemeType",
    "SCHEME_NAMES",
    "PRESETS",
    "InvalidArgument",
    "InvalidState",
    "string_hash",
    "value_noise_2d",
    "ExportFormat",
    "export_colors",
    "SCHEME_OPTIONS",
    "VARIATION_OPTIONS",
    "EXPORT_FORMAT_OPTIONS",
]
