"""
Accessors component - typed getters (typography, elevation, materials,
component groups, motion) over a resolved token tree.
"""

from .component import (
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    DEFAULT_TEXT_COLOR,
    DEFAULT_TIMING_MS,
    TokenAccessor,
)
from .models import TextStyle, TypographyOptions

__all__ = [
    "TokenAccessor",
    "TextStyle",
    "TypographyOptions",
    "DEFAULT_FONT_FAMILY",
    "DEFAULT_FONT_SIZE",
    "DEFAULT_TEXT_COLOR",
    "DEFAULT_TIMING_MS",
]
