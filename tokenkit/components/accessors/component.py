"""
Accessors component - typed getters over one resolved token tree.

Every getter is a pure read. Unknown variants, levels, material types and
component names degrade to documented fallbacks instead of raising; a
missing token should render plainly, not break rendering.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from tokenkit.components.resolver import TokenPath, resolve_path
from tokenkit.core.entities import PLATFORM_KEY, TokenTree

from .models import TextStyle, TypographyOptions

DEFAULT_FONT_FAMILY = "System"
DEFAULT_FONT_SIZE = 16
DEFAULT_WEIGHT = "regular"
DEFAULT_TEXT_COLOR = "#000000"
LINE_HEIGHT_RATIO = 1.5
DEFAULT_TIMING_MS = 300

_MISSING = object()


def _mapping_or_empty(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _as_number(value: Any) -> int | float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return None
        if not math.isfinite(number):
            return None
        return int(number) if number.is_integer() else number
    return None


def _first_number(*values: Any, default: int | float) -> int | float:
    """First value usable as a number; numeric strings are coerced, anything else skipped."""
    for value in values:
        number = _as_number(value)
        if number is not None:
            return number
    return default


def _first_text(*values: Any, default: str) -> str:
    for value in values:
        if isinstance(value, str) and value:
            return value
    return default


class TokenAccessor:
    """
    Read-only facade over a resolved token tree.

    Built once per resolution (see TokenContext) and shared by every
    consumer inside that rendering session. Returned subtrees are the
    resolved tree's own nodes; callers must treat them as read-only.
    """

    def __init__(self, tokens: TokenTree) -> None:
        self._tokens = tokens

    @property
    def tokens(self) -> TokenTree:
        return self._tokens

    @property
    def platform(self) -> str | None:
        return self._tokens.get(PLATFORM_KEY)

    def resolve_token(self, path: TokenPath | None, fallback: Any = None) -> Any:
        """Look up `path` in the resolved tree, returning `fallback` if absent."""
        return resolve_path(self._tokens, path, fallback)

    def _lookup(self, *paths: tuple[str, ...], default: Any) -> Any:
        for path in paths:
            value = resolve_path(self._tokens, path, _MISSING)
            if value is not _MISSING and value is not None:
                return value
        return default

    # --- Typography ---

    def get_typography(
        self,
        variant: str,
        options: TypographyOptions | Mapping[str, Any] | None = None,
    ) -> TextStyle:
        """
        Flatten a typography variant into a TextStyle.

        Args:
            variant: Style name under `typography.styles` (unknown names use
                the `default` style).
            options: Optional overrides for weight, size, color and italic.

        Returns:
            TextStyle with the weight mapped through
            `typography.fontWeightMapping` and tracking taken from
            `typography.scalingParameters`.
        """
        if options is None:
            opts = TypographyOptions()
        elif isinstance(options, TypographyOptions):
            opts = options
        else:
            opts = TypographyOptions.model_validate(dict(options))

        style = _mapping_or_empty(
            self._lookup(
                ("typography", "styles", variant),
                ("typography", "styles", "default"),
                default={},
            )
        )
        scaling = _mapping_or_empty(
            self.resolve_token(("typography", "scalingParameters", variant), {})
        )
        weight_map = _mapping_or_empty(
            self.resolve_token(("typography", "fontWeightMapping"), {})
        )

        style_weight = style.get("fontWeight")
        if isinstance(style_weight, (int, float)) and not isinstance(style_weight, bool):
            style_weight = str(style_weight)
        weight_key = _first_text(opts.weight, style_weight, default=DEFAULT_WEIGHT)
        mapped_weight = weight_map.get(weight_key)
        size = _first_number(opts.size, style.get("fontSize"), default=DEFAULT_FONT_SIZE)

        return TextStyle(
            font_family=_first_text(
                self.resolve_token(("typography", "fontFamily")),
                default=DEFAULT_FONT_FAMILY,
            ),
            font_size=size,
            font_weight=str(mapped_weight if mapped_weight is not None else weight_key),
            letter_spacing=_first_number(scaling.get("tracking"), default=0),
            line_height=_first_number(
                style.get("lineHeight"), default=size * LINE_HEIGHT_RATIO
            ),
            color=_first_text(
                opts.color,
                style.get("color"),
                self.resolve_token(("colors", "text")),
                default=DEFAULT_TEXT_COLOR,
            ),
            font_style="italic" if opts.italic else "normal",
        )

    # --- Surfaces ---

    def get_elevation(self, level: str = "none") -> Mapping[str, Any]:
        """Shadow/elevation props for `level`; unknown levels fall back to `none`."""
        return self._lookup(("elevation", level), ("elevation", "none"), default={})

    def get_material(self, material_type: str = "none") -> Mapping[str, Any]:
        """Blur/overlay treatment; an empty mapping means no material effect."""
        return self._lookup(("materials", material_type), default={})

    def get_component_tokens(self, name: str) -> Mapping[str, Any]:
        return self._lookup(("components", name), default={})

    # --- Motion ---

    def get_spring(self, preset: str = "default") -> Mapping[str, Any]:
        return self._lookup(
            ("motion", "spring", preset),
            ("motion", "spring", "default"),
            default={},
        )

    def get_timing(self, preset: str = "standard") -> int | float:
        """Duration in milliseconds for a timing preset."""
        return self._lookup(
            ("motion", "timing", preset),
            ("motion", "timing", "standard"),
            default=DEFAULT_TIMING_MS,
        )
