"""
tokenkit - cross-platform design-token resolution for mobile UI toolkits.

Merges the base token tree with the active platform's overlay and exposes
path lookups and typed getters over the result.
"""

from tokenkit.components.accessors import TextStyle, TokenAccessor, TypographyOptions
from tokenkit.components.merge import deep_merge, resolve_tokens
from tokenkit.components.resolver import resolve_path
from tokenkit.context import TokenContext
from tokenkit.core.entities import Platform, TokenCategory

__version__ = "1.0.0"

__all__ = [
    "Platform",
    "TokenCategory",
    "TokenContext",
    "TokenAccessor",
    "TextStyle",
    "TypographyOptions",
    "deep_merge",
    "resolve_path",
    "resolve_tokens",
]
