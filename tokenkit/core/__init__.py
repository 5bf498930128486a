"""Core token types shared by every component."""

from tokenkit.core.entities import (
    KNOWN_CATEGORIES,
    KNOWN_PLATFORMS,
    PLATFORM_KEY,
    TOKEN_SCHEMA_VERSION,
    Platform,
    TokenCategory,
    TokenTree,
    freeze,
    is_known_platform,
    platform_id,
)

__all__ = [
    "KNOWN_CATEGORIES",
    "KNOWN_PLATFORMS",
    "PLATFORM_KEY",
    "TOKEN_SCHEMA_VERSION",
    "Platform",
    "TokenCategory",
    "TokenTree",
    "freeze",
    "is_known_platform",
    "platform_id",
]
