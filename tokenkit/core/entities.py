"""
Token domain entities for tokenkit.

Token trees are plain nested mappings. Static token data (base and platform
overlays) is frozen at import time so resolutions can never write through
into it; resolved trees are fresh dicts owned by whoever asked for them.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

TokenTree = Mapping[str, Any]
"""Nested mapping of token names to leaf values or further subtrees."""

PLATFORM_KEY = "_platform"
"""Reserved top-level key carrying the platform a tree was resolved for."""

TOKEN_SCHEMA_VERSION = "1.0"


class Platform(str, Enum):
    """Platforms with a bundled overlay."""

    IOS = "ios"
    ANDROID = "android"


class TokenCategory(str, Enum):
    """Closed set of top-level token categories."""

    COLORS = "colors"
    TYPOGRAPHY = "typography"
    SPACING = "spacing"
    LAYOUT = "layout"
    ELEVATION = "elevation"
    MATERIALS = "materials"
    COMPONENTS = "components"
    MOTION = "motion"


KNOWN_PLATFORMS = frozenset(p.value for p in Platform)
KNOWN_CATEGORIES = frozenset(c.value for c in TokenCategory)


def platform_id(platform: str | Platform) -> str:
    """Plain identifier for `platform`, unwrapping `Platform` members."""
    if isinstance(platform, Enum):
        return str(platform.value)
    return str(platform)


def is_known_platform(platform: str | None) -> bool:
    return platform in KNOWN_PLATFORMS


def freeze(tree: Mapping[str, Any]) -> Mapping[str, Any]:
    """
    Recursively wrap a token tree in read-only mapping proxies.

    Leaves are kept as-is; only mapping nodes are wrapped.
    """
    return MappingProxyType(
        {
            key: freeze(value) if isinstance(value, Mapping) else value
            for key, value in tree.items()
        }
    )
