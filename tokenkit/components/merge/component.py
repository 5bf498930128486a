"""
Merge component - combines the base tree with a platform overlay.

This is the only place that branches on the platform identifier. Everything
downstream consumes the already-resolved, platform-agnostic tree.

Merge policy:
- both sides mappings -> merged recursively
- key on one side only -> that side's value, cloned
- otherwise -> overlay wins, including its shape (a leaf replaces a subtree
  and a subtree replaces a leaf)
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

from tokenkit.core.entities import (
    KNOWN_CATEGORIES,
    PLATFORM_KEY,
    Platform,
    TokenTree,
    is_known_platform,
    platform_id,
)

from .models import (
    OverlayLoadError,
    OverlayWarning,
    ResolveTokensInput,
    ResolveTokensOutput,
)
from .ports import OverlaySourcePort

logger = logging.getLogger(__name__)


# --- Merge ---


def clone_tree(value: Any) -> Any:
    """Copy a token value so the result shares no mutable node with the input."""
    if isinstance(value, Mapping):
        return {key: clone_tree(child) for key, child in value.items()}
    return copy.deepcopy(value)


def deep_merge(base: Any, overlay: Any) -> Any:
    """
    Deep-merge `overlay` onto `base`, returning a fresh tree.

    Neither input is modified and no node of the result is shared with
    them. Non-mapping inputs are not an error: the overlay's shape wins.
    """
    if not isinstance(overlay, Mapping):
        return clone_tree(overlay)
    if not isinstance(base, Mapping):
        return clone_tree(overlay)

    merged: dict[str, Any] = {}
    for key, value in base.items():
        if key in overlay:
            merged[key] = deep_merge(value, overlay[key])
        else:
            merged[key] = clone_tree(value)
    for key, value in overlay.items():
        if key not in base:
            merged[key] = clone_tree(value)
    return merged


# --- Overlay loading ---


def _default_source() -> OverlaySourcePort:
    from tokenkit.adapters.bundled import BundledOverlaySource

    return BundledOverlaySource()


def _default_base() -> TokenTree:
    from tokenkit.tokens.base import TOKENS

    return TOKENS


def _load_overlay(
    platform: str,
    source: OverlaySourcePort,
) -> tuple[TokenTree, list[OverlayWarning]]:
    if not is_known_platform(platform):
        logger.debug(f"No overlay for platform '{platform}'; using base tokens only")
        return {}, []

    try:
        overlay = source.load(platform)
    except (OverlayLoadError, ImportError, OSError, ValueError) as e:
        logger.warning(f"Failed to load platform tokens for '{platform}': {e}")
        return {}, [
            OverlayWarning(
                platform=platform,
                code="overlay_unavailable",
                message=str(e),
            )
        ]

    if not isinstance(overlay, Mapping):
        logger.warning(
            f"Overlay for '{platform}' is {type(overlay).__name__}, not a mapping; ignoring"
        )
        return {}, [
            OverlayWarning(
                platform=platform,
                code="overlay_malformed",
                message=f"Overlay must be a mapping, got {type(overlay).__name__}",
            )
        ]

    return overlay, []


def _strip_reserved(tree: TokenTree, label: str) -> TokenTree:
    if PLATFORM_KEY not in tree:
        return tree
    logger.warning(f"Ignoring reserved key '{PLATFORM_KEY}' found in {label} tokens")
    return {key: value for key, value in tree.items() if key != PLATFORM_KEY}


# --- Component Entry Points ---


def run(
    inp: ResolveTokensInput,
    *,
    base: TokenTree | None = None,
    source: OverlaySourcePort | None = None,
) -> ResolveTokensOutput:
    """
    Resolve the token tree for one platform.

    Args:
        inp: Input naming the active platform.
        base: Base token tree (defaults to the bundled base set).
        source: Overlay source port (defaults to the bundled overlays).

    Returns:
        ResolveTokensOutput with a fresh tree tagged with `_platform` and any
        non-fatal warnings. Overlay failures degrade to base-only values.
    """
    if base is None:
        base = _default_base()
    if source is None:
        source = _default_source()

    platform = platform_id(inp.platform)
    overlay, warnings = _load_overlay(platform, source)

    unknown = sorted(
        str(key) for key in overlay if key not in KNOWN_CATEGORIES and key != PLATFORM_KEY
    )
    if unknown:
        logger.debug(f"Overlay '{platform}' adds uncategorized keys: {unknown}")

    tokens = deep_merge(
        _strip_reserved(base, "base"),
        _strip_reserved(overlay, platform),
    )
    tokens[PLATFORM_KEY] = platform

    logger.debug(f"Resolved tokens for platform '{platform}'")
    return ResolveTokensOutput(tokens=tokens, warnings=warnings)


def resolve_tokens(
    platform: str | Platform,
    *,
    base: TokenTree | None = None,
    source: OverlaySourcePort | None = None,
) -> dict[str, Any]:
    """Resolve and return only the merged tree for `platform`."""
    return run(ResolveTokensInput(platform=platform), base=base, source=source).tokens
