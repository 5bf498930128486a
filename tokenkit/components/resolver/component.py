"""
Resolver component - dotted-path lookup over nested token trees.

Pure functions only. Lookups never raise: any missing or non-indexable
segment yields the caller's fallback.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

TokenPath = str | Sequence[str]

_MISSING = object()


def split_path(path: TokenPath | None) -> tuple[str, ...]:
    """
    Normalize a path into a tuple of segments.

    Args:
        path: Dotted string ("colors.primary"), sequence of keys, or None.

    Returns:
        Tuple of segments; empty for an empty or absent path.
    """
    if not path:
        return ()
    if isinstance(path, str):
        return tuple(path.split("."))
    return tuple(path)


def resolve_path(tree: Any, path: TokenPath | None, fallback: Any = None) -> Any:
    """
    Look up a value in a nested token tree.

    An empty or absent path returns the tree itself. Otherwise the tree is
    walked one segment at a time; if a node is missing, None, or not a
    mapping while segments remain, the fallback is returned. The terminal
    value is returned verbatim (leaf or subtree, not copied).

    Args:
        tree: Token tree (any mapping) to search.
        path: Dotted string or sequence of keys.
        fallback: Value returned when the path does not resolve.

    Returns:
        The value at `path`, or `fallback`.
    """
    segments = split_path(path)
    if not segments:
        return tree

    current: Any = tree
    for segment in segments:
        if not isinstance(current, Mapping):
            return fallback
        current = current.get(segment, _MISSING)
        if current is _MISSING:
            return fallback

    return current


def run(tree: Any, path: TokenPath | None, fallback: Any = None) -> Any:
    """Component entry point; alias of `resolve_path`."""
    return resolve_path(tree, path, fallback)
