"""
Bundled overlay source.

Loads platform overlays from the `tokenkit.tokens.<platform>` modules that
ship with the package. Satisfies OverlaySourcePort.
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Mapping

from tokenkit.components.merge.models import OverlayLoadError
from tokenkit.core.entities import TokenTree, is_known_platform, platform_id

logger = logging.getLogger(__name__)

TOKENS_PACKAGE = "tokenkit.tokens"


class BundledOverlaySource:
    """Overlay source backed by the packaged token modules."""

    def __init__(self, package: str = TOKENS_PACKAGE) -> None:
        self._package = package

    def load(self, platform: str) -> TokenTree:
        platform = platform_id(platform)
        if not is_known_platform(platform):
            logger.debug(f"No bundled overlay for platform '{platform}'")
            return {}

        module_name = f"{self._package}.{platform}"
        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            raise OverlayLoadError(platform, f"cannot import {module_name}: {e}") from e

        tokens = getattr(module, "TOKENS", None)
        if not isinstance(tokens, Mapping):
            raise OverlayLoadError(platform, f"{module_name} defines no TOKENS mapping")
        return tokens
