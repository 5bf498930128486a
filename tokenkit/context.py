"""
Token resolution context.

Wires configuration and an overlay source into one resolved tree and the
accessor that reads it. Callers hold the context for as long as the platform
stays the same.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from tokenkit.adapters.bundled import BundledOverlaySource
from tokenkit.adapters.yaml_overlays import YamlOverlaySource
from tokenkit.components.accessors import TokenAccessor
from tokenkit.components.merge import (
    OverlaySourcePort,
    OverlayWarning,
    ResolveTokensInput,
    run,
)
from tokenkit.config import TokenConfig, load_config
from tokenkit.core.entities import Platform, platform_id

logger = logging.getLogger(__name__)


def source_from_config(config: TokenConfig) -> OverlaySourcePort:
    if config.overlay_dir is not None:
        return YamlOverlaySource(config.overlay_dir)
    return BundledOverlaySource()


@dataclass
class TokenContext:
    """
    One token resolution, threaded explicitly through a rendering session.

    The accessor is built on first use and reused for the lifetime of the
    context. A context never changes platform; use `for_platform` to get a
    freshly resolved one.
    """

    platform: str
    tokens: dict[str, Any]
    source: OverlaySourcePort
    warnings: list[OverlayWarning] = field(default_factory=list)
    _accessor: TokenAccessor | None = field(default=None, init=False, repr=False)

    @classmethod
    def create(
        cls,
        platform: str | Platform | None = None,
        *,
        config: TokenConfig | None = None,
        source: OverlaySourcePort | None = None,
    ) -> TokenContext:
        if platform is None or source is None:
            if config is None:
                config = load_config()
            if platform is None:
                platform = config.platform
            if source is None:
                source = source_from_config(config)

        platform = platform_id(platform)
        result = run(ResolveTokensInput(platform=platform), source=source)
        if result.warnings:
            logger.info(
                f"Token context for '{platform}' created with "
                f"{len(result.warnings)} warning(s)"
            )
        return cls(
            platform=platform,
            tokens=result.tokens,
            source=source,
            warnings=list(result.warnings),
        )

    @property
    def accessor(self) -> TokenAccessor:
        if self._accessor is None:
            self._accessor = TokenAccessor(self.tokens)
        return self._accessor

    def for_platform(self, platform: str | Platform) -> TokenContext:
        """Return this context if `platform` matches, else a new resolution."""
        platform = platform_id(platform)
        if platform == self.platform:
            return self
        return TokenContext.create(platform, source=self.source)
