"""
Merge component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from tokenkit.core.entities import PLATFORM_KEY, Platform


class OverlayLoadError(Exception):
    """Raised by an overlay source when a platform overlay cannot be loaded."""

    def __init__(self, platform: str, reason: str) -> None:
        super().__init__(f"Overlay for platform '{platform}' unavailable: {reason}")
        self.platform = platform
        self.reason = reason


@dataclass(frozen=True)
class OverlayWarning:
    """Non-fatal problem encountered while resolving tokens."""

    platform: str
    code: str
    message: str


@dataclass(frozen=True)
class ResolveTokensInput:
    """Input for resolving the token tree of one platform."""

    platform: str | Platform


@dataclass(frozen=True)
class ResolveTokensOutput:
    """Resolved tree plus any warnings raised while building it."""

    tokens: dict[str, Any]
    warnings: list[OverlayWarning] = field(default_factory=list)

    @property
    def platform(self) -> str:
        return self.tokens[PLATFORM_KEY]
