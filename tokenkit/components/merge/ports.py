"""
Merge component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from tokenkit.core.entities import TokenTree


class OverlaySourcePort(Protocol):
    """Supplies the partial token tree for a platform."""

    def load(self, platform: str) -> TokenTree:
        """
        Load the overlay for `platform`.

        Returns an empty mapping for platforms without an overlay.
        Raises OverlayLoadError when a known overlay cannot be read.
        """
        ...
