"""
Merge component - platform token resolution.

Deep-merges the base token tree with the overlay of the active platform and
tags the result with `_platform`.
"""

from .models import (
    OverlayLoadError,
    OverlayWarning,
    ResolveTokensInput,
    ResolveTokensOutput,
)
from .component import clone_tree, deep_merge, resolve_tokens, run
from .ports import OverlaySourcePort

__all__ = [
    # Component entry points
    "run",
    "resolve_tokens",
    # Functions
    "deep_merge",
    "clone_tree",
    # Models
    "ResolveTokensInput",
    "ResolveTokensOutput",
    "OverlayWarning",
    "OverlayLoadError",
    # Ports
    "OverlaySourcePort",
]
