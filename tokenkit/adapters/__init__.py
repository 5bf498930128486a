"""Overlay source adapters implementing OverlaySourcePort."""

from tokenkit.adapters.bundled import BundledOverlaySource
from tokenkit.adapters.yaml_overlays import YamlOverlaySource

__all__ = ["BundledOverlaySource", "YamlOverlaySource"]
