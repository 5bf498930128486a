"""Configuration for token resolution."""

from tokenkit.config.loader import load_config
from tokenkit.config.models import TokenConfig

__all__ = ["TokenConfig", "load_config"]
