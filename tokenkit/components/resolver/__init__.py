"""
Resolver component - path-based token lookup with fallback.
"""

from .component import TokenPath, resolve_path, run, split_path

__all__ = [
    "run",
    "resolve_path",
    "split_path",
    "TokenPath",
]
