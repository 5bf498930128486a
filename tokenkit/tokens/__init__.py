"""
Static token data.

`base` holds the complete default tree. Each platform overlay module is named
after its platform identifier and exposes a partial tree as `TOKENS`.
"""

from tokenkit.tokens.base import TOKENS as BASE_TOKENS

__all__ = ["BASE_TOKENS"]
