"""
Token resolution components.

- resolver: dotted-path lookup with fallback
- merge: base + platform overlay deep merge
- accessors: typed getters over a resolved tree
"""
