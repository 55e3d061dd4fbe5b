"""Public API surface for herald.processing."""
__all__ = [
    "required",
    "scanner",
    "string_interpolator",
    "trie",
]
