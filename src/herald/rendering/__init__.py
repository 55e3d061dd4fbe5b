"""Public API surface for herald.rendering."""
__all__ = [
    "template_engine",
]
