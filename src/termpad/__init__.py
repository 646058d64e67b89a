"""Terminal text editor with a flat-offset buffer and differential rendering."""

__all__ = [
    "adapters",
    "buffer",
    "config",
    "render",
    "runtime",
    "session",
]

__version__ = "0.1.0"
