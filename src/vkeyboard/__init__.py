"""On-screen keyboard with a UI-agnostic text editing engine."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "config",
    "engine",
    "layout",
    "runtime",
]

__version__ = "0.1.0"
