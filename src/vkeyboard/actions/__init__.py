"""Edit action variants dispatched by the engine."""

from .core import (
    CURSOR_LEFT,
    CURSOR_RIGHT,
    Clear,
    Delete,
    EditAction,
    Insert,
    MoveCursor,
    Submit,
    ToggleCaps,
)

__all__ = [
    "Insert",
    "Delete",
    "MoveCursor",
    "ToggleCaps",
    "Submit",
    "Clear",
    "EditAction",
    "CURSOR_LEFT",
    "CURSOR_RIGHT",
]
