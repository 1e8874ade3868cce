"""Buffer, cursor, and selection primitives."""

from .buffer import Buffer, Transaction
from .state import BufferState, Cursor, Selection
from .sync import BufferMirror
from .validation import clamp_cursor, normalize_selection

__all__ = [
    "Buffer",
    "Transaction",
    "BufferState",
    "Cursor",
    "Selection",
    "BufferMirror",
    "clamp_cursor",
    "normalize_selection",
]
