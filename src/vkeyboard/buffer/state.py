"""Cursor and selection state for a single-line text buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

Cursor = int  # offset into the buffer text
Selection = Tuple[Cursor, Cursor]  # half-open [start, end)


@dataclass(slots=True)
class BufferState:
    """Mutable cursor + selection info for one buffer."""

    cursor: Cursor = 0
    selection: Optional[Selection] = None

    def set_cursor(self, offset: Cursor) -> None:
        self.cursor = offset

    def clear_selection(self) -> None:
        self.selection = None

    def set_selection(self, start: Cursor, end: Cursor) -> None:
        self.selection = (start, end)
