"""Text buffer façade combining content, cursor state, and instrumentation."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import ContextManager, Optional

from vkeyboard.runtime import telemetry

from .state import BufferState, Cursor, Selection
from .sync import BufferMirror
from .validation import clamp_cursor, normalize_selection


class Buffer:
    """Single-line editable text with one cursor and an optional selection."""

    def __init__(
        self,
        *,
        name: str = "default",
        text: str = "",
        state: Optional[BufferState] = None,
    ) -> None:
        self.name = name
        self.text = text
        self.state = state if state is not None else BufferState()
        self.state.cursor = clamp_cursor(len(text), self.state.cursor)
        self.state.selection = normalize_selection(len(text), self.state.selection)

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "Buffer":
        buffer = cls(name=name, text=text)
        buffer.state.set_cursor(len(text))
        return buffer

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        return BufferMirror(
            text=self.text,
            cursor=self.state.cursor,
            selection=self.state.selection,
            attributes=dict(attributes or {}),
        )

    def place(self, cursor: Cursor, selection: Optional[Selection] = None) -> None:
        """Move the caret and selection without touching the text."""

        self.state.set_cursor(clamp_cursor(len(self.text), cursor))
        normalized = normalize_selection(len(self.text), selection)
        if normalized is None:
            self.state.clear_selection()
        else:
            self.state.set_selection(*normalized)

    def replace_range(
        self, start: Cursor, end: Cursor, text: str, *, label: str
    ) -> None:
        """Replace ``[start, end)`` with ``text`` and park the caret after it.

        Bounds are clamped and ordered first. The selection is always cleared.
        """

        length = len(self.text)
        start = clamp_cursor(length, start)
        end = clamp_cursor(length, end)
        if start > end:
            start, end = end, start

        with Transaction(self, label):
            self.text = self.text[:start] + text + self.text[end:]
            self.state.set_cursor(start + len(text))
            self.state.clear_selection()


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps one buffer mutation in a telemetry span."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.buffer.name, "cursor": self.buffer.state.cursor},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False
