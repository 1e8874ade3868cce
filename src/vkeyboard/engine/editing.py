"""Editing engine: the state machine behind every keyboard gesture."""

from __future__ import annotations

from typing import Dict, Optional

from vkeyboard.actions import (
    Clear,
    Delete,
    EditAction,
    Insert,
    MoveCursor,
    Submit,
    ToggleCaps,
)
from vkeyboard.buffer import Buffer, BufferMirror, Cursor, Selection
from vkeyboard.config import KeyboardConfig
from vkeyboard.layout import KeyBinding, Layout, bind_layout, load_default_layout
from vkeyboard.runtime import telemetry

from .base import EditorBus, EditResult
from .caps import CapsState, caps_rebindings


class EditingEngine:
    """Owns the buffer, cursor, selection, and caps state of one keyboard.

    Every operation returns an ``EditResult``. Positions are clamped rather
    than rejected, and an active selection always takes precedence over the
    cursor for inserts and deletes.
    """

    def __init__(
        self,
        layout: Optional[Layout] = None,
        *,
        buffer: Optional[Buffer] = None,
        caps: bool = True,
        bus: Optional[EditorBus] = None,
    ) -> None:
        self.layout = layout if layout is not None else load_default_layout()
        self.buffer = buffer if buffer is not None else Buffer()
        self.caps = CapsState(enabled=caps)
        self.bus = bus if bus is not None else EditorBus()

    @classmethod
    def from_config(
        cls, config: KeyboardConfig, *, layout: Optional[Layout] = None
    ) -> "EditingEngine":
        return cls(
            layout,
            buffer=Buffer.from_text(config.initial_text),
            caps=config.caps,
        )

    @property
    def text(self) -> str:
        return self.buffer.text

    @property
    def cursor(self) -> Cursor:
        return self.buffer.state.cursor

    @property
    def selection(self) -> Optional[Selection]:
        return self.buffer.state.selection

    def snapshot(self, status: str = "ok") -> EditResult:
        return EditResult(
            text=self.buffer.text,
            cursor=self.buffer.state.cursor,
            selection=self.buffer.state.selection,
            caps=self.caps.enabled,
            status=status,
        )

    def mirror(self) -> BufferMirror:
        caps = "on" if self.caps.enabled else "off"
        return self.buffer.mirror(attributes={"caps": caps})

    def bindings(self) -> Dict[str, KeyBinding]:
        return bind_layout(self.layout, self.caps.enabled)

    def insert(self, character: str) -> EditResult:
        start, end = self._target_span()
        self.buffer.replace_range(start, end, character, label="insert")
        return self._changed("insert")

    def delete(self) -> EditResult:
        if self.buffer.state.selection is not None:
            start, end = self.buffer.state.selection
        else:
            cursor = self.buffer.state.cursor
            if cursor == 0:
                self.buffer.state.clear_selection()
                return self.snapshot("noop")
            start, end = cursor - 1, cursor
        self.buffer.replace_range(start, end, "", label="delete")
        return self._changed("delete")

    def move_cursor(self, delta: int) -> EditResult:
        self.buffer.place(self.buffer.state.cursor + delta)
        return self.snapshot("move_cursor")

    def set_focus(
        self, position: Cursor, selection: Optional[Selection] = None
    ) -> EditResult:
        """Adopt the caret and selection reported by the host field."""

        self.buffer.place(position, selection)
        return self.snapshot("focus")

    def toggle_caps(self) -> EditResult:
        enabled = self.caps.toggle()
        rebinds = caps_rebindings(self.layout, enabled)
        telemetry.record_event(
            "caps.toggle",
            data={"caps": enabled, "rebinds": len(rebinds)},
            logger_name="vkeyboard.engine",
        )
        self.bus.emit("caps.toggle", enabled)
        result = self.snapshot("toggle_caps")
        result.rebinds = rebinds
        return result

    def submit(self) -> EditResult:
        self.buffer.state.clear_selection()
        text = self.buffer.text
        telemetry.record_event(
            "edit.submit",
            data={"buffer": self.buffer.name, "length": len(text)},
            logger_name="vkeyboard.engine",
        )
        self.bus.emit("edit.submit", text)
        result = self.snapshot("submit")
        result.submitted = text
        return result

    def clear(self) -> EditResult:
        self.buffer.replace_range(0, len(self.buffer.text), "", label="clear")
        return self._changed("clear")

    def apply(self, action: EditAction) -> EditResult:
        """Run the operation named by ``action``."""

        if isinstance(action, Insert):
            return self.insert(action.text)
        if isinstance(action, Delete):
            return self.delete()
        if isinstance(action, MoveCursor):
            return self.move_cursor(action.delta)
        if isinstance(action, ToggleCaps):
            return self.toggle_caps()
        if isinstance(action, Submit):
            return self.submit()
        if isinstance(action, Clear):
            return self.clear()
        raise TypeError(f"Unsupported edit action {action!r}")

    def _target_span(self) -> tuple[Cursor, Cursor]:
        if self.buffer.state.selection is not None:
            return self.buffer.state.selection
        cursor = self.buffer.state.cursor
        return cursor, cursor

    def _changed(self, status: str) -> EditResult:
        result = self.snapshot(status)
        self.bus.emit("edit.change", result)
        return result


__all__ = ["EditingEngine"]
